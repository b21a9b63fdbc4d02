"""
Configuration for scale construction.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScaleConfig:
    """Tunables shared by the scale builders."""
    # Resolution of the gradient handed to continuous scales
    continuous_steps: int = 256
    scale_name: str = "paletti"
    # Color for missing / null values
    na_value: str = "#7F7F7F"


def default_config() -> ScaleConfig:
    return ScaleConfig()
