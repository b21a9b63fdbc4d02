"""
Color parsing and ramp helpers built on matplotlib.colors.

These helpers are plotting-backend agnostic: they return plain strings that
matplotlib and plotly both accept.
"""

from typing import Any, List, Sequence, Tuple

import matplotlib.colors as mcolors
import numpy as np

from .exceptions import ConfigError


def parse_color(color: Any) -> Tuple[float, float, float, float]:
    """Parse a color spec into an RGBA tuple in [0, 1]."""
    try:
        return mcolors.to_rgba(color)
    except (ValueError, TypeError) as exc:
        raise ConfigError(f"{color!r} is an invalid hex color") from exc


def to_hex_string(color: Any, keep_alpha: bool = False) -> str:
    """Convert any supported color to an uppercase `#RRGGBB[AA]` string."""
    try:
        return mcolors.to_hex(color, keep_alpha=keep_alpha).upper()
    except (ValueError, TypeError) as exc:
        raise ConfigError(f"{color!r} is an invalid hex color") from exc


def to_rgba_string(color: Any) -> str:
    """Convert any color to an `rgba(r,g,b,a)` string for Plotly."""
    r, g, b, a = parse_color(color)
    return f"rgba({int(round(r*255))},{int(round(g*255))},{int(round(b*255))},{a:g})"


def check_opacity(opacity: Any) -> float:
    try:
        value = float(opacity)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"opacity should be a number in [0, 1], got {opacity!r}") from exc
    if not 0.0 <= value <= 1.0:
        raise ConfigError(f"opacity should be a number in [0, 1], got {opacity!r}")
    return value


def ramp_colors(anchors: Sequence[str], n: int, opacity: float = 1.0) -> List[str]:
    """
    Sample `n` evenly spaced colors along a linear RGB ramp through `anchors`.

    Parameters
    ----------
    anchors : Sequence[str]
        Ordered anchor colors, first and last are the ramp endpoints.
    n : int
        Number of colors to return (>= 1).
    opacity : float
        Alpha applied to every output color. Colors carry an alpha byte
        (`#RRGGBBAA`) only when opacity is below 1.

    Returns
    -------
    List[str]
        `n` uppercase hex strings.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise ConfigError(f"n should be a positive integer, got {n!r}")
    if not anchors:
        raise ConfigError("Cannot ramp an empty palette")

    keep_alpha = opacity < 1.0
    if n == 1:
        return [to_hex_string(mcolors.to_rgba(anchors[0], alpha=opacity), keep_alpha)]

    anchors = list(anchors)
    if len(anchors) == 1:
        # from_list needs both endpoints
        anchors = anchors * 2

    cmap = mcolors.LinearSegmentedColormap.from_list("paletti_ramp", anchors, N=int(n))
    rgba = cmap(np.arange(int(n)), alpha=opacity)
    return [to_hex_string(c, keep_alpha) for c in rgba]


__all__ = [
    "parse_color",
    "to_hex_string",
    "to_rgba_string",
    "check_opacity",
    "ramp_colors",
]
