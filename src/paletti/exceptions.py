"""
Exceptions raised by the palette, scale, and hex factories.
"""

from typing import Iterable, List


class PalettiError(Exception):
    """Base class for all paletti errors."""


class ConfigError(PalettiError, ValueError):
    """Malformed palette input, raised when a factory is built."""


class MissingNameError(PalettiError, LookupError):
    """One or more requested names are not present in the underlying mapping."""

    def __init__(self, missing: Iterable[str], what: str = "Names"):
        self.missing: List[str] = list(missing)
        super().__init__(f"{what} not present: {', '.join(self.missing)}")
