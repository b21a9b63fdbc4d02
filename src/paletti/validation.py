"""
Eager input checks for the palette and hex factories.

Every factory runs these when it is built, so misconfigured palettes fail
immediately instead of at render time.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Tuple

import numpy as np
import pandas as pd

from .color_utils import parse_color
from .exceptions import ConfigError


def _is_pair(item: Any) -> bool:
    return isinstance(item, (tuple, list)) and len(item) == 2


def as_color_list(values: Any) -> Any:
    """Turn a 1-D numpy array, pandas Series or Index into a list; pass anything else through."""
    if isinstance(values, (np.ndarray, pd.Series, pd.Index)):
        if values.ndim != 1:
            raise ConfigError(f"Expected a 1-D array of colors, got {values.ndim} dimensions")
        return list(values)
    return values


def validate_named_collection(x: Any) -> Dict[str, Any]:
    """
    Check that `x` is a non-empty collection whose elements all carry a
    unique, non-blank string name.

    `x` may be a mapping or a sequence of `(name, value)` pairs. Returns the
    elements as an insertion-ordered dict.
    """
    if isinstance(x, Mapping):
        items = list(x.items())
    elif isinstance(x, Sequence) and not isinstance(x, str):
        if not all(_is_pair(item) for item in x):
            raise ConfigError("All elements should have names")
        items = [tuple(item) for item in x]
    else:
        raise ConfigError(
            f"Expected a mapping or a sequence of (name, value) pairs, got {type(x).__name__}"
        )

    if not items:
        raise ConfigError("The palette collection is empty")

    n_blank = sum(
        1 for name, _ in items if not isinstance(name, str) or not name.strip()
    )
    if n_blank > 0:
        raise ConfigError(
            f"{n_blank} out of the {len(items)} elements in the palette list don't have names."
        )

    seen = set()
    duplicates = []
    for name, _ in items:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        raise ConfigError(f"Duplicate names: {', '.join(duplicates)}")

    return dict(items)


def validate_color(value: Any) -> None:
    """Fail with ConfigError if `value` is not a parseable color."""
    parse_color(value)


def validate_color_collection(values: Any) -> Tuple[str, ...]:
    """
    Validate every color of a palette, stopping at the first bad entry.

    Accepts a sequence of colors or a mapping of name -> color (whose values
    are checked). Returns the colors as a tuple, in order.
    """
    values = as_color_list(values)
    if isinstance(values, str):
        raise ConfigError(f"Expected a collection of colors, got the single string {values!r}")
    if isinstance(values, Mapping):
        labelled = [(repr(name), color) for name, color in values.items()]
    elif isinstance(values, Sequence):
        labelled = [(f"position {i}", color) for i, color in enumerate(values)]
    else:
        raise ConfigError(f"Expected a collection of colors, got {type(values).__name__}")

    if not labelled:
        raise ConfigError("The palette is empty")

    for label, color in labelled:
        try:
            validate_color(color)
        except ConfigError as exc:
            raise ConfigError(f"{color!r} at {label} is an invalid hex color") from exc
    return tuple(color for _, color in labelled)


def validate_color_mapping(x: Any) -> Dict[str, str]:
    """Validate a named color mapping: names first, then every color."""
    mapping = validate_named_collection(x)
    validate_color_collection(mapping)
    return mapping


__all__ = [
    "as_color_list",
    "validate_named_collection",
    "validate_color",
    "validate_color_collection",
    "validate_color_mapping",
]
