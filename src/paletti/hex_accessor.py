"""
Hex accessor factory.

    >>> company_hex = get_hex({"red": "#701B06", "blue": "#78A8D1"})
    >>> company_hex("blue", "red")
    ['#78A8D1', '#701B06']

    >>> masters_hex = get_hex({"milkmaid": {"blue": "#...", ...}, ...})
    >>> masters_hex("milkmaid", "blue")
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List

from .exceptions import ConfigError, MissingNameError
from .validation import validate_color_mapping, validate_named_collection

log = logging.getLogger(__name__)


def _pick(color_map: Dict[str, str], names: tuple) -> List[str]:
    missing = [str(n) for n in names if not isinstance(n, str) or n not in color_map]
    if missing:
        raise MissingNameError(list(dict.fromkeys(missing)))
    return [color_map[n] for n in names]


def get_hex(color_map: Any) -> Callable[..., List[str]]:
    """
    Create a function that returns hex codes by color name.

    Parameters
    ----------
    color_map : Mapping
        Either a flat name -> color mapping, or a mapping from palette name
        to such a mapping.

    Returns
    -------
    Callable
        Flat: `hex(*names)`. Nested: `hex(palette, *names)`. Both return the
        stored colors in request order and raise `MissingNameError` listing
        every unknown name.
    """
    if not isinstance(color_map, Mapping):
        raise ConfigError(f"color_map should be a mapping, got {type(color_map).__name__}")

    values = list(color_map.values())
    if values and all(isinstance(v, Mapping) for v in values):
        palettes = {
            name: validate_color_mapping(inner)
            for name, inner in validate_named_collection(color_map).items()
        }
        log.debug("Built nested hex accessor over %d palettes", len(palettes))

        def nested_hex(palette: str, *names: str) -> List[str]:
            if not isinstance(palette, str) or palette not in palettes:
                raise MissingNameError([str(palette)], what="Palettes")
            return _pick(validate_color_mapping(palettes[palette]), names)

        return nested_hex

    flat = validate_color_mapping(color_map)
    log.debug("Built hex accessor over %d colors", len(flat))

    def flat_hex(*names: str) -> List[str]:
        return _pick(flat, names)

    return flat_hex


__all__ = ["get_hex"]
