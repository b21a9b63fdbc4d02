"""
Palette factory.

`get_pal` turns either a single palette or a named collection of palettes
into a callable that builds color ramps:

    >>> pal = get_pal(["#701B06", "#78A8D1", "#E3C78F"])
    >>> pal(reverse=True)(5)

    >>> pal = get_pal({"p1": ["#000000", "#FFFFFF"]})
    >>> pal("p1")(2)
    ['#000000', '#FFFFFF']

The input is resolved once into a `SingleSequence` or a `NamedCollection`;
the returned `VectorPalette` / `CollectionPalette` closes over that variant.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List, Sequence, Tuple, Union

from .color_utils import check_opacity, ramp_colors
from .exceptions import ConfigError, MissingNameError
from .validation import (
    as_color_list,
    validate_color_collection,
    validate_color_mapping,
    validate_named_collection,
)

log = logging.getLogger(__name__)

Ramp = Callable[[int], List[str]]


# --- Resolved input variants ---

@dataclass(frozen=True)
class SingleSequence:
    """One ordered palette."""
    colors: Tuple[str, ...]


@dataclass(frozen=True)
class NamedCollection:
    """Palette name -> ordered palette. Dict order is the palette order."""
    palettes: Dict[str, Tuple[str, ...]]

    @property
    def names(self) -> List[str]:
        return list(self.palettes)


PaletteSource = Union[SingleSequence, NamedCollection]


def resolve_palette_source(hex_object: Any) -> PaletteSource:
    """Validate `hex_object` and decide which palette variant it is."""
    hex_object = as_color_list(hex_object)
    if isinstance(hex_object, Mapping):
        values = list(hex_object.values())
        if values and all(isinstance(v, str) for v in values):
            # A flat named color mapping is one palette over its values
            return SingleSequence(tuple(validate_color_mapping(hex_object).values()))
        palettes = validate_named_collection(hex_object)
        palettes = {name: as_color_list(pal) for name, pal in palettes.items()}
        for name, pal in palettes.items():
            if isinstance(pal, str) or not isinstance(pal, (Sequence, Mapping)):
                raise ConfigError(
                    f"Palette {name!r} should be a sequence of colors, got {type(pal).__name__}"
                )
        return NamedCollection(
            {name: validate_color_collection(pal) for name, pal in palettes.items()}
        )

    if isinstance(hex_object, Sequence) and not isinstance(hex_object, str):
        return SingleSequence(validate_color_collection(hex_object))

    raise ConfigError("hex_object should be either a mapping or a sequence of colors")


def _build_ramp(colors: Sequence[str], opacity: Any, reverse: bool) -> Ramp:
    opacity = check_opacity(opacity)
    anchors = list(reversed(colors)) if reverse else list(colors)
    return partial(ramp_colors, anchors, opacity=opacity)


class VectorPalette:
    """Ramp builder over a single palette."""

    def __init__(self, source: SingleSequence):
        self.source = source

    @property
    def colors(self) -> Tuple[str, ...]:
        return self.source.colors

    def __call__(self, opacity: float = 1, reverse: bool = False) -> Ramp:
        return _build_ramp(self.source.colors, opacity, reverse)

    def __repr__(self) -> str:
        return f"VectorPalette({len(self.source.colors)} colors)"


class CollectionPalette:
    """Ramp builder over a named collection of palettes."""

    def __init__(self, source: NamedCollection):
        self.source = source

    @property
    def names(self) -> List[str]:
        return self.source.names

    @property
    def default_name(self) -> str:
        return self.source.names[0]

    def colors(self, name: str) -> Tuple[str, ...]:
        try:
            return self.source.palettes[name]
        except (KeyError, TypeError):
            raise MissingNameError([str(name)], what="Palettes") from None

    def __call__(self, name: str, opacity: float = 1, reverse: bool = False) -> Ramp:
        return _build_ramp(self.colors(name), opacity, reverse)

    def __repr__(self) -> str:
        return f"CollectionPalette({', '.join(self.source.names)})"


PaletteFunction = Union[VectorPalette, CollectionPalette]


def get_pal(hex_object: Any) -> PaletteFunction:
    """
    Create the palette function for ramped colors.

    Parameters
    ----------
    hex_object : sequence or mapping
        A sequence of colors, a flat name -> color mapping, or a mapping
        from palette name to such a palette.

    Returns
    -------
    VectorPalette or CollectionPalette
        Call with `(opacity=1, reverse=False)` for a single palette, or
        `(name, opacity=1, reverse=False)` for a collection. The result
        takes `n` and returns `n` ramped hex colors.

    Raises
    ------
    ConfigError
        If the input is empty, unnamed, or holds an invalid color.
    """
    source = resolve_palette_source(hex_object)
    if isinstance(source, SingleSequence):
        log.debug("Built single palette with %d colors", len(source.colors))
        return VectorPalette(source)
    log.debug("Built palette collection: %s", ", ".join(source.names))
    return CollectionPalette(source)


__all__ = [
    "SingleSequence",
    "NamedCollection",
    "PaletteSource",
    "resolve_palette_source",
    "VectorPalette",
    "CollectionPalette",
    "PaletteFunction",
    "get_pal",
]
