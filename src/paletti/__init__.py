"""
paletti - palette, scale, and hex helpers for named color tables.

Build the helpers once from your own colors:

    from paletti import get_pal, get_scale_color, get_scale_fill, get_hex

    my_pal = get_pal(my_palettes)
    scale_color_mine = get_scale_color(my_pal)
    scale_fill_mine = get_scale_fill(my_pal)
    my_hex = get_hex(my_colors)
"""

import importlib

from .config import ScaleConfig, default_config
from .data import MY_COMPANY_COLORS
from .exceptions import ConfigError, MissingNameError, PalettiError
from .hex_accessor import get_hex
from .palettes import (
    CollectionPalette,
    NamedCollection,
    SingleSequence,
    VectorPalette,
    get_pal,
)
from .scales import (
    ContinuousScale,
    DiscreteScale,
    get_scale_color,
    get_scale_colour,
    get_scale_fill,
)
from .validation import (
    validate_color,
    validate_color_collection,
    validate_color_mapping,
    validate_named_collection,
)

__version__ = "0.1.0"

__all__ = [
    'get_pal', 'get_scale_color', 'get_scale_colour', 'get_scale_fill', 'get_hex',
    'viz_palette',
    'SingleSequence', 'NamedCollection', 'VectorPalette', 'CollectionPalette',
    'DiscreteScale', 'ContinuousScale',
    'ScaleConfig', 'default_config',
    'PalettiError', 'ConfigError', 'MissingNameError',
    'validate_named_collection', 'validate_color', 'validate_color_collection',
    'validate_color_mapping',
    'MY_COMPANY_COLORS',
]


def __getattr__(name: str):
    if name == "viz_palette":
        module = importlib.import_module(f"{__name__}.viz")
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
