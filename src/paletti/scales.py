"""
Scale factory.

Wraps a palette function from `get_pal` into a builder of color or fill
scales. A built scale is backend agnostic and can be handed to matplotlib
(`to_matplotlib`) or plotly (`to_plotly`), or used directly to map data
values to colors (`map`).

Usage:
    pal = get_pal(palettes)
    scale_color_mine = get_scale_color(pal)
    scale_fill_mine = get_scale_fill(pal)

    scale_color_mine(palette="anatomy").map(df["genotype"])
    scale_fill_mine(discrete=False, limits=(0, 1)).to_matplotlib()
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import matplotlib.colors as mcolors
import numpy as np
import pandas as pd

from .color_utils import to_rgba_string
from .config import ScaleConfig, default_config
from .exceptions import ConfigError
from .palettes import CollectionPalette, VectorPalette

log = logging.getLogger(__name__)

AESTHETICS = ("color", "fill")
# Set by the builders, never taken from **extra
RESERVED_OPTIONS = frozenset({"aesthetic", "colours"})


def _check_aesthetic(aesthetic: str) -> None:
    if aesthetic not in AESTHETICS:
        raise ConfigError(f"aesthetic should be one of {AESTHETICS}, got {aesthetic!r}")


def _categories(values: Any) -> List[Any]:
    """Distinct non-null values; category order for Categoricals, else first appearance."""
    s = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype=object)
    if isinstance(s.dtype, pd.CategoricalDtype):
        return list(s.cat.remove_unused_categories().cat.categories)
    return list(pd.unique(s.dropna()))


@dataclass(frozen=True)
class DiscreteScale:
    """One color per distinct category; the palette is ramped to the category count."""
    aesthetic: str
    palette: Callable[[int], List[str]]
    name: str = "paletti"
    na_value: str = "#7F7F7F"

    def __post_init__(self):
        _check_aesthetic(self.aesthetic)

    def colors(self, n: int) -> List[str]:
        return self.palette(n)

    def lookup(self, values: Any) -> Dict[Any, str]:
        """Create category -> color mapping."""
        cats = _categories(values)
        if not cats:
            return {}
        return dict(zip(cats, self.palette(len(cats))))

    def map(self, values: Any) -> List[str]:
        """One color per value; nulls get `na_value`."""
        s = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype=object)
        lookup = self.lookup(s)
        return [self.na_value if pd.isna(v) else lookup[v] for v in s]

    def to_matplotlib(self, n: int) -> mcolors.ListedColormap:
        return mcolors.ListedColormap(self.colors(n), name=self.name)

    def to_plotly(self, n: int) -> List[str]:
        """Plotly color sequence (e.g. for `color_discrete_sequence`)."""
        return [to_rgba_string(c) for c in self.colors(n)]


@dataclass(frozen=True)
class ContinuousScale:
    """Smooth gradient through a fixed list of colours."""
    aesthetic: str
    colours: Tuple[str, ...]
    name: str = "paletti"
    limits: Optional[Tuple[float, float]] = None
    na_value: str = "#7F7F7F"

    def __post_init__(self):
        _check_aesthetic(self.aesthetic)
        if len(self.colours) < 2:
            raise ConfigError("A continuous scale needs at least two colours")
        object.__setattr__(self, "colours", tuple(self.colours))
        if self.limits is not None:
            if (
                len(self.limits) != 2
                or not np.all(np.isfinite(np.asarray(self.limits, dtype=float)))
                or not self.limits[0] < self.limits[1]
            ):
                raise ConfigError(f"limits should be finite (low, high) with low < high, got {self.limits!r}")
            object.__setattr__(self, "limits", (float(self.limits[0]), float(self.limits[1])))

    def map(self, values: Any) -> List[str]:
        """
        Map numeric values onto the gradient.

        Values are scaled into `limits` (data range when unset), clipped to
        it, and snapped to the nearest gradient step. Nulls, infinities and
        non-numeric values get `na_value`.
        """
        x = pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce").to_numpy(dtype=float)
        valid = np.isfinite(x)
        out = [self.na_value] * len(x)
        if not valid.any():
            return out

        lo, hi = self.limits if self.limits is not None else (np.min(x[valid]), np.max(x[valid]))
        span = hi - lo
        if span == 0:
            scaled = np.zeros(len(x))
        else:
            scaled = np.clip((x - lo) / span, 0.0, 1.0)
        idx = np.rint(scaled * (len(self.colours) - 1))
        for i in np.flatnonzero(valid):
            out[i] = self.colours[int(idx[i])]
        return out

    def to_matplotlib(self) -> mcolors.LinearSegmentedColormap:
        cmap = mcolors.LinearSegmentedColormap.from_list(
            self.name, list(self.colours), N=len(self.colours)
        )
        cmap.set_bad(self.na_value)
        return cmap

    def to_plotly(self) -> List[List[Any]]:
        """Plotly colorscale: [[position, 'rgba(...)'], ...]."""
        positions = np.linspace(0.0, 1.0, len(self.colours))
        return [[float(p), to_rgba_string(c)] for p, c in zip(positions, self.colours)]


def _make_scale(ramp, aesthetic: str, discrete: bool, config: ScaleConfig, extra: Dict[str, Any]):
    if discrete:
        if extra:
            log.debug("Ignoring options %s for discrete %s scale", sorted(extra), aesthetic)
        return DiscreteScale(aesthetic, ramp, name=config.scale_name, na_value=config.na_value)
    reserved = sorted(RESERVED_OPTIONS.intersection(extra))
    if reserved:
        raise ConfigError(f"Options {reserved} are set by the scale builder and cannot be passed")
    options = {"name": config.scale_name, "na_value": config.na_value}
    options.update(extra)
    return ContinuousScale(aesthetic, tuple(ramp(config.continuous_steps)), **options)


def _scale_from_vector(pal_object: VectorPalette, aesthetic: str, config: ScaleConfig):
    def scale(discrete: bool = True, opacity: float = 1, reverse: bool = False, **extra):
        ramp = pal_object(opacity=opacity, reverse=reverse)
        return _make_scale(ramp, aesthetic, discrete, config, extra)
    return scale


def _scale_from_collection(pal_object: CollectionPalette, aesthetic: str, config: ScaleConfig):
    def scale(
        palette: Optional[str] = None,
        discrete: bool = True,
        opacity: float = 1,
        reverse: bool = False,
        **extra,
    ):
        if palette is None:
            palette = pal_object.default_name
        ramp = pal_object(palette, opacity=opacity, reverse=reverse)
        return _make_scale(ramp, aesthetic, discrete, config, extra)
    return scale


def _get_scale(pal_object: Any, aesthetic: str, config: Optional[ScaleConfig]):
    config = config or default_config()
    if isinstance(pal_object, VectorPalette):
        builder = _scale_from_vector(pal_object, aesthetic, config)
    elif isinstance(pal_object, CollectionPalette):
        builder = _scale_from_collection(pal_object, aesthetic, config)
    else:
        raise ConfigError(
            "`pal_object` should be a VectorPalette or CollectionPalette, as returned by get_pal"
        )
    log.debug("Built %s scale builder from %r", aesthetic, pal_object)
    return builder


def get_scale_color(pal_object: Any, config: Optional[ScaleConfig] = None):
    """
    Create the color scale builder for a palette function.

    The builder takes `(discrete=True, opacity=1, reverse=False, **extra)`,
    plus a leading `palette=` (default: first name) for collections. Extra
    keyword arguments go to `ContinuousScale` only.
    """
    return _get_scale(pal_object, "color", config)


get_scale_colour = get_scale_color


def get_scale_fill(pal_object: Any, config: Optional[ScaleConfig] = None):
    """Create the fill scale builder; same call shape as `get_scale_color`."""
    return _get_scale(pal_object, "fill", config)


__all__ = [
    "AESTHETICS",
    "DiscreteScale",
    "ContinuousScale",
    "get_scale_color",
    "get_scale_colour",
    "get_scale_fill",
]
