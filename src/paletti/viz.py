"""
Quick swatch plot for inspecting a palette.
"""

from typing import Any, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .color_utils import ramp_colors
from .validation import validate_color_collection


def viz_palette(
    colors: Any,
    title: Optional[str] = None,
    num_colors: Optional[int] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Figure:
    """
    Draw a row of swatches, one per color.

    When `num_colors` is given the palette is ramped to that many colors
    first. Returns the figure holding the axes.
    """
    palette = list(validate_color_collection(colors))
    if num_colors is not None:
        palette = ramp_colors(palette, num_colors)

    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4, 0.8 * len(palette)), 1.2))
    else:
        fig = ax.figure

    for i, color in enumerate(palette):
        ax.add_patch(Rectangle((i, 0), 1, 1, facecolor=color, edgecolor="none"))
    ax.set_xlim(0, len(palette))
    ax.set_ylim(0, 1)
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)
    if title:
        ax.set_title(title)
    return fig


__all__ = ["viz_palette"]
