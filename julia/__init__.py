"""Public API for Julia set rendering utilities."""

from .constants import DEFAULT_CONSTANT_INDEX, JULIA_SETS, select_constant
from .output import write_render, write_single_image
from .palette import banding, blue_palette, gray_palette
from .renderer import (
    RenderParameters,
    RenderResult,
    escape_count,
    map_pixel,
    plane_axes,
    render_counts,
    render_frame,
)

__all__ = [
    "DEFAULT_CONSTANT_INDEX",
    "JULIA_SETS",
    "RenderParameters",
    "RenderResult",
    "banding",
    "blue_palette",
    "escape_count",
    "gray_palette",
    "map_pixel",
    "plane_axes",
    "render_counts",
    "render_frame",
    "select_constant",
    "write_render",
    "write_single_image",
]
