"""Identicon pipeline stages.

- hasher: Input string to digest bytes
- color: Fill color from the digest
- grid: Mirrored grid construction and even-cell filter
- pixel_map: Grid cells to pixel rectangles
- rasterizer: Rectangles to encoded image bytes
"""

from identicon.stages.hasher import hash_to_bytes
from identicon.stages.color import pick_color
from identicon.stages.grid import chunk, mirror_row, build_grid, filter_grid
from identicon.stages.pixel_map import build_pixel_map
from identicon.stages.rasterizer import render

__all__ = [
    "hash_to_bytes",
    "pick_color",
    "chunk",
    "mirror_row",
    "build_grid",
    "filter_grid",
    "build_pixel_map",
    "render",
]
