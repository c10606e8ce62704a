"""Core data records for the identicon pipeline.

Each stage returns a new, frozen record that carries everything the
previous stage produced plus one new field.
"""

from identicon.core.image import (
    RawImage,
    ColoredImage,
    GriddedImage,
    MappedImage,
    Color,
    Cell,
    Rect,
)

__all__ = [
    'RawImage',
    'ColoredImage',
    'GriddedImage',
    'MappedImage',
    'Color',
    'Cell',
    'Rect',
]
