"""Stage-tagged image records.

The pipeline threads one record through every stage. Instead of a single
record with nullable fields, each stage has its own frozen model, so a
record that reaches the rasterizer is guaranteed to carry a pixel map:

    RawImage{hash}
      -> ColoredImage{hash, color}
        -> GriddedImage{hash, color, grid}
          -> MappedImage{hash, color, grid, pixel_map}

Every ``with_*`` method returns a new record; nothing is mutated in place.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Byte = Annotated[int, Field(ge=0, le=255)]
Color = tuple[Byte, Byte, Byte]
Cell = tuple[Byte, Annotated[int, Field(ge=0)]]
Point = tuple[int, int]
Rect = tuple[Point, Point]

__all__ = [
    'Byte', 'Color', 'Cell', 'Point', 'Rect',
    'RawImage', 'ColoredImage', 'GriddedImage', 'MappedImage',
]


class ImageRecord(BaseModel):
    """Immutable base for all stage records."""

    model_config = ConfigDict(
        extra='forbid',
        frozen=True,
    )


class RawImage(ImageRecord):
    """Record after hashing.

    Examples
    --------
    >>> RawImage(hash=[1, 2, 3, 4]).hash
    (1, 2, 3, 4)
    """
    hash: tuple[Byte, ...]

    def with_color(self, color: Color) -> "ColoredImage":
        return ColoredImage(hash=self.hash, color=color)


class ColoredImage(ImageRecord):
    """Record after the fill color has been picked."""
    hash: tuple[Byte, ...]
    color: Color

    def with_grid(self, grid: list[Cell]) -> "GriddedImage":
        return GriddedImage(hash=self.hash, color=self.color, grid=grid)


class GriddedImage(ImageRecord):
    """Record after the mirrored grid has been built (and possibly filtered)."""
    hash: tuple[Byte, ...]
    color: Color
    grid: tuple[Cell, ...]

    def with_grid(self, grid: list[Cell]) -> "GriddedImage":
        """Return a copy carrying a narrowed grid (used by the filter stage)."""
        return GriddedImage(hash=self.hash, color=self.color, grid=grid)

    def with_pixel_map(self, pixel_map: list[Rect]) -> "MappedImage":
        return MappedImage(
            hash=self.hash,
            color=self.color,
            grid=self.grid,
            pixel_map=pixel_map,
        )


class MappedImage(ImageRecord):
    """Record ready for rasterizing."""
    hash: tuple[Byte, ...]
    color: Color
    grid: tuple[Cell, ...]
    pixel_map: tuple[Rect, ...]
