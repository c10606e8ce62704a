"""Pixel map stage contract.

Enforces the guarantee that every rectangle handed to the rasterizer lies
on the canvas. The pixel mapper itself performs no bounds checking, so an
index past the last cell is caught here instead of being silently clipped.
"""

from identicon.core.image import MappedImage
from identicon.contracts.base import require


def assert_mapped(image: MappedImage, cell_size: int = 50, cols: int = 5) -> None:
    """Enforce pixel map stage contract.

    Parameters
    ----------
    image : MappedImage
        Record returned by the pixel mapper.

    cell_size : int, optional
        Side length of one cell in pixels (default 50).

    cols : int, optional
        Number of cells per canvas side (default 5).

    Raises
    ------
    ContractViolation
        If a cell index is out of range or a rectangle is malformed.
    """
    require(
        len(image.pixel_map) == len(image.grid),
        f"Pixel map contract violated: {len(image.pixel_map)} rectangles for {len(image.grid)} cells"
    )

    max_cells = cols * cols
    for _, index in image.grid:
        require(
            index < max_cells,
            f"Pixel map contract violated: cell index {index} outside a {cols}x{cols} canvas"
        )

    side = cols * cell_size
    for (x0, y0), (x1, y1) in image.pixel_map:
        require(
            x1 - x0 == cell_size and y1 - y0 == cell_size,
            f"Pixel map contract violated: rectangle ({x0}, {y0})-({x1}, {y1}) is not a {cell_size}px cell"
        )
        require(
            0 <= x0 and 0 <= y0 and x1 <= side and y1 <= side,
            f"Pixel map contract violated: rectangle ({x0}, {y0})-({x1}, {y1}) exceeds {side}x{side} canvas"
        )


def assert_drawable(pixel_map, canvas_size: tuple[int, int]) -> None:
    """Enforce the rasterizer input contract.

    Every rectangle must be well-ordered and lie within
    ``[0, width] x [0, height]``. The far corner may touch the border;
    only that inclusive edge pixel is clipped while drawing.

    Raises
    ------
    ContractViolation
        If any rectangle is inverted or reaches past the canvas.
    """
    width, height = canvas_size
    for (x0, y0), (x1, y1) in pixel_map:
        require(
            x0 <= x1 and y0 <= y1,
            f"Render contract violated: rectangle ({x0}, {y0})-({x1}, {y1}) is inverted"
        )
        require(
            0 <= x0 and 0 <= y0 and x1 <= width and y1 <= height,
            f"Render contract violated: rectangle ({x0}, {y0})-({x1}, {y1}) "
            f"exceeds {width}x{height} canvas"
        )
