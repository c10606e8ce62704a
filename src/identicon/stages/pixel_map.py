"""Grid cell to pixel rectangle mapping."""

from typing import Sequence

__all__ = ['build_pixel_map', 'cell_rect', 'CELL_SIZE', 'COLS']

CELL_SIZE = 50
COLS = 5


def cell_rect(index: int, cell_size: int = CELL_SIZE, cols: int = COLS):
    """Return ``((x0, y0), (x1, y1))`` for the cell at flat ``index``.

    >>> cell_rect(7)
    ((100, 50), (150, 100))
    """
    col = index % cols
    row = index // cols
    x0 = col * cell_size
    y0 = row * cell_size
    return ((x0, y0), (x0 + cell_size, y0 + cell_size))


def build_pixel_map(grid: Sequence[tuple[int, int]], cell_size: int = CELL_SIZE,
                    cols: int = COLS) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """Map each ``(value, index)`` cell to its rectangle, in grid order.

    The cell value is ignored. No bounds checking happens here; indices past
    the last cell of the canvas are caught by the pixel map contract.

    Parameters
    ----------
    grid : sequence of (int, int)
        Filtered grid cells.

    cell_size : int, optional
        Side of one cell in pixels (default 50).

    cols : int, optional
        Cells per row (default 5).

    Returns
    -------
    list
        ``[((x0, y0), (x1, y1)), ...]`` top-left and bottom-right corners.
    """
    return [cell_rect(index, cell_size, cols) for _, index in grid]
