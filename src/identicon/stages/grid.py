"""Symmetric grid construction and filtering.

The hash is cut into 3-byte chunks; each chunk becomes one row mirrored
around its last element ([a, b, c] -> [a, b, c, b, a]), which gives the
rendered pattern its left-right symmetry. Cells are then paired with their
position in the flattened grid, and only even-valued cells are kept.
"""

import logging
from typing import Sequence, TypeVar

logger = logging.getLogger(__name__)

__all__ = ['chunk', 'mirror_row', 'build_grid', 'filter_grid', 'CHUNK_SIZE']

T = TypeVar("T")

CHUNK_SIZE = 3


def chunk(seq: Sequence[T], size: int) -> list[list[T]]:
    """Split ``seq`` into consecutive lists of exactly ``size`` items.

    A trailing remainder shorter than ``size`` is discarded, not padded.

    >>> chunk([1, 2, 3, 4, 5, 6, 7], 3)
    [[1, 2, 3], [4, 5, 6]]
    """
    if size < 1:
        raise ValueError(f"Chunk size must be >= 1, got {size}")
    full = len(seq) - len(seq) % size
    return [list(seq[i:i + size]) for i in range(0, full, size)]


def mirror_row(row: Sequence[T]) -> list[T]:
    """Append the reverse of ``row`` minus its last element.

    >>> mirror_row([1, 2, 3])
    [1, 2, 3, 2, 1]
    >>> mirror_row([1, 2])
    [1, 2, 1]
    >>> mirror_row([])
    []
    """
    row = list(row)
    return row + row[-2::-1] if row else []


def build_grid(hash_bytes: Sequence[int]) -> list[tuple[int, int]]:
    """Build the flat ``(value, index)`` grid from a hash.

    Hashes shorter than one chunk give an empty grid.

    >>> build_grid([1, 2, 3, 4])
    [(1, 0), (2, 1), (3, 2), (2, 3), (1, 4)]
    """
    flat = [value for row in chunk(hash_bytes, CHUNK_SIZE) for value in mirror_row(row)]
    grid = [(value, index) for index, value in enumerate(flat)]
    logger.debug("Built grid: %d rows, %d cells", len(flat) // (2 * CHUNK_SIZE - 1), len(grid))
    return grid


def filter_grid(grid: Sequence[tuple[int, int]]) -> list[tuple[int, int]]:
    """Keep cells with an even value; order and indices are unchanged."""
    kept = [(value, index) for value, index in grid if value & 1 == 0]
    logger.debug("Filtered grid: kept %d of %d cells", len(kept), len(grid))
    return kept
