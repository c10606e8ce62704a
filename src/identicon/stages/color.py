"""Fill color selection."""

from typing import Sequence

from identicon.contracts.failure import InsufficientDataError

__all__ = ['pick_color', 'MIN_HASH_LENGTH']

MIN_HASH_LENGTH = 3


def pick_color(hash_bytes: Sequence[int]) -> tuple[int, int, int]:
    """Use the first three hash bytes verbatim as an RGB color.

    Examples
    --------
    >>> pick_color([1, 2, 3, 4])
    (1, 2, 3)

    Raises
    ------
    InsufficientDataError
        If fewer than three bytes are available.
    """
    if len(hash_bytes) < MIN_HASH_LENGTH:
        raise InsufficientDataError(MIN_HASH_LENGTH, len(hash_bytes))
    r, g, b = hash_bytes[:MIN_HASH_LENGTH]
    return (r, g, b)
