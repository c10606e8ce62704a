"""Grid stage contract.

Enforces the guarantee that grid indices refer to positions in the
unfiltered mirrored sequence: dense from 0 before filtering, a strictly
increasing subset of those positions afterwards.
"""

from identicon.core.image import GriddedImage
from identicon.contracts.base import require


def assert_gridded(image: GriddedImage, cols: int = 5, filtered: bool = False) -> None:
    """Enforce grid stage contract.

    Called after the grid builder (``filtered=False``) and after the grid
    filter (``filtered=True``).

    Parameters
    ----------
    image : GriddedImage
        Record carrying the grid.

    cols : int, optional
        Width of a mirrored row (default 5).

    filtered : bool, optional
        Whether the grid has already been narrowed to even cells.

    Raises
    ------
    ContractViolation
        If indices are not in production order or parity is wrong.
    """
    indices = [index for _, index in image.grid]

    if filtered:
        require(
            all(a < b for a, b in zip(indices, indices[1:])),
            "Grid contract violated: filtered indices are not strictly increasing"
        )
        require(
            all(value % 2 == 0 for value, _ in image.grid),
            "Grid contract violated: filtered grid contains odd values"
        )
    else:
        require(
            indices == list(range(len(indices))),
            "Grid contract violated: indices are not contiguous from 0"
        )
        require(
            len(indices) % cols == 0,
            f"Grid contract violated: {len(indices)} cells is not a multiple of row width {cols}"
        )
