"""Hash stage contract.

Enforces the guarantee that after hashing, the record carries a digest of
the configured length made of byte values.
"""

from identicon.core.image import RawImage
from identicon.contracts.base import require


def assert_hashed(image: RawImage, expected_length: int = 16) -> None:
    """Enforce hash stage contract.

    Parameters
    ----------
    image : RawImage
        Record returned by the hasher stage.

    expected_length : int, optional
        Digest length in bytes (default 16, a 128-bit hash).

    Raises
    ------
    ContractViolation
        If the digest length or byte range is wrong.
    """
    require(
        len(image.hash) == expected_length,
        f"Hash contract violated: digest has {len(image.hash)} bytes, expected {expected_length}"
    )
    require(
        all(0 <= b <= 255 for b in image.hash),
        "Hash contract violated: digest contains values outside 0..255"
    )
