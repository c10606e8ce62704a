"""Input hashing.

Turns an input string into the fixed-length byte sequence every later
stage reads from.
"""

import hashlib
import logging
from typing import Optional, Union

logger = logging.getLogger(__name__)

__all__ = ['hash_to_bytes', 'DIGEST_SIZE', 'SUPPORTED_ALGORITHMS']

DIGEST_SIZE = 16
SUPPORTED_ALGORITHMS = ("md5", "blake2b", "blake2s")


def _digest(data: bytes, algorithm: str, key: Optional[bytes]) -> bytes:
    if algorithm == "md5":
        if key:
            raise ValueError("md5 does not support a key; use blake2b or blake2s")
        return hashlib.md5(data).digest()
    if algorithm == "blake2b":
        return hashlib.blake2b(data, digest_size=DIGEST_SIZE, key=key or b"").digest()
    if algorithm == "blake2s":
        return hashlib.blake2s(data, digest_size=DIGEST_SIZE, key=key or b"").digest()
    raise ValueError(f"Unknown hash algorithm: {algorithm}")


def hash_to_bytes(data: Union[str, bytes], algorithm: str = "md5",
                  key: Optional[bytes] = None) -> list[int]:
    """Hash ``data`` into a list of 16 byte values.

    Strings are encoded as UTF-8 without normalization; bytes are hashed
    as given. The empty string is valid input.

    Parameters
    ----------
    data : str or bytes
        Input to hash.

    algorithm : str, optional
        "md5" (default), "blake2b" or "blake2s". The blake2 variants are
        truncated to 16 bytes and accept a ``key`` for keyed hashing.

    key : bytes, optional
        Secret key for the blake2 variants.

    Returns
    -------
    list of int
        Digest bytes in digest order, each in 0..255.

    Raises
    ------
    ValueError
        For an unknown algorithm, a key with md5, or a key longer than the
        blake2 variant accepts.

    Examples
    --------
    >>> hash_to_bytes("apple")
    [31, 56, 112, 190, 39, 79, 108, 73, 179, 227, 26, 12, 103, 40, 149, 127]
    >>> hash_to_bytes("ball")
    [122, 16, 234, 27, 155, 40, 114, 218, 159, 55, 80, 2, 196, 77, 223, 206]
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    digest = list(_digest(raw, algorithm, key))
    logger.debug("Hashed %d input bytes with %s", len(raw), algorithm)
    return digest
