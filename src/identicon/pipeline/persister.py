"""Writing encoded identicons to disk.

Writes go to a temporary file in the destination directory which is then
renamed over the target, so a failed write never leaves a partial image
behind and an existing file is either fully replaced or left untouched.
"""

import os
import logging
import tempfile
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

__all__ = ['save', 'sanitize_name', 'get_output_path']

_UNSAFE_CHARS = {"/", "\\", "\0"} | {sep for sep in (os.sep, os.altsep) if sep}


def sanitize_name(name: str) -> str:
    """Replace path separators and NUL so ``name`` stays inside the output directory.

    >>> sanitize_name("a/b\\\\c")
    'a_b_c'
    """
    return "".join("_" if ch in _UNSAFE_CHARS else ch for ch in name)


def get_output_path(name: str, output_dir: Union[str, Path] = ".",
                    image_format: str = "png", sanitize: bool = True) -> Path:
    """Build ``<output_dir>/<name>.<image_format>``.

    Parameters
    ----------
    name : str
        Input string the identicon was generated from.
    output_dir : str or Path, optional
        Destination directory (default current directory).
    image_format : str, optional
        File extension without the dot (default "png").
    sanitize : bool, optional
        Replace path separators in ``name`` (default True). With False the
        name is used verbatim, as a relative path below ``output_dir``.

    Example
    -------
    >>> get_output_path("apple", "/tmp/icons")
    PosixPath('/tmp/icons/apple.png')
    """
    if sanitize:
        name = sanitize_name(name)
    return Path(output_dir).expanduser() / f"{name}.{image_format}"


def save(image_bytes: bytes, name: str, output_dir: Union[str, Path] = ".",
         image_format: str = "png", sanitize: bool = True) -> Path:
    """Atomically write ``image_bytes`` to ``<output_dir>/<name>.<image_format>``.

    Any existing file of that name is overwritten.

    Returns
    -------
    Path
        Path of the written file.

    Raises
    ------
    OSError
        On permission, disk, or path errors. No retry is attempted and no
        partial file is left behind.
    """
    path = get_output_path(name, output_dir, image_format, sanitize)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=".identicon-", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(image_bytes)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600 files
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise

    logger.info("Saved identicon: %s (%d bytes)", path, len(image_bytes))
    return path
