"""Identicon processing pipeline.

Runs one input string through every stage and enforces the contract at
each stage boundary:

    hash -> color -> grid -> filter -> pixel map -> render -> save
"""

import logging
from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING

from identicon.core.image import RawImage, ColoredImage, GriddedImage, MappedImage
from identicon.stages.hasher import hash_to_bytes, DIGEST_SIZE
from identicon.stages.color import pick_color
from identicon.stages.grid import build_grid, filter_grid
from identicon.stages.pixel_map import build_pixel_map
from identicon.stages.rasterizer import render
from identicon.pipeline.persister import save
from identicon.contracts import (
    assert_hashed,
    assert_gridded,
    assert_mapped,
)

if TYPE_CHECKING:
    from identicon.schemas import InternalConfig

__all__ = ['IdenticonProcessor', 'create']

logger = logging.getLogger(__name__)


class IdenticonProcessor:
    """Turns input strings into identicon images.

    Each stage method takes the record produced by the previous stage and
    returns a new one; the processor holds only configuration, so one
    instance can be shared between threads.

    **Processing Pipeline:**

    1. **Hash**: input bytes -> 16-byte digest (``RawImage``)
    2. **Color**: first three digest bytes -> RGB fill (``ColoredImage``)
    3. **Grid**: 3-byte chunks mirrored to 5-cell rows, indexed (``GriddedImage``)
    4. **Filter**: only even-valued cells survive, indices kept
    5. **Pixel map**: cell index -> 50px square on a 250px canvas (``MappedImage``)
    6. **Render**: rectangles filled on a blank canvas, encoded by Pillow
    7. **Save**: atomic write to ``<output_dir>/<input>.<format>``

    Example usage::

        processor = IdenticonProcessor(config)
        path = processor.create("apple")
    """

    def __init__(self, config: Optional["InternalConfig"] = None):
        """Initialize processor with validated configuration.

        Parameters
        ----------
        config : InternalConfig, optional
            Fully validated runtime configuration. Expert defaults are used
            when omitted.
        """
        if config is None:
            from identicon.schemas import resolve_config
            config = resolve_config()

        self.config = config
        self.algorithm = config.hasher.algorithm
        self.key = config.hasher.key_bytes
        self.cell_size = config.canvas.cell_size
        self.cols = config.canvas.cols
        self.canvas_size = config.canvas.canvas_size
        self.background = config.canvas.background
        self.output_dir = Path(config.output.directory)
        self.image_format = config.output.image_format
        self.sanitize_names = config.output.sanitize_names

        logger.debug("IdenticonProcessor initialized: algorithm=%s, canvas=%sx%s, format=%s",
                     self.algorithm, self.canvas_size[0], self.canvas_size[1], self.image_format)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def hash(self, data: Union[str, bytes]) -> RawImage:
        image = RawImage(hash=hash_to_bytes(data, self.algorithm, self.key))
        assert_hashed(image, DIGEST_SIZE)
        return image

    def color(self, image: RawImage) -> ColoredImage:
        return image.with_color(pick_color(image.hash))

    def grid(self, image: ColoredImage) -> GriddedImage:
        gridded = image.with_grid(build_grid(image.hash))
        assert_gridded(gridded, self.cols)
        return gridded

    def filter(self, image: GriddedImage) -> GriddedImage:
        filtered = image.with_grid(filter_grid(image.grid))
        assert_gridded(filtered, self.cols, filtered=True)
        return filtered

    def pixel_map(self, image: GriddedImage) -> MappedImage:
        mapped = image.with_pixel_map(build_pixel_map(image.grid, self.cell_size, self.cols))
        assert_mapped(mapped, self.cell_size, self.cols)
        return mapped

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def process(self, data: Union[str, bytes]) -> MappedImage:
        """Run every in-memory stage and return the record ready for rendering.

        Raises
        ------
        InsufficientDataError
            If the digest is too short for a color.
        ContractViolation
            If any stage breaks its contract.
        """
        image = self.pixel_map(self.filter(self.grid(self.color(self.hash(data)))))
        logger.debug("Processed input: color=%s, cells=%d", image.color, len(image.pixel_map))
        return image

    def render(self, image: MappedImage) -> bytes:
        """Encode a mapped record with the configured canvas and format."""
        return render(
            image.pixel_map,
            image.color,
            canvas_size=self.canvas_size,
            background=self.background,
            image_format=self.image_format,
        )

    def to_bytes(self, data: Union[str, bytes]) -> bytes:
        """Encoded image for ``data`` without touching the filesystem."""
        return self.render(self.process(data))

    def save(self, image_bytes: bytes, name: str) -> Path:
        return save(
            image_bytes,
            name,
            output_dir=self.output_dir,
            image_format=self.image_format,
            sanitize=self.sanitize_names,
        )

    def create(self, data: str, name: Optional[str] = None) -> Path:
        """Generate the identicon for ``data`` and write it to disk.

        Parameters
        ----------
        data : str
            Input string.

        name : str, optional
            File name stem. Defaults to ``data`` itself.

        Returns
        -------
        Path
            Written file.

        Raises
        ------
        InsufficientDataError, ContractViolation, OSError
            Propagated unchanged after logging.
        """
        try:
            image_bytes = self.to_bytes(data)
            return self.save(image_bytes, data if name is None else name)
        except Exception as e:
            logger.error("Failed to create identicon for %r: %s", data, e)
            raise


def create(data: str, config: Optional["InternalConfig"] = None) -> Path:
    """Generate and save the identicon for ``data`` in one call.

    Examples
    --------
    >>> create("apple")
    PosixPath('apple.png')
    """
    return IdenticonProcessor(config).create(data)
