"""Rasterizing pixel maps into encoded images.

The canvas is a Pillow RGB image and rectangles are drawn with
``ImageDraw.rectangle``, which fills inclusive of both corners. Neighbouring
cells therefore share an edge row/column and the last row/column of cells
ends at the canvas border.
"""

import io
import logging
from typing import Sequence, Union

from PIL import Image, ImageDraw

from identicon.contracts import assert_drawable

logger = logging.getLogger(__name__)

__all__ = ['new_canvas', 'fill_rect', 'encode', 'render', 'CANVAS_SIZE']

CANVAS_SIZE = (250, 250)

PIL_FORMATS = {
    "png": "PNG",
    "jpeg": "JPEG",
    "bmp": "BMP",
}


def _fill(color: Union[str, Sequence[int]]):
    return color if isinstance(color, str) else tuple(int(c) for c in color)


def new_canvas(canvas_size: tuple[int, int] = CANVAS_SIZE,
               background: Union[str, Sequence[int]] = "white") -> Image.Image:
    """Blank RGB canvas of ``(width, height)`` filled with ``background``."""
    return Image.new("RGB", tuple(canvas_size), _fill(background))


def fill_rect(canvas: Image.Image, top_left, bottom_right, color) -> None:
    """Fill the inclusive rectangle on ``canvas`` in place."""
    (x0, y0), (x1, y1) = top_left, bottom_right
    ImageDraw.Draw(canvas).rectangle([x0, y0, x1, y1], fill=_fill(color))


def encode(canvas: Image.Image, image_format: str = "png") -> bytes:
    """Encode a canvas with Pillow."""
    try:
        pil_format = PIL_FORMATS[image_format.lower()]
    except KeyError:
        raise ValueError(f"Unsupported image format: {image_format}") from None

    buffer = io.BytesIO()
    canvas.save(buffer, format=pil_format)
    return buffer.getvalue()


def render(pixel_map: Sequence, color: Sequence[int],
           canvas_size: tuple[int, int] = CANVAS_SIZE,
           background: Union[str, Sequence[int]] = "white",
           image_format: str = "png") -> bytes:
    """Draw every rectangle of ``pixel_map`` in ``color`` and encode the result.

    Parameters
    ----------
    pixel_map : sequence
        ``((x0, y0), (x1, y1))`` rectangles, drawn in order. Each must lie
        within ``[0, width] x [0, height]``.

    color : (int, int, int)
        Fill color for every rectangle.

    canvas_size : (int, int), optional
        Canvas ``(width, height)`` in pixels (default 250x250).

    background : str or (int, int, int), optional
        Canvas color before drawing (default white).

    image_format : str, optional
        "png" (default), "jpeg" or "bmp".

    Returns
    -------
    bytes
        Encoded image.

    Raises
    ------
    ContractViolation
        If a rectangle is inverted or reaches past the canvas.
    """
    assert_drawable(pixel_map, canvas_size)

    canvas = new_canvas(canvas_size, background)
    draw = ImageDraw.Draw(canvas)
    fill = _fill(color)
    for (x0, y0), (x1, y1) in pixel_map:
        draw.rectangle([x0, y0, x1, y1], fill=fill)

    data = encode(canvas, image_format)
    logger.debug("Rendered %d rectangles onto %dx%d canvas (%d bytes %s)",
                 len(pixel_map), canvas_size[0], canvas_size[1], len(data), image_format)
    return data
