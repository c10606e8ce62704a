"""Tests for canvas filling and encoding."""

import io

import pytest
from PIL import Image

from identicon.contracts import ContractViolation
from identicon.stages.rasterizer import new_canvas, fill_rect, encode, render

pytestmark = pytest.mark.unit

RED = (255, 0, 0)
WHITE = (255, 255, 255)


def _decode(data: bytes) -> Image.Image:
    return Image.open(io.BytesIO(data)).convert("RGB")


def _count(img: Image.Image, color) -> int:
    return dict((c, n) for n, c in img.getcolors()).get(color, 0)


class TestCanvas:

    def test_default_canvas_is_white_250(self):
        canvas = new_canvas()
        assert canvas.size == (250, 250)
        assert canvas.mode == "RGB"
        assert canvas.getcolors() == [(250 * 250, WHITE)]

    def test_background_rgb_tuple(self):
        canvas = new_canvas((10, 20), (1, 2, 3))
        assert canvas.size == (10, 20)
        assert canvas.getpixel((0, 0)) == (1, 2, 3)

    def test_background_hex_string(self):
        assert new_canvas((2, 2), "#102030").getpixel((1, 1)) == (16, 32, 48)


class TestFillRect:

    def test_fill_is_inclusive_of_both_corners(self):
        canvas = new_canvas((10, 10))
        fill_rect(canvas, (2, 3), (4, 5), RED)

        assert canvas.getpixel((2, 3)) == RED
        assert canvas.getpixel((4, 5)) == RED
        assert canvas.getpixel((4, 6)) == WHITE
        assert canvas.getpixel((5, 5)) == WHITE
        assert _count(canvas, RED) == 9

    def test_far_border_pixel_is_clipped(self):
        canvas = new_canvas((10, 10))
        fill_rect(canvas, (5, 5), (10, 10), RED)
        assert _count(canvas, RED) == 25


class TestRenderRejectsOffCanvas:

    def test_cell_below_canvas_raises(self):
        # index 25 maps to the row just under a 5x5 canvas
        with pytest.raises(ContractViolation, match="exceeds 250x250 canvas"):
            render([((0, 250), (50, 300))], RED)

    def test_rect_past_right_edge_raises(self):
        with pytest.raises(ContractViolation, match="exceeds"):
            render([((225, 0), (275, 50))], RED)

    def test_negative_origin_raises(self):
        with pytest.raises(ContractViolation, match="exceeds"):
            render([((-1, 0), (49, 50))], RED)

    def test_inverted_rect_raises(self):
        with pytest.raises(ContractViolation, match="inverted"):
            render([((50, 50), (0, 0))], RED)

    def test_one_bad_rect_fails_whole_render(self):
        with pytest.raises(ContractViolation):
            render([((0, 0), (50, 50)), ((0, 250), (50, 300))], RED)

    def test_custom_canvas_bounds_are_used(self):
        with pytest.raises(ContractViolation, match="exceeds 50x50 canvas"):
            render([((0, 0), (60, 10))], RED, canvas_size=(50, 50))


class TestRender:

    def test_blank_pixel_map_gives_background_only(self):
        img = _decode(render([], RED))
        assert img.size == (250, 250)
        assert img.getcolors() == [(250 * 250, WHITE)]

    def test_cells_and_shared_edges(self):
        # cells 1 and 3 of the top row
        pixel_map = [((50, 0), (100, 50)), ((150, 0), (200, 50))]
        img = _decode(render(pixel_map, RED))

        assert img.getpixel((75, 25)) == RED
        assert img.getpixel((25, 25)) == WHITE
        assert img.getpixel((50, 10)) == RED
        assert img.getpixel((49, 10)) == WHITE
        assert img.getpixel((200, 10)) == RED
        assert img.getpixel((201, 10)) == WHITE
        assert img.getpixel((75, 50)) == RED
        assert img.getpixel((75, 51)) == WHITE

    def test_last_cell_reaches_canvas_corner(self):
        img = _decode(render([((200, 200), (250, 250))], RED))
        assert img.getpixel((249, 249)) == RED
        assert img.getpixel((199, 249)) == WHITE

    def test_output_is_png(self):
        assert render([], RED)[:8] == b"\x89PNG\r\n\x1a\n"

    def test_bmp_format(self):
        assert render([], RED, image_format="bmp")[:2] == b"BM"

    def test_custom_canvas_size(self):
        img = _decode(render([((0, 0), (10, 10))], RED, canvas_size=(50, 50)))
        assert img.size == (50, 50)

    def test_render_order_does_not_change_bytes(self):
        rects = [((0, 0), (50, 50)), ((50, 0), (100, 50)), ((0, 50), (50, 100))]
        assert render(rects, RED) == render(list(reversed(rects)), RED)

    def test_deterministic(self):
        rects = [((0, 0), (50, 50))]
        assert render(rects, RED) == render(rects, RED)

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported image format"):
            encode(new_canvas((2, 2)), "tga")
