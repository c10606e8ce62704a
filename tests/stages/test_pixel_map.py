"""Tests for cell to rectangle mapping."""

import itertools

import pytest

from identicon.stages.pixel_map import build_pixel_map, cell_rect

pytestmark = pytest.mark.unit


def test_first_cell():
    assert cell_rect(0) == ((0, 0), (50, 50))


def test_index_wraps_to_next_row():
    assert cell_rect(5) == ((0, 50), (50, 100))
    assert cell_rect(7) == ((100, 50), (150, 100))


def test_last_cell():
    assert cell_rect(24) == ((200, 200), (250, 250))


def test_value_is_ignored():
    assert build_pixel_map([(0, 3)]) == build_pixel_map([(254, 3)])


def test_preserves_input_order():
    rects = build_pixel_map([(2, 9), (4, 1)])
    assert rects == [((200, 50), (250, 100)), ((50, 0), (100, 50))]


def test_custom_cell_size():
    assert build_pixel_map([(0, 6)], cell_size=10) == [((10, 10), (20, 20))]


def test_no_bounds_checking():
    # index 25 maps below the canvas; the pixel map contract rejects it
    assert build_pixel_map([(0, 25)]) == [((0, 250), (50, 300))]


def test_empty_grid():
    assert build_pixel_map([]) == []


def test_full_grid_tiles_canvas():
    rects = build_pixel_map([(0, i) for i in range(25)])

    assert len(set(rects)) == 25
    area = sum((x1 - x0) * (y1 - y0) for (x0, y0), (x1, y1) in rects)
    assert area == 250 * 250

    # Half-open interiors never overlap
    for ((ax0, ay0), (ax1, ay1)), ((bx0, by0), (bx1, by1)) in itertools.combinations(rects, 2):
        overlap_x = min(ax1, bx1) - max(ax0, bx0)
        overlap_y = min(ay1, by1) - max(ay0, by0)
        assert overlap_x <= 0 or overlap_y <= 0

    xs = {x for (x0, _), (x1, _) in rects for x in (x0, x1)}
    ys = {y for (_, y0), (_, y1) in rects for y in (y0, y1)}
    assert min(xs) == 0 and max(xs) == 250
    assert min(ys) == 0 and max(ys) == 250
