"""Tests for fill color selection."""

import pytest

from identicon.contracts import InsufficientDataError
from identicon.stages.color import pick_color
from tests.helpers.vectors import APPLE_HASH, APPLE_COLOR

pytestmark = pytest.mark.unit


def test_first_three_bytes_are_the_color():
    assert pick_color([1, 2, 3, 4]) == (1, 2, 3)


def test_exactly_three_bytes():
    assert pick_color([0, 128, 255]) == (0, 128, 255)


def test_apple_color():
    assert pick_color(APPLE_HASH) == APPLE_COLOR


def test_accepts_tuple_input():
    assert pick_color((9, 8, 7, 6)) == (9, 8, 7)


@pytest.mark.parametrize("short", [[], [1], [1, 2]])
def test_short_hash_raises(short):
    with pytest.raises(InsufficientDataError) as exc_info:
        pick_color(short)

    assert exc_info.value.required == 3
    assert exc_info.value.actual == len(short)


def test_insufficient_data_is_value_error():
    assert issubclass(InsufficientDataError, ValueError)
