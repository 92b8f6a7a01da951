"""Test cursor motion across lines, wide glyphs and buffer edges."""

from unittest.mock import Mock

import pytest

from glyphedit.buffer import Buffer
from glyphedit.model import Direction, Location, Position, Size
from glyphedit.terminal import DisplaySink
from glyphedit.view import View


def make_view(lines, width=80, height=24):
    """Create a view over ``lines`` drawing into a mock sink."""
    sink = Mock(spec=DisplaySink)
    sink.get_viewport_size.return_value = Size(width, height)
    return View(sink, Buffer(lines))


def test_right_at_end_of_line_wraps_to_next_line():
    view = make_view(["ab", "cd"])
    view.text_location = Location(0, 2)
    view.move_text_location(Direction.RIGHT)
    assert view.text_location == Location(1, 0)


def test_left_at_start_of_line_wraps_to_previous_end():
    view = make_view(["ab", "cd"])
    view.text_location = Location(1, 0)
    view.move_text_location(Direction.LEFT)
    assert view.text_location == Location(0, 2)


def test_left_at_start_of_buffer_is_noop():
    view = make_view(["ab"])
    view.move_text_location(Direction.LEFT)
    assert view.text_location == Location(0, 0)


def test_right_walks_whole_buffer_then_stops():
    """Repeated right visits every grapheme and then stays put."""
    view = make_view(["ab", "cd"])
    visited = []
    for _ in range(10):
        view.move_text_location(Direction.RIGHT)
        visited.append((view.text_location.line_index, view.text_location.grapheme_index))
    assert visited[:6] == [(0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0)]
    assert set(visited[5:]) == {(2, 0)}


def test_right_moves_over_whole_cluster():
    view = make_view(["e\u0301x"])
    view.move_text_location(Direction.RIGHT)
    assert view.text_location == Location(0, 1)
    assert view.text_location_to_position() == Position(0, 1)


def test_down_clamps_column_to_shorter_line():
    view = make_view(["a long line", "ab"])
    view.text_location = Location(0, 7)
    view.move_text_location(Direction.DOWN)
    assert view.text_location == Location(1, 2)


def test_vertical_motion_does_not_remember_column():
    view = make_view(["a long line", "ab", "another long line"])
    view.text_location = Location(0, 7)
    view.move_text_location(Direction.DOWN)
    view.move_text_location(Direction.DOWN)
    assert view.text_location == Location(2, 2)
    view.move_text_location(Direction.UP)
    view.move_text_location(Direction.UP)
    assert view.text_location == Location(0, 2)


def test_up_at_first_line_stays():
    view = make_view(["abc"])
    view.text_location = Location(0, 2)
    view.move_text_location(Direction.UP)
    assert view.text_location == Location(0, 2)


def test_down_stops_one_past_last_line():
    view = make_view(["abc", "de"])
    view.text_location = Location(1, 1)
    view.move_text_location(Direction.DOWN)
    assert view.text_location == Location(2, 0)
    view.move_text_location(Direction.DOWN)
    assert view.text_location == Location(2, 0)


def test_home_and_end():
    view = make_view(["hello"])
    view.text_location = Location(0, 2)
    view.move_text_location(Direction.END)
    assert view.text_location == Location(0, 5)
    view.move_text_location(Direction.HOME)
    assert view.text_location == Location(0, 0)


def test_page_down_moves_by_height_minus_one():
    view = make_view([f"Line {i}" for i in range(20)], height=5)
    view.move_text_location(Direction.PAGE_DOWN)
    assert view.text_location == Location(4, 0)
    view.move_text_location(Direction.PAGE_DOWN)
    assert view.text_location == Location(8, 0)


def test_page_down_clamps_at_end_of_buffer():
    view = make_view([f"Line {i}" for i in range(6)], height=5)
    for _ in range(3):
        view.move_text_location(Direction.PAGE_DOWN)
    assert view.text_location == Location(6, 0)


def test_page_up_moves_by_height_minus_one():
    view = make_view([f"Line {i}" for i in range(20)], height=5)
    view.text_location = Location(10, 3)
    view.move_text_location(Direction.PAGE_UP)
    assert view.text_location == Location(6, 3)
    view.move_text_location(Direction.PAGE_UP)
    view.move_text_location(Direction.PAGE_UP)
    assert view.text_location == Location(0, 3)


def test_position_uses_display_width():
    view = make_view(["你好x"])
    view.text_location = Location(0, 2)
    assert view.text_location_to_position() == Position(0, 4)


def test_position_on_line_after_last_is_column_zero():
    view = make_view(["abc"])
    view.text_location = Location(1, 0)
    assert view.text_location_to_position() == Position(1, 0)


def test_out_of_range_location_is_clamped_on_motion():
    view = make_view(["abc", "de"])
    view.text_location = Location(40, 40)
    view.move_text_location(Direction.LEFT)
    assert view.text_location == Location(1, 2)


def test_motion_in_empty_buffer():
    view = make_view([])
    for direction in Direction:
        view.move_text_location(direction)
        assert view.text_location == Location(0, 0)


def test_locations_compare_by_value_only():
    assert Location(1, 2) == Location(1, 2)
    assert Location(1, 2) != Location(2, 1)
    with pytest.raises(TypeError):
        Location(0, 1) < Location(1, 0)
