from types import SimpleNamespace

import pytest

from gridglide.animation import Point
from gridglide.dimensions import Dimensions
from gridglide.rendered_window import Rect, RenderedWindow, WindowDrawDetails

SETTINGS = SimpleNamespace(position_animation_length=0.15, scroll_animation_length=0.3)
FONT = Dimensions(8, 16)


def make_window(x=2.0, y=3.0):
    return RenderedWindow(7, Point(x, y), Dimensions(10, 5))


def test_pixel_region_of_new_window():
    window = make_window()
    region = window.pixel_region(FONT)
    assert region == Rect(16.0, 48.0, 96.0, 128.0)


def test_rect_offset_keeps_size():
    rect = Rect.from_xywh(1.0, 2.0, 3.0, 4.0)
    moved = rect.with_offset((5.0, -2.0))
    assert moved.width == rect.width
    assert moved.height == rect.height
    assert moved.left == rect.left + 5.0
    assert moved.top == rect.top - 2.0


def test_rect_contains_excludes_far_edges():
    rect = Rect.from_wh(10.0, 10.0)
    assert rect.contains(0.0, 0.0)
    assert not rect.contains(10.0, 5.0)


def test_fresh_window_is_not_animating():
    window = make_window()
    assert window.update(SETTINGS, 0.016) is False
    assert window.grid_current_position.x == pytest.approx(2.0)
    assert window.grid_current_position.y == pytest.approx(3.0)


def test_move_animates_then_settles():
    window = make_window()
    window.handle_position((6, 9), (10, 5), None)
    assert window.update(SETTINGS, 0.05) is True
    assert 2.0 < window.grid_current_position.x < 6.0
    assert window.update(SETTINGS, 1.0) is True
    assert window.grid_current_position == Point(6.0, 9.0)
    assert window.update(SETTINGS, 0.016) is False
    assert window.grid_current_position.x == pytest.approx(6.0, abs=1e-3)


def test_move_from_origin_jumps():
    window = make_window(0.0, 0.0)
    window.handle_position((4, 5), (10, 5), None)
    assert window.update(SETTINGS, 0.016) is False
    assert window.grid_current_position.x == pytest.approx(4.0)
    assert window.grid_current_position.y == pytest.approx(5.0)


def test_resize_and_floating_order():
    window = make_window()
    window.handle_position((2, 3), (20, 8), 3)
    assert window.grid_size == Dimensions(20, 8)
    assert window.floating_order == 3


def test_hide_and_show():
    window = make_window()
    window.hide()
    assert window.hidden
    window.show()
    assert not window.hidden
    assert window.update(SETTINGS, 0.016) is False


def test_position_unhides_without_animation():
    window = make_window()
    window.hide()
    window.handle_position((8, 1), (10, 5), None)
    assert not window.hidden
    assert window.update(SETTINGS, 0.016) is False
    assert window.grid_current_position.x == pytest.approx(8.0)


def test_viewport_scrolls_and_clears_snapshots():
    window = make_window()
    window.handle_viewport(3)
    assert list(window.snapshots) == [0]
    assert window.update(SETTINGS, 0.1) is True
    assert 0.0 < window.current_scroll < 3.0
    window.update(SETTINGS, 1.0)
    assert window.current_scroll == pytest.approx(3.0)
    assert window.update(SETTINGS, 0.016) is False
    assert len(window.snapshots) == 0


def test_same_viewport_is_noop():
    window = make_window()
    window.handle_viewport(0)
    assert len(window.snapshots) == 0
    assert window.update(SETTINGS, 0.016) is False


def test_snapshots_are_capped():
    window = make_window()
    for line in range(1, 10):
        window.handle_viewport(line)
    assert len(window.snapshots) == 5
    assert list(window.snapshots) == [4, 5, 6, 7, 8]


def test_zero_animation_length_finishes_immediately():
    settings = SimpleNamespace(position_animation_length=0.0, scroll_animation_length=0.0)
    window = make_window()
    window.handle_position((6, 9), (10, 5), None)
    window.handle_viewport(2)
    assert window.update(settings, 0.016) is True
    assert window.grid_current_position == Point(6.0, 9.0)
    assert window.current_scroll == pytest.approx(2.0)


def test_draw_details():
    window = make_window()
    window.handle_position((2, 3), (10, 5), 4)
    details = window.draw_details(FONT)
    assert details == WindowDrawDetails(id=7, region=window.pixel_region(FONT), floating_order=4)