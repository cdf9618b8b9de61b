import pytest

from gridglide.animation import Point
from gridglide.cursor import (
    DEFAULT_CELL_PERCENTAGE,
    STANDARD_CORNERS,
    Corner,
    CursorSettings,
    CursorShape,
    corners_for_shape,
    cursor_destination,
)
from gridglide.cursor_vfx import VfxMode
from gridglide.dimensions import Dimensions
from gridglide.rendered_window import RenderedWindow

FONT = Point(8.0, 16.0)


def _shaped(shape, cell_percentage=DEFAULT_CELL_PERCENTAGE):
    return corners_for_shape([Corner() for _ in range(4)], shape, cell_percentage)


def test_default_settings():
    settings = CursorSettings()
    assert settings.animation_length == 0.06
    assert settings.trail_size == 0.7
    assert settings.vfx_mode is VfxMode.DISABLED
    assert settings.vfx_opacity == 200.0


def test_default_corner_previous_destination():
    assert Corner().previous_destination == Point(-1000.0, -1000.0)


def test_block_corners_match_standard():
    corners = _shaped(CursorShape.BLOCK)
    assert [(c.relative_position.x, c.relative_position.y) for c in corners] == list(
        STANDARD_CORNERS
    )


def test_vertical_full_cell_equals_block():
    vertical = _shaped(CursorShape.VERTICAL, 1.0)
    block = _shaped(CursorShape.BLOCK)
    assert [c.relative_position for c in vertical] == [c.relative_position for c in block]


def test_vertical_bar_is_anchored_left_with_cell_width():
    corners = _shaped(CursorShape.VERTICAL, 0.25)
    xs = [c.relative_position.x for c in corners]
    assert min(xs) == -0.5
    assert max(xs) - min(xs) == pytest.approx(0.25)
    assert [c.relative_position.y for c in corners] == [y for _, y in STANDARD_CORNERS]


def test_horizontal_bar_is_anchored_bottom_with_cell_height():
    corners = _shaped(CursorShape.HORIZONTAL, 0.25)
    ys = [c.relative_position.y for c in corners]
    assert max(ys) == 0.5
    assert max(ys) - min(ys) == pytest.approx(0.25)
    assert [c.relative_position.x for c in corners] == [x for x, _ in STANDARD_CORNERS]


def test_reshaping_restarts_from_current_position():
    corner = Corner(current_position=Point(3.0, 4.0), t=1.0)
    (reshaped,) = corners_for_shape([corner], CursorShape.BLOCK, 1.0)
    assert reshaped.t == 0.0
    assert reshaped.start_position == Point(3.0, 4.0)
    assert reshaped.current_position == Point(3.0, 4.0)
    assert corner.t == 1.0


def test_immediate_movement_jumps_to_destination():
    corner = _shaped(CursorShape.BLOCK)[2]
    destination = Point(100.0, 200.0)
    assert corner.update(CursorSettings(), FONT, destination, 0.01, True) is True
    expected = destination + Point(
        corner.relative_position.x * FONT.x, corner.relative_position.y * FONT.y
    )
    assert corner.current_position == expected
    assert corner.t == 1.0
    assert corner.update(CursorSettings(), FONT, destination, 0.01, True) is False


def test_animation_moves_towards_and_reaches_destination():
    settings = CursorSettings()
    corner = _shaped(CursorShape.BLOCK)[0]
    destination = Point(400.0, 300.0)
    target = destination + Point(
        corner.relative_position.x * FONT.x, corner.relative_position.y * FONT.y
    )
    initial_distance = (target - corner.current_position).length()

    assert corner.update(settings, FONT, destination, 0.005, False) is True
    assert 0.0 < corner.t < 1.0
    assert (target - corner.current_position).length() < initial_distance

    for _ in range(1000):
        if not corner.update(settings, FONT, destination, 0.005, False):
            break
    assert corner.t == 1.0
    assert corner.current_position.x == pytest.approx(target.x)
    assert corner.current_position.y == pytest.approx(target.y)


def test_length_multiplier_disabled():
    settings = CursorSettings(distance_length_adjust=False)
    corner = Corner()
    corner.update(settings, FONT, Point(500.0, 0.0), 0.001, False)
    assert corner.length_multiplier == 1.0


def test_length_multiplier_grows_with_distance():
    settings = CursorSettings()
    near, far = Corner(), Corner()
    near.update(settings, FONT, Point(20.0, 0.0), 0.001, False)
    far.update(settings, FONT, Point(2000.0, 0.0), 0.001, False)
    assert 0.0 < near.length_multiplier < far.length_multiplier


def test_tiny_move_finishes_in_one_step():
    corner = Corner()
    assert corner.update(CursorSettings(), FONT, Point(0.5, 0.0), 0.001, False) is True
    assert corner.t == 1.0
    assert corner.update(CursorSettings(), FONT, Point(0.5, 0.0), 0.001, False) is False


def test_destination_without_window():
    dims = Dimensions(8, 16)
    x, y = dims.scale_position((2, 3))
    assert cursor_destination((2, 3), dims, None) == Point(float(x), float(y))


def test_destination_inside_window_offsets_by_window_origin():
    dims = Dimensions(8, 16)
    window = RenderedWindow(1, Point(5.0, 2.0), Dimensions(10, 4))
    inside = cursor_destination((1, 1), dims, window)
    bare = cursor_destination((6, 3), dims, None)
    assert inside == bare


def test_destination_clamped_to_window_bottom():
    dims = Dimensions(8, 16)
    window = RenderedWindow(1, Point(5.0, 2.0), Dimensions(10, 4))
    far_below = cursor_destination((0, 50), dims, window)
    last_row = cursor_destination((0, 3), dims, window)
    assert far_below == last_row


def test_destination_follows_pending_scroll():
    dims = Dimensions(8, 16)
    window = RenderedWindow(1, Point(0.0, 0.0), Dimensions(10, 20))
    before = cursor_destination((0, 2), dims, window)
    window.handle_viewport(3)
    after = cursor_destination((0, 2), dims, window)
    assert after.y > before.y
    assert after.x == before.x