"""Cursor shape geometry, animation settings and animated cursor corners."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace
from typing import Protocol, Sequence

from gridglide.animation import F32_EPSILON, Point, ease_out_expo, ease_point, lerp
from gridglide.cursor_vfx import VfxMode
from gridglide.dimensions import Dimensions

DEFAULT_CELL_PERCENTAGE = 1.0 / 8.0

STANDARD_CORNERS: tuple[tuple[float, float], ...] = (
    (-0.5, -0.5),
    (0.5, -0.5),
    (0.5, 0.5),
    (-0.5, 0.5),
)


class CursorShape(enum.Enum):
    """How the cursor covers its cell."""

    BLOCK = "block"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass
class CursorSettings:
    """Options controlling cursor animation and effects."""

    antialiasing: bool = True
    animation_length: float = 0.06
    distance_length_adjust: bool = True
    animate_in_insert_mode: bool = True
    animate_command_line: bool = True
    trail_size: float = 0.7
    vfx_mode: VfxMode = VfxMode.DISABLED
    vfx_opacity: float = 200.0
    vfx_particle_lifetime: float = 1.2
    vfx_particle_density: float = 7.0
    vfx_particle_speed: float = 10.0
    vfx_particle_phase: float = 1.5
    vfx_particle_curl: float = 1.0


@dataclass
class Corner:
    """One of the four corners of the cursor, animated independently."""

    start_position: Point = field(default_factory=Point)
    current_position: Point = field(default_factory=Point)
    relative_position: Point = field(default_factory=Point)
    previous_destination: Point = field(default_factory=lambda: Point(-1000.0, -1000.0))
    length_multiplier: float = 1.0
    t: float = 0.0

    def update(
        self,
        settings: CursorSettings,
        font_dimensions: Point,
        destination: Point,
        dt: float,
        immediate_movement: bool,
    ) -> bool:
        """Move the corner towards destination; returns True while it is animating."""
        if destination != self.previous_destination:
            self.t = 0.0
            self.start_position = self.current_position
            self.previous_destination = destination
            if settings.distance_length_adjust:
                distance = (destination - self.current_position).length()
                self.length_multiplier = (
                    max(math.log10(distance), 0.0) if distance > 0.0 else 0.0
                )
            else:
                self.length_multiplier = 1.0

        if abs(self.t - 1.0) < F32_EPSILON:
            return False

        relative_scaled = Point(
            self.relative_position.x * font_dimensions.x,
            self.relative_position.y * font_dimensions.y,
        )
        corner_destination = destination + relative_scaled

        if immediate_movement:
            self.t = 1.0
            self.current_position = corner_destination
            return True

        # Corners leading the motion move faster than those trailing behind it.
        travel_direction = (destination - self.current_position).normalized()
        corner_direction = self.relative_position.normalized()
        direction_alignment = travel_direction.dot(corner_direction)

        trail = min(max(1.0 - settings.trail_size, 0.0), 1.0)
        corner_dt = dt * lerp(1.0, trail, -direction_alignment)
        duration = settings.animation_length * self.length_multiplier
        if duration == 0.0:
            self.t = 1.0
        else:
            self.t = min(self.t + corner_dt / duration, 1.0)

        self.current_position = ease_point(
            ease_out_expo, self.start_position, corner_destination, self.t
        )
        return True


def _relative_position(
    shape: CursorShape, x: float, y: float, cell_percentage: float
) -> Point:
    if shape is CursorShape.VERTICAL:
        return Point((x + 0.5) * cell_percentage - 0.5, y)
    if shape is CursorShape.HORIZONTAL:
        return Point(x, -((-y + 0.5) * cell_percentage - 0.5))
    return Point(x, y)


def corners_for_shape(
    corners: Sequence[Corner], cursor_shape: CursorShape, cell_percentage: float
) -> list[Corner]:
    """New corners laid out for a shape, restarting their animation from where they are."""
    return [
        replace(
            corner,
            relative_position=_relative_position(cursor_shape, x, y, cell_percentage),
            t=0.0,
            start_position=corner.current_position,
        )
        for corner, (x, y) in zip(corners, STANDARD_CORNERS)
    ]


class _GridWindow(Protocol):
    grid_current_position: Point
    grid_size: Dimensions
    current_scroll: float
    top_line: int


def cursor_destination(
    grid_position: tuple[int, int],
    font_dimensions: Dimensions,
    window: _GridWindow | None,
) -> Point:
    """Pixel position the cursor should move to, kept inside its window vertically."""
    cursor_x, cursor_y = grid_position
    font_width, font_height = font_dimensions.as_tuple()

    if window is None:
        return Point(float(cursor_x * font_width), float(cursor_y * font_height))

    origin = window.grid_current_position
    grid_x = cursor_x + origin.x
    grid_y = cursor_y + origin.y - (window.current_scroll - window.top_line)
    grid_y = min(max(grid_y, origin.y), origin.y + window.grid_size.height - 1.0)
    return Point(grid_x * font_width, grid_y * font_height)