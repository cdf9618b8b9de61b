"""Position and scroll animation state of a window drawn on the grid."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any

from gridglide.animation import F32_EPSILON, Point, ease, ease_out_expo, ease_point
from gridglide.dimensions import Dimensions

# A t outside 0..1 means the animation is stopped.
_STOPPED = 2.0
_MAX_SNAPSHOTS = 5


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its edges."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(x, y, x + width, y + height)

    @classmethod
    def from_wh(cls, width: float, height: float) -> Rect:
        return cls(0.0, 0.0, width, height)

    @classmethod
    def from_point_and_size(cls, point: Point, size: tuple[float, float]) -> Rect:
        width, height = size
        return cls.from_xywh(point.x, point.y, width, height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2.0

    def with_offset(self, offset: tuple[float, float]) -> Rect:
        """The same rectangle moved by (dx, dy)."""
        dx, dy = offset
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def contains(self, x: float, y: float) -> bool:
        """True when (x, y) lies inside, right and bottom edges excluded."""
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class WindowDrawDetails:
    """Where a window was drawn and whether it floats."""

    id: int
    region: Rect
    floating_order: int | None


def _advance(t: float, dt: float, length: float) -> float:
    if length == 0.0:
        return 1.0
    return min(t + dt / length, 1.0)


class RenderedWindow:
    """Tracks a window's animated position on the grid and its scroll offset."""

    def __init__(self, id: int, grid_position: Point, grid_size: Dimensions) -> None:
        self.id = id
        self.hidden = False
        self.floating_order: int | None = None
        self.grid_size = grid_size

        # Top lines of earlier viewports still being scrolled away from.
        self.snapshots: deque[int] = deque()
        self.top_line = 0

        self.grid_start_position = grid_position
        self.grid_current_position = grid_position
        self.grid_destination = grid_position
        self.position_t = _STOPPED

        self.start_scroll = 0.0
        self.current_scroll = 0.0
        self.scroll_destination = 0.0
        self.scroll_t = _STOPPED

    def pixel_region(self, font_dimensions: Dimensions) -> Rect:
        """The window's current area in pixels."""
        position = Point(
            self.grid_current_position.x * font_dimensions.width,
            self.grid_current_position.y * font_dimensions.height,
        )
        size = (self.grid_size * font_dimensions).as_tuple()
        return Rect.from_point_and_size(position, size)

    def update(self, settings: Any, dt: float) -> bool:
        """Advance position and scroll animations; True while either is running."""
        animating = False

        if 1.0 - self.position_t < F32_EPSILON:
            self.position_t = _STOPPED
        else:
            animating = True
            self.position_t = _advance(
                self.position_t, dt, settings.position_animation_length
            )
        self.grid_current_position = ease_point(
            ease_out_expo,
            self.grid_start_position,
            self.grid_destination,
            self.position_t,
        )

        if 1.0 - self.scroll_t < F32_EPSILON:
            self.scroll_t = _STOPPED
            self.snapshots.clear()
        else:
            animating = True
            self.scroll_t = _advance(
                self.scroll_t, dt, settings.scroll_animation_length
            )
        self.current_scroll = ease(
            ease_out_expo, self.start_scroll, self.scroll_destination, self.scroll_t
        )

        return animating

    def handle_position(
        self,
        grid_position: tuple[float, float],
        grid_size: Dimensions | tuple[int, int],
        floating_order: int | None,
    ) -> None:
        """Move and resize the window, animating the move where appropriate."""
        left, top = grid_position
        new_destination = Point(float(left), float(top))
        if not isinstance(grid_size, Dimensions):
            grid_size = Dimensions.from_tuple(grid_size)

        if self.grid_destination != new_destination:
            start = self.grid_start_position
            if abs(start.x) > F32_EPSILON or abs(start.y) > F32_EPSILON:
                self.position_t = 0.0
                self.grid_start_position = self.grid_current_position
            else:
                # Windows appearing from the origin jump straight into place.
                self.position_t = _STOPPED
                self.grid_start_position = new_destination
            self.grid_destination = new_destination

        if self.grid_size != grid_size:
            self.grid_size = grid_size

        self.floating_order = floating_order

        if self.hidden:
            self.hidden = False
            self.position_t = _STOPPED
            self.grid_start_position = new_destination
            self.grid_destination = new_destination

    def show(self) -> None:
        """Make a hidden window visible without animating its position."""
        if self.hidden:
            self.hidden = False
            self.position_t = _STOPPED
            self.grid_start_position = self.grid_destination

    def hide(self) -> None:
        self.hidden = True

    def handle_viewport(self, top_line: int) -> None:
        """Start scrolling towards a new top line."""
        if self.top_line == top_line:
            return
        self.snapshots.append(self.top_line)
        if len(self.snapshots) > _MAX_SNAPSHOTS:
            self.snapshots.popleft()
        self.top_line = top_line

        self.start_scroll = self.current_scroll
        self.scroll_destination = float(top_line)
        self.scroll_t = 0.0

    def draw_details(self, font_dimensions: Dimensions) -> WindowDrawDetails:
        """Details of the window as it would be drawn now."""
        return WindowDrawDetails(
            id=self.id,
            region=self.pixel_region(font_dimensions),
            floating_order=self.floating_order,
        )