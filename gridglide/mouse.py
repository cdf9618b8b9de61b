"""Translation of pointer events into editor mouse commands."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Union

from gridglide.dimensions import Dimensions
from gridglide.keyboard import KeyboardManager
from gridglide.rendered_window import Rect, WindowDrawDetails

_U32_MASK = 0xFFFF_FFFF


@dataclass(frozen=True)
class DragCommand:
    button: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str


@dataclass(frozen=True)
class MouseButtonCommand:
    button: str
    action: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str


@dataclass(frozen=True)
class ScrollCommand:
    direction: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str


MouseCommand = Union[DragCommand, MouseButtonCommand, ScrollCommand]


def clamp_position(
    position: tuple[float, float], region: Rect, font_dimensions: Dimensions
) -> tuple[float, float]:
    """Keep a pixel position inside region, leaving room for one cell."""
    x, y = position
    return (
        max(min(x, region.right - font_dimensions.width), region.left),
        max(min(y, region.bottom - font_dimensions.height), region.top),
    )


def _to_unsigned(value: float) -> int:
    if math.isnan(value) or value <= 0.0:
        return 0
    return int(value)


def to_grid_coords(
    position: tuple[float, float], font_dimensions: Dimensions
) -> tuple[int, int]:
    """Convert a pixel position to grid cell coordinates."""
    x, y = position
    return (
        (_to_unsigned(x) // font_dimensions.width) & _U32_MASK,
        (_to_unsigned(y) // font_dimensions.height) & _U32_MASK,
    )


_BUTTON_TEXT = {"left": "left", "right": "right", "middle": "middle"}


def mouse_button_to_button_text(button: str) -> str | None:
    """The editor's name for a button, or None for buttons it does not know."""
    return _BUTTON_TEXT.get(button.lower())


def _trunc(value: float) -> int:
    if math.isnan(value):
        return 0
    return math.trunc(value)


class MouseManager:
    """Tracks the pointer over rendered windows and emits mouse commands."""

    def __init__(self, command_sender: Callable[[MouseCommand], None]) -> None:
        self.command_sender = command_sender
        self.dragging: str | None = None
        self.drag_position: tuple[int, int] = (0, 0)
        self.has_moved = False
        self.position: tuple[int, int] = (0, 0)
        self.relative_position: tuple[int, int] = (0, 0)
        self.scroll_x = 0.0
        self.scroll_y = 0.0
        self.window_details_under_mouse: WindowDrawDetails | None = None
        self.enabled = True

    def handle_pointer_motion(
        self,
        x: int,
        y: int,
        keyboard_manager: KeyboardManager,
        window_regions: Sequence[WindowDrawDetails],
        font_dimensions: Dimensions,
        window_size: tuple[int, int],
    ) -> None:
        """Update the pointer position, sending a drag command while dragging."""
        width, height = window_size
        if x < 0 or x >= width or y < 0 or y >= height:
            return

        position = (float(x), float(y))

        if self.dragging is not None:
            # While dragging, commands go to the window the drag started on.
            if self.window_details_under_mouse is None:
                raise RuntimeError("If dragging, there should be a window details recorded")
            drag_id = self.window_details_under_mouse.id
            relevant = next(
                (details for details in window_regions if details.id == drag_id), None
            )
        else:
            # Regions are in draw order, so the last match is on top.
            relevant = None
            for details in window_regions:
                if details.region.contains(*position):
                    relevant = details

        bounds = relevant.region if relevant is not None else Rect.from_wh(width, height)
        clamped = clamp_position(position, bounds, font_dimensions)
        self.position = to_grid_coords(clamped, font_dimensions)

        if relevant is None:
            return

        relative = (clamped[0] - relevant.region.left, clamped[1] - relevant.region.top)
        self.relative_position = to_grid_coords(relative, font_dimensions)

        previous_position = self.drag_position
        # Floating windows take relative coordinates, the others global ones.
        if relevant.floating_order is not None:
            self.drag_position = self.relative_position
        else:
            self.drag_position = self.position

        has_moved = self.drag_position != previous_position

        if self.dragging is not None and has_moved:
            self.command_sender(
                DragCommand(
                    button=self.dragging,
                    grid_id=relevant.id,
                    position=self.drag_position,
                    modifier_string=keyboard_manager.format_modifier_string(True),
                )
            )
        else:
            self.window_details_under_mouse = relevant

        self.has_moved = self.dragging is not None and (self.has_moved or has_moved)

    def handle_pointer_transition(
        self, button: str, down: bool, keyboard_manager: KeyboardManager
    ) -> None:
        """Send a press or release for a button and track dragging."""
        if not self.enabled:
            return
        button_text = mouse_button_to_button_text(button)
        if button_text is None:
            return

        details = self.window_details_under_mouse
        if details is not None:
            if not down and self.has_moved:
                position = self.drag_position
            else:
                position = self.relative_position
            self.command_sender(
                MouseButtonCommand(
                    button=button_text,
                    action="press" if down else "release",
                    grid_id=details.id,
                    position=position,
                    modifier_string=keyboard_manager.format_modifier_string(True),
                )
            )

        self.dragging = button_text if down else None
        if self.dragging is None:
            self.has_moved = False

    def _send_scrolls(
        self,
        previous: int,
        new: int,
        forward: str,
        backward: str,
        keyboard_manager: KeyboardManager,
    ) -> None:
        if new == previous:
            return
        direction = forward if new > previous else backward
        grid_id = (
            self.window_details_under_mouse.id
            if self.window_details_under_mouse is not None
            else 0
        )
        command = ScrollCommand(
            direction=direction,
            grid_id=grid_id,
            position=self.drag_position,
            modifier_string=keyboard_manager.format_modifier_string(True),
        )
        for _ in range(abs(new - previous)):
            self.command_sender(command)

    def handle_line_scroll(
        self, x: float, y: float, keyboard_manager: KeyboardManager
    ) -> None:
        """Accumulate a scroll in lines, sending one command per whole line."""
        if not self.enabled:
            return

        previous_y = _trunc(self.scroll_y)
        self.scroll_y += y
        self._send_scrolls(previous_y, _trunc(self.scroll_y), "up", "down", keyboard_manager)

        previous_x = _trunc(self.scroll_x)
        self.scroll_x += x
        self._send_scrolls(previous_x, _trunc(self.scroll_x), "right", "left", keyboard_manager)

    def handle_pixel_scroll(
        self,
        font_dimensions: Dimensions,
        pixel_delta: tuple[float, float],
        keyboard_manager: KeyboardManager,
    ) -> None:
        """Scroll by a pixel amount, converted to lines and columns."""
        pixel_x, pixel_y = pixel_delta
        self.handle_line_scroll(
            pixel_x / font_dimensions.width,
            pixel_y / font_dimensions.height,
            keyboard_manager,
        )