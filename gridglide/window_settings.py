"""Settings groups for the main window and keyboard handling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class WindowSettings:
    """Window behaviour: refresh rate, idling, transparency and sizing."""

    refresh_rate: int = 60
    no_idle: bool = False
    transparency: float = 1.0
    fullscreen: bool = False
    iso_layout: bool = False
    remember_window_size: bool = False


@dataclass
class KeyboardSettings:
    """Keyboard input options."""

    use_logo: bool = False