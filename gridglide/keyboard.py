"""Translation of keyboard events into editor keybinding strings."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable

from gridglide.window_settings import KeyboardSettings

_CONTROL_KEYS = {
    "Backspace": "BS",
    "Escape": "Esc",
    "Delete": "Del",
    "ArrowUp": "Up",
    "ArrowDown": "Down",
    "ArrowLeft": "Left",
    "ArrowRight": "Right",
    "F1": "F1",
    "F2": "F2",
    "F3": "F3",
    "F4": "F4",
    "F5": "F5",
    "F6": "F6",
    "F7": "F7",
    "F8": "F8",
    "F9": "F9",
    "F10": "F10",
    "F11": "F11",
    "F12": "F12",
    "Insert": "Insert",
    "Home": "Home",
    "End": "End",
    "PageUp": "PageUp",
    "PageDown": "PageDown",
    "Tab": "Tab",
}

_SPECIAL_TEXT = {
    " ": "Space",
    "<": "lt",
    "\\": "Bslash",
    "|": "Bar",
    "\t": "Tab",
    "\n": "CR",
}


def control_key_name(key: str) -> str | None:
    """Name of a key that never produces text, or None for other keys."""
    return _CONTROL_KEYS.get(key)


def special_text_name(text: str) -> str | None:
    """Escaped name for text that must be written in angle brackets, if any."""
    return _SPECIAL_TEXT.get(text)


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release.

    logical_key is the key's name (such as "Escape" or "ArrowUp") or the
    character it stands for; text is what the key types with the current
    modifiers applied by the platform, and text_with_all_modifiers is the text
    with every modifier applied, which differs for dead keys.
    """

    logical_key: str
    pressed: bool = True
    text: str | None = None
    text_with_all_modifiers: str | None = None


class KeyboardManager:
    """Collects key events over a frame and turns them into keybindings."""

    def __init__(
        self,
        command_sender: Callable[[str], None] | None = None,
        is_macos: bool | None = None,
    ) -> None:
        self.command_sender = command_sender
        self.is_macos = sys.platform == "darwin" if is_macos is None else is_macos
        self.shift = False
        self.ctrl = False
        self.alt = False
        self.logo = False
        self.ignore_input_this_frame = False
        self.queued_key_events: list[KeyEvent] = []

    def handle_focus_changed(self) -> None:
        """Ignore the keys of this frame, as focus was just gained or lost."""
        self.ignore_input_this_frame = True

    def handle_key_event(self, key_event: KeyEvent) -> None:
        """Queue a key event until the end of the frame."""
        self.queued_key_events.append(key_event)

    def handle_modifiers_changed(
        self, shift: bool, ctrl: bool, alt: bool, logo: bool
    ) -> None:
        """Record the current modifier state."""
        self.shift = shift
        self.ctrl = ctrl
        self.alt = alt
        self.logo = logo

    def handle_events_cleared(self, settings: KeyboardSettings) -> list[str]:
        """Send the keybindings of the frame's pressed keys and reset the frame.

        Returns the keybindings that were sent.
        """
        keybindings: list[str] = []
        if not self._should_ignore_input(settings):
            for key_event in self.queued_key_events:
                if not key_event.pressed:
                    continue
                keybinding = self.maybe_get_keybinding(key_event)
                if keybinding is not None:
                    keybindings.append(keybinding)
                    if self.command_sender is not None:
                        self.command_sender(keybinding)

        self.ignore_input_this_frame = False
        self.queued_key_events.clear()
        return keybindings

    def _should_ignore_input(self, settings: KeyboardSettings) -> bool:
        return self.ignore_input_this_frame or (self.logo and not settings.use_logo)

    def _use_alt(self) -> bool:
        # On macOS the option key changes the typed character instead.
        return self.alt and not self.is_macos

    def maybe_get_keybinding(self, key_event: KeyEvent) -> str | None:
        """The keybinding string for a key event, or None if it types nothing."""
        control_name = control_key_name(key_event.logical_key)
        if control_name is not None:
            return self.format_keybinding_string(True, True, control_name)

        is_dead_key = (
            key_event.text_with_all_modifiers is not None and key_event.text is None
        )
        if (self.alt or is_dead_key) and self.is_macos:
            key_text = key_event.text_with_all_modifiers
        else:
            key_text = key_event.text

        if key_text is None:
            return None

        escaped = special_text_name(key_text)
        if escaped is not None:
            return self.format_keybinding_string(True, False, escaped)
        return self.format_keybinding_string(False, False, key_text)

    def format_keybinding_string(self, special: bool, use_shift: bool, text: str) -> str:
        """Wrap text with modifiers, in angle brackets when needed."""
        special = special or self.ctrl or self._use_alt() or self.logo
        modifiers = self.format_modifier_string(use_shift)
        if special:
            return f"<{modifiers}{text}>"
        return modifiers + text

    def format_modifier_string(self, use_shift: bool) -> str:
        """Modifier prefixes such as 'S-C-' for the current modifier state."""
        parts = [
            "S-" if self.shift and use_shift else "",
            "C-" if self.ctrl else "",
            "M-" if self._use_alt() else "",
            "D-" if self.logo else "",
        ]
        return "".join(parts)