"""Parsing of the 'guifont' option into font family, size and style."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field

from gridglide.animation import F32_EPSILON

DEFAULT_FONT_SIZE = 14.0


class FontSelectionKind(enum.Enum):
    NAME = "name"
    CHARACTER = "character"
    DEFAULT = "default"
    LAST_RESORT = "last_resort"


@dataclass(frozen=True)
class FontSelection:
    """Which font to load: a family name, a fallback for a character, or a built-in."""

    kind: FontSelectionKind
    value: str | None = None

    @classmethod
    def from_name(cls, name: str) -> FontSelection:
        return cls(FontSelectionKind.NAME, name)

    @classmethod
    def from_character(cls, character: str) -> FontSelection:
        if len(character) != 1:
            raise ValueError(f"Expected a single character, got {character!r}")
        return cls(FontSelectionKind.CHARACTER, character)

    @classmethod
    def default(cls) -> FontSelection:
        return cls(FontSelectionKind.DEFAULT)

    @classmethod
    def last_resort(cls) -> FontSelection:
        return cls(FontSelectionKind.LAST_RESORT)


def points_to_pixels(value: float, is_macos: bool | None = None) -> float:
    """Convert a size in points to pixels; on macOS the two are equal."""
    if is_macos is None:
        is_macos = sys.platform == "darwin"
    if is_macos:
        return value
    pixels_per_inch = 96.0
    points_per_inch = 72.0
    return value * (pixels_per_inch / points_per_inch)


def _parse_size(text: str) -> float | None:
    if not text or any(ch.isspace() or ch == "_" for ch in text):
        return None
    try:
        return float(text)
    except ValueError:
        return None


@dataclass(eq=False)
class FontOptions:
    """Font families in fallback order, pixel size and style flags."""

    font_list: list[str] = field(default_factory=list)
    size: float = field(default_factory=lambda: points_to_pixels(DEFAULT_FONT_SIZE))
    bold: bool = False
    italic: bool = False

    @classmethod
    def parse(cls, guifont_setting: str) -> FontOptions:
        """Parse 'Family1,Family2:h12:b:i'; unknown or malformed parts are ignored."""
        font_list: list[str] = []
        size = DEFAULT_FONT_SIZE
        bold = False
        italic = False

        parts = [part for part in guifont_setting.split(":") if part]

        if parts:
            parsed = [name for name in parts[0].split(",") if name]
            if parsed:
                font_list = parsed

        for part in parts[1:]:
            if part.startswith("h") and len(part) > 1:
                parsed_size = _parse_size(part[1:])
                if parsed_size is not None:
                    size = parsed_size
            elif part == "b":
                bold = True
            elif part == "i":
                italic = True

        return cls(
            font_list=font_list,
            size=points_to_pixels(size),
            bold=bold,
            italic=italic,
        )

    def primary_font(self) -> FontSelection:
        """The first listed family, or the built-in default font."""
        if self.font_list:
            return FontSelection.from_name(self.font_list[0])
        return FontSelection.default()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontOptions):
            return NotImplemented
        return (
            self.font_list == other.font_list
            and abs(self.size - other.size) < F32_EPSILON
            and self.bold == other.bold
            and self.italic == other.italic
        )

    __hash__ = None  # type: ignore[assignment]