"""Integer width/height pairs used for grid and pixel sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _to_unsigned(value: float) -> int:
    """Convert to a non-negative integer, truncating and saturating at zero."""
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        value = math.trunc(value)
    return max(0, int(value))


@dataclass(frozen=True)
class Dimensions:
    """A width and a height, both unsigned integers."""

    width: int
    height: int

    @classmethod
    def from_tuple(cls, pair: tuple[float, float]) -> Dimensions:
        """Build from a (width, height) pair, truncating fractional parts."""
        width, height = pair
        return cls(_to_unsigned(width), _to_unsigned(height))

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def scale_position(self, position: tuple[int, int]) -> tuple[int, int]:
        """Multiply a grid position component-wise by these dimensions."""
        x, y = position
        return (x * self.width, y * self.height)

    def __mul__(self, other: Dimensions) -> Dimensions:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions(self.width * other.width, self.height * other.height)

    def __floordiv__(self, other: Dimensions) -> Dimensions:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions(self.width // other.width, self.height // other.height)

    __truediv__ = __floordiv__