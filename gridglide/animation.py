"""Easing curves, interpolation helpers and a small 2D point type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

# Machine epsilon of a single-precision float; animation curves compare against it.
F32_EPSILON = 1.1920929e-07

EaseFunc = Callable[[float], float]


@dataclass(frozen=True)
class Point:
    """An immutable 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Point:
        """Unit vector in the same direction, or the zero vector if that is undefined."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Point(0.0, 0.0)
        return Point(self.x / length, self.y / length)

    def dot(self, other: Point) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def is_zero(self) -> bool:
        """True when both coordinates are zero."""
        return self.x == 0.0 and self.y == 0.0


def ease_linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return -t * (t - 2.0)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    n = t * 2.0 - 1.0
    return -0.5 * (n * (n - 2.0) - 1.0)


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    n = t - 1.0
    return n * n * n + 1.0


def ease_in_out_cubic(t: float) -> float:
    n = 2.0 * t
    if n < 1.0:
        return 0.5 * n * n * n
    n -= 2.0
    return 0.5 * (n * n * n + 2.0)


def ease_in_expo(t: float) -> float:
    if t == 0.0:
        return 0.0
    return 2.0 ** (10.0 * (t - 1.0))


def ease_out_expo(t: float) -> float:
    if abs(t - 1.0) < F32_EPSILON:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * t)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between start and end."""
    return start + (end - start) * t


def ease(ease_func: EaseFunc, start: float, end: float, t: float) -> float:
    """Interpolate between start and end along an easing curve."""
    return lerp(start, end, ease_func(t))


def ease_point(ease_func: EaseFunc, start: Point, end: Point, t: float) -> Point:
    """Ease each coordinate of a point independently."""
    return Point(
        ease(ease_func, start.x, end.x, t),
        ease(ease_func, start.y, end.y, t),
    )