"""Conversion of loosely typed setting values into typed fields.

Each function takes the field's current value and an incoming value. When the
incoming value has a suitable type the converted value is returned; otherwise an
error is logged and the current value is returned unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_i64(value: Any) -> bool:
    return _is_int(value) and _I64_MIN <= value <= _I64_MAX


def _is_u64(value: Any) -> bool:
    return _is_int(value) and 0 <= value <= _U64_MAX


def float_from_value(current: float, value: Any) -> float:
    """Accept a float or any 64-bit integer."""
    if isinstance(value, float):
        return value
    if _is_i64(value) or _is_u64(value):
        return float(value)
    logger.error("Setting expected an f32, but received %r", value)
    return current


def u64_from_value(current: int, value: Any) -> int:
    """Accept an unsigned 64-bit integer."""
    if _is_u64(value):
        return value
    logger.error("Setting expected a u64, but received %r", value)
    return current


def u32_from_value(current: int, value: Any) -> int:
    """Accept an unsigned 64-bit integer, keeping its low 32 bits."""
    if _is_u64(value):
        return value & 0xFFFF_FFFF
    logger.error("Setting expected a u32, but received %r", value)
    return current


def i32_from_value(current: int, value: Any) -> int:
    """Accept a signed 64-bit integer, wrapped to a signed 32-bit value."""
    if _is_i64(value):
        low = value & 0xFFFF_FFFF
        return low - 2**32 if low >= 2**31 else low
    logger.error("Setting expected an i32, but received %r", value)
    return current


def str_from_value(current: str, value: Any) -> str:
    """Accept a string."""
    if isinstance(value, str):
        return value
    logger.error("Setting expected a string, but received %r", value)
    return current


def bool_from_value(current: bool, value: Any) -> bool:
    """Accept a boolean or an unsigned integer, non-zero meaning true."""
    if isinstance(value, bool):
        return value
    if _is_u64(value):
        return value != 0
    logger.error("Setting expected a bool or 0/1, but received %r", value)
    return current