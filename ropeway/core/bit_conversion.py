# ==============================================================================
# Ropeway - Curve Geometry and Catenary Kernel
# Copyright (c) 2025 Ropeway Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# ==============================================================================

"""
Fixed Width Integer Conversion
==============================

Wrap numbers into the value range of 8, 16 and 32 bit registers, as read
from field bus devices driving the ropeway. NaN and infinite values give 0.

Example:
    >>> to_s8(200)
    -56
    >>> to_u32(-1)
    4294967295
"""

import math


def _wrap(value: float, bits: int, signed: bool) -> int:
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    mask = (1 << bits) - 1
    val = math.floor(value) & mask
    if signed and val & (1 << (bits - 1)):
        return val - (1 << bits)
    return val


def to_s8(value: float) -> int:
    return _wrap(value, 8, True)


def to_u8(value: float) -> int:
    return _wrap(value, 8, False)


def to_s16(value: float) -> int:
    return _wrap(value, 16, True)


def to_u16(value: float) -> int:
    return _wrap(value, 16, False)


def to_s32(value: float) -> int:
    return _wrap(value, 32, True)


def to_u32(value: float) -> int:
    return _wrap(value, 32, False)


def get_s32_bit(value: int, bit: int) -> bool:
    """True if ``bit`` (taken modulo 32) is set in value."""
    mask = 1 << (bit % 32)
    return (int(value) & mask) == mask


__all__ = ["to_s8", "to_u8", "to_s16", "to_u16", "to_s32", "to_u32", "get_s32_bit"]
