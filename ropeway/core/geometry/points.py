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
Curve Points and Offsets
=========================

Value types shared by all length-parameterized curves.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, Tuple, Union


@dataclass(frozen=True)
class CurvePoint:
    """A location on a curve with its tangent angle.

    Attributes:
        x: X coordinate
        y: Y coordinate
        phi: Tangent angle in radians (mathematical orientation)
    """

    x: float
    y: float
    phi: float = 0.0

    @property
    def direction(self) -> Tuple[float, float]:
        """Unit tangent vector."""
        return (math.cos(self.phi), math.sin(self.phi))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.phi)


@dataclass(frozen=True)
class Offset:
    """Offset relative to a curve position.

    ``offset`` moves along the curve. ``left`` moves perpendicular to the
    left, ``right`` to the right. ``left`` wins if both are given.
    """

    offset: float = 0.0
    left: Optional[float] = None
    right: Optional[float] = None


OffsetLike = Union[None, float, Offset, Mapping[str, Any]]


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def resolve_offset(offset: OffsetLike) -> Tuple[float, float]:
    """Split an offset into its along-curve and left components.

    Args:
        offset: A number (along the curve), an Offset, or a mapping with
            ``offset`` and ``left`` or ``right`` keys

    Returns:
        Tuple of (along, left)

    Example:
        >>> resolve_offset({"offset": 2.0, "right": 1.5})
        (2.0, -1.5)
    """
    number = _number(offset)
    if number is not None:
        return (number, 0.0)

    if isinstance(offset, Offset):
        values = {'offset': offset.offset, 'left': offset.left, 'right': offset.right}
    elif isinstance(offset, Mapping):
        values = offset
    else:
        return (0.0, 0.0)

    along = _number(values.get('offset')) or 0.0
    left = _number(values.get('left'))
    if left is None:
        right = _number(values.get('right'))
        left = -right if right is not None else 0.0
    return (along, left)


class LengthCurve(Protocol):
    """Anything with a length that maps positions to points."""

    def get_length(self) -> float:
        ...

    def transform(self, position: float, left: float = 0.0) -> Optional[CurvePoint]:
        ...


__all__ = [
    "CurvePoint",
    "Offset",
    "OffsetLike",
    "resolve_offset",
    "LengthCurve",
]
