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
Fillet Geometry
===============

Tangent-tangent-radius fillet between two consecutive polyline segments.

The fillet center lies on the intersection of the two lines running
parallel to the segments at a distance of ``radius``, on the inner side of
the turn. Start and end tangent points are the center moved back by the
respective offset vector.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import (
    MAXIMUM_SHARP_ANGLE,
    MIN_DENOMINATOR,
    MIN_LENGTH2,
    MINIMUM_FLAT_ANGLE,
)
from ..logging_config import get_logger
from .angles import normalize_to_plus_minus_pi

logger = get_logger(__name__)


@dataclass
class FilletArc:
    """Circular arc tangent to two directions.

    Attributes:
        left: True if the arc turns anticlockwise
        center_x: X coordinate of the center
        center_y: Y coordinate of the center
        radius: Arc radius
        start_x: X coordinate of the first tangent point
        start_y: Y coordinate of the first tangent point
        start_phi: Tangent angle at the start (mathematical orientation)
        end_x: X coordinate of the second tangent point
        end_y: Y coordinate of the second tangent point
        end_phi: Tangent angle at the end, continuous with start_phi
    """

    left: bool
    center_x: float
    center_y: float
    radius: float
    start_x: float
    start_y: float
    start_phi: float
    end_x: float
    end_y: float
    end_phi: float

    @property
    def right(self) -> bool:
        """True if the arc turns clockwise."""
        return not self.left

    @property
    def delta_phi(self) -> float:
        return self.end_phi - self.start_phi

    @property
    def length(self) -> float:
        return abs(self.delta_phi) * self.radius

    @property
    def center(self) -> Tuple[float, float]:
        return (self.center_x, self.center_y)


def get_arc(
    x1: float, y1: float,
    x2: float, y2: float,
    x3: float, y3: float,
    radius: float
) -> Optional[FilletArc]:
    """Compute the fillet tangent to segments 1->2 and 2->3.

    Args:
        x1, y1: Start of the first tangent
        x2, y2: Corner point shared by both tangents
        x3, y3: End of the second tangent
        radius: Fillet radius

    Returns:
        FilletArc, or None if a segment is too short or the turn is too
        flat (below one degree) or too sharp (above 179 degrees)

    Example:
        >>> arc = get_arc(0, 0, 10, 0, 10, 10, 2.0)
        >>> arc.left, arc.center
        (True, (8.0, 2.0))
    """
    v12x = x2 - x1
    v12y = y2 - y1
    v12len2 = v12x * v12x + v12y * v12y
    v23x = x3 - x2
    v23y = y3 - y2
    v23len2 = v23x * v23x + v23y * v23y
    if v12len2 < MIN_LENGTH2 or v23len2 < MIN_LENGTH2:
        logger.debug("Fillet tangent too short at (%s, %s)", x2, y2)
        return None

    v12phi = math.atan2(v12y, v12x)
    phi123 = normalize_to_plus_minus_pi(math.atan2(v23y, v23x) - v12phi)
    # keep the end angle continuous with the start angle
    v23phi = v12phi + phi123
    if abs(phi123) < MINIMUM_FLAT_ANGLE or abs(phi123) > MAXIMUM_SHARP_ANGLE:
        logger.debug("Deflection angle %.6f unsuitable for fillet", phi123)
        return None

    left = phi123 > 0.0

    v12len = math.sqrt(v12len2)
    u12x = v12x / v12len
    u12y = v12y / v12len
    offset12x = -radius * u12y if left else radius * u12y
    offset12y = radius * u12x if left else -radius * u12x

    v23len = math.sqrt(v23len2)
    u23x = v23x / v23len
    u23y = v23y / v23len
    offset23x = -radius * u23y if left else radius * u23y
    offset23y = radius * u23x if left else -radius * u23x

    # intersect the two offset lines
    cross = v12x * v23y - v12y * v23x
    if -MIN_DENOMINATOR < cross < MIN_DENOMINATOR:
        return None
    ax = x1 + offset12x
    ay = y1 + offset12y
    bx = x2 + offset23x
    by = y2 + offset23y
    t = ((bx - ax) * v23y - (by - ay) * v23x) / cross
    center_x = ax + t * v12x
    center_y = ay + t * v12y

    return FilletArc(
        left=left,
        center_x=center_x,
        center_y=center_y,
        radius=radius,
        start_x=center_x - offset12x,
        start_y=center_y - offset12y,
        start_phi=v12phi,
        end_x=center_x - offset23x,
        end_y=center_y - offset23y,
        end_phi=v23phi,
    )


__all__ = ["FilletArc", "get_arc"]
