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
Angle normalization helpers.
"""

from ..constants import PI, TWO_PI, HALF_PI, THREE_HALF_PI


def normalize_to_plus_minus_pi(phi: float) -> float:
    """Wrap an angle in radians into (-pi, pi]."""
    p = phi
    while p > PI:
        p -= TWO_PI
    while p <= -PI:
        p += TWO_PI
    return p


def normalize_to_plus_minus_180deg(angle: float) -> float:
    """Wrap an angle in degrees into (-180, 180]."""
    a = angle
    while a > 180.0:
        a -= 360.0
    while a <= -180.0:
        a += 360.0
    return a


def normalize_rope_angle(phi: float) -> float:
    """Wrap an angle into [-pi/2, 3pi/2).

    Rope tangents point in +x (around 0) or in -x (around pi) depending on
    the rope direction, so this range never splits a saddle arc.
    """
    p = phi
    while p < -HALF_PI:
        p += TWO_PI
    while p >= THREE_HALF_PI:
        p -= TWO_PI
    return p


__all__ = [
    "normalize_to_plus_minus_pi",
    "normalize_to_plus_minus_180deg",
    "normalize_rope_angle",
]
