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
Stroking Interface
==================

Curves draw themselves onto any object implementing DrawingContext, a
canvas-like path API. Nothing else about rendering is assumed.
"""

from typing import Protocol

from ..constants import HALF_PI, PI
from .transform import Transform


class DrawingContext(Protocol):
    """Minimal path drawing surface."""

    def begin_path(self) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def arc(
        self,
        center_x: float,
        center_y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool
    ) -> None:
        ...

    def stroke(self) -> None:
        ...


def prepare_arc(
    context: DrawingContext,
    context_transform: Transform,
    part,
    start: float,
    end: float,
    left: float,
    curve_transform: Transform
) -> None:
    """Emit the ``arc`` call for the [start, end] range of an arc part.

    Args:
        context: Drawing surface
        context_transform: Curve space to surface transform
        part: Part with ``arc``, ``s1`` and ``length``
        start: Start position within the part range
        end: End position within the part range
        left: Perpendicular offset, shrinks or grows the radius
        curve_transform: The curve's own placement transform
    """
    arc = part.arc
    sphi = arc.start_phi
    dphi = arc.end_phi - sphi
    s1 = part.s1
    slen = part.length
    # tangent angle to radius angle
    ophi = -HALF_PI if arc.left else HALF_PI
    phi1 = sphi + (start - s1) / slen * dphi + ophi
    phi2 = sphi + (end - s1) / slen * dphi + ophi

    mx = context_transform.mirror_x != curve_transform.mirror_x
    if mx:
        phi1 = PI - phi1
        phi2 = PI - phi2
    my = context_transform.mirror_y != curve_transform.mirror_y
    if my:
        phi1 = -phi1
        phi2 = -phi2

    cx, cy = curve_transform.transform(arc.center_x, arc.center_y)
    cx, cy = context_transform.transform(cx, cy)
    rotation = context_transform.rotation - curve_transform.rotation

    radius = arc.radius
    if left:
        radius += -left if arc.left else left
    radius *= context_transform.scale * curve_transform.scale

    context.arc(cx, cy, radius, phi1 + rotation, phi2 + rotation, arc.left == (mx != my))


__all__ = ["DrawingContext", "prepare_arc"]
