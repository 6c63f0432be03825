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
Arc Line
========

Polyline with circular fillets, parameterized by arc length.

Construction:
    1. Points without numeric coordinates are dropped by the descriptor.
    2. Every point with a radius and two neighbours (wrap-around when
       closed) gets a fillet from get_arc().
    3. Parts are collected in order: a LinePart from the end of one fillet
       (or the raw point) to the start of the next, then the ArcPart of
       the next fillet. Parts shorter than EPSILON are skipped but their
       length still counts.

Positions outside [0, length] wrap around on closed lines and are
extrapolated along the first or last tangent on open lines.

Example:
    >>> line = ArcLine({"points": [{"x": 0, "y": 0}, {"x": 10, "y": 0}]})
    >>> line.get_length()
    10.0
    >>> line.transform(5.0)
    CurvePoint(x=5.0, y=0.0, phi=0.0)
"""

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from ..config import ArcLineConfig
from ..constants import EPSILON, MIN_STROKE_LENGTH
from ..logging_config import get_logger
from .adjuster import Adjuster
from .curve_geometry import FilletArc, get_arc
from .points import CurvePoint
from .stroking import DrawingContext, prepare_arc
from .transform import Transform

logger = get_logger(__name__)


@dataclass
class LinePart:
    """Straight part of an ArcLine."""

    x1: float
    y1: float
    x2: float
    y2: float
    s1: float
    s2: float
    length: float
    ex: float
    ey: float
    phi: float


@dataclass
class ArcPart:
    """Fillet part of an ArcLine."""

    arc: FilletArc
    s1: float
    s2: float
    length: float


Part = Union[LinePart, ArcPart]


def _arc_point(arc: FilletArc, phi: float, offset: float, left: float):
    """Point on (or tangent to) an arc at tangent angle phi."""
    cos = math.cos(phi)
    sin = math.sin(phi)
    r = arc.radius
    x = arc.center_x + (sin * r if arc.left else -sin * r) + cos * offset - sin * left
    y = arc.center_y + (-cos * r if arc.left else cos * r) + sin * offset + cos * left
    return x, y


class ArcLine:
    """Length-parameterized polyline with tangent fillets.

    Args:
        config: ArcLineConfig or the equivalent mapping
    """

    def __init__(self, config: Union[ArcLineConfig, Mapping[str, Any]]):
        self._config = ArcLineConfig.coerce(config)
        self.length = 0.0
        self.closed = False
        self._parts: List[Part] = []
        self._adjuster = Adjuster()
        self._tf = Transform()
        self.adjust()
        self._build()

    @property
    def config(self) -> ArcLineConfig:
        return self._config

    @property
    def parts(self) -> List[Part]:
        return list(self._parts)

    @property
    def adjuster(self) -> Adjuster:
        return self._adjuster

    @property
    def curve_transform(self) -> Transform:
        return self._tf

    def adjust(self) -> None:
        """Rebuild the placement transform from the configuration."""
        self._tf.set_to_identity()
        self._tf.set_to_coordinate_transform(self._config.placement)

    def _build(self) -> None:
        config = self._config
        points = config.points
        closed = config.closed is True
        parts = self._parts
        parts.clear()
        self._adjuster.reset(0.0, 0.0, config.id)
        length = 0.0

        count = len(points)
        arcs: List[Optional[FilletArc]] = [None] * count
        for i, point in enumerate(points):
            if point.r is not None and (closed or 0 < i < count - 1):
                prev = points[i - 1]
                nxt = points[(i + 1) % count]
                arcs[i] = get_arc(prev.x, prev.y, point.x, point.y, nxt.x, nxt.y, point.r)

        end = count + 1 if closed else count
        for i in range(1, end):
            sp = points[i - 1]
            j = i % count
            ep = points[j]
            sa = arcs[i - 1]
            ea = arcs[j]
            x1 = sa.end_x if sa is not None else sp.x
            y1 = sa.end_y if sa is not None else sp.y
            x2 = ea.start_x if ea is not None else ep.x
            y2 = ea.start_y if ea is not None else ep.y
            dx = x2 - x1
            dy = y2 - y1
            seg = math.sqrt(dx * dx + dy * dy)
            if seg > EPSILON:
                parts.append(LinePart(
                    x1=x1, y1=y1, x2=x2, y2=y2,
                    s1=length, s2=length + seg, length=seg,
                    ex=dx / seg, ey=dy / seg, phi=math.atan2(dy, dx),
                ))
            length += seg
            if ea is not None:
                seg = ea.length
                if seg > EPSILON:
                    parts.append(ArcPart(arc=ea, s1=length, s2=length + seg, length=seg))
                length += seg

        if not self._adjuster.add(length, length, config.id):
            logger.debug("Arc line '%s' has no length", config.id)
        self.length = length
        self.closed = closed

    def get_length(self) -> float:
        return self.length

    def _to_curve_point(self, x: float, y: float, phi: float) -> CurvePoint:
        tf = self._tf
        mirrored = tf.mirror_x != tf.mirror_y
        tx, ty = tf.transform(x, y)
        return CurvePoint(tx, ty, (-phi if mirrored else phi) + tf.rotation)

    def _point_on_part(self, part: Part, position: float, left: float) -> CurvePoint:
        rel = (position - part.s1) / part.length
        if isinstance(part, LinePart):
            x = part.x1 + (part.x2 - part.x1) * rel - part.ey * left
            y = part.y1 + (part.y2 - part.y1) * rel + part.ex * left
            return self._to_curve_point(x, y, part.phi)
        arc = part.arc
        phi = arc.start_phi + arc.delta_phi * rel
        x, y = _arc_point(arc, phi, 0.0, left)
        return self._to_curve_point(x, y, phi)

    def _locate(self, position: float, left: float) -> Optional[CurvePoint]:
        """Point for a curve parameter inside the part ranges."""
        for part in self._parts:
            if part.s1 <= position <= part.s2:
                return self._point_on_part(part, position, left)
        return None

    def _extrapolate(self, part: Part, at_start: bool, offset: float, left: float) -> CurvePoint:
        if isinstance(part, LinePart):
            x0 = part.x1 if at_start else part.x2
            y0 = part.y1 if at_start else part.y2
            x = x0 + part.ex * offset - part.ey * left
            y = y0 + part.ey * offset + part.ex * left
            return self._to_curve_point(x, y, part.phi)
        arc = part.arc
        phi = arc.start_phi if at_start else arc.end_phi
        x, y = _arc_point(arc, phi, offset, left)
        return self._to_curve_point(x, y, phi)

    def _transform(self, position: Optional[float], left: float) -> Optional[CurvePoint]:
        parts = self._parts
        if position is None or not parts:
            return None
        if self.closed:
            curve_start = parts[0].s1
            curve_end = parts[-1].s2
            pos = position
            while pos >= curve_end:
                pos -= self.length
            while pos < curve_start:
                pos += self.length
            return self._locate(pos, left)

        first = parts[0]
        if position < first.s1:
            return self._extrapolate(first, True, position - first.s1, left)
        last = parts[-1]
        if position >= last.s2:
            return self._extrapolate(last, False, position - last.s2, left)
        return self._locate(position, left)

    def transform(self, position: float, left: float = 0.0) -> Optional[CurvePoint]:
        """Map an external position plus a left offset onto a point.

        Args:
            position: Position along the line
            left: Perpendicular offset, positive to the left

        Returns:
            CurvePoint in the line's placement, None if the line is empty
        """
        return self._transform(self._adjuster.adjust(position), left)

    def _stroke_parts(
        self,
        context: DrawingContext,
        transform: Transform,
        start: float,
        end: float,
        left: float
    ) -> None:
        start_pos = start
        for part in self._parts:
            if start_pos >= part.s2:
                continue
            is_last = end <= part.s2
            end_pos = end if is_last else part.s2
            if abs(end_pos - start_pos) > MIN_STROKE_LENGTH:
                context.begin_path()
                if isinstance(part, LinePart):
                    p1 = self._point_on_part(part, max(start_pos, part.s1), left)
                    p2 = self._point_on_part(part, end_pos, left)
                    context.move_to(*transform.transform(p1.x, p1.y))
                    context.line_to(*transform.transform(p2.x, p2.y))
                else:
                    prepare_arc(context, transform, part, start_pos, end_pos, left, self._tf)
                context.stroke()
            start_pos = end_pos
            if is_last:
                break

    def _stroke_straight(
        self,
        context: DrawingContext,
        transform: Transform,
        start: float,
        end: float,
        left: float
    ) -> None:
        p1 = self._transform(start, left)
        p2 = self._transform(end, left)
        context.begin_path()
        context.move_to(*transform.transform(p1.x, p1.y))
        context.line_to(*transform.transform(p2.x, p2.y))
        context.stroke()

    def stroke(
        self,
        context: DrawingContext,
        transform: Transform,
        start: float,
        end: float,
        left: float = 0.0
    ) -> None:
        """Draw the range between two external positions.

        Args:
            context: Drawing surface
            transform: Curve space to surface transform
            start: First external position
            end: Second external position (order does not matter)
            left: Perpendicular offset
        """
        parts = self._parts
        stroke_start = self._adjuster.adjust(min(start, end))
        stroke_end = self._adjuster.adjust(max(start, end))
        if not parts or stroke_start is None or stroke_end is None:
            return
        if stroke_end - stroke_start < MIN_STROKE_LENGTH:
            return

        curve_start = parts[0].s1
        curve_end = parts[-1].s2

        if self.closed:
            # normalize the start into [curve_start, curve_end) and wrap the rest
            length = curve_end - curve_start
            while stroke_start >= curve_end:
                stroke_start -= length
                stroke_end -= length
            while stroke_start < curve_start:
                stroke_start += length
                stroke_end += length
            wraps = stroke_end > curve_end
            se = curve_end if wraps else stroke_end
            if se - stroke_start > MIN_STROKE_LENGTH:
                self._stroke_parts(context, transform, stroke_start, se, left)
            if wraps:
                se = stroke_end - length
                if se - curve_start > MIN_STROKE_LENGTH:
                    self._stroke_parts(context, transform, curve_start, se, left)
            return

        if stroke_start < curve_start:
            ends_before = stroke_end <= curve_start
            se = stroke_end if ends_before else curve_start
            if se - stroke_start > MIN_STROKE_LENGTH:
                self._stroke_straight(context, transform, stroke_start, se, left)
            if ends_before:
                return
            stroke_start = curve_start

        if stroke_start < curve_end:
            ends_inside = stroke_end <= curve_end
            se = stroke_end if ends_inside else curve_end
            if se - stroke_start > MIN_STROKE_LENGTH:
                self._stroke_parts(context, transform, stroke_start, se, left)
            if ends_inside:
                return
            stroke_start = curve_end

        if stroke_end - stroke_start > MIN_STROKE_LENGTH:
            self._stroke_straight(context, transform, stroke_start, stroke_end, left)


__all__ = ["ArcLine", "LinePart", "ArcPart", "Part"]
