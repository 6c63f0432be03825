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
Rope Line
=========

A rope spanning several supports, exposed as a length-parameterized curve.

Build steps:
    1. Fields (spans) are created between consecutive supports. All
       supports must run in the same x direction.
    2. Field conditions (length, point, sag or force) are attached to the
       field of the last support seen before them.
    3. Catenaries are solved:
       a. counterweight on the first (or last) support gives a force
          condition for the first (or last) field
       b. fields with an explicit condition
       c. force equilibrium propagated from solved fields to their
          unsolved neighbours
       d. remaining fields get the minimum force at their lower support
    4. Saddle arcs are fitted between adjacent fields at the support radius.
    5. Parts (field catenaries and saddle arcs) are laid out by arc length,
       and the Adjuster maps support positions onto them.

A stressing vehicle adds a local sag to the field it is in. The sag is
distributed over all fields in proportion to their relative size.

Example:
    >>> rope = RopeLine({
    ...     "points": [
    ...         {"type": "support", "x": 0, "y": 0},
    ...         {"type": "field", "sag": 5},
    ...         {"type": "support", "x": 100, "y": 20},
    ...     ],
    ...     "weightPerMeter": 5.0,
    ... })
    >>> rope.get_length() > 101.9
    True
"""

import math
from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Optional, Union

from ..config import FieldConfig, RopeLineConfig, SupportConfig
from ..constants import (
    DEFAULT_DISTANCE_TOLERANCE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_STRESS_S1,
    DEFAULT_STRESS_S2,
    EARTH_GRAVITATION,
    MIN_STROKE_LENGTH,
    PI,
    RAD2DEG,
)
from ..exceptions import RopeConfigurationError
from ..geometry.adjuster import Adjuster
from ..geometry.angles import normalize_rope_angle
from ..geometry.points import CurvePoint
from ..geometry.stroking import DrawingContext, prepare_arc
from ..geometry.transform import Transform
from ..logging_config import get_logger
from .chain_function import ChainFunction
from .rope_support import (
    SaddleArc,
    compute_rope_support,
    get_linear_height,
    get_relative_linear_values,
    get_smooth_rope_sag_factor,
    get_steel_rope_q0,
)

logger = get_logger(__name__)


@dataclass
class RopeField:
    """Span between two supports.

    The saddle coordinates start at the supports and move to the tangency
    points once the saddle arcs are fitted.
    """

    support1: SupportConfig
    support2: SupportConfig
    chain: ChainFunction
    saddle1x: float
    saddle1y: float
    saddle2x: float
    saddle2y: float
    length: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None
    force: Optional[float] = None
    valid: Optional[bool] = None
    saddle1: Optional[SaddleArc] = None
    saddle2: Optional[SaddleArc] = None
    relative_rate: float = 0.0
    middle_stress_sag: Optional[float] = None
    vehicle_position: Optional[float] = None
    vehicle_x: Optional[float] = None
    vehicle_stress_rate: Optional[float] = None

    @property
    def support1x(self) -> float:
        return self.support1.x

    @property
    def support1y(self) -> float:
        return self.support1.y

    @property
    def support2x(self) -> float:
        return self.support2.x

    @property
    def support2y(self) -> float:
        return self.support2.y

    def clear_vehicle(self) -> None:
        self.vehicle_position = None
        self.vehicle_x = None
        self.vehicle_stress_rate = None


@dataclass
class FieldPart:
    """Catenary part of a RopeLine."""

    field: RopeField
    x1: float
    y1: float
    x2: float
    y2: float
    s1: float
    s2: float
    length: float


@dataclass
class SaddlePart:
    """Saddle arc part of a RopeLine, ``s`` is its middle."""

    arc: SaddleArc
    s1: float
    s: float
    s2: float
    length: float


RopePart = Union[FieldPart, SaddlePart]


class RopeLine:
    """Multi-span rope with saddles.

    An inconsistent configuration is logged and leaves an empty rope line
    (no fields, length 0).

    Args:
        config: RopeLineConfig or the equivalent mapping
    """

    def __init__(self, config: Union[RopeLineConfig, Mapping[str, Any]]):
        self._config = RopeLineConfig.coerce(config)
        self.length = 0.0
        self._stress1 = DEFAULT_STRESS_S1
        self._stress2 = DEFAULT_STRESS_S2
        self._max_iterations = self._config.max_iterations or DEFAULT_MAX_ITERATIONS
        self._distance_tolerance = self._config.distance_tolerance or DEFAULT_DISTANCE_TOLERANCE
        self._increasing_x: Optional[bool] = None
        self._counterweight0: Optional[float] = None
        self._counterweight1: Optional[float] = None
        self._q0: Optional[float] = None
        self._parts: List[RopePart] = []
        self._fields: List[RopeField] = []
        self._adjuster = Adjuster()
        self._tf = Transform()
        self._build()
        self.adjust()

    @property
    def config(self) -> RopeLineConfig:
        return self._config

    @property
    def fields(self) -> List[RopeField]:
        return list(self._fields)

    @property
    def parts(self) -> List[RopePart]:
        return list(self._parts)

    @property
    def adjuster(self) -> Adjuster:
        return self._adjuster

    @property
    def curve_transform(self) -> Transform:
        return self._tf

    @property
    def q0(self) -> Optional[float]:
        """Rope weight per meter [N/m], None if not configured."""
        return self._q0

    def adjust(self) -> None:
        """Rebuild the placement transform and distribute the stressing sag.

        Without a stressing sag in any field the vehicle is removed as well.
        """
        config = self._config
        fields = self._fields
        self._tf.set_to_identity()
        self._tf.set_to_coordinate_transform(config.placement)

        stress_x = config.stress_x
        stress_sag = config.stress_sag
        applied = False
        if stress_x is not None and stress_sag is not None:
            for field in fields:
                saddle1x = field.saddle1x
                saddle2x = field.saddle2x
                inside = (saddle1x < stress_x < saddle2x) if self._increasing_x else (saddle2x < stress_x < saddle1x)
                if inside:
                    rate = get_smooth_rope_sag_factor(saddle1x, saddle2x, stress_x, self._stress1, self._stress2)
                    rate *= field.relative_rate
                    if rate > 0.0:
                        max_sag = stress_sag / rate
                        for fld in fields:
                            fld.middle_stress_sag = max_sag * fld.relative_rate
                        applied = True
                    break
        if not applied:
            for field in fields:
                field.middle_stress_sag = None
                field.clear_vehicle()

    def set_stress(self, stress_x: Optional[float], stress_sag: Optional[float]) -> None:
        """Move the stressing reference point and re-distribute the sag."""
        self._config = replace(self._config, stress_x=stress_x, stress_sag=stress_sag)
        self.adjust()

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._fields.clear()
        self._parts.clear()
        self.length = 0.0
        self._increasing_x = None
        self._counterweight0 = None
        self._counterweight1 = None
        self._adjuster.reset()

    def _build(self) -> None:
        self._reset()
        try:
            self._load_config()
        except RopeConfigurationError as e:
            logger.error("Rope line '%s': %s (index: %d)", self._config.id, e, e.index)
            self._reset()
            return
        if not self._fields:
            logger.warning("Rope line '%s' needs at least two supports", self._config.id)
            return
        self._compute_rope_line()
        self._compute_parts()
        if self._config.verbose:
            logger.info("%s", self.format_rope_info())

    def _load_config(self) -> None:
        config = self._config
        points = config.points
        if not points:
            raise RopeConfigurationError("Rope configuration does not contain valid points")

        if config.weight_per_meter is not None and config.weight_per_meter > 0.0:
            self._q0 = config.weight_per_meter * EARTH_GRAVITATION

        supports = config.supports
        if supports:
            if supports[0].counterweight is not None:
                self._counterweight0 = supports[0].counterweight
            elif supports[-1].counterweight is not None:
                self._counterweight1 = supports[-1].counterweight

        fields = self._fields
        prev = None
        for index, point in enumerate(points):
            if not isinstance(point, SupportConfig):
                continue
            if prev is None:
                prev = point
                continue
            incx = prev.x < point.x
            if self._increasing_x is None:
                self._increasing_x = incx
            elif self._increasing_x != incx:
                raise RopeConfigurationError(
                    "Rope configuration changed from {} to {} x-coordinate (x1: {}, x2: {})".format(
                        'increasing' if self._increasing_x else 'decreasing',
                        'increasing' if incx else 'decreasing',
                        prev.x, point.x),
                    index,
                )
            fields.append(RopeField(
                support1=prev,
                support2=point,
                chain=ChainFunction(),
                saddle1x=prev.x,
                saddle1y=prev.y,
                saddle2x=point.x,
                saddle2y=point.y,
            ))
            prev = point

        field = None
        for index, point in enumerate(points):
            for fld in fields:
                if fld.support1 is point:
                    field = fld
                    break
            if field is None:
                continue
            if self._q0 is None and point.rope is not None:
                self._load_rope(point.rope)
            if isinstance(point, FieldConfig):
                self._apply_field_condition(field, point, index)

    def _load_rope(self, rope) -> None:
        diameters = rope if isinstance(rope, (list, tuple)) else [rope]
        q0 = sum(get_steel_rope_q0(d) for d in diameters if d > 0.0)
        if q0 > 0.0:
            self._q0 = q0

    def _apply_field_condition(self, field: RopeField, point: FieldConfig, index: int) -> None:
        x = point.x
        if x is not None:
            if self._increasing_x:
                outside = x <= field.support1x or x >= field.support2x
            else:
                outside = x <= field.support2x or x >= field.support1x
            if outside:
                raise RopeConfigurationError("Rope configuration field x-coordinate is outside field bounds", index)
        mid = x if x is not None else (field.support1x + field.support2x) * 0.5

        if point.length is not None and point.length > 0.0:
            field.length = point.length
        elif point.y is not None:
            field.x = mid
            chord = get_linear_height(field.support1x, field.support1y, field.support2x, field.support2y, mid)
            if point.y >= chord:
                raise RopeConfigurationError(
                    "Rope configuration field y-coordinate is above linear height without any sag", index
                )
            field.y = point.y
        elif point.sag is not None and point.sag > 0.0:
            field.x = mid
            chord = get_linear_height(field.support1x, field.support1y, field.support2x, field.support2y, mid)
            field.y = chord - point.sag
        elif point.force is not None and point.force > 0.0:
            field.x = mid
            field.force = point.force

    @staticmethod
    def _solved(chain: ChainFunction) -> bool:
        return chain.is_valid() or chain.is_cosinus_hyperbolicus()

    def _compute_rope_line(self) -> None:
        fields = self._fields
        q0 = self._q0

        # counterweight at an end of the line
        if self._counterweight0 is not None:
            field = fields[0]
            field.chain.init_for_force(field.support1x, field.support1y, field.support2x, field.support2y,
                                       field.support1x, self._counterweight0 * EARTH_GRAVITATION, q0)
            field.valid = self._solved(field.chain)
        elif self._counterweight1 is not None:
            field = fields[-1]
            field.chain.init_for_force(field.support1x, field.support1y, field.support2x, field.support2y,
                                       field.support2x, self._counterweight1 * EARTH_GRAVITATION, q0)
            field.valid = self._solved(field.chain)

        # explicit field conditions
        for field in fields:
            if field.valid is not None:
                continue
            chain = field.chain
            if field.length is not None:
                chain.init_for_length(field.support1x, field.support1y, field.support2x, field.support2y,
                                      field.length)
            elif field.x is not None and field.y is not None:
                chain.init_for_three_points(field.support1x, field.support1y, field.support2x, field.support2y,
                                            field.x, field.y)
            elif field.x is not None and field.force is not None:
                chain.init_for_force(field.support1x, field.support1y, field.support2x, field.support2y,
                                     field.x, field.force, q0)
            else:
                continue
            field.valid = self._solved(chain)

        # force equilibrium at the supports between solved and open fields
        for i, field in enumerate(fields):
            if field.valid is not True:
                continue
            force = field.chain.get_force(field.support1x, 1.0)
            idx = i - 1
            while idx >= 0 and fields[idx].valid is None:
                fld = fields[idx]
                fld.chain.init_for_force(fld.support1x, fld.support1y, fld.support2x, fld.support2y,
                                         fld.support2x, force)
                fld.valid = self._solved(fld.chain)
                force = fld.chain.get_force(fld.support1x, 1.0)
                idx -= 1
            force = field.chain.get_force(field.support2x, 1.0)
            idx = i + 1
            while idx < len(fields) and fields[idx].valid is None:
                fld = fields[idx]
                fld.chain.init_for_force(fld.support1x, fld.support1y, fld.support2x, fld.support2y,
                                         fld.support1x, force)
                fld.valid = self._solved(fld.chain)
                force = fld.chain.get_force(fld.support2x, 1.0)
                idx += 1

        # minimum force at the lower support
        for field in fields:
            if field.valid is None:
                x = field.support1x if field.support1y <= field.support2y else field.support2x
                field.chain.init_for_minimum_force(field.support1x, field.support1y,
                                                   field.support2x, field.support2y, x)
                field.valid = self._solved(field.chain)

        for i, field in enumerate(fields):
            if not field.valid:
                logger.warning("Rope line '%s': field %d could not be solved", self._config.id, i)

        # saddles
        for field1, field2 in zip(fields, fields[1:]):
            support = compute_rope_support(
                field1.chain, field2.chain, field1.support2x, field1.support2.r,
                self._max_iterations, self._distance_tolerance, self._increasing_x is True,
            )
            if support is None:
                field1.saddle2 = None
                field2.saddle1 = None
                continue
            support.support = field1.support2
            field1.saddle2 = support
            field1.saddle2x = support.start_x
            field1.saddle2y = support.start_y
            field2.saddle1 = support
            field2.saddle1x = support.end_x
            field2.saddle1y = support.end_y

        # relative size of each field for the stressing vehicle
        spans = []
        sags = []
        for field in fields:
            saddle1x = field.saddle1x
            saddle2x = field.saddle2x
            xmid = (saddle1x + saddle2x) * 0.5
            ylin = get_linear_height(saddle1x, field.saddle1y, saddle2x, field.saddle2y, xmid)
            spans.append(abs(saddle2x - saddle1x))
            sags.append(ylin - field.chain.get_height(xmid))
        max_span = max(spans)
        max_sag = max(0.0, max(sags))
        for field, span, sag in zip(fields, spans, sags):
            span_rate = span / max_span if max_span > 0.0 else 0.0
            sag_rate = sag / max_sag if max_sag > 0.0 else 0.0
            field.relative_rate = (span_rate + sag_rate) * 0.5

    def _compute_parts(self) -> None:
        fields = self._fields
        parts = self._parts
        adjuster = self._adjuster
        config_id = self._config.id

        first = fields[0].support1
        adjuster.reset(first.position if first.position is not None else 0.0, 0.0, first.id)
        le = 0.0
        for field in fields:
            chain = field.chain
            x1 = field.saddle1x
            x2 = field.saddle2x
            length = chain.get_length(x1, x2)
            parts.append(FieldPart(
                field=field,
                x1=x1, y1=chain.get_height(x1),
                x2=x2, y2=chain.get_height(x2),
                s1=le, s2=le + length, length=length,
            ))
            le += length
            arc = field.saddle2
            if arc is not None:
                length = arc.length
                s = le + length * 0.5
                parts.append(SaddlePart(arc=arc, s1=le, s=s, s2=le + length, length=length))
                support = field.support2
                dist = support.position if support.position is not None else s
                if not adjuster.add(dist, s, support.id):
                    logger.warning("Rope line '%s': position %s of support '%s' breaks the calibration",
                                   config_id, dist, support.id)
                le += length

        last = fields[-1].support2
        dist = last.position if last.position is not None else le
        if not adjuster.add(dist, le, last.id):
            logger.warning("Rope line '%s': position %s of support '%s' breaks the calibration",
                           config_id, dist, last.id)
        self.length = dist

    # ------------------------------------------------------------------
    # diagnostics
    # ------------------------------------------------------------------

    def format_rope_info(self) -> str:
        """Human readable dump of all parts, forces and fit modes."""
        q0 = self._q0 if self._q0 is not None else 1.0
        lines = ['ROPE LINE INFO', '']
        for part in self._parts:
            if isinstance(part, SaddlePart):
                arc = part.arc
                lines.append('SUPPORT:')
                lines.append(f'start: {part.s1} middle: {part.s} end: {part.s2}')
                if arc.support is not None and arc.support.id:
                    lines.append(f'id: "{arc.support.id}"')
                mphi = (arc.end_phi + arc.start_phi) * 0.5
                lines.append(f'middle phi: {mphi} / {mphi * RAD2DEG} grad')
                dphi = abs(arc.delta_phi)
                lines.append(f'delta phi: {dphi} / {dphi * RAD2DEG} grad')
                lines.append(f'center: ({arc.center_x}, {arc.center_y}) radius: {arc.radius} '
                             f'up: {arc.up} left: {arc.left}')
                lines.append(f'start: ({arc.start_x}, {arc.start_y}) end: ({arc.end_x}, {arc.end_y})')
            else:
                field = part.field
                chain = field.chain
                lines.append('FIELD:')
                lines.append(f'start: {part.s1} end: {part.s2}')
                for label, x, y in (('1', field.saddle1x, field.saddle1y), ('2', field.saddle2x, field.saddle2y)):
                    angle = chain.get_angle(x) * RAD2DEG
                    force = chain.get_force(x, q0)
                    lines.append(f'x{label} = {x} y{label} = {y} angle{label} = {angle} force{label} = {force}')
                lines.append(f'mode: {chain.mode.value}')
                lines.append(f'stress rate: {field.relative_rate}')
            lines.append('')
        adjustment = self._adjuster.format()
        if adjustment:
            lines.append(adjustment)
        return '\n'.join(lines)

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def get_length(self) -> float:
        return self.length

    def is_increasing_x(self) -> Optional[bool]:
        return self._increasing_x

    def set_vehicle_position(self, position: Optional[float]) -> None:
        """Place the stressing vehicle, None removes it.

        Only fields with a distributed stressing sag (see adjust) react.
        """
        vehicle = self._adjuster.adjust(position) if position is not None else None
        inc = self._increasing_x is True
        start = 0.0
        for field in self._fields:
            chain = field.chain
            saddle1x = field.saddle1x
            saddle2x = field.saddle2x
            end = start + chain.get_length(saddle1x, saddle2x)
            if vehicle is not None and field.middle_stress_sag is not None and start < vehicle < end:
                x = chain.get_location(saddle1x, vehicle - start if inc else start - vehicle)
                field.vehicle_position = vehicle
                field.vehicle_x = x
                field.vehicle_stress_rate = get_smooth_rope_sag_factor(
                    saddle1x, saddle2x, x, self._stress1, self._stress2
                )
            else:
                field.clear_vehicle()
            start = end
            if field.saddle2 is not None:
                start += field.saddle2.length

    def _to_curve_point(self, x: float, y: float, phi: float) -> CurvePoint:
        tf = self._tf
        mirrored = tf.mirror_x != tf.mirror_y
        tx, ty = tf.transform(x, y)
        return CurvePoint(tx, ty, (-phi if mirrored else phi) + tf.rotation)

    def _position_on_rope_line(self, position: float, left: float) -> Optional[CurvePoint]:
        inc = self._increasing_x is True
        start = 0.0
        for field in self._fields:
            chain = field.chain
            saddle1x = field.saddle1x
            saddle2x = field.saddle2x
            end = start + chain.get_length(saddle1x, saddle2x)
            if start <= position <= end:
                x = chain.get_location(saddle1x, position - start if inc else start - position)
                y = chain.get_height(x)
                gradient = chain.get_gradient(x)
                if field.vehicle_x is not None and field.middle_stress_sag is not None:
                    value, slope = get_relative_linear_values(saddle1x, saddle2x, field.vehicle_x, x)
                    stress_sag = field.vehicle_stress_rate * field.middle_stress_sag
                    y -= value * stress_sag
                    gradient -= slope * stress_sag
                phi = normalize_rope_angle(math.atan2(gradient, 1.0))
                if left:
                    x -= math.sin(phi) * left
                    y += math.cos(phi) * left
                return self._to_curve_point(x, y, phi)
            start = end
            arc = field.saddle2
            if arc is not None:
                delta_phi = arc.delta_phi
                end = start + arc.length
                if start <= position < end:
                    phi = normalize_rope_angle(arc.start_phi + (position - start) / arc.length * delta_phi)
                    cos = math.cos(phi)
                    sin = math.sin(phi)
                    r = arc.radius + (left if arc.up else -left)
                    x = arc.center_x + (sin * r if arc.left else -sin * r)
                    y = arc.center_y + (-cos * r if arc.left else cos * r)
                    return self._to_curve_point(x, y, phi if inc else phi - PI)
                start = end
        return None

    def _extrapolate(self, field: RopeField, x: float, offset: float, left: float) -> CurvePoint:
        chain = field.chain
        y = chain.get_height(x)
        phi = normalize_rope_angle(chain.get_angle(x))
        cos = math.cos(phi)
        sin = math.sin(phi)
        return self._to_curve_point(x + cos * offset - sin * left, y + sin * offset + cos * left, phi)

    def _transform(self, position: Optional[float], left: float) -> Optional[CurvePoint]:
        parts = self._parts
        fields = self._fields
        if position is None or not parts or not fields:
            return None
        inc = self._increasing_x is True
        s1 = parts[0].s1
        if position <= s1:
            offset = position - s1 if inc else s1 - position
            return self._extrapolate(fields[0], fields[0].saddle1x, offset, left)
        s2 = parts[-1].s2
        if position >= s2:
            offset = position - s2 if inc else s2 - position
            return self._extrapolate(fields[-1], fields[-1].saddle2x, offset, left)
        return self._position_on_rope_line(position, left)

    def transform(self, position: float, left: float = 0.0) -> Optional[CurvePoint]:
        """Map an external position plus a left offset onto a point.

        Positions beyond the ends are extrapolated along the end tangents.

        Returns:
            CurvePoint in the rope's placement, None for an empty rope line
        """
        return self._transform(self._adjuster.adjust(position), left)

    # ------------------------------------------------------------------
    # stroking
    # ------------------------------------------------------------------

    def _line_to(self, context: DrawingContext, transform: Transform, position: float, left: float) -> None:
        point = self._position_on_rope_line(position, left)
        if point is not None:
            context.line_to(*transform.transform(point.x, point.y))

    def _subdivide(self, context, transform, start, end, start_phi, end_phi, left) -> None:
        """Intermediate vertices, one per degree of direction change."""
        count = max(math.ceil(abs(end_phi - start_phi) * RAD2DEG), 1)
        delta = (end - start) / count
        for j in range(1, count):
            self._line_to(context, transform, start + delta * j, left)

    def _stroke_field(self, context: DrawingContext, transform: Transform, part: FieldPart,
                      start: float, end: float, left: float) -> None:
        p1 = self._position_on_rope_line(start, left)
        p2 = self._position_on_rope_line(end, left)
        if p1 is None or p2 is None:
            return
        context.begin_path()
        context.move_to(*transform.transform(p1.x, p1.y))
        vehicle = part.field.vehicle_position
        if vehicle is not None and start < vehicle < end:
            ps = self._position_on_rope_line(vehicle, left)
            self._subdivide(context, transform, start, vehicle, p1.phi, ps.phi, left)
            context.line_to(*transform.transform(ps.x, ps.y))
            self._subdivide(context, transform, vehicle, end, ps.phi, p2.phi, left)
        else:
            self._subdivide(context, transform, start, end, p1.phi, p2.phi, left)
        context.line_to(*transform.transform(p2.x, p2.y))
        context.stroke()

    def _stroke_straight(self, context: DrawingContext, transform: Transform,
                         start: float, end: float, left: float) -> None:
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

        Catenaries are drawn as polylines with one vertex per degree of
        direction change, saddles as arcs and the parts beyond the ends as
        straight tangents.
        """
        parts = self._parts
        if not parts:
            return
        stroke_start = self._adjuster.adjust(min(start, end))
        stroke_end = self._adjuster.adjust(max(start, end))
        if stroke_start is None or stroke_end is None or stroke_end - stroke_start < MIN_STROKE_LENGTH:
            return
        curve_start = parts[0].s1
        curve_end = parts[-1].s2

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
                arc_left = -left if self._increasing_x is False else left
                start_pos = stroke_start
                for part in parts:
                    if start_pos >= part.s2:
                        continue
                    is_last = se <= part.s2
                    end_pos = se if is_last else part.s2
                    if end_pos - start_pos > MIN_STROKE_LENGTH:
                        if isinstance(part, FieldPart):
                            self._stroke_field(context, transform, part, start_pos, end_pos, left)
                        else:
                            context.begin_path()
                            prepare_arc(context, transform, part, start_pos, end_pos, arc_left, self._tf)
                            context.stroke()
                    start_pos = end_pos
                    if is_last:
                        break
            if ends_inside:
                return
            stroke_start = curve_end

        if stroke_end - stroke_start > MIN_STROKE_LENGTH:
            self._stroke_straight(context, transform, stroke_start, stroke_end, left)


__all__ = ["RopeLine", "RopeField", "FieldPart", "SaddlePart", "RopePart"]
