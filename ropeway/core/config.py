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
Curve Configuration Descriptors
================================

Dataclasses describing already-parsed curve configuration data:

- Placement: coordinate transformation of a curve inside its parent
- CurvePointConfig / ArcLineConfig: polyline points with optional fillets
- SupportConfig / FieldConfig / RopeLineConfig: rope supports and spans
- SectionChild: zones and items laid out by a CurveSection

Each descriptor has a ``from_dict`` classmethod accepting the camelCase
keys used by the JSON curve files (``mirrorX``, ``weightPerMeter``, ...).
Loading those files is left to the caller.

Example:
    >>> config = ArcLineConfig.from_dict({
    ...     "points": [{"x": 0, "y": 0}, {"x": 10, "y": 0, "r": 2}, {"x": 10, "y": 10}],
    ...     "mirrorY": True,
    ... })
    >>> config.points[1].r
    2.0
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Union


def _number(value: Any) -> Optional[float]:
    """Return value as float if it is a real number, otherwise None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _positive(value: Any) -> Optional[float]:
    number = _number(value)
    return number if number is not None and number > 0.0 else None


@dataclass
class Placement:
    """Coordinate transformation of a curve.

    Applied as translate, then scale, then rotate and mirror.

    Attributes:
        x: Translation in x
        y: Translation in y
        scale: Scale factor (must be positive)
        phi: Rotation angle in radians
        angle: Rotation angle in degrees, used when phi is not set
        mirror_x: Mirror the x axis
        mirror_y: Mirror the y axis
        upright: Compensate the parent rotation so the result stays upright
    """

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    phi: Optional[float] = None
    angle: Optional[float] = None
    mirror_x: bool = False
    mirror_y: bool = False
    upright: bool = False

    def __post_init__(self):
        if self.scale <= 0.0:
            raise ValueError(f"Scale must be positive, got {self.scale}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Placement':
        """Read placement keys from a curve descriptor."""
        scale = _positive(data.get('scale'))
        return cls(
            x=_number(data.get('x')) or 0.0,
            y=_number(data.get('y')) or 0.0,
            scale=scale if scale is not None else 1.0,
            phi=_number(data.get('phi')),
            angle=_number(data.get('angle')),
            mirror_x=data.get('mirrorX') is True,
            mirror_y=data.get('mirrorY') is True,
            upright=data.get('upright') is True,
        )


@dataclass
class CurvePointConfig:
    """A polyline point, optionally rounded with a fillet of radius ``r``."""

    x: float
    y: float
    r: Optional[float] = None
    position: Optional[float] = None
    id: Optional[str] = None

    def __post_init__(self):
        if self.r is not None and self.r <= 0.0:
            raise ValueError(f"Fillet radius must be positive, got {self.r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional['CurvePointConfig']:
        """Build a point, or return None if x or y is missing."""
        x = _number(data.get('x'))
        y = _number(data.get('y'))
        if x is None or y is None:
            return None
        return cls(
            x=x,
            y=y,
            r=_positive(data.get('r')),
            position=_number(data.get('position')),
            id=data.get('id'),
        )


@dataclass
class ArcLineConfig:
    """Descriptor of an ArcLine."""

    points: List[CurvePointConfig] = field(default_factory=list)
    closed: bool = False
    id: Optional[str] = None
    placement: Optional[Placement] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ArcLineConfig':
        points = []
        for entry in data.get('points') or ():
            if isinstance(entry, Mapping):
                point = CurvePointConfig.from_dict(entry)
                if point is not None:
                    points.append(point)
        return cls(
            points=points,
            closed=data.get('closed') is True,
            id=data.get('id'),
            placement=Placement.from_dict(data),
        )

    @classmethod
    def coerce(cls, config: Union['ArcLineConfig', Mapping[str, Any]]) -> 'ArcLineConfig':
        """Accept either a descriptor or a plain mapping."""
        if isinstance(config, cls):
            return config
        if isinstance(config, Mapping):
            return cls.from_dict(config)
        raise TypeError(f"Unsupported arc line configuration: {type(config).__name__}")


RopeDiameter = Union[float, Sequence[float], None]


def _rope(value: Any) -> RopeDiameter:
    if isinstance(value, (list, tuple)):
        return [float(v) for v in value if _number(v) is not None]
    return _number(value)


@dataclass
class SupportConfig:
    """A rope support (tower, sheave or anchor).

    Attributes:
        x: Support x coordinate
        y: Support y coordinate
        r: Saddle radius, no saddle fillet is computed without it
        counterweight: Counterweight mass in kg (first or last support only)
        rope: Rope diameter in meters, or a list of diameters
        position: External position of the support
        id: Identifier used in calibration and diagnostics
    """

    x: float = 0.0
    y: float = 0.0
    r: Optional[float] = None
    counterweight: Optional[float] = None
    rope: RopeDiameter = None
    position: Optional[float] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SupportConfig':
        return cls(
            x=_number(data.get('x')) or 0.0,
            y=_number(data.get('y')) or 0.0,
            r=_number(data.get('r')),
            counterweight=_number(data.get('counterweight')),
            rope=_rope(data.get('rope')),
            position=_number(data.get('position')),
            id=data.get('id'),
        )


@dataclass
class FieldConfig:
    """Boundary condition of the span following the previous support.

    Only one condition is used, checked in this order: length, explicit
    point (x, y), sag below the chord at x, force at x. A missing x means
    the middle of the span.
    """

    x: Optional[float] = None
    y: Optional[float] = None
    length: Optional[float] = None
    sag: Optional[float] = None
    force: Optional[float] = None
    rope: RopeDiameter = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'FieldConfig':
        return cls(
            x=_number(data.get('x')),
            y=_number(data.get('y')),
            length=_number(data.get('length')),
            sag=_number(data.get('sag')),
            force=_number(data.get('force')),
            rope=_rope(data.get('rope')),
        )


RopePoint = Union[SupportConfig, FieldConfig]


@dataclass
class RopeLineConfig:
    """Descriptor of a RopeLine.

    Attributes:
        points: Supports and field conditions in rope order
        weight_per_meter: Rope mass per meter in kg/m
        stress_x: x coordinate of the stressing vehicle
        stress_sag: Additional sag caused by the stressing vehicle
        max_iterations: Iteration budget of the saddle solver
        distance_tolerance: Convergence tolerance of the saddle solver
        verbose: Log a rope line dump after construction
        id: Identifier of the rope line
        placement: Coordinate transformation of the rope line
    """

    points: List[RopePoint] = field(default_factory=list)
    weight_per_meter: Optional[float] = None
    stress_x: Optional[float] = None
    stress_sag: Optional[float] = None
    max_iterations: Optional[int] = None
    distance_tolerance: Optional[float] = None
    verbose: bool = False
    id: Optional[str] = None
    placement: Optional[Placement] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'RopeLineConfig':
        points: List[RopePoint] = []
        for entry in data.get('points') or ():
            if not isinstance(entry, Mapping):
                continue
            kind = entry.get('type')
            if kind == 'support':
                points.append(SupportConfig.from_dict(entry))
            elif kind == 'field':
                points.append(FieldConfig.from_dict(entry))
        max_iterations = _positive(data.get('maxIterations'))
        return cls(
            points=points,
            weight_per_meter=_number(data.get('weightPerMeter')),
            stress_x=_number(data.get('stressX')),
            stress_sag=_number(data.get('stressSag')),
            max_iterations=int(max_iterations) if max_iterations is not None else None,
            distance_tolerance=_positive(data.get('distanceTolerance')),
            verbose=data.get('verbose') is True,
            id=data.get('id'),
            placement=Placement.from_dict(data),
        )

    @classmethod
    def coerce(cls, config: Union['RopeLineConfig', Mapping[str, Any]]) -> 'RopeLineConfig':
        """Accept either a descriptor or a plain mapping."""
        if isinstance(config, cls):
            return config
        if isinstance(config, Mapping):
            return cls.from_dict(config)
        raise TypeError(f"Unsupported rope line configuration: {type(config).__name__}")

    @property
    def supports(self) -> List[SupportConfig]:
        return [p for p in self.points if isinstance(p, SupportConfig)]


@dataclass
class SectionChild:
    """A zone (with length) or an item (without) of a CurveSection."""

    length: Optional[float] = None
    position: Optional[float] = None
    object: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SectionChild':
        return cls(
            length=_number(data.get('length')),
            position=_number(data.get('position')),
            object=data.get('object'),
        )


__all__ = [
    "Placement",
    "CurvePointConfig",
    "ArcLineConfig",
    "SupportConfig",
    "FieldConfig",
    "RopeLineConfig",
    "SectionChild",
]
