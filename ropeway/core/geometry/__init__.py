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
Curve Geometry Package
======================

2-D transforms, calibration and length-parameterized curves.

This package provides:
- Transform with an incrementally maintained inverse
- Adjuster for external position to curve parameter calibration
- Tangent fillets (get_arc) and ArcLine polylines
- CurveSection zone and item layout on any curve
- Tick spacing and curve sampling

Example:
    >>> from ropeway.core.geometry import ArcLine
    >>> line = ArcLine({"points": [{"x": 0, "y": 0}, {"x": 10, "y": 0, "r": 2}, {"x": 10, "y": 10}]})
    >>> point = line.transform(5.0)
"""

from .angles import (
    normalize_to_plus_minus_pi,
    normalize_to_plus_minus_180deg,
    normalize_rope_angle,
)
from .points import CurvePoint, Offset, resolve_offset, LengthCurve
from .transform import Transform
from .adjuster import Adjuster, CalibrationSegment
from .curve_geometry import FilletArc, get_arc
from .stroking import DrawingContext, prepare_arc
from .arc_line import ArcLine, LinePart, ArcPart
from .curve_section import CurveSection, SectionZone, SectionItem
from .discretization import get_disc_iter_diff, DiscretizationIterator, sample_curve

__all__ = [
    # Classes
    "Transform",
    "Adjuster",
    "CalibrationSegment",
    "ArcLine",
    "CurveSection",
    "DiscretizationIterator",
    # Value types
    "CurvePoint",
    "Offset",
    "FilletArc",
    "LinePart",
    "ArcPart",
    "SectionZone",
    "SectionItem",
    "DrawingContext",
    "LengthCurve",
    # Functions
    "get_arc",
    "prepare_arc",
    "resolve_offset",
    "normalize_to_plus_minus_pi",
    "normalize_to_plus_minus_180deg",
    "normalize_rope_angle",
    "get_disc_iter_diff",
    "sample_curve",
]
