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
Catenary Package
================

Hanging rope computation.

This package provides:
- ChainFunction: catenary fits under four boundary conditions
- Saddle fillets between adjacent catenaries
- RopeLine: multi-span rope exposed as a strokeable curve

Example:
    >>> from ropeway.core.catenary import ChainFunction
    >>> chain = ChainFunction()
    >>> chain.init_for_minimum_force(0.0, 0.0, 100.0, 10.0, 0.0)
    True
"""

from .chain_function import (
    ChainFunction,
    FitMode,
    Parabola,
    PointSituation,
    compare_with_tolerance,
    order_tuple,
    order_triplet,
)
from .rope_support import (
    SaddleArc,
    compute_rope_support,
    get_relative_linear_values,
    get_linear_height,
    get_steel_rope_q0,
    get_smooth_normalized_transfer,
    get_smooth_rope_sag_factor,
)
from .rope_line import RopeLine, RopeField, FieldPart, SaddlePart

__all__ = [
    # Classes
    "ChainFunction",
    "RopeLine",
    # Value types
    "FitMode",
    "Parabola",
    "PointSituation",
    "SaddleArc",
    "RopeField",
    "FieldPart",
    "SaddlePart",
    # Functions
    "compare_with_tolerance",
    "order_tuple",
    "order_triplet",
    "compute_rope_support",
    "get_relative_linear_values",
    "get_linear_height",
    "get_steel_rope_q0",
    "get_smooth_normalized_transfer",
    "get_smooth_rope_sag_factor",
]
