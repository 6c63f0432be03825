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
Geometry and Catenary Constants
================================

Angular and length epsilons used by the fillet solver and the curve
stroking code, default iteration parameters for the catenary solvers and
the physical constants needed to derive a rope weight.
"""

import math

# ============================================================================
# ANGLES
# ============================================================================

PI = math.pi
TWO_PI = PI + PI
HALF_PI = PI * 0.5
THREE_HALF_PI = PI + HALF_PI
QUARTER_PI = PI * 0.25
RAD2DEG = 180.0 / PI
DEG2RAD = PI / 180.0

# Turn angles below one degree need no fillet
MINIMUM_FLAT_ANGLE = DEG2RAD

# Turn angles above 179 degrees cannot be filleted
MAXIMUM_SHARP_ANGLE = PI - DEG2RAD

THIRD = 1.0 / 3.0

# ============================================================================
# EPSILONS
# ============================================================================

MIN_LENGTH2 = 0.000001
MIN_DENOMINATOR = 0.000000001
EPSILON = 0.000000001
MIN_STROKE_LENGTH = 0.001

# ============================================================================
# SOLVER DEFAULTS
# ============================================================================

DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_DISTANCE_TOLERANCE = 1.0e-6
DEFAULT_LENGTH_TOLERANCE = 1.0e-3

# Solution of 1/x + 1 = x
GOLDEN_CUT = (1.0 + math.sqrt(5.0)) * 0.5
GOLDEN_CUT_INVERTED = 1.0 / GOLDEN_CUT
GOLDEN_SECTION_INTERVAL_PART = (3.0 - math.sqrt(5.0)) * 0.5

# ============================================================================
# PHYSICS
# ============================================================================

# [kg/m^3]
SPECIFIC_GRAVITY_OF_STEEL = 7860.0

# [m/s^2]
EARTH_GRAVITATION = 9.80665

# Stressing vehicle window (relative to the half span)
DEFAULT_STRESS_S1 = 0.3
DEFAULT_STRESS_S2 = 0.9


__all__ = [
    "PI",
    "TWO_PI",
    "HALF_PI",
    "THREE_HALF_PI",
    "QUARTER_PI",
    "RAD2DEG",
    "DEG2RAD",
    "MINIMUM_FLAT_ANGLE",
    "MAXIMUM_SHARP_ANGLE",
    "THIRD",
    "MIN_LENGTH2",
    "MIN_DENOMINATOR",
    "EPSILON",
    "MIN_STROKE_LENGTH",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_DISTANCE_TOLERANCE",
    "DEFAULT_LENGTH_TOLERANCE",
    "GOLDEN_CUT",
    "GOLDEN_CUT_INVERTED",
    "GOLDEN_SECTION_INTERVAL_PART",
    "SPECIFIC_GRAVITY_OF_STEEL",
    "EARTH_GRAVITATION",
    "DEFAULT_STRESS_S1",
    "DEFAULT_STRESS_S2",
]
