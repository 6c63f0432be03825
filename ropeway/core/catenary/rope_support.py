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
Rope Supports
=============

Saddle fillets between adjacent catenaries and the helper functions of the
stressing vehicle model.

A saddle is the circular arc of the support sheave. It touches the rope of
the field before the support at (x1, y1) and the rope of the field after it
at (x2, y2). Both tangency points are found by a 2-D Newton iteration on
the condition that the two circle centers computed from each catenary
coincide.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import SupportConfig
from ..constants import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_DISTANCE_TOLERANCE,
    EARTH_GRAVITATION,
    HALF_PI,
    PI,
    SPECIFIC_GRAVITY_OF_STEEL,
)
from ..geometry.angles import normalize_rope_angle
from ..geometry.curve_geometry import FilletArc
from ..logging_config import get_logger
from .chain_function import ChainFunction

logger = get_logger(__name__)


@dataclass
class SaddleArc(FilletArc):
    """Fillet over a support sheave.

    Attributes:
        up: True if the rope bends over the sheave (convex), False if it is
            pulled under it
        support: The support this saddle belongs to
    """

    up: bool = False
    support: Optional[SupportConfig] = None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compute_rope_support(
    chain1: ChainFunction,
    chain2: ChainFunction,
    x: float,
    radius: Optional[float],
    max_iterations: Optional[int] = None,
    tolerance: Optional[float] = None,
    increasing_x: bool = True
) -> Optional[SaddleArc]:
    """Compute the saddle arc connecting two catenaries at a support.

    Args:
        chain1: Catenary of the field before the support
        chain2: Catenary of the field after the support
        x: Support x coordinate, used as start value for both tangents
        radius: Saddle radius
        max_iterations: Iteration budget
        tolerance: Convergence tolerance
        increasing_x: Rope direction

    Returns:
        SaddleArc, or None for a missing radius, a non catenary fit or a
        failing iteration
    """
    if not _is_number(radius) or radius <= 0.0:
        return None
    if not (chain1.is_cosinus_hyperbolicus() and chain2.is_cosinus_hyperbolicus()):
        return None
    inc = increasing_x is True
    grad1 = chain1.get_gradient(x)
    grad2 = chain2.get_gradient(x)
    up = grad1 >= grad2 if inc else grad1 <= grad2
    r = radius
    a1, b1, c1 = chain1.get_a(), chain1.get_b(), chain1.get_c()
    a2, b2, c2 = chain2.get_a(), chain2.get_b(), chain2.get_c()
    max_iter = int(max_iterations) if _is_number(max_iterations) and max_iterations > 0 else DEFAULT_MAX_ITERATIONS
    tol = tolerance if _is_number(tolerance) and tolerance > 0 else DEFAULT_DISTANCE_TOLERANCE
    # side of the rope the center lies on
    sign = 1.0 if up else -1.0
    x1 = x
    x2 = x
    try:
        for _ in range(max_iter):
            ch1 = math.cosh(a1 * x1 + b1)
            sh1 = math.sinh(a1 * x1 + b1)
            ch2 = math.cosh(a2 * x2 + b2)
            sh2 = math.sinh(a2 * x2 + b2)
            y1 = ch1 / a1 + c1
            y2 = ch2 / a2 + c2
            f1 = x1 + sign * r * sh1 / ch1 - x2 - sign * r * sh2 / ch2
            f2 = y1 - sign * r / ch1 - y2 + sign * r / ch2
            if abs(f1) <= tol and abs(f2) <= tol:
                center_x = (x1 + sign * r * sh1 / ch1 + x2 + sign * r * sh2 / ch2) * 0.5
                center_y = (y1 - sign * r / ch1 + y2 - sign * r / ch2) * 0.5
                phi1 = math.atan2(y1 - center_y, x1 - center_x)
                phi2 = math.atan2(y2 - center_y, x2 - center_x)
                left = inc != up
                turn = HALF_PI if left else -HALF_PI
                return SaddleArc(
                    left=left,
                    center_x=center_x,
                    center_y=center_y,
                    radius=radius,
                    start_x=x1,
                    start_y=y1,
                    start_phi=normalize_rope_angle(phi1 + turn),
                    end_x=x2,
                    end_y=y2,
                    end_phi=normalize_rope_angle(phi2 + turn),
                    up=up,
                )
            ch1sq = ch1 * ch1
            ch2sq = ch2 * ch2
            df1dx1 = 1.0 + sign * r * a1 / ch1sq
            df1dx2 = -1.0 - sign * r * a2 / ch2sq
            df2dx1 = sh1 + sign * a1 * r * sh1 / ch1sq
            df2dx2 = -sh2 - sign * a2 * r * sh2 / ch2sq
            det = df1dx1 * df2dx2 - df1dx2 * df2dx1
            if det == 0.0 or not math.isfinite(det):
                logger.debug("Saddle at x=%s: singular jacobian", x)
                return None
            x1 -= (df2dx2 * f1 - df1dx2 * f2) / det
            x2 -= (df1dx1 * f2 - df2dx1 * f1) / det
    except (OverflowError, ZeroDivisionError):
        logger.debug("Saddle at x=%s diverged", x)
        return None
    logger.debug("Saddle at x=%s did not converge", x)
    return None


def get_relative_linear_values(x1: float, x2: float, reference_x: float, x: float) -> Tuple[float, float]:
    """Triangle function over [x1, x2] peaking at reference_x.

    Returns:
        (value, gradient): value is 1.0 at reference_x and falls linearly
        to 0.0 at both ends
    """
    lo, hi = (x1, x2) if x2 > x1 else (x2, x1)
    if x < reference_x:
        denom = reference_x - lo
        return (x - lo) / denom, 1.0 / denom
    if x > reference_x:
        denom = hi - reference_x
        return (hi - x) / denom, -1.0 / denom
    return 1.0, 0.5 * (1.0 / (reference_x - lo) - 1.0 / (hi - reference_x))


def get_linear_height(x1: float, y1: float, x2: float, y2: float, x: float) -> float:
    """Height of the chord through (x1, y1) and (x2, y2) at x."""
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


def get_steel_rope_q0(diameter: float) -> float:
    """Weight per meter [N/m] of a solid steel rope.

    Example:
        >>> round(get_steel_rope_q0(0.04), 2)
        96.86
    """
    # [m^2]
    cross_section = diameter * diameter * 0.25 * PI
    # [kg/m]
    mass_per_meter = SPECIFIC_GRAVITY_OF_STEEL * cross_section
    return mass_per_meter * EARTH_GRAVITATION


def get_smooth_normalized_transfer(value: float, position1: Optional[float] = None,
                                   position2: Optional[float] = None) -> float:
    """Smooth fall-off from 1.0 at zero to 0.0 at one.

    The curve is flat up to s1, linear between s1 and s2 and quadratic from
    s2 to 1, joined with continuous first derivative. Values at or beyond
    1.0 give 0.0.

    Args:
        value: Relative distance (sign is ignored)
        position1: Start of the linear part, clamped to [0, 1]
        position2: End of the linear part, clamped to [0, 1]
    """
    s = abs(value) if _is_number(value) else 0.0
    p1 = position1 if _is_number(position1) else 0.0
    p2 = position2 if _is_number(position2) else 1.0
    s1 = max(min(p1, p2, 1.0), 0.0)
    s2 = max(min(max(p1, p2), 1.0), 0.0)
    if s >= 1.0:
        return 0.0
    if s1 == 0.0:
        if s2 == 0.0:
            ds = s - 1.0
            return ds * ds
        if s2 < 1.0:
            d = 1.0 / ((-s2 - 1.0) * (s2 - 1.0))
            if s <= s2:
                return 2.0 * d * (s2 - 1.0) * s + 1.0
            ds = s - 1.0
            return d * ds * ds
        return 1.0 - s
    if s1 < 1.0:
        if s1 == s2:
            if s <= s1:
                return 1.0 - s * s / s1
            ds = s - 1.0
            return ds * ds / (1.0 - s1)
        if s2 < 1.0:
            d = 1.0 / ((s1 - s2 - 1.0) * (s2 - 1.0))
            a = d * (1.0 - s2) / s1
            if s < s1:
                return 1.0 - a * s * s
            if s <= s2:
                return 2.0 * d * (s2 - 1.0) * s + a * s1 * s1 + 1.0
            ds = s - 1.0
            return d * ds * ds
        if s <= s1:
            return 1.0 - s * s / (s1 * (2.0 - s1))
        return -2.0 * (s - 1.0) / (2.0 - s1)
    return 1.0 - s * s


def get_smooth_rope_sag_factor(x1: float, x2: float, x: float, s1: float, s2: float) -> float:
    """Sag factor of a load at x in the span [x1, x2], 1.0 in the middle."""
    xm = (x1 + x2) * 0.5
    return get_smooth_normalized_transfer(abs(x - xm) / abs(x2 - xm), s1, s2)


__all__ = [
    "SaddleArc",
    "compute_rope_support",
    "get_relative_linear_values",
    "get_linear_height",
    "get_steel_rope_q0",
    "get_smooth_normalized_transfer",
    "get_smooth_rope_sag_factor",
]
