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
Chain Function
==============

Catenary fitting for hanging ropes:

    y = f(x) = cosh(a*x + b) / a + c

All iterations run in a normalized coordinate system where the two outer
points sit at x = -1 and x = +1 and their mean height at y = 0. This keeps
the 2-D Newton iterations well conditioned for any span size.

Boundary conditions:
    - init_for_three_points: curve through three points
    - init_for_length: curve through two points with a given arc length
    - init_for_minimum_force: curve through two points with minimal
      horizontal force at a location
    - init_for_force: curve through two points with a given force at a
      location

Failing to converge is a normal outcome. The fit then reports False and the
instance is reset (mode NONE). Three-point fits whose Newton iteration
fails keep the seeding parabola (mode PARABOLA).

Example:
    >>> chain = ChainFunction()
    >>> chain.init_for_three_points(0.0, 0.0, 5.0, -2.0, 10.0, 0.0)
    True
    >>> chain.mode
    <FitMode.COSH: 'cosh'>
    >>> round(chain.get_height(5.0), 3)
    -2.0
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..constants import (
    DEFAULT_DISTANCE_TOLERANCE,
    DEFAULT_LENGTH_TOLERANCE,
    DEFAULT_MAX_ITERATIONS,
    GOLDEN_SECTION_INTERVAL_PART,
    THIRD,
)
from ..logging_config import get_logger

logger = get_logger(__name__)

Point = Tuple[float, float]


class FitMode(Enum):
    """Result of the last fit."""

    COSH = "cosh"
    PARABOLA = "parabola"
    NONE = "none"


class PointSituation(Enum):
    """Classification of input points after ordering by x."""

    VALID = 0
    DOUBLE_POINT = 1
    DOUBLE_START = 2
    DOUBLE_END = 3
    TRIPLE_POINT = 4


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_zero_infinite_or_invalid(value: float) -> bool:
    return value == 0.0 or not math.isfinite(value)


def compare_with_tolerance(value1: float, value2: float, tolerance: float) -> int:
    """Three-way compare treating values within tolerance as equal."""
    t = tolerance if tolerance > 0.0 else 0.0
    if value1 > value2 + t:
        return 1
    if value1 < value2 - t:
        return -1
    return 0


def order_tuple(x1: float, y1: float, x2: float, y2: float,
                tolerance: float) -> Tuple[PointSituation, Tuple[Point, Point]]:
    """Order two points by x.

    Returns:
        (situation, (p1, p2)). Coincident x coordinates give DOUBLE_POINT
        with the first point repeated.
    """
    res = compare_with_tolerance(x1, x2, tolerance)
    if res > 0:
        return PointSituation.VALID, ((x2, y2), (x1, y1))
    if res == 0:
        return PointSituation.DOUBLE_POINT, ((x1, y1), (x1, y1))
    return PointSituation.VALID, ((x1, y1), (x2, y2))


def order_triplet(x1: float, y1: float, x2: float, y2: float, x3: float, y3: float,
                  tolerance: float) -> Tuple[PointSituation, Tuple[Point, Point, Point]]:
    """Order three points by x and classify coincident locations.

    Returns:
        (situation, (p1, p2, p3)) with p1 <= p2 <= p3 in x. For
        DOUBLE_START the first point is repeated, for DOUBLE_END the middle
        one, so p1 and p3 always span the outer locations.
    """
    p0, p1, p2 = sorted(((x1, y1), (x2, y2), (x3, y3)), key=lambda p: p[0])
    start = compare_with_tolerance(p0[0], p1[0], tolerance) == 0
    end = compare_with_tolerance(p1[0], p2[0], tolerance) == 0
    if start and end:
        return PointSituation.TRIPLE_POINT, (p0, p0, p0)
    if start:
        return PointSituation.DOUBLE_START, (p0, p0, p2)
    if end:
        return PointSituation.DOUBLE_END, (p0, p1, p1)
    return PointSituation.VALID, (p0, p1, p2)


@dataclass
class Parabola:
    """y = a*x^2 + b*x + c"""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    @classmethod
    def through_three_points(cls, x1: float, y1: float, x2: float, y2: float,
                             x3: float, y3: float) -> 'Parabola':
        dx12 = x1 - x2
        dx23 = x2 - x3
        dx31 = x3 - x1
        dy12 = y1 - y2
        dy23 = y2 - y3
        dy31 = y3 - y1
        x1sq = x1 * x1
        x2sq = x2 * x2
        x3sq = x3 * x3
        r = dx12 * dx23 * dx31
        return cls(
            a=(x1 * dy23 + x2 * dy31 + x3 * dy12) / r,
            b=-(x1sq * dy23 + x2sq * dy31 + x3sq * dy12) / r,
            c=-(x1sq * (x2 * y3 - x3 * y2) + x1 * (x3sq * y2 - x2sq * y3) + x2 * x3 * y1 * dx23) / r,
        )

    @classmethod
    def through_two_points(cls, x1: float, y1: float, x2: float, y2: float) -> 'Parabola':
        r = x1 - x2
        return cls(a=0.0, b=(y1 - y2) / r, c=(x1 * y2 - x2 * y1) / r)

    def value(self, x: float) -> float:
        return x * (self.a * x + self.b) + self.c

    def gradient(self, x: float) -> float:
        return 2.0 * self.a * x + self.b

    def distance(self, x1: float, x2: float) -> float:
        """Arc length between two locations."""
        a = self.a
        if a == 0.0:
            return (x2 - x1) * math.sqrt(1.0 + self.b * self.b)

        def primitive(u):
            return u * math.sqrt(1.0 + u * u) + math.asinh(u)

        return (primitive(self.gradient(x2)) - primitive(self.gradient(x1))) / (4.0 * a)


class ChainFunction:
    """Catenary through two or three points.

    Args:
        max_iterations: Iteration budget per solver loop
        distance_tolerance: Convergence tolerance of the Newton iterations
            and the coincident point check
        length_tolerance: Tolerance of the length bracketing
    """

    def __init__(self, max_iterations: Optional[int] = None,
                 distance_tolerance: Optional[float] = None,
                 length_tolerance: Optional[float] = None):
        self._max_iterations = (
            int(max_iterations) if _is_number(max_iterations) and max_iterations > 0
            else DEFAULT_MAX_ITERATIONS
        )
        self._distance_tolerance = (
            distance_tolerance if _is_number(distance_tolerance) and distance_tolerance > 0
            else DEFAULT_DISTANCE_TOLERANCE
        )
        self._length_tolerance = (
            length_tolerance if _is_number(length_tolerance) and length_tolerance > 0
            else DEFAULT_LENGTH_TOLERANCE
        )
        self._points: Tuple[Point, ...] = ()
        self.reset()

    def __repr__(self):
        return (f"ChainFunction(mode={self.mode.value}, a={self.get_a():.6g}, "
                f"b={self.get_b():.6g}, c={self.get_c():.6g})")

    def reset(self) -> None:
        """Clear the fit (mode NONE)."""
        self._parabola = Parabola()
        self._norm_a = 1.0
        self._norm_b = 0.0
        self._norm_c = 0.0
        self._valid = False
        self._cosh = False
        self._scale = 1.0
        self._scale_inv = 1.0
        self._x_offset = 0.0
        self._y_offset = 0.0

    # ------------------------------------------------------------------
    # normalized coordinates
    # ------------------------------------------------------------------

    def _init_transform(self, x1: float, y1: float, x2: float, y2: float) -> None:
        scale_inv = (x2 - x1) * 0.5
        scale = 1.0 / scale_inv
        self._x_offset = -(x1 + x2) * scale * 0.5
        self._y_offset = -(y1 + y2) * 0.5
        self._scale = scale
        self._scale_inv = scale_inv

    def _to_norm(self, value: float) -> float:
        return self._scale * value

    def _from_norm(self, value: float) -> float:
        return self._scale_inv * value

    def _to_norm_location(self, x: float) -> float:
        return self._scale * x + self._x_offset

    def _from_norm_location(self, x: float) -> float:
        return self._scale_inv * (x - self._x_offset)

    def _to_norm_height(self, y: float) -> float:
        return self._scale * (y + self._y_offset)

    def _from_norm_height(self, y: float) -> float:
        return self._scale_inv * y - self._y_offset

    def _norm_height(self, nx: float) -> float:
        return math.cosh(self._norm_a * nx + self._norm_b) / self._norm_a + self._norm_c

    def _norm_distance(self, nx1: float, nx2: float) -> float:
        a = self._norm_a
        b = self._norm_b
        return (math.sinh(a * nx2 + b) - math.sinh(a * nx1 + b)) / a

    def _norm_force(self, nx: float) -> float:
        return math.cosh(self._norm_a * nx + self._norm_b) / self._norm_a

    def _normalize(self, points) -> list:
        return [(self._to_norm_location(x), self._to_norm_height(y)) for x, y in points]

    # ------------------------------------------------------------------
    # solvers
    # ------------------------------------------------------------------

    def _fit_three_normalized(self, nx1: float, ny1: float, nx2: float, ny2: float,
                              nx3: float, ny3: float) -> bool:
        """2-D Newton for a and b, seeded by the parabola through the points.

        On success the normalized parameters are stored and the mode is
        COSH. On failure the parabola stays available and the catenary
        parameters are left unchanged.
        """
        self._cosh = False
        dy12 = ny1 - ny2
        dy32 = ny3 - ny2
        # second order Taylor polynomial of cosh gives the start values
        parabola = Parabola.through_three_points(nx1, ny1, nx2, ny2, nx3, ny3)
        self._parabola = parabola
        a = 2.0 * parabola.a
        b = parabola.b
        tol = self._distance_tolerance
        try:
            for _ in range(self._max_iterations):
                c1 = math.cosh(a * nx1 + b)
                c2 = math.cosh(a * nx2 + b)
                c3 = math.cosh(a * nx3 + b)
                f1 = a * dy12 - c1 + c2
                f2 = a * dy32 - c3 + c2
                if abs(f1) <= tol and abs(f2) <= tol:
                    if a == 0.0:
                        # collinear points, the parabola is the exact answer
                        return False
                    self._norm_a = a
                    self._norm_b = b
                    self._norm_c = (ny1 + ny2 + ny3 - (c1 + c2 + c3) / a) * THIRD
                    self._cosh = True
                    return True
                s1 = math.sinh(a * nx1 + b)
                s2 = math.sinh(a * nx2 + b)
                s3 = math.sinh(a * nx3 + b)
                df1da = dy12 - s1 * nx1 + s2 * nx2
                df1db = s2 - s1
                df2da = dy32 - s3 * nx3 + s2 * nx2
                df2db = s2 - s3
                det = df1da * df2db - df1db * df2da
                if _is_zero_infinite_or_invalid(det):
                    logger.debug("Three point fit: singular jacobian")
                    return False
                a -= (df2db * f1 - df1db * f2) / det
                b -= (df1da * f2 - df2da * f1) / det
        except (OverflowError, ZeroDivisionError):
            logger.debug("Three point fit diverged")
            return False
        logger.debug("Three point fit did not converge within %d iterations", self._max_iterations)
        return False

    def init_for_three_points(self, x1: float, y1: float, x2: float, y2: float,
                              x3: float, y3: float) -> bool:
        """Fit a catenary through three points.

        The points may be given in any order. Two coincident locations fall
        back to the straight line through the distinct ones (mode
        PARABOLA); three coincident locations fail.

        Returns:
            True if the instance is valid afterwards
        """
        self.reset()
        situation, points = order_triplet(x1, y1, x2, y2, x3, y3, self._distance_tolerance)
        if situation is PointSituation.TRIPLE_POINT:
            return False
        self._points = points
        (px1, py1), _, (px3, py3) = points
        self._init_transform(px1, py1, px3, py3)
        (nx1, ny1), (nx2, ny2), (nx3, ny3) = self._normalize(points)
        if situation is PointSituation.VALID:
            self._fit_three_normalized(nx1, ny1, nx2, ny2, nx3, ny3)
        else:
            self._parabola = Parabola.through_two_points(nx1, ny1, nx3, ny3)
            self._cosh = False
        self._valid = True
        return True

    def _init_two_points(self, x1: float, y1: float, x2: float, y2: float) -> Optional[list]:
        """Reset, order and normalize two support points."""
        self.reset()
        situation, points = order_tuple(x1, y1, x2, y2, self._distance_tolerance)
        if situation is not PointSituation.VALID:
            return None
        self._points = points
        (px1, py1), (px2, py2) = points
        self._init_transform(px1, py1, px2, py2)
        normalized = self._normalize(points)
        (nx1, ny1), (nx2, ny2) = normalized
        self._parabola = Parabola.through_two_points(nx1, ny1, nx2, ny2)
        return normalized

    def _fail(self) -> bool:
        self.reset()
        return False

    def init_for_length(self, x1: float, y1: float, x2: float, y2: float, length: float) -> bool:
        """Fit a catenary through two points with the given arc length.

        Fails if the length does not exceed the straight distance.

        Example:
            >>> chain = ChainFunction()
            >>> chain.init_for_length(0.0, 0.0, 100.0, 20.0, 110.0)
            True
            >>> abs(chain.get_length(0.0, 100.0) - 110.0) < 1e-3
            True
        """
        normalized = self._init_two_points(x1, y1, x2, y2)
        if normalized is None or not _is_number(length) or length <= 0.0:
            return self._fail()
        (nx1, ny1), (nx2, ny2) = normalized
        nlen = self._to_norm(length)
        dx = nx2 - nx1
        dy = ny2 - ny1
        if nlen * nlen <= dx * dx + dy * dy:
            logger.debug("Rope length %s is too short for the span", length)
            return self._fail()

        xm = (nx1 + nx2) * 0.5
        ym = (ny1 + ny2) * 0.5
        max_iter = self._max_iterations
        len_tol = self._to_norm(self._length_tolerance)
        dist_tol = self._distance_tolerance

        # bracket the sag by doubling
        sag1 = 0.0
        sag2 = abs(dx) + abs(dy)
        for _ in range(max_iter):
            if not self._fit_three_normalized(nx1, ny1, xm, ym - sag2, nx2, ny2):
                return self._fail()
            if self._norm_distance(nx1, nx2) < nlen - len_tol:
                sag1 = sag2
                sag2 *= 2.0
            else:
                break
        else:
            return self._fail()

        # bisection to the length tolerance
        csag = (sag1 + sag2) * 0.5
        dsag = (sag2 - sag1) * 0.25
        for _ in range(max_iter):
            if not self._fit_three_normalized(nx1, ny1, xm, ym - csag, nx2, ny2):
                return self._fail()
            norm_length = self._norm_distance(nx1, nx2)
            if norm_length > nlen + len_tol:
                csag -= dsag
            elif norm_length < nlen - len_tol:
                csag += dsag
            else:
                break
            dsag *= 0.5
        else:
            return self._fail()

        # refine a and b directly on height difference and length
        a = self._norm_a
        b = self._norm_b
        try:
            for _ in range(max_iter):
                c1 = math.cosh(a * nx1 + b)
                c2 = math.cosh(a * nx2 + b)
                s1 = math.sinh(a * nx1 + b)
                s2 = math.sinh(a * nx2 + b)
                f1 = -a * dy - c1 + c2
                f2 = s2 - s1 - a * nlen
                if abs(f1) <= dist_tol and abs(f2) <= dist_tol:
                    self._norm_a = a
                    self._norm_b = b
                    self._norm_c = (ny1 + ny2 - (c1 + c2) / a) * 0.5
                    self._cosh = True
                    self._valid = True
                    return True
                df1da = -dy - s1 * nx1 + s2 * nx2
                df1db = s2 - s1
                df2da = c2 * nx2 - c1 * nx1 - nlen
                df2db = c2 - c1
                det = df1da * df2db - df1db * df2da
                if _is_zero_infinite_or_invalid(det):
                    break
                a -= (df2db * f1 - df1db * f2) / det
                b -= (df1da * f2 - df2da * f1) / det
        except (OverflowError, ZeroDivisionError):
            logger.debug("Length fit diverged")
        return self._fail()

    def _force_for_sag(self, nx1, ny1, xm, ym, nx2, ny2, nx, sag) -> float:
        if not self._fit_three_normalized(nx1, ny1, xm, ym - sag, nx2, ny2):
            return math.inf
        try:
            return self._norm_force(nx)
        except OverflowError:
            return math.inf

    def init_for_minimum_force(self, x1: float, y1: float, x2: float, y2: float, x: float) -> bool:
        """Fit the catenary with minimal horizontal force at location x.

        Golden section search over the sag of the span middle, between no
        sag and the sum of the x and y distances.
        """
        normalized = self._init_two_points(x1, y1, x2, y2)
        if normalized is None:
            return self._fail()
        (nx1, ny1), (nx2, ny2) = normalized
        nx = self._to_norm_location(x)
        dx = nx2 - nx1
        dy = ny2 - ny1
        xm = (nx1 + nx2) * 0.5
        ym = (ny1 + ny2) * 0.5
        tol = self._distance_tolerance

        sag0 = 0.0
        sag3 = abs(dx) + abs(dy)
        dsag = (sag3 - sag0) * GOLDEN_SECTION_INTERVAL_PART
        sag1 = sag0 + dsag
        sag2 = sag3 - dsag
        frc1 = self._force_for_sag(nx1, ny1, xm, ym, nx2, ny2, nx, sag1)
        frc2 = self._force_for_sag(nx1, ny1, xm, ym, nx2, ny2, nx, sag2)
        for _ in range(self._max_iterations):
            if dsag <= tol:
                break
            if frc1 > frc2:
                sag0 = sag1
                sag1 = sag2
                frc1 = frc2
                dsag = (sag3 - sag0) * GOLDEN_SECTION_INTERVAL_PART
                sag2 = sag3 - dsag
                frc2 = self._force_for_sag(nx1, ny1, xm, ym, nx2, ny2, nx, sag2)
            else:
                sag3 = sag2
                sag2 = sag1
                frc2 = frc1
                dsag = (sag3 - sag0) * GOLDEN_SECTION_INTERVAL_PART
                sag1 = sag0 + dsag
                frc1 = self._force_for_sag(nx1, ny1, xm, ym, nx2, ny2, nx, sag1)
        if dsag > tol:
            return self._fail()
        self._fit_three_normalized(nx1, ny1, xm, ym - (sag0 + sag3) * 0.5, nx2, ny2)
        self._valid = True
        return True

    def init_for_force(self, x1: float, y1: float, x2: float, y2: float, x: float,
                       force: float, q0: Optional[float] = None) -> bool:
        """Fit the catenary with the given horizontal force at location x.

        Args:
            x1, y1: First support
            x2, y2: Second support
            x: Location of the force
            force: Required force
            q0: Weight per meter [N/m]; without it the force is taken as
                force per weight (a length)

        Returns:
            False if the force is below the minimum force at x or the
            iteration fails
        """
        self.init_for_minimum_force(x1, y1, x2, y2, x)
        if not self._cosh:
            return self._fail()
        (nx1, ny1), (nx2, ny2) = self._normalize(self._points)
        nx = self._to_norm_location(x)
        frc = force / q0 if _is_number(q0) and q0 > 0.0 else force
        norm_frc = self._to_norm(frc)
        if norm_frc < self._norm_force(nx):
            logger.debug("Force %s is below the minimum force", force)
            return self._fail()

        # bisection of the sag towards the required force
        xm = (nx1 + nx2) * 0.5
        ym = (ny1 + ny2) * 0.5
        csag = (ym - self._norm_height(xm)) * 0.5
        dsag = csag * 0.5
        max_iter = self._max_iterations
        tol = self._distance_tolerance
        for _ in range(max_iter):
            if dsag <= tol:
                break
            if self._force_for_sag(nx1, ny1, xm, ym, nx2, ny2, nx, csag) < norm_frc:
                csag -= dsag
            else:
                csag += dsag
            dsag *= 0.5

        # refine a and b on height difference and force
        dy = ny2 - ny1
        a = self._norm_a
        b = self._norm_b
        try:
            for _ in range(max_iter):
                c1 = math.cosh(a * nx1 + b)
                c2 = math.cosh(a * nx2 + b)
                c = math.cosh(a * nx + b)
                f1 = -a * dy - c1 + c2
                f2 = c - a * norm_frc
                if abs(f1) <= tol and abs(f2) <= tol:
                    norm_c = (ny1 + ny2 - (c1 + c2) / a) * 0.5
                    self._parabola = Parabola(a * 0.5, b, (2.0 + b * b) * 0.5 / a + norm_c)
                    self._norm_a = a
                    self._norm_b = b
                    self._norm_c = norm_c
                    self._cosh = True
                    self._valid = True
                    return True
                s1 = math.sinh(a * nx1 + b)
                s2 = math.sinh(a * nx2 + b)
                s = math.sinh(a * nx + b)
                df1da = -dy - s1 * nx1 + s2 * nx2
                df1db = s2 - s1
                df2da = s * nx - norm_frc
                df2db = s
                det = df1da * df2db - df1db * df2da
                if _is_zero_infinite_or_invalid(det):
                    break
                a -= (df2db * f1 - df1db * f2) / det
                b -= (df1da * f2 - df2da * f1) / det
        except (OverflowError, ZeroDivisionError):
            logger.debug("Force fit diverged")
        return self._fail()

    # ------------------------------------------------------------------
    # accessors
    # ------------------------------------------------------------------

    @property
    def mode(self) -> FitMode:
        if self._cosh:
            return FitMode.COSH
        if self._valid:
            return FitMode.PARABOLA
        return FitMode.NONE

    def is_valid(self) -> bool:
        return self._valid

    def is_cosinus_hyperbolicus(self) -> bool:
        return self._cosh

    def get_height(self, x: float) -> float:
        """Height at x, 0.0 without a fit."""
        nx = self._to_norm_location(x)
        if self._cosh:
            return self._from_norm_height(self._norm_height(nx))
        if self._valid:
            return self._from_norm_height(self._parabola.value(nx))
        return 0.0

    def get_gradient(self, x: float) -> float:
        """First derivative at x."""
        nx = self._to_norm_location(x)
        if self._cosh:
            return math.sinh(self._norm_a * nx + self._norm_b)
        if self._valid:
            return self._parabola.gradient(nx)
        return 0.0

    def get_angle(self, x: float) -> float:
        return math.atan2(self.get_gradient(x), 1.0)

    def get_minimum_location(self) -> Optional[float]:
        """x of the lowest point, None if the curve has none."""
        if self._cosh:
            return self._from_norm_location(-self._norm_b / self._norm_a)
        if self._valid and self._parabola.a > 0.0:
            return self._from_norm_location(-self._parabola.b / (2.0 * self._parabola.a))
        return None

    def get_minimum_height(self) -> Optional[float]:
        if self._cosh:
            return self._from_norm_height(1.0 / self._norm_a + self._norm_c)
        location = self.get_minimum_location()
        return self.get_height(location) if location is not None else None

    def get_length(self, x1: float, x2: float) -> float:
        """Arc length between two locations (order does not matter)."""
        nx1 = self._to_norm_location(min(x1, x2))
        nx2 = self._to_norm_location(max(x1, x2))
        if self._cosh:
            return self._from_norm(self._norm_distance(nx1, nx2))
        if self._valid:
            return self._from_norm(self._parabola.distance(nx1, nx2))
        return 0.0

    def get_location(self, offset_x: float, distance: float) -> float:
        """Location reached after walking ``distance`` along the curve.

        Args:
            offset_x: Start location
            distance: Arc length to walk, negative walks towards smaller x
        """
        nx = self._to_norm_location(offset_x)
        nd = self._to_norm(distance)
        if self._cosh:
            a = self._norm_a
            b = self._norm_b
            nl = (math.asinh(a * nd + math.sinh(a * nx + b)) - b) / a
            return self._from_norm_location(nl)
        if not self._valid:
            return offset_x
        parabola = self._parabola
        nl = nx + nd / math.sqrt(1.0 + parabola.gradient(nx) ** 2)
        for _ in range(self._max_iterations):
            residual = parabola.distance(nx, nl) - nd
            if abs(residual) <= self._distance_tolerance:
                break
            nl -= residual / math.sqrt(1.0 + parabola.gradient(nl) ** 2)
        return self._from_norm_location(nl)

    def get_force(self, x: float, weight_per_meter: float, gravitation: Optional[float] = None) -> float:
        """Horizontal force at x.

        Args:
            x: Location
            weight_per_meter: Weight per meter, or mass per meter when a
                gravitation is given
            gravitation: Optional gravitational acceleration

        Returns:
            The force, 0.0 unless the fit is a catenary
        """
        if not self._cosh:
            return 0.0
        q0 = weight_per_meter * gravitation if _is_number(gravitation) and gravitation > 0.0 else weight_per_meter
        return self._from_norm(self._norm_force(self._to_norm_location(x))) * q0

    def get_a(self) -> float:
        """Parameter a of y = cosh(a*x + b)/a + c."""
        return self._norm_a * self._scale

    def get_b(self) -> float:
        """Parameter b of y = cosh(a*x + b)/a + c."""
        return self._norm_a * self._x_offset + self._norm_b

    def get_c(self) -> float:
        """Parameter c of y = cosh(a*x + b)/a + c."""
        return self._norm_c * self._scale_inv - self._y_offset


__all__ = [
    "ChainFunction",
    "FitMode",
    "Parabola",
    "PointSituation",
    "compare_with_tolerance",
    "order_tuple",
    "order_triplet",
]
