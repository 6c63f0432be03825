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
Discretization
==============

Tick spacing and curve sampling helpers for station labels, grid lines and
polyline export.
"""

import math

import numpy as np

from ..logging_config import get_logger
from .points import LengthCurve

logger = get_logger(__name__)


def get_disc_iter_diff(min_diff: float) -> float:
    """Round a step up to the next value of the 1-2-5 series.

    Args:
        min_diff: Smallest acceptable step (sign is ignored)

    Returns:
        The step, or 0.0 for zero, huge or NaN input

    Example:
        >>> get_disc_iter_diff(3.2)
        5.0
        >>> get_disc_iter_diff(0.3)
        0.5
    """
    value = abs(min_diff)
    if math.isnan(value) or value <= 1.0e-300 or value >= 1.0e+300:
        return 0.0
    diff = 1.0
    if value > diff:
        for _ in range(300):
            for factor in (2.0, 5.0, 10.0):
                if value <= diff * factor:
                    return diff * factor
            diff *= 10.0
    else:
        for _ in range(300):
            if value > diff * 0.5:
                return diff
            if value > diff * 0.2:
                return diff * 0.5
            if value > diff * 0.1:
                return diff * 0.2
            diff *= 0.1
    return 0.0


class DiscretizationIterator:
    """Iterate equidistant values from start towards end.

    The first value is start. The last value is the first one at or beyond
    end, so a step that does not divide the range overshoots end.

    With ``force_metric_diff`` the step is rounded to the 1-2-5 series and
    the values snap to multiples of it that lie inside [start, end].

    Example:
        >>> list(DiscretizationIterator(3.0, 0.0, 10.0))
        [0.0, 3.0, 6.0, 9.0, 12.0]
        >>> list(DiscretizationIterator(3.0, 0.0, 10.0, True))
        [0.0, 5.0, 10.0]
    """

    def __init__(self, difference: float = 0.0, start: float = 0.0, end: float = 0.0,
                 force_metric_diff: bool = False):
        self.init(difference, start, end, force_metric_diff)

    def init(self, difference: float, start: float, end: float, force_metric_diff: bool = False) -> None:
        fmd = force_metric_diff is True
        diff = get_disc_iter_diff(difference) if fmd else abs(difference)
        self._count = 0
        if diff <= 0.0 or math.isnan(diff):
            self._diff = 0.0
            self._start = 0.0
            self._max = -1
            self._raising = True
            return
        raising = start < end
        if fmd:
            first = (math.ceil(start / diff) if raising else math.floor(start / diff)) * diff
            last = (math.floor(end / diff) if raising else math.ceil(end / diff)) * diff
        else:
            first = start
            last = end
        span = last - first if raising else first - last
        self._diff = diff
        self._start = first
        self._raising = raising
        self._max = math.ceil(span / diff)

    def has_next(self) -> bool:
        return self._count <= self._max

    def get_next(self) -> float:
        offset = self._diff * self._count
        self._count += 1
        return self._start + offset if self._raising else self._start - offset

    def __iter__(self):
        return self

    def __next__(self) -> float:
        if not self.has_next():
            raise StopIteration
        return self.get_next()


def sample_curve(curve: LengthCurve, start: float, end: float, count: int, left: float = 0.0) -> np.ndarray:
    """Sample a curve at equidistant positions.

    Args:
        curve: ArcLine, RopeLine or CurveSection-like object
        start: First position
        end: Last position
        count: Number of samples (at least 2)
        left: Perpendicular offset

    Returns:
        Array of shape (n, 3) with x, y and phi. Positions the curve cannot
        map are left out.
    """
    if count < 2:
        raise ValueError(f"Need at least 2 samples, got {count}")
    rows = []
    for position in np.linspace(start, end, count):
        point = curve.transform(float(position), left)
        if point is not None:
            rows.append(point.to_tuple())
    if len(rows) < count:
        logger.debug("Skipped %d unmapped sample positions", count - len(rows))
    return np.array(rows, dtype=float).reshape(-1, 3)


__all__ = ["get_disc_iter_diff", "DiscretizationIterator", "sample_curve"]
