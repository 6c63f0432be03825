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
Position Adjuster
=================

Piecewise-linear calibration between an external position domain (for
example the chainage printed on support towers) and the internal curve
parameter (the geometric arc length).

Anchors are appended in order. Once the first segment fixes whether source
and target increase or decrease, every following segment must keep both
directions. Outside the calibrated range values are extrapolated with the
overall slope between the first and the last anchor.

Example:
    >>> adjuster = Adjuster()
    >>> adjuster.reset(0.0, 0.0, "A")
    >>> adjuster.add(100.0, 90.0, "B")
    True
    >>> adjuster.add(200.0, 200.0, "C")
    True
    >>> adjuster.adjust(50.0)
    45.0
    >>> adjuster.adjust_inverse(145.0)
    150.0
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from ..exceptions import CalibrationError


@dataclass(frozen=True)
class CalibrationSegment:
    """One calibrated source range and its target range."""

    s1: float
    s2: float
    t1: float
    t2: float
    id: Any = None

    @property
    def ds(self) -> float:
        return self.s2 - self.s1

    @property
    def dt(self) -> float:
        return self.t2 - self.t1

    @property
    def rate(self) -> float:
        """Target units per source unit."""
        return self.dt / self.ds


def _direction(delta: float) -> Optional[bool]:
    if delta > 0.0:
        return True
    if delta < 0.0:
        return False
    return None


class Adjuster:
    """Monotonic piecewise-linear map from source to target values.

    Attributes:
        increment_source: True if sources increase, None before the first anchor
        increment_target: True if targets increase, None before the first anchor
    """

    def __init__(self):
        self._segments: List[CalibrationSegment] = []
        self.reset()

    def reset(self, source: float = 0.0, target: float = 0.0, id: Any = None) -> None:
        """Start a new calibration at the given anchor."""
        self._segments.clear()
        self.increment_source: Optional[bool] = None
        self.increment_target: Optional[bool] = None
        self._id = id
        self._s = float(source)
        self._t = float(target)

    @property
    def valid(self) -> bool:
        return len(self._segments) > 0

    @property
    def segments(self) -> List[CalibrationSegment]:
        return list(self._segments)

    def append(self, source: float, target: float, id: Any = None) -> CalibrationSegment:
        """Append the next anchor.

        Args:
            source: External position of the anchor
            target: Curve parameter of the anchor
            id: Optional identifier (e.g. support id) used by format()

        Returns:
            The new calibration segment

        Raises:
            CalibrationError: If a delta is zero or its direction conflicts
                with the segments added before
        """
        ds = source - self._s
        cis = _direction(ds)
        if cis is None or (self.increment_source is not None and self.increment_source != cis):
            raise CalibrationError(
                f"Source {source} does not continue the calibration from {self._s}"
            )
        dt = target - self._t
        cit = _direction(dt)
        if cit is None or (self.increment_target is not None and self.increment_target != cit):
            raise CalibrationError(
                f"Target {target} does not continue the calibration from {self._t}"
            )

        segment = CalibrationSegment(s1=self._s, s2=source, t1=self._t, t2=target, id=id)
        self._segments.append(segment)
        self._s = source
        self._t = target
        self.increment_source = cis
        self.increment_target = cit
        return segment

    def add(self, source: float, target: float, id: Any = None) -> bool:
        """Append the next anchor.

        Returns:
            False without changing anything if the anchor does not continue
            the calibration, True otherwise
        """
        try:
            self.append(source, target, id)
        except CalibrationError:
            return False
        return True

    def adjust(self, source: float) -> Optional[float]:
        """Map a source value onto the target domain.

        Returns:
            The target value, or None if nothing has been calibrated
        """
        segments = self._segments
        if not segments:
            return None
        inc = self.increment_source
        first = segments[0]
        last = segments[-1]
        s1, s2 = first.s1, last.s2
        t1, t2 = first.t1, last.t2
        if (source <= s1) if inc else (source >= s1):
            return t1 + (source - s1) / (s2 - s1) * (t2 - t1)
        if (source >= s2) if inc else (source <= s2):
            return t2 + (source - s2) / (s2 - s1) * (t2 - t1)
        for segment in segments:
            if (source <= segment.s2) if inc else (source >= segment.s2):
                return segment.t1 + (source - segment.s1) / segment.ds * segment.dt
        return None

    def adjust_inverse(self, target: float) -> Optional[float]:
        """Map a target value back onto the source domain."""
        segments = self._segments
        if not segments:
            return None
        inc = self.increment_target
        first = segments[0]
        last = segments[-1]
        s1, s2 = first.s1, last.s2
        t1, t2 = first.t1, last.t2
        if (target <= t1) if inc else (target >= t1):
            return s1 + (target - t1) / (t2 - t1) * (s2 - s1)
        if (target >= t2) if inc else (target <= t2):
            return s2 + (target - t2) / (t2 - t1) * (s2 - s1)
        for segment in segments:
            if (target <= segment.t2) if inc else (target >= segment.t2):
                return segment.s1 + (target - segment.t1) / segment.dt * segment.ds
        return None

    def format(self) -> Optional[str]:
        """Describe the slope of every segment and the anchors it connects."""
        if not self._segments:
            return None
        lines = ['adjustment:']
        id1 = self._id
        for index, segment in enumerate(self._segments):
            lines.append(f'[{index}] = {segment.rate} (from "{id1}" to "{segment.id}")')
            id1 = segment.id
        return '\n'.join(lines)


__all__ = ["Adjuster", "CalibrationSegment"]
