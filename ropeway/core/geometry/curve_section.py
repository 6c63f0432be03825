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
Curve Section
=============

Places zones and items on a length-bearing curve (ArcLine or RopeLine).

The section length is the sum of all zone lengths. Zones are scaled
proportionally onto the configured curve range: if the curve range is 80 m
but the zones add up to 100 m, an item at section position 50 m ends up at
40 m on the curve.

Children without a length are items. They sit at their explicit position,
or at the section offset reached by the zones before them.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..config import SectionChild
from ..constants import MIN_STROKE_LENGTH
from ..logging_config import get_logger
from .points import CurvePoint, LengthCurve, OffsetLike, resolve_offset

logger = get_logger(__name__)


@dataclass
class SectionZone:
    child: SectionChild
    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass
class SectionItem:
    child: SectionChild
    position: float
    object: Any = None


def _innermost_object(child: SectionChild) -> Any:
    """Follow nested ``object`` references down to the innermost one."""
    obj = child.object
    seen = set()
    while True:
        nested = None
        if isinstance(obj, Mapping):
            nested = obj.get('object')
        elif obj is not None:
            nested = getattr(obj, 'object', None)
        if nested is None or id(nested) in seen:
            return obj
        seen.add(id(obj))
        obj = nested


def _coerce_child(child: Union[SectionChild, Mapping[str, Any]]) -> SectionChild:
    if isinstance(child, SectionChild):
        return child
    return SectionChild.from_dict(child)


def _select(entries: Sequence, selector):
    """Pick an entry by index or by its child object."""
    if isinstance(selector, int) and not isinstance(selector, bool):
        if 0 <= selector < len(entries):
            return entries[selector]
        return None
    for entry in entries:
        if entry.child is selector:
            return entry
    return None


class CurveSection:
    """Zones and items laid out along a curve.

    Args:
        curve: Curve with ``get_length()`` and ``transform(position, left)``
        id: Identifier used in log messages
        curve_start: Start of the range on the curve (default 0)
        curve_end: End of the range on the curve (default curve length)
        children: SectionChild descriptors or mappings
    """

    def __init__(
        self,
        curve: LengthCurve,
        id: Optional[str] = None,
        curve_start: Optional[float] = None,
        curve_end: Optional[float] = None,
        children: Optional[Sequence[Union[SectionChild, Mapping[str, Any]]]] = None
    ):
        cu_start = curve_start if curve_start is not None else 0.0
        cu_end = curve_end if curve_end is not None else curve.get_length()
        elements = [_coerce_child(c) for c in children or ()]

        sec_len = sum(c.length for c in elements if c.length is not None and c.length > 0.0)
        if sec_len == 0.0:
            logger.error("CurveSection '%s' has no element with valid length!", id)

        zones: List[SectionZone] = []
        items: List[SectionItem] = []
        factor = 1.0
        cu_len = cu_end - cu_start
        if sec_len > 0.0 and abs(cu_len) > MIN_STROKE_LENGTH:
            factor = cu_len / sec_len
            sec_offset = 0.0
            for child in elements:
                if child.length is not None and child.length > 0.0:
                    zones.append(SectionZone(child, sec_offset, sec_offset + child.length))
                    sec_offset += child.length
                else:
                    position = child.position if child.position is not None else sec_offset
                    items.append(SectionItem(child, position, _innermost_object(child)))

        self.id = id
        self._curve = curve
        self._length = sec_len
        self._zones = zones
        self._items = items
        self._cu_offset = cu_start
        self._sec_to_cu_factor = factor

    def get_length(self) -> float:
        return self._length

    def get_zone_count(self) -> int:
        return len(self._zones)

    def get_zone_object(self, zone: int) -> Optional[SectionChild]:
        entry = _select(self._zones, zone)
        return entry.child if entry else None

    def get_zone_start(self, zone) -> Optional[float]:
        entry = _select(self._zones, zone)
        return entry.start if entry else None

    def get_zone_end(self, zone) -> Optional[float]:
        entry = _select(self._zones, zone)
        return entry.end if entry else None

    def get_item_count(self) -> int:
        return len(self._items)

    def get_item(self, item) -> Optional[SectionItem]:
        return _select(self._items, item)

    def get_item_position(self, item) -> Optional[float]:
        entry = _select(self._items, item)
        return entry.position if entry else None

    def from_section_to_curve(self, position: float) -> float:
        """Convert a section position into a curve position."""
        return self._cu_offset + position * self._sec_to_cu_factor

    def transform(self, section_position: float, offset: OffsetLike = None) -> Optional[CurvePoint]:
        """Map a section position onto a point of the underlying curve.

        Args:
            section_position: Position on the section
            offset: Number (along the section) or mapping/Offset with
                ``offset`` and ``left`` or ``right``

        Returns:
            CurvePoint from the curve, None if the curve cannot map it
        """
        along, left = resolve_offset(offset)
        return self._curve.transform(self.from_section_to_curve(section_position + along), left)


__all__ = ["CurveSection", "SectionZone", "SectionItem"]
