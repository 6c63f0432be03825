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
Tests for Curve Section
=======================

Tests for zones and items laid out along a curve.
"""

import pytest

from ropeway.core.config import SectionChild
from ropeway.core.geometry.arc_line import ArcLine
from ropeway.core.geometry.curve_section import CurveSection


@pytest.fixture
def line() -> ArcLine:
    """Straight 100 m line along the x axis."""
    return ArcLine({"points": [{"x": 0, "y": 0}, {"x": 100, "y": 0}]})


@pytest.fixture
def section(line) -> CurveSection:
    """100 m of zones squeezed onto the first 80 m of the line."""
    return CurveSection(line, "platform", curve_end=80.0, children=[
        {"length": 50, "object": "A"},
        {"position": 25, "object": {"object": "inner"}},
        {"length": 50},
        {"object": "tail"},
    ])


class TestLayout:
    """Tests for zone and item layout."""

    @pytest.mark.unit
    def test_length_is_sum_of_zones(self, section):
        """Test the section length."""
        assert section.get_length() == pytest.approx(100.0)

    @pytest.mark.unit
    def test_zones(self, section):
        """Test zone ranges."""
        assert section.get_zone_count() == 2
        assert section.get_zone_start(0) == 0.0
        assert section.get_zone_end(0) == 50.0
        assert section.get_zone_start(1) == 50.0
        assert section.get_zone_end(1) == 100.0
        assert section.get_zone_object(0).object == "A"

    @pytest.mark.unit
    def test_zone_selected_by_child(self, section):
        """Test selecting a zone with its child descriptor."""
        child = section.get_zone_object(1)
        assert section.get_zone_start(child) == 50.0
        assert section.get_zone_start(SectionChild(length=50.0)) is None

    @pytest.mark.unit
    def test_out_of_range_selector(self, section):
        """Test that unknown indices give None."""
        assert section.get_zone_start(5) is None
        assert section.get_zone_object(-1) is None
        assert section.get_item(9) is None

    @pytest.mark.unit
    def test_items(self, section):
        """Test item positions and objects."""
        assert section.get_item_count() == 2
        assert section.get_item_position(0) == 25.0
        assert section.get_item(0).object == "inner"
        # without position the item sits behind the zones before it
        assert section.get_item_position(1) == 100.0
        assert section.get_item(1).object == "tail"

    @pytest.mark.unit
    def test_no_zone_with_length(self, line):
        """Test a section without zones."""
        section = CurveSection(line, "empty", children=[{"object": "x"}])
        assert section.get_length() == 0.0
        assert section.get_zone_count() == 0
        assert section.get_item_count() == 0
        assert section.from_section_to_curve(10.0) == pytest.approx(10.0)


class TestSectionTransform:
    """Tests for mapping section positions onto the curve."""

    @pytest.mark.unit
    def test_scaling(self, section):
        """Test that section positions are scaled onto the curve range."""
        assert section.from_section_to_curve(50.0) == pytest.approx(40.0)
        point = section.transform(50.0)
        assert (point.x, point.y) == pytest.approx((40.0, 0.0))

    @pytest.mark.unit
    def test_curve_start_offset(self, line):
        """Test a section starting inside the curve."""
        section = CurveSection(line, curve_start=10.0, curve_end=90.0, children=[{"length": 100}])
        assert section.from_section_to_curve(0.0) == pytest.approx(10.0)
        assert section.from_section_to_curve(100.0) == pytest.approx(90.0)

    @pytest.mark.unit
    def test_offsets(self, section):
        """Test along and perpendicular offsets."""
        point = section.transform(50.0, 10.0)
        assert point.x == pytest.approx(48.0)
        point = section.transform(50.0, {"left": 2.0})
        assert (point.x, point.y) == pytest.approx((40.0, 2.0))
        point = section.transform(50.0, {"right": 2.0})
        assert point.y == pytest.approx(-2.0)

    @pytest.mark.unit
    def test_default_range_is_whole_curve(self, line):
        """Test that the curve end defaults to the curve length."""
        section = CurveSection(line, children=[{"length": 50}])
        assert section.from_section_to_curve(25.0) == pytest.approx(50.0)
