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
Tests for Curve Configuration Descriptors
=========================================

Tests for reading curve descriptors from plain mappings.
"""

import pytest

from ropeway.core.config import (
    Placement,
    CurvePointConfig,
    ArcLineConfig,
    SupportConfig,
    FieldConfig,
    RopeLineConfig,
    SectionChild,
)


class TestPlacement:
    """Tests for Placement."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test the neutral placement."""
        placement = Placement.from_dict({})
        assert placement.x == 0.0
        assert placement.scale == 1.0
        assert placement.phi is None
        assert placement.mirror_x is False

    @pytest.mark.unit
    def test_camel_case_keys(self):
        """Test reading mirror and upright flags."""
        placement = Placement.from_dict({"x": 3, "mirrorX": True, "mirrorY": True, "upright": True})
        assert placement.x == 3.0
        assert placement.mirror_x is True
        assert placement.mirror_y is True
        assert placement.upright is True

    @pytest.mark.unit
    def test_invalid_scale_falls_back(self):
        """Test that a non-positive scale in a mapping is ignored."""
        assert Placement.from_dict({"scale": -2}).scale == 1.0
        assert Placement.from_dict({"scale": "big"}).scale == 1.0

    @pytest.mark.unit
    def test_non_positive_scale_raises(self):
        """Test that constructing with a non-positive scale raises."""
        with pytest.raises(ValueError):
            Placement(scale=0.0)


class TestArcLineConfig:
    """Tests for ArcLineConfig and CurvePointConfig."""

    @pytest.mark.unit
    def test_points_without_coordinates_are_skipped(self):
        """Test that incomplete points are dropped."""
        config = ArcLineConfig.from_dict({
            "points": [{"x": 0, "y": 0}, {"x": 5}, "junk", {"x": 10, "y": 0}],
        })
        assert len(config.points) == 2

    @pytest.mark.unit
    def test_booleans_are_not_numbers(self):
        """Test that boolean values do not count as coordinates."""
        assert CurvePointConfig.from_dict({"x": True, "y": 0}) is None

    @pytest.mark.unit
    def test_radius(self):
        """Test reading the fillet radius."""
        point = CurvePointConfig.from_dict({"x": 1, "y": 2, "r": 3, "position": 4, "id": "P"})
        assert point.r == 3.0
        assert point.position == 4.0
        assert point.id == "P"

    @pytest.mark.unit
    def test_non_positive_radius_ignored(self):
        """Test that a zero radius in a mapping means no fillet."""
        assert CurvePointConfig.from_dict({"x": 1, "y": 2, "r": 0}).r is None

    @pytest.mark.unit
    def test_non_positive_radius_raises(self):
        """Test that constructing with a negative radius raises."""
        with pytest.raises(ValueError):
            CurvePointConfig(x=0.0, y=0.0, r=-1.0)

    @pytest.mark.unit
    def test_coerce(self):
        """Test coerce with a descriptor, a mapping and another type."""
        config = ArcLineConfig()
        assert ArcLineConfig.coerce(config) is config
        assert isinstance(ArcLineConfig.coerce({"closed": True}), ArcLineConfig)
        with pytest.raises(TypeError):
            ArcLineConfig.coerce(42)


class TestRopeLineConfig:
    """Tests for RopeLineConfig."""

    @pytest.mark.unit
    def test_points_dispatch_on_type(self):
        """Test that supports and fields are told apart by type."""
        config = RopeLineConfig.from_dict({
            "weightPerMeter": 2.5,
            "stressX": 40,
            "stressSag": 0.5,
            "maxIterations": 50,
            "distanceTolerance": 1e-4,
            "verbose": True,
            "points": [
                {"type": "support", "x": 0, "y": 0, "counterweight": 1000},
                {"type": "field", "sag": 3, "rope": [0.02, 0.03]},
                {"type": "tower", "x": 5, "y": 5},
                {"type": "support", "x": 100, "y": 10, "r": 2, "position": 7},
            ],
        })
        assert len(config.points) == 3
        assert isinstance(config.points[0], SupportConfig)
        assert isinstance(config.points[1], FieldConfig)
        assert config.points[0].counterweight == 1000.0
        assert config.points[1].rope == [0.02, 0.03]
        assert config.points[2].position == 7.0
        assert config.weight_per_meter == 2.5
        assert config.stress_x == 40.0
        assert config.max_iterations == 50
        assert config.distance_tolerance == pytest.approx(1e-4)
        assert config.verbose is True
        assert len(config.supports) == 2

    @pytest.mark.unit
    def test_missing_support_coordinates_default_to_zero(self):
        """Test support defaults."""
        support = SupportConfig.from_dict({})
        assert support.x == 0.0
        assert support.y == 0.0
        assert support.r is None

    @pytest.mark.unit
    def test_coerce_rejects_other_types(self):
        """Test coerce with an unsupported value."""
        with pytest.raises(TypeError):
            RopeLineConfig.coerce([1, 2, 3])


class TestSectionChild:
    """Tests for SectionChild."""

    @pytest.mark.unit
    def test_from_dict(self):
        """Test reading a zone."""
        child = SectionChild.from_dict({"length": 12, "object": "platform"})
        assert child.length == 12.0
        assert child.position is None
        assert child.object == "platform"
