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
Tests for Rope Supports
=======================

Tests for saddle arcs and the stressing vehicle helper functions.
"""

import math

import pytest

from ropeway.core.catenary.chain_function import ChainFunction
from ropeway.core.catenary.rope_support import (
    compute_rope_support,
    get_linear_height,
    get_relative_linear_values,
    get_smooth_normalized_transfer,
    get_smooth_rope_sag_factor,
    get_steel_rope_q0,
)


@pytest.fixture
def chains():
    """Two sagging fields meeting at (100, 30) with a convex kink."""
    chain1 = ChainFunction()
    assert chain1.init_for_three_points(0.0, 0.0, 50.0, 11.0, 100.0, 30.0)
    chain2 = ChainFunction()
    assert chain2.init_for_three_points(100.0, 30.0, 150.0, 31.0, 200.0, 40.0)
    return chain1, chain2


class TestComputeRopeSupport:
    """Tests for compute_rope_support."""

    @pytest.mark.unit
    def test_saddle_over_support(self, chains):
        """Test a saddle where the rope bends over the sheave."""
        chain1, chain2 = chains
        arc = compute_rope_support(chain1, chain2, 100.0, 5.0)
        assert arc is not None
        assert arc.up is True
        assert arc.left is False
        assert arc.radius == 5.0
        assert arc.start_x < 100.0 < arc.end_x
        assert arc.center_y < arc.start_y

    @pytest.mark.unit
    def test_tangency(self, chains):
        """Test that the arc touches both catenaries."""
        chain1, chain2 = chains
        arc = compute_rope_support(chain1, chain2, 100.0, 5.0)
        assert arc.start_y == pytest.approx(chain1.get_height(arc.start_x), abs=1e-6)
        assert arc.end_y == pytest.approx(chain2.get_height(arc.end_x), abs=1e-6)
        for x, y in ((arc.start_x, arc.start_y), (arc.end_x, arc.end_y)):
            assert math.hypot(x - arc.center_x, y - arc.center_y) == pytest.approx(5.0, abs=1e-4)
        assert arc.start_phi == pytest.approx(chain1.get_angle(arc.start_x), abs=1e-4)
        assert arc.end_phi == pytest.approx(chain2.get_angle(arc.end_x), abs=1e-4)

    @pytest.mark.unit
    def test_missing_radius(self, chains):
        """Test that no saddle is fitted without a radius."""
        chain1, chain2 = chains
        assert compute_rope_support(chain1, chain2, 100.0, None) is None
        assert compute_rope_support(chain1, chain2, 100.0, 0.0) is None

    @pytest.mark.unit
    def test_requires_catenaries(self, chains):
        """Test that straight line fits give no saddle."""
        chain1, _ = chains
        line = ChainFunction()
        assert line.init_for_three_points(100.0, 30.0, 150.0, 35.0, 200.0, 40.0)
        assert compute_rope_support(chain1, line, 100.0, 5.0) is None


class TestLinearHelpers:
    """Tests for the linear helper functions."""

    @pytest.mark.unit
    def test_linear_height(self):
        """Test the chord height."""
        assert get_linear_height(0.0, 0.0, 10.0, 10.0, 5.0) == pytest.approx(5.0)
        assert get_linear_height(0.0, 10.0, 20.0, 0.0, 5.0) == pytest.approx(7.5)

    @pytest.mark.unit
    def test_relative_linear_values(self):
        """Test the triangle function on both sides of the peak."""
        assert get_relative_linear_values(0.0, 10.0, 4.0, 2.0) == pytest.approx((0.5, 0.25))
        assert get_relative_linear_values(0.0, 10.0, 4.0, 7.0) == pytest.approx((0.5, -1.0 / 6.0))
        value, gradient = get_relative_linear_values(0.0, 10.0, 4.0, 4.0)
        assert value == 1.0
        assert gradient == pytest.approx(0.5 * (0.25 - 1.0 / 6.0))

    @pytest.mark.unit
    def test_relative_linear_values_reversed(self):
        """Test that the span may be given from right to left."""
        assert get_relative_linear_values(10.0, 0.0, 4.0, 2.0) == pytest.approx((0.5, 0.25))

    @pytest.mark.unit
    def test_steel_rope_weight(self):
        """Test the weight per meter of a 40 mm rope."""
        assert get_steel_rope_q0(0.04) == pytest.approx(96.86, abs=0.01)


class TestSmoothTransfer:
    """Tests for the smooth stressing sag fall-off."""

    @pytest.mark.unit
    @pytest.mark.parametrize("s1,s2", [
        (0.0, 0.0), (0.0, 0.5), (0.0, 1.0), (0.4, 0.4), (0.2, 0.6), (0.3, 1.0), (1.0, 1.0),
    ])
    def test_ends(self, s1, s2):
        """Test 1.0 at zero and 0.0 at one."""
        assert get_smooth_normalized_transfer(0.0, s1, s2) == pytest.approx(1.0)
        assert get_smooth_normalized_transfer(1.0, s1, s2) == 0.0
        assert get_smooth_normalized_transfer(1.5, s1, s2) == 0.0

    @pytest.mark.unit
    @pytest.mark.parametrize("s1,s2", [(0.0, 0.5), (0.4, 0.4), (0.2, 0.6), (0.3, 1.0)])
    def test_continuity(self, s1, s2):
        """Test that the pieces join without jumps."""
        eps = 1e-9
        for s in {s1, s2} - {0.0, 1.0}:
            below = get_smooth_normalized_transfer(s - eps, s1, s2)
            above = get_smooth_normalized_transfer(s + eps, s1, s2)
            assert below == pytest.approx(above, abs=1e-6)

    @pytest.mark.unit
    def test_monotonic(self):
        """Test that the transfer never increases."""
        values = [get_smooth_normalized_transfer(i / 50.0, 0.3, 0.9) for i in range(51)]
        assert all(a >= b for a, b in zip(values, values[1:]))

    @pytest.mark.unit
    def test_sign_and_order_ignored(self):
        """Test that the sign of the value and the order of positions do not matter."""
        assert get_smooth_normalized_transfer(-0.3, 0.2, 0.6) == get_smooth_normalized_transfer(0.3, 0.6, 0.2)

    @pytest.mark.unit
    def test_linear_default(self):
        """Test the default linear fall-off."""
        assert get_smooth_normalized_transfer(0.25) == pytest.approx(0.75)

    @pytest.mark.unit
    def test_sag_factor(self):
        """Test the sag factor over a span."""
        assert get_smooth_rope_sag_factor(0.0, 100.0, 50.0, 0.3, 0.9) == pytest.approx(1.0)
        assert get_smooth_rope_sag_factor(0.0, 100.0, 0.0, 0.3, 0.9) == 0.0
        assert get_smooth_rope_sag_factor(0.0, 100.0, 100.0, 0.3, 0.9) == 0.0
        assert 0.0 < get_smooth_rope_sag_factor(0.0, 100.0, 80.0, 0.3, 0.9) < 1.0
