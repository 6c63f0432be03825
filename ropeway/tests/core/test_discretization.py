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
Tests for Discretization
========================

Tests for tick spacing and curve sampling.
"""

import math

import numpy as np
import pytest

from ropeway.core.geometry.arc_line import ArcLine
from ropeway.core.geometry.discretization import (
    DiscretizationIterator,
    get_disc_iter_diff,
    sample_curve,
)


class TestDiscIterDiff:
    """Tests for the 1-2-5 step rounding."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [
        (1.0, 1.0),
        (1.5, 2.0),
        (3.2, 5.0),
        (7.0, 10.0),
        (150.0, 200.0),
        (-3.2, 5.0),
        (0.3, 0.5),
        (0.15, 0.2),
        (0.013, 0.02),
    ])
    def test_steps(self, value, expected):
        """Test rounding up to the series."""
        assert get_disc_iter_diff(value) == pytest.approx(expected)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [0.0, float("nan"), 1.0e301])
    def test_unusable_values(self, value):
        """Test that zero, NaN and huge values give zero."""
        assert get_disc_iter_diff(value) == 0.0


class TestDiscretizationIterator:
    """Tests for DiscretizationIterator."""

    @pytest.mark.unit
    def test_plain_steps(self):
        """Test equidistant values including both ends."""
        assert list(DiscretizationIterator(2.5, 0.0, 10.0)) == pytest.approx([0.0, 2.5, 5.0, 7.5, 10.0])

    @pytest.mark.unit
    def test_plain_steps_overshoot_end(self):
        """Test that a step not dividing the range ends beyond end."""
        assert list(DiscretizationIterator(3.0, 0.0, 10.0)) == pytest.approx([0.0, 3.0, 6.0, 9.0, 12.0])

    @pytest.mark.unit
    def test_metric_steps_snap(self):
        """Test that metric steps snap to multiples."""
        assert list(DiscretizationIterator(3.0, 1.0, 12.0, True)) == pytest.approx([5.0, 10.0])

    @pytest.mark.unit
    def test_decreasing(self):
        """Test iterating from a larger start to a smaller end."""
        assert list(DiscretizationIterator(3.0, 10.0, 0.0, True)) == pytest.approx([10.0, 5.0, 0.0])

    @pytest.mark.unit
    def test_zero_difference(self):
        """Test that a zero step gives no values."""
        iterator = DiscretizationIterator(0.0, 0.0, 10.0)
        assert iterator.has_next() is False
        assert list(iterator) == []

    @pytest.mark.unit
    def test_has_next_get_next(self):
        """Test the explicit iteration protocol."""
        iterator = DiscretizationIterator()
        iterator.init(1.0, 0.0, 2.0)
        values = []
        while iterator.has_next():
            values.append(iterator.get_next())
        assert values == pytest.approx([0.0, 1.0, 2.0])


class TestSampleCurve:
    """Tests for sample_curve."""

    @pytest.mark.unit
    def test_shape_and_values(self):
        """Test sampling a straight line."""
        line = ArcLine({"points": [{"x": 0, "y": 0}, {"x": 10, "y": 0}]})
        samples = sample_curve(line, 0.0, 10.0, 5)
        assert samples.shape == (5, 3)
        np.testing.assert_allclose(samples[:, 0], [0.0, 2.5, 5.0, 7.5, 10.0])
        np.testing.assert_allclose(samples[:, 1], 0.0)

    @pytest.mark.unit
    def test_left_offset(self):
        """Test sampling with a perpendicular offset."""
        line = ArcLine({"points": [{"x": 0, "y": 0}, {"x": 0, "y": 10}]})
        samples = sample_curve(line, 0.0, 10.0, 3, left=1.0)
        np.testing.assert_allclose(samples[:, 0], -1.0)
        np.testing.assert_allclose(samples[:, 2], math.pi / 2)

    @pytest.mark.unit
    def test_unmapped_curve(self):
        """Test that an empty curve gives an empty array."""
        samples = sample_curve(ArcLine({"points": []}), 0.0, 10.0, 4)
        assert samples.shape == (0, 3)

    @pytest.mark.unit
    def test_too_few_samples(self):
        """Test that fewer than two samples are rejected."""
        line = ArcLine({"points": [{"x": 0, "y": 0}, {"x": 10, "y": 0}]})
        with pytest.raises(ValueError):
            sample_curve(line, 0.0, 10.0, 1)
