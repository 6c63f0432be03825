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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the ropeway test suite.
"""

from typing import Callable, List, Tuple
from unittest.mock import MagicMock

import pytest

from ropeway.core.config import ArcLineConfig, RopeLineConfig


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Tests combining several curve types")
    config.addinivalue_line("markers", "slow: Slow running tests")


# =============================================================================
# Drawing Fixtures
# =============================================================================

@pytest.fixture
def context() -> MagicMock:
    """Mock drawing surface recording path commands.

    Returns:
        MagicMock with begin_path, move_to, line_to, arc and stroke
    """
    ctx = MagicMock()
    ctx.begin_path = MagicMock()
    ctx.move_to = MagicMock()
    ctx.line_to = MagicMock()
    ctx.arc = MagicMock()
    ctx.stroke = MagicMock()
    return ctx


def _recorded_path(ctx: MagicMock) -> List[Tuple[float, float]]:
    points = []
    for name, args, _kwargs in ctx.method_calls:
        if name in ("move_to", "line_to"):
            points.append((args[0], args[1]))
    return points


@pytest.fixture
def path_points() -> Callable[[MagicMock], List[Tuple[float, float]]]:
    """Collect the (x, y) arguments of every move_to and line_to call."""
    return _recorded_path


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def straight_line_config() -> ArcLineConfig:
    """Two point line from (0, 0) to (10, 0)."""
    return ArcLineConfig.from_dict({
        "id": "straight",
        "points": [{"x": 0.0, "y": 0.0}, {"x": 10.0, "y": 0.0}],
    })


@pytest.fixture
def corner_line_config() -> ArcLineConfig:
    """Right angle corner at (10, 0) rounded with radius 2."""
    return ArcLineConfig.from_dict({
        "id": "corner",
        "points": [
            {"x": 0.0, "y": 0.0},
            {"x": 10.0, "y": 0.0, "r": 2.0},
            {"x": 10.0, "y": 10.0},
        ],
    })


@pytest.fixture
def two_support_rope_config() -> RopeLineConfig:
    """Single field rope with 5 m sag at mid span."""
    return RopeLineConfig.from_dict({
        "id": "rope",
        "weightPerMeter": 50.0,
        "points": [
            {"type": "support", "x": 0.0, "y": 0.0, "id": "S1"},
            {"type": "field", "sag": 5.0},
            {"type": "support", "x": 100.0, "y": 20.0, "id": "S2"},
        ],
    })


@pytest.fixture
def three_support_rope_config() -> RopeLineConfig:
    """Two fields over a middle saddle with radius 5."""
    return RopeLineConfig.from_dict({
        "id": "rope3",
        "weightPerMeter": 50.0,
        "points": [
            {"type": "support", "x": 0.0, "y": 0.0, "id": "S1"},
            {"type": "field", "sag": 4.0},
            {"type": "support", "x": 100.0, "y": 30.0, "r": 5.0, "id": "S2"},
            {"type": "field", "sag": 4.0},
            {"type": "support", "x": 200.0, "y": 40.0, "id": "S3"},
        ],
    })
