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
Tests for Package Metadata
==========================

Tests for the version information and the license header of every module.
"""

from pathlib import Path

import pytest

import ropeway

PACKAGE_DIR = Path(ropeway.__file__).parent
PROJECT_LINE = "# Ropeway - Curve Geometry and Catenary Kernel"


class TestPackage:
    """Tests for package level metadata."""

    @pytest.mark.unit
    def test_version(self):
        """Test the package version string."""
        assert ropeway.__version__ == "0.1.0"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "path",
        sorted(PACKAGE_DIR.rglob("*.py")),
        ids=lambda p: str(p.relative_to(PACKAGE_DIR)),
    )
    def test_license_header(self, path):
        """Test that each module starts with the project license header."""
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[1] == PROJECT_LINE
        assert "GNU General Public License" in "\n".join(lines[:17])
