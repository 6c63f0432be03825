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
Tests for Logging Configuration Module
=======================================

Tests for the centralized logging setup.
"""

import io
import logging

import pytest

from ropeway.core.logging_config import (
    setup_logging,
    get_logger,
    set_log_level,
    enable_debug,
    disable_debug,
    LOGGER_PREFIX,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    @pytest.mark.unit
    def test_setup_returns_logger(self):
        """Test that setup_logging returns a logger."""
        logger = setup_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == LOGGER_PREFIX

    @pytest.mark.unit
    def test_setup_with_debug_level(self):
        """Test setup with DEBUG level."""
        logger = setup_logging(level=logging.DEBUG)
        assert logger.level == logging.DEBUG

    @pytest.mark.unit
    def test_reinitializing_replaces_handlers(self):
        """Test that repeated setup does not stack handlers."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    @pytest.mark.unit
    def test_output_stream(self):
        """Test that messages go to the given stream."""
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)
        get_logger("rope_line").warning("field %d unsolved", 2)
        assert "[WARNING] ropeway.rope_line: field 2 unsolved" in stream.getvalue()
        setup_logging()


class TestGetLogger:
    """Tests for get_logger function."""

    @pytest.mark.unit
    def test_get_logger_uses_prefix(self):
        """Test that logger names are placed below the ropeway namespace."""
        assert get_logger("test_module").name == "ropeway.test_module"

    @pytest.mark.unit
    def test_get_logger_keeps_package_names(self):
        """Test that module names of the package are used as they are."""
        name = "ropeway.core.catenary.rope_line"
        assert get_logger(name).name == name


class TestLogLevel:
    """Tests for changing the level at runtime."""

    @pytest.mark.unit
    def test_set_log_level(self):
        """Test set_log_level on logger and handlers."""
        logger = setup_logging()
        set_log_level(logging.ERROR)
        assert logger.level == logging.ERROR
        assert all(h.level == logging.ERROR for h in logger.handlers)

    @pytest.mark.unit
    def test_enable_disable_debug(self):
        """Test the debug toggles."""
        logger = setup_logging()
        enable_debug()
        assert logger.level == logging.DEBUG
        disable_debug()
        assert logger.level == logging.INFO
