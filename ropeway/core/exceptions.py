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
Exceptions
==========

Error types raised by the ropeway core. Numerical non-convergence is not an
error: solvers report it through their return value and validity state.
"""


class RopewayError(ValueError):
    """Base class for ropeway configuration and calibration errors."""


class CalibrationError(RopewayError):
    """Raised when an Adjuster anchor has a zero or direction-conflicting delta."""


class RopeConfigurationError(RopewayError):
    """Raised while building a RopeLine from an inconsistent configuration.

    Attributes:
        index: Index of the offending entry in the configured point list
    """

    def __init__(self, message: str, index: int = -1):
        super().__init__(message)
        self.index = index


__all__ = [
    "RopewayError",
    "CalibrationError",
    "RopeConfigurationError",
]
