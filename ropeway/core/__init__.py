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
Ropeway Core Module

Pure Python geometry and rope physics.
This module contains:
- Logging setup, constants, exceptions and configuration descriptors
- geometry: transforms, calibration, fillet polylines and sections
- catenary: catenary fits and multi-span rope lines
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

from .exceptions import RopewayError, CalibrationError, RopeConfigurationError
from .config import (
    Placement,
    CurvePointConfig,
    ArcLineConfig,
    SupportConfig,
    FieldConfig,
    RopeLineConfig,
    SectionChild,
)
from . import constants
from . import bit_conversion
from . import geometry
from . import catenary

from .geometry import Transform, Adjuster, ArcLine, CurveSection, CurvePoint, get_arc
from .catenary import ChainFunction, FitMode, RopeLine

__all__ = [
    "get_logger",
    "setup_logging",
    "RopewayError",
    "CalibrationError",
    "RopeConfigurationError",
    "Placement",
    "CurvePointConfig",
    "ArcLineConfig",
    "SupportConfig",
    "FieldConfig",
    "RopeLineConfig",
    "SectionChild",
    "constants",
    "bit_conversion",
    "geometry",
    "catenary",
    "Transform",
    "Adjuster",
    "ArcLine",
    "CurveSection",
    "CurvePoint",
    "get_arc",
    "ChainFunction",
    "FitMode",
    "RopeLine",
]
