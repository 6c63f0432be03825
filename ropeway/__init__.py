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
Ropeway
Version 0.1.0

Curve geometry and catenary kernel for ropeway and cableway layout.
"""

__version__ = "0.1.0"
__author__ = "Ropeway Contributors"

from . import core
from .core import (
    Transform,
    Adjuster,
    ArcLine,
    CurveSection,
    CurvePoint,
    ChainFunction,
    FitMode,
    RopeLine,
    get_arc,
)

__all__ = [
    "core",
    "Transform",
    "Adjuster",
    "ArcLine",
    "CurveSection",
    "CurvePoint",
    "ChainFunction",
    "FitMode",
    "RopeLine",
    "get_arc",
]
