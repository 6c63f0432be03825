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
2D Affine Transform
===================

Affine map with an inverse that is kept in sync on every mutation.

The forward map is::

    | d00 d01 x |
    | d10 d11 y |

and the inverse coefficients i00..i12 always hold its exact algebraic
inverse. Scale and rotation are cached so that arc radii and tangent angles
can be mapped without decomposing the matrix. Mirroring is tracked per axis
and composes with XOR.

Example:
    >>> tf = Transform().translate(10.0, 0.0).set_scale(2.0)
    >>> tf.transform(1.0, 1.0)
    (12.0, 2.0)
    >>> tf.transform_inverse(12.0, 2.0)
    (1.0, 1.0)
"""

import math
from typing import Any, List, Mapping, Optional, Tuple

from ..config import Placement
from ..constants import DEG2RAD, PI, TWO_PI
from .angles import normalize_to_plus_minus_pi

_STATE_ATTRIBUTES = (
    'd00', 'd01', 'x', 'd10', 'd11', 'y',
    'i00', 'i01', 'i02', 'i10', 'i11', 'i12',
    'scale', 'rotation', 'mirror_x', 'mirror_y',
)


class Transform:
    """2D affine transform with a synchronized inverse and a save stack."""

    def __init__(self):
        self._stack: Optional[List[tuple]] = None
        self.set_to_identity()

    def __repr__(self):
        return (
            f"Transform(d=[[{self.d00:.6g}, {self.d01:.6g}, {self.x:.6g}], "
            f"[{self.d10:.6g}, {self.d11:.6g}, {self.y:.6g}]], "
            f"scale={self.scale:.6g}, rotation={self.rotation:.6g}, "
            f"mirror=({self.mirror_x}, {self.mirror_y}))"
        )

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------

    def set_to_identity(self) -> 'Transform':
        self.d00 = 1.0
        self.d01 = 0.0
        self.x = 0.0
        self.d10 = 0.0
        self.d11 = 1.0
        self.y = 0.0
        self.i00 = 1.0
        self.i01 = 0.0
        self.i02 = 0.0
        self.i10 = 0.0
        self.i11 = 1.0
        self.i12 = 0.0
        self.scale = 1.0
        self.rotation = 0.0
        self.mirror_x = False
        self.mirror_y = False
        return self

    def _get_state(self) -> tuple:
        return tuple(getattr(self, name) for name in _STATE_ATTRIBUTES)

    def _set_state(self, state: tuple) -> None:
        for name, value in zip(_STATE_ATTRIBUTES, state):
            setattr(self, name, value)

    def init(self, transform: 'Transform') -> 'Transform':
        """Copy forward, inverse and cached values from another transform."""
        self._set_state(transform._get_state())
        return self

    def copy(self) -> 'Transform':
        return Transform().init(self)

    def save(self) -> None:
        """Push the current state onto the save stack."""
        if self._stack is None:
            self._stack = []
        self._stack.append(self._get_state())

    def restore(self) -> None:
        """Pop the last saved state, or reset to identity if none is left."""
        if self._stack:
            self._set_state(self._stack.pop())
        else:
            self.set_to_identity()

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def set_scale(self, scale: float) -> 'Transform':
        self.d00 *= scale
        self.d01 *= scale
        self.d10 *= scale
        self.d11 *= scale
        self.scale *= scale
        self.i00 /= scale
        self.i01 /= scale
        self.i02 /= scale
        self.i10 /= scale
        self.i11 /= scale
        self.i12 /= scale
        return self

    def translate(self, translate_x: float, translate_y: float) -> 'Transform':
        # the translation vector is given in local coordinates
        self.x += self.d00 * translate_x + self.d01 * translate_y
        self.y += self.d10 * translate_x + self.d11 * translate_y
        self.i02 -= translate_x
        self.i12 -= translate_y
        return self

    def rotate(self, phi: float, mirror_x: bool = False, mirror_y: bool = False) -> 'Transform':
        """Rotate the local system by phi and optionally mirror its axes.

        Args:
            phi: Rotation angle in radians (anticlockwise)
            mirror_x: Mirror the local x axis after rotating
            mirror_y: Mirror the local y axis after rotating

        Returns:
            self
        """
        nmx = mirror_x is True
        nmy = mirror_y is True
        mx = self.mirror_x
        my = self.mirror_y
        self.mirror_x = mx != nmx
        self.mirror_y = my != nmy

        d00, d01, d10, d11 = self.d00, self.d01, self.d10, self.d11
        if phi != 0.0:
            sin = math.sin(phi)
            cos = math.cos(phi)
            self.rotation = normalize_to_plus_minus_pi(
                self.rotation + (phi if mx == my else -phi)
            )
            m00 = cos * d00 + sin * d01
            m01 = -sin * d00 + cos * d01
            m10 = cos * d10 + sin * d11
            m11 = -sin * d10 + cos * d11
        else:
            m00, m01, m10, m11 = d00, d01, d10, d11
        if nmx:
            m00 = -m00
            m10 = -m10
        if nmy:
            m01 = -m01
            m11 = -m11
        self._set_linear(m00, m01, m10, m11)
        return self

    def _set_linear(self, m00: float, m01: float, m10: float, m11: float) -> None:
        """Set the 2x2 part and rebuild the inverse in closed form."""
        self.d00 = m00
        self.d01 = m01
        self.d10 = m10
        self.d11 = m11
        det = m00 * m11 - m01 * m10
        m02 = self.x
        m12 = self.y
        self.i00 = m11 / det
        self.i10 = -m10 / det
        self.i01 = -m01 / det
        self.i11 = m00 / det
        self.i02 = (m01 * m12 - m11 * m02) / det
        self.i12 = (m10 * m02 - m00 * m12) / det

    def concatenate(self, transform: 'Transform') -> 'Transform':
        """[this] = [this] x [transform]"""
        d00, d01, d10, d11 = self.d00, self.d01, self.d10, self.d11
        t = transform

        self.d00 = d00 * t.d00 + d01 * t.d10
        self.d01 = d00 * t.d01 + d01 * t.d11
        self.x += d00 * t.x + d01 * t.y
        self.d10 = d10 * t.d00 + d11 * t.d10
        self.d11 = d10 * t.d01 + d11 * t.d11
        self.y += d10 * t.x + d11 * t.y

        self.scale *= t.scale
        mx = self.mirror_x
        my = self.mirror_y
        # rotation depends on the mirroring before the update
        self.rotation = normalize_to_plus_minus_pi(
            self.rotation + (t.rotation if mx == my else -t.rotation)
        )
        self.mirror_x = mx != t.mirror_x
        self.mirror_y = my != t.mirror_y

        i00, i01, i02 = self.i00, self.i01, self.i02
        i10, i11, i12 = self.i10, self.i11, self.i12
        self.i00 = i00 * t.i00 + i10 * t.i01
        self.i01 = i01 * t.i00 + i11 * t.i01
        self.i02 = i02 * t.i00 + i12 * t.i01 + t.i02
        self.i10 = i00 * t.i10 + i10 * t.i11
        self.i11 = i01 * t.i10 + i11 * t.i11
        self.i12 = i02 * t.i10 + i12 * t.i11 + t.i12
        return self

    def pre_concatenate(self, transform: 'Transform') -> 'Transform':
        """[this] = [transform] x [this]"""
        d00, d01, x = self.d00, self.d01, self.x
        d10, d11, y = self.d10, self.d11, self.y
        t = transform

        self.d00 = d00 * t.d00 + d10 * t.d01
        self.d01 = d01 * t.d00 + d11 * t.d01
        self.x = x * t.d00 + y * t.d01 + t.x
        self.d10 = d00 * t.d10 + d10 * t.d11
        self.d11 = d01 * t.d10 + d11 * t.d11
        self.y = x * t.d10 + y * t.d11 + t.y

        self.scale *= t.scale
        self.rotation = normalize_to_plus_minus_pi(
            self.rotation + (t.rotation if t.mirror_x == t.mirror_y else -t.rotation)
        )
        self.mirror_x = self.mirror_x != t.mirror_x
        self.mirror_y = self.mirror_y != t.mirror_y

        i00, i01, i10, i11 = self.i00, self.i01, self.i10, self.i11
        self.i00 = i00 * t.i00 + i01 * t.i10
        self.i01 = i00 * t.i01 + i01 * t.i11
        self.i02 += i00 * t.i02 + i01 * t.i12
        self.i10 = i10 * t.i00 + i11 * t.i10
        self.i11 = i10 * t.i01 + i11 * t.i11
        self.i12 += i10 * t.i02 + i11 * t.i12
        return self

    def invert(self) -> 'Transform':
        """Swap forward and inverse coefficients."""
        self.d00, self.i00 = self.i00, self.d00
        self.d01, self.i01 = self.i01, self.d01
        self.d10, self.i10 = self.i10, self.d10
        self.d11, self.i11 = self.i11, self.d11
        self.x, self.i02 = self.i02, self.x
        self.y, self.i12 = self.i12, self.y
        self.scale = 1.0 / self.scale
        self.rotation = normalize_to_plus_minus_pi(-self.rotation)
        return self

    # ------------------------------------------------------------------
    # initialization helpers
    # ------------------------------------------------------------------

    def init_for_points(
        self,
        metric_x1: float, metric_y1: float, metric_x2: float, metric_y2: float,
        pixel_x1: float, pixel_y1: float, pixel_x2: float, pixel_y2: float
    ) -> bool:
        """Initialize a similarity transform from two point correspondences.

        The current mirror flags are kept and honoured.

        Args:
            metric_x1, metric_y1: First point in source coordinates
            metric_x2, metric_y2: Second point in source coordinates
            pixel_x1, pixel_y1: First point in target coordinates
            pixel_x2, pixel_y2: Second point in target coordinates

        Returns:
            False (and identity) if either point pair coincides
        """
        mx = self.mirror_x
        my = self.mirror_y
        dx = metric_x2 - metric_x1
        dy = metric_y2 - metric_y1
        du = pixel_x2 - pixel_x1
        dv = pixel_y2 - pixel_y1
        du2dv2 = du * du + dv * dv
        mdiv = dx * dx + dy * dy
        if du2dv2 == 0.0 or mdiv == 0.0:
            self.set_to_identity()
            return False

        dxdu = dx * du
        dxdv = dx * dv
        dydu = dy * du
        dydv = dy * dv
        m1num = (-dxdu if mx else dxdu) + (-dydv if my else dydv)
        m2num = (-dxdv if mx else dxdv) + (dydu if my else -dydu)

        # target to source
        m1 = m1num / du2dv2
        m2 = m2num / du2dv2
        self.i00 = -m1 if mx else m1
        self.i10 = m2 if my else -m2
        self.i01 = -m2 if mx else m2
        self.i11 = -m1 if my else m1
        self.i02 = metric_x1 - self.i00 * pixel_x1 - self.i01 * pixel_y1
        self.i12 = metric_y1 - self.i10 * pixel_x1 - self.i11 * pixel_y1

        # source to target
        n1 = m1num / mdiv
        n2 = m2num / mdiv
        self.d00 = -n1 if mx else n1
        self.d10 = -n2 if mx else n2
        self.d01 = n2 if my else -n2
        self.d11 = -n1 if my else n1
        self.x = pixel_x1 - self.d00 * metric_x1 - self.d01 * metric_y1
        self.y = pixel_y1 - self.d10 * metric_x1 - self.d11 * metric_y1

        self.rotation = normalize_to_plus_minus_pi(math.atan2(m2num, m1num))
        self.scale = math.sqrt(du2dv2 / mdiv)
        return True

    def init_for_point(
        self, metric_x: float, metric_y: float, pixel_x: float, pixel_y: float
    ) -> 'Transform':
        """Re-anchor the translation so metric maps onto pixel."""
        self.x = pixel_x - self.d00 * metric_x - self.d01 * metric_y
        self.y = pixel_y - self.d10 * metric_x - self.d11 * metric_y
        self.i02 = metric_x - self.i00 * pixel_x - self.i01 * pixel_y
        self.i12 = metric_y - self.i10 * pixel_x - self.i11 * pixel_y
        return self

    def init_for_bounds(
        self,
        bounds: Optional[Mapping[str, Any]],
        pixel_width: float,
        pixel_height: float,
        mirror_x: bool = False,
        mirror_y: bool = False
    ) -> bool:
        """Fit a source rectangle into a target viewport, centered.

        The smaller of the two axis scale factors is used so the whole
        rectangle stays visible.

        Args:
            bounds: ``{x, y, width, height}`` or ``{x1, y1, x2, y2}``,
                None for the unit square
            pixel_width: Target width
            pixel_height: Target height
            mirror_x: Mirror the x axis
            mirror_y: Mirror the y axis (typical for screen coordinates)

        Returns:
            False (and identity) if the bounds are unusable
        """
        if bounds is None:
            x, y, w, h = 0.0, 0.0, 1.0, 1.0
        else:
            x, y, w, h = (bounds.get(k) for k in ('x', 'y', 'width', 'height'))
            if not all(isinstance(v, (int, float)) for v in (x, y, w, h)):
                x1, y1, x2, y2 = (bounds.get(k) for k in ('x1', 'y1', 'x2', 'y2'))
                if not all(isinstance(v, (int, float)) for v in (x1, y1, x2, y2)):
                    self.set_to_identity()
                    return False
                x = min(x1, x2)
                y = min(y1, y2)
                w = abs(x2 - x1)
                h = abs(y2 - y1)
        if w <= 0.0 or h <= 0.0:
            self.set_to_identity()
            return False

        mx = mirror_x is True
        my = mirror_y is True
        ds = min(pixel_width / w, pixel_height / h)
        inv = 1.0 / ds
        tx = (pixel_width + ds * w) * 0.5 if mx else (pixel_width - ds * w) * 0.5
        ty = (pixel_height + ds * h) * 0.5 if my else (pixel_height - ds * h) * 0.5

        self.d00 = -ds if mx else ds
        self.d01 = 0.0
        self.d10 = 0.0
        self.d11 = -ds if my else ds
        self.x = tx - self.d00 * x
        self.y = ty - self.d11 * y
        self.i00 = -inv if mx else inv
        self.i01 = 0.0
        self.i10 = 0.0
        self.i11 = -inv if my else inv
        self.i02 = x - self.i00 * tx
        self.i12 = y - self.i11 * ty
        self.scale = ds
        self.rotation = 0.0
        self.mirror_x = mx
        self.mirror_y = my
        return True

    def apply_coordinate_transformation(
        self,
        translate_x: float,
        translate_y: float,
        scale: float,
        phi: float,
        mirror_x: bool = False,
        mirror_y: bool = False
    ) -> 'Transform':
        """Translate, then scale, then rotate and mirror the local system."""
        return self.translate(translate_x, translate_y).set_scale(scale).rotate(phi, mirror_x, mirror_y)

    def set_to_coordinate_transform(
        self,
        placement: Optional[Placement],
        parent: Optional['Transform'] = None
    ) -> 'Transform':
        """Initialize from a parent (or self) and apply a placement.

        Equivalent to ``init(parent)``, ``translate``, ``set_scale`` and
        ``rotate`` in one pass. Curves rebuild their transform with this on
        every adjustment.

        Args:
            placement: Translation, scale, rotation and mirroring to apply
            parent: Optional transform to start from instead of self

        Returns:
            self
        """
        if placement is None:
            if parent is not None:
                self.init(parent)
            return self

        source = parent if parent is not None else self
        d00, d01, x = source.d00, source.d01, source.x
        d10, d11, y = source.d10, source.d11, source.y
        sca = source.scale
        rot = source.rotation
        mx = source.mirror_x
        my = source.mirror_y

        tx = placement.x
        ty = placement.y
        if tx or ty:
            x += d00 * tx + d01 * ty
            y += d10 * tx + d11 * ty

        sc = placement.scale
        if sc != 1.0 and sc > 0.0:
            d00 *= sc
            d01 *= sc
            d10 *= sc
            d11 *= sc
            sca *= sc
        self.scale = sca

        pmx = placement.mirror_x is True
        pmy = placement.mirror_y is True
        self.mirror_x = mx != pmx
        self.mirror_y = my != pmy

        phi = placement.phi
        if phi is None and placement.angle:
            phi = placement.angle * DEG2RAD
        if placement.upright:
            correction = -rot if mx == my else rot
            phi = correction if phi is None else phi + correction

        if phi:
            sin = math.sin(phi)
            cos = math.cos(phi)
            rot += phi if mx == my else -phi
            if rot > PI:
                rot -= TWO_PI
            if rot <= -PI:
                rot += TWO_PI
            m00 = cos * d00 + sin * d01
            m01 = -sin * d00 + cos * d01
            m10 = cos * d10 + sin * d11
            m11 = -sin * d10 + cos * d11
        else:
            m00, m01, m10, m11 = d00, d01, d10, d11
        if pmx:
            m00 = -m00
            m10 = -m10
        if pmy:
            m01 = -m01
            m11 = -m11

        self.rotation = rot
        self.x = x
        self.y = y
        self._set_linear(m00, m01, m10, m11)
        return self

    # ------------------------------------------------------------------
    # mapping
    # ------------------------------------------------------------------

    def transform(self, x: float, y: float) -> Tuple[float, float]:
        return (
            self.d00 * x + self.d01 * y + self.x,
            self.d10 * x + self.d11 * y + self.y,
        )

    def transform_inverse(self, x: float, y: float) -> Tuple[float, float]:
        return (
            self.i00 * x + self.i01 * y + self.i02,
            self.i10 * x + self.i11 * y + self.i12,
        )


__all__ = ["Transform"]
