"""Unit-quaternion orientations on the sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from geopath.sphere.vectors import SphereVector, cross, dot

# 1 + a.b below this means the two vectors are antipodal.
_ANTIPODAL_EPS = 1.0e-15


@dataclass(frozen=True)
class Orientation:
    """
    A rotation stored as a unit quaternion (w, x, y, z), Hamilton convention.

    Instances are immutable; every operation returns a new orientation.
    """

    w: float
    x: float
    y: float
    z: float

    @classmethod
    def identity(cls) -> "Orientation":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: Tuple[float, float, float], angle_rad: float) -> "Orientation":
        ax, ay, az = (float(c) for c in axis)
        norm = math.sqrt(ax * ax + ay * ay + az * az)
        if norm == 0.0:
            raise ValueError("Rotation axis must be non-zero.")
        half = angle_rad / 2.0
        s = math.sin(half) / norm
        return cls(math.cos(half), ax * s, ay * s, az * s)

    @classmethod
    def between_vectors(cls, a: SphereVector, b: SphereVector) -> "Orientation":
        """
        Shortest-arc rotation taking `a` onto `b`.

        Identical vectors give the identity. Antipodal vectors have no unique
        shortest arc, so a half turn about a fixed perpendicular axis is used
        to keep the result reproducible.
        """
        r = dot(a, b) + 1.0
        if r < _ANTIPODAL_EPS:
            if abs(a.x) > abs(a.z):
                return cls._normalized(0.0, -a.y, a.x, 0.0)
            return cls._normalized(0.0, 0.0, -a.z, a.y)
        cx, cy, cz = cross(a, b)
        return cls._normalized(r, cx, cy, cz)

    @classmethod
    def _normalized(cls, w: float, x: float, y: float, z: float) -> "Orientation":
        norm = math.sqrt(w * w + x * x + y * y + z * z)
        return cls(w / norm, x / norm, y / norm, z / norm)

    def compose(self, other: "Orientation") -> "Orientation":
        """Return self ∘ other: `other` is applied first."""
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Orientation(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def inverse(self) -> "Orientation":
        return Orientation(self.w, -self.x, -self.y, -self.z)

    @staticmethod
    def relative(start: "Orientation", end: "Orientation") -> "Orientation":
        """The orientation `r` with end = r ∘ start."""
        return end.compose(start.inverse())

    def angle(self) -> float:
        """Rotation angle in radians, in [0, pi]."""
        vec = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        return 2.0 * math.atan2(vec, abs(self.w))

    def interpolate(self, t: float) -> "Orientation":
        """
        Spherical linear interpolation from the identity to this orientation.

        The rotation angle grows linearly with `t` about a fixed axis, which
        gives constant angular speed along the path.
        """
        if not 0.0 <= t <= 1.0:
            raise ValueError(f"Interpolation fraction must be within [0, 1], got {t}.")
        if t == 0.0:
            return Orientation.identity()
        if t == 1.0:
            return self

        w, x, y, z = self.w, self.x, self.y, self.z
        if w < 0.0:
            w, x, y, z = -w, -x, -y, -z
        vec = math.sqrt(x * x + y * y + z * z)
        if vec == 0.0:
            return Orientation.identity()
        half = math.atan2(vec, w)
        s = math.sin(t * half) / vec
        return Orientation(math.cos(t * half), x * s, y * s, z * s)

    def rotate(self, v: SphereVector) -> SphereVector:
        # v' = v + w*t + u x t, with t = 2 * (u x v)
        ux, uy, uz = self.x, self.y, self.z
        tx = 2.0 * (uy * v.z - uz * v.y)
        ty = 2.0 * (uz * v.x - ux * v.z)
        tz = 2.0 * (ux * v.y - uy * v.x)
        return SphereVector(
            v.x + self.w * tx + (uy * tz - uz * ty),
            v.y + self.w * ty + (uz * tx - ux * tz),
            v.z + self.w * tz + (ux * ty - uy * tx),
        )
