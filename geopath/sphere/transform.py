"""Conversions between geographic coordinates and unit-sphere vectors."""

from __future__ import annotations

import math

from geopath.sphere.orientation import Orientation
from geopath.sphere.vectors import GeoPoint, PathPoint, SphereVector

# (lat=0, lon=0) maps here; latitude turns about the east-west axis,
# longitude about the polar axis, longitude applied last.
BASE_VECTOR = SphereVector(0.0, 0.0, 1.0)
EAST_WEST_AXIS = (1.0, 0.0, 0.0)
POLAR_AXIS = (0.0, 1.0, 0.0)

_POLE_EPS = 1.0e-12


def orientation_for(point: GeoPoint) -> Orientation:
    """Rotation that carries the base vector to `point`."""
    lat_rot = Orientation.from_axis_angle(EAST_WEST_AXIS, -math.radians(point.latitude_deg))
    lon_rot = Orientation.from_axis_angle(POLAR_AXIS, math.radians(point.longitude_deg))
    return lon_rot.compose(lat_rot)


def to_sphere_vector(point: GeoPoint) -> SphereVector:
    return orientation_for(point).rotate(BASE_VECTOR)


def to_geo_point(v: SphereVector) -> GeoPoint:
    """
    Inverse of `to_sphere_vector`.

    The atan branches below are tied to the base-vector convention; atan2
    would need different offsets. Poles come back with longitude 0.
    """
    x, y, z = v.x, v.y, v.z
    horizontal = math.sqrt(z * z + x * x)
    if horizontal < _POLE_EPS:
        return GeoPoint(math.copysign(90.0, y), 0.0)

    lat = math.degrees(math.atan(y / horizontal))
    if x == 0.0:
        lon_delta = math.copysign(90.0, z)
    else:
        lon_delta = math.degrees(math.atan(z / x))
    if x >= 0.0:
        lon = 90.0 - lon_delta
    else:
        lon = -(90.0 + lon_delta)
    return GeoPoint(_clamp(lat, 90.0), _clamp(lon, 180.0))


def to_path_point(v: SphereVector) -> PathPoint:
    return to_geo_point(v).to_path_point()


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))
