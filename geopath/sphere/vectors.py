"""Geographic points and unit-sphere vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

EARTH_RADIUS_KM = 6371.0088

PathPoint = Tuple[float, float]


@dataclass(frozen=True)
class GeoPoint:
    latitude_deg: float
    longitude_deg: float

    def __post_init__(self) -> None:
        lat = float(self.latitude_deg)
        lon = float(self.longitude_deg)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f"Coordinates must be finite, got lat={lat}, lon={lon}.")
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"Latitude {lat} is outside [-90, 90].")
        if not -180.0 <= lon <= 180.0:
            raise ValueError(f"Longitude {lon} is outside [-180, 180].")
        object.__setattr__(self, "latitude_deg", lat)
        object.__setattr__(self, "longitude_deg", lon)

    def to_path_point(self) -> PathPoint:
        """Return the (lon, lat) pair used by flat-map renderers."""
        return self.longitude_deg, self.latitude_deg


@dataclass(frozen=True)
class SphereVector:
    x: float
    y: float
    z: float

    @classmethod
    def normalized(cls, x: float, y: float, z: float) -> "SphereVector":
        norm = math.sqrt(x * x + y * y + z * z)
        if norm == 0.0:
            raise ValueError("Cannot normalize the zero vector.")
        return cls(x / norm, y / norm, z / norm)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __neg__(self) -> "SphereVector":
        return SphereVector(-self.x, -self.y, -self.z)


def dot(a: SphereVector, b: SphereVector) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: SphereVector, b: SphereVector) -> Tuple[float, float, float]:
    return (
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def angle_between(a: SphereVector, b: SphereVector) -> float:
    """
    Central angle between two sphere points in radians.
    Uses atan2 of the cross and dot products, which stays accurate for
    both tiny and near-antipodal separations.
    """
    cx, cy, cz = cross(a, b)
    return math.atan2(math.sqrt(cx * cx + cy * cy + cz * cz), dot(a, b))


def great_circle_distance_km(
    a: GeoPoint,
    b: GeoPoint,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    lat1 = math.radians(a.latitude_deg)
    lat2 = math.radians(b.latitude_deg)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude_deg - a.longitude_deg)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * radius_km * math.asin(min(1.0, math.sqrt(h)))
