"""Great-circle sampling between two sphere points."""

from __future__ import annotations

import logging
from typing import List

from geopath.sphere.orientation import Orientation
from geopath.sphere.transform import to_geo_point, to_sphere_vector
from geopath.sphere.vectors import GeoPoint, SphereVector

logger = logging.getLogger(__name__)


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Sample count must be an integer, got {n!r}.")
    if n < 1:
        raise ValueError(f"Sample count must be at least 1, got {n}.")


def sample(start: SphereVector, end: SphereVector, n: int) -> List[SphereVector]:
    """
    Return n + 1 points along the minor great-circle arc from `start` to `end`.

    Each point is `start` rotated by a slerp of the full start->end rotation,
    so consecutive points are separated by the same central angle.
    """
    _check_count(n)
    rotation = Orientation.between_vectors(start, end)
    logger.debug("Sampling %d segments over %.6f rad", n, rotation.angle())
    return [rotation.interpolate(i / n).rotate(start) for i in range(n + 1)]


def sample_geo(start: GeoPoint, end: GeoPoint, n: int) -> List[GeoPoint]:
    vectors = sample(to_sphere_vector(start), to_sphere_vector(end), n)
    return [to_geo_point(v) for v in vectors]
