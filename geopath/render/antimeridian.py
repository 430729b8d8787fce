"""Split lon/lat polylines where they wrap across the antimeridian."""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from geopath.sphere.vectors import PathPoint

logger = logging.getLogger(__name__)

_TIE_EPS = 1.0e-12


def _side(lon: float) -> float:
    # +1 for western longitudes, -1 for eastern, 0 on the 0°/±180° lines
    value = math.sin(math.radians(lon + 180.0))
    if abs(value) < _TIE_EPS:
        return 0.0
    return math.copysign(1.0, value)


def crosses_antimeridian(lon_a: float, lon_b: float) -> bool:
    """
    True when a straight segment between the two longitudes would wrap the
    map: they sit strictly on opposite sides of the ±180° line and are at
    least half a turn apart.
    """
    return _side(lon_a) * _side(lon_b) < 0.0 and abs(lon_b - lon_a) >= 180.0


def _resolved_sides(lons: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    sines = np.sin(np.radians(lons + 180.0))
    ties = np.abs(sines) < _TIE_EPS
    sides = np.where(ties, 0.0, np.sign(sines))

    if not ties.all():
        # A tie takes the side of the nearest classified point before it, else after it.
        last = 0.0
        for i in range(len(sides)):
            if sides[i] == 0.0:
                sides[i] = last
            else:
                last = sides[i]
        last = 0.0
        for i in range(len(sides) - 1, -1, -1):
            if sides[i] == 0.0:
                sides[i] = last
            else:
                last = sides[i]
    else:
        # Nothing to inherit from: the first longitude away from 0° sets the side.
        far = np.flatnonzero(np.abs(lons) > 90.0)
        side = 1.0 if far.size and lons[far[0]] < 0.0 else -1.0
        sides = np.full(len(lons), side)
    return sides, ties


def _prepare(points: Sequence[PathPoint]) -> Tuple[List[PathPoint], List[int]]:
    lons = np.array([float(p[0]) for p in points], dtype=float)
    sides, ties = _resolved_sides(lons)

    snapped: List[PathPoint] = []
    for (lon, lat), side, tie in zip(points, sides, ties):
        lon = float(lon)
        if tie:
            # ties sit within rounding of 0° or ±180°
            if abs(lon) <= 90.0:
                lon = 0.0
            else:
                lon = -180.0 if side > 0 else 180.0
        snapped.append((lon, float(lat)))

    snapped_lons = np.array([p[0] for p in snapped], dtype=float)
    long_jump = np.abs(np.diff(snapped_lons)) >= 180.0
    opposite = sides[:-1] * sides[1:] < 0.0
    # Two classified points on the same side are always less than 180° apart,
    # so every remaining long jump touches a tie.
    touches_tie = ties[:-1] | ties[1:]
    crossings = [int(i) for i in np.flatnonzero(long_jump & (opposite | touches_tie))]
    return snapped, crossings


def find_crossings(points: Sequence[PathPoint]) -> List[int]:
    """Indices i such that the pair (i, i + 1) crosses the antimeridian."""
    if len(points) < 2:
        return []
    return _prepare(points)[1]


def split_antimeridian(
    points: Sequence[PathPoint],
    *,
    first_only: bool = False,
) -> List[List[PathPoint]]:
    """
    Cut a polyline at each antimeridian crossing.

    Points on the ±180° line (within rounding) are given the sign of the
    side the path is on, so a path that only touches the line is not cut.
    Unless `first_only` is set, no sub-path keeps a step of 180° or more.
    Sub-paths come back in order; any with fewer than two points are
    dropped. With `first_only`, only the first crossing is cut.
    """
    if len(points) < 2:
        return []
    snapped, crossings = _prepare(points)
    if first_only:
        crossings = crossings[:1]
    if crossings:
        logger.debug("Antimeridian crossings after indices %s", crossings)

    pieces: List[List[PathPoint]] = []
    begin = 0
    for index in crossings:
        pieces.append(snapped[begin:index + 1])
        begin = index + 1
    pieces.append(snapped[begin:])
    return [piece for piece in pieces if len(piece) >= 2]
