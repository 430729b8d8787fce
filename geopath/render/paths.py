"""Renderable great-circle paths for flat lon/lat maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from geopath.render.antimeridian import split_antimeridian
from geopath.sphere.geodesic import sample
from geopath.sphere.transform import to_path_point, to_sphere_vector
from geopath.sphere.vectors import GeoPoint, PathPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathStyle:
    stroke: Optional[str] = None
    stroke_width: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.stroke is not None:
            payload["stroke"] = self.stroke
        if self.stroke_width is not None:
            payload["strokeWidth"] = self.stroke_width
        return payload


@dataclass(frozen=True)
class RenderablePath:
    points: Tuple[PathPoint, ...]
    style: PathStyle = PathStyle()

    def __post_init__(self) -> None:
        points = tuple((float(lon), float(lat)) for lon, lat in self.points)
        if len(points) < 2:
            raise ValueError("A renderable path needs at least two points.")
        object.__setattr__(self, "points", points)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"points": [[lon, lat] for lon, lat in self.points]}
        payload.update(self.style.to_dict())
        return payload


@dataclass(frozen=True)
class Marker:
    lon_lat: PathPoint
    fill: Optional[str] = None
    radius: Optional[float] = None
    stroke: Optional[str] = None
    stroke_width: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"lonLat": [self.lon_lat[0], self.lon_lat[1]]}
        for key, value in (
            ("fill", self.fill),
            ("radius", self.radius),
            ("stroke", self.stroke),
            ("strokeWidth", self.stroke_width),
        ):
            if value is not None:
                payload[key] = value
        return payload


def geodesic_points(start: GeoPoint, end: GeoPoint, num_points: int) -> List[PathPoint]:
    """Sample the great circle and return (lon, lat) pairs, unsplit."""
    vectors = sample(to_sphere_vector(start), to_sphere_vector(end), num_points)
    return [to_path_point(v) for v in vectors]


def geodesic_paths(
    start: GeoPoint,
    end: GeoPoint,
    num_points: int,
    style: Optional[PathStyle] = None,
    *,
    first_only: bool = False,
) -> List[RenderablePath]:
    style = style or PathStyle()
    lon_lats = geodesic_points(start, end, num_points)
    pieces = split_antimeridian(lon_lats, first_only=first_only)
    logger.debug(
        "Geodesic %s -> %s: %d points in %d sub-paths",
        start.to_path_point(),
        end.to_path_point(),
        len(lon_lats),
        len(pieces),
    )
    return [RenderablePath(points=tuple(piece), style=style) for piece in pieces]


def city_marker(
    location: GeoPoint,
    *,
    fill: Optional[str] = None,
    radius: Optional[float] = None,
    stroke: Optional[str] = None,
    stroke_width: Optional[float] = None,
) -> Marker:
    return Marker(
        lon_lat=location.to_path_point(),
        fill=fill,
        radius=radius,
        stroke=stroke,
        stroke_width=stroke_width,
    )


def paths_to_payload(paths: Iterable[RenderablePath]) -> List[Dict[str, Any]]:
    return [path.to_dict() for path in paths]


def paths_to_geojson(
    paths: Sequence[RenderablePath],
    markers: Sequence[Marker] = (),
) -> Dict[str, Any]:
    features: List[Dict[str, Any]] = []
    for path in paths:
        features.append(
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[lon, lat] for lon, lat in path.points],
                },
                "properties": path.style.to_dict(),
            }
        )
    for marker in markers:
        properties = marker.to_dict()
        properties.pop("lonLat")
        features.append(
            {
                "type": "Feature",
                "geometry": {
                    "type": "Point",
                    "coordinates": [marker.lon_lat[0], marker.lon_lat[1]],
                },
                "properties": properties,
            }
        )
    return {"type": "FeatureCollection", "features": features}
