"""Named city locations used as path endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping

import yaml

from geopath.sphere.vectors import GeoPoint

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    pass


@dataclass(frozen=True)
class City:
    name: str
    location: GeoPoint


def dms_to_degrees(
    degrees: float,
    minutes: float = 0.0,
    seconds: float = 0.0,
    *,
    negative: bool = False,
) -> float:
    """
    Convert degrees/minutes/seconds to decimal degrees.
    The sign comes from `degrees`, or from `negative` when degrees is 0.
    """
    value = abs(degrees) + minutes / 60.0 + seconds / 3600.0
    if negative or degrees < 0:
        return -value
    return value


def _city(name: str, lat: float, lon: float) -> City:
    return City(name=name, location=GeoPoint(lat, lon))


DEFAULT_CITIES: Dict[str, City] = {
    city.name.lower(): city
    for city in (
        _city("London", dms_to_degrees(51, 30, 26), dms_to_degrees(0, 7, 39, negative=True)),
        _city("New York", dms_to_degrees(40, 42, 46), dms_to_degrees(-74, 0, 22)),
        _city("Beijing", dms_to_degrees(39, 54, 26), dms_to_degrees(116, 23, 22)),
        _city("Tokyo", dms_to_degrees(35, 41, 12), dms_to_degrees(139, 46, 40)),
        _city("Hawaii", dms_to_degrees(19, 45, 59), dms_to_degrees(-155, 58, 58)),
        _city("Singapore", dms_to_degrees(1, 22, 14), dms_to_degrees(103, 45, 59)),
        _city("Hong Kong", dms_to_degrees(22, 27, 59), dms_to_degrees(113, 59, 7)),
    )
}


def load_city_catalog(path: str) -> Dict[str, City]:
    with open(path, "r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)

    entries = raw.get("cities") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        raise CatalogError(f"{path}: expected a top-level 'cities' list.")

    catalog: Dict[str, City] = {}
    for index, entry in enumerate(entries):
        try:
            name = str(entry["name"]).strip()
            city = _city(name, float(entry["lat"]), float(entry["lon"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"{path}: invalid city entry #{index}: {exc}") from exc
        if not name:
            raise CatalogError(f"{path}: city entry #{index} has an empty name.")
        catalog[name.lower()] = city
    logger.debug("Loaded %d cities from %s", len(catalog), path)
    return catalog


def resolve_location(text: str, catalog: Mapping[str, City] = DEFAULT_CITIES) -> GeoPoint:
    """Resolve a catalog name or a 'lat,lon' literal to a GeoPoint."""
    key = (text or "").strip()
    if not key:
        raise CatalogError("Empty location")
    city = catalog.get(key.lower())
    if city is not None:
        return city.location

    parts = [p.strip() for p in key.split(",")]
    if len(parts) == 2:
        try:
            return GeoPoint(float(parts[0]), float(parts[1]))
        except ValueError as exc:
            raise CatalogError(f"Invalid coordinates '{key}': {exc}") from exc
    raise CatalogError(f"Unknown location '{key}'")
