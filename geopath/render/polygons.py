"""Flatten GeoJSON polygon coordinate arrays into individual rings."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Tuple

Polygon = List[List[float]]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_polygon(value: Any) -> bool:
    if not isinstance(value, list) or not value:
        return False
    first = value[0]
    return isinstance(first, list) and len(first) == 2 and _is_number(first[0]) and _is_number(first[1])


def iter_polygons(value: Any) -> Iterator[Polygon]:
    """
    Yield every polygon ring nested anywhere in `value`, in document order.
    Works for both Polygon and MultiPolygon coordinate arrays.
    """
    if is_polygon(value):
        yield value
    elif isinstance(value, list):
        for item in value:
            yield from iter_polygons(item)


def iter_named_polygons(collection: Dict[str, Any]) -> Iterator[Tuple[str, Polygon]]:
    for feature in collection.get("features", []):
        name = (feature.get("properties") or {}).get("name")
        if not name:
            continue
        geometry = feature.get("geometry") or {}
        for polygon in iter_polygons(geometry.get("coordinates")):
            yield name, polygon


def load_feature_collection(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ValueError(f"{path} is not a GeoJSON FeatureCollection.")
    return data
