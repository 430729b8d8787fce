"""Print great-circle paths between two locations as renderer-ready JSON."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Dict, List

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from geopath.cities import DEFAULT_CITIES, CatalogError, City, load_city_catalog, resolve_location
from geopath.config import load_dotenv, load_path_config
from geopath.render.paths import (
    Marker,
    PathStyle,
    city_marker,
    geodesic_paths,
    paths_to_geojson,
    paths_to_payload,
)
from geopath.sphere.vectors import great_circle_distance_km


def _load_catalog(path: str | None) -> Dict[str, City]:
    catalog = dict(DEFAULT_CITIES)
    if not path:
        return catalog
    if not os.path.isabs(path) and not os.path.exists(path):
        path = os.path.join(REPO_ROOT, path)
    if not os.path.exists(path):
        raise SystemExit(f"City catalog not found: {path}")
    try:
        catalog.update(load_city_catalog(path))
    except CatalogError as exc:
        raise SystemExit(str(exc)) from exc
    return catalog


def main() -> None:
    load_dotenv()
    try:
        config = load_path_config()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--from", dest="start", required=True, help="City name or 'lat,lon'.")
    parser.add_argument("--to", dest="goal", required=True, help="City name or 'lat,lon'.")
    parser.add_argument("--points", type=int, default=config.num_points)
    parser.add_argument("--first-only", action="store_true", default=config.first_only)
    parser.add_argument("--cities", type=str, default=config.cities_file)
    parser.add_argument("--stroke", type=str, default=config.stroke)
    parser.add_argument("--stroke-width", type=float, default=config.stroke_width)
    parser.add_argument("--geojson", action="store_true")
    parser.add_argument("--markers", action="store_true")
    parser.add_argument("--log-level", type=str, default=config.log_level)
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.points < 1:
        raise SystemExit(f"--points must be at least 1, got {args.points}")

    catalog = _load_catalog(args.cities)
    try:
        start = resolve_location(args.start, catalog)
        goal = resolve_location(args.goal, catalog)
    except CatalogError as exc:
        raise SystemExit(f"Location lookup failed: {exc}") from exc

    style = PathStyle(stroke=args.stroke or None, stroke_width=args.stroke_width)
    paths = geodesic_paths(start, goal, args.points, style, first_only=args.first_only)

    markers: List[Marker] = []
    if args.markers:
        markers = [
            city_marker(point, fill=args.stroke, radius=200, stroke="#fff", stroke_width=80)
            for point in (start, goal)
        ]

    print(
        f"{len(paths)} path(s), {great_circle_distance_km(start, goal):.0f} km",
        file=sys.stderr,
    )
    if args.geojson:
        print(json.dumps(paths_to_geojson(paths, markers), indent=2))
    else:
        output = {"paths": paths_to_payload(paths)}
        if markers:
            output["markers"] = [marker.to_dict() for marker in markers]
        print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
