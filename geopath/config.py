"""Configuration helpers for geodesic path rendering."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Tuple


DEFAULT_NUM_POINTS = 200
DEFAULT_SPLIT_MODE = "all"
DEFAULT_STROKE = "green"
DEFAULT_STROKE_WIDTH = 60.0
DEFAULT_LOG_LEVEL = "WARNING"

SPLIT_MODES = ("all", "first")


@dataclass(frozen=True)
class PathConfig:
    num_points: int = DEFAULT_NUM_POINTS
    split_mode: str = DEFAULT_SPLIT_MODE
    cities_file: str | None = None
    stroke: str = DEFAULT_STROKE
    stroke_width: float = DEFAULT_STROKE_WIDTH
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def first_only(self) -> bool:
        return self.split_mode == "first"


def _parse_env_line(line: str) -> Tuple[str, str] | None:
    text = line.strip()
    if text.startswith("export "):
        text = text[len("export "):].lstrip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip("'\"")


def load_dotenv(path: str | None = None) -> None:
    """
    Seed GEOPATH_* (and any other) variables from a .env file.

    Variables already present in the environment win; a missing or
    unreadable file is ignored.
    """
    env_path = path or os.path.join(os.getcwd(), ".env")
    try:
        with open(env_path, "r", encoding="utf-8") as handle:
            pairs = [parsed for parsed in map(_parse_env_line, handle) if parsed]
    except OSError:
        return
    for key, value in pairs:
        os.environ.setdefault(key, value)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got '{raw}'.") from exc


def load_path_config() -> PathConfig:
    num_points = _env_int("GEOPATH_NUM_POINTS", DEFAULT_NUM_POINTS)
    if num_points < 1:
        raise ValueError(f"GEOPATH_NUM_POINTS must be at least 1, got {num_points}.")
    split_mode = os.environ.get("GEOPATH_SPLIT_MODE", DEFAULT_SPLIT_MODE).strip().lower()
    if split_mode not in SPLIT_MODES:
        raise ValueError(f"GEOPATH_SPLIT_MODE must be one of {SPLIT_MODES}, got '{split_mode}'.")
    cities_file = os.environ.get("GEOPATH_CITIES_FILE", "").strip() or None
    return PathConfig(
        num_points=num_points,
        split_mode=split_mode,
        cities_file=cities_file,
        stroke=os.environ.get("GEOPATH_STROKE", DEFAULT_STROKE).strip(),
        stroke_width=_env_float("GEOPATH_STROKE_WIDTH", DEFAULT_STROKE_WIDTH),
        log_level=os.environ.get("GEOPATH_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper(),
    )
