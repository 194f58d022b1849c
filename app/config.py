from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here so the Plotly theme (components/charts.py) and the CSS
#   (components/styles.py) read from one place.
#
THEME = {
    "bg_primary": "#F4F3EE",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar
    "bg_card": "#FFFFFF",        # chart surface
    "accent_primary": "#D7263D",
    "accent_secondary": "#F46036",
    "navy_900": "#0B1220",
    "navy_800": "#1B2A4A",
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E6E4E0",
    "grid": "rgba(17, 24, 39, 0.10)",
    "radius_px": 10,
}

DEFAULT_DB_SOURCE = "Data/RoadCrashesVic.sqlite"

OSM_TILES = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)


@dataclass(frozen=True)
class AppConfig:
    # Local path or http(s) URL of the crash database
    db_source: str
    db_timeout: float

    # Year selector range (inclusive)
    first_year: int
    last_year: int

    # Map defaults (Melbourne)
    map_center: tuple[float, float]
    map_zoom: int
    tile_url: str
    tile_attribution: str

    default_use_mock: bool
    log_level: str

    @property
    def years(self) -> list[int]:
        # Most recent first, matches the selector order
        return list(range(self.last_year, self.first_year - 1, -1))


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Falls back to defaults that point at the bundled Victorian crash file
    """
    load_dotenv(override=False)

    return AppConfig(
        db_source=_getenv("CRASH_DB_SOURCE", DEFAULT_DB_SOURCE) or DEFAULT_DB_SOURCE,
        db_timeout=float(_getenv("CRASH_DB_TIMEOUT", "30") or "30"),
        first_year=int(_getenv("FIRST_YEAR", "2012") or "2012"),
        last_year=int(_getenv("LAST_YEAR", "2023") or "2023"),
        map_center=(
            float(_getenv("MAP_CENTER_LAT", "-37.8136") or "-37.8136"),
            float(_getenv("MAP_CENTER_LON", "144.9631") or "144.9631"),
        ),
        map_zoom=int(_getenv("MAP_ZOOM", "10") or "10"),
        tile_url=_getenv("MAP_TILE_URL", OSM_TILES) or OSM_TILES,
        tile_attribution=_getenv("MAP_TILE_ATTRIBUTION", OSM_ATTRIBUTION) or OSM_ATTRIBUTION,
        default_use_mock=(_getenv("USE_MOCK_DATA", "false") or "false").lower() == "true",
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def log_level_number(level: str) -> int:
    """Numeric level for a level name; unknown names fall back to INFO."""
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def configure_logging(level: str = "INFO") -> None:
    """Root logging setup. basicConfig is a no-op once handlers exist, so reruns are safe."""
    logging.basicConfig(
        level=log_level_number(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
