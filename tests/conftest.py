"""Shared fixtures: small crash databases built in memory."""

import sqlite3
import sys
from pathlib import Path

# Flat app/ layout, same as `streamlit run app/app.py`
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "app"))

import pytest

from config import AppConfig, OSM_ATTRIBUTION, OSM_TILES
from data.mock_data import create_schema


ACCIDENT_DEFAULTS = {
    "ACCIDENT_NO": None,
    "ACCIDENT_DATE": "2020-01-01",
    "ACCIDENT_TIME": "12:00:00",
    "ACCIDENT_TYPE_DESC": "Collision with vehicle",
    "DAY_WEEK_DESC": "Wednesday",
    "LIGHT_CONDITION": "Day",
    "ROAD_GEOMETRY_DESC": "Not at intersection",
    "SEVERITY": "Other injury accident",
    "SPEED_ZONE": 60,
    "NO_PERSONS": 0,
    "NO_PERSONS_INJ_2": 0,
    "NO_PERSONS_INJ_3": 0,
    "NO_PERSONS_KILLED": 0,
    "NO_PERSONS_NOT_INJ": 0,
}


def make_image(accidents, nodes=()) -> bytes:
    """SQLite image with the crash schema; `accidents` are partial dicts over ACCIDENT_DEFAULTS."""
    conn = sqlite3.connect(":memory:")
    try:
        create_schema(conn)
        cols = list(ACCIDENT_DEFAULTS)
        for i, acc in enumerate(accidents):
            row = {**ACCIDENT_DEFAULTS, "ACCIDENT_NO": f"T{i:06d}", **acc}
            conn.execute(
                f"INSERT INTO ACCIDENT ({', '.join(cols)}) VALUES ({', '.join('?' * len(cols))})",
                [row[c] for c in cols],
            )
        conn.executemany("INSERT INTO NODE VALUES (?,?,?)", list(nodes))
        conn.commit()
        return conn.serialize()
    finally:
        conn.close()


@pytest.fixture
def sample_image() -> bytes:
    return make_image(
        [
            {"ACCIDENT_NO": "A1", "ACCIDENT_DATE": "2020-03-01", "NO_PERSONS": 1, "SEVERITY": "Fatal accident"},
            {"ACCIDENT_NO": "A2", "ACCIDENT_DATE": "2020-06-15", "NO_PERSONS": 2},
            {"ACCIDENT_NO": "A3", "ACCIDENT_DATE": "2020-11-30", "NO_PERSONS": 3},
            {"ACCIDENT_NO": "B1", "ACCIDENT_DATE": "2021-02-02", "NO_PERSONS": 7, "NO_PERSONS_KILLED": 1},
        ],
        nodes=[
            ("A1", -37.81, 144.96),
            ("A2", -37.90, None),
            ("A3", -37.70, 145.10),
            ("B1", -37.60, 145.00),
        ],
    )


@pytest.fixture
def make_cfg(tmp_path):
    def _make(image: bytes | None = None, source: str | None = None) -> AppConfig:
        if source is None:
            db = tmp_path / "crashes.sqlite"
            if image is not None:
                db.write_bytes(image)
            source = str(db)
        return AppConfig(
            db_source=source,
            db_timeout=5,
            first_year=2019,
            last_year=2021,
            map_center=(-37.8136, 144.9631),
            map_zoom=10,
            tile_url=OSM_TILES,
            tile_attribution=OSM_ATTRIBUTION,
            default_use_mock=False,
            log_level="INFO",
        )

    return _make


@pytest.fixture
def cfg(make_cfg, sample_image) -> AppConfig:
    return make_cfg(sample_image)


@pytest.fixture
def image_factory():
    return make_image
