from __future__ import annotations

import random
import sqlite3
from datetime import date
from functools import lru_cache
from typing import Sequence

from faker import Faker


ACCIDENT_TYPES = [
    "Collision with vehicle",
    "Struck Pedestrian",
    "Collision with a fixed object",
    "No collision and no object struck",
    "Vehicle overturned (no collision)",
    "Struck animal",
    "Fall from or in moving vehicle",
]
DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
LIGHT_CONDITIONS = ["Day", "Dusk/Dawn", "Dark Street lights on", "Dark No street lights"]
ROAD_GEOMETRIES = ["Not at intersection", "T intersection", "Cross intersection", "Multiple intersection"]
SEVERITIES = ["Fatal accident", "Serious injury accident", "Other injury accident"]
SPEED_ZONES = [40, 50, 60, 70, 80, 100, 110]

# Greater Melbourne bounding box
LAT_RANGE = (-38.20, -37.55)
LON_RANGE = (144.55, 145.45)

SCHEMA = """
CREATE TABLE ACCIDENT (
  ACCIDENT_NO TEXT PRIMARY KEY,
  ACCIDENT_DATE TEXT,
  ACCIDENT_TIME TEXT,
  ACCIDENT_TYPE_DESC TEXT,
  DAY_WEEK_DESC TEXT,
  LIGHT_CONDITION TEXT,
  ROAD_GEOMETRY_DESC TEXT,
  SEVERITY TEXT,
  SPEED_ZONE INTEGER,
  NO_PERSONS INTEGER,
  NO_PERSONS_INJ_2 INTEGER,
  NO_PERSONS_INJ_3 INTEGER,
  NO_PERSONS_KILLED INTEGER,
  NO_PERSONS_NOT_INJ INTEGER
);
CREATE TABLE NODE (
  ACCIDENT_NO TEXT,
  LATITUDE REAL,
  LONGITUDE REAL
);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    conn.executescript(SCHEMA)


def _person_counts(severity: str) -> tuple[int, int, int, int, int]:
    persons = max(1, int(random.gauss(2.3, 1.1)))
    killed = 1 if severity == "Fatal accident" else 0
    inj_2 = min(persons - killed, random.randint(1, 2)) if severity == "Serious injury accident" else 0
    inj_3 = min(persons - killed - inj_2, random.randint(0, 2))
    not_inj = persons - killed - inj_2 - inj_3
    return persons, inj_2, inj_3, killed, not_inj


def build_mock_database(
    n_accidents: int = 1500,
    years: Sequence[int] = (2019, 2020, 2021, 2022, 2023),
    seed: int = 17,
    missing_coord_rate: float = 0.03,
) -> bytes:
    """
    Synthetic crash database with the same tables/columns as the Victorian
    crash file. Returns the serialized SQLite image.
    """
    random.seed(seed)
    fake = Faker("en_AU")
    fake.seed_instance(seed)

    conn = sqlite3.connect(":memory:")
    try:
        create_schema(conn)
        accidents = []
        nodes = []
        for i in range(n_accidents):
            year = random.choice(list(years))
            d = fake.date_between_dates(
                date_start=date(year, 1, 1),
                date_end=date(year, 12, 31),
            )
            accident_no = f"T{year}{i:06d}"
            severity = random.choices(SEVERITIES, weights=[2, 28, 70])[0]
            persons, inj_2, inj_3, killed, not_inj = _person_counts(severity)
            accidents.append(
                (
                    accident_no,
                    d.isoformat(),
                    fake.time(pattern="%H:%M:%S"),
                    random.choice(ACCIDENT_TYPES),
                    DAYS[d.weekday()],
                    random.choice(LIGHT_CONDITIONS),
                    random.choice(ROAD_GEOMETRIES),
                    severity,
                    random.choice(SPEED_ZONES),
                    persons,
                    inj_2,
                    inj_3,
                    killed,
                    not_inj,
                )
            )
            lat = round(random.uniform(*LAT_RANGE), 6)
            lon = round(random.uniform(*LON_RANGE), 6)
            # Some geocodes are incomplete in the real data too
            if random.random() < missing_coord_rate:
                lon = None
            nodes.append((accident_no, lat, lon))

        conn.executemany("INSERT INTO ACCIDENT VALUES (?,?,?,?,?,?,?,?,?,?,?,?,?,?)", accidents)
        conn.executemany("INSERT INTO NODE VALUES (?,?,?)", nodes)
        conn.commit()
        return conn.serialize()
    finally:
        conn.close()


@lru_cache(maxsize=1)
def mock_database_image() -> bytes:
    return build_mock_database()
