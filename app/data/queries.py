from __future__ import annotations


# Per-crash person counters. Selecting any of these in the chart view switches
# to the summary (sum of all five) chart.
COUNTER_FIELDS = (
    "NO_PERSONS",
    "NO_PERSONS_INJ_2",
    "NO_PERSONS_INJ_3",
    "NO_PERSONS_KILLED",
    "NO_PERSONS_NOT_INJ",
)

CATEGORICAL_FIELDS = (
    "ACCIDENT_TYPE_DESC",
    "DAY_WEEK_DESC",
    "LIGHT_CONDITION",
    "ROAD_GEOMETRY_DESC",
    "SEVERITY",
    "SPEED_ZONE",
)

GROUPABLE_FIELDS = CATEGORICAL_FIELDS + COUNTER_FIELDS

_COUNTER_COLUMNS = ", ".join(COUNTER_FIELDS)

FIELD_LABELS = {
    "NO_PERSONS": "Total Persons",
    "NO_PERSONS_INJ_2": "Injuries Level 2",
    "NO_PERSONS_INJ_3": "Injuries Level 3",
    "NO_PERSONS_KILLED": "Persons Killed",
    "NO_PERSONS_NOT_INJ": "Persons Not Injured",
}


class InvalidFieldError(ValueError):
    """Raised when a column name is not on the GROUP BY allow-list."""


def check_field(field: str) -> str:
    # Column names cannot be bound as parameters, so only allow-listed
    # identifiers ever reach the SQL text.
    if field not in GROUPABLE_FIELDS:
        raise InvalidFieldError(f"Unsupported field: {field!r}")
    return field


def is_counter_field(field: str) -> bool:
    return field in COUNTER_FIELDS


def q_count_by_field(field: str) -> str:
    """Crash count per distinct value of one allow-listed column for a year."""
    field = check_field(field)
    return f"""
    SELECT
      {field},
      COUNT(*) AS count
    FROM ACCIDENT
    WHERE strftime('%Y', ACCIDENT_DATE) = ?
    GROUP BY {field}
    """


def q_counter_rows() -> str:
    # Totals are folded client-side (data/aggregate.py)
    return f"""
    SELECT
      {_COUNTER_COLUMNS}
    FROM ACCIDENT
    WHERE strftime('%Y', ACCIDENT_DATE) = ?
    """


def q_crash_locations() -> str:
    return """
    SELECT
      N.LATITUDE,
      N.LONGITUDE,
      A.ACCIDENT_DATE,
      A.ACCIDENT_TIME,
      A.ACCIDENT_TYPE_DESC
    FROM ACCIDENT A
    JOIN NODE N ON A.ACCIDENT_NO = N.ACCIDENT_NO
    WHERE strftime('%Y', A.ACCIDENT_DATE) = ?
    """
