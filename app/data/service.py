from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Callable, Union

import pandas as pd

from config import AppConfig
from data import mock_data, queries
from data.aggregate import sum_counters
from data.connection import DatabaseLoadError, SqliteClient, database_session, load_database_bytes
from data.queries import InvalidFieldError


logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data available for the selected criteria."


@dataclass(frozen=True)
class DataResult:
    data: Any  # DataFrame | dict[str, int] | list[dict] | None
    source: str  # "mock" | "sqlite"
    warning: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def empty(self) -> bool:
        if self.data is None:
            return True
        if isinstance(self.data, pd.DataFrame):
            return self.data.empty
        return len(self.data) == 0


def _image(cfg: AppConfig, use_mock: bool) -> bytes:
    if use_mock:
        return mock_data.mock_database_image()
    return load_database_bytes(cfg.db_source, timeout=cfg.db_timeout)


def _run(cfg: AppConfig, use_mock: bool, fn: Callable[[SqliteClient], Any]) -> DataResult:
    """
    One load -> query chain. Every failure becomes a DataResult with `error`
    set; nothing is retried and nothing falls back to another source.
    """
    source = "mock" if use_mock else "sqlite"
    try:
        image = _image(cfg, use_mock)
        with database_session(image) as client:
            data = fn(client)
    except (DatabaseLoadError, InvalidFieldError, sqlite3.Error, TypeError, ValueError) as e:
        logger.exception("Error loading or querying database (%s)", source)
        return DataResult(data=None, source=source, error=f"{type(e).__name__}: {e}")

    result = DataResult(data=data, source=source)
    if result.empty:
        logger.warning("%s", NO_DATA_MESSAGE)
        return DataResult(data=data, source=source, warning=NO_DATA_MESSAGE)
    return result


def get_field_counts(cfg: AppConfig, use_mock: bool, year: Union[int, str], field: str) -> DataResult:
    """FieldCount rows (`<field>`, `count`) for one year as a DataFrame."""
    # Resolve the SQL first so a bad field fails before any I/O
    try:
        sql = queries.q_count_by_field(field)
    except InvalidFieldError as e:
        logger.error("Rejected field %r", field)
        return DataResult(data=None, source="mock" if use_mock else "sqlite", error=f"{type(e).__name__}: {e}")

    result = _run(cfg, use_mock, lambda client: client.query(sql, [str(year)]))
    if result.ok:
        logger.debug("Data to plot: %s", result.data)
    return result


def get_counter_totals(cfg: AppConfig, use_mock: bool, year: Union[int, str]) -> DataResult:
    """SummedTotals for one year; `data` is None when no crash matched."""
    result = _run(
        cfg,
        use_mock,
        lambda client: sum_counters(client.fetch_all(queries.q_counter_rows(), [str(year)])),
    )
    if result.ok:
        logger.debug("Summed data to plot: %s", result.data)
    return result


def get_crash_locations(cfg: AppConfig, use_mock: bool, year: Union[int, str]) -> DataResult:
    """CrashRecord dicts for the map view."""
    return _run(
        cfg,
        use_mock,
        lambda client: client.fetch_all(queries.q_crash_locations(), [str(year)]),
    )
