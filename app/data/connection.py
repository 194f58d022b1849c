from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence

import pandas as pd
import requests


logger = logging.getLogger(__name__)

SQLITE_HEADER = b"SQLite format 3\x00"


class DatabaseLoadError(RuntimeError):
    pass


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_database_bytes(source: str, timeout: float = 30) -> bytes:
    """
    Read the crash database image.
    `source` is either an http(s) URL (fetched with requests) or a local path.
    """
    if not source:
        raise DatabaseLoadError("No database source configured (set CRASH_DB_SOURCE).")

    if _is_url(source):
        try:
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise DatabaseLoadError(f"Could not fetch database from {source}: {e}") from e
        logger.info("Fetched %d bytes from %s", len(resp.content), source)
        return resp.content

    try:
        data = Path(source).read_bytes()
    except OSError as e:
        raise DatabaseLoadError(f"Could not read database file {source}: {e}") from e
    logger.info("Read %d bytes from %s", len(data), source)
    return data


def open_database(image: bytes) -> sqlite3.Connection:
    """Open a SQLite byte image as an in-memory connection."""
    if not image.startswith(SQLITE_HEADER):
        raise DatabaseLoadError("Not a SQLite database image (bad header).")

    conn = sqlite3.connect(":memory:")
    try:
        conn.deserialize(image)
        # deserialize() is lazy about corruption; touch the schema to surface it now
        conn.execute("SELECT count(*) FROM sqlite_master").fetchone()
    except sqlite3.Error as e:
        conn.close()
        raise DatabaseLoadError(f"Malformed database image: {e}") from e
    return conn


@dataclass(frozen=True)
class SqliteClient:
    conn: sqlite3.Connection

    def fetch_all(self, query: str, params: Optional[Sequence[Any]] = None) -> list[dict[str, Any]]:
        """
        Run one statement and materialize every row as a dict (column -> value).
        Row order is whatever SQLite produces.
        """
        cur = self.conn.cursor()
        try:
            cur.execute(query, tuple(params or ()))
            cols = [d[0] for d in (cur.description or [])]
            return [dict(zip(cols, row)) for row in cur.fetchall()]
        finally:
            cur.close()

    def query(self, query: str, params: Optional[Sequence[Any]] = None) -> pd.DataFrame:
        """Same as fetch_all, as a pandas.DataFrame."""
        cur = self.conn.cursor()
        try:
            cur.execute(query, tuple(params or ()))
            rows = cur.fetchall()
            cols = [d[0] for d in (cur.description or [])]
            return pd.DataFrame(rows, columns=cols)
        finally:
            cur.close()


@contextmanager
def database_session(image: bytes) -> Iterator[SqliteClient]:
    """Scoped handle: the in-memory connection is closed on every exit path."""
    conn = open_database(image)
    try:
        yield SqliteClient(conn=conn)
    finally:
        conn.close()
