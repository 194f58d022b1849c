from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

import pandas as pd


def _as_count(value: Any) -> Any:
    # Text cells ('3', '', 'n/a') coerce to a number or count as 0
    if isinstance(value, str):
        value = pd.to_numeric(value, errors="coerce")
    if value is None or pd.isna(value):
        return 0
    return value.item() if hasattr(value, "item") else value


def sum_counters(records: Iterable[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    """
    Fold rows into per-column totals.

    Every key seen in any record gets the sum of its values; a missing, null
    or non-numeric value contributes 0. Returns None when there are no
    records, so "no data" stays distinguishable from an all-zero year.
    """
    totals: dict[str, Any] = {}
    seen = False
    for rec in records:
        seen = True
        for key, value in rec.items():
            totals[key] = totals.get(key, 0) + _as_count(value)
    return totals if seen else None
