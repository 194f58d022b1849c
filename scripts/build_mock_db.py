#!/usr/bin/env python3
"""
Write a synthetic crash database with the same schema as the Victorian file.

Why this exists:
- The real RoadCrashesVic.sqlite is large and not committed.
- This lets the dashboard (and anyone poking at the SQL) run end to end.

Usage:
  python scripts/build_mock_db.py \
    --out Data/RoadCrashesVic.sqlite \
    --accidents 5000 --years 2019 2020 2021 2022 2023
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "app"))

from data.mock_data import build_mock_database  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", default="Data/RoadCrashesVic.sqlite")
    ap.add_argument("--accidents", type=int, default=5000)
    ap.add_argument("--years", type=int, nargs="+", default=[2019, 2020, 2021, 2022, 2023])
    ap.add_argument("--seed", type=int, default=17)
    args = ap.parse_args()

    image = build_mock_database(n_accidents=args.accidents, years=args.years, seed=args.seed)

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(image)
    print(f"Wrote: {out_path} ({len(image):,} bytes, {args.accidents:,} crashes)")


if __name__ == "__main__":
    main()
