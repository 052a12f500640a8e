#!/usr/bin/env python3
"""
show the answer for a date (or a run of days).

usage:
    python scripts/daily_answer.py --date 2024-12-18
    python scripts/daily_answer.py --days 14
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from cardwheel.config import DEFAULT_CONFIG
from cardwheel.catalog import load_catalog
from cardwheel.daily import seed_from_date, today_str, upcoming_answers


def main():
    parser = argparse.ArgumentParser(description="show cardwheel answers by date")
    parser.add_argument("--date", type=str, default=None, help="first date YYYY-MM-DD (default: today)")
    parser.add_argument("--days", type=int, default=1, help="number of consecutive days")
    parser.add_argument("--catalog", type=Path, default=DEFAULT_CONFIG.catalog_path, help="catalog JSON array")
    parser.add_argument("--tz", type=str, default=DEFAULT_CONFIG.day_boundary_tz, help="timezone for 'today'")

    args = parser.parse_args()

    if not args.catalog.exists():
        print(f"error: catalog not found at {args.catalog}")
        sys.exit(1)

    catalog = load_catalog(args.catalog)
    stats = catalog.stats
    print(f"catalog: {args.catalog} ({stats.kept:,} of {stats.total:,} entries kept)")
    if stats.kept != stats.total:
        print(f"  non-string: {stats.non_string:,}  blank: {stats.blank:,}  duplicate: {stats.duplicate:,}")

    if len(catalog) == 0:
        print("error: catalog is empty")
        sys.exit(1)

    start = args.date or today_str(args.tz)
    for date_str, idx, name in upcoming_answers(catalog, start, args.days):
        print(f"  {date_str}  seed={seed_from_date(date_str):4d}  #{idx:<6d} {name}")


if __name__ == "__main__":
    main()
