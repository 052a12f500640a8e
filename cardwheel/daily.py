"""
deterministic answer selection based on date.

sums the character codes of the ISO date string and feeds that seed to a
tiny linear-congruential generator. same date + same catalog → same answer,
no matter where/when you run it. not cryptographic, and not meant to be.
"""

import math
import re
from datetime import date, datetime
from typing import Iterator, Sequence
from zoneinfo import ZoneInfo

# LCG constants (must match the browser game bit-for-bit)
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def date_key(day: date | str) -> str:
    """
    calendar-day key for a date.

    datetimes are truncated to their date (the caller picks the zone);
    strings must already be YYYY-MM-DD.
    """
    if isinstance(day, datetime):
        return day.date().isoformat()
    if isinstance(day, date):
        return day.isoformat()
    if not DATE_RE.fullmatch(day):
        raise ValueError(f"date must be YYYY-MM-DD, got: {day}")
    return day


def seed_from_date(day: date | str) -> int:
    """sum of the character codes of the date key."""
    return sum(ord(c) for c in date_key(day))


def seeded_random(seed: int) -> Iterator[float]:
    """endless stream of pseudo-random floats in [0, 1)."""
    while True:
        seed = (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        yield seed / LCG_MODULUS


def daily_index(day: date | str, catalog_size: int) -> int:
    """
    deterministically pick the answer index for a given day.

    args:
        day: date, datetime or YYYY-MM-DD string
        catalog_size: number of catalog entries N

    returns:
        answer index in [0, catalog_size)
    """
    if catalog_size < 1:
        # an empty catalog means "not loaded yet"; nothing to pick
        raise ValueError(f"catalog_size must be >= 1, got: {catalog_size}")

    value = next(seeded_random(seed_from_date(day)))
    return math.floor(value * catalog_size)


def today_str(tz: str = "UTC") -> str:
    """get today's date in the given timezone."""
    return datetime.now(ZoneInfo(tz)).strftime("%Y-%m-%d")


def upcoming_answers(
    catalog: Sequence[str],
    start: date | str,
    days: int = 7,
) -> list[tuple[str, int, str]]:
    """
    list the answers for a run of consecutive days.

    handy for checking what a re-sorted catalog does to the rotation.

    returns:
        list of (date_str, index, name)
    """
    first = date.fromisoformat(date_key(start))
    out: list[tuple[str, int, str]] = []
    for offset in range(days):
        key = date.fromordinal(first.toordinal() + offset).isoformat()
        idx = daily_index(key, len(catalog))
        out.append((key, idx, catalog[idx]))
    return out
