#!/usr/bin/env python3
"""
play today's cardwheel in the terminal.

usage:
    python scripts/play.py
    python scripts/play.py --date 2024-12-18 --catalog data/cards.json

type part of a name to see suggestions, then:
    !<text>   guess the top match for <text>
    !         guess the top match for the last thing you typed
    q         give up (reveals the answer)
"""

import argparse
import logging
import sys
from pathlib import Path

# add parent dir to path so we can import cardwheel
sys.path.insert(0, str(Path(__file__).parent.parent))

from cardwheel import Config, GuessSession, load_catalog, today_str
from cardwheel.session import GuessFeedback, SessionSnapshot


def describe(fb: GuessFeedback) -> str:
    arrow = "^" if fb.direction == "up" else "v"
    return f"{fb.guess.name} | {fb.distance} {arrow}"


def render(snap: SessionSnapshot) -> None:
    last = snap.last
    if last is None:
        return

    if snap.solved:
        print(f"\n  *** {last.guess.name} ({snap.guess_count} guesses) ***\n")
        return

    print()
    if snap.closest_above is not None:
        print(f"  closest above: {describe(snap.closest_above)}")
    for fb in sorted(snap.near_window, key=lambda fb: fb.offset):
        print(f"    [{fb.offset:+d}] {fb.guess.name}")
    if snap.closest_below is not None:
        print(f"  closest below: {describe(snap.closest_below)}")
    if snap.last_outside_window:
        print(f"  last guess:    {describe(last)}")
    print(f"  {last.distance} cards away\n")


def main():
    parser = argparse.ArgumentParser(description="play cardwheel in the terminal")
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="game date YYYY-MM-DD (default: today in --tz)"
    )
    parser.add_argument(
        "--tz",
        type=str,
        default=None,
        help="timezone for the day boundary (default: UTC)"
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="catalog JSON array (default: data/cards.json)"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="max suggestions per query (default: 15)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="print debug logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = Config()
    if args.tz:
        config.day_boundary_tz = args.tz
    if args.limit is not None:
        if args.limit < 1:
            parser.error("--limit must be >= 1")
        config.suggestion_limit = args.limit

    catalog_path = args.catalog or config.catalog_path
    if not catalog_path.exists():
        print(f"error: catalog not found at {catalog_path}")
        sys.exit(1)

    catalog = load_catalog(catalog_path)
    if len(catalog) == 0:
        print(f"error: no usable names in {catalog_path}")
        sys.exit(1)

    date_str = args.date or today_str(config.day_boundary_tz)
    session = GuessSession.for_date(catalog, date_str, config=config)
    print(f"cardwheel for {date_str}: {len(catalog):,} names")

    query = ""
    while not session.solved:
        try:
            line = input("> ").strip()
        except EOFError:
            break

        if line == "q":
            print(f"the answer was: {session.answer}")
            return

        if line.startswith("!"):
            text = line[1:].strip() or query
            guess = session.submit(text)
            if guess is None:
                print("  (not accepted)")
                continue
            query = ""
            render(session.snapshot())
            continue

        query = line
        for i, name in enumerate(session.suggestions(query), start=1):
            print(f"  {i:2d}. {name}")

    if session.solved:
        print("done!")


if __name__ == "__main__":
    main()
