"""
text primitives shared by the ranking engine: normalization and
edit distance.
"""

import re

from rapidfuzz.distance import Levenshtein

# anything that isn't a lowercase ascii letter, digit or whitespace
_STRIP_CHARS = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """
    lowercase, drop punctuation/non-ascii, collapse whitespace, trim.

    idempotent: normalize(normalize(s)) == normalize(s).
    """
    text = _STRIP_CHARS.sub("", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def edit_distance(a: str, b: str) -> int:
    """levenshtein distance (insert/delete/substitute, each cost 1)."""
    return Levenshtein.distance(a, b)


def window_distance(query: str, entry: str) -> int:
    """
    best edit distance between `query` and any run of len(query words)
    consecutive words in `entry`.

    falls back to the whole-string distance when the entry has fewer words
    than the query.
    """
    q_words = query.split()
    e_words = entry.split()
    n = len(q_words)

    if n == 0 or len(e_words) < n:
        return edit_distance(query, entry)

    return min(
        edit_distance(query, " ".join(e_words[i:i + n]))
        for i in range(len(e_words) - n + 1)
    )
