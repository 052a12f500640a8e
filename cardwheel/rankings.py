"""
rank catalog names against free-text input.

this is the core autocomplete logic: every entry gets the score of the
first tier it satisfies (lower is better), entries that satisfy none get a
fuzzy score from word-window edit distance, and ties break on the
normalized text.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable

from .config import DEFAULT_CONFIG
from .text import normalize, window_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tier:
    """one priority bucket: entries where matches(entry, query) holds."""

    name: str
    score: int
    matches: Callable[[str, str], bool]


# checked top to bottom; first hit wins. both args are normalized.
TIERS: tuple[Tier, ...] = (
    Tier("exact", 0, lambda entry, query: entry == query),
    Tier("prefix", 10, lambda entry, query: entry.startswith(query)),
    Tier("word_start", 20, lambda entry, query: (" " + query) in entry),
    Tier("substring", 30, lambda entry, query: query in entry),
)

# fuzzy tier: base score + best word-window edit distance
FUZZY_BASE = 100


@dataclass(frozen=True)
class RankedCandidate:
    """a scored catalog entry (lives for one ranking call)."""

    name: str
    normalized: str
    score: int


def score_entry(entry: str, query: str) -> int:
    """
    score a normalized entry against a normalized query.

    returns:
        tier score, or FUZZY_BASE + edit distance if no tier matches
    """
    for tier in TIERS:
        if tier.matches(entry, query):
            return tier.score
    return FUZZY_BASE + window_distance(query, entry)


def _prepare(catalog: Iterable[object]) -> list[tuple[str, str]]:
    # non-strings and blanks never reach scoring
    return [
        (name, normalize(name))
        for name in catalog
        if isinstance(name, str) and name.strip()
    ]


def _rank_prepared(
    query: str,
    entries: list[tuple[str, str]],
) -> list[RankedCandidate]:
    q = normalize(query)
    if not q:
        return []

    ranked = [
        RankedCandidate(name=name, normalized=norm, score=score_entry(norm, q))
        for name, norm in entries
    ]
    # original text as a last resort keeps "Foo!" vs "foo" deterministic
    ranked.sort(key=lambda c: (c.score, c.normalized, c.name))
    return ranked


def _check_limit(limit: int) -> None:
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got: {limit}")


def rank_candidates(query: str, catalog: Iterable[object]) -> list[RankedCandidate]:
    """full scored ranking, best first. blank query → []."""
    return _rank_prepared(query, _prepare(catalog))


def rank(
    query: str,
    catalog: Iterable[object],
    limit: int = DEFAULT_CONFIG.suggestion_limit,
) -> list[str]:
    """
    rank catalog names against a query (no caching).

    args:
        query: free-text player input
        catalog: ordered catalog names
        limit: max number of names to return

    returns:
        up to `limit` catalog names, best match first
    """
    _check_limit(limit)
    return [c.name for c in rank_candidates(query, catalog)[:limit]]


class Ranker:
    """
    ranking engine bound to one catalog, with a single-slot cache.

    the most recent query and its full ranking are kept; asking again with
    the identical query string returns a slice of the cached result, any
    other query evicts it. the catalog is captured at construction and
    never re-read, so there is no invalidation hook. build a new Ranker
    for a new catalog.
    """

    def __init__(self, catalog: Iterable[object]):
        self._entries = _prepare(catalog)
        self._lock = threading.Lock()
        self._last_query: str | None = None
        self._last_result: list[RankedCandidate] = []

    def __len__(self) -> int:
        return len(self._entries)

    def rank_candidates(self, query: str) -> list[RankedCandidate]:
        """full scored ranking for query, served from the cache when possible."""
        if not query or not query.strip():
            return []

        with self._lock:
            if query == self._last_query:
                logger.debug("ranking cache hit: %r", query)
                return list(self._last_result)

            logger.debug("ranking cache miss: %r", query)
            result = _rank_prepared(query, self._entries)
            self._last_query = query
            self._last_result = result
            return list(result)

    def rank(self, query: str, limit: int = DEFAULT_CONFIG.suggestion_limit) -> list[str]:
        """up to `limit` names for query, best first."""
        _check_limit(limit)
        return [c.name for c in self.rank_candidates(query)[:limit]]

    def resolve(self, query: str) -> str | None:
        """
        exact-submit resolution: the single top-ranked name, or None for a
        blank query or empty catalog.
        """
        top = self.rank(query, limit=1)
        return top[0] if top else None
