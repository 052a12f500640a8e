"""
catalog loader — the ordered list of guessable names.

the catalog's sort order defines the index space: the daily answer and
every "N cards away" hint are positions in it. re-sorting or resizing the
catalog rotates the answers.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator

from .config import Config, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


@dataclass
class CatalogStats:
    """what happened to the raw entries while loading."""

    total: int = 0
    kept: int = 0
    non_string: int = 0
    blank: int = 0
    duplicate: int = 0


class Catalog:
    """
    immutable, sorted sequence of unique names.

    entries are sorted with python's default string ordering (code point
    order), so the same input always produces the same indices.
    """

    def __init__(self, names: Iterable[Any]):
        self.stats = CatalogStats()
        kept = _clean_entries(names, self.stats)
        self._names: tuple[str, ...] = tuple(sorted(kept))
        self._index = {name: i for i, name in enumerate(self._names)}

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, i: int) -> str:
        return self._names[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"Catalog({len(self._names)} names)"

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def index_of(self, name: str) -> int | None:
        """exact lookup: position of a literal catalog entry, or None."""
        return self._index.get(name)


def _clean_entries(names: Iterable[Any], stats: CatalogStats) -> list[str]:
    seen: set[str] = set()
    kept: list[str] = []

    for raw in names:
        stats.total += 1

        if not isinstance(raw, str):
            stats.non_string += 1
            logger.debug("dropping non-string catalog entry: %r", raw)
            continue

        if not raw.strip():
            stats.blank += 1
            continue

        if raw in seen:
            stats.duplicate += 1
            logger.debug("dropping duplicate catalog entry: %r", raw)
            continue

        seen.add(raw)
        kept.append(raw)
        stats.kept += 1

    return kept


def load_catalog(
    path: Path | None = None,
    config: Config = DEFAULT_CONFIG,
) -> Catalog:
    """
    load the catalog from a JSON array of strings.

    args:
        path: catalog file (default: config.catalog_path)
        config: game config with paths

    returns:
        sorted Catalog; check catalog.stats for dropped entries
    """
    path = Path(path) if path is not None else config.catalog_path

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"catalog must be a JSON array, got {type(data).__name__}")

    catalog = Catalog(data)
    logger.debug(
        "loaded %d of %d catalog entries from %s",
        catalog.stats.kept, catalog.stats.total, path,
    )
    return catalog
