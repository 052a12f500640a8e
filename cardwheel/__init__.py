"""
cardwheel daily guessing game core

picks a deterministic answer from a sorted catalog each day, ranks
free-text input into a shortlist of valid names, and tracks how far each
guess lands from the answer.
"""

from .config import Config
from .catalog import Catalog, load_catalog
from .daily import daily_index, today_str
from .rankings import Ranker, rank
from .session import GuessSession

__all__ = [
    "Config",
    "Catalog",
    "load_catalog",
    "daily_index",
    "today_str",
    "Ranker",
    "rank",
    "GuessSession",
]
