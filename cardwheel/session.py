"""
guess session: the player's guesses for one day and where they landed.

every accepted guess is measured against the answer index; the snapshot
is plain data for whatever draws the wheel.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import date

from .catalog import Catalog
from .config import Config, DEFAULT_CONFIG
from .daily import daily_index
from .rankings import Ranker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Guess:
    name: str
    index: int


@dataclass(frozen=True)
class GuessFeedback:
    """one guess measured against the answer."""

    guess: Guess

    # guess.index - answer_index: < 0 above the answer, > 0 below it
    offset: int

    # within near_window of the answer
    near: bool

    @property
    def distance(self) -> int:
        return abs(self.offset)

    @property
    def direction(self) -> str:
        """which way the answer lies from this guess."""
        if self.offset > 0:
            return "up"
        if self.offset < 0:
            return "down"
        return "correct"


@dataclass(frozen=True)
class SessionSnapshot:
    """state after the latest guess."""

    answer_index: int

    # one entry per accepted guess, submission order
    feedback: tuple[GuessFeedback, ...]

    solved: bool

    # nearest guess before / after the answer (earliest wins ties)
    closest_above: GuessFeedback | None
    closest_below: GuessFeedback | None

    @property
    def guess_count(self) -> int:
        return len(self.feedback)

    @property
    def last(self) -> GuessFeedback | None:
        return self.feedback[-1] if self.feedback else None

    @property
    def near_window(self) -> tuple[GuessFeedback, ...]:
        return tuple(fb for fb in self.feedback if fb.near)

    @property
    def last_outside_window(self) -> bool:
        """
        latest guess is far away and isn't already shown as closest
        above/below (the wheel draws it on an edge bar).
        """
        last = self.last
        if last is None or last.near:
            return False
        return last is not self.closest_above and last is not self.closest_below


def build_snapshot(
    guesses: list[Guess],
    answer_index: int,
    near_window: int = 5,
    solved: bool = False,
) -> SessionSnapshot:
    """
    measure every guess against the answer.

    args:
        guesses: accepted guesses in submission order
        answer_index: today's answer
        near_window: max distance that still counts as near
        solved: already solved earlier (sticky)

    returns:
        SessionSnapshot
    """
    feedback = tuple(
        GuessFeedback(
            guess=g,
            offset=g.index - answer_index,
            near=abs(g.index - answer_index) <= near_window,
        )
        for g in guesses
    )

    above = [fb for fb in feedback if fb.offset < 0]
    below = [fb for fb in feedback if fb.offset > 0]

    # min() keeps the first of equal keys → earliest submission wins
    closest_above = min(above, key=lambda fb: fb.distance) if above else None
    closest_below = min(below, key=lambda fb: fb.distance) if below else None

    if feedback and feedback[-1].offset == 0:
        solved = True

    return SessionSnapshot(
        answer_index=answer_index,
        feedback=feedback,
        solved=solved,
        closest_above=closest_above,
        closest_below=closest_below,
    )


class GuessSession:
    """
    one day's game over an injected catalog.

    holds the guess sequence and the ranking engine; both are mutated in
    place, so access is serialized with a lock.
    """

    def __init__(
        self,
        catalog: Catalog,
        answer_index: int,
        config: Config = DEFAULT_CONFIG,
        ranker: Ranker | None = None,
    ):
        if not 0 <= answer_index < len(catalog):
            raise ValueError(
                f"answer_index {answer_index} out of range for {len(catalog)} names"
            )
        self.catalog = catalog
        self.answer_index = answer_index
        self.config = config
        self.ranker = ranker if ranker is not None else Ranker(catalog)
        self._lock = threading.Lock()
        self._guesses: list[Guess] = []
        self._snapshot = build_snapshot([], answer_index, config.near_window)

    @classmethod
    def for_date(
        cls,
        catalog: Catalog,
        day: date | str,
        config: Config = DEFAULT_CONFIG,
    ) -> "GuessSession":
        """session whose answer is the daily pick for `day`."""
        return cls(catalog, daily_index(day, len(catalog)), config=config)

    @property
    def guesses(self) -> tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def solved(self) -> bool:
        return self._snapshot.solved

    @property
    def answer(self) -> str:
        return self.catalog[self.answer_index]

    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    def suggestions(self, query: str, limit: int | None = None) -> list[str]:
        """shortlist for the current input."""
        if limit is None:
            limit = self.config.suggestion_limit
        return self.ranker.rank(query, limit)

    def add_guess(self, name: str) -> None:
        """
        record a guess by literal catalog name and recompute the snapshot.

        names not in the catalog, and anything after the answer has been
        found, are ignored.
        """
        self._record(name)

    def _record(self, name: str) -> Guess | None:
        index = self.catalog.index_of(name)
        if index is None:
            logger.debug("ignoring guess not in catalog: %r", name)
            return None

        with self._lock:
            if self._snapshot.solved:
                logger.debug("ignoring guess after solve: %r", name)
                return None
            guess = Guess(name=name, index=index)
            self._guesses.append(guess)
            self._snapshot = build_snapshot(
                self._guesses,
                self.answer_index,
                self.config.near_window,
                solved=self._snapshot.solved,
            )
            return guess

    def submit(self, query: str) -> Guess | None:
        """
        confirm the current input: resolve it to the top-ranked name and
        guess that. blank input does nothing.

        returns:
            the recorded Guess, or None if nothing was recorded
        """
        name = self.ranker.resolve(query)
        if name is None:
            return None

        return self._record(name)
