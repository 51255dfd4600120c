"""
Round tracker: the whole game state for one player.

Holds the current word, its scramble, the set of words already used, the
score and the word count. Three operations mutate it:

  - advance_word() : pick an unused word and scramble it (bounded by the
                     round limit; raises CatalogExhausted if no word is left)
  - submit_guess() : exact, case-sensitive check against the current word
  - reinitialize() : fresh state, then one advance_word()

Observers registered with observe() are called with the new value whenever
"score", "word_count" or "scrambled_word" changes, so a front-end can
re-render without polling.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Set, Tuple

from ..errors import CatalogExhausted
from .scramble import can_scramble, scramble_word
from .settings import GameSettings
from .validation import is_correct

logger = logging.getLogger(__name__)

Observer = Callable[[object], None]

OBSERVABLE_FIELDS = ("score", "word_count", "scrambled_word")


@dataclass
class RoundState:
    """Mutable per-game state. Replaced wholesale on reinitialize()."""
    current_word: str = ""
    scrambled_word: str = ""
    used_words: Set[str] = field(default_factory=set)
    score: int = 0
    word_count: int = 0


def _prepare_catalog(words: Iterable[str]) -> Tuple[str, ...]:
    """Dedupe (first occurrence wins) and reject words that cannot be scrambled."""
    seen: Set[str] = set()
    out: List[str] = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)

    if not out:
        raise ValueError("catalog must contain at least one word")
    bad = [w for w in out if not can_scramble(w)]
    if bad:
        raise ValueError(f"catalog contains words with a single arrangement: {bad[:5]}")
    return tuple(out)


class RoundTracker:

    def __init__(self, catalog: Iterable[str], settings: GameSettings | None = None,
                 *, seed: int | None = None, rng: random.Random | None = None):
        self.catalog: Tuple[str, ...] = _prepare_catalog(catalog)
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random(seed)
        self._state = RoundState()
        self._observers: Dict[str, List[Observer]] = {f: [] for f in OBSERVABLE_FIELDS}
        logger.debug("RoundTracker created (catalog=%d, round_limit=%d)",
                     len(self.catalog), self.settings.round_limit)

    # ---- read accessors ----

    @property
    def current_word(self) -> str:
        return self._state.current_word

    @property
    def scrambled_word(self) -> str:
        return self._state.scrambled_word

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def word_count(self) -> int:
        return self._state.word_count

    @property
    def used_words(self) -> frozenset:
        return frozenset(self._state.used_words)

    @property
    def round_limit(self) -> int:
        return self.settings.round_limit

    @property
    def is_finished(self) -> bool:
        return self._state.word_count >= self.settings.round_limit

    # ---- observers ----

    def observe(self, name: str, callback: Observer) -> Callable[[], None]:
        """
        Register `callback` for changes of `name` (one of OBSERVABLE_FIELDS).
        Returns a function that removes the registration.
        """
        if name not in self._observers:
            raise ValueError(f"Unknown field: {name}. Observable: {list(OBSERVABLE_FIELDS)}")
        self._observers[name].append(callback)

        def unsubscribe() -> None:
            if callback in self._observers[name]:
                self._observers[name].remove(callback)

        return unsubscribe

    def _notify(self, name: str, value) -> None:
        for cb in list(self._observers[name]):
            cb(value)

    # ---- operations ----

    def _pick_unused(self) -> str:
        unused = [w for w in self.catalog if w not in self._state.used_words]
        if not unused:
            logger.warning("Catalog exhausted after %d word(s)", self._state.word_count)
            raise CatalogExhausted(used=self._state.word_count, catalog_size=len(self.catalog))
        return self.rng.choice(unused)

    def advance_word(self) -> bool:
        """
        Move to the next word. Returns False (and changes nothing) once the
        round limit is reached.

        Raises:
          CatalogExhausted if every catalog word has already been used.
        """
        st = self._state
        if st.word_count >= self.settings.round_limit:
            return False

        word = self._pick_unused()
        scrambled = scramble_word(word, self.rng)

        st.current_word = word
        st.scrambled_word = scrambled
        st.used_words.add(word)
        st.word_count += 1
        logger.debug("Word %d/%d: %s -> %s", st.word_count, self.settings.round_limit,
                     word, scrambled)

        self._notify("scrambled_word", scrambled)
        self._notify("word_count", st.word_count)
        return True

    def submit_guess(self, candidate: str) -> bool:
        """Score `candidate` against the current word. Only exact matches count."""
        if not self._state.current_word or not is_correct(candidate, self._state.current_word):
            return False
        self._state.score += self.settings.score_increase
        self._notify("score", self._state.score)
        return True

    def reinitialize(self) -> None:
        """Start over: score and word count back to 0, then deal the first word."""
        self._state = RoundState()
        logger.debug("RoundTracker reinitialized")
        self._notify("score", 0)
        self._notify("word_count", 0)
        self.advance_word()
