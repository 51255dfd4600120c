"""
Game session: the flow of one game screen, without any screen.

Wraps a RoundTracker and turns player actions into outcomes:

  submit(text) -> CORRECT   (scored, next word dealt)
               -> WRONG     (nothing changes, try again)
               -> GAME_OVER (scored, but that was the last word)
  skip()       -> SKIPPED   (next word dealt, no points)
               -> GAME_OVER (no words left)

Running out of catalog words also ends the game; the front-end shows the
final score either way.
"""

from __future__ import annotations

import logging
from enum import Enum

from .engine.tracker import RoundTracker
from .engine.validation import normalize_input
from .errors import CatalogExhausted

logger = logging.getLogger(__name__)


class Outcome(Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    SKIPPED = "skipped"
    GAME_OVER = "game_over"


class GameSession:

    def __init__(self, tracker: RoundTracker):
        self.tracker = tracker
        self.exhausted = False
        self._over = False

    @property
    def is_over(self) -> bool:
        return self._over

    @property
    def final_score(self) -> int:
        return self.tracker.score

    @property
    def word_count_label(self) -> str:
        return f"{self.tracker.word_count} of {self.tracker.round_limit} words"

    def start(self) -> None:
        self.tracker.reinitialize()
        self.exhausted = False
        self._over = False

    restart = start

    def _next(self) -> bool:
        try:
            return self.tracker.advance_word()
        except CatalogExhausted:
            self.exhausted = True
            return False

    def _finish(self) -> Outcome:
        self._over = True
        logger.info("Game over: score=%d words=%d%s", self.tracker.score,
                    self.tracker.word_count, " (catalog exhausted)" if self.exhausted else "")
        return Outcome.GAME_OVER

    def submit(self, text) -> Outcome:
        if self._over:
            return Outcome.GAME_OVER
        if not self.tracker.submit_guess(normalize_input(text)):
            return Outcome.WRONG
        if not self._next():
            return self._finish()
        return Outcome.CORRECT

    def skip(self) -> Outcome:
        if self._over:
            return Outcome.GAME_OVER
        if not self._next():
            return self._finish()
        return Outcome.SKIPPED
