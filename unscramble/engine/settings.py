"""
Game configuration.

The module-level constants are the single source of truth for the classic
rules (10 words per game, 20 points per correct answer). GameSettings lets a
caller change them, e.g. from CLI flags or the environment:

    UNSCRAMBLE_ROUND_LIMIT=5 UNSCRAMBLE_SCORE_INCREASE=10 python -m apps.cli.play
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Final, Mapping

MAX_NO_OF_WORDS: Final[int] = 10
SCORE_INCREASE: Final[int] = 20

ENV_ROUND_LIMIT = "UNSCRAMBLE_ROUND_LIMIT"
ENV_SCORE_INCREASE = "UNSCRAMBLE_SCORE_INCREASE"


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer; got {raw!r}") from e


@dataclass(frozen=True)
class GameSettings:
    round_limit: int = MAX_NO_OF_WORDS
    score_increase: int = SCORE_INCREASE

    def __post_init__(self):
        if self.round_limit < 1:
            raise ValueError(f"round_limit must be >= 1; got {self.round_limit}")
        if self.score_increase < 1:
            raise ValueError(f"score_increase must be >= 1; got {self.score_increase}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GameSettings":
        """
        Build settings from UNSCRAMBLE_* variables, falling back to the defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            round_limit=_env_int(env, ENV_ROUND_LIMIT, MAX_NO_OF_WORDS),
            score_increase=_env_int(env, ENV_SCORE_INCREASE, SCORE_INCREASE),
        )

    def with_overrides(self, *, round_limit: int | None = None,
                       score_increase: int | None = None) -> "GameSettings":
        """Copy with the given values replaced; None keeps the current one."""
        return replace(
            self,
            round_limit=self.round_limit if round_limit is None else round_limit,
            score_increase=self.score_increase if score_increase is None else score_increase,
        )
