"""
Error types raised by the unscramble core.

Only two situations are real errors:
  - CatalogExhausted  : every catalog word was used before the round limit.
  - ScrambleImpossible: a word has a single arrangement (e.g. "a", "zzz"),
                        so no scramble can differ from it.

A wrong guess or reaching the round limit are ordinary boolean outcomes.
"""

from __future__ import annotations


class UnscrambleError(Exception):
    """Base class for all unscramble errors."""


class CatalogExhausted(UnscrambleError, RuntimeError):
    """No unused words are left in the catalog."""

    def __init__(self, used: int, catalog_size: int):
        self.used = used
        self.catalog_size = catalog_size
        super().__init__(
            f"catalog exhausted: all {catalog_size} word(s) used after {used} round(s)")


class ScrambleImpossible(UnscrambleError, ValueError):
    """The word has only one arrangement of its characters."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"cannot scramble {word!r}: it has a single arrangement")
