"""
Word scrambling.

A scramble is a random permutation of a word's characters that differs from
the word itself (case-sensitive). The shuffle is repeated until it differs,
which terminates almost surely as long as the word has at least two distinct
characters. Words with a single arrangement ("", "a", "zzz") are rejected up
front with ScrambleImpossible instead of looping forever.
"""

from __future__ import annotations

import random

from ..errors import ScrambleImpossible


def can_scramble(word: str) -> bool:
    """True if `word` has at least two distinct arrangements of its characters."""
    return len(set(word)) >= 2


def scramble_word(word: str, rng: random.Random | None = None) -> str:
    """
    Return a shuffled copy of `word` that is not equal to `word`.

    Args:
      word : the word to scramble
      rng  : random.Random to draw from (module RNG if omitted)

    Raises:
      ScrambleImpossible if the word has only one arrangement.

    Examples:
      scramble_word("cat")  -> "tac" (or "act", "atc", ...)
      scramble_word("aaa")  -> ScrambleImpossible
    """
    if not can_scramble(word):
        raise ScrambleImpossible(word)

    rng = rng or random.Random()
    letters = list(word)
    rng.shuffle(letters)
    while "".join(letters) == word:
        rng.shuffle(letters)
    return "".join(letters)
