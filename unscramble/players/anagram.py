"""
Anagram player.

Strategy:
  - Look up every catalog word that uses exactly the letters of the scramble
    (same multiset of characters).
  - Try them one at a time in a seeded random order, never repeating a guess
    for the same word. Skip when none are left.

Without anagram pairs in the catalog this player solves every word on the
first attempt; pairs such as "listen"/"silent" only cost extra attempts.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Tuple

from .base import BasePlayer, register


def _key(word: str) -> Tuple[str, ...]:
    return tuple(sorted(word))


@register
class AnagramPlayer(BasePlayer):
    id = "anagram"
    name = "Catalog Anagram"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._index: Dict[Tuple[str, ...], List[str]] = {}

    def reset(self, *, catalog: List[str], seed: int | None = None) -> None:
        super().reset(catalog=catalog, seed=seed)
        index: Dict[Tuple[str, ...], List[str]] = defaultdict(list)
        for w in self.catalog:
            index[_key(w)].append(w)
        self._index = dict(index)

    def next_guess(self, view: dict) -> str | None:
        """
        Args:
            view: dict with keys:
                - "scrambled": the scramble on screen
                - "guessed":   guesses already tried for this word
        """
        tried = set(view.get("guessed", ()))
        options = [w for w in self._index.get(_key(view["scrambled"]), []) if w not in tried]
        if not options:
            return None
        return options[self.rng.randrange(len(options))]
