"""
Guess checking.

The game is strict: a guess is correct only if it is exactly the hidden word,
same case, no extra characters. Anything else (empty string, None, numbers)
is simply wrong, never an error.

Presentation layers are expected to tidy raw keyboard input with
normalize_input() before submitting; the core itself does not.
"""

from __future__ import annotations


def is_correct(guess, answer: str) -> bool:
    """Return True iff `guess` is a string equal to `answer`."""
    if not isinstance(guess, str):
        return False
    return guess == answer


def normalize_input(raw) -> str:
    """Strip surrounding whitespace from typed text; None becomes ''."""
    if raw is None:
        return ""
    return str(raw).strip()
