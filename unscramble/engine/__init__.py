from .settings import GameSettings, MAX_NO_OF_WORDS, SCORE_INCREASE
from .scramble import scramble_word, can_scramble
from .validation import is_correct, normalize_input
from .tracker import RoundTracker, RoundState

__all__ = [
    "GameSettings", "MAX_NO_OF_WORDS", "SCORE_INCREASE",
    "scramble_word", "can_scramble", "is_correct", "normalize_input",
    "RoundTracker", "RoundState",
]
