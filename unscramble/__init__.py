from .errors import UnscrambleError, CatalogExhausted, ScrambleImpossible
from .engine import RoundTracker, GameSettings
from .session import GameSession, Outcome

__all__ = [
    "UnscrambleError", "CatalogExhausted", "ScrambleImpossible",
    "RoundTracker", "GameSettings", "GameSession", "Outcome",
]
