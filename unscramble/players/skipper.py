from __future__ import annotations

from .base import BasePlayer, register


@register
class SkipperPlayer(BasePlayer):
    """Skips every word; a game always ends with score 0."""
    id = "skipper"
    name = "Skipper"
    version = "1.0.0"

    def next_guess(self, view: dict) -> str | None:
        return None
