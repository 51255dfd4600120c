"""
Oracle player.

Always answers with the hidden word the harness puts in the view. Useful as
an upper bound: an oracle game scores round_limit * score_increase unless
the catalog runs out first.
"""

from __future__ import annotations

from .base import BasePlayer, register


@register
class OraclePlayer(BasePlayer):
    id = "oracle"
    name = "Oracle"
    version = "1.0.0"

    def next_guess(self, view: dict) -> str | None:
        return view["answer"]
