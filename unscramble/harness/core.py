"""
Simulation harness core primitives.

- play_game:  play one full game with an automated player through a GameSession.
- run_batch:  play many games in sequence with per-game seeds.
- summarize:  aggregate scores of a batch (numpy).

Like the interactive front-end, the harness only talks to the session, so
game rules live in one place (RoundTracker).
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List

import numpy as np

from ..engine.settings import GameSettings
from ..engine.tracker import RoundTracker
from ..session import GameSession, Outcome

DEFAULT_MAX_ATTEMPTS = 3


def play_game(
        player,
        tracker: RoundTracker,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the session reports GAME_OVER.

    The player sees the scramble and its previous guesses for the current
    word (plus the answer, which only the oracle uses). After `max_attempts`
    wrong guesses, or when the player returns None, the word is skipped.

    Returns:
        dict with keys:
            score, words, solved, attempts, time_ms, exhausted,
            history (list[(word, scrambled, guesses, solved)])
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1; got {max_attempts}")

    player.reset(catalog=list(tracker.catalog), seed=seed)
    session = GameSession(tracker)
    session.start()

    history: List[tuple] = []
    attempts = 0
    t0 = time.time()

    while not session.is_over:
        word = tracker.current_word
        scrambled = tracker.scrambled_word
        guessed: List[str] = []
        solved = False
        outcome = None

        while len(guessed) < max_attempts:
            guess = player.next_guess({
                "scrambled": scrambled,
                "answer": word,
                "guessed": list(guessed),
                "word_count": tracker.word_count,
                "round_limit": tracker.round_limit,
            })
            if guess is None:
                break
            guessed.append(guess)
            attempts += 1
            outcome = session.submit(guess)
            if outcome is not Outcome.WRONG:
                solved = True
                break

        history.append((word, scrambled, guessed, solved))
        if not solved:
            outcome = session.skip()
        if outcome is Outcome.GAME_OVER:
            break

    dt = (time.time() - t0) * 1000.0
    return {
        "score": tracker.score,
        "words": tracker.word_count,
        "solved": sum(1 for h in history if h[3]),
        "attempts": attempts,
        "time_ms": dt,
        "exhausted": session.exhausted,
        "history": history,
    }


def run_batch(
        player,
        catalog: Iterable[str],
        settings: GameSettings,
        *,
        games: int,
        seed: int | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> List[Dict]:
    """
    Play `games` independent games. Each game gets its own tracker seeded from
    the base seed (seed + index), so runs are reproducible but not identical.
    """
    catalog = list(catalog)
    out: List[Dict] = []
    for idx in range(1, games + 1):
        game_seed = None if seed is None else (seed + idx)
        tracker = RoundTracker(catalog, settings, seed=game_seed)
        out.append(play_game(player, tracker, max_attempts=max_attempts, seed=game_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: score mean/std/min/median/max, solve rate and the
    number of games that ran out of catalog words.
    """
    if not results:
        return {"games": 0}

    scores = np.array([r["score"] for r in results], dtype=float)
    solved = np.array([r["solved"] for r in results], dtype=float)
    words = np.array([r["words"] for r in results], dtype=float)
    total_words = float(words.sum())

    return {
        "games": len(results),
        "score_mean": float(scores.mean()),
        "score_std": float(scores.std()),
        "score_min": float(scores.min()),
        "score_median": float(np.median(scores)),
        "score_max": float(scores.max()),
        "solve_rate": float(solved.sum() / total_words) if total_words else 0.0,
        "exhausted": sum(1 for r in results if r["exhausted"]),
    }
