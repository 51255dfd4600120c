# apps/cli/play.py
"""
Interactive terminal front-end for the unscramble game.

    python -m apps.cli.play --rounds 5 --seed 7

Type your guess and press Enter. Commands:
  :skip   skip the current word (no points)
  :quit   leave the game
"""

from __future__ import annotations

import argparse
import logging

from unscramble.datasets import load_catalog, default_catalog_path
from unscramble.engine import GameSettings, RoundTracker
from unscramble.session import GameSession, Outcome

SKIP = ":skip"
QUIT = ":quit"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _show_word(session: GameSession) -> None:
    t = session.tracker
    print(f"\n[{session.word_count_label} | score {t.score}]  {t.scrambled_word}")


def _play_again() -> bool:
    ans = input("Play again? [y/N] ").strip().lower()
    return ans in ("y", "yes")


def main():
    ap = argparse.ArgumentParser(description="unscramble - guess the word behind the scramble")
    ap.add_argument("--words", default=str(default_catalog_path()),
                    help="path to the word catalog (one word per line)")
    ap.add_argument("--rounds", type=int, help="words per game (default 10)")
    ap.add_argument("--score-increase", type=int, help="points per correct word (default 20)")
    ap.add_argument("--seed", type=int, help="RNG seed (for reproducible games)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        settings = GameSettings.from_env().with_overrides(
            round_limit=args.rounds, score_increase=args.score_increase)
        catalog = load_catalog(args.words)
    except (FileNotFoundError, ValueError) as e:
        ap.error(str(e))
    if not catalog:
        ap.error(f"no playable words in {args.words}")
    tracker = RoundTracker(catalog, settings, seed=args.seed)
    session = GameSession(tracker)
    session.start()

    print(f"Unscramble the word! {SKIP} to skip, {QUIT} to leave.")
    _show_word(session)

    while True:
        try:
            text = input("> ")
        except EOFError:
            print()
            break

        if text.strip() == QUIT:
            break
        outcome = session.skip() if text.strip() == SKIP else session.submit(text)

        if outcome is Outcome.WRONG:
            print("Try again!")
            continue

        if outcome is Outcome.GAME_OVER:
            if session.exhausted:
                print("No more words in the catalog.")
            print(f"\nCongratulations! You scored: {session.final_score}")
            if not _play_again():
                break
            session.restart()

        _show_word(session)


if __name__ == "__main__":
    main()
