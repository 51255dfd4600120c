# apps/cli/simulate.py
"""
Run automated players against the game and record the results.

This script:
  1) Validates the catalog (prints counts + SHA, checks there are enough words).
  2) Plays a batch of games per player with a live progress indicator.
  3) Writes per player, under <outdir>/<player_id>/:
       - CSV:  one row per game with per-word columns
       - JSON: manifest with config, catalog report, score summary, git commit

    python -m apps.cli.simulate --players ALL --games 200 --seed 123
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from unscramble.datasets import validate_catalog, pretty_summary, load_catalog, \
    default_catalog_path
from unscramble.engine import GameSettings, RoundTracker
from unscramble.harness import play_game, summarize
from unscramble.harness.core import DEFAULT_MAX_ATTEMPTS
from unscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from unscramble.players import create_player, get_player_ids

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_player(player_id: str, *, catalog: List[str], settings: GameSettings, games: int,
                    base_seed: int, max_attempts: int, progress: str) -> List[Dict]:
    player = create_player(player_id)
    mode = _progress_mode(progress)
    seq = range(1, games + 1)
    iterator = tqdm(seq, ncols=80, desc=player_id, unit="game") if mode == "bar" else seq

    results = []
    start = time.time()
    last_print = 0.0
    for idx in iterator:
        game_seed = base_seed + idx
        tracker = RoundTracker(catalog, settings, seed=game_seed)
        r = play_game(player, tracker, max_attempts=max_attempts, seed=game_seed)
        r["player_id"] = player.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == games):
                elapsed = now - start
                pct = 100.0 * idx / max(1, games)
                sys.stderr.write(f"\r[{player_id}] {idx}/{games} {pct:5.1f}% | "
                                 f"elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def main():
    registered = get_player_ids()
    ap = argparse.ArgumentParser(description="unscramble - simulate automated players")
    ap.add_argument("--players", nargs="+", default=["anagram"],
                    help=f"player ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--words", default=str(default_catalog_path()),
                    help="path to the word catalog (one word per line)")
    ap.add_argument("--rounds", type=int, help="words per game (default 10)")
    ap.add_argument("--score-increase", type=int, help="points per correct word (default 20)")
    ap.add_argument("--games", type=int, default=100, help="games per player")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                    help="wrong guesses allowed before a word is skipped")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports/sim")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    if args.games < 1:
        ap.error(f"--games must be >= 1; got {args.games}")
    if args.max_attempts < 1:
        ap.error(f"--max-attempts must be >= 1; got {args.max_attempts}")
    try:
        settings = GameSettings.from_env().with_overrides(
            round_limit=args.rounds, score_increase=args.score_increase)
    except ValueError as e:
        ap.error(str(e))

    # 1) validate once
    rep = validate_catalog(args.words, settings.round_limit)
    print(pretty_summary(rep))

    # 2) load once (words that cannot be scrambled are skipped)
    if not rep["exists"]:
        ap.error("; ".join(rep["issues"]))
    catalog = list(load_catalog(args.words))
    if not catalog:
        ap.error(f"no playable words in {args.words}: {rep['issues']}")

    # 3) expand players
    if len(args.players) == 1 and args.players[0].lower() == "all":
        todo = registered
    else:
        todo = args.players
        missing = [p for p in todo if p not in registered]
        if missing:
            raise SystemExit(f"Unknown player ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    for pid in todo:
        if args.progress != "off":
            print(f"\n=== Running {pid} for {args.games} games "
                  f"(rounds={settings.round_limit}) ===")
        results = _run_one_player(pid, catalog=catalog, settings=settings, games=args.games,
                                  base_seed=args.seed, max_attempts=args.max_attempts,
                                  progress=args.progress)
        summary = summarize(results)
        print(f"{pid}: mean score {summary['score_mean']:.1f} "
              f"(std {summary['score_std']:.1f}) | solve rate {summary['solve_rate']:.2%}")

        run_id = timestamp_id()
        pdir = outdir / pid
        csv_path = pdir / f"run_{run_id}.csv"
        manifest_path = pdir / f"run_{run_id}_manifest.json"

        write_csv(results, str(csv_path), round_limit=settings.round_limit)
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args) | {"player": pid,
                                    "round_limit": settings.round_limit,
                                    "score_increase": settings.score_increase},
            "catalog": rep,
            "summary": summary,
            "player_id": pid,
        }
        write_manifest(manifest, str(manifest_path))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
