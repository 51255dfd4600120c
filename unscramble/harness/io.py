"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, catalog report and summary.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _word_cell(word: str, scrambled: str, guesses: List[str], solved: bool) -> str:
    """
    Compact per-word column, e.g. "cat>tac:act|cat+" (answer>scramble:guesses, + if solved).
    """
    return f"{word}>{scrambled}:{'|'.join(guesses)}{'+' if solved else ''}"


def write_csv(results: List[Dict], path: str, round_limit: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      player, score, words, solved, attempts, exhausted, time_ms,
      word_1, word_2, ..., word_<round_limit>

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["player", "score", "words", "solved", "attempts", "exhausted", "time_ms"]
    fields += [f"word_{i}" for i in range(1, round_limit + 1)]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "player": r.get("player_id", "?"),
                "score": r["score"],
                "words": r["words"],
                "solved": r["solved"],
                "attempts": r["attempts"],
                "exhausted": r["exhausted"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, round_limit + 1):
                row[f"word_{i}"] = _word_cell(*hist[i - 1]) if i <= len(hist) else ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (players, rounds, games, seed, outdir)
      - catalog: output of datasets.validate_catalog(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
