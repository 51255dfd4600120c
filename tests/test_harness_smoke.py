import csv
import json
from pathlib import Path

import pytest
from unscramble.datasets import load_catalog
from unscramble.engine import GameSettings, RoundTracker
from unscramble.harness import play_game, run_batch, summarize, write_csv, write_manifest
from unscramble.players import create_player, get_player_ids, register
from unscramble.players.base import BasePlayer

SMALL = ["cat", "dog", "sun", "tree", "bird", "lemon"]


def test_players_registered():
    assert {"oracle", "anagram", "skipper"} <= set(get_player_ids())
    with pytest.raises(ValueError):
        create_player("telepath")

def test_duplicate_player_id_rejected():
    with pytest.raises(ValueError):
        @register
        class Again(BasePlayer):
            id = "oracle"

def test_oracle_scores_every_word():
    tracker = RoundTracker(load_catalog(), GameSettings(), seed=42)
    r = play_game(create_player("oracle"), tracker, seed=42)
    assert r["score"] == 10 * 20
    assert r["words"] == 10 and r["solved"] == 10 and r["attempts"] == 10
    assert r["exhausted"] is False
    assert len(r["history"]) == 10

def test_skipper_scores_nothing():
    tracker = RoundTracker(SMALL, GameSettings(round_limit=4), seed=1)
    r = play_game(create_player("skipper"), tracker)
    assert r["score"] == 0 and r["words"] == 4 and r["attempts"] == 0

def test_anagram_player_solves_unique_words():
    tracker = RoundTracker(SMALL, GameSettings(round_limit=5), seed=7)
    r = play_game(create_player("anagram"), tracker, seed=7)
    assert r["score"] == 100 and r["solved"] == 5

def test_anagram_player_works_through_anagram_pairs():
    tracker = RoundTracker(["listen", "silent", "enlist"], GameSettings(round_limit=3), seed=5)
    r = play_game(create_player("anagram"), tracker, max_attempts=3, seed=5)
    assert r["solved"] == 3
    assert r["attempts"] >= 3

def test_game_ends_when_catalog_runs_out():
    tracker = RoundTracker(["cat", "dog"], GameSettings(round_limit=5), seed=3)
    r = play_game(create_player("oracle"), tracker)
    assert r["exhausted"] is True
    assert r["score"] == 40 and r["words"] == 2

def test_run_batch_reproducible_and_summary():
    oracle = create_player("oracle")
    settings = GameSettings(round_limit=3)
    a = run_batch(oracle, SMALL, settings, games=4, seed=10)
    b = run_batch(oracle, SMALL, settings, games=4, seed=10)
    assert [r["history"] for r in a] == [r["history"] for r in b]

    s = summarize(a)
    assert s["games"] == 4
    assert s["score_mean"] == 60.0 and s["score_std"] == 0.0
    assert s["solve_rate"] == 1.0 and s["exhausted"] == 0
    assert summarize([]) == {"games": 0}

def test_write_outputs(tmp_path: Path):
    results = run_batch(create_player("skipper"), SMALL, GameSettings(round_limit=2),
                        games=2, seed=1)
    for r in results:
        r["player_id"] = "skipper"
    csv_path = write_csv(results, str(tmp_path / "run.csv"), round_limit=2)
    with open(csv_path, encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["player"] == "skipper" and rows[0]["word_2"]

    m_path = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    assert json.loads(Path(m_path).read_text(encoding="utf-8"))["summary"]["games"] == 2
