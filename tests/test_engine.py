import random

import pytest
from unscramble.datasets import load_catalog
from unscramble.engine import (
    GameSettings, MAX_NO_OF_WORDS, SCORE_INCREASE,
    scramble_word, can_scramble, is_correct, normalize_input,
)
from unscramble.errors import ScrambleImpossible


# --- scrambling ---
@pytest.mark.parametrize("word", ["cat", "dog", "ab", "yoyo", "x-ray", "kaleidoscope", "Aa"])
def test_scramble_is_a_different_permutation(word):
    rng = random.Random(0)
    for _ in range(25):
        s = scramble_word(word, rng)
        assert s != word
        assert sorted(s) == sorted(word)

def test_scramble_every_bundled_word():
    rng = random.Random(42)
    for w in load_catalog():
        assert scramble_word(w, rng) != w

@pytest.mark.parametrize("word", ["", "a", "zzz", "ZZ"])
def test_scramble_single_arrangement_raises(word):
    assert can_scramble(word) is False
    with pytest.raises(ScrambleImpossible):
        scramble_word(word, random.Random(1))

def test_scramble_impossible_is_a_value_error():
    with pytest.raises(ValueError):
        scramble_word("q")

def test_scramble_is_reproducible_with_seed():
    a = [scramble_word("elephant", random.Random(9)) for _ in range(3)]
    b = [scramble_word("elephant", random.Random(9)) for _ in range(3)]
    assert a == b


# --- guess checking ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("cat", "cat", True),
    ("CAT", "cat", False),
    ("cat ", "cat", False),
    ("", "cat", False),
    (None, "cat", False),
    (123, "cat", False),
])
def test_is_correct(guess, answer, expected):
    assert is_correct(guess, answer) is expected

def test_normalize_input():
    assert normalize_input("  cat\n") == "cat"
    assert normalize_input(None) == ""


# --- settings ---
def test_default_settings_match_classic_rules():
    s = GameSettings()
    assert s.round_limit == MAX_NO_OF_WORDS == 10
    assert s.score_increase == SCORE_INCREASE == 20

@pytest.mark.parametrize("kwargs", [{"round_limit": 0}, {"score_increase": 0},
                                    {"round_limit": -3}])
def test_settings_reject_bad_values(kwargs):
    with pytest.raises(ValueError):
        GameSettings(**kwargs)

def test_settings_from_env():
    s = GameSettings.from_env({"UNSCRAMBLE_ROUND_LIMIT": "5", "UNSCRAMBLE_SCORE_INCREASE": "3"})
    assert s == GameSettings(round_limit=5, score_increase=3)
    assert GameSettings.from_env({}) == GameSettings()

def test_settings_from_env_rejects_garbage():
    with pytest.raises(ValueError):
        GameSettings.from_env({"UNSCRAMBLE_ROUND_LIMIT": "ten"})

def test_settings_with_overrides():
    base = GameSettings(round_limit=5, score_increase=3)
    assert base.with_overrides() == base
    assert base.with_overrides(round_limit=2) == GameSettings(round_limit=2, score_increase=3)
    assert base.with_overrides(score_increase=9).round_limit == 5
    with pytest.raises(ValueError):
        base.with_overrides(round_limit=0)
