from pathlib import Path

import pytest
from unscramble.datasets import (
    default_catalog_path, load_catalog, validate_catalog, pretty_summary, read_words, write_words,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_bundled_catalog_is_valid():
    words = load_catalog()
    assert len(words) >= 10
    assert "kaleidoscope" in words
    rep = validate_catalog(default_catalog_path(), round_limit=10)
    assert rep["passed"] is True, rep["issues"]

def test_load_catalog_dedupes_and_strips(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["cat", " dog ", "", "cat", "sun"])
    assert load_catalog(p) == ("cat", "dog", "sun")

def test_load_catalog_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "nope.txt")

def test_validate_catalog_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    assert write_words(["cat", "dog", "x-ray"], p) == 3
    rep = validate_catalog(str(p), round_limit=3)
    assert rep["passed"] is True
    assert rep["unique_count"] == 3
    s = pretty_summary(rep)
    assert "catalog=3" in s and s.endswith("OK")

def test_validate_catalog_flags_errors(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["cat", "Cat", "two words", "", "zzz", "cat"])
    rep = validate_catalog(str(p), round_limit=10)
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert rep["unscramblable"] == ["zzz"]
    assert rep["enough_words"] is False
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("scrambled" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)

def test_validate_catalog_missing_file(tmp_path: Path):
    rep = validate_catalog(str(tmp_path / "missing.txt"), round_limit=10)
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])

def test_load_catalog_skips_single_arrangement_words(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["cat", "a", "dog", "zzz"])
    assert load_catalog(p) == ("cat", "dog")

def test_word_file_round_trip_drops_blanks_and_repeats(tmp_path: Path):
    p = tmp_path / "out" / "words.txt"
    assert write_words([" cat", "", "dog ", "cat", "  "], p) == 2
    assert p.read_text(encoding="utf-8") == "cat\ndog\n"
    _write(p, ["cat", "", " dog"])
    assert read_words(p) == ["cat", "dog"]
    assert read_words(p, keep_blanks=True) == ["cat", "", "dog"]
