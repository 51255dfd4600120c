"""
Word catalog loading and validation.

What this module does:
- Load the catalog (one word per line; bundled data/words.txt by default).
- Validate a catalog file: formatting (lowercase letters, optionally joined
  by hyphens, e.g. "x-ray"), duplicates, words that cannot be scrambled,
  and whether there are enough words to fill a game.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from unscramble.datasets import validate_catalog, pretty_summary
    rep = validate_catalog("unscramble/datasets/data/words.txt", round_limit=10)
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple

from ..engine.scramble import can_scramble
from .io import read_words

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"^[a-z]+(?:-[a-z]+)*$")


def default_catalog_path() -> Path:
    """Path of the word list shipped with the package."""
    return Path(__file__).parent / "data" / "words.txt"


def load_catalog(path: Path | str | None = None) -> Tuple[str, ...]:
    """
    Read a catalog file: dedupe keeping the first occurrence and drop words
    that cannot be scrambled (logged as a warning). Raises FileNotFoundError
    if the file is missing.
    """
    p = Path(path) if path is not None else default_catalog_path()
    unique = list(dict.fromkeys(read_words(p)))
    words = [w for w in unique if can_scramble(w)]
    if len(words) != len(unique):
        skipped = [w for w in unique if not can_scramble(w)]
        logger.warning("Skipping %d word(s) with a single arrangement: %s",
                       len(skipped), skipped[:5])
    logger.info("Loaded %d words from %s", len(words), p)
    return tuple(words)


# -----------------------------
# Structured report
# -----------------------------

@dataclass
class CatalogReport:
    path: str
    exists: bool
    lines: int            # raw lines in the file
    count: int            # valid words (before dedupe)
    unique_count: int     # valid words after dedupe
    invalid_lines: int    # blank or badly formatted lines
    unscramblable: List[str] = field(default_factory=list)
    sha256: str = ""
    round_limit: int = 0
    enough_words: bool = False
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_catalog(path: Path | str, round_limit: int) -> Dict:
    """
    Validate a catalog file for games of `round_limit` words.

    Returns a JSON-serializable dict (see CatalogReport). `passed` is strict:
    no invalid lines, no duplicates, every word scramblable, and at least
    `round_limit` unique words.
    """
    p = Path(path)
    if not p.exists():
        rep = CatalogReport(path=str(p), exists=False, lines=0, count=0, unique_count=0,
                            invalid_lines=0, round_limit=round_limit,
                            issues=[f"catalog file not found: {path}"])
        return asdict(rep)

    raw = read_words(p, keep_blanks=True)
    valid: List[str] = []
    invalid = 0
    for w in raw:
        if w and WORD_RE.match(w):
            valid.append(w)
        else:
            invalid += 1

    unique = list(dict.fromkeys(valid))
    unscramblable = [w for w in unique if not can_scramble(w)]
    enough = len(unique) >= round_limit

    issues: List[str] = []
    if not valid:
        issues.append("catalog contains 0 valid words")
    if invalid:
        issues.append(f"catalog has {invalid} invalid line(s)")
    if len(unique) != len(valid):
        issues.append("catalog contains duplicate lines")
    if unscramblable:
        issues.append(f"catalog has words that cannot be scrambled (e.g., {unscramblable[:5]})")
    if not enough:
        issues.append(f"catalog has {len(unique)} unique word(s), fewer than "
                      f"round_limit={round_limit}")

    rep = CatalogReport(
        path=str(p),
        exists=True,
        lines=len(raw),
        count=len(valid),
        unique_count=len(unique),
        invalid_lines=invalid,
        unscramblable=unscramblable,
        sha256=_sha256_file(p),
        round_limit=round_limit,
        enough_words=enough,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        catalog=180 (uniq=180, sha=abc123...) | rounds=10 | enough=True | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"catalog={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| rounds={report['round_limit']} | enough={report['enough_words']} | {status}"
    )
