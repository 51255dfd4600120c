"""
Word-file I/O: one word per line, UTF-8.

read_words() hands back stripped entries; blank lines are dropped unless the
caller wants to count them (the validator does). write_words() is the inverse
and never writes blanks or the same word twice.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_words(p: Path | str, *, keep_blanks: bool = False) -> List[str]:
    """
    Read a word file into a list of stripped entries, in file order.
    With keep_blanks=True, blank lines stay in the list as "".
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    words = [ln.strip() for ln in p.read_text(encoding="utf-8").splitlines()]
    return words if keep_blanks else [w for w in words if w]


def write_words(words: Iterable[str], p: Path | str) -> int:
    """
    Write words one per line (stripped, blanks and repeats dropped, first
    occurrence kept). Returns the number of words written.
    """
    out = list(dict.fromkeys(w.strip() for w in words if w.strip()))
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(out) + "\n", encoding="utf-8")
    return len(out)
