"""
Download a word list page and write a clean catalog file.

What it does:
- Downloads the page (plain text or HTML).
- Extracts visible text and keeps lowercase-able tokens made of letters,
  optionally joined by hyphens ("x-ray").
- Drops words with a single arrangement ("a", "zzz") since they can't be
  scrambled, filters by length, de-duplicates while preserving page order.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.html \
        --out unscramble/datasets/data/words.txt --min-len 3 --max-len 12
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from unscramble.datasets import write_words
from unscramble.engine import can_scramble

TOKEN_RE = re.compile(r"\b[A-Za-z]+(?:-[A-Za-z]+)*\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, *, min_len: int = 3, max_len: int = 12) -> list[str]:
    words = [m.group(0).lower() for m in TOKEN_RE.finditer(text)]
    words = [w for w in words if min_len <= len(w) <= max_len and can_scramble(w)]
    return unique_preserve_order(words)


def fetch_words(url: str, *, min_len: int = 3, max_len: int = 12) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")
    text = soup.get_text("\n", strip=True)
    return extract_words(text, min_len=min_len, max_len=max_len)


def main():
    ap = argparse.ArgumentParser(description="Build a word catalog from a web page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="unscramble/datasets/data/words.txt")
    ap.add_argument("--min-len", type=int, default=3)
    ap.add_argument("--max-len", type=int, default=12)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        words = sorted(words)

    n = write_words(words, args.out)
    print(f"Wrote {n} unique words -> {args.out}")

if __name__ == "__main__":
    main()
