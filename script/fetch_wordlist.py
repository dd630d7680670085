"""
Download a word list and write a clean five-letter list for the solver.

What it does:
- Downloads the given URL.
- Plain-text responses are read line by line; HTML pages are reduced to
  their visible text with BeautifulSoup first.
- Keeps whole tokens of exactly five letters a–z (any case in the source),
  lowercases, de-duplicates while preserving source order.
- Writes one word per line.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out wordlestrat/datasets/data/wordle.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url ... --sort
"""

import argparse
import logging
import re

import requests
from bs4 import BeautifulSoup

from wordlestrat.datasets import DEFAULT_WORDLIST, normalize_words, write_lines

log = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"\b[A-Za-z]{5}\b")


def extract_words(body: str, content_type: str = "text/plain") -> list[str]:
    """
    Pull five-letter tokens out of a response body, in order, deduplicated.
    """
    if "html" in content_type.lower():
        body = BeautifulSoup(body, "html.parser").get_text("\n", strip=True)
    return normalize_words(TOKEN_RE.findall(body))


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = extract_words(r.text, r.headers.get("Content-Type", "text/plain"))
    log.info("Read %d five-letter word(s) from %s", len(words), url)
    return words


def main():
    ap = argparse.ArgumentParser(description="Download and normalize a five-letter word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default=str(DEFAULT_WORDLIST))
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
