"""
Download the puzzle word list once and keep a local copy.

What it does:
- Fetches the published word list (or --url).
- Strips carriage returns and writes one word per line.
- Optionally drops blank lines and duplicates (keeping first-seen order).

Usage:
    python -m script.download_wordlist --out data/wordlist.txt
    python -m apps.cli.run --wordlist data/wordlist.txt
"""

import argparse

from phrasehunt.datasets import fetch_wordlist, split_wordlist, write_lines
from phrasehunt.datasets.fetch import URL


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def main():
    ap = argparse.ArgumentParser(description="Download the puzzle word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/wordlist.txt")
    ap.add_argument("--timeout", type=float, default=30.0)
    ap.add_argument("--dedupe", action="store_true", help="drop blank lines and duplicates")
    args = ap.parse_args()

    words = split_wordlist(fetch_wordlist(args.url, timeout=args.timeout))
    if args.dedupe:
        words = unique_preserve_order(w for w in words if w)
    elif words and words[-1] == "":
        words = words[:-1]  # write_lines adds the trailing newline back

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
