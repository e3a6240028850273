"""
Build an advisor dictionary from any word list.

Features:
- Keeps only 5-letter a-z words, lowercased.
- Preserves original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Writes to --out (default: words.txt).

Usage:
    python -m script.make_wordlist --in /usr/share/dict/words --out words.txt --sort
"""

import argparse
from pathlib import Path

from advisor.datasets.io import read_lines, write_lines
from advisor.engine.validation import is_word


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def main():
    ap = argparse.ArgumentParser(description="Filter a word list down to five-letter words.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file, one word per line")
    ap.add_argument("--out", dest="out", default="words.txt", help="output file")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    lines = read_lines(inp)
    words = [s.strip().lower() for s in lines]
    words = [w for w in words if is_word(w)]

    out = unique_preserve_order(words)
    if args.sort:
        out = sorted(out)

    write_lines(out, args.out)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {args.out} ({len(out)} words)")


if __name__ == "__main__":
    main()
