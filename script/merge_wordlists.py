"""
Merge several word lists into one dictionary file.

Features:
- Case-insensitive union: every word is upper-cased (the solver's dictionary
  policy), so 'tiger' in one list and 'TIGER' in another collapse to one entry.
- Drops blank lines and anything that isn't purely alphabetic.
- Sorted output (alphabetical), one word per line.

Usage:
    python -m script.merge_wordlists --in enable_dict.txt --in sowpods.txt \
        --out packages/datasets/data/merged.txt
"""

import argparse
from pathlib import Path

from packages.datasets import normalize_words, read_lines, write_lines


def main():
    ap = argparse.ArgumentParser(description="Merge word lists (upper-cased union).")
    ap.add_argument("--in", dest="inputs", action="append", required=True,
                    help="input .txt file (repeatable)")
    ap.add_argument("--out", dest="out", required=True, help="output file")
    args = ap.parse_args()

    merged = set()
    total = 0
    for inp in args.inputs:
        lines = read_lines(Path(inp))
        total += len(lines)
        merged |= normalize_words(lines)

    write_lines(sorted(merged), args.out)
    print(f"Input: {len(args.inputs)} file(s) ({total} lines) -> Output: {args.out} "
          f"({len(merged)} unique)")


if __name__ == "__main__":
    main()
