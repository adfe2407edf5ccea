"""
Download a word list (plain text, one word per line) and store it locally.

What it does:
- Downloads the file over HTTP(S).
- Upper-cases, drops non-alphabetic lines, de-duplicates.
- Writes the cleaned list, sorted, so the solver can load it offline.

Usage:
    python -m script.fetch_wordlist --url <URL> --out packages/datasets/data/enable_dict.txt
"""

import argparse

from packages.datasets import fetch_lines, normalize_words, write_lines


def main():
    ap = argparse.ArgumentParser(description="Download and clean a word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", required=True)
    ap.add_argument("--timeout", type=float, default=30.0)
    args = ap.parse_args()

    lines = fetch_lines(args.url, timeout=args.timeout)
    words = sorted(normalize_words(lines))
    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
