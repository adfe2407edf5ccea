# apps/cli/wordlist.py
"""
Edit a persisted feedback list (approved or banned words).

Usage:
    python -m apps.cli.wordlist data/approved.txt add TIGER RABBIT
    python -m apps.cli.wordlist data/banned.txt remove TIGER
    python -m apps.cli.wordlist data/banned.txt list
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from packages.feedback import FeedbackList


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Edit an approved/banned word list file")
    ap.add_argument("path", help="word list file (one word per line; created if missing)")
    ap.add_argument("action", choices=["add", "remove", "list"])
    ap.add_argument("words", nargs="*", help="words to add or remove")
    args = ap.parse_args(argv)

    if args.action != "list" and not args.words:
        ap.error(f"{args.action} needs at least one word")

    lst = FeedbackList.load(Path(args.path).stem, args.path)
    if args.action == "list":
        for w in lst.list():
            print(w)
        return 0

    for w in args.words:
        if args.action == "add":
            lst.add(w)
        else:
            lst.remove(w)
    lst.save(args.path)
    print(f"{args.path}: {len(lst)} words")
    return 0


if __name__ == "__main__":
    sys.exit(main())
