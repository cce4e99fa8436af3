#!/usr/bin/env python3
"""Find the first occurrence of a string in each log file and save it with context.

--context is the total number of lines saved, including the matching line.

Usage:
  PYTHONPATH=. python3 scripts/search_logs.py --string "Traceback" --context 21
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from log_splitter.pipeline import iter_input_files
from log_splitter.search import search_to_file


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--string", required=True, help="String to search for (case-insensitive)")
    ap.add_argument("--context", type=int, default=1, help="Total lines to save, including the found line")
    ap.add_argument("--input", default="input")
    ap.add_argument("--output", default="output")
    ap.add_argument("--suffix", action="append", default=None, help="Default: .log")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    if not args.string:
        raise SystemExit("Search string cannot be empty.")
    if args.context < 1:
        raise SystemExit("Invalid number of lines. Please provide a positive integer.")

    for p in iter_input_files(Path(args.input), args.suffix or [".log"]):
        out = search_to_file(p, Path(args.output), args.string, context=args.context)
        if out:
            print(f"OK: {p.name} -> {out}")
        else:
            print(f"MISS: {p.name}")


if __name__ == "__main__":
    main()
