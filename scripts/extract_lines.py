#!/usr/bin/env python3
"""Copy a window of lines from every log file in a directory.

Usage:
  PYTHONPATH=. python3 scripts/extract_lines.py -l 1000 --skip 500
  PYTHONPATH=. python3 scripts/extract_lines.py -l 1000 --reverse   # last 1000 lines
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from log_splitter.pipeline import iter_input_files
from log_splitter.window import extract_window


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("-l", "--lines", type=int, required=True, help="Number of lines to extract from each file")
    ap.add_argument("-s", "--skip", type=int, default=0, help="Lines to skip from the start (or end with --reverse)")
    ap.add_argument("-r", "--reverse", action="store_true", help="Count the window from the end of the file")
    ap.add_argument("--input", default="input")
    ap.add_argument("--output", default="output")
    ap.add_argument("--suffix", action="append", default=None, help="Default: .log")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    if args.lines <= 0:
        raise SystemExit("Invalid number of lines. Please provide a positive integer.")
    if args.skip < 0:
        raise SystemExit("Invalid number of lines to skip. Please provide a non-negative integer.")

    out_dir = Path(args.output)
    out_dir.mkdir(parents=True, exist_ok=True)

    for p in iter_input_files(Path(args.input), args.suffix or [".log"]):
        n = extract_window(p, out_dir / p.name, max_lines=args.lines, skip=args.skip, reverse=args.reverse)
        print(f"OK: wrote {out_dir / p.name} ({n} lines)")


if __name__ == "__main__":
    main()
