#!/usr/bin/env python3
"""Split every log file in an input directory into one file per day.

For each input file:
- Sample the head of the file and pick the date layout that occurs most often.
- Stream the file and append each line to <output>/<stem>.<YYYY-MM-DD><ext>.
- Lines without a date follow the previous dated line; before the first one they go to
  <stem>.<unknown-bucket><ext>.

Output files are appended to, so re-running against the same output directory accumulates.

Settings default to LOG_SPLITTER_* environment variables (a .env file is honored);
flags override them.

Usage:
  PYTHONPATH=. python3 scripts/split_by_day.py --input ./input --output ./output
  PYTHONPATH=. python3 scripts/split_by_day.py --dry-run -v
"""

from __future__ import annotations

import argparse
import logging

from log_splitter.config import SplitConfig
from log_splitter.date.parsers import PATTERNS, get_pattern
from log_splitter.pipeline import process_all


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", default=None, help="Directory with input files (default: input)")
    ap.add_argument("--output", default=None, help="Directory for per-day files (default: output)")
    ap.add_argument("--max-sample-lines", type=int, default=None)
    ap.add_argument("--unknown-bucket", default=None, help="Bucket for lines before the first date")
    ap.add_argument("--suffix", action="append", default=None, help="Only process files with this suffix (repeatable)")
    ap.add_argument(
        "--pattern",
        choices=[p.name for p in PATTERNS],
        default=None,
        help="Skip detection and use this date layout",
    )
    ap.add_argument("--dry-run", action="store_true", help="Only report detection results")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = SplitConfig.from_env(
            input_dir=args.input,
            output_dir=args.output,
            max_sample_lines=args.max_sample_lines,
            unknown_bucket=args.unknown_bucket,
        )
    except ValueError as e:
        raise SystemExit(str(e))

    config.input_dir.mkdir(parents=True, exist_ok=True)
    pattern = get_pattern(args.pattern) if args.pattern else None

    results = process_all(config, suffixes=args.suffix, pattern=pattern, dry_run=args.dry_run)
    failed = [r for r in results if not r.ok]
    if failed:
        raise SystemExit(f"{len(failed)} file(s) failed: " + ", ".join(r.path.name for r in failed))


if __name__ == "__main__":
    main()
