from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


def count_lines(path: Path) -> int:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return sum(1 for _ in f)


def extract_window(src: Path, dst: Path, *, max_lines: int, skip: int = 0, reverse: bool = False) -> int:
    """Copy max_lines lines of src to dst after skipping skip lines.

    With reverse=True the skip is counted from the end of the file (needs a counting pass);
    lines are still written in file order. Returns the number of lines written.
    """
    if max_lines <= 0:
        raise ValueError(f"max_lines must be a positive integer, got {max_lines}")
    if skip < 0:
        raise ValueError(f"skip must be a non-negative integer, got {skip}")

    if reverse:
        total = count_lines(src)
        start = max(0, total - skip - max_lines)
    else:
        start = skip

    written = 0
    with open(src, "r", encoding="utf-8", errors="replace") as fin, open(dst, "w", encoding="utf-8", newline="\n") as fout:
        for i, raw in enumerate(fin):
            if i < start:
                continue
            if written >= max_lines:
                break
            fout.write(raw.rstrip("\r\n") + "\n")
            written += 1

    log.info("Read %d lines from %s", written, Path(src).name)
    return written
