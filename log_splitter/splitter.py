"""Route the lines of one log file into per-day output files."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .date.extract import extract_date
from .date.types import DatePattern
from .humanize import format_number, seconds_to_human
from .paths import bucket_path

log = logging.getLogger(__name__)

FLUSH_EVERY = 200_000


class DayWriterSet:
    """Append-mode output handles for one input file, keyed by bucket.

    Handles are opened the first time a bucket is seen and closed together by close()
    (or on leaving the with-block, error or not).
    """

    def __init__(self, out_dir: Path, base: str) -> None:
        self.out_dir = Path(out_dir)
        self.base = base
        self.paths: dict[str, Path] = {}
        self._handles: dict[str, TextIO] = {}

    def __enter__(self) -> "DayWriterSet":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return
        # keep the body's exception; a close failure is only reported
        try:
            self.close()
        except OSError as e:
            log.error("closing buckets after an earlier error also failed: %s", e)

    @property
    def open_buckets(self) -> list[str]:
        return list(self._handles)

    def writer(self, bucket: str) -> TextIO:
        fh = self._handles.get(bucket)
        if fh is None:
            p = bucket_path(self.out_dir, self.base, bucket)
            fh = open(p, "a", encoding="utf-8", newline="\n")
            self._handles[bucket] = fh
            self.paths[bucket] = p
            log.debug("opened bucket %s -> %s", bucket, p)
        return fh

    def write(self, bucket: str, line: str) -> None:
        self.writer(bucket).write(line + "\n")

    def flush(self) -> None:
        for fh in self._handles.values():
            fh.flush()

    def close(self) -> None:
        """Close every open handle once; re-raise the first close failure afterwards."""
        first_err: OSError | None = None
        while self._handles:
            bucket, fh = self._handles.popitem()
            try:
                fh.close()
            except OSError as e:
                log.error("failed to close bucket %s (%s): %s", bucket, self.paths.get(bucket), e)
                if first_err is None:
                    first_err = e
        if first_err is not None:
            raise first_err


@dataclass
class RoutingState:
    """Carry-forward of the last extracted day for lines without a date."""

    unknown_bucket: str = "unknown"
    last_known_day: str | None = None

    def route(self, day: str | None) -> str:
        if day is not None:
            self.last_known_day = day
            return day
        return self.last_known_day or self.unknown_bucket


@dataclass
class SplitStats:
    source: Path
    lines: int = 0
    buckets: dict[str, int] = field(default_factory=dict)
    paths: dict[str, Path] = field(default_factory=dict)
    elapsed_s: float = 0.0


def split_file_by_day(
    path: Path,
    out_dir: Path,
    *,
    pattern: DatePattern | None,
    unknown_bucket: str = "unknown",
    flush_every: int = FLUSH_EVERY,
) -> SplitStats:
    """Append every line of path to <out_dir>/<stem>.<day><ext>.

    Lines without a date follow the last dated line, or go to unknown_bucket before the
    first one. Errors opening the input or any bucket file propagate; buckets written so
    far stay on disk.
    """
    path = Path(path)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    stats = SplitStats(source=path)
    state = RoutingState(unknown_bucket=unknown_bucket)
    t0 = time.time()

    with open(path, "r", encoding="utf-8", errors="replace") as f, DayWriterSet(out_dir, path.name) as writers:
        for raw in f:
            line = raw.rstrip("\r\n")
            bucket = state.route(extract_date(line, pattern))
            writers.write(bucket, line)
            stats.buckets[bucket] = stats.buckets.get(bucket, 0) + 1
            stats.lines += 1

            if stats.lines % flush_every == 0:
                writers.flush()
                log.info(
                    "%s: %s lines, %d open buckets",
                    path.name,
                    format_number(stats.lines),
                    len(writers.open_buckets),
                )
        stats.paths = dict(writers.paths)

    stats.elapsed_s = time.time() - t0
    log.info(
        "%s: %s lines into %d buckets (%s)",
        path.name,
        format_number(stats.lines),
        len(stats.buckets),
        seconds_to_human(stats.elapsed_s),
    )
    return stats
