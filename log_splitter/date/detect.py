from __future__ import annotations

import logging
from pathlib import Path

from .parsers import PATTERNS
from .types import DatePattern, Detection, DetectionPolicy

log = logging.getLogger(__name__)

DEFAULT_POLICY = DetectionPolicy()


def sample_lines(path: Path, policy: DetectionPolicy = DEFAULT_POLICY) -> list[str]:
    """Read the head of a file for detection.

    Stops at max_sample_lines or once the sampled lines add up to max_sample_bytes,
    whichever comes first. Open/read errors propagate.
    """
    lines: list[str] = []
    size = 0
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            line = raw.rstrip("\r\n")
            lines.append(line)
            size += len(line.encode("utf-8"))
            if len(lines) >= policy.max_sample_lines or size >= policy.max_sample_bytes:
                break
    return lines


def count_matches(lines: list[str], patterns: tuple[DatePattern, ...] = PATTERNS) -> dict[str, int]:
    """Number of lines each pattern occurs in (a line may count for several)."""
    counts = {p.name: 0 for p in patterns}
    for line in lines:
        for p in patterns:
            if p.match(line):
                counts[p.name] += 1
    return counts


def choose_pattern(
    lines: list[str],
    policy: DetectionPolicy = DEFAULT_POLICY,
    patterns: tuple[DatePattern, ...] = PATTERNS,
) -> Detection:
    """Pick the pattern that occurs in the most sampled lines.

    Ties go to the earlier registered pattern. A pattern is confident with >= min_hits
    lines or when the sample itself is tiny; a best pattern with fewer hits is still
    used (only zero hits means fallback-only mode).
    """

    counts = count_matches(lines, patterns)

    best: DatePattern | None = None
    best_count = 0
    for p in patterns:
        c = counts[p.name]
        if c > best_count:
            best = p
            best_count = c

    if best is None:
        return Detection(pattern=None, hits=0, sampled=len(lines), confident=False)

    confident = best_count >= policy.min_hits or len(lines) <= policy.small_sample_lines
    if not confident:
        # The confidence gate does not reject: any hit wins over fallback-only mode.
        log.warning(
            "low-confidence date pattern %r: matched %d of %d sampled lines",
            best.name,
            best_count,
            len(lines),
        )
    return Detection(pattern=best, hits=best_count, sampled=len(lines), confident=confident)


def detect_file(path: Path, policy: DetectionPolicy = DEFAULT_POLICY) -> Detection:
    return choose_pattern(sample_lines(path, policy), policy)
