from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class DatePattern:
    """One textual date layout recognized inside a log line."""

    name: str
    regex: re.Pattern[str]
    # Canonical YYYY-MM-DD for a match, or None when the parts are not a real date.
    normalize: Callable[[re.Match[str]], str | None]

    def match(self, line: str) -> re.Match[str] | None:
        return self.regex.search(line)

    def extract(self, line: str) -> str | None:
        m = self.match(line)
        if not m:
            return None
        return self.normalize(m)


@dataclass(frozen=True)
class Detection:
    """Outcome of sampling a file: the chosen pattern (or None for fallback-only mode)."""

    pattern: DatePattern | None
    hits: int = 0
    sampled: int = 0
    confident: bool = False

    @property
    def name(self) -> str:
        return self.pattern.name if self.pattern else "none/fallback"


@dataclass(frozen=True)
class DetectionPolicy:
    """Controls how much of a file is sampled and how a pattern is judged.

    - sampling stops at whichever of the line/byte caps is hit first.
    - min_hits / small_sample_lines only decide whether a choice counts as confident.
    """

    max_sample_lines: int = 500
    max_sample_bytes: int = 256 * 1024

    min_hits: int = 3
    small_sample_lines: int = 10
