from __future__ import annotations

import re

from .types import DatePattern

# Loose ISO-like date anywhere in the line, taken as-is: 2025-08-29 or 2025/08/29
LOOSE_DATE_RE = re.compile(r"(\d{4})([-/])(\d{2})\2(\d{2})", re.ASCII)


def extract_date(line: str, pattern: DatePattern | None) -> str | None:
    """Return the canonical YYYY-MM-DD date of a line, or None.

    The detected pattern gets the first try. If it matches but the parts are not a real
    date the line has no date; the loose fallback only runs when the pattern did not match.
    """
    if pattern is not None:
        m = pattern.match(line)
        if m:
            return pattern.normalize(m)

    loose = LOOSE_DATE_RE.search(line)
    if loose:
        return f"{loose.group(1)}-{loose.group(3)}-{loose.group(4)}"
    return None
