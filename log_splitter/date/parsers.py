from __future__ import annotations

import re
from datetime import date

from .types import DatePattern

MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Optional trailing time shared by the numeric layouts: " 14:23" / "T14:23:45"
# ASCII digits only; bucket keys must stay canonical.
_TIME = r"(?:[ T](\d{2}):(\d{2})(?::(\d{2}))?)?"

ISO_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})" + _TIME, re.ASCII)
YMD_SLASH_RE = re.compile(r"(\d{4})/(\d{2})/(\d{2})" + _TIME, re.ASCII)
DMY_SLASH_RE = re.compile(r"(\d{2})/(\d{2})/(\d{4})" + _TIME, re.ASCII)
DD_MON_YYYY_RE = re.compile(r"(\d{2})-([A-Za-z]{3})-(\d{4})" + _TIME, re.ASCII)
MON_DD_YYYY_RE = re.compile(r"([A-Za-z]{3})\s+(\d{1,2}),\s+(\d{4})\s+(\d{2}):(\d{2})(?::(\d{2}))?", re.ASCII)
SYSLOG_RE = re.compile(r"\b([A-Za-z]{3})\s+(\d{1,2})\s+(\d{2}):(\d{2}):(\d{2})\b", re.ASCII)


def _month_token_to_int(tok: str) -> int | None:
    return MONTHS.get(tok.strip().lower())


def _current_year() -> int:
    return date.today().year


def _to_iso(year: str | int, month: str | int | None, day: str | int) -> str | None:
    if month is None:
        return None
    try:
        d = date(int(year), int(month), int(day))
    except ValueError:
        return None
    return d.isoformat()


def _norm_ymd(m: re.Match[str]) -> str | None:
    return _to_iso(m.group(1), m.group(2), m.group(3))


def _norm_dmy(m: re.Match[str]) -> str | None:
    return _to_iso(m.group(3), m.group(2), m.group(1))


def _norm_dd_mon_yyyy(m: re.Match[str]) -> str | None:
    return _to_iso(m.group(3), _month_token_to_int(m.group(2)), m.group(1))


def _norm_mon_dd_yyyy(m: re.Match[str]) -> str | None:
    return _to_iso(m.group(3), _month_token_to_int(m.group(1)), m.group(2))


def _norm_syslog(m: re.Match[str]) -> str | None:
    # syslog omits the year; assume the one we are in
    return _to_iso(_current_year(), _month_token_to_int(m.group(1)), m.group(2))


PATTERNS: tuple[DatePattern, ...] = (
    DatePattern("iso-8601", ISO_RE, _norm_ymd),
    DatePattern("yyyy/mm/dd", YMD_SLASH_RE, _norm_ymd),
    DatePattern("dd/mm/yyyy", DMY_SLASH_RE, _norm_dmy),
    DatePattern("dd-mon-yyyy", DD_MON_YYYY_RE, _norm_dd_mon_yyyy),
    DatePattern("mon dd, yyyy", MON_DD_YYYY_RE, _norm_mon_dd_yyyy),
    DatePattern("syslog", SYSLOG_RE, _norm_syslog),
)


def get_pattern(name: str) -> DatePattern:
    """Look up a registered pattern by name (case-insensitive)."""
    key = (name or "").strip().lower()
    for p in PATTERNS:
        if p.name == key:
            return p
    known = ", ".join(p.name for p in PATTERNS)
    raise KeyError(f"Unknown date pattern: {name!r} (known: {known})")
