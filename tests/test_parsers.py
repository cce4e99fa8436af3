from __future__ import annotations

import pytest

from log_splitter.date import parsers
from log_splitter.date.parsers import PATTERNS, get_pattern


def test_registry_order() -> None:
    assert [p.name for p in PATTERNS] == [
        "iso-8601",
        "yyyy/mm/dd",
        "dd/mm/yyyy",
        "dd-mon-yyyy",
        "mon dd, yyyy",
        "syslog",
    ]


@pytest.mark.parametrize(
    "line",
    [
        "2025-08-29 started",
        "2025-08-29 14:23 started",
        "2025-08-29T14:23:45.123Z started",
        "[2025-08-29 14:23:45] INFO started",
    ],
)
def test_iso_ignores_time_component(line: str) -> None:
    assert get_pattern("iso-8601").extract(line) == "2025-08-29"


def test_numeric_layouts() -> None:
    assert get_pattern("yyyy/mm/dd").extract("2025/08/29 14:23:45 GET /") == "2025-08-29"
    assert get_pattern("dd/mm/yyyy").extract("29/08/2025 14:23 GET /") == "2025-08-29"
    assert get_pattern("dd/mm/yyyy").extract("01/02/2025") == "2025-02-01"


def test_month_name_layouts_are_case_insensitive_and_padded() -> None:
    assert get_pattern("dd-mon-yyyy").extract("07-aug-2025 10:00:00 x") == "2025-08-07"
    assert get_pattern("dd-mon-yyyy").extract("07-AUG-2025") == "2025-08-07"
    assert get_pattern("mon dd, yyyy").extract("Sep 3, 2025 09:15:00 ok") == "2025-09-03"
    assert get_pattern("mon dd, yyyy").extract("Sep 3, 2025 09:15 ok") == "2025-09-03"


def test_mon_dd_yyyy_requires_time() -> None:
    assert get_pattern("mon dd, yyyy").match("Sep 3, 2025 release notes") is None


def test_syslog_assumes_current_year(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(parsers, "_current_year", lambda: 2031)
    assert get_pattern("syslog").extract("Aug  9 14:23:45 host sshd[1]: ok") == "2031-08-09"


@pytest.mark.parametrize(
    "name,line",
    [
        ("dd-mon-yyyy", "29-Xxx-2025 boom"),
        ("mon dd, yyyy", "Xyz 29, 2025 10:00:00 boom"),
        ("syslog", "Foo 29 10:00:00 boom"),
    ],
)
def test_unknown_month_is_no_date(name: str, line: str) -> None:
    p = get_pattern(name)
    assert p.match(line) is not None
    assert p.extract(line) is None


def test_impossible_calendar_date_is_no_date() -> None:
    assert get_pattern("iso-8601").extract("2025-02-30 x") is None
    assert get_pattern("dd/mm/yyyy").extract("31/13/2025 x") is None


def test_no_match_is_no_date() -> None:
    assert get_pattern("iso-8601").extract("nothing to see") is None


def test_get_pattern_unknown_name() -> None:
    with pytest.raises(KeyError):
        get_pattern("rfc-2822")


@pytest.mark.parametrize(
    "name,line",
    [
        ("iso-8601", "٢٠٢٥-٠١-٠١ x"),
        ("yyyy/mm/dd", "２０２５/０１/０１ x"),
        ("dd/mm/yyyy", "٠١/٠٢/٢٠٢٥ x"),
        ("syslog", "Aug ２９ １４:２３:４５ host"),
    ],
)
def test_only_ascii_digits_match(name: str, line: str) -> None:
    assert get_pattern(name).match(line) is None
