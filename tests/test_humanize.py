from __future__ import annotations

from log_splitter.humanize import format_number, human_file_size, seconds_to_human


def test_human_file_size() -> None:
    assert human_file_size(0) == "0.0 B"
    assert human_file_size(1536) == "1.5 KB"
    assert human_file_size(5 * 1024**3) == "5.0 GB"


def test_seconds_to_human() -> None:
    assert seconds_to_human(0.35) == "350ms"
    assert seconds_to_human(42) == "42s"
    assert seconds_to_human(90) == "1m 30s"
    assert seconds_to_human(3723) == "1h 2m 3s"


def test_format_number() -> None:
    assert format_number(1234567) == "1,234,567"
