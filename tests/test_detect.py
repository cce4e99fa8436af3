from __future__ import annotations

from pathlib import Path

import pytest

from log_splitter.date.detect import choose_pattern, count_matches, detect_file, sample_lines
from log_splitter.date.types import DetectionPolicy


def test_highest_count_wins() -> None:
    lines = [f"2025-01-0{i} iso line" for i in range(1, 6)]
    lines += ["2025/01/01 slash line", "2025/01/02 slash line"]
    lines += ["plain text"] * 5

    det = choose_pattern(lines)
    assert det.pattern is not None
    assert det.name == "iso-8601"
    assert det.hits == 5
    assert det.sampled == 12
    assert det.confident


def test_tie_goes_to_first_registered_pattern() -> None:
    lines = ["2025/01/01 a", "2025/01/02 b", "2025/01/03 c", "2025-01-01 d", "2025-01-02 e", "2025-01-03 f"]
    assert choose_pattern(lines).name == "iso-8601"


def test_line_can_count_for_several_patterns() -> None:
    counts = count_matches(["2025-01-01 then 02/01/2025"])
    assert counts["iso-8601"] == 1
    assert counts["dd/mm/yyyy"] == 1
    assert counts["syslog"] == 0


def test_no_match_means_fallback_only() -> None:
    det = choose_pattern(["hello", "world", "no dates at all"])
    assert det.pattern is None
    assert det.name == "none/fallback"
    assert det.hits == 0


def test_single_hit_in_large_sample_is_still_used() -> None:
    lines = ["noise"] * 20 + ["29-Aug-2025 10:00:00 only one"]
    det = choose_pattern(lines)
    assert det.name == "dd-mon-yyyy"
    assert det.hits == 1
    assert not det.confident


def test_small_sample_is_confident() -> None:
    det = choose_pattern(["2025-01-01 a", "b"])
    assert det.name == "iso-8601"
    assert det.confident


def test_sample_stops_at_line_cap(tmp_path: Path) -> None:
    p = tmp_path / "a.log"
    p.write_text("".join(f"line {i}\n" for i in range(20)), encoding="utf-8")
    lines = sample_lines(p, DetectionPolicy(max_sample_lines=5))
    assert lines == [f"line {i}" for i in range(5)]


def test_sample_stops_at_byte_cap(tmp_path: Path) -> None:
    p = tmp_path / "a.log"
    p.write_text("0123456789\n" * 10, encoding="utf-8")
    lines = sample_lines(p, DetectionPolicy(max_sample_bytes=25))
    assert len(lines) == 3


def test_detect_file(tmp_path: Path) -> None:
    p = tmp_path / "sys.log"
    p.write_text(
        "Aug 29 14:23:45 host a\r\nAug 29 14:23:46 host b\r\nAug 30 00:00:01 host c\r\n",
        encoding="utf-8",
    )
    det = detect_file(p)
    assert det.name == "syslog"
    assert det.hits == 3


def test_detect_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        detect_file(tmp_path / "nope.log")
