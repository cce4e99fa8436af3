from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import SplitConfig
from .date.detect import count_matches, choose_pattern, sample_lines
from .date.types import DatePattern, Detection
from .humanize import human_file_size
from .splitter import SplitStats, split_file_by_day

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileResult:
    path: Path
    detection: Detection | None = None
    stats: SplitStats | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def iter_input_files(input_dir: Path, suffixes: list[str] | None = None) -> list[Path]:
    """Regular files directly in input_dir, sorted by name. Missing dir -> []."""
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        return []
    want = {s.lower() for s in suffixes} if suffixes else None
    files = []
    for p in sorted(input_dir.iterdir()):
        if not p.is_file():
            continue
        if want is not None and p.suffix.lower() not in want:
            continue
        files.append(p)
    return files


def process_file(path: Path, config: SplitConfig, pattern: DatePattern | None = None) -> FileResult:
    """Detect the date layout of one file (unless forced) and split it into day buckets."""
    if pattern is not None:
        detection = Detection(pattern=pattern, confident=True)
        log.info("Detector: %s (forced)", detection.name)
    else:
        policy = config.detection_policy()
        detection = choose_pattern(sample_lines(path, policy), policy)
        log.info("Detector: %s (%d/%d sampled lines)", detection.name, detection.hits, detection.sampled)

    stats = split_file_by_day(
        path,
        config.output_dir,
        pattern=detection.pattern,
        unknown_bucket=config.unknown_bucket,
        flush_every=config.flush_every,
    )
    return FileResult(path=path, detection=detection, stats=stats)


def process_all(
    config: SplitConfig,
    *,
    suffixes: list[str] | None = None,
    pattern: DatePattern | None = None,
    dry_run: bool = False,
) -> list[FileResult]:
    """Split every input file in turn; one file's failure does not stop the others."""
    files = iter_input_files(config.input_dir, suffixes)
    if not files:
        log.info("No files found in %s", config.input_dir)
        return []

    if not dry_run:
        config.output_dir.mkdir(parents=True, exist_ok=True)

    results: list[FileResult] = []
    for p in files:
        try:
            log.info(">>> Processing: %s (%s)", p, human_file_size(p.stat().st_size))
            if dry_run:
                lines = sample_lines(p, config.detection_policy())
                counts = count_matches(lines)
                for name, c in counts.items():
                    log.info("  %-14s %d", name, c)
                if pattern is not None:
                    detection = Detection(pattern=pattern, confident=True)
                    log.info("Detector: %s (forced)", detection.name)
                else:
                    detection = choose_pattern(lines, config.detection_policy())
                    log.info("Detector: %s", detection.name)
                results.append(FileResult(path=p, detection=detection))
                continue
            results.append(process_file(p, config, pattern=pattern))
        except (OSError, ValueError) as e:
            log.error("Failed to process %s: %s", p, e)
            results.append(FileResult(path=p, error=str(e)))

    failed = sum(1 for r in results if not r.ok)
    log.info("All files processed (%d ok, %d failed).", len(results) - failed, failed)
    return results
