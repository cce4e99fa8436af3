from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

from .date.types import DetectionPolicy

ENV_PREFIX = "LOG_SPLITTER_"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return default
    try:
        return int(raw.replace("_", ""))
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class SplitConfig:
    """Invocation parameters for the day splitter."""

    input_dir: Path = Path("input")
    output_dir: Path = Path("output")
    max_sample_lines: int = 500
    max_sample_bytes: int = 256 * 1024
    unknown_bucket: str = "unknown"

    # Flush every open bucket after this many lines.
    flush_every: int = 200_000

    def __post_init__(self) -> None:
        for field in ("max_sample_lines", "max_sample_bytes", "flush_every"):
            if int(getattr(self, field)) <= 0:
                raise ValueError(f"{field} must be a positive integer, got {getattr(self, field)!r}")
        bucket = self.unknown_bucket
        if not bucket or not bucket.strip():
            raise ValueError("unknown_bucket must not be empty")
        if "/" in bucket or "\\" in bucket or bucket in {".", ".."}:
            raise ValueError(f"unknown_bucket must be a plain name, got {bucket!r}")

    @classmethod
    def from_env(cls, **overrides) -> "SplitConfig":
        """Build a config from LOG_SPLITTER_* variables (and .env); non-None overrides win."""
        load_dotenv()
        base = cls(
            input_dir=Path(os.environ.get(ENV_PREFIX + "INPUT_DIR", "").strip() or "input"),
            output_dir=Path(os.environ.get(ENV_PREFIX + "OUTPUT_DIR", "").strip() or "output"),
            max_sample_lines=_env_int("MAX_SAMPLE_LINES", 500),
            max_sample_bytes=_env_int("MAX_SAMPLE_BYTES", 256 * 1024),
            unknown_bucket=os.environ.get(ENV_PREFIX + "UNKNOWN_BUCKET", "").strip() or "unknown",
            flush_every=_env_int("FLUSH_EVERY", 200_000),
        )
        given = {k: v for k, v in overrides.items() if v is not None}
        for k in ("input_dir", "output_dir"):
            if k in given:
                given[k] = Path(given[k])
        return replace(base, **given) if given else base

    def detection_policy(self) -> DetectionPolicy:
        return DetectionPolicy(
            max_sample_lines=int(self.max_sample_lines),
            max_sample_bytes=int(self.max_sample_bytes),
        )
