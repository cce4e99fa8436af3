from __future__ import annotations

from pathlib import Path

DEFAULT_EXT = ".log"


def bucket_file_name(base: str, bucket: str) -> str:
    """Output name for one bucket of an input file: app.log + 2025-08-29 -> app.2025-08-29.log.

    Inputs without an extension (or with only a trailing dot) get .log.
    """
    name = Path(base).name
    if name.endswith("."):
        stem, ext = name[:-1], ""
    else:
        p = Path(name)
        stem, ext = p.stem, p.suffix
    return f"{stem}.{bucket}{ext or DEFAULT_EXT}"


def bucket_path(out_dir: Path, base: str, bucket: str) -> Path:
    """Return the output path of a bucket and require that it stays inside out_dir.

    The bucket file itself may already exist as a symlink; only its directory is checked.
    """
    if not bucket or "/" in bucket or "\\" in bucket or bucket in {".", ".."}:
        raise ValueError(f"Bucket {bucket!r} is not a plain name")
    p = out_dir / bucket_file_name(base, bucket)
    if p.parent.expanduser().resolve() != out_dir.expanduser().resolve():
        raise ValueError(f"Bucket {bucket!r} would write outside {out_dir}: {p}")
    return p
