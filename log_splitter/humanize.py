from __future__ import annotations

_SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]
_TIME_UNITS = [("h", 3600), ("m", 60), ("s", 1)]


def human_file_size(n_bytes: int | float) -> str:
    size = float(n_bytes)
    i = 0
    while size >= 1024 and i < len(_SIZE_UNITS) - 1:
        size /= 1024
        i += 1
    return f"{size:.1f} {_SIZE_UNITS[i]}"


def seconds_to_human(seconds: float) -> str:
    """350ms, 42s, 1m 30s, 1h 2m 3s."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"

    parts: list[str] = []
    remaining = seconds
    for name, value in _TIME_UNITS:
        count = int(remaining // value)
        if count > 0:
            parts.append(f"{count}{name}")
            remaining %= value
    return " ".join(parts)


def format_number(n: int | float) -> str:
    return f"{n:,}"
