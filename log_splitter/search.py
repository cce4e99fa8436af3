from __future__ import annotations

import logging
import re
from collections import deque
from pathlib import Path

log = logging.getLogger(__name__)


def search_output_name(file_name: str, needle: str, context: int) -> str:
    p = Path(file_name)
    safe = re.sub(r"[^a-zA-Z0-9]", "_", needle)
    return f"{p.stem}_search-{safe}_lines-{context}{p.suffix or '.log'}"


def search_context(src: Path, needle: str, *, context: int = 1) -> list[str] | None:
    """Return the first case-insensitive hit of needle with surrounding lines.

    context is the total block size: (context - 1) // 2 lines before the hit, the rest
    after it (fewer at the edges of the file). None when the needle never occurs.
    """
    if not needle:
        raise ValueError("Search string cannot be empty.")
    if context < 1:
        raise ValueError(f"context must be a positive integer, got {context}")

    before = (context - 1) // 2
    after = context - 1 - before
    want = needle.lower()

    pre: deque[str] = deque(maxlen=before or None)
    block: list[str] | None = None
    taken_after = 0
    with open(src, "r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            line = raw.rstrip("\r\n")
            if block is None:
                if want in line.lower():
                    block = [*pre, line] if before else [line]
                    if after == 0:
                        break
                elif before:
                    pre.append(line)
                continue
            block.append(line)
            taken_after += 1
            if taken_after >= after:
                break
    return block


def search_to_file(src: Path, out_dir: Path, needle: str, *, context: int = 1) -> Path | None:
    """Write the context block of the first hit to out_dir; None when not found."""
    src = Path(src)
    block = search_context(src, needle, context=context)
    if block is None:
        log.warning('String "%s" not found in %s', needle, src.name)
        return None

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out = out_dir / search_output_name(src.name, needle, context)
    out.write_text("".join(ln + "\n" for ln in block), encoding="utf-8")
    log.info("Extracted %d lines containing the found string in %s", len(block), src.name)
    return out
