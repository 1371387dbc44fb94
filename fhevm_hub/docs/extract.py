"""Marker-based source excerpt extraction for documentation pages."""

from __future__ import annotations

from pathlib import Path

from fhevm_hub.utils import print_warning

FALLBACK_CHARS = 500


def extract_code_section(file_path: str | Path, start_marker: str, end_marker: str) -> str:
    """Return the region of *file_path* between two marker comments.

    The region starts at the first occurrence of *start_marker* and ends after
    the first *end_marker* found from that same position; both markers are
    included.  Identical markers therefore yield just the marker itself.

    Degrades instead of failing:

    * missing file: prints a warning and returns ``""``;
    * either marker absent: returns the first 500 characters followed by
      ``"\\n..."``.
    """
    path = Path(file_path)
    if not path.exists():
        print_warning(f"  File not found: {path}")
        return ""

    content = path.read_text(encoding="utf-8")
    start = content.find(start_marker)
    end = content.find(end_marker, start) if start != -1 else -1

    if start == -1 or end == -1:
        return content[:FALLBACK_CHARS] + "\n..."

    return content[start : end + len(end_marker)]
