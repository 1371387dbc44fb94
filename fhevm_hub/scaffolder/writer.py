"""Persists rendered content at deterministic paths under an output root."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any


class FileWriter:
    """Writes generated files, unconditionally overwriting existing ones.

    There is no backup and no atomic rename.  Every written path is appended
    to :attr:`written` in write order so callers can report progress.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        self.written: list[Path] = []

    async def write_text(self, relative_path: str | Path, content: str) -> Path:
        """Create or truncate ``root / relative_path`` and write *content*."""
        out = self.root / relative_path
        await asyncio.to_thread(_write_file, out, content)
        self.written.append(out)
        return out


def dump_json(data: dict[str, Any]) -> str:
    """Return *data* as pretty-printed JSON with a trailing newline.

    Key order is preserved so output is byte-identical across runs.
    """
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
