"""Directory skeleton creation for scaffolded repositories."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from fhevm_hub.utils import ensure_dir

# contract sources, tests, deployment scripts, utility scripts
DEFAULT_SUBDIRS: tuple[str, ...] = ("contracts", "test", "deploy", "scripts")


class FileTreeBuilder:
    """Ensures a fixed set of subdirectories exists under an output root.

    Creation is idempotent: existing directories and their contents are left
    alone.  Failures (permission denied, a file occupying a directory name)
    propagate as ``OSError``.
    """

    def __init__(self, subdirs: Sequence[str] = DEFAULT_SUBDIRS) -> None:
        self.subdirs = tuple(subdirs)

    async def ensure_root(self, root: str | Path) -> bool:
        """Create *root* itself.  Returns ``True`` if it did not exist."""
        return await asyncio.to_thread(ensure_dir, Path(root))

    async def ensure(self, root: str | Path) -> list[Path]:
        """Create every configured subdirectory under *root*.

        Directories are created one at a time, in order.

        Returns:
            The subdirectories that were actually created by this call.
        """
        base = Path(root)
        created: list[Path] = []
        for name in self.subdirs:
            path = base / name
            if await asyncio.to_thread(ensure_dir, path):
                created.append(path)
        return created
