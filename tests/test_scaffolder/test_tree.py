"""Tests for FileTreeBuilder directory skeleton creation."""

from __future__ import annotations

import pytest

from fhevm_hub.scaffolder.tree import DEFAULT_SUBDIRS, FileTreeBuilder


pytestmark = pytest.mark.unit


class TestFileTreeBuilder:
    def test_default_subdirs(self):
        assert DEFAULT_SUBDIRS == ("contracts", "test", "deploy", "scripts")

    async def test_creates_all_subdirs(self, tmp_path):
        created = await FileTreeBuilder().ensure(tmp_path)
        assert created == [tmp_path / name for name in DEFAULT_SUBDIRS]
        for name in DEFAULT_SUBDIRS:
            assert (tmp_path / name).is_dir()

    async def test_idempotent(self, tmp_path):
        builder = FileTreeBuilder()
        await builder.ensure(tmp_path)
        assert await builder.ensure(tmp_path) == []

    async def test_existing_contents_untouched(self, tmp_path):
        (tmp_path / "test").mkdir()
        existing = tmp_path / "test" / "Keep.ts"
        existing.write_text("keep", encoding="utf-8")

        created = await FileTreeBuilder().ensure(tmp_path)

        assert tmp_path / "test" not in created
        assert existing.read_text(encoding="utf-8") == "keep"

    async def test_ensure_root(self, tmp_path):
        builder = FileTreeBuilder()
        root = tmp_path / "a" / "b"
        assert await builder.ensure_root(root) is True
        assert await builder.ensure_root(root) is False

    async def test_file_collision_raises(self, tmp_path):
        (tmp_path / "deploy").write_text("not a dir", encoding="utf-8")
        with pytest.raises(OSError):
            await FileTreeBuilder().ensure(tmp_path)

    async def test_custom_subdirs(self, tmp_path):
        created = await FileTreeBuilder(["src", "lib"]).ensure(tmp_path)
        assert created == [tmp_path / "src", tmp_path / "lib"]
