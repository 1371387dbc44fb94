"""Tests for category repository generation.

Covers:
- Full category generation with all eight files
- Manifest naming and merged devDependencies
- README example listing, including keys absent from the example registry
- Extended hardhat config and ignore file
"""

from __future__ import annotations

import json

import pytest

from fhevm_hub.config import HubConfig
from fhevm_hub.errors import UnknownEntryError
from fhevm_hub.registry import CATEGORY_REGISTRY
from fhevm_hub.scaffolder import DEFAULT_SUBDIRS, CategoryGenerator


pytestmark = pytest.mark.unit


CATEGORY_FILES = [
    "package.json",
    "README.md",
    ".gitignore",
    "hardhat.config.ts",
    "tsconfig.json",
    "contracts/SampleEncrypted.sol",
    "test/SampleEncrypted.ts",
    "DEVELOPER_GUIDE.md",
]


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TestCategoryGeneration:
    async def test_trading_category(self, hub_config, output_dir):
        result = await CategoryGenerator(hub_config=hub_config).generate("trading", output_dir)

        assert result.written == [output_dir / name for name in CATEGORY_FILES]
        for subdir in DEFAULT_SUBDIRS:
            assert (output_dir / subdir).is_dir()

        manifest = json.loads((output_dir / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "fhevm-trading-examples"
        assert manifest["scripts"]["lint"] == "hardhat check"
        assert manifest["scripts"]["coverage"] == "hardhat coverage"

    async def test_progress_labels(self, hub_config, output_dir):
        messages: list[str] = []
        generator = CategoryGenerator(hub_config=hub_config, progress=messages.append)
        await generator.generate("basic", output_dir)
        assert messages[2:] == [
            "Created package.json",
            "Created README.md",
            "Created .gitignore",
            "Created hardhat.config.ts",
            "Created tsconfig.json",
            "Created sample contract",
            "Created sample test",
            "Created DEVELOPER_GUIDE.md",
        ]

    async def test_readme_lists_every_example(self, hub_config, output_dir):
        await CategoryGenerator(hub_config=hub_config).generate("basic", output_dir)
        readme = (output_dir / "README.md").read_text(encoding="utf-8")
        for example in CATEGORY_REGISTRY.lookup("basic").examples:
            assert f"- **{example}** - Example repository for {example}" in readme
        assert "basic-examples/" in readme

    async def test_unregistered_example_keys_are_listed_verbatim(
        self, category_registry, hub_config, output_dir
    ):
        generator = CategoryGenerator(category_registry, hub_config)
        await generator.generate("auctions", output_dir)
        readme = (output_dir / "README.md").read_text(encoding="utf-8")
        assert "- **not-in-any-registry**" in readme
        assert "FHE concepts" in readme

    async def test_hardhat_config_is_extended(self, hub_config, output_dir):
        await CategoryGenerator(hub_config=hub_config).generate("access", output_dir)
        text = (output_dir / "hardhat.config.ts").read_text(encoding="utf-8")
        assert 'import "@nomicfoundation/hardhat-toolbox";' in text
        assert 'url: "http://127.0.0.1:8545"' in text
        assert 'sources: "./contracts"' in text

    async def test_gitignore_is_extended(self, hub_config, output_dir):
        await CategoryGenerator(hub_config=hub_config).generate("access", output_dir)
        lines = (output_dir / ".gitignore").read_text(encoding="utf-8").splitlines()
        assert ".idea/" in lines
        assert "*.log" in lines

    async def test_sample_contract_pragma(self, output_dir):
        await CategoryGenerator(hub_config=HubConfig()).generate("operations", output_dir)
        source = (output_dir / "contracts" / "SampleEncrypted.sol").read_text(encoding="utf-8")
        assert source.startswith("// SPDX-License-Identifier: BSD-3-Clause-Clear\n")
        assert "pragma solidity ^0.8.24;" in source

    async def test_tsconfig(self, hub_config, output_dir):
        await CategoryGenerator(hub_config=hub_config).generate("operations", output_dir)
        tsconfig = json.loads((output_dir / "tsconfig.json").read_text(encoding="utf-8"))
        assert tsconfig["compilerOptions"]["strict"] is True
        assert tsconfig["include"] == ["**/*.ts"]

    async def test_unknown_category(self, hub_config, output_dir):
        with pytest.raises(UnknownEntryError, match="Unknown category: nope"):
            await CategoryGenerator(hub_config=hub_config).generate("nope", output_dir)
        assert not output_dir.exists()
