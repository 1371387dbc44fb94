"""Shared pytest fixtures for the FHEVM hub test suite.

Provides reusable fixtures for:
- Temporary output directories
- Small injectable registries for examples, categories and docs topics
- A default ``HubConfig`` isolated from the caller's environment
- A docs source tree with contract/test files on disk
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from fhevm_hub.config import HubConfig
from fhevm_hub.registry.models import (
    CategoryConfig,
    ConceptSection,
    Difficulty,
    DocTopicConfig,
    ExampleConfig,
    FunctionDoc,
)
from fhevm_hub.registry.registry import Registry


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

_HUB_ENV_VARS = (
    "FHEVM_HUB_CONFIG",
    "FHEVM_HUB_DOCS_DIR",
    "FHEVM_HUB_DOCS_SOURCE_ROOT",
    "FHEVM_HUB_INCLUDE_TESTNET",
    "FHEVM_HUB_SOLIDITY_VERSION",
    "FHEVM_HUB_OPTIMIZER_RUNS",
    "FHEVM_HUB_FHEVM_SOLIDITY_VERSION",
    "FHEVM_HUB_HARDHAT_PLUGIN_VERSION",
)


@pytest.fixture(autouse=True)
def _clean_hub_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep FHEVM_HUB_* variables from the developer's shell out of tests."""
    for name in _HUB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Not-yet-existing output root for a generated repository."""
    return tmp_path / "out" / "generated"


@pytest.fixture
def hub_config(tmp_path: Path) -> HubConfig:
    """Default config whose docs paths point inside tmp_path."""
    return HubConfig(
        docs_dir=tmp_path / "docs-out",
        docs_source_root=tmp_path / "source",
    )


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

@pytest.fixture
def example_config() -> ExampleConfig:
    return ExampleConfig(
        name="sealed-bid",
        title="Sealed Bid Auction",
        description="Bids stay encrypted until the auction closes",
        concepts=("Encrypted bids", "FHE.gt", "FHE.select"),
        difficulty=Difficulty.ADVANCED,
    )


@pytest.fixture
def example_registry(example_config: ExampleConfig) -> Registry[ExampleConfig]:
    return Registry(
        "example",
        {
            "sealed-bid": example_config,
            "tiny": ExampleConfig(
                name="tiny",
                title="Tiny",
                description="Smallest possible example",
            ),
        },
    )


@pytest.fixture
def category_registry() -> Registry[CategoryConfig]:
    return Registry(
        "category",
        {
            "auctions": CategoryConfig(
                name="auctions",
                title="Auction Examples",
                description="Encrypted auction mechanisms",
                examples=("sealed-bid", "not-in-any-registry"),
                concepts=("Encrypted bids", "Winner selection"),
                difficulty=Difficulty.INTERMEDIATE,
            ),
        },
    )


@pytest.fixture
def doc_topic() -> DocTopicConfig:
    return DocTopicConfig(
        name="vault",
        title="Encrypted Vault",
        description="Deposits and withdrawals on encrypted balances",
        contract_file="contracts/Vault.sol",
        test_file="test/Vault.ts",
        chapter="vaults",
        concept_sections=(
            ConceptSection(heading="Encrypted Balances", points=("Balances are euint64",)),
        ),
        key_functions=(
            FunctionDoc(
                name="deposit",
                summary="Adds an encrypted amount to the caller's balance.",
                signature="function deposit(externalEuint64 amount, bytes calldata proof) external",
            ),
        ),
        topics=("Encrypted balances", "Withdrawals"),
        snippet_start="// BEGIN deposit",
        snippet_end="// END deposit",
    )


@pytest.fixture
def doc_registry(doc_topic: DocTopicConfig) -> Registry[DocTopicConfig]:
    return Registry(
        "documentation topic",
        {
            "vault": doc_topic,
            "ledger": DocTopicConfig(
                name="ledger",
                title="Private Ledger",
                description="An append-only ledger of encrypted entries",
                contract_file="contracts/Ledger.sol",
                test_file="test/Ledger.ts",
                chapter="ledgers",
            ),
        },
    )


@pytest.fixture
def vault_sources(hub_config: HubConfig) -> Path:
    """Write the vault contract and test under the docs source root."""
    root = Path(hub_config.docs_source_root)
    (root / "contracts").mkdir(parents=True)
    (root / "test").mkdir(parents=True)
    (root / "contracts" / "Vault.sol").write_text(
        textwrap.dedent("""\
            pragma solidity ^0.8.24;

            contract Vault {
                // BEGIN deposit
                function deposit(externalEuint64 amount, bytes calldata proof) external {
                    euint64 value = FHE.fromExternal(amount, proof);
                }
                // END deposit

                function withdraw() external {}
            }
        """),
        encoding="utf-8",
    )
    (root / "test" / "Vault.ts").write_text("describe('Vault', () => {});\n", encoding="utf-8")
    return root
