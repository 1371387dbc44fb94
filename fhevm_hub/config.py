"""FHEVM hub configuration.

Centralised, typed configuration for the generators.  Version pins and
compiler settings are supplied here instead of being fetched from any package
index, so every generated manifest is reproducible.  All settings use Pydantic
v2 models so they can be validated at construction time and serialised to/from
JSON, YAML or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


def _default_category_dev_dependencies() -> dict[str, str]:
    return {
        "@nomicfoundation/hardhat-chai-matchers": "^2.1.0",
        "@nomicfoundation/hardhat-ethers": "^3.1.0",
        "@nomicfoundation/hardhat-network-helpers": "^1.1.0",
        "@nomicfoundation/hardhat-verify": "^2.1.0",
        "@typechain/ethers-v6": "^0.5.1",
        "@typechain/hardhat": "^9.1.0",
        "@types/chai": "^4.3.20",
        "@types/mocha": "^10.0.10",
        "@types/node": "^20.19.8",
        "@typescript-eslint/eslint-plugin": "^8.37.0",
        "@typescript-eslint/parser": "^8.37.0",
        "@zama-fhe/relayer-sdk": "^0.3.0-5",
        "chai": "^4.5.0",
        "chai-as-promised": "^8.0.1",
        "cross-env": "^7.0.3",
        "eslint": "^8.57.1",
        "eslint-config-prettier": "^9.1.0",
        "ethers": "^6.15.0",
        "hardhat-deploy": "^0.11.45",
        "hardhat-gas-reporter": "^2.3.0",
        "mocha": "^11.7.1",
        "prettier": "^3.6.2",
        "prettier-plugin-solidity": "^2.1.0",
        "rimraf": "^6.0.1",
        "solhint": "^6.0.0",
        "solidity-coverage": "^0.8.16",
        "ts-generator": "^0.1.1",
        "ts-node": "^10.9.2",
        "typechain": "^8.3.2",
    }


class ToolchainVersions(BaseModel):
    """Dependency pins written into generated ``package.json`` files.

    These are literal semver ranges.  Nothing resolves or validates them.
    """

    fhevm_solidity: str = Field(default="^0.9.1")
    encrypted_types: str = Field(default="^0.0.4")
    fhevm_hardhat_plugin: str = Field(default="^0.3.0-1")
    hardhat: str = Field(default="^2.26.0")
    typescript: str = Field(default="^5.8.3")
    category_dev_dependencies: dict[str, str] = Field(
        default_factory=_default_category_dev_dependencies,
        description="Extra devDependencies for category repositories",
    )

    def runtime_dependencies(self) -> dict[str, str]:
        """Return the ``dependencies`` block shared by every manifest."""
        return {
            "encrypted-types": self.encrypted_types,
            "@fhevm/solidity": self.fhevm_solidity,
        }

    def base_dev_dependencies(self) -> dict[str, str]:
        """Return the minimal ``devDependencies`` block of an example manifest."""
        return {
            "@fhevm/hardhat-plugin": self.fhevm_hardhat_plugin,
            "hardhat": self.hardhat,
            "typescript": self.typescript,
        }


class CompilerConfig(BaseModel):
    """Solidity compiler and network settings for generated hardhat configs."""

    solidity_version: str = Field(default="0.8.24")
    optimizer_enabled: bool = Field(default=True)
    optimizer_runs: int = Field(default=800, ge=1)
    chain_id: int = Field(default=1337, ge=1)
    localhost_url: str = Field(default="http://127.0.0.1:8545")
    sepolia_chain_id: int = Field(default=11155111, ge=1)


class HubConfig(BaseModel):
    """Global hub configuration.

    Instances are typically created once by the CLI entry point and then
    passed to every generator.
    """

    docs_dir: Path = Field(default=Path("examples"), description="Default docs output directory")
    docs_source_root: Path = Field(
        default=Path("."),
        description="Directory that contract_file/test_file paths are relative to",
    )
    include_testnet: bool = Field(
        default=False, description="Add a sepolia network to generated hardhat configs"
    )
    license: str = Field(default="BSD-3-Clause-Clear")
    versions: ToolchainVersions = Field(default_factory=ToolchainVersions)
    compiler: CompilerConfig = Field(default_factory=CompilerConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "HubConfig":
        """Load a configuration from a JSON or YAML file.

        The format is chosen by extension: ``.yaml``/``.yml`` are parsed with
        PyYAML, anything else as JSON.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the content does not validate.
        """
        file_path = Path(path)
        raw = file_path.read_text(encoding="utf-8")
        if file_path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(raw) or {}
            return cls.model_validate(data)
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "HubConfig":
        """Build a ``HubConfig`` from environment variables.

        Recognised variables (all optional):
            FHEVM_HUB_DOCS_DIR, FHEVM_HUB_DOCS_SOURCE_ROOT,
            FHEVM_HUB_INCLUDE_TESTNET, FHEVM_HUB_SOLIDITY_VERSION,
            FHEVM_HUB_OPTIMIZER_RUNS, FHEVM_HUB_FHEVM_SOLIDITY_VERSION,
            FHEVM_HUB_HARDHAT_PLUGIN_VERSION.
        """
        compiler_kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_HUB_SOLIDITY_VERSION"):
            compiler_kwargs["solidity_version"] = os.environ["FHEVM_HUB_SOLIDITY_VERSION"]
        if os.environ.get("FHEVM_HUB_OPTIMIZER_RUNS"):
            compiler_kwargs["optimizer_runs"] = int(os.environ["FHEVM_HUB_OPTIMIZER_RUNS"])

        version_kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_HUB_FHEVM_SOLIDITY_VERSION"):
            version_kwargs["fhevm_solidity"] = os.environ["FHEVM_HUB_FHEVM_SOLIDITY_VERSION"]
        if os.environ.get("FHEVM_HUB_HARDHAT_PLUGIN_VERSION"):
            version_kwargs["fhevm_hardhat_plugin"] = os.environ["FHEVM_HUB_HARDHAT_PLUGIN_VERSION"]

        include_testnet = os.environ.get("FHEVM_HUB_INCLUDE_TESTNET", "").strip().lower() in (
            "1",
            "true",
            "yes",
            "on",
        )

        return cls(
            docs_dir=Path(os.environ.get("FHEVM_HUB_DOCS_DIR", "examples")),
            docs_source_root=Path(os.environ.get("FHEVM_HUB_DOCS_SOURCE_ROOT", ".")),
            include_testnet=include_testnet,
            versions=ToolchainVersions(**version_kwargs),
            compiler=CompilerConfig(**compiler_kwargs),
        )

    @classmethod
    def resolve(cls) -> "HubConfig":
        """Return the config named by ``FHEVM_HUB_CONFIG``, else :meth:`from_env`."""
        config_file = os.environ.get("FHEVM_HUB_CONFIG")
        if config_file:
            return cls.load(Path(config_file))
        return cls.from_env()
