"""Structured documents for scaffolded repositories: package.json and tsconfig.json.

These are built as plain dicts (insertion-ordered) and serialised by
:func:`fhevm_hub.scaffolder.writer.dump_json`.  Dependency pins come from
:class:`fhevm_hub.config.ToolchainVersions`; nothing is resolved.
"""

from __future__ import annotations

from typing import Any

from fhevm_hub.config import HubConfig
from fhevm_hub.registry.models import CategoryConfig, ExampleConfig

MANIFEST_VERSION = "1.0.0"

_BASE_SCRIPTS: dict[str, str] = {
    "compile": "hardhat compile",
    "test": "hardhat test",
    "deploy": "hardhat deploy",
}

_CATEGORY_EXTRA_SCRIPTS: dict[str, str] = {
    "lint": "hardhat check",
    "coverage": "hardhat coverage",
}


def category_package_name(category_name: str) -> str:
    """Return the npm package name of a category repository."""
    return f"fhevm-{category_name}-examples"


def build_example_manifest(config: ExampleConfig, hub: HubConfig) -> dict[str, Any]:
    """Return the ``package.json`` document of a single-example repository."""
    return {
        "name": config.name,
        "version": MANIFEST_VERSION,
        "description": config.description,
        "license": hub.license,
        "scripts": dict(_BASE_SCRIPTS),
        "dependencies": hub.versions.runtime_dependencies(),
        "devDependencies": hub.versions.base_dev_dependencies(),
    }


def build_category_manifest(config: CategoryConfig, hub: HubConfig) -> dict[str, Any]:
    """Return the ``package.json`` document of a category repository.

    The dev-dependency block is the base example set merged with the full
    hardhat/typechain/lint toolchain, sorted by package name.
    """
    dev_dependencies = {
        **hub.versions.base_dev_dependencies(),
        **hub.versions.category_dev_dependencies,
    }
    return {
        "name": category_package_name(config.name),
        "version": MANIFEST_VERSION,
        "description": config.description,
        "license": hub.license,
        "scripts": {**_BASE_SCRIPTS, **_CATEGORY_EXTRA_SCRIPTS},
        "dependencies": hub.versions.runtime_dependencies(),
        "devDependencies": dict(sorted(dev_dependencies.items())),
    }


def build_tsconfig() -> dict[str, Any]:
    """Return the ``tsconfig.json`` document of a category repository."""
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "commonjs",
            "lib": ["ES2020"],
            "outDir": "./dist",
            "rootDir": "./",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "resolveJsonModule": True,
            "declaration": True,
            "declarationMap": True,
            "sourceMap": True,
        },
        "include": ["**/*.ts"],
        "exclude": ["node_modules", "artifacts", "cache", "dist"],
    }
