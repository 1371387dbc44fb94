"""Category repository generation.

A category repository bundles several related examples.  On top of the
single-example files it gets a TypeScript project config, a sample encrypted
contract with its test, and a developer guide.
"""

from __future__ import annotations

from typing import Any, Optional

from fhevm_hub.config import HubConfig
from fhevm_hub.registry.catalog import CATEGORY_REGISTRY
from fhevm_hub.registry.models import CategoryConfig
from fhevm_hub.registry.registry import Registry

from .generator import ProgressCallback, RenderedFile, ScaffoldGenerator
from .manifest import build_category_manifest, build_tsconfig
from .templates import TemplateRenderer
from .tree import FileTreeBuilder


class CategoryGenerator(ScaffoldGenerator[CategoryConfig]):
    """Generates a multi-example repository for one FHEVM category."""

    def __init__(
        self,
        registry: Registry[CategoryConfig] = CATEGORY_REGISTRY,
        hub_config: Optional[HubConfig] = None,
        renderer: Optional[TemplateRenderer] = None,
        tree_builder: Optional[FileTreeBuilder] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        super().__init__(registry, hub_config, renderer, tree_builder, progress)

    def build_context(self, config: CategoryConfig) -> dict[str, Any]:
        # Example keys are interpolated as-is; they are not looked up.
        return {
            **super().build_context(config),
            "examples": list(config.examples),
            "with_toolbox": True,
            "with_localhost": True,
            "with_paths": True,
            "extended_ignores": True,
        }

    def render_files(
        self, config: CategoryConfig, context: dict[str, Any]
    ) -> list[RenderedFile]:
        return [
            self._json_file("package.json", build_category_manifest(config, self.hub_config)),
            self._template_file("category/README.md.j2", "README.md", context),
            self._template_file("common/gitignore.j2", ".gitignore", context),
            self._template_file("common/hardhat.config.ts.j2", "hardhat.config.ts", context),
            self._json_file("tsconfig.json", build_tsconfig()),
            self._template_file(
                "category/SampleEncrypted.sol.j2",
                "contracts/SampleEncrypted.sol",
                context,
                label="sample contract",
            ),
            self._template_file(
                "category/SampleEncrypted.ts.j2",
                "test/SampleEncrypted.ts",
                context,
                label="sample test",
            ),
            self._template_file("category/DEVELOPER_GUIDE.md.j2", "DEVELOPER_GUIDE.md", context),
        ]
