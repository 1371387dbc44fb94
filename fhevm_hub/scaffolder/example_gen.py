"""Single-example repository generation.

Produces ``package.json``, ``README.md``, ``.gitignore`` and
``hardhat.config.ts`` plus the empty ``contracts/``, ``test/``, ``deploy/``
and ``scripts/`` directories.
"""

from __future__ import annotations

from typing import Any, Optional

from fhevm_hub.config import HubConfig
from fhevm_hub.registry.catalog import EXAMPLE_REGISTRY
from fhevm_hub.registry.models import ExampleConfig
from fhevm_hub.registry.registry import Registry

from .generator import ProgressCallback, RenderedFile, ScaffoldGenerator
from .manifest import build_example_manifest
from .templates import TemplateRenderer
from .tree import FileTreeBuilder


class ExampleGenerator(ScaffoldGenerator[ExampleConfig]):
    """Generates a standalone repository for one FHEVM example."""

    def __init__(
        self,
        registry: Registry[ExampleConfig] = EXAMPLE_REGISTRY,
        hub_config: Optional[HubConfig] = None,
        renderer: Optional[TemplateRenderer] = None,
        tree_builder: Optional[FileTreeBuilder] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        super().__init__(registry, hub_config, renderer, tree_builder, progress)

    def build_context(self, config: ExampleConfig) -> dict[str, Any]:
        return {
            **super().build_context(config),
            "with_toolbox": False,
            "with_localhost": False,
            "with_paths": False,
            "extended_ignores": False,
        }

    def render_files(
        self, config: ExampleConfig, context: dict[str, Any]
    ) -> list[RenderedFile]:
        return [
            self._json_file("package.json", build_example_manifest(config, self.hub_config)),
            self._template_file("example/README.md.j2", "README.md", context),
            self._template_file("common/gitignore.j2", ".gitignore", context),
            self._template_file("common/hardhat.config.ts.j2", "hardhat.config.ts", context),
        ]
