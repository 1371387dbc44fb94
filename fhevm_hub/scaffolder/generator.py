"""Main scaffolding orchestrator.

Takes a registry key, resolves it to a config record, and generates a
repository directory: the directory skeleton first, then every rendered file
in a fixed order.  Concrete generators decide which files are rendered.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, NamedTuple, Optional, TypeVar

from fhevm_hub.config import HubConfig
from fhevm_hub.errors import UnknownEntryError
from fhevm_hub.registry.models import ExampleConfig
from fhevm_hub.registry.registry import Registry

from .templates import TemplateRenderer
from .tree import FileTreeBuilder
from .writer import FileWriter, dump_json

C = TypeVar("C", bound=ExampleConfig)

ProgressCallback = Callable[[str], None]


class RenderedFile(NamedTuple):
    """One generated file: where it goes, what it holds, how to announce it."""
    path: str
    content: str
    label: str


@dataclass
class ScaffoldResult:
    """Outcome of a single generation run."""
    name: str
    output_dir: Path
    created_dirs: list[Path] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)


def _no_progress(message: str) -> None:
    return None


# ---------------------------------------------------------------------------
# Base generator
# ---------------------------------------------------------------------------


class ScaffoldGenerator(Generic[C]):
    """Turns a registered config into a populated output directory.

    Subclasses implement :meth:`render_files`.  Rendering happens before any
    file is written, so a template error never leaves a half-written tree;
    filesystem errors during writing do, and are not cleaned up.
    """

    def __init__(
        self,
        registry: Registry[C],
        hub_config: Optional[HubConfig] = None,
        renderer: Optional[TemplateRenderer] = None,
        tree_builder: Optional[FileTreeBuilder] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        self.registry = registry
        self.hub_config = hub_config or HubConfig()
        self.renderer = renderer or TemplateRenderer()
        self.tree_builder = tree_builder or FileTreeBuilder()
        self.progress = progress or _no_progress

    # -- Public API --------------------------------------------------------

    def config_for(self, name: str) -> C:
        """Return the config registered under *name*.

        Raises:
            UnknownEntryError: If *name* is not registered.
        """
        config = self.registry.lookup(name)
        if config is None:
            raise UnknownEntryError(self.registry.kind, name)
        return config

    async def generate(self, name: str, output_dir: str | Path) -> ScaffoldResult:
        """Generate the repository for *name* under *output_dir*.

        Args:
            name: Registry key.  Validated before anything touches disk.
            output_dir: Destination root.  Created if missing; existing files
                with the same names are overwritten.

        Returns:
            A :class:`ScaffoldResult` listing created directories and written
            files in order.
        """
        config = self.config_for(name)
        root = Path(output_dir)
        result = ScaffoldResult(name=name, output_dir=root)

        # 1. Directory skeleton
        if await self.tree_builder.ensure_root(root):
            result.created_dirs.append(root)
            self.progress(f"Created directory: {root}")
        result.created_dirs.extend(await self.tree_builder.ensure(root))
        self.progress("Created project structure")

        # 2. Render everything, then write in order
        context = self.build_context(config)
        files = self.render_files(config, context)

        writer = FileWriter(root)
        for rendered in files:
            await writer.write_text(rendered.path, rendered.content)
            self.progress(f"Created {rendered.label}")

        result.written = list(writer.written)
        return result

    # -- Hooks -------------------------------------------------------------

    def build_context(self, config: C) -> dict[str, Any]:
        """Build the Jinja2 template context from a config record."""
        compiler = self.hub_config.compiler
        return {
            "name": config.name,
            "title": config.title,
            "description": config.description,
            "concepts": list(config.concepts),
            "difficulty": config.difficulty.value,
            "difficulty_label": config.difficulty.label,
            "difficulty_audience": config.difficulty.audience,
            "license": self.hub_config.license,
            "compiler": compiler,
            "include_testnet": self.hub_config.include_testnet,
        }

    def render_files(self, config: C, context: dict[str, Any]) -> list[RenderedFile]:
        raise NotImplementedError

    def next_steps(self, output_dir: str | Path) -> list[str]:
        """Shell commands suggested once generation succeeds."""
        return [
            f"cd {output_dir}",
            "npm install",
            "npm run compile",
            "npm run test",
        ]

    # -- Helpers -----------------------------------------------------------

    def _json_file(self, path: str, data: dict[str, Any]) -> RenderedFile:
        return RenderedFile(path=path, content=dump_json(data), label=path)

    def _template_file(
        self, template: str, path: str, context: dict[str, Any], label: Optional[str] = None
    ) -> RenderedFile:
        content = self.renderer.render(template, context)
        return RenderedFile(path=path, content=content, label=label or path)
