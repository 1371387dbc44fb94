"""GitBook-style markdown documentation generation.

Renders one page per documentation topic plus a ``README.md`` index linking
every page in registry order.  The contract and test files a topic names are
only checked for existence (to warn); when the contract exists and the topic
declares snippet markers, the marked region is embedded as a source excerpt.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from fhevm_hub.config import HubConfig
from fhevm_hub.errors import UnknownEntryError
from fhevm_hub.registry.catalog import DOC_REGISTRY
from fhevm_hub.registry.models import DocTopicConfig
from fhevm_hub.registry.registry import Registry
from fhevm_hub.scaffolder.generator import ProgressCallback
from fhevm_hub.scaffolder.templates import TemplateRenderer
from fhevm_hub.scaffolder.writer import FileWriter
from fhevm_hub.utils import ensure_dir, print_warning

from .extract import extract_code_section

INDEX_FILENAME = "README.md"

DOC_SECTIONS: tuple[str, ...] = (
    "Overview",
    "Key Concepts",
    "Smart Contract Reference",
    "Test Suite Documentation",
    "FHEVM Patterns",
    "Getting Started Guide",
    "Use Cases",
    "Common Errors and Solutions",
    "Learning Resources",
)


@dataclass
class DocsBatchResult:
    """Pages written by :meth:`DocsGenerator.generate_all`, in registry order."""
    pages: list[Path] = field(default_factory=list)
    index: Optional[Path] = None


class DocsGenerator:
    """Generates markdown documentation pages from the docs registry."""

    def __init__(
        self,
        registry: Registry[DocTopicConfig] = DOC_REGISTRY,
        hub_config: Optional[HubConfig] = None,
        renderer: Optional[TemplateRenderer] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        self.registry = registry
        self.hub_config = hub_config or HubConfig()
        self.renderer = renderer or TemplateRenderer()
        self.progress = progress or (lambda message: None)

    # -- Public API --------------------------------------------------------

    def config_for(self, name: str) -> DocTopicConfig:
        """Return the topic registered under *name*.

        Raises:
            UnknownEntryError: If *name* is not registered.
        """
        topic = self.registry.lookup(name)
        if topic is None:
            raise UnknownEntryError(self.registry.kind, name)
        return topic

    def output_dir(self, output_dir: str | Path | None = None) -> Path:
        """Resolve the docs directory, defaulting to ``HubConfig.docs_dir``."""
        return Path(output_dir) if output_dir is not None else Path(self.hub_config.docs_dir)

    async def generate(self, name: str, output_dir: str | Path | None = None) -> Path:
        """Render the page for *name* to ``<output_dir>/<name>.md``.

        Returns:
            Path of the written page.
        """
        topic = self.config_for(name)
        out_dir = self.output_dir(output_dir)
        await asyncio.to_thread(ensure_dir, out_dir)

        content = self.render_page(topic)
        writer = FileWriter(out_dir)
        path = await writer.write_text(f"{topic.name}.md", content)
        self.progress(f"Documentation generated: {path}")
        return path

    async def generate_all(self, output_dir: str | Path | None = None) -> DocsBatchResult:
        """Render every registered topic, then the index.

        Topics are processed sequentially in registry order.  The first
        failure propagates and aborts the batch; pages already written stay.
        """
        out_dir = self.output_dir(output_dir)
        result = DocsBatchResult()
        for name in self.registry.keys():
            result.pages.append(await self.generate(name, out_dir))

        writer = FileWriter(out_dir)
        result.index = await writer.write_text(INDEX_FILENAME, self.render_index())
        self.progress(f"Summary created: {result.index}")
        return result

    # -- Rendering ---------------------------------------------------------

    def render_page(self, topic: DocTopicConfig) -> str:
        """Return the markdown for one topic page."""
        contract_path = self._source_path(topic.contract_file)
        test_path = self._source_path(topic.test_file)
        for path in (contract_path, test_path):
            if not path.exists():
                print_warning(f"  Source file not found: {path}")

        excerpt: Optional[str] = None
        if topic.has_snippet_markers and contract_path.exists():
            excerpt = extract_code_section(
                contract_path, topic.snippet_start or "", topic.snippet_end or ""
            ) or None

        return self.renderer.render(
            "docs/topic.md.j2", {"topic": topic, "excerpt": excerpt}
        )

    def render_index(self) -> str:
        """Return the markdown for the index page linking every topic."""
        return self.renderer.render("docs/index.md.j2", {"topics": self.registry.values()})

    # -- Helpers -----------------------------------------------------------

    def _source_path(self, relative: str) -> Path:
        return Path(self.hub_config.docs_source_root) / relative
