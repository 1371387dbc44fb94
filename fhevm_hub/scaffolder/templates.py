"""Jinja2 rendering for generated repositories and documentation pages.

Every text artifact the hub emits (README, hardhat config, ignore file,
sample contract, docs page) is a ``.j2`` file under
``fhevm_hub/scaffolder/templates/``.  Rendering only produces strings; the
generators hand them to :class:`fhevm_hub.scaffolder.writer.FileWriter`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

PACKAGE_TEMPLATES = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def _bullets_filter(items: Iterable[str], bold: bool = True) -> str:
    """Render items as a markdown bullet list, one per line."""
    fmt = "- **{}**" if bold else "- {}"
    return "\n".join(fmt.format(item) for item in items)


def _capitalize_first_filter(value: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


FILTERS: dict[str, Callable[..., str]] = {
    "bullets": _bullets_filter,
    "capitalize_first": _capitalize_first_filter,
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Loads ``.j2`` templates from one directory and renders them.

    Output is plain text (no HTML escaping), block tags do not leave blank
    lines behind, and a missing context variable raises
    :class:`jinja2.UndefinedError` instead of rendering as ``""``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir is not None else PACKAGE_TEMPLATES
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(FILTERS)

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* (e.g. ``"example/README.md.j2"``) with *context*."""
        return self.env.get_template(template_path).render(context)

