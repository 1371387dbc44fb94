"""Tests for the Jinja2 TemplateRenderer and its custom filters."""

from __future__ import annotations

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from fhevm_hub.scaffolder.templates import (
    PACKAGE_TEMPLATES,
    TemplateRenderer,
    _bullets_filter,
    _capitalize_first_filter,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


class TestFilters:
    def test_bullets_bold(self):
        assert _bullets_filter(["a", "b"]) == "- **a**\n- **b**"

    def test_bullets_plain(self):
        assert _bullets_filter(["a", "b"], bold=False) == "- a\n- b"

    def test_bullets_empty(self):
        assert _bullets_filter([]) == ""

    def test_capitalize_first(self):
        assert _capitalize_first_filter("beginner") == "Beginner"
        assert _capitalize_first_filter("fHE") == "FHE"
        assert _capitalize_first_filter("") == ""


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


class TestTemplateRenderer:
    @pytest.fixture
    def renderer(self, tmp_path) -> TemplateRenderer:
        (tmp_path / "greet.j2").write_text("{{ x | capitalize_first }}", encoding="utf-8")
        (tmp_path / "raw.j2").write_text("{{ x }}", encoding="utf-8")
        (tmp_path / "list.j2").write_text(
            "{% if items %}\n{{ items | bullets }}\n{% endif %}\nend\n", encoding="utf-8"
        )
        return TemplateRenderer(tmp_path)

    def test_filters_registered(self, renderer):
        assert renderer.render("greet.j2", {"x": "hello"}) == "Hello"

    def test_undefined_variable_raises(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("raw.j2", {})

    def test_no_html_escaping(self, renderer):
        assert renderer.render("raw.j2", {"x": "a < b && c"}) == "a < b && c"

    def test_block_tags_leave_no_blank_lines(self, renderer):
        assert renderer.render("list.j2", {"items": ["a"]}) == "- **a**\nend\n"
        assert renderer.render("list.j2", {"items": []}) == "end\n"

    def test_missing_template(self, renderer):
        with pytest.raises(TemplateNotFound):
            renderer.render("nope.j2", {})

    def test_package_templates(self):
        renderer = TemplateRenderer()
        assert renderer.template_dir == PACKAGE_TEMPLATES
        assert (PACKAGE_TEMPLATES / "docs" / "index.md.j2").is_file()
        page = renderer.render(
            "example/README.md.j2",
            {
                "title": "T",
                "description": "D",
                "concepts": ["c"],
                "difficulty_label": "Beginner",
            },
        )
        assert page.startswith("# T\n\nD\n")
        assert "- **c**" in page
