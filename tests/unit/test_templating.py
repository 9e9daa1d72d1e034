#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for page template integration."""

import pytest
from markupsafe import Markup

from htmltoc.api import inject_toc
from htmltoc.exceptions import RenderingError
from htmltoc.templating import build_template_context, render_template_file, render_template_string

PAGE = "<p>[toc]</p><h1>Intro</h1><h2>Setup</h2>"


@pytest.fixture
def result():
    """A processed page."""
    return inject_toc(PAGE)


@pytest.mark.unit
class TestBuildTemplateContext:
    """Test build_template_context()."""

    def test_markup_values(self, result):
        """Test the TOC and content are exposed as Markup."""
        context = build_template_context(result)

        assert isinstance(context["toc"], Markup)
        assert isinstance(context["content"], Markup)
        assert str(context["toc"]) == result.toc_html
        assert str(context["content"]) == result.content

    def test_headings(self, result):
        """Test the heading list carries final ids."""
        context = build_template_context(result)
        assert context["headings"] == [
            {"level": 1, "id": "intro", "text": "Intro"},
            {"level": 2, "id": "setup", "text": "Setup"},
        ]

    def test_custom_variable_and_extra(self, result):
        """Test a custom TOC variable name and extra variables."""
        context = build_template_context(result, variable="sidebar", title="Guide")
        assert "sidebar" in context
        assert "toc" not in context
        assert context["title"] == "Guide"

    def test_extra_cannot_shadow_toc(self, result):
        """Test extra values do not replace the TOC markup."""
        context = build_template_context(result, toc="<b>other</b>")
        assert context["toc"] == Markup(result.toc_html)

    def test_no_toc(self):
        """Test the TOC variable is empty markup when no TOC was built."""
        context = build_template_context(inject_toc("<h1>Only</h1>"))
        assert context["toc"] == Markup("")


@pytest.mark.unit
class TestRenderTemplate:
    """Test rendering templates."""

    def test_toc_not_escaped(self, result):
        """Test the pre-rendered TOC is inserted verbatim."""
        html = render_template_string("<aside>{{ toc }}</aside>", build_template_context(result))
        assert '<aside><div id="toc">' in html

    def test_plain_values_escaped(self, result):
        """Test ordinary strings are autoescaped."""
        html = render_template_string("{{ title }}", build_template_context(result, title="<b>Guide</b>"))
        assert html == "&lt;b&gt;Guide&lt;/b&gt;"

    def test_syntax_error(self, result):
        """Test broken templates raise RenderingError."""
        with pytest.raises(RenderingError, match="Failed to render"):
            render_template_string("{% if %}", build_template_context(result))

    def test_file_with_include(self, tmp_path, result):
        """Test template files can include siblings."""
        (tmp_path / "sidebar.html").write_text("<nav>{{ toc }}</nav>", encoding="utf-8")
        layout = tmp_path / "layout.html"
        layout.write_text('{% include "sidebar.html" %}<main>{{ content }}</main>', encoding="utf-8")

        html = render_template_file(layout, build_template_context(result))

        assert html.startswith('<nav><div id="toc">')
        assert '<main><div id="toc">' in html

    def test_missing_file(self, tmp_path, result):
        """Test a missing template raises RenderingError."""
        with pytest.raises(RenderingError, match="not found") as exc_info:
            render_template_file(tmp_path / "missing.html", build_template_context(result))
        assert exc_info.value.template.endswith("missing.html")
