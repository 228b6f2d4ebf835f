"""Unit tests for the Markdown to HTML front end."""

import pytest

from core.errors import ConversionError
from gdocs.markdown_parser import MarkdownRenderer, markdown_to_html


@pytest.fixture
def renderer():
    return MarkdownRenderer()


class TestRender:
    def test_empty_input_returns_empty_string(self, renderer):
        assert renderer.render("") == ""

    def test_heading_and_paragraph(self, renderer):
        assert renderer.render("# Title\n\n**Bold** text") == "<h1>Title</h1>\n<p><strong>Bold</strong> text</p>\n"

    def test_soft_breaks_become_line_breaks(self, renderer):
        assert "<br" in renderer.render("line one\nline two")

    def test_breaks_can_be_disabled(self):
        html = MarkdownRenderer(breaks=False).render("line one\nline two")
        assert "<br" not in html
        assert "line one\nline two" in html

    def test_strikethrough(self, renderer):
        assert "<s>gone</s>" in renderer.render("~~gone~~")

    def test_pipe_table(self, renderer):
        html = renderer.render("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html
        assert "<th>a</th>" in html
        assert "<td>2</td>" in html

    def test_task_list_checkboxes(self, renderer):
        html = renderer.render("- [ ] todo\n- [x] done")
        assert html.count('type="checkbox"') == 2
        assert "checked" in html

    def test_fenced_code(self, renderer):
        assert "<pre><code" in renderer.render("```\nx = 1\n```")

    def test_render_failure_is_wrapped(self, renderer, monkeypatch):
        def explode(text):
            raise RuntimeError("boom")

        monkeypatch.setattr(renderer.md, "render", explode)
        with pytest.raises(ConversionError) as exc_info:
            renderer.render("text")
        assert exc_info.value.stage == "markdown"


class TestMarkdownToHtml:
    def test_module_helper(self):
        assert markdown_to_html("*hi*") == "<p><em>hi</em></p>\n"
