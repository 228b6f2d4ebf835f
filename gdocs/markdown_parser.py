"""
Markdown front end.

Renders Markdown to HTML with markdown-it-py so Markdown input goes through the
same block extractor and request generator as HTML input.

Example:
    >>> renderer = MarkdownRenderer()
    >>> renderer.render("# Title\n\n**Bold** text")
    '<h1>Title</h1>\\n<p><strong>Bold</strong> text</p>\\n'
"""

from __future__ import annotations

import logging

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from core.errors import ConversionError

logger = logging.getLogger(__name__)


class MarkdownRenderer:
    """
    Markdown to HTML renderer.

    Attributes:
        md: The markdown-it parser instance.
    """

    def __init__(self, breaks: bool = True) -> None:
        """
        Initialize the renderer with CommonMark plus GitHub-style extensions.

        Args:
            breaks: Render single newlines inside a paragraph as ``<br>`` (GFM
                comment style) instead of joining the lines.
        """
        # - table: GFM pipe tables
        # - strikethrough: ~~text~~
        # - tasklists: [ ] and [x] checkboxes, rendered as disabled <input> elements
        self.md = (
            MarkdownIt("commonmark", {"breaks": breaks})
            .enable("table")
            .enable("strikethrough")
            .use(tasklists_plugin)
        )

    def render(self, markdown_text: str) -> str:
        """
        Render Markdown to an HTML string.

        Raises:
            ConversionError: If markdown-it fails on the input.
        """
        if not markdown_text:
            return ""
        try:
            html = self.md.render(markdown_text)
        except Exception as e:
            logger.exception(f"Markdown rendering failed: {e}")
            raise ConversionError(f"Failed to convert Markdown to HTML: {e}", stage="markdown") from e
        logger.debug(f"Rendered {len(markdown_text)} chars of Markdown into {len(html)} chars of HTML")
        return html


def markdown_to_html(markdown_text: str, breaks: bool = True) -> str:
    """Render Markdown to HTML with the default renderer settings."""
    return MarkdownRenderer(breaks=breaks).render(markdown_text)
