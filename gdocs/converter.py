"""
HTML / Markdown to Google Docs request converter.

Entry point tying the front ends to the compiler core::

    HTML  --parse_html-->  bs4 tree  --extract_blocks-->  Blocks
          --RequestGenerator-->  Requests  --to_api-->  batchUpdate dicts

Markdown is rendered to HTML first.

Example:
    >>> converter = HtmlToDocsConverter()
    >>> converter.convert_html("<p>Hello <b>World</b></p>")
    [{'insertText': {'location': {'index': 1}, 'text': 'Hello World\\n'}}, ...]
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import ConversionError, DocsCompilerError, ValidationError
from core.utils import validate_document_id, validate_markup_input
from gdocs.block_extractor import extract_blocks
from gdocs.config import ConverterConfig
from gdocs.doc_requests import Request, requests_to_api
from gdocs.html_parser import parse_html
from gdocs.markdown_parser import MarkdownRenderer
from gdocs.models import Block
from gdocs.request_generator import RequestGenerator

logger = logging.getLogger(__name__)


class HtmlToDocsConverter:
    """
    Converts HTML or Markdown into Google Docs API batchUpdate requests.

    Each conversion builds a fresh extractor and generator, so one converter
    can be reused for any number of documents.

    Attributes:
        config: Style overrides applied to every conversion.
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config or ConverterConfig()
        self._markdown = MarkdownRenderer()

    def compile_html(self, html: str, start_index: int = 1) -> list[Request]:
        """
        Compile HTML into typed requests.

        Args:
            html: HTML document or fragment. Whitespace-only input yields no requests.
            start_index: Document index of the first insertion (1 = start of body).

        Raises:
            ValidationError: If ``html`` is not a non-empty string or the index is invalid.
            ConversionError: If parsing fails.
        """
        validate_markup_input(html, "HTML")
        return self._compile(html, start_index)

    def compile_markdown(self, markdown_text: str, start_index: int = 1) -> list[Request]:
        """Compile Markdown into typed requests; see :meth:`compile_html`."""
        validate_markup_input(markdown_text, "Markdown")
        html = self._markdown.render(markdown_text)
        return self._compile(html, start_index)

    def convert_html(self, html: str, start_index: int = 1) -> list[dict[str, Any]]:
        """
        Convert HTML into batchUpdate request dicts.

        Returns:
            list[dict]: Requests in emission order, ready for
            ``documents().batchUpdate(body={"requests": ...})``.
        """
        return requests_to_api(self.compile_html(html, start_index))

    def convert_markdown(self, markdown_text: str, start_index: int = 1) -> list[dict[str, Any]]:
        """Convert Markdown into batchUpdate request dicts."""
        return requests_to_api(self.compile_markdown(markdown_text, start_index))

    def extract_html_blocks(self, html: str) -> list[Block]:
        """Parse HTML and return the intermediate Block sequence."""
        validate_markup_input(html, "HTML")
        return extract_blocks(parse_html(html))

    def _compile(self, html: str, start_index: int) -> list[Request]:
        soup = parse_html(html)
        try:
            blocks = extract_blocks(soup)
            requests = RequestGenerator(self.config).generate(blocks, start_index=start_index)
        except DocsCompilerError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected failure compiling {len(html)} chars of HTML: {e}")
            raise ConversionError(f"Failed to convert HTML to document requests: {e}", stage="compile") from e
        logger.info(f"Compiled {len(blocks)} blocks into {len(requests)} requests at index {start_index}")
        return requests

    def update_config(self, **changes: Any) -> None:
        """
        Update configuration options in place.

        Style options are merged into the current overrides; other options
        are replaced.

        Raises:
            ValueError: For unknown option names or mistyped style values.
        """
        self.config = self.config.with_updates(**changes)

    def get_config(self) -> ConverterConfig:
        """Return the current configuration (an immutable snapshot)."""
        return self.config

    def reset_config(self) -> None:
        """Restore the default configuration."""
        self.config = ConverterConfig()

    @staticmethod
    def create_batch_update_request(document_id: str, requests: list[dict[str, Any]]) -> dict[str, Any]:
        """
        Build the body of a ``documents.batchUpdate`` call.

        Raises:
            ValidationError: If the document ID is empty or requests is not a list.
        """
        validate_document_id(document_id)
        if not isinstance(requests, list):
            raise ValidationError("requests must be a list")
        return {"requests": requests}
