"""HTML front end: parse markup into the ``bs4`` tree the block extractor walks."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from core.errors import ConversionError

logger = logging.getLogger(__name__)

# Pure-Python parser: no native dependency, lenient with unclosed tags
HTML_PARSER = "html.parser"


def parse_html(html: str) -> BeautifulSoup:
    """
    Parse an HTML document or fragment.

    Malformed markup is repaired best-effort by the parser and never rejected.

    Raises:
        ConversionError: If the parser itself fails.
    """
    try:
        soup = BeautifulSoup(html, HTML_PARSER)
    except Exception as e:
        logger.exception(f"HTML parsing failed: {e}")
        raise ConversionError(f"Failed to parse HTML: {e}", stage="html") from e
    return soup
