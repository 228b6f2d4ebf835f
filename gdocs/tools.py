"""
Google Docs compiler MCP tools.

Conversion tools return the generated batchUpdate requests as JSON so a client
can inspect or submit them itself; insertion tools compile and submit in one
call using the server's service-account credentials.
"""

import json
import logging

from core.config import get_config
from core.errors import DocsCompilerError, format_error
from core.server import get_docs_service, server
from gdocs.config import ConverterConfig
from gdocs.converter import HtmlToDocsConverter
from gdocs.writing import insert_html, insert_markdown

logger = logging.getLogger(__name__)


def _converter_config() -> ConverterConfig:
    return ConverterConfig(list_indent_pt=get_config().list_indent_pt)


@server.tool()
async def convert_html_to_requests(html: str, start_index: int = 1) -> str:
    """
    Converts HTML into Google Docs batchUpdate requests without touching any document.

    Args:
        html: HTML document or fragment
        start_index: Document index where the content would be inserted (1 = start of body)

    Returns:
        str: JSON array of batchUpdate requests, or an error message
    """
    logger.info(f"[convert_html_to_requests] html_length={len(html)}, start_index={start_index}")
    try:
        requests = HtmlToDocsConverter(_converter_config()).convert_html(html, start_index=start_index)
    except DocsCompilerError as e:
        return f"Error: {format_error('convert_html_to_requests', e)}"
    return json.dumps(requests, indent=2)


@server.tool()
async def convert_markdown_to_requests(markdown_text: str, start_index: int = 1) -> str:
    """
    Converts Markdown into Google Docs batchUpdate requests without touching any document.

    Args:
        markdown_text: Markdown content (CommonMark with GFM tables, strikethrough and task lists)
        start_index: Document index where the content would be inserted (1 = start of body)

    Returns:
        str: JSON array of batchUpdate requests, or an error message
    """
    logger.info(f"[convert_markdown_to_requests] markdown_length={len(markdown_text)}, start_index={start_index}")
    try:
        requests = HtmlToDocsConverter(_converter_config()).convert_markdown(markdown_text, start_index=start_index)
    except DocsCompilerError as e:
        return f"Error: {format_error('convert_markdown_to_requests', e)}"
    return json.dumps(requests, indent=2)


@server.tool()
async def insert_html_into_doc(document_id: str, html: str, index: int = 1) -> str:
    """
    Converts HTML and inserts it into a Google Doc at the given index.

    Args:
        document_id: ID of the document to update
        html: HTML document or fragment
        index: Insertion index (1 = start of body)

    Returns:
        str: Confirmation message with document link
    """
    logger.info(f"[insert_html_into_doc] Doc={document_id}, index={index}")
    try:
        service = get_docs_service()
        return await insert_html(service, document_id, html, index=index, config=_converter_config())
    except DocsCompilerError as e:
        return f"Error: {format_error('insert_html_into_doc', e)}"


@server.tool()
async def insert_markdown_into_doc(document_id: str, markdown_text: str, index: int = 1) -> str:
    """
    Converts Markdown and inserts it into a Google Doc at the given index.

    Args:
        document_id: ID of the document to update
        markdown_text: Markdown content
        index: Insertion index (1 = start of body)

    Returns:
        str: Confirmation message with document link
    """
    logger.info(f"[insert_markdown_into_doc] Doc={document_id}, index={index}")
    try:
        service = get_docs_service()
        return await insert_markdown(service, document_id, markdown_text, index=index, config=_converter_config())
    except DocsCompilerError as e:
        return f"Error: {format_error('insert_markdown_into_doc', e)}"
