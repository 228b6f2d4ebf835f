"""
Google Docs Writing

Submits compiled request lists to a Google Doc through the Docs API
``documents.batchUpdate`` method. The service object is a
``googleapiclient`` Docs v1 resource; blocking client calls run in a worker
thread.
"""

import asyncio
import logging
from typing import Any

from core.errors import ValidationError
from core.utils import handle_http_errors, validate_document_id, validate_positive_int
from gdocs.config import ConverterConfig
from gdocs.converter import HtmlToDocsConverter

logger = logging.getLogger(__name__)


def document_link(document_id: str) -> str:
    return f"https://docs.google.com/document/d/{document_id}/edit"


@handle_http_errors("batch_update_doc")
async def batch_update_doc(service: Any, document_id: str, requests: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Apply an ordered list of requests to a document as one atomic batch.

    Args:
        service: Docs v1 service resource.
        document_id: ID of the document to update.
        requests: batchUpdate request dicts; order is preserved.

    Returns:
        dict: The API response (``replies`` etc.).
    """
    document_id = validate_document_id(document_id)
    if not isinstance(requests, list):
        raise ValidationError("requests must be a list")
    if not requests:
        logger.info(f"[batch_update_doc] Doc={document_id}: nothing to submit")
        return {"documentId": document_id, "replies": []}

    body = HtmlToDocsConverter.create_batch_update_request(document_id, requests)
    logger.info(f"[batch_update_doc] Doc={document_id}, requests={len(requests)}")
    result = await asyncio.to_thread(service.documents().batchUpdate(documentId=document_id, body=body).execute)
    logger.debug(f"[batch_update_doc] Doc={document_id}: {len(result.get('replies', []))} replies")
    return result


async def _insert(
    service: Any,
    document_id: str,
    requests: list[dict[str, Any]],
    index: int,
    operation: str,
) -> str:
    await batch_update_doc(service, document_id=document_id, requests=requests)
    link = document_link(document_id)
    msg = f"Inserted {operation} content at index {index} in document {document_id} ({len(requests)} requests). Link: {link}"
    logger.info(f"[insert_{operation.lower()}] Doc={document_id}: {len(requests)} requests applied")
    return msg


async def insert_html(
    service: Any,
    document_id: str,
    html: str,
    index: int = 1,
    config: ConverterConfig | None = None,
) -> str:
    """
    Compile HTML at ``index`` and submit it to the document.

    Returns:
        str: Confirmation message with the number of requests and a document link.
    """
    document_id = validate_document_id(document_id)
    validate_positive_int(index, "index")
    logger.info(f"[insert_html] Doc={document_id}, index={index}, html_length={len(html) if isinstance(html, str) else 0}")
    requests = HtmlToDocsConverter(config).convert_html(html, start_index=index)
    return await _insert(service, document_id, requests, index, "HTML")


async def insert_markdown(
    service: Any,
    document_id: str,
    markdown_text: str,
    index: int = 1,
    config: ConverterConfig | None = None,
) -> str:
    """
    Compile Markdown at ``index`` and submit it to the document.

    Returns:
        str: Confirmation message with the number of requests and a document link.
    """
    document_id = validate_document_id(document_id)
    validate_positive_int(index, "index")
    logger.info(
        f"[insert_markdown] Doc={document_id}, index={index}, "
        f"markdown_length={len(markdown_text) if isinstance(markdown_text, str) else 0}"
    )
    requests = HtmlToDocsConverter(config).convert_markdown(markdown_text, start_index=index)
    return await _insert(service, document_id, requests, index, "Markdown")
