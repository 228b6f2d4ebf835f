"""
Google Docs Compiler Package

Compiles HTML and Markdown into Google Docs API batchUpdate requests and
submits them to a document.
"""

from gdocs.block_extractor import BlockExtractor, extract_blocks
from gdocs.config import ConverterConfig
from gdocs.converter import HtmlToDocsConverter
from gdocs.doc_requests import CreateTable, InsertText, Request, SetListBullet, SetParagraphStyle, SetTextStyle
from gdocs.markdown_parser import MarkdownRenderer, markdown_to_html
from gdocs.models import Block, CellGeometry, ListMembership, ParagraphStyle, RgbColor, StyleInterval, TextStyle
from gdocs.request_generator import RequestGenerator, generate_requests
from gdocs.text_aggregator import TextAggregator
from gdocs.writing import batch_update_doc, insert_html, insert_markdown

__all__ = [
    "Block",
    "BlockExtractor",
    "CellGeometry",
    "ConverterConfig",
    "CreateTable",
    "HtmlToDocsConverter",
    "InsertText",
    "ListMembership",
    "MarkdownRenderer",
    "ParagraphStyle",
    "Request",
    "RequestGenerator",
    "RgbColor",
    "SetListBullet",
    "SetParagraphStyle",
    "SetTextStyle",
    "StyleInterval",
    "TextAggregator",
    "TextStyle",
    "batch_update_doc",
    "extract_blocks",
    "generate_requests",
    "insert_html",
    "insert_markdown",
    "markdown_to_html",
]
