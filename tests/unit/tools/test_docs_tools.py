"""
Unit tests for Google Docs request builders and MCP tool registration.

Tests cover:
- Request builders (insert, paragraph style, text style, bullets, table)
- Tool registration verification
- Conversion tool output and error reporting
"""

import json
import ssl
from unittest.mock import patch

import pytest


class TestRequestBuilders:
    """Tests for batchUpdate request dict builders."""

    def test_insert_text_request(self):
        from gdocs.docs_helpers import create_insert_text_request

        assert create_insert_text_request(5, "Hi\n") == {"insertText": {"location": {"index": 5}, "text": "Hi\n"}}

    def test_update_paragraph_style_request(self):
        from gdocs.docs_helpers import create_update_paragraph_style_request

        result = create_update_paragraph_style_request(1, 7, {"namedStyleType": "HEADING_1"}, "namedStyleType")
        assert result == {
            "updateParagraphStyle": {
                "range": {"startIndex": 1, "endIndex": 7},
                "paragraphStyle": {"namedStyleType": "HEADING_1"},
                "fields": "namedStyleType",
            }
        }

    def test_update_text_style_request(self):
        from gdocs.docs_helpers import create_update_text_style_request

        result = create_update_text_style_request(2, 4, {"bold": True, "italic": True}, "bold,italic")
        assert result["updateTextStyle"]["range"] == {"startIndex": 2, "endIndex": 4}
        assert result["updateTextStyle"]["fields"] == "bold,italic"

    def test_unordered_bullet_request(self):
        from gdocs.docs_helpers import BULLET_PRESET_UNORDERED, create_bullet_list_request

        result = create_bullet_list_request(1, 10)
        assert result["createParagraphBullets"]["bulletPreset"] == BULLET_PRESET_UNORDERED
        assert result["createParagraphBullets"]["range"] == {"startIndex": 1, "endIndex": 10}

    def test_ordered_bullet_request(self):
        from gdocs.docs_helpers import BULLET_PRESET_ORDERED, create_bullet_list_request

        result = create_bullet_list_request(1, 10, "ORDERED")
        assert result["createParagraphBullets"]["bulletPreset"] == BULLET_PRESET_ORDERED

    def test_insert_table_request(self):
        from gdocs.docs_helpers import create_insert_table_request

        assert create_insert_table_request(3, 2, 4) == {"insertTable": {"location": {"index": 3}, "rows": 2, "columns": 4}}


class TestStyleSerialization:
    """Tests for style slot serialization and field masks."""

    def test_text_style_fields_follow_present_slots(self):
        from gdocs.models import RgbColor, TextStyle

        style = TextStyle(bold=True, link_url="https://example.com", foreground_color=RgbColor(1.0, 0.0, 0.0))
        assert style.to_api() == {
            "bold": True,
            "link": {"url": "https://example.com"},
            "foregroundColor": {"color": {"rgbColor": {"red": 1.0, "green": 0.0, "blue": 0.0}}},
        }
        assert style.fields() == "bold,link,foregroundColor"

    def test_font_slots(self):
        from gdocs.models import TextStyle

        style = TextStyle(font_family="Consolas", font_size_pt=10.0)
        assert style.to_api() == {
            "weightedFontFamily": {"fontFamily": "Consolas", "weight": 400},
            "fontSize": {"magnitude": 10.0, "unit": "PT"},
        }

    def test_paragraph_indent_fields(self):
        from gdocs.models import ParagraphStyle

        style = ParagraphStyle(indent_start_pt=36.0, indent_first_line_pt=18.0)
        assert style.fields() == "indentStart,indentFirstLine"
        assert style.to_api()["indentStart"] == {"magnitude": 36.0, "unit": "PT"}


class TestToolRegistration:
    """Tests for MCP tool registration."""

    def test_conversion_tools_are_registered(self):
        """Verify conversion tools are registered."""
        from gdocs.tools import convert_html_to_requests, convert_markdown_to_requests

        assert convert_html_to_requests is not None
        assert convert_html_to_requests.name == "convert_html_to_requests"

        assert convert_markdown_to_requests is not None
        assert convert_markdown_to_requests.name == "convert_markdown_to_requests"

    def test_insertion_tools_are_registered(self):
        """Verify insertion tools are registered."""
        from gdocs.tools import insert_html_into_doc, insert_markdown_into_doc

        assert insert_html_into_doc.name == "insert_html_into_doc"
        assert insert_markdown_into_doc.name == "insert_markdown_into_doc"


class TestConversionTools:
    """Tests for the tool bodies."""

    @pytest.mark.asyncio
    async def test_convert_html_returns_json(self):
        from gdocs.tools import convert_html_to_requests

        result = await convert_html_to_requests.fn(html="<p>Hi</p>", start_index=1)
        assert json.loads(result)[0] == {"insertText": {"location": {"index": 1}, "text": "Hi\n"}}

    @pytest.mark.asyncio
    async def test_convert_markdown_returns_json(self):
        from gdocs.tools import convert_markdown_to_requests

        result = json.loads(await convert_markdown_to_requests.fn(markdown_text="## Sub", start_index=3))
        assert result[1]["updateParagraphStyle"]["paragraphStyle"]["namedStyleType"] == "HEADING_2"
        assert result[1]["updateParagraphStyle"]["range"] == {"startIndex": 3, "endIndex": 7}

    @pytest.mark.asyncio
    async def test_validation_error_is_reported(self):
        from gdocs.tools import convert_html_to_requests

        result = await convert_html_to_requests.fn(html="", start_index=1)
        assert result.startswith("Error: convert_html_to_requests failed:")

    @pytest.mark.asyncio
    async def test_missing_credentials_are_reported(self):
        from core.errors import ServiceConfigurationError
        from gdocs.tools import insert_html_into_doc

        with patch("gdocs.tools.get_docs_service", side_effect=ServiceConfigurationError("no key")):
            result = await insert_html_into_doc.fn(document_id="doc123", html="<p>x</p>", index=1)
        assert result == "Error: insert_html_into_doc failed: no key"

    @pytest.mark.asyncio
    async def test_network_failure_is_reported(self, mock_docs_service):
        from gdocs.tools import insert_markdown_into_doc

        execute = mock_docs_service.documents.return_value.batchUpdate.return_value.execute
        execute.side_effect = ssl.SSLError("handshake failed")
        with patch("gdocs.tools.get_docs_service", return_value=mock_docs_service):
            result = await insert_markdown_into_doc.fn(document_id="doc123", markdown_text="hello", index=1)
        assert result.startswith("Error: insert_markdown_into_doc failed: A transient SSL error occurred")

    @pytest.mark.asyncio
    async def test_insert_uses_docs_service(self, mock_docs_service):
        from gdocs.tools import insert_markdown_into_doc

        with patch("gdocs.tools.get_docs_service", return_value=mock_docs_service):
            result = await insert_markdown_into_doc.fn(document_id="doc123", markdown_text="hello", index=1)
        assert "Inserted Markdown content at index 1 in document doc123" in result
        mock_docs_service.documents.return_value.batchUpdate.assert_called_once()
