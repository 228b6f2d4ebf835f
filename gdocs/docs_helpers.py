"""
Google Docs request builders.

Plain-dict constructors for the ``documents.batchUpdate`` request kinds the
compiler emits. Every builder takes absolute document indices.
"""

from typing import Any

# Bullet presets for list types
BULLET_PRESET_UNORDERED = "BULLET_DISC_CIRCLE_SQUARE"
BULLET_PRESET_ORDERED = "NUMBERED_DECIMAL_ALPHA_ROMAN"


def _range(start_index: int, end_index: int) -> dict[str, int]:
    return {"startIndex": start_index, "endIndex": end_index}


def create_insert_text_request(index: int, text: str) -> dict[str, Any]:
    """
    Create an insertText request.

    Args:
        index: Position to insert at
        text: Text to insert

    Returns:
        Dictionary representing the insertText request
    """
    return {"insertText": {"location": {"index": index}, "text": text}}


def create_update_paragraph_style_request(
    start_index: int, end_index: int, paragraph_style: dict[str, Any], fields: str
) -> dict[str, Any]:
    """Create an updateParagraphStyle request for ``[start_index, end_index)``."""
    return {
        "updateParagraphStyle": {
            "range": _range(start_index, end_index),
            "paragraphStyle": paragraph_style,
            "fields": fields,
        }
    }


def create_update_text_style_request(
    start_index: int, end_index: int, text_style: dict[str, Any], fields: str
) -> dict[str, Any]:
    """Create an updateTextStyle request for ``[start_index, end_index)``."""
    return {
        "updateTextStyle": {
            "range": _range(start_index, end_index),
            "textStyle": text_style,
            "fields": fields,
        }
    }


def create_bullet_list_request(start_index: int, end_index: int, list_type: str = "UNORDERED") -> dict[str, Any]:
    """
    Create a createParagraphBullets request.

    Args:
        start_index: Start of the paragraphs to bullet
        end_index: End of the paragraphs to bullet
        list_type: "UNORDERED" or "ORDERED"

    Returns:
        Dictionary representing the createParagraphBullets request
    """
    bullet_preset = BULLET_PRESET_ORDERED if list_type == "ORDERED" else BULLET_PRESET_UNORDERED
    return {
        "createParagraphBullets": {
            "range": _range(start_index, end_index),
            "bulletPreset": bullet_preset,
        }
    }


def create_insert_table_request(index: int, rows: int, columns: int) -> dict[str, Any]:
    """Create an insertTable request."""
    return {"insertTable": {"location": {"index": index}, "rows": rows, "columns": columns}}
