"""
Typed edit requests.

The request generator emits these frozen values; ``to_api()`` turns each into
the JSON dict accepted by ``documents.batchUpdate``. Ranges are absolute,
half-open document indices.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from gdocs.docs_helpers import (
    create_bullet_list_request,
    create_insert_table_request,
    create_insert_text_request,
    create_update_paragraph_style_request,
    create_update_text_style_request,
)
from gdocs.models import ParagraphStyle, TextStyle


@dataclass(frozen=True)
class InsertText:
    at: int
    text: str

    def to_api(self) -> dict[str, Any]:
        return create_insert_text_request(self.at, self.text)


@dataclass(frozen=True)
class SetParagraphStyle:
    start: int
    end: int
    style: ParagraphStyle

    def to_api(self) -> dict[str, Any]:
        return create_update_paragraph_style_request(self.start, self.end, self.style.to_api(), self.style.fields())


@dataclass(frozen=True)
class SetTextStyle:
    start: int
    end: int
    style: TextStyle

    def to_api(self) -> dict[str, Any]:
        return create_update_text_style_request(self.start, self.end, self.style.to_api(), self.style.fields())


@dataclass(frozen=True)
class SetListBullet:
    start: int
    end: int
    ordered: bool

    def to_api(self) -> dict[str, Any]:
        return create_bullet_list_request(self.start, self.end, "ORDERED" if self.ordered else "UNORDERED")


@dataclass(frozen=True)
class CreateTable:
    at: int
    rows: int
    columns: int

    def to_api(self) -> dict[str, Any]:
        return create_insert_table_request(self.at, self.rows, self.columns)


Request = Union[InsertText, SetParagraphStyle, SetTextStyle, SetListBullet, CreateTable]


def requests_to_api(requests: list[Request]) -> list[dict[str, Any]]:
    """Serialize requests in emission order."""
    return [request.to_api() for request in requests]
