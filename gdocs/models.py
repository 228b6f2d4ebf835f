"""
Document model for the HTML-to-Google-Docs compiler.

Blocks are the flat, block-local intermediate representation produced by the
block extractor and consumed once, in order, by the request generator. Style
objects are closed sets of optional slots; a slot is "present" when it is not
``None``, and only present slots are serialized or written to a field mask.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from dataclasses import fields as dataclass_fields
from typing import Any

NAMED_STYLE_NORMAL = "NORMAL_TEXT"


@dataclass(frozen=True)
class RgbColor:
    """An RGB color with each channel normalized to 0..1."""

    red: float
    green: float
    blue: float

    def to_api(self) -> dict[str, Any]:
        return {"color": {"rgbColor": {"red": self.red, "green": self.green, "blue": self.blue}}}


def _merge_slots(base, override):
    """Return a copy of ``base`` with every present slot of ``override`` applied."""
    changes = {
        f.name: getattr(override, f.name)
        for f in dataclass_fields(override)
        if getattr(override, f.name) is not None
    }
    return replace(base, **changes)


@dataclass(frozen=True)
class TextStyle:
    """Character-level style slots, mirroring the Docs API ``TextStyle`` resource."""

    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    link_url: str | None = None
    foreground_color: RgbColor | None = None
    background_color: RgbColor | None = None
    font_family: str | None = None
    font_size_pt: float | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in dataclass_fields(self))

    def merged(self, other: TextStyle | None) -> TextStyle:
        """Key-wise union; present slots of ``other`` win."""
        if other is None:
            return self
        return _merge_slots(self, other)

    def to_api(self) -> dict[str, Any]:
        style: dict[str, Any] = {}
        if self.bold is not None:
            style["bold"] = self.bold
        if self.italic is not None:
            style["italic"] = self.italic
        if self.underline is not None:
            style["underline"] = self.underline
        if self.strikethrough is not None:
            style["strikethrough"] = self.strikethrough
        if self.link_url is not None:
            style["link"] = {"url": self.link_url}
        if self.foreground_color is not None:
            style["foregroundColor"] = self.foreground_color.to_api()
        if self.background_color is not None:
            style["backgroundColor"] = self.background_color.to_api()
        if self.font_family is not None:
            style["weightedFontFamily"] = {"fontFamily": self.font_family, "weight": 400}
        if self.font_size_pt is not None:
            style["fontSize"] = {"magnitude": self.font_size_pt, "unit": "PT"}
        return style

    def fields(self) -> str:
        """Field mask for ``updateTextStyle`` built from the present slots."""
        return ",".join(self.to_api().keys())


@dataclass(frozen=True)
class ParagraphStyle:
    """Paragraph-level style slots, mirroring the Docs API ``ParagraphStyle`` resource."""

    named_style: str | None = None
    alignment: str | None = None
    indent_start_pt: float | None = None
    indent_first_line_pt: float | None = None

    @property
    def heading_rank(self) -> int | None:
        if self.named_style and self.named_style.startswith("HEADING_"):
            return int(self.named_style.rsplit("_", 1)[1])
        return None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in dataclass_fields(self))

    def merged(self, other: ParagraphStyle | None) -> ParagraphStyle:
        """Key-wise union; present slots of ``other`` win."""
        if other is None:
            return self
        return _merge_slots(self, other)

    def to_api(self) -> dict[str, Any]:
        style: dict[str, Any] = {}
        if self.named_style is not None:
            style["namedStyleType"] = self.named_style
        if self.alignment is not None:
            style["alignment"] = self.alignment
        if self.indent_start_pt is not None:
            style["indentStart"] = {"magnitude": self.indent_start_pt, "unit": "PT"}
        if self.indent_first_line_pt is not None:
            style["indentFirstLine"] = {"magnitude": self.indent_first_line_pt, "unit": "PT"}
        return style

    def fields(self) -> str:
        """Field mask for ``updateParagraphStyle`` built from the present slots."""
        return ",".join(self.to_api().keys())


NORMAL_PARAGRAPH = ParagraphStyle(named_style=NAMED_STYLE_NORMAL)


@dataclass(frozen=True)
class StyleInterval:
    """A half-open ``[start, end)`` character range carrying a text style."""

    start: int
    end: int
    style: TextStyle

    def clamped(self, length: int) -> StyleInterval:
        """Clamp both ends into ``[0, length]``."""
        start = min(max(self.start, 0), length)
        end = min(max(self.end, start), length)
        if (start, end) == (self.start, self.end):
            return self
        return replace(self, start=start, end=end)

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start


@dataclass(frozen=True)
class ListMembership:
    """List item metadata; ``position`` is 1-based within its (ordered, nesting_level) scope."""

    ordered: bool
    nesting_level: int = 0
    position: int = 1


@dataclass(frozen=True)
class CellGeometry:
    """
    Nominal table cell coordinates.

    ``row_index``/``column_index`` are sequential counters in document order and
    are not adjusted for cells spanning into later slots. ``table_index`` numbers
    the tables of one compile so adjacent tables stay separate.
    """

    row_index: int
    column_index: int
    row_span: int = 1
    column_span: int = 1
    table_index: int = 0


@dataclass(frozen=True)
class Block:
    """One paragraph, heading, list item or table cell worth of flat text."""

    text: str
    paragraph_style: ParagraphStyle = NORMAL_PARAGRAPH
    inline_styles: tuple[StyleInterval, ...] = field(default_factory=tuple)
    list_info: ListMembership | None = None
    table_info: CellGeometry | None = None

    @property
    def is_list_item(self) -> bool:
        return self.list_info is not None

    @property
    def is_table_cell(self) -> bool:
        return self.table_info is not None

    def with_appended_text(self, suffix: str) -> Block:
        return replace(self, text=self.text + suffix)
