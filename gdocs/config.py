"""
Converter configuration.

Caller-supplied style overrides merged into the styles computed from markup.
Present slots of an override always win over the computed value; empty slots
leave the computed value untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from core.config import DEFAULT_LIST_INDENT_PT
from gdocs.models import ParagraphStyle, TextStyle

# First-line hanging offset for nested list items
LIST_HANGING_INDENT_PT = 18.0


@dataclass(frozen=True)
class ConverterConfig:
    """
    Style overrides applied while generating requests.

    Attributes:
        default_paragraph_style: Merged into every paragraph-style request.
        default_heading_style: Merged last into heading paragraph styles.
        default_text_style: Merged into every text-style request.
        list_indent_pt: Left indent per list nesting level.
    """

    default_paragraph_style: ParagraphStyle = field(default_factory=ParagraphStyle)
    default_heading_style: ParagraphStyle = field(default_factory=ParagraphStyle)
    default_text_style: TextStyle = field(default_factory=TextStyle)
    list_indent_pt: float = DEFAULT_LIST_INDENT_PT

    def __post_init__(self) -> None:
        if self.list_indent_pt < 0:
            raise ValueError(f"list_indent_pt must be non-negative, got {self.list_indent_pt}")

    def with_updates(self, **changes: Any) -> ConverterConfig:
        """
        Return a copy with the given fields replaced.

        Style fields are merged into the current value (present slots of the
        update win) rather than replacing it wholesale.
        """
        merged: dict[str, Any] = {}
        for name, value in changes.items():
            if not hasattr(self, name):
                raise ValueError(f"Unknown converter option: {name}")
            current = getattr(self, name)
            if isinstance(current, (ParagraphStyle, TextStyle)) and value is not None:
                if not isinstance(value, type(current)):
                    raise ValueError(f"{name} must be a {type(current).__name__}")
                value = current.merged(value)
            merged[name] = value
        return replace(self, **merged)

    def paragraph_style_for(self, computed: ParagraphStyle) -> ParagraphStyle:
        style = computed.merged(self.default_paragraph_style)
        if computed.heading_rank is not None:
            style = style.merged(self.default_heading_style)
        return style

    def text_style_for(self, computed: TextStyle) -> TextStyle:
        return computed.merged(self.default_text_style)

    def list_item_indent(self, nesting_level: int) -> ParagraphStyle:
        indent_start = self.list_indent_pt * (nesting_level + 1)
        return ParagraphStyle(
            indent_start_pt=indent_start,
            indent_first_line_pt=max(indent_start - LIST_HANGING_INDENT_PT, 0.0),
        )
