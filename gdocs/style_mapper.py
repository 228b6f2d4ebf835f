"""
Element to style lookup.

Maps an HTML element's tag name and attributes to the Google Docs text and
paragraph styles it implies. Every function here is pure: unknown tags or
unparseable attributes produce an empty style, never an error.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from gdocs.models import NAMED_STYLE_NORMAL, ParagraphStyle, RgbColor, TextStyle

# Named style mappings for headings (h1 -> HEADING_1, etc.)
HEADING_STYLE_MAP: dict[str, str] = {
    "h1": "HEADING_1",
    "h2": "HEADING_2",
    "h3": "HEADING_3",
    "h4": "HEADING_4",
    "h5": "HEADING_5",
    "h6": "HEADING_6",
}

BOLD_TAGS = frozenset({"strong", "b"})
ITALIC_TAGS = frozenset({"em", "i"})
UNDERLINE_TAGS = frozenset({"u", "ins"})
STRIKETHROUGH_TAGS = frozenset({"s", "strike", "del"})
MONOSPACE_TAGS = frozenset({"code", "kbd", "samp", "tt"})

# Inline code font
CODE_FONT_FAMILY = "Consolas"

ALIGNMENT_MAP: dict[str, str] = {
    "left": "START",
    "start": "START",
    "center": "CENTER",
    "right": "END",
    "end": "END",
    "justify": "JUSTIFIED",
}

_HEX_COLOR = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_FONT_SIZE_PT = re.compile(r"^(\d+(?:\.\d+)?)pt$", re.IGNORECASE)


def parse_style_attribute(style_attr: str | None) -> dict[str, str]:
    """Split an inline ``style`` attribute into lower-cased property -> value pairs."""
    declarations: dict[str, str] = {}
    if not style_attr:
        return declarations
    for declaration in style_attr.split(";"):
        prop, sep, value = declaration.partition(":")
        if not sep:
            continue
        prop = prop.strip().lower()
        value = value.strip()
        if prop and value:
            declarations[prop] = value
    return declarations


def hex_to_rgb(value: str | None) -> RgbColor | None:
    """Convert ``#rrggbb`` or ``#rgb`` into a 0..1 RGB triple; anything else yields None."""
    if not value:
        return None
    match = _HEX_COLOR.match(value.strip())
    if not match:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return RgbColor(
        red=int(digits[0:2], 16) / 255,
        green=int(digits[2:4], 16) / 255,
        blue=int(digits[4:6], 16) / 255,
    )


def _attr(attrs: Mapping[str, Any] | None, name: str) -> str | None:
    if not attrs:
        return None
    value = attrs.get(name)
    # bs4 returns multi-valued attributes (class, rel) as lists
    if isinstance(value, list):
        value = " ".join(value)
    return value


def map_text_style(tag: str | None, attrs: Mapping[str, Any] | None = None) -> TextStyle:
    """
    Return the character style an element applies to its content.

    Args:
        tag: Element tag name (any case).
        attrs: Element attributes, e.g. a bs4 ``Tag.attrs`` mapping.

    Returns:
        TextStyle: Possibly empty; never raises for unknown tags.
    """
    tag = (tag or "").lower()
    slots: dict[str, Any] = {}

    if tag in BOLD_TAGS:
        slots["bold"] = True
    if tag in ITALIC_TAGS:
        slots["italic"] = True
    if tag in UNDERLINE_TAGS:
        slots["underline"] = True
    if tag in STRIKETHROUGH_TAGS:
        slots["strikethrough"] = True
    if tag in MONOSPACE_TAGS:
        slots["font_family"] = CODE_FONT_FAMILY
    if tag == "a":
        href = _attr(attrs, "href")
        if href:
            slots["link_url"] = href

    declarations = parse_style_attribute(_attr(attrs, "style"))
    foreground = hex_to_rgb(declarations.get("color"))
    if foreground is not None:
        slots["foreground_color"] = foreground
    background = hex_to_rgb(declarations.get("background-color"))
    if background is not None:
        slots["background_color"] = background
    if "font-family" in declarations:
        family = declarations["font-family"].split(",")[0].strip().strip("'\"")
        if family:
            slots["font_family"] = family
    size_match = _FONT_SIZE_PT.match(declarations.get("font-size", ""))
    if size_match:
        slots["font_size_pt"] = float(size_match.group(1))

    return TextStyle(**slots)


def map_paragraph_style(tag: str | None, attrs: Mapping[str, Any] | None = None) -> ParagraphStyle:
    """Return the paragraph style for a block-level element (heading rank and alignment)."""
    tag = (tag or "").lower()
    named_style = HEADING_STYLE_MAP.get(tag, NAMED_STYLE_NORMAL)

    alignment = None
    text_align = parse_style_attribute(_attr(attrs, "style")).get("text-align")
    if text_align:
        alignment = ALIGNMENT_MAP.get(text_align.lower())

    return ParagraphStyle(named_style=named_style, alignment=alignment)
