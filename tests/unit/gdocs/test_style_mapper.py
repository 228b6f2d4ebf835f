"""Unit tests for element-to-style mapping."""

import pytest

from gdocs.models import ParagraphStyle, RgbColor, TextStyle
from gdocs.style_mapper import (
    CODE_FONT_FAMILY,
    hex_to_rgb,
    map_paragraph_style,
    map_text_style,
    parse_style_attribute,
)


class TestMapTextStyle:
    """Tag and attribute to character style."""

    @pytest.mark.parametrize("tag", ["strong", "b", "STRONG"])
    def test_bold_tags(self, tag):
        assert map_text_style(tag) == TextStyle(bold=True)

    @pytest.mark.parametrize("tag", ["em", "i"])
    def test_italic_tags(self, tag):
        assert map_text_style(tag) == TextStyle(italic=True)

    def test_underline(self):
        assert map_text_style("u") == TextStyle(underline=True)

    @pytest.mark.parametrize("tag", ["s", "strike", "del"])
    def test_strikethrough_tags(self, tag):
        assert map_text_style(tag) == TextStyle(strikethrough=True)

    def test_code_uses_monospace_font(self):
        assert map_text_style("code") == TextStyle(font_family=CODE_FONT_FAMILY)

    def test_link_with_href(self):
        style = map_text_style("a", {"href": "https://example.com"})
        assert style == TextStyle(link_url="https://example.com")

    def test_link_without_href_is_empty(self):
        assert map_text_style("a", {}).is_empty()

    def test_span_color(self):
        style = map_text_style("span", {"style": "color:#ff0000;"})
        assert style.foreground_color == RgbColor(red=1.0, green=0.0, blue=0.0)

    def test_background_color_does_not_set_foreground(self):
        style = map_text_style("span", {"style": "background-color: #0000ff"})
        assert style.foreground_color is None
        assert style.background_color == RgbColor(red=0.0, green=0.0, blue=1.0)

    def test_font_declarations(self):
        style = map_text_style("span", {"style": "font-family: 'Times New Roman', serif; font-size: 14pt"})
        assert style.font_family == "Times New Roman"
        assert style.font_size_pt == 14.0

    def test_font_size_in_px_is_ignored(self):
        assert map_text_style("span", {"style": "font-size: 14px"}).is_empty()

    def test_color_combines_with_tag_style(self):
        style = map_text_style("b", {"style": "color: #00ff00"})
        assert style.bold is True
        assert style.foreground_color == RgbColor(red=0.0, green=1.0, blue=0.0)

    def test_unknown_tag_is_empty(self):
        assert map_text_style("blink", {"class": ["x"]}).is_empty()

    def test_none_tag_is_empty(self):
        assert map_text_style(None).is_empty()

    def test_mapping_is_idempotent(self):
        attrs = {"href": "https://example.com", "style": "color:#123456"}
        assert map_text_style("a", attrs) == map_text_style("a", attrs)


class TestMapParagraphStyle:
    """Tag and attribute to paragraph style."""

    @pytest.mark.parametrize("rank", range(1, 7))
    def test_heading_levels(self, rank):
        style = map_paragraph_style(f"h{rank}")
        assert style.named_style == f"HEADING_{rank}"
        assert style.heading_rank == rank

    @pytest.mark.parametrize("tag", ["p", "div", "li", "unknown"])
    def test_everything_else_is_normal(self, tag):
        assert map_paragraph_style(tag) == ParagraphStyle(named_style="NORMAL_TEXT")

    def test_text_align(self):
        style = map_paragraph_style("p", {"style": "text-align: center"})
        assert style.alignment == "CENTER"

    def test_unknown_alignment_is_ignored(self):
        assert map_paragraph_style("p", {"style": "text-align: middle"}).alignment is None


class TestHexToRgb:
    """Hex color parsing."""

    def test_six_digit(self):
        assert hex_to_rgb("#ff8000") == RgbColor(red=1.0, green=128 / 255, blue=0.0)

    def test_three_digit(self):
        assert hex_to_rgb("#f00") == RgbColor(red=1.0, green=0.0, blue=0.0)

    @pytest.mark.parametrize("value", [None, "", "red", "#12", "#gggggg", "ff0000"])
    def test_invalid_values(self, value):
        assert hex_to_rgb(value) is None


class TestParseStyleAttribute:
    """Inline style declaration parsing."""

    def test_splits_declarations(self):
        assert parse_style_attribute("color: #fff; Font-Size:12pt;") == {"color": "#fff", "font-size": "12pt"}

    def test_skips_malformed_declarations(self):
        assert parse_style_attribute("color; :red; font-weight: bold") == {"font-weight": "bold"}

    def test_empty(self):
        assert parse_style_attribute(None) == {}
