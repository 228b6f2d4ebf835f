"""
Block extraction.

Walks a parsed HTML tree (``bs4``) and produces the ordered sequence of
:class:`~gdocs.models.Block` objects consumed by the request generator.

Block-level elements are flattened by the text collector; the extractor only
decides where blocks start and end and tracks list nesting and table geometry.
All traversal state lives on one ``BlockExtractor`` instance, so two compiles
never share list counters or table numbering.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from gdocs.models import Block, CellGeometry, ListMembership, ParagraphStyle
from gdocs.style_mapper import map_paragraph_style
from gdocs.text_aggregator import TextAggregator
from gdocs.text_collector import (
    HTML_WHITESPACE,
    LINE_BREAK_TAG,
    LIST_TAGS,
    SKIPPED_TAGS,
    CollectedText,
    collect_text,
    is_text_node,
    normalize_whitespace,
    tag_name,
)

logger = logging.getLogger(__name__)

PARAGRAPH_TAGS = frozenset({"p", "h1", "h2", "h3", "h4", "h5", "h6", "pre"})

# Flow containers: one block when they hold only inline content, recursed into otherwise
CONTAINER_TAGS = frozenset(
    {
        "html",
        "body",
        "div",
        "section",
        "article",
        "main",
        "header",
        "footer",
        "aside",
        "nav",
        "blockquote",
        "figure",
        "figcaption",
        "address",
        "details",
        "summary",
        "form",
        "fieldset",
        "center",
        "dl",
        "dt",
        "dd",
        "li",
    }
)

TABLE_TAG = "table"
TABLE_SECTION_TAGS = frozenset({"thead", "tbody", "tfoot"})
ROW_TAG = "tr"
CELL_TAGS = frozenset({"td", "th"})
CAPTION_TAG = "caption"
RULE_TAG = "hr"
BLOCKQUOTE_TAG = "blockquote"

BLOCK_LEVEL_TAGS = (
    PARAGRAPH_TAGS
    | CONTAINER_TAGS
    | LIST_TAGS
    | TABLE_SECTION_TAGS
    | CELL_TAGS
    | {TABLE_TAG, ROW_TAG, CAPTION_TAG, RULE_TAG}
)

# Left margin per blockquote nesting level
BLOCKQUOTE_INDENT_PT = 36

_BLOCK_LEVEL_NAMES = sorted(BLOCK_LEVEL_TAGS)


def _parse_span(cell: Tag, attribute: str) -> int:
    raw = cell.get(attribute)
    if raw is None:
        return 1
    try:
        span = int(str(raw).strip())
    except ValueError:
        logger.debug(f"Non-numeric {attribute}={raw!r} on <{cell.name}>, using 1")
        return 1
    if span < 1:
        logger.debug(f"Out-of-range {attribute}={span} on <{cell.name}>, using 1")
        return 1
    return span


def _has_block_descendant(element: Tag) -> bool:
    return element.find(_BLOCK_LEVEL_NAMES) is not None


class BlockExtractor:
    """
    Single-use extractor for one document tree.

    Attributes:
        blocks: Blocks emitted so far, in document order.
    """

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        # Position counters keyed by list scope (ordered, nesting_level)
        self._list_positions: dict[tuple[bool, int], int] = {}
        self._table_count = 0
        self._quote_depth = 0
        # Loose inline content waiting to become one NORMAL_TEXT block
        self._loose: TextAggregator | None = None
        self._loose_gap = False

    def extract(self, root: Tag) -> list[Block]:
        if isinstance(root, BeautifulSoup):
            self._process_children(root)
        else:
            self._visit(root)
        self._flush_loose()
        logger.debug(f"Extracted {len(self.blocks)} blocks")
        return self.blocks

    # Dispatch

    def _process_children(self, element: Tag) -> None:
        for child in element.children:
            self._visit(child)

    def _visit(self, node: object) -> None:
        if is_text_node(node):
            self._add_loose_text(str(node))
            return
        if not isinstance(node, Tag):
            return

        name = tag_name(node)
        if name in SKIPPED_TAGS:
            return
        if name == LINE_BREAK_TAG:
            self._flush_loose()
            self._append_line_break()
            return
        if name in BLOCK_LEVEL_TAGS:
            self._flush_loose()
            self._process_block_element(node, name)
            return
        if _has_block_descendant(node):
            # Inline or unknown wrapper around block content, e.g. <a><div>..</div></a>
            self._flush_loose()
            self._process_children(node)
            return
        self._add_loose_element(node)

    def _process_block_element(self, element: Tag, name: str) -> None:
        if name in PARAGRAPH_TAGS:
            self._emit(collect_text(element), map_paragraph_style(name, element.attrs))
        elif name in LIST_TAGS:
            self._process_list(element, nesting_level=0)
        elif name == TABLE_TAG:
            self._process_table(element)
        elif name == RULE_TAG:
            logger.debug("Skipping <hr>, horizontal rules are not representable")
        elif name == BLOCKQUOTE_TAG:
            self._quote_depth += 1
            try:
                self._process_container(element, name)
            finally:
                self._quote_depth -= 1
        elif name in CONTAINER_TAGS:
            self._process_container(element, name)
        else:
            # Table parts outside a table and similar stray structure
            logger.debug(f"Stray <{name}> outside its parent structure, recursing")
            self._process_children(element)
            self._flush_loose()

    def _process_container(self, element: Tag, name: str) -> None:
        if _has_block_descendant(element):
            self._process_children(element)
            self._flush_loose()
            return
        collected = collect_text(element)
        if collected.text:
            self._emit(collected, map_paragraph_style(name, element.attrs))

    # Block emission

    def _paragraph_style_in_context(self, style: ParagraphStyle) -> ParagraphStyle:
        if self._quote_depth == 0:
            return style
        margin = float(BLOCKQUOTE_INDENT_PT * self._quote_depth)
        return ParagraphStyle(indent_start_pt=margin, indent_first_line_pt=margin).merged(style)

    def _emit(
        self,
        collected: CollectedText,
        paragraph_style: ParagraphStyle,
        list_info: ListMembership | None = None,
        table_info: CellGeometry | None = None,
    ) -> None:
        if list_info is None and table_info is None:
            paragraph_style = self._paragraph_style_in_context(paragraph_style)
        self.blocks.append(
            Block(
                text=collected.text,
                paragraph_style=paragraph_style,
                inline_styles=collected.inline_styles,
                list_info=list_info,
                table_info=table_info,
            )
        )

    def _append_line_break(self) -> None:
        if not self.blocks:
            logger.debug("Ignoring <br> before the first block")
            return
        self.blocks[-1] = self.blocks[-1].with_appended_text("\n")

    # Loose inline content

    def _loose_aggregator(self) -> TextAggregator:
        if self._loose is None:
            self._loose = TextAggregator()
        return self._loose

    def _add_loose_text(self, raw: str) -> None:
        text = normalize_whitespace(raw)
        if not text:
            if raw:
                self._loose_gap = True
            return
        separate = self._loose_gap or raw[0] in HTML_WHITESPACE
        self._loose_aggregator().append(text, separate=separate)
        self._loose_gap = raw[-1] in HTML_WHITESPACE

    def _add_loose_element(self, element: Tag) -> None:
        raw = element.get_text()
        collected = collect_text(element)
        if not collected.text:
            if raw and raw[-1] in HTML_WHITESPACE:
                self._loose_gap = True
            return

        aggregator = self._loose_aggregator()
        separate = self._loose_gap or raw[:1] in HTML_WHITESPACE
        local_start = aggregator.local_length
        aggregator.append(collected.text, separate=separate)
        aggregator.register_styles(local_start, collected.inline_styles)
        self._loose_gap = raw[-1:] in HTML_WHITESPACE

    def _flush_loose(self) -> None:
        aggregator = self._loose
        self._loose = None
        self._loose_gap = False
        if aggregator is None or not aggregator.length:
            return
        ranges = aggregator.formatting_ranges
        text = aggregator.flush()
        intervals = []
        for interval in ranges:
            clamped = interval.clamped(len(text))
            if not clamped.is_empty:
                intervals.append(clamped)
        logger.debug(f"Coalesced loose inline content into one block ({len(text)} chars)")
        self._emit(CollectedText(text=text, inline_styles=tuple(intervals)), map_paragraph_style("p"))

    # Lists

    def _process_list(self, list_element: Tag, nesting_level: int) -> None:
        ordered = tag_name(list_element) == "ol"
        # Every list element is its own counting scope
        self._list_positions[(ordered, nesting_level)] = 0

        for child in list_element.children:
            if isinstance(child, Tag) and tag_name(child) == "li":
                self._flush_loose()
                self._process_list_item(child, ordered, nesting_level)
            elif isinstance(child, Tag) and tag_name(child) in LIST_TAGS:
                # <ul> directly inside <ul>: treat as the previous item's sub-list
                self._flush_loose()
                self._process_list(child, nesting_level + 1)
            else:
                self._visit(child)
        self._flush_loose()

    def _process_list_item(self, item: Tag, ordered: bool, nesting_level: int) -> None:
        scope = (ordered, nesting_level)
        position = self._list_positions.get(scope, 0) + 1
        self._list_positions[scope] = position

        collected = collect_text(item, skip_nested_lists=True)
        self._emit(
            collected,
            map_paragraph_style("li", item.attrs),
            list_info=ListMembership(ordered=ordered, nesting_level=nesting_level, position=position),
        )

        for child in item.children:
            if isinstance(child, Tag) and tag_name(child) in LIST_TAGS:
                self._process_list(child, nesting_level + 1)

    # Tables

    def _table_rows(self, table: Tag) -> list[Tag]:
        rows = []
        for child in table.children:
            if not isinstance(child, Tag):
                continue
            name = tag_name(child)
            if name == ROW_TAG:
                rows.append(child)
            elif name in TABLE_SECTION_TAGS:
                rows.extend(row for row in child.children if isinstance(row, Tag) and tag_name(row) == ROW_TAG)
        return rows

    def _process_table(self, table: Tag) -> None:
        table_index = self._table_count
        self._table_count += 1

        for child in table.children:
            if isinstance(child, Tag) and tag_name(child) == CAPTION_TAG:
                collected = collect_text(child)
                if collected.text:
                    self._emit(collected, map_paragraph_style(CAPTION_TAG, child.attrs))

        row_index = 0
        for row in self._table_rows(table):
            cells = [cell for cell in row.children if isinstance(cell, Tag) and tag_name(cell) in CELL_TAGS]
            if not cells:
                continue
            for column_index, cell in enumerate(cells):
                geometry = CellGeometry(
                    row_index=row_index,
                    column_index=column_index,
                    row_span=_parse_span(cell, "rowspan"),
                    column_span=_parse_span(cell, "colspan"),
                    table_index=table_index,
                )
                self._emit(collect_text(cell), map_paragraph_style(tag_name(cell), cell.attrs), table_info=geometry)
            row_index += 1

        logger.debug(f"Table {table_index}: {row_index} rows")


def extract_blocks(root: Tag) -> list[Block]:
    """
    Produce the ordered Block sequence for a parsed document.

    Args:
        root: A ``BeautifulSoup`` document or any element within one.

    Returns:
        list[Block]: Blocks in document order. Malformed or unknown markup is
        handled best-effort and never raises.
    """
    return BlockExtractor().extract(root)


