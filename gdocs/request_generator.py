"""
Request generation.

Replays an ordered Block sequence against a single cursor and emits the
range-addressed requests that rebuild it in a Google Doc.

Per block the emission order is::

    [CreateTable]            first cell of a table region only
    InsertText               text + "\\n" at the cursor
    SetParagraphStyle        [start, start + len(text) + 1)
    SetTextStyle ...         one per distinct inline range, clamped to the text
    [SetListBullet ...]      when the preceding list group closes

A list group is closed, emitting one bullet request over the whole run, when
the ordered flag changes, at the first non-list block (before that block's
insert) and at end of stream. Nested items then get an indentation request.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from core.errors import ValidationError
from gdocs.config import ConverterConfig
from gdocs.doc_requests import (
    CreateTable,
    InsertText,
    Request,
    SetListBullet,
    SetParagraphStyle,
    SetTextStyle,
)
from gdocs.intervals import coalesce_identical_ranges
from gdocs.models import Block, StyleInterval

logger = logging.getLogger(__name__)

# Paragraph separator appended to every block on insertion
BLOCK_SEPARATOR = "\n"


@dataclass
class _ListItemSpan:
    start: int
    text_length: int
    nesting_level: int


@dataclass
class _ListGroup:
    start: int
    end: int
    ordered: bool
    items: list[_ListItemSpan] = field(default_factory=list)


def measure_table_regions(blocks: Sequence[Block]) -> dict[int, tuple[int, int]]:
    """
    Size every contiguous table region.

    Returns:
        dict: Position of each region's first cell block -> ``(rows, columns)``,
        where rows is the number of distinct row indices and columns is
        ``max(column_index + column_span)`` over the region.
    """
    regions: dict[int, tuple[int, int]] = {}
    region_start: int | None = None
    rows: set[int] = set()
    columns = 0
    table_index: int | None = None

    def close_region() -> None:
        if region_start is not None:
            regions[region_start] = (len(rows), columns)
            logger.debug(f"Table region at block {region_start}: rows={len(rows)}, columns={columns}")

    for position, block in enumerate(blocks):
        cell = block.table_info
        if cell is None or cell.table_index != table_index:
            close_region()
            region_start = None
            rows = set()
            columns = 0
            table_index = None
        if cell is None:
            continue
        if region_start is None:
            region_start = position
            table_index = cell.table_index
        rows.add(cell.row_index)
        columns = max(columns, cell.column_index + cell.column_span)
    close_region()
    return regions


class RequestGenerator:
    """
    Single-cursor request emitter.

    State is reset at the start of every ``generate()`` call, so one instance can
    be reused sequentially but must not be shared between concurrent compiles.
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config or ConverterConfig()
        self.requests: list[Request] = []
        self.cursor_index: int = 1
        self._list_group: _ListGroup | None = None
        self._table_regions: dict[int, tuple[int, int]] = {}

    def generate(self, blocks: Sequence[Block], start_index: int = 1) -> list[Request]:
        """
        Convert blocks into ordered requests.

        Args:
            blocks: Blocks in document order.
            start_index: Document index of the first insertion. Index 0 is not
                addressable, so this must be at least 1.

        Returns:
            list[Request]: Requests in emission order.
        """
        if isinstance(start_index, bool) or not isinstance(start_index, int) or start_index < 1:
            raise ValidationError(f"start_index must be an integer >= 1, got {start_index!r}")

        self.requests = []
        self.cursor_index = start_index
        self._list_group = None
        self._table_regions = measure_table_regions(blocks)

        for position, block in enumerate(blocks):
            self._process_block(position, block)
        self._close_list_group()

        logger.debug(
            f"Generated {len(self.requests)} requests for {len(blocks)} blocks, "
            f"range=[{start_index}, {self.cursor_index})"
        )
        return self.requests

    def _process_block(self, position: int, block: Block) -> None:
        if not block.is_list_item:
            self._close_list_group()

        block_start = self.cursor_index
        text_length = len(block.text)

        dimensions = self._table_regions.get(position)
        if dimensions is not None:
            rows, columns = dimensions
            self.requests.append(CreateTable(at=block_start, rows=rows, columns=columns))

        self.requests.append(InsertText(at=block_start, text=block.text + BLOCK_SEPARATOR))

        paragraph_style = self.config.paragraph_style_for(block.paragraph_style)
        if not paragraph_style.is_empty():
            self.requests.append(
                SetParagraphStyle(start=block_start, end=block_start + text_length + 1, style=paragraph_style)
            )

        self._emit_text_styles(block, block_start)

        if block.is_list_item:
            self._extend_list_group(block, block_start)

        self.cursor_index = block_start + text_length + 1
        logger.debug(f"Block {position}: [{block_start}, {self.cursor_index}) text={block.text[:40]!r}")

    def _emit_text_styles(self, block: Block, block_start: int) -> None:
        text_length = len(block.text)
        clamped: list[StyleInterval] = []
        for interval in block.inline_styles:
            bounded = interval.clamped(text_length)
            if bounded.is_empty:
                logger.debug(
                    f"Skipping empty style range [{interval.start}, {interval.end}) over {text_length} chars"
                )
                continue
            clamped.append(bounded)

        for interval in coalesce_identical_ranges(clamped):
            style = self.config.text_style_for(interval.style)
            if style.is_empty():
                continue
            self.requests.append(
                SetTextStyle(start=block_start + interval.start, end=block_start + interval.end, style=style)
            )

    def _extend_list_group(self, block: Block, block_start: int) -> None:
        list_info = block.list_info
        group = self._list_group
        if group is not None and group.ordered != list_info.ordered:
            self._close_list_group()
            group = None

        item_end = block_start + len(block.text)
        if group is None:
            group = _ListGroup(start=block_start, end=item_end, ordered=list_info.ordered)
            self._list_group = group
        group.end = item_end
        group.items.append(
            _ListItemSpan(start=block_start, text_length=len(block.text), nesting_level=list_info.nesting_level)
        )

    def _close_list_group(self) -> None:
        group = self._list_group
        if group is None:
            return
        self._list_group = None

        if group.end > group.start:
            self.requests.append(SetListBullet(start=group.start, end=group.end, ordered=group.ordered))
            logger.debug(f"List group closed: ordered={group.ordered}, range=[{group.start}, {group.end})")
        else:
            logger.debug(f"Skipping bullets for empty list group at {group.start}")

        for item in group.items:
            if item.nesting_level == 0:
                continue
            self.requests.append(
                SetParagraphStyle(
                    start=item.start,
                    end=item.start + item.text_length + 1,
                    style=self.config.list_item_indent(item.nesting_level),
                )
            )


def generate_requests(
    blocks: Sequence[Block], start_index: int = 1, config: ConverterConfig | None = None
) -> list[Request]:
    """Convenience wrapper around a fresh :class:`RequestGenerator`."""
    return RequestGenerator(config).generate(blocks, start_index=start_index)
