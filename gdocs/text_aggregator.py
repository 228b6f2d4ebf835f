"""
Streaming text aggregation.

Coalesces multiple inline fragments into one buffer so they can be inserted
with a single ``insertText`` request. Separator spaces inserted between
fragments shift every later character, so style ranges are registered in
caller-local coordinates (the fragments as appended, without separators) and
translated here.
"""

from __future__ import annotations

import bisect
import logging
import re
from collections.abc import Iterable

from gdocs.intervals import merge_style_ranges
from gdocs.models import StyleInterval, TextStyle

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"[ \t\r\f\n]+")
_NEWLINE_SPLIT = re.compile(r"(\n)")


class TextAggregator:
    """
    Accumulates text fragments and their formatting ranges.

    Attributes:
        start_index: Offset of the buffer's first character in the owning stream.
            Advanced by the buffer length on every ``flush()``.
    """

    def __init__(self, start_index: int = 0, preserve_whitespace: bool = False) -> None:
        self.start_index = start_index
        self.preserve_whitespace = preserve_whitespace
        self._reset()

    def _reset(self) -> None:
        self._buffer: str = ""
        self._local_length: int = 0
        # Caller-local offsets at which a separator space was inserted, ascending
        self._separator_offsets: list[int] = []
        self._ranges: list[StyleInterval] = []
        self._last_char_was_newline: bool = False
        self._is_block_start: bool = True
        self._needs_block_boundary: bool = False
        self._pending_separator: bool = False

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def length(self) -> int:
        return len(self._buffer)

    @property
    def local_length(self) -> int:
        """Characters appended by callers so far, excluding inserted separators."""
        return self._local_length

    @property
    def end_index(self) -> int:
        return self.start_index + len(self._buffer)

    @property
    def formatting_ranges(self) -> list[StyleInterval]:
        """Registered ranges in buffer-absolute offsets, sorted by start."""
        return list(self._ranges)

    def _normalize(self, text: str) -> str:
        if self.preserve_whitespace:
            return text
        segments = []
        for segment in _NEWLINE_SPLIT.split(text):
            if segment == "\n":
                segments.append(segment)
            else:
                segments.append(_WHITESPACE_RUN.sub(" ", segment).strip(" "))
        return "".join(segment for segment in segments if segment)

    def append(self, fragment: str, separate: bool = True) -> None:
        """
        Append one fragment, inserting a separator space when one is pending.

        Args:
            fragment: Raw text; normalized before it is buffered.
            separate: False when the source had no whitespace between the previous
                fragment and this one (``<b>word</b>.``), which suppresses the
                pending separator for this append only.
        """
        if not fragment:
            return

        text = self._normalize(fragment)
        if not text:
            return

        if self._needs_block_boundary and not self._is_block_start:
            self._insert_separator("\n")
            self._last_char_was_newline = True
            self._needs_block_boundary = False
            self._pending_separator = False

        if (
            separate
            and self._pending_separator
            and not self._is_block_start
            and not self._last_char_was_newline
            and not self._buffer.endswith(" ")
            and not text.startswith((" ", "\n"))
        ):
            self._insert_separator(" ")

        self._buffer += text
        self._local_length += len(text)
        self._last_char_was_newline = text.endswith("\n")
        self._is_block_start = False
        self._pending_separator = (
            not self._last_char_was_newline and not self.preserve_whitespace and not text.endswith(" ")
        )

    def _insert_separator(self, separator: str) -> None:
        self._separator_offsets.append(self._local_length)
        self._buffer += separator
        logger.debug(f"Inserted separator {separator!r} at local offset {self._local_length}")

    def mark_block_boundary(self) -> None:
        """Ensure the next appended fragment starts on a new line."""
        if not self._is_block_start and not self._last_char_was_newline:
            self._needs_block_boundary = True

    def trim_trailing_newlines(self) -> None:
        """Remove trailing newlines from the buffer."""
        trimmed = self._buffer.rstrip("\n")
        removed = len(self._buffer) - len(trimmed)
        if removed:
            # Only appended text can end the buffer; separators never trail
            self._local_length -= removed
            self._buffer = trimmed
        self._last_char_was_newline = False
        self._pending_separator = not self.preserve_whitespace

    def to_buffer_offset(self, local_offset: int, inclusive: bool = True) -> int:
        """
        Translate a caller-local offset into a buffer offset.

        A separator inserted at local offset ``p`` sits before the character at
        ``p``. Start offsets (``inclusive``) count it; end offsets do not, so a
        range ending right before a separator never swallows it.
        """
        if inclusive:
            shift = bisect.bisect_right(self._separator_offsets, local_offset)
        else:
            shift = bisect.bisect_left(self._separator_offsets, local_offset)
        return local_offset + shift

    def register_style(self, local_start: int, local_end: int, style: TextStyle) -> None:
        """
        Register a style over caller-local ``[local_start, local_end)``.

        Ranges overlapping an already registered range are merged into one
        entry; the later registration wins on conflicting style slots.
        """
        if local_end <= local_start or style.is_empty():
            return
        start = self.to_buffer_offset(local_start, inclusive=True)
        end = self.to_buffer_offset(local_end, inclusive=False)
        self._ranges = merge_style_ranges(self._ranges, StyleInterval(start=start, end=end, style=style))
        logger.debug(f"Registered style range [{start}, {end}) from local [{local_start}, {local_end})")

    def register_styles(self, local_offset: int, intervals: Iterable[StyleInterval]) -> None:
        """
        Register one fragment's already resolved intervals, shifted by ``local_offset``.

        Nested intervals of a single fragment (bold over a whole span, italic over
        its tail) stay separate entries instead of being merged into one.
        """
        added = 0
        for interval in intervals:
            if interval.is_empty or interval.style.is_empty():
                continue
            start = self.to_buffer_offset(local_offset + interval.start, inclusive=True)
            end = self.to_buffer_offset(local_offset + interval.end, inclusive=False)
            self._ranges.append(StyleInterval(start=start, end=end, style=interval.style))
            added += 1
        if added:
            self._ranges.sort(key=lambda interval: interval.start)
            logger.debug(f"Registered {added} style ranges at local offset {local_offset}")

    def flush(self) -> str:
        """Return the buffer, reset local state and advance ``start_index``."""
        content = self._buffer
        self.start_index += len(content)
        self._reset()
        return content
