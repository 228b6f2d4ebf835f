"""
Interval-tracking text collection for one block-level subtree.

Flattens an element into ``(text, inline_styles)`` where every styled
descendant's interval addresses the *normalized* text: whitespace runs are
collapsed while walking, so offsets recorded on the way down are already final.

Example:
    >>> soup = BeautifulSoup("<p>Nested <b>bold and <i>italic</i></b> text</p>", "html.parser")
    >>> collected = collect_text(soup.p)
    >>> collected.text
    'Nested bold and italic text'
    >>> [(i.start, i.end) for i in collected.inline_styles]
    [(7, 22), (16, 22)]
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from bs4 import CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from gdocs.models import StyleInterval
from gdocs.style_mapper import map_text_style

logger = logging.getLogger(__name__)

# HTML collapses ASCII whitespace only; U+00A0 (&nbsp;) survives as text
HTML_WHITESPACE = " \t\n\r\f"
_WHITESPACE_RUN = re.compile(r"[ \t\n\r\f]+")

PRESERVE_WHITESPACE_TAGS = frozenset({"pre", "textarea", "listing", "plaintext"})
SKIPPED_TAGS = frozenset({"script", "style", "head", "title", "template", "noscript"})
LIST_TAGS = frozenset({"ul", "ol"})
LINE_BREAK_TAG = "br"

# Task list checkboxes render as ballot box characters
CHECKBOX_UNCHECKED = "\u2610"
CHECKBOX_CHECKED = "\u2611"

_IGNORED_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)


def is_text_node(node: object) -> bool:
    """True for character data that contributes to document text."""
    return isinstance(node, NavigableString) and not isinstance(node, _IGNORED_STRINGS)


def tag_name(node: Tag) -> str:
    return (node.name or "").lower()


@dataclass(frozen=True)
class CollectedText:
    """Flattened block text plus block-local style intervals sorted by start."""

    text: str
    inline_styles: tuple[StyleInterval, ...] = field(default_factory=tuple)


class IntervalCollector:
    """
    Single-use collector: one instance walks one subtree.

    Attributes:
        buffer: Normalized text produced so far.
        intervals: Style intervals recorded so far, in completion order (inner first).
    """

    def __init__(self, preserve_whitespace: bool = False) -> None:
        self.buffer: str = ""
        self.intervals: list[StyleInterval] = []
        self._preserve_whitespace = preserve_whitespace

    def collect(self, element: Tag, skip_nested_lists: bool = False) -> CollectedText:
        """
        Flatten ``element`` and everything beneath it.

        Args:
            element: Root of the block-level subtree. Its own style counts too.
            skip_nested_lists: Leave out direct ``ul``/``ol`` children (list items
                emit their sub-lists as separate blocks).
        """
        preserve = self._preserve_whitespace or tag_name(element) in PRESERVE_WHITESPACE_TAGS
        self._walk_element(element, preserve, skip_nested_lists)
        return self._finish(preserve)

    def _walk_element(self, element: Tag, preserve: bool, skip_nested_lists: bool) -> None:
        start = len(self.buffer)
        for child in element.children:
            self._visit(child, preserve, skip_nested_lists)
        self._record(element, start)

    def _visit(self, node: object, preserve: bool, skip_nested_lists: bool) -> None:
        if isinstance(node, Tag):
            name = tag_name(node)
            if name == LINE_BREAK_TAG:
                # A collapsed space never dangles before a line break
                if not preserve and self.buffer.endswith(" "):
                    self.buffer = self.buffer[:-1]
                self.buffer += "\n"
            elif name in SKIPPED_TAGS:
                return
            elif name == "input" and str(node.get("type", "")).lower() == "checkbox":
                box = CHECKBOX_CHECKED if node.has_attr("checked") else CHECKBOX_UNCHECKED
                self._append_text(box + " ", preserve)
            elif skip_nested_lists and name in LIST_TAGS:
                return
            else:
                self._walk_element(node, preserve or name in PRESERVE_WHITESPACE_TAGS, False)
        elif is_text_node(node):
            self._append_text(str(node), preserve)

    def _append_text(self, raw: str, preserve: bool) -> None:
        if preserve:
            self.buffer += raw
            return
        text = _WHITESPACE_RUN.sub(" ", raw)
        if text.startswith(" ") and (not self.buffer or self.buffer[-1] in HTML_WHITESPACE):
            text = text[1:]
        self.buffer += text

    def _record(self, element: Tag, start: int) -> None:
        style = map_text_style(element.name, element.attrs)
        if style.is_empty():
            return

        produced = self.buffer[start:]
        content = produced.strip(HTML_WHITESPACE)
        if not content:
            logger.debug(f"Dropped zero-width style on <{element.name}> at offset {start}")
            return

        leading = len(produced) - len(produced.lstrip(HTML_WHITESPACE))
        interval_start = start + leading
        self.intervals.append(StyleInterval(start=interval_start, end=interval_start + len(content), style=style))

    def _finish(self, preserve: bool) -> CollectedText:
        # Explicit <br> newlines survive; dangling spaces do not
        text = self.buffer.rstrip(HTML_WHITESPACE) if preserve else self.buffer.rstrip(" \t\r\f")

        intervals = []
        for interval in self.intervals:
            clamped = interval.clamped(len(text))
            if clamped.is_empty:
                continue
            intervals.append(clamped)
        intervals.sort(key=lambda interval: interval.start)

        return CollectedText(text=text, inline_styles=tuple(intervals))


def collect_text(element: Tag, *, skip_nested_lists: bool = False, preserve_whitespace: bool = False) -> CollectedText:
    """Flatten one block-level subtree into text plus block-local style intervals."""
    return IntervalCollector(preserve_whitespace=preserve_whitespace).collect(
        element, skip_nested_lists=skip_nested_lists
    )


def normalize_whitespace(text: str) -> str:
    """Collapse ASCII whitespace runs to single spaces and trim both ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip(" ")
