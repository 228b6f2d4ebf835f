"""Pure helpers for combining style intervals."""

from __future__ import annotations

from collections.abc import Iterable

from gdocs.models import StyleInterval


def overlaps(a: StyleInterval, b: StyleInterval) -> bool:
    """True when the half-open ranges share at least one character."""
    return a.start < b.end and b.start < a.end


def merge_style_ranges(existing: Iterable[StyleInterval], new: StyleInterval) -> list[StyleInterval]:
    """
    Insert ``new`` into a list of registered ranges, merging on overlap.

    Every existing range overlapping ``new`` is removed and replaced with one
    range covering their union. Styles are combined key-wise in registration
    order, so ``new`` wins on conflicting slots. The result is sorted by start.
    """
    kept: list[StyleInterval] = []
    start, end = new.start, new.end
    style = None
    for interval in existing:
        if overlaps(interval, new):
            start = min(start, interval.start)
            end = max(end, interval.end)
            style = interval.style if style is None else style.merged(interval.style)
        else:
            kept.append(interval)

    merged_style = new.style if style is None else style.merged(new.style)
    kept.append(StyleInterval(start=start, end=end, style=merged_style))
    kept.sort(key=lambda interval: interval.start)
    return kept


def coalesce_identical_ranges(intervals: Iterable[StyleInterval]) -> list[StyleInterval]:
    """Merge intervals with identical start/end into one, keeping first-seen order."""
    range_to_style: dict[tuple[int, int], StyleInterval] = {}
    for interval in intervals:
        key = (interval.start, interval.end)
        if key in range_to_style:
            previous = range_to_style[key]
            range_to_style[key] = StyleInterval(
                start=interval.start, end=interval.end, style=previous.style.merged(interval.style)
            )
        else:
            range_to_style[key] = interval
    return list(range_to_style.values())
