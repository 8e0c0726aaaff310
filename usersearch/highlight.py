"""Split text into matched and unmatched spans for a query.

The query is treated as a literal substring: characters such as ``(`` or
``*`` carry no special meaning. Matching is case-insensitive but every span
keeps the casing of the original text, so joining the spans always gives the
input back unchanged.
"""
from __future__ import annotations

from typing import List

from .models import HighlightSpan


def _fold(value: str) -> str:
    # lowercase without changing the length so indices map back onto the text
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in value)


def highlight(text: str, query: str) -> List[HighlightSpan]:
    if not query or not text:
        return [HighlightSpan(text=text, is_match=False)]

    haystack = _fold(text)
    needle = _fold(query)
    spans: List[HighlightSpan] = []
    cursor = 0
    while True:
        found = haystack.find(needle, cursor)
        if found < 0:
            break
        if found > cursor:
            spans.append(HighlightSpan(text=text[cursor:found], is_match=False))
        end = found + len(needle)
        spans.append(HighlightSpan(text=text[found:end], is_match=True))
        cursor = end
    if cursor < len(text):
        spans.append(HighlightSpan(text=text[cursor:], is_match=False))
    return spans
