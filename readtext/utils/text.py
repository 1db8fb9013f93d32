"""Text helpers shared by reporting code."""
from __future__ import annotations

from typing import Tuple


def build_span_excerpt(text: str, span: Tuple[int, int], window: int = 12) -> str:
    """Return the spanned text in brackets with up to *window* characters of context.

    Offsets are clipped to the text, so spans left out of bounds still render.
    Ellipses mark context trimmed on either side.
    """

    if window < 0:
        raise ValueError("window must be non-negative")

    length = len(text)
    start = max(0, min(span[0], length))
    end = max(start, min(span[1], length))

    before_start = max(0, start - window)
    after_end = min(length, end + window)

    prefix = "..." if before_start > 0 else ""
    suffix = "..." if after_end < length else ""

    return f"{prefix}{text[before_start:start]}[{text[start:end]}]{text[end:after_end]}{suffix}"


__all__ = ["build_span_excerpt"]
