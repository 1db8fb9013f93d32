from __future__ import annotations

import pytest

from readtext.utils.text import build_span_excerpt


def test_build_span_excerpt_marks_span_with_context() -> None:
    text = "This text is very strong."

    excerpt = build_span_excerpt(text, (13, 24), window=5)

    assert excerpt == "...t is [very strong]."


def test_build_span_excerpt_clips_out_of_bounds_offsets() -> None:
    excerpt = build_span_excerpt("abc", (9, 12), window=1)

    assert excerpt == "...c[]"


def test_build_span_excerpt_handles_text_start() -> None:
    excerpt = build_span_excerpt("Hello world", (0, 5), window=3)

    assert excerpt == "[Hello] wo..."


def test_build_span_excerpt_rejects_negative_window() -> None:
    with pytest.raises(ValueError):
        build_span_excerpt("sample", (0, 1), window=-1)
