"""Utility helpers for Readtext."""

from __future__ import annotations

from .io import (
    LoadedDocument,
    format_display_path,
    load_text_document,
    normalize_newlines,
)
from .text import build_span_excerpt

__all__ = [
    "LoadedDocument",
    "build_span_excerpt",
    "format_display_path",
    "load_text_document",
    "normalize_newlines",
]
