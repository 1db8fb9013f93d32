"""Text and inline formatting span models for Readtext."""
from __future__ import annotations

from .bounds import apply_bounds, constrain_to_end, constrain_to_start
from .container import TextWithFormatting
from .models import POSITIONS, BoundsDiagnostic, FormattingSpan, Position

__all__ = [
    "POSITIONS",
    "BoundsDiagnostic",
    "FormattingSpan",
    "Position",
    "TextWithFormatting",
    "apply_bounds",
    "constrain_to_end",
    "constrain_to_start",
]
