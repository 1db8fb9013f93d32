"""Bounds correction for formatting span offsets."""
from __future__ import annotations

from typing import Callable, Iterable, Tuple

from readtext.configuration import BoundsPolicy
from readtext.formatting.models import POSITIONS, BoundsDiagnostic, FormattingSpan, Position

SpanCorrection = Tuple[Tuple[FormattingSpan, ...], Tuple[BoundsDiagnostic, ...]]


def constrain_to_end(
    text_length: int,
    spans: Iterable[FormattingSpan],
    position: Position,
    *,
    clamp_all: bool = False,
) -> SpanCorrection:
    """Set *position* to *text_length* for spans that run past the end of the text.

    Only the first offending span is corrected unless *clamp_all* is set.
    Corrected spans are new objects; the input spans are left untouched.
    """

    return _constrain(
        spans,
        position,
        limit=text_length,
        offends=lambda value: value > text_length,
        clamp_all=clamp_all,
    )


def constrain_to_start(
    spans: Iterable[FormattingSpan],
    position: Position,
    *,
    clamp_all: bool = False,
) -> SpanCorrection:
    """Set *position* to zero for spans with a negative offset."""

    return _constrain(
        spans,
        position,
        limit=0,
        offends=lambda value: value < 0,
        clamp_all=clamp_all,
    )


def apply_bounds(
    text: str,
    spans: Iterable[FormattingSpan],
    policy: BoundsPolicy,
) -> SpanCorrection:
    """Run the start and end passes for both positions, collecting diagnostics."""

    current = tuple(spans)
    diagnostics: list[BoundsDiagnostic] = []

    for position in POSITIONS:
        current, found = constrain_to_end(
            len(text),
            current,
            position,
            clamp_all=policy.clamp_all,
        )
        diagnostics.extend(found)

        if policy.clamp_negative:
            current, found = constrain_to_start(current, position, clamp_all=policy.clamp_all)
            diagnostics.extend(found)

    return current, tuple(diagnostics)


def _constrain(
    spans: Iterable[FormattingSpan],
    position: Position,
    *,
    limit: int,
    offends: Callable[[int], bool],
    clamp_all: bool,
) -> SpanCorrection:
    corrected = list(spans)
    diagnostics: list[BoundsDiagnostic] = []

    for index, span in enumerate(corrected):
        value = span.offset(position)
        if not offends(value):
            continue

        corrected[index] = span.with_offset(position, limit)
        diagnostics.append(
            BoundsDiagnostic(
                tag=span.tag,
                position=position,
                span_index=index,
                original=value,
                corrected=limit,
            )
        )
        if not clamp_all:
            break

    return tuple(corrected), tuple(diagnostics)


__all__ = ["apply_bounds", "constrain_to_end", "constrain_to_start"]
