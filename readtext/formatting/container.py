"""The text-with-formatting entity consumed by readability tooling."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from readtext.configuration import BoundsPolicy
from readtext.formatting.bounds import apply_bounds
from readtext.formatting.models import BoundsDiagnostic, FormattingSpan

logger = logging.getLogger("readtext.formatting")


@dataclass(frozen=True)
class TextWithFormatting:
    """Plain text paired with the inline formatting spans found in its source.

    Span offsets past the end of the text are clamped to its length at
    construction. Each correction is kept in ``diagnostics`` and logged as a
    warning. With the default policy only the first offender per position is
    corrected; later offenders keep their offsets.
    Containers are unhashable, like the spans they hold.
    """

    text: str
    formatting: Tuple[FormattingSpan, ...] = ()
    policy: BoundsPolicy = field(default_factory=BoundsPolicy, repr=False, compare=False)
    diagnostics: Tuple[BoundsDiagnostic, ...] = field(default=(), init=False)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        spans, diagnostics = apply_bounds(self.text, self.formatting, self.policy)
        object.__setattr__(self, "formatting", spans)
        object.__setattr__(self, "diagnostics", diagnostics)

        for diagnostic in diagnostics:
            logger.warning(
                "%s",
                diagnostic.message,
                extra={
                    "span_tag": diagnostic.tag,
                    "span_index": diagnostic.span_index,
                    "position": diagnostic.position,
                    "original_offset": diagnostic.original,
                    "corrected_offset": diagnostic.corrected,
                },
            )

    @property
    def is_within_bounds(self) -> bool:
        """Return True when every span offset lies within ``[0, len(text)]``."""

        length = len(self.text)
        return all(
            0 <= span.start_index <= length and 0 <= span.end_index <= length
            for span in self.formatting
        )


__all__ = ["TextWithFormatting"]
