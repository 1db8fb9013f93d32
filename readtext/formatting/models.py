"""Dataclasses describing formatting spans and bounds diagnostics."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Literal, Tuple

from readtext.errors import InputValidationError

Position = Literal["startIndex", "endIndex"]

POSITIONS: Tuple[Position, ...] = ("startIndex", "endIndex")

_POSITION_FIELDS: dict[str, str] = {
    "startIndex": "start_index",
    "endIndex": "end_index",
}


@dataclass(frozen=True)
class FormattingSpan:
    """An inline formatting element (bold text, a link, ...) located by offsets.

    Example, for the HTML ``This text is <strong id="elem-id">very strong</strong>.``
    the span is ``FormattingSpan("strong", 13, 24, {"id": "elem-id"})`` over the
    text ``"This text is very strong."``.

    Spans are unhashable because ``attributes`` is a plain dict.
    """

    tag: str
    start_index: int
    end_index: int
    attributes: Mapping[str, object] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:  # pragma: no cover - simple normalization
        object.__setattr__(self, "attributes", dict(self.attributes))

    def offset(self, position: Position) -> int:
        """Return the offset stored for *position*."""

        return getattr(self, _POSITION_FIELDS[position])

    def with_offset(self, position: Position, value: int) -> FormattingSpan:
        """Return a copy of this span with *position* set to *value*."""

        return replace(self, **{_POSITION_FIELDS[position]: value})

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> FormattingSpan:
        """Build a span from its serialized ``tag/startIndex/endIndex/attributes`` shape."""

        if not isinstance(data, Mapping):
            raise InputValidationError(
                message="Formatting span must be a mapping.",
                remediation="Provide tag, startIndex, endIndex and attributes keys.",
            )

        tag = data.get("tag")
        if not isinstance(tag, str):
            raise InputValidationError(
                message="Formatting span 'tag' must be a string.",
                remediation="Name the formatting kind, e.g. tag: strong.",
            )

        offsets: dict[str, int] = {}
        for position in POSITIONS:
            value = data.get(position)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InputValidationError(
                    message=f"Formatting span '{tag}' requires an integer {position}.",
                    remediation=f"Set {position} to a character offset into the text.",
                )
            offsets[_POSITION_FIELDS[position]] = value

        attributes = data.get("attributes")
        if attributes is None:
            attributes = {}
        if not isinstance(attributes, Mapping):
            raise InputValidationError(
                message=f"Formatting span '{tag}' attributes must be a mapping.",
                remediation="Use name: value pairs under attributes.",
            )

        return cls(tag=tag, attributes=attributes, **offsets)


@dataclass(frozen=True)
class BoundsDiagnostic:
    """Record of a single offset correction applied during construction."""

    tag: str
    position: Position
    span_index: int
    original: int
    corrected: int

    @property
    def message(self) -> str:
        if self.original < self.corrected:
            return (
                f"'{self.tag}' element's {self.position} position smaller than zero. "
                "It has been set to the start of the text instead."
            )
        return (
            f"'{self.tag}' element's {self.position} position larger than text. "
            "It has been set to the end of the text instead."
        )


__all__ = [
    "BoundsDiagnostic",
    "FormattingSpan",
    "POSITIONS",
    "Position",
]
