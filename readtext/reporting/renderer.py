"""Rendering utilities for text container reports."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from readtext.formatting import FormattingSpan, TextWithFormatting
from readtext.utils.text import build_span_excerpt

_TAG_WIDTH = 12
_OFFSET_WIDTH = 7
_EXCERPT_WIDTH = 44
_ATTRIBUTES_WIDTH = 36
_TEXT_PREVIEW_WIDTH = 60
_TITLE = "Text Containers Report"
_NO_SPANS_PLACEHOLDER = "-- no formatting spans --"
_NO_CONTAINERS_PLACEHOLDER = "-- no containers found --"
_NO_DIAGNOSTICS_PLACEHOLDER = "-- no corrections applied --"


@dataclass(frozen=True)
class ReportRenderOptions:
    """Render-time switches influencing CLI layout."""

    quiet: bool = False
    wide: bool = False


@dataclass(frozen=True)
class ReportEnvelope:
    """Structured data needed to render the containers report."""

    containers: tuple[TextWithFormatting, ...]
    render_options: ReportRenderOptions
    source_display: str | None = None

    @property
    def has_diagnostics(self) -> bool:
        return any(container.diagnostics for container in self.containers)


def render_containers_report(envelope: ReportEnvelope) -> str:
    """Render one span table per container followed by the correction log."""

    options = envelope.render_options
    lines: list[str] = [_TITLE]
    if envelope.source_display:
        lines.append(f"Source: {envelope.source_display}")

    if not envelope.containers:
        lines.append("")
        lines.append(_NO_CONTAINERS_PLACEHOLDER)

    for number, container in enumerate(envelope.containers, start=1):
        if options.quiet and not container.diagnostics and container.is_within_bounds:
            continue
        lines.append("")
        lines.append(_container_heading(number, container))
        lines.extend(_build_table(container, wide=options.wide))
        if not container.is_within_bounds:
            lines.append(_out_of_bounds_note(container))

    lines.append("")
    lines.append("Corrections")
    lines.extend(_diagnostic_lines(envelope.containers))

    if not options.wide:
        lines.append("")
        lines.append("Tip: re-run with --wide to include span attributes.")

    return "\n".join(lines)


def _container_heading(number: int, container: TextWithFormatting) -> str:
    preview = _truncate(_normalize_text(container.text), _TEXT_PREVIEW_WIDTH)
    count = len(container.formatting)
    noun = "span" if count == 1 else "spans"
    return f'Container {number}: "{preview}" ({len(container.text)} chars, {count} {noun})'


def _out_of_bounds_note(container: TextWithFormatting) -> str:
    length = len(container.text)
    offsets = [
        offset for span in container.formatting for offset in (span.start_index, span.end_index)
    ]
    past_end = any(offset > length for offset in offsets)
    before_start = any(offset < 0 for offset in offsets)
    policy = container.policy

    where: list[str] = []
    switches: list[str] = []
    if past_end:
        where.append("past the end of the text")
        switches.append("bounds.clamp_all")
    if before_start:
        where.append("before the start of the text")
        if not policy.clamp_negative:
            switches.append("bounds.clamp_negative")
        elif not policy.clamp_all:
            switches.append("bounds.clamp_all")

    names = " and ".join(dict.fromkeys(switches))
    return f"Note: some spans are still {' and '.join(where)}; set {names} to correct them."


def _build_table(container: TextWithFormatting, *, wide: bool) -> list[str]:
    columns = _table_columns(wide=wide)
    header_line = " | ".join(_pad_text(title.upper(), width) for title, width, _ in columns)
    separator_line = "-+-".join("-" * width for _, width, _ in columns)

    rows = [_format_row(container.text, span, columns) for span in container.formatting]
    if not rows:
        rows = [_pad_text(_NO_SPANS_PLACEHOLDER, sum(width for _, width, _ in columns))]

    return [header_line, separator_line, *rows]


def _table_columns(*, wide: bool) -> Sequence[tuple[str, int, str]]:
    columns: list[tuple[str, int, str]] = [
        ("Tag", _TAG_WIDTH, "left"),
        ("Start", _OFFSET_WIDTH, "right"),
        ("End", _OFFSET_WIDTH, "right"),
        ("Excerpt", _EXCERPT_WIDTH, "left"),
    ]
    if wide:
        columns.append(("Attributes", _ATTRIBUTES_WIDTH, "left"))
    return columns


def _format_row(
    text: str,
    span: FormattingSpan,
    columns: Sequence[tuple[str, int, str]],
) -> str:
    column_map = {
        "Tag": span.tag,
        "Start": str(span.start_index),
        "End": str(span.end_index),
        "Excerpt": build_span_excerpt(text, (span.start_index, span.end_index)),
        "Attributes": _compose_attributes(span.attributes),
    }
    return " | ".join(
        _pad_text(column_map.get(title, ""), width, align=alignment)
        for title, width, alignment in columns
    )


def _diagnostic_lines(containers: Sequence[TextWithFormatting]) -> list[str]:
    lines = [
        f"- container {number}, span {diagnostic.span_index + 1}: {diagnostic.message}"
        for number, container in enumerate(containers, start=1)
        for diagnostic in container.diagnostics
    ]
    return lines or [_NO_DIAGNOSTICS_PLACEHOLDER]


def _compose_attributes(attributes: Mapping[str, object]) -> str:
    pairs = [f"{name}={value}" for name, value in attributes.items()]
    return ", ".join(pairs) or "--"


def _pad_text(value: str, width: int, *, align: str = "left") -> str:
    text = _truncate(_normalize_text(value), width)
    if align == "right":
        return text.rjust(width)
    return text.ljust(width)


def _truncate(value: str, width: int) -> str:
    if len(value) <= width:
        return value
    if width <= 3:
        return value[:width]
    return value[: width - 3] + "..."


def _normalize_text(value: str) -> str:
    return " ".join(str(value).split())


__all__ = [
    "ReportEnvelope",
    "ReportRenderOptions",
    "render_containers_report",
]
