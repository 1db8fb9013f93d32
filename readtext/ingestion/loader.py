"""Loading serialized text containers from JSON or YAML documents."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

import yaml

from readtext.configuration import BoundsPolicy
from readtext.errors import DocumentParseError, InputValidationError
from readtext.formatting import FormattingSpan, TextWithFormatting
from readtext.utils import LoadedDocument, format_display_path, load_text_document

logger = logging.getLogger("readtext.ingestion.loader")


@dataclass(frozen=True)
class ContainerDocument:
    """Containers built from one document, in document order."""

    source: LoadedDocument
    containers: tuple[TextWithFormatting, ...]

    @property
    def diagnostic_count(self) -> int:
        return sum(len(container.diagnostics) for container in self.containers)


def load_containers(path: Path, *, policy: BoundsPolicy | None = None) -> ContainerDocument:
    """Read *path* and build a ``TextWithFormatting`` for every container in it."""

    document = load_text_document(path, "container document")
    display = format_display_path(path)

    payload = _decode_payload(document, display)

    containers = parse_containers(payload, policy=policy, source=display)
    logger.info(
        "Loaded container document",
        extra={
            "document": display,
            "encoding": document.display_encoding,
            "container_count": len(containers),
        },
    )
    return ContainerDocument(source=document, containers=containers)


def parse_containers(
    payload: object,
    *,
    policy: BoundsPolicy | None = None,
    source: str = "document",
) -> tuple[TextWithFormatting, ...]:
    """Build containers from an already decoded payload.

    The payload may be ``{"containers": [...]}``, a list of containers, or a
    single container mapping.
    """

    resolved_policy = policy or BoundsPolicy()
    entries = _container_entries(payload, source)
    return tuple(
        _build_container(entry, index, resolved_policy, source)
        for index, entry in enumerate(entries, start=1)
    )


def _decode_payload(document: LoadedDocument, display: str) -> object:
    """Parse JSON files with the json module and everything else as YAML."""

    try:
        if document.display_format == "JSON":
            return json.loads(document.text)
        return yaml.safe_load(document.text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentParseError(
            message=f"The container document {display} is not valid {document.display_format}.",
            remediation="Validate the file syntax and retry.",
        ) from exc


def _container_entries(payload: object, source: str) -> Sequence[object]:
    if isinstance(payload, Mapping):
        if "containers" in payload:
            entries = payload["containers"]
            if isinstance(entries, Sequence) and not isinstance(entries, (str, bytes)):
                return entries
            raise DocumentParseError(
                message=f"'containers' in {source} must be a list.",
                remediation="List each container under 'containers' with text and formatting.",
            )
        if "text" in payload:
            return [payload]
    elif isinstance(payload, Sequence) and not isinstance(payload, (str, bytes)):
        return payload

    raise DocumentParseError(
        message=f"The container document {source} does not hold any containers.",
        remediation="Provide a 'containers' list, a list of containers or a single container.",
    )


def _build_container(
    entry: object,
    index: int,
    policy: BoundsPolicy,
    source: str,
) -> TextWithFormatting:
    location = f"container {index} of {source}"
    if not isinstance(entry, Mapping):
        raise DocumentParseError(
            message=f"The {location} must be a mapping.",
            remediation="Give each container 'text' and 'formatting' keys.",
        )

    text = entry.get("text")
    if not isinstance(text, str):
        raise DocumentParseError(
            message=f"The {location} needs a string 'text' value.",
            remediation="Quote the text value if YAML reads it as a number or boolean.",
        )

    raw_spans = entry.get("formatting")
    if raw_spans is None:
        raw_spans = []
    if not isinstance(raw_spans, Sequence) or isinstance(raw_spans, (str, bytes)):
        raise DocumentParseError(
            message=f"'formatting' in the {location} must be a list.",
            remediation="List formatting spans with tag, startIndex, endIndex and attributes.",
        )

    spans: list[FormattingSpan] = []
    for span_index, raw_span in enumerate(raw_spans, start=1):
        try:
            spans.append(FormattingSpan.from_dict(raw_span))
        except InputValidationError as exc:
            raise DocumentParseError(
                message=f"Span {span_index} in the {location} is invalid: {exc.message}",
                remediation=exc.remediation,
            ) from exc

    return TextWithFormatting(text=text, formatting=tuple(spans), policy=policy)


__all__ = ["ContainerDocument", "load_containers", "parse_containers"]
