"""Filesystem helpers for reading container documents."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from readtext.errors import InputValidationError

_PREFERRED_ENCODINGS: tuple[str, ...] = ("utf-8-sig", "cp1252")
_ENCODING_LABELS: dict[str, str] = {
    "utf-8-sig": "UTF-8",
    "cp1252": "Windows-1252",
}
_FORMAT_BY_SUFFIX: dict[str, str] = {
    ".json": "JSON",
    ".yaml": "YAML",
    ".yml": "YAML",
}


@dataclass(frozen=True)
class LoadedDocument:
    """Decoded text of a document on disk plus the encoding that worked."""

    path: Path
    text: str
    encoding: str

    @property
    def display_name(self) -> str:
        return format_display_path(self.path)

    @property
    def display_encoding(self) -> str:
        return _ENCODING_LABELS.get(self.encoding, self.encoding)

    @property
    def display_format(self) -> str:
        """Return JSON or YAML based on the file suffix, YAML when unknown."""

        return _FORMAT_BY_SUFFIX.get(self.path.suffix.lower(), "YAML")


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``."""

    if "\r" not in text:
        return text
    return text.replace("\r\n", "\n").replace("\r", "\n")


def format_display_path(path: Path) -> str:
    """Return the file name, quoted when it contains spaces."""

    name = path.name
    return f'"{name}"' if " " in name else name


def load_text_document(path: Path, description: str) -> LoadedDocument:
    """Read *path* as UTF-8 (BOM optional), falling back to Windows-1252."""

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to read the {description} file {format_display_path(path)}.",
            remediation="Check that the file exists and is readable.",
        ) from exc

    for encoding in _PREFERRED_ENCODINGS:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError:
            continue
        return LoadedDocument(path=path, text=normalize_newlines(text), encoding=encoding)

    # cp1252 leaves a handful of bytes undefined, so decoding can still fail.
    supported = " or ".join(_ENCODING_LABELS[enc] for enc in _PREFERRED_ENCODINGS)
    raise InputValidationError(
        message=f"The {description} file {format_display_path(path)} is not {supported} text.",
        remediation="Re-export the document as UTF-8 and retry.",
    )


__all__ = [
    "LoadedDocument",
    "format_display_path",
    "load_text_document",
    "normalize_newlines",
]
