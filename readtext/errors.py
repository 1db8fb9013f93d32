"""Domain-specific exception hierarchy for Readtext."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ReadtextError(Exception):
    """Base exception for Readtext errors with optional remediation text."""

    message: str
    remediation: str | None = None

    def __post_init__(self) -> None:  # pragma: no cover - dataclass validation hook
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InputValidationError(ReadtextError):
    """Raised when files, settings or span payloads are invalid or missing."""


class DocumentParseError(ReadtextError):
    """Raised when a container document cannot be parsed."""


__all__ = [
    "ReadtextError",
    "InputValidationError",
    "DocumentParseError",
]
