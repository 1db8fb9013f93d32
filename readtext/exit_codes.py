"""Shared exit code definitions for Readtext CLI operations."""
from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Deterministic exit codes returned by the CLI."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    INVALID_INPUT = 2
    PARSE_ERROR = 3
    BOUNDS_CORRECTED = 7


__all__ = ["ExitCode"]
