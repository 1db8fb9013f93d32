"""Orchestration layer for Readtext."""
from __future__ import annotations

from .runner import ExecutionOutcome, handle_domain_error, run_check

__all__ = [
    "ExecutionOutcome",
    "handle_domain_error",
    "run_check",
]
