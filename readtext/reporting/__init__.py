"""Reporting helpers for Readtext CLI output."""
from __future__ import annotations

from .renderer import ReportEnvelope, ReportRenderOptions, render_containers_report

__all__ = [
    "ReportEnvelope",
    "ReportRenderOptions",
    "render_containers_report",
]
