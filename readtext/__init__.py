"""Readtext: text with inline formatting spans for readability tooling."""
from __future__ import annotations

from .errors import ReadtextError

__all__ = ("__version__", "ReadtextError")

__version__ = "0.1.0"
