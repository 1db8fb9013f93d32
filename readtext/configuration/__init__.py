"""Configuration utilities for Readtext."""
from __future__ import annotations

from .settings import BoundsPolicy, DEFAULT_SETTINGS_PATH, ReadtextSettings, load_settings

__all__ = [
    "BoundsPolicy",
    "DEFAULT_SETTINGS_PATH",
    "ReadtextSettings",
    "load_settings",
]
