"""Ingestion of serialized text containers."""
from __future__ import annotations

from .loader import ContainerDocument, load_containers, parse_containers

__all__ = ["ContainerDocument", "load_containers", "parse_containers"]
