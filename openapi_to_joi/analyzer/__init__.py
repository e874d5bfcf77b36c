"""
Analyzer module.

Contains component registry and reference resolution.
"""

from __future__ import annotations

from .reference_resolver import ComponentRegistry, ComponentResolver

__all__ = [
    "ComponentRegistry",
    "ComponentResolver",
]
