"""
Analyzer module.

Contains custom type ($defs / $ref) resolution.
"""

from __future__ import annotations

from .reference_resolver import CustomTypeResolver

__all__ = [
    "CustomTypeResolver",
]
