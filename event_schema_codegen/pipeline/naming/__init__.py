"""
Naming module.

Contains the scoped identifier allocator and its per-language flavours.
"""

from __future__ import annotations

from ..config import Language
from .base import BaseNamer
from .csharp import CSharpNamer
from .kotlin import KotlinNamer
from .python import PythonNamer
from .typescript import JavaScriptNamer, TypeScriptNamer

NAMERS: dict[Language, type[BaseNamer]] = {
    Language.TYPESCRIPT: TypeScriptNamer,
    Language.JAVASCRIPT: JavaScriptNamer,
    Language.KOTLIN: KotlinNamer,
    Language.PYTHON: PythonNamer,
    Language.CSHARP: CSharpNamer,
}


def create_namer(language: Language | str) -> BaseNamer:
    """Create a fresh namer for a target language."""
    return NAMERS[Language(language)]()


__all__ = [
    "BaseNamer",
    "TypeScriptNamer",
    "JavaScriptNamer",
    "KotlinNamer",
    "PythonNamer",
    "CSharpNamer",
    "NAMERS",
    "create_namer",
]
