"""
Pipeline - event schema to Schema AST, plus identifier allocation.

1. Phase 1 (Analyzer): Resolve the custom types declared under `$defs`
2. Phase 2 (Parser): Parse the event schema into the Schema AST
3. Phase 3 (Emitters, external): Walk the AST with a GeneratorClient and
   allocate identifiers through its namer
"""

from __future__ import annotations

from .analyzer import CustomTypeResolver
from .config import GeneratorOptions, Language
from .errors import (
    CyclicReferenceError,
    MalformedReferenceError,
    SchemaError,
    UnsupportedTypeError,
)
from .generator import AnalyticsCall, Build, Generator, GeneratorClient, prepare_build
from .naming import BaseNamer, create_namer
from .schema_ast import SchemaParser

__all__ = [
    "AnalyticsCall",
    "BaseNamer",
    "Build",
    "CustomTypeResolver",
    "CyclicReferenceError",
    "Generator",
    "GeneratorClient",
    "GeneratorOptions",
    "Language",
    "MalformedReferenceError",
    "SchemaError",
    "SchemaParser",
    "UnsupportedTypeError",
    "create_namer",
    "prepare_build",
]
