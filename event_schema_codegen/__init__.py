"""Event Schema Codegen

Turns the JSON Schema of analytics events into a canonical Schema AST and
allocates collision-free identifiers for the emitters of each target
language.
"""

__version__ = "1.0.0"

from .pipeline import (
    AnalyticsCall,
    BaseNamer,
    Build,
    CustomTypeResolver,
    CyclicReferenceError,
    Generator,
    GeneratorClient,
    GeneratorOptions,
    Language,
    MalformedReferenceError,
    SchemaError,
    SchemaParser,
    UnsupportedTypeError,
    create_namer,
    prepare_build,
)

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
