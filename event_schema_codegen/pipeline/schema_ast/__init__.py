"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions, the parser for JSON Schema and the
event section projections.
"""

from __future__ import annotations

from .events import properties_schema, traits_schema
from .nodes import (
    ADVANCED_KEYWORDS,
    ArrayNode,
    EnumValue,
    ObjectNode,
    PrimitiveNode,
    SchemaNode,
    Type,
    UnionNode,
    same_shape,
    schema_to_dict,
)
from .parser import SchemaParser, extract_ref_name

__all__ = [
    "ADVANCED_KEYWORDS",
    "SchemaNode",
    "PrimitiveNode",
    "ArrayNode",
    "ObjectNode",
    "UnionNode",
    "EnumValue",
    "Type",
    "SchemaParser",
    "extract_ref_name",
    "same_shape",
    "schema_to_dict",
    "properties_schema",
    "traits_schema",
]
