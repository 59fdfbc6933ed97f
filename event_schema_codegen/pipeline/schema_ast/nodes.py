"""
AST (Abstract Syntax Tree) node definitions for event payload schemas.

The tree is a normalized view of JSON Schema tailored to code generation:
"null" is folded into `is_nullable` instead of being a type, unions and an
explicit Any type are introduced, and only the subset of JSON Schema that
matters to emitters is represented. Nodes are built once by the parser and
treated as read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar

# Note: objects and arrays are never enum members, for simplification purposes.
EnumValue = str | int | float | bool | None

# Keywords copied verbatim from the raw schema onto the node
ADVANCED_KEYWORDS = (
    "format",
    "pattern",
    "maxLength",
    "minLength",
    "maximum",
    "minimum",
    "exclusiveMaximum",
    "exclusiveMinimum",
    "multipleOf",
    "maxItems",
    "minItems",
    "uniqueItems",
)


class Type(Enum):
    """Normalized node kind."""

    ANY = "any"
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"
    UNION = "union"


PRIMITIVE_TYPES = frozenset({Type.ANY, Type.STRING, Type.BOOLEAN, Type.INTEGER, Type.NUMBER})


@dataclass
class SchemaNode:
    """Base class for all AST nodes, holding the shared metadata."""

    # Source property key, empty for anonymous and root nodes
    name: str = ""

    # Naming hint for generators, independent of `name`
    identifier_name: str | None = None

    description: str | None = None
    is_required: bool = False
    is_nullable: bool = False

    # Id of the custom type this node stands in for
    ref_name: str | None = None

    # Advanced keywords (format, pattern, minLength, ...) as found in the source
    keywords: dict[str, Any] = field(default_factory=dict)


@dataclass
class PrimitiveNode(SchemaNode):
    """A string, integer, number, boolean or Any value."""

    kind: Type = Type.ANY
    enum: list[EnumValue] | None = None

    def __post_init__(self) -> None:
        if self.kind not in PRIMITIVE_TYPES:
            raise ValueError(f"{self.kind} is not a primitive type")


@dataclass
class ArrayNode(SchemaNode):
    """A list whose items all follow `items`."""

    kind: ClassVar[Type] = Type.ARRAY

    items: SchemaNode = field(default_factory=PrimitiveNode)


@dataclass
class ObjectNode(SchemaNode):
    """An object with its properties in declaration order."""

    kind: ClassVar[Type] = Type.OBJECT

    properties: list[SchemaNode] = field(default_factory=list)

    # Parsed `$defs`, only populated where the source declared them
    defs: dict[str, SchemaNode] = field(default_factory=dict)

    def get_property(self, name: str) -> SchemaNode | None:
        """Get an immediate child property by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass
class UnionNode(SchemaNode):
    """A value matching any one of `members`."""

    kind: ClassVar[Type] = Type.UNION

    members: list[SchemaNode] = field(default_factory=list)
    enum: list[EnumValue] | None = None


def same_shape(a: SchemaNode, b: SchemaNode) -> bool:
    """Compare two nodes ignoring where they were declared (name and required flag)."""
    return replace(a, name="", is_required=False) == replace(b, name="", is_required=False)


def schema_to_dict(node: SchemaNode) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dictionary, omitting unset metadata."""
    d: dict[str, Any] = {"kind": node.kind.value}
    if node.name:
        d["name"] = node.name
    if node.identifier_name is not None:
        d["identifier_name"] = node.identifier_name
    if node.description is not None:
        d["description"] = node.description
    if node.is_required:
        d["is_required"] = True
    if node.is_nullable:
        d["is_nullable"] = True
    if node.ref_name is not None:
        d["ref_name"] = node.ref_name
    if node.keywords:
        d["keywords"] = dict(node.keywords)

    if isinstance(node, (PrimitiveNode, UnionNode)) and node.enum is not None:
        d["enum"] = list(node.enum)
    if isinstance(node, ArrayNode):
        d["items"] = schema_to_dict(node.items)
    elif isinstance(node, ObjectNode):
        d["properties"] = [schema_to_dict(prop) for prop in node.properties]
        if node.defs:
            d["defs"] = {name: schema_to_dict(def_node) for name, def_node in node.defs.items()}
    elif isinstance(node, UnionNode):
        d["members"] = [schema_to_dict(member) for member in node.members]
    return d
