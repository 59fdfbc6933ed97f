"""
Contract between the Schema AST and per-language emitters.

A build parses one event schema together with its custom types. Each target
language emission then asks the build for a GeneratorClient, which bundles a
fresh namer with read access to the AST, and walks the tree with a Generator.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..logging_config import get_logger
from .analyzer import CustomTypeResolver
from .config import GeneratorOptions
from .errors import SchemaError
from .naming import BaseNamer, create_namer
from .schema_ast import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    SchemaNode,
    Type,
    UnionNode,
    properties_schema,
    traits_schema,
)

logger = get_logger(__name__)


class AnalyticsCall(str, Enum):
    """Analytics methods a generated client exposes."""

    TRACK = "track"
    IDENTIFY = "identify"
    PAGE = "page"
    SCREEN = "screen"
    GROUP = "group"

    @property
    def section(self) -> str:
        """Top-level event property holding this call's payload."""
        if self in (AnalyticsCall.IDENTIFY, AnalyticsCall.GROUP):
            return "traits"
        return "properties"


@dataclass
class GeneratorClient:
    """What an emitter receives for one target language emission."""

    options: GeneratorOptions
    namer: BaseNamer
    custom_types: Mapping[str, SchemaNode] = field(default_factory=dict)

    def custom_type(self, ref_name: str) -> SchemaNode:
        """Get a registered custom type by id."""
        return self.custom_types[ref_name]

    def type_reference(self, node: SchemaNode) -> str | None:
        """The custom type an emitter should reference instead of inlining `node`.

        None when the node is not a reference or when the target does not
        support custom type definitions.
        """
        if not self.options.def_support or node.ref_name is None:
            return None
        if node.ref_name not in self.custom_types:
            return None
        return node.ref_name

    def resolve(self, node: SchemaNode) -> SchemaNode:
        """The shape behind `node`.

        A `$ref` without a type of its own parses to an Any node; this returns
        the custom type it refers to. Any other node is returned as-is.
        """
        if node.ref_name is None or node.ref_name not in self.custom_types:
            return node
        if isinstance(node, PrimitiveNode) and node.kind == Type.ANY:
            return self.custom_types[node.ref_name]
        return node

    def enum_id(self, node: PrimitiveNode | UnionNode, default_id: str) -> str:
        """Namer id of the enum behind `node`.

        With `unique_enums`, enums holding the same values share one id and
        so one generated name.
        """
        if self.options.unique_enums and node.enum is not None:
            return "enum:" + json.dumps([[type(v).__name__, v] for v in node.enum])
        return default_id


class Generator(ABC):
    """Abstract base class for per-language emitters.

    `traverse` walks a node bottom-up and hands each node, together with the
    results already produced for its children, to the matching hook.
    """

    @abstractmethod
    def generate_primitive(self, client: GeneratorClient, node: PrimitiveNode, path: tuple[str, ...]) -> Any:
        """Produce the emitter context for a primitive node."""

    @abstractmethod
    def generate_array(self, client: GeneratorClient, node: ArrayNode, items: Any, path: tuple[str, ...]) -> Any:
        """Produce the emitter context for an array, given its items' context."""

    @abstractmethod
    def generate_object(self, client: GeneratorClient, node: ObjectNode, properties: list[Any], path: tuple[str, ...]) -> Any:
        """Produce the emitter context for an object, given its properties' contexts."""

    @abstractmethod
    def generate_union(self, client: GeneratorClient, node: UnionNode, members: list[Any], path: tuple[str, ...]) -> Any:
        """Produce the emitter context for a union, given its members' contexts."""

    @abstractmethod
    def generate_reference(self, client: GeneratorClient, node: SchemaNode, ref_name: str, path: tuple[str, ...]) -> Any:
        """Produce the emitter context for a node standing in for a custom type."""

    def traverse(self, client: GeneratorClient, node: SchemaNode, path: tuple[str, ...] = ()) -> Any:
        """
        Walk `node` and its children, dispatching on the node variant.

        Args:
            client: The client of the current emission
            node: Node to generate
            path: Property names leading to `node`, usable as stable namer ids

        Returns:
            Whatever the hooks produce for `node`
        """
        if isinstance(node, ArrayNode):
            items = self.traverse(client, node.items, path + ("items",))
            return self.generate_array(client, node, items, path)

        ref_name = client.type_reference(node)
        if ref_name is not None:
            return self.generate_reference(client, node, ref_name, path)

        target = client.resolve(node)
        if target is not node:
            return self.traverse(client, target, path)

        if isinstance(node, ObjectNode):
            properties = [self.traverse(client, prop, path + (prop.name,)) for prop in node.properties]
            return self.generate_object(client, node, properties, path)
        if isinstance(node, UnionNode):
            members = [self.traverse(client, member, path + (str(i),)) for i, member in enumerate(node.members)]
            return self.generate_union(client, node, members, path)
        if isinstance(node, PrimitiveNode):
            return self.generate_primitive(client, node, path)
        raise TypeError(f"Unknown schema node: {type(node).__name__}")


@dataclass
class Build:
    """One event schema parsed together with its custom types."""

    event_name: str
    schema: SchemaNode
    custom_types: Mapping[str, SchemaNode]
    options: GeneratorOptions

    def properties_schema(self) -> ObjectNode:
        return properties_schema(self.schema)

    def traits_schema(self) -> ObjectNode:
        return traits_schema(self.schema)

    def payload_schema(self, call: AnalyticsCall | str) -> ObjectNode:
        """Schema of the payload section an analytics call sends."""
        if AnalyticsCall(call).section == "traits":
            return self.traits_schema()
        return self.properties_schema()

    def client(self) -> GeneratorClient:
        """Create a client with a new namer; call once per target language emission."""
        return GeneratorClient(
            options=self.options,
            namer=create_namer(self.options.language),
            custom_types=self.custom_types,
        )


def prepare_build(
    raw_event: dict[str, Any],
    event_name: str = "",
    options: GeneratorOptions | None = None,
) -> Build:
    """
    Resolve the custom types of an event schema, then parse the event itself.

    Args:
        raw_event: The event's JSON Schema, as loaded from the tracking plan
        event_name: Name of the event, used as the root name and in custom
            type descriptions
        options: Options of the emission; defaults to GeneratorOptions()

    Returns:
        The Build holding the AST and the custom type registry

    Raises:
        SchemaError: If the schema uses unsupported types or broken references
    """
    if not isinstance(raw_event, dict):
        raise SchemaError(f"Expected the event schema to be an object, got {type(raw_event).__name__}", "#")

    options = options or GeneratorOptions()
    resolver = CustomTypeResolver(raw_event, event_name, options.custom_type_description)

    custom_types = resolver.resolve_all()
    logger.debug("Resolved %d custom type(s) for '%s'", len(custom_types), event_name)

    schema = resolver.parser.parse(raw_event, event_name or None)
    return Build(event_name=event_name, schema=schema, custom_types=custom_types, options=options)
