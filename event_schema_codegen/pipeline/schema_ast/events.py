"""
Projections over a parsed analytics event.

An event schema is an object whose top-level properties mirror the payload of
an analytics call (`properties`, `traits`, `context`, ...). Emitters mostly
care about one of those sections, which these helpers extract.
"""

from __future__ import annotations

from dataclasses import replace

from .nodes import ObjectNode, SchemaNode


def _find_object(node: SchemaNode, name: str) -> ObjectNode | None:
    if not isinstance(node, ObjectNode):
        return None
    prop = node.get_property(name)
    return prop if isinstance(prop, ObjectNode) else None


def properties_schema(event: SchemaNode) -> ObjectNode:
    """
    Extract the schema of `.properties` from an event schema.

    Defaults to an empty object when the event declares no `properties`
    object. The event's `defs` are carried over, and the name and description
    come from the event so the result can back a generated interface.
    """
    properties = _find_object(event, "properties") or ObjectNode()
    defs = event.defs if isinstance(event, ObjectNode) else {}

    return replace(
        properties,
        name=event.name,
        description=event.description,
        is_required=any(prop.is_required for prop in properties.properties),
        is_nullable=False,
        defs=defs,
    )


def traits_schema(event: SchemaNode) -> ObjectNode:
    """
    Extract the schema of `.traits` from an event schema.

    Falls back to `.context.traits` when there is no top-level `traits`
    object, then to an empty object.
    """
    traits = _find_object(event, "traits")
    if traits is None:
        context = _find_object(event, "context")
        if context is not None:
            traits = _find_object(context, "traits")

    return replace(
        traits or ObjectNode(),
        name=event.name,
        description=event.description,
        is_required=traits.is_required if traits is not None else False,
        is_nullable=False,
    )
