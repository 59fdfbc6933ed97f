"""
Custom type resolver for `$defs` / `$ref` resolution.

Extracts the named, reusable types declared under the root `$defs` and
resolves `#/$defs/<id>` references against them. Definitions are parsed
lazily and memoized, so references may point forward in `$defs` and nested
references are followed transitively; a reference chain that comes back to a
definition still being parsed is reported as a cycle.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from ...logging_config import get_logger
from ..errors import CyclicReferenceError, MalformedReferenceError
from ..schema_ast.nodes import SchemaNode
from ..schema_ast.parser import SchemaParser, extract_ref_name

logger = get_logger(__name__)

DEFAULT_DESCRIPTION = "Custom type for {source}"


class CustomTypeResolver:
    """Resolves `$ref` to the custom types of one tracking plan document.

    A resolver is scoped to a single build: create a new one for every build
    rather than sharing it, since its registry only ever grows.
    """

    def __init__(
        self,
        raw_schema: dict[str, Any],
        source: str = "",
        description_template: str = DEFAULT_DESCRIPTION,
    ):
        """
        Initialize the resolver.

        Args:
            raw_schema: The root JSON Schema holding `$defs`
            source: Human-readable label of the schema owner (e.g. the event
                name), used in backfilled descriptions
            description_template: Format string for backfilled descriptions,
                receiving `source`
        """
        self.raw_schema = raw_schema
        self.source = source
        self.description_template = description_template
        self.definitions: dict[str, Any] = raw_schema.get("$defs") or {}
        self.parser = SchemaParser(resolver=self)
        self._registry: dict[str, SchemaNode] = {}
        self._resolving: list[str] = []

    @property
    def registry(self) -> Mapping[str, SchemaNode]:
        """Read-only view of the custom types resolved so far."""
        return MappingProxyType(self._registry)

    def resolve_all(self) -> Mapping[str, SchemaNode]:
        """
        Resolve every definition in `$defs`, in declaration order.

        Returns:
            Read-only mapping from definition id to parsed Schema
        """
        for def_id in self.definitions:
            if isinstance(self.definitions[def_id], bool):
                logger.warning("Skipping boolean $defs entry '%s'", def_id)
                continue
            self.resolve(def_id)
        return self.registry

    def resolve_ref(self, ref: str, path: str = "") -> SchemaNode:
        """
        Resolve a `$ref` pointer to its custom type.

        Args:
            ref: The pointer, which must have the form `#/$defs/<id>`
            path: Location of the reference, used in errors

        Raises:
            MalformedReferenceError: If the pointer has another form or the id is unknown
            CyclicReferenceError: If resolving the target leads back to itself
        """
        def_id = extract_ref_name(ref)
        if def_id is None:
            raise MalformedReferenceError(
                ref,
                "only local '#/$defs/<id>' references are supported",
                path,
                self._current_definition(),
            )
        if def_id not in self.definitions or isinstance(self.definitions[def_id], bool):
            raise MalformedReferenceError(ref, f"no definition named '{def_id}'", path, self._current_definition())
        return self.resolve(def_id, path)

    def resolve(self, def_id: str, path: str = "") -> SchemaNode:
        """
        Resolve a definition by id, parsing it on first use.

        Args:
            def_id: Key of the definition under `$defs`
            path: Location of the reference that triggered the lookup

        Returns:
            The parsed custom type
        """
        cached = self._registry.get(def_id)
        if cached is not None:
            return cached

        if def_id in self._resolving:
            cycle = self._resolving[self._resolving.index(def_id) :] + [def_id]
            raise CyclicReferenceError(cycle, path)

        if def_id not in self.definitions:
            raise MalformedReferenceError(f"#/$defs/{def_id}", f"no definition named '{def_id}'", path)

        definition = self.definitions[def_id]
        logger.debug("Resolving custom type '%s'", def_id)

        self._resolving.append(def_id)
        try:
            name = None if isinstance(definition, dict) and definition.get("title") else def_id
            node = self.parser.parse(definition, name, path=f"#/$defs/{def_id}")
        finally:
            self._resolving.pop()

        if not node.description:
            node = replace(node, description=self.description_template.format(source=self.source))

        self._registry[def_id] = node
        return node

    def get(self, def_id: str) -> SchemaNode | None:
        """Get an already resolved custom type, without parsing anything."""
        return self._registry.get(def_id)

    def _current_definition(self) -> str | None:
        return self._resolving[-1] if self._resolving else None
