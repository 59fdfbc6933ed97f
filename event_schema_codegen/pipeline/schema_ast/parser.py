"""
JSON Schema parser that builds the Schema AST.

Normalizes the `type` keyword into a single node kind, infers nullability,
extracts enums and copies the advanced keywords. A `$ref` contributes its
`ref_name` and never changes the kind or nullability of the referencing node;
when a CustomTypeResolver is attached, every `$ref` must also resolve.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from ...logging_config import get_logger
from ..errors import SchemaError, UnsupportedTypeError
from .nodes import (
    ADVANCED_KEYWORDS,
    ArrayNode,
    EnumValue,
    ObjectNode,
    PrimitiveNode,
    SchemaNode,
    Type,
    UnionNode,
)

if TYPE_CHECKING:
    from ..analyzer.reference_resolver import CustomTypeResolver

logger = get_logger(__name__)

# Raw JSON Schema type names; "null" maps to Any and is folded into nullability
RAW_TYPES = {
    "string": Type.STRING,
    "integer": Type.INTEGER,
    "number": Type.NUMBER,
    "boolean": Type.BOOLEAN,
    "object": Type.OBJECT,
    "array": Type.ARRAY,
    "null": Type.ANY,
}

_DEFS_REF_PATTERN = re.compile(r"^#/\$defs/(.+)$")
_DEFS_PATH_PATTERN = re.compile(r"^#/\$defs/([^/]+)")


def extract_ref_name(ref: str) -> str | None:
    """Extract `<id>` from a `#/$defs/<id>` pointer, None for any other form."""
    match = _DEFS_REF_PATTERN.match(ref)
    return match.group(1) if match else None


def definition_from_path(path: str) -> str | None:
    """Name of the `$defs` entry a schema path lies in, if any."""
    match = _DEFS_PATH_PATTERN.match(path)
    return match.group(1) if match else None


def _is_enum_value(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


class SchemaParser:
    """Parses a raw JSON Schema dictionary into the Schema AST."""

    def __init__(self, resolver: CustomTypeResolver | None = None):
        """
        Initialize the parser.

        Args:
            resolver: Registry used to resolve `$ref`s. When None, references
                are recorded by name only and never followed.
        """
        self.resolver = resolver

    def parse(
        self,
        raw: dict[str, Any],
        name: str | None = None,
        is_required: bool = False,
        path: str = "#",
    ) -> SchemaNode:
        """
        Parse a JSON Schema into an AST node.

        Args:
            raw: The JSON Schema dictionary
            name: Property key of this schema; defaults to its `title`
            is_required: Whether the parent object lists this property as required
            path: Location of `raw` in the source document, used in errors

        Returns:
            The normalized SchemaNode

        Raises:
            UnsupportedTypeError: If `type` holds a value outside the supported set
            MalformedReferenceError: If a `$ref` cannot be resolved (resolver only)
            CyclicReferenceError: If `$ref`s among definitions loop (resolver only)
        """
        if not isinstance(raw, dict):
            raise SchemaError(f"Expected a schema object, got {type(raw).__name__}", path, definition_from_path(path))

        ref = raw.get("$ref")
        if isinstance(ref, str) and self.resolver is not None:
            self.resolver.resolve_ref(ref, path)

        node = self._parse_type_specific_fields(raw, self._get_type(raw, path), path)

        node.name = name or raw.get("title") or ""
        if raw.get("title"):
            node.identifier_name = raw["title"]
        if isinstance(ref, str):
            node.ref_name = extract_ref_name(ref)
        if raw.get("description"):
            node.description = raw["description"]
        if is_required:
            node.is_required = True
        node.is_nullable = self._is_nullable(raw, path)
        node.keywords = self._copy_advanced_keywords(raw)

        return node

    def _parse_type_specific_fields(self, raw: dict[str, Any], kind: Type, path: str) -> SchemaNode:
        """Parse the fields that depend on the node kind, without metadata."""
        if kind == Type.OBJECT:
            return self._parse_object_fields(raw, path)
        if kind == Type.ARRAY:
            return self._parse_array_fields(raw, path)
        if kind == Type.UNION:
            return self._parse_union_fields(raw, path)
        return self._parse_primitive_fields(raw, kind, path)

    def _parse_object_fields(self, raw: dict[str, Any], path: str) -> ObjectNode:
        node = ObjectNode()
        required_fields = set(raw.get("required") or [])

        for prop_name, prop_schema in (raw.get("properties") or {}).items():
            # Boolean schemas (`true` / `false`) carry no shape to generate
            if isinstance(prop_schema, bool):
                continue
            node.properties.append(
                self.parse(
                    prop_schema,
                    prop_name,
                    prop_name in required_fields,
                    f"{path}/properties/{prop_name}",
                )
            )

        for def_name, def_schema in (raw.get("$defs") or {}).items():
            if isinstance(def_schema, bool):
                logger.warning("Skipping boolean $defs entry '%s' at %s", def_name, path)
                continue
            # The root $defs are the resolver's custom types
            if self.resolver is not None and path == "#":
                node.defs[def_name] = self.resolver.resolve(def_name, path)
                continue
            node.defs[def_name] = self.parse(def_schema, def_name, path=f"{path}/$defs/{def_name}")

        return node

    def _parse_array_fields(self, raw: dict[str, Any], path: str) -> ArrayNode:
        items_schema = raw.get("items")
        items_path = f"{path}/items"

        # Boolean item schemas carry no shape and are ignored
        if isinstance(items_schema, list):
            entries = [(f"{items_path}/{i}", item) for i, item in enumerate(items_schema) if isinstance(item, dict)]
        elif isinstance(items_schema, dict):
            entries = [(items_path, items_schema)]
        else:
            entries = []

        if len(entries) == 1:
            item_path, item = entries[0]
            # A referenced item type is recorded on the array itself
            if isinstance(item.get("$ref"), str):
                items = self.parse(item, path=item_path)
                return ArrayNode(items=items, ref_name=items.ref_name)
            if item.get("properties") and "type" not in item:
                # Properties without a type: accept both the object and array shapes
                item = {**item, "type": ["array", "object"]}
            return ArrayNode(items=self._parse_item(item, item_path))

        if len(entries) > 1:
            # Tuple typing is approximated as a union of the positional item types
            return ArrayNode(items=UnionNode(members=[self._parse_item(item, item_path) for item_path, item in entries]))

        return ArrayNode()

    def _parse_item(self, item: dict[str, Any], path: str) -> SchemaNode:
        """Parse an array item; only referenced items keep their metadata."""
        if isinstance(item.get("$ref"), str):
            return self.parse(item, path=path)
        return self._parse_type_specific_fields(item, self._get_type(item, path), path)

    def _parse_union_fields(self, raw: dict[str, Any], path: str) -> UnionNode:
        node = UnionNode()
        for raw_type in self._raw_types(raw, path):
            # For codegen purposes, "null" is not a type of its own
            if raw_type == "null":
                continue
            node.members.append(self._parse_type_specific_fields(raw, RAW_TYPES[raw_type], path))

        node.enum = self._get_enum(raw, path)
        return node

    def _parse_primitive_fields(self, raw: dict[str, Any], kind: Type, path: str) -> PrimitiveNode:
        node = PrimitiveNode(kind=kind, enum=self._get_enum(raw, path))

        # `type: "null"` only admits null, so it is a single-value enum
        if self._raw_types(raw, path) == ["null"]:
            node.enum = [None]

        return node

    def _raw_types(self, raw: dict[str, Any], path: str) -> list[str]:
        """Return the raw `type` values, deduplicated, in declaration order."""
        type_value = raw.get("type")
        if type_value is None:
            return []

        types = [type_value] if isinstance(type_value, str) else type_value
        if not isinstance(types, list):
            raise UnsupportedTypeError(type_value, path, definition_from_path(path))

        for t in types:
            if not isinstance(t, str) or t not in RAW_TYPES:
                raise UnsupportedTypeError(t, path, definition_from_path(path))

        return list(dict.fromkeys(types))

    def _get_type(self, raw: dict[str, Any], path: str) -> Type:
        """Map the raw types to a single node kind."""
        types = [t for t in self._raw_types(raw, path) if t != "null"]

        if not types:
            return Type.ANY
        if len(types) == 1:
            return RAW_TYPES[types[0]]
        return Type.UNION

    def _raw_enum(self, raw: dict[str, Any]) -> list[Any] | None:
        """The enum values as written, with `const` read as a one-value enum."""
        if "enum" in raw:
            values = raw["enum"]
            return values if isinstance(values, list) else [values]
        if "const" in raw:
            return [raw["const"]]
        return None

    def _get_enum(self, raw: dict[str, Any], path: str) -> list[EnumValue] | None:
        """Return the supported enum values, or None when no enum is declared."""
        values = self._raw_enum(raw)
        if values is None:
            return None

        enum: list[EnumValue] = []
        seen: set[tuple[type, Any]] = set()
        dropped = 0
        for value in values:
            if not _is_enum_value(value):
                dropped += 1
                continue
            # Keyed by type so that True and 1 stay distinct members
            key = (type(value), value)
            if key in seen:
                continue
            seen.add(key)
            enum.append(value)

        if dropped:
            logger.warning("Dropped %d object/array enum value(s) at %s", dropped, path)
        if not enum:
            return None
        return enum

    def _is_nullable(self, raw: dict[str, Any], path: str) -> bool:
        """Whether null is an admissible value for this schema."""
        type_allows_null = "null" in self._raw_types(raw, path) or self._get_type(raw, path) == Type.ANY

        values = self._raw_enum(raw)
        enum_allows_null = values is None or any(v is None or v == "null" for v in values)

        return type_allows_null and enum_allows_null

    def _copy_advanced_keywords(self, raw: dict[str, Any]) -> dict[str, Any]:
        return {keyword: raw[keyword] for keyword in ADVANCED_KEYWORDS if keyword in raw}
