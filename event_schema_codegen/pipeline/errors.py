"""
Errors raised while turning a tracking plan schema into a Schema AST.

All of them are fatal for the build: a partially generated client is worse
than a failed one, so nothing in the pipeline catches these and continues.
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for schema parsing and resolution failures."""

    def __init__(self, message: str, path: str = "", definition: str | None = None):
        self.message = message
        self.path = path
        self.definition = definition
        super().__init__(self._format())

    def _format(self) -> str:
        location = []
        if self.definition is not None:
            location.append(f"definition '{self.definition}'")
        if self.path:
            location.append(f"at {self.path}")
        if not location:
            return self.message
        return f"{self.message} ({', '.join(location)})"


class UnsupportedTypeError(SchemaError):
    """A `type` value outside string/integer/number/boolean/object/array/null."""

    def __init__(self, type_value: object, path: str = "", definition: str | None = None):
        self.type_value = type_value
        super().__init__(f"Unsupported type: {type_value!r}", path, definition)


class MalformedReferenceError(SchemaError):
    """A `$ref` that is not `#/$defs/<id>` or points at an unknown id."""

    def __init__(self, ref: str, reason: str, path: str = "", definition: str | None = None):
        self.ref = ref
        super().__init__(f"Cannot resolve $ref {ref!r}: {reason}", path, definition)


class CyclicReferenceError(SchemaError):
    """A chain of `$ref`s among `$defs` entries that loops back on itself."""

    def __init__(self, cycle: list[str], path: str = ""):
        self.cycle = cycle
        super().__init__(
            "Cyclic $ref between custom types: " + " -> ".join(cycle),
            path,
            cycle[0] if cycle else None,
        )
