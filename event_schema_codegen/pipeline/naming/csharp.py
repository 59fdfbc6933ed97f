"""
C# namer.
"""

from __future__ import annotations

from ...utils import snake_to_pascal_case
from .base import BaseNamer

# C# reserved keywords that need escaping
CS_RESERVED_KEYWORDS = frozenset(
    {
        "abstract",
        "as",
        "base",
        "bool",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "checked",
        "class",
        "const",
        "continue",
        "decimal",
        "default",
        "delegate",
        "do",
        "double",
        "else",
        "enum",
        "event",
        "explicit",
        "extern",
        "false",
        "finally",
        "fixed",
        "float",
        "for",
        "foreach",
        "goto",
        "if",
        "implicit",
        "in",
        "int",
        "interface",
        "internal",
        "is",
        "lock",
        "long",
        "namespace",
        "new",
        "null",
        "object",
        "operator",
        "out",
        "override",
        "params",
        "private",
        "protected",
        "public",
        "readonly",
        "ref",
        "return",
        "sbyte",
        "sealed",
        "short",
        "sizeof",
        "stackalloc",
        "static",
        "string",
        "struct",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "uint",
        "ulong",
        "unchecked",
        "unsafe",
        "ushort",
        "using",
        "virtual",
        "void",
        "volatile",
        "while",
    }
)


class CSharpNamer(BaseNamer):
    """Names classes, properties, methods and enums for C#.

    Reserved words are escaped with the verbatim identifier prefix `@`.
    """

    RESERVED_KEYWORDS = CS_RESERVED_KEYWORDS

    def escape_reserved(self, name: str) -> str:
        return f"@{name}"

    def create_class_name(self, id: str, parts: list[str]) -> str:
        return self.register(id, snake_to_pascal_case(" ".join(parts)), "classes")

    def create_method_name(self, id: str, parts: list[str]) -> str:
        return self.register(id, snake_to_pascal_case(" ".join(parts)), "methods")

    def create_property_name(self, id: str, name: str, class_name: str) -> str:
        return self.register(id, snake_to_pascal_case(name), f"properties/{class_name}")

    def create_enum_name(self, id: str, parts: list[str]) -> str:
        return self.register(id, snake_to_pascal_case(" ".join(parts)), "enums")

    def create_enum_member_name(self, id: str, name: str, enum_name: str) -> str:
        return self.register(id, snake_to_pascal_case(name), f"enums/{enum_name}")
