"""
Kotlin namer.
"""

from __future__ import annotations

from ...utils import to_camel_case, to_screaming_snake_case, upper_first
from .base import BaseNamer

KOTLIN_RESERVED_KEYWORDS = frozenset(
    {
        "abstract",
        "actual",
        "annotation",
        "as",
        "break",
        "by",
        "catch",
        "class",
        "companion",
        "constructor",
        "continue",
        "crossinline",
        "data",
        "delegate",
        "do",
        "dynamic",
        "else",
        "enum",
        "expect",
        "external",
        "false",
        "field",
        "final",
        "finally",
        "for",
        "fun",
        "get",
        "if",
        "import",
        "in",
        "infix",
        "init",
        "inner",
        "interface",
        "internal",
        "is",
        "lateinit",
        "noinline",
        "null",
        "object",
        "open",
        "operator",
        "out",
        "override",
        "package",
        "private",
        "property",
        "protected",
        "public",
        "reified",
        "return",
        "sealed",
        "set",
        "super",
        "suspend",
        "tailrec",
        "this",
        "throw",
        "true",
        "try",
        "typealias",
        "val",
        "var",
        "vararg",
        "when",
        "where",
        "while",
    }
)


class KotlinNamer(BaseNamer):
    """Names classes, functions, properties and enums for Kotlin.

    Reserved words are kept readable by wrapping them in backticks.
    """

    RESERVED_KEYWORDS = KOTLIN_RESERVED_KEYWORDS
    QUOTE_CHAR = "`"

    def is_reserved(self, name: str) -> bool:
        # Kotlin keywords are case-sensitive: `Class` is a valid identifier
        return name in self.RESERVED_KEYWORDS

    def escape_reserved(self, name: str) -> str:
        return f"`{name}`"

    def with_suffix(self, name: str, counter: int) -> str:
        # `class`_1 is not an identifier; class_1 needs no escaping
        suffixed = f"{name.strip('`')}_{counter}"
        return self.escape_reserved(suffixed) if self.is_reserved(suffixed) else suffixed

    def create_class_name(self, id: str, parts: list[str]) -> str:
        """PascalCase class name, used for regular and data classes."""
        return self.register(id, upper_first(to_camel_case(" ".join(parts))), "classes")

    def create_function_name(self, id: str, parts: list[str]) -> str:
        return self.register(id, to_camel_case(" ".join(parts)), "functions")

    def create_property_name(self, id: str, name: str, class_name: str) -> str:
        return self.register(id, to_camel_case(name), f"properties/{class_name}")

    def create_enum_name(self, id: str, parts: list[str]) -> str:
        return self.register(id, upper_first(to_camel_case(" ".join(parts))), "enums")

    def create_enum_member_name(self, id: str, name: str, enum_name: str) -> str:
        """SCREAMING_SNAKE_CASE enum member, as per Kotlin conventions."""
        return self.register(id, to_screaming_snake_case(name), f"enums/{enum_name}")
