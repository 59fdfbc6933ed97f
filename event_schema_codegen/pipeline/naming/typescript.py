"""
TypeScript and JavaScript namers.
"""

from __future__ import annotations

import re

from ...utils import to_camel_case, upper_first
from .base import BaseNamer

TS_RESERVED_KEYWORDS = frozenset(
    {
        "abstract",
        "any",
        "as",
        "async",
        "await",
        "boolean",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "constructor",
        "continue",
        "debugger",
        "declare",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "from",
        "function",
        "get",
        "if",
        "implements",
        "import",
        "in",
        "infer",
        "instanceof",
        "interface",
        "is",
        "keyof",
        "let",
        "module",
        "namespace",
        "never",
        "new",
        "null",
        "number",
        "object",
        "package",
        "private",
        "protected",
        "public",
        "readonly",
        "require",
        "return",
        "set",
        "static",
        "string",
        "super",
        "switch",
        "symbol",
        "this",
        "throw",
        "true",
        "try",
        "type",
        "typeof",
        "undefined",
        "unique",
        "unknown",
        "var",
        "void",
        "while",
        "with",
        "yield",
    }
)

# See: https://mathiasbynens.be/notes/reserved-keywords#ecmascript-6
JS_RESERVED_KEYWORDS = frozenset(
    {
        "do", "if", "in", "for", "let", "new", "try", "var", "case", "else", "enum", "eval", "null", "this",
        "true", "void", "with", "await", "break", "catch", "class", "const", "false", "super", "throw",
        "while", "yield", "delete", "export", "import", "public", "return", "static", "switch", "typeof",
        "default", "extends", "finally", "package", "private", "continue", "debugger", "function", "arguments",
        "interface", "protected", "implements", "instanceof",
    }
)  # fmt: skip


class TypeScriptNamer(BaseNamer):
    """Names types, functions, properties and enums for TypeScript."""

    RESERVED_KEYWORDS = TS_RESERVED_KEYWORDS
    QUOTE_CHAR = "'"

    def create_type_name(self, id: str, parts: list[str]) -> str:
        """PascalCase type name, unique among types."""
        return self.register(id, upper_first(to_camel_case(" ".join(parts))), "types")

    def create_function_name(self, id: str, parts: list[str]) -> str:
        """camelCase function name, unique among functions."""
        return self.register(id, to_camel_case(" ".join(parts)), "functions")

    def create_property_name(self, id: str, name: str, type_name: str) -> str:
        """camelCase property name, unique within its containing type."""
        return self.register(id, to_camel_case(name), f"properties/{type_name}")

    def create_enum_name(self, id: str, parts: list[str]) -> str:
        """PascalCase enum name, unique among enums."""
        return self.register(id, upper_first(to_camel_case(" ".join(parts))), "enums")

    def create_enum_member_name(self, id: str, name: str, enum_name: str) -> str:
        """PascalCase enum member name, unique within its enum."""
        return self.register(id, upper_first(to_camel_case(name)), f"enums/{enum_name}")


class JavaScriptNamer(TypeScriptNamer):
    """TypeScript naming rules with the ECMAScript reserved words and `$` allowed."""

    RESERVED_KEYWORDS = JS_RESERVED_KEYWORDS

    # Only a subset of the identifier characters JavaScript accepts
    ILLEGAL_CHARS = re.compile(r"[^A-Za-z0-9_$]")
