"""
Python namer.
"""

from __future__ import annotations

import keyword

from ...utils import snake_to_pascal_case, to_screaming_snake_case, to_snake_case
from .base import BaseNamer


class PythonNamer(BaseNamer):
    """Names classes, functions, attributes and enums for Python.

    Keywords get a trailing underscore (`class` -> `class_`), the PEP 8
    convention for names that clash with a keyword.
    """

    RESERVED_KEYWORDS = frozenset(keyword.kwlist) | frozenset(keyword.softkwlist)

    def is_reserved(self, name: str) -> bool:
        return name in self.RESERVED_KEYWORDS

    def escape_reserved(self, name: str) -> str:
        return f"{name}_"

    def create_class_name(self, id: str, parts: list[str]) -> str:
        return self.register(id, snake_to_pascal_case(" ".join(parts)), "classes")

    def create_function_name(self, id: str, parts: list[str]) -> str:
        return self.register(id, to_snake_case(" ".join(parts)), "functions")

    def create_property_name(self, id: str, name: str, class_name: str) -> str:
        return self.register(id, to_snake_case(name), f"properties/{class_name}")

    def create_enum_name(self, id: str, parts: list[str]) -> str:
        return self.register(id, snake_to_pascal_case(" ".join(parts)), "enums")

    def create_enum_member_name(self, id: str, name: str, enum_name: str) -> str:
        return self.register(id, to_screaming_snake_case(name), f"enums/{enum_name}")
