"""
Base class for allocating identifiers in a target language.

A namer hands out names per scope: a caller-chosen string such as "types",
"functions", "properties/OrderCompleted" or "enums/Country". Names never
collide within one scope, and registering the same id twice in a scope
returns the name allocated the first time.
"""

from __future__ import annotations

import itertools
import re


class BaseNamer:
    """Base class for language-specific identifier allocation.

    Languages customize it through the class attributes and the
    `is_reserved` / `escape_reserved` / `with_suffix` hooks.
    """

    # Reserved words of the target language, compared lowercased unless
    # a subclass overrides `is_reserved`
    RESERVED_KEYWORDS: frozenset[str] = frozenset()

    # Characters that may not appear in an identifier
    ILLEGAL_CHARS = re.compile(r"[^A-Za-z0-9_]")

    # Quote used by `escape_string`
    QUOTE_CHAR = '"'

    DEFAULT_SCOPE = "default"

    def __init__(self) -> None:
        # scope -> names handed out in that scope
        self._taken: dict[str, set[str]] = {}
        # scope -> caller id -> name
        self._by_id: dict[str, dict[str, str]] = {}

    def sanitize(self, name: str) -> str:
        """
        Turn an arbitrary string into a valid identifier.

        Replaces characters matched by `ILLEGAL_CHARS` with underscores,
        prefixes an underscore when the result would start with a digit,
        and escapes reserved words.
        """
        sanitized = self.ILLEGAL_CHARS.sub("_", name)
        if not sanitized or sanitized[0].isdigit():
            sanitized = f"_{sanitized}"
        if self.is_reserved(sanitized):
            sanitized = self.escape_reserved(sanitized)
        return sanitized

    def is_reserved(self, name: str) -> bool:
        return name.lower() in self.RESERVED_KEYWORDS

    def escape_reserved(self, name: str) -> str:
        """Escape a reserved word; prefixes an underscore by default."""
        return f"_{name}"

    def with_suffix(self, name: str, counter: int) -> str:
        """Disambiguate a taken name with a numeric suffix."""
        return f"{name}_{counter}"

    def lookup(self, id: str, scope: str = DEFAULT_SCOPE) -> str | None:
        """
        Retrieve the name previously registered for an id.

        Args:
            id: The identifier used when registering the name
            scope: The namespace the name was registered in

        Returns:
            The registered name, or None if the id is unknown in that scope
        """
        return self._by_id.get(scope, {}).get(id)

    def register(self, id: str, name: str, scope: str = DEFAULT_SCOPE) -> str:
        """
        Allocate a unique, valid identifier within a scope.

        If the id was already registered in the scope, the same name is
        returned regardless of `name`. Otherwise `name` is sanitized and,
        if taken, suffixed with `_1`, `_2`, ... until it is free.

        Args:
            id: Stable identifier of the symbol being named
            name: The desired, human-readable name
            scope: The namespace for collision detection

        Returns:
            A name unique within `scope`
        """
        existing = self.lookup(id, scope)
        if existing is not None:
            return existing

        taken = self._taken.setdefault(scope, set())

        base_name = self.sanitize(name)
        if self.is_reserved(base_name):
            base_name = self.escape_reserved(base_name)

        final_name = base_name
        for counter in itertools.count(1):
            if final_name not in taken:
                break
            final_name = self.with_suffix(base_name, counter)

        taken.add(final_name)
        self._by_id.setdefault(scope, {})[id] = final_name
        return final_name

    def escape_string(self, value: str) -> str:
        """Return `value` as-is when it is a plain identifier, quoted otherwise."""
        if value and not self.ILLEGAL_CHARS.search(value) and not value[0].isdigit() and not self.is_reserved(value):
            return value
        escaped = value.replace("\\", "\\\\").replace(self.QUOTE_CHAR, "\\" + self.QUOTE_CHAR)
        return f"{self.QUOTE_CHAR}{escaped}{self.QUOTE_CHAR}"

