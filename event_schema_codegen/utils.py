"""
Case conversion helpers shared by the language namers.
"""

import re

# Splits text into words on separators and camelCase / acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def split_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries.

    Examples:
        "first_name" -> ["first", "name"]
        "userID" -> ["user", "ID"]
        "XMLHttpRequest" -> ["XML", "Http", "Request"]
        "2ndEmail" -> ["2", "nd", "Email"]
    """
    if not text:
        return []
    return _WORD_PATTERN.findall(_normalize_separators(text))


def upper_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "Order Completed" -> "OrderCompleted"
    """
    return "".join(word.capitalize() for word in split_words(text))


def to_camel_case(text: str) -> str:
    """Convert text to camelCase ("Order Completed" -> "orderCompleted")."""
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def to_snake_case(text: str) -> str:
    """Convert text to snake_case ("orderID" -> "order_id")."""
    return "_".join(word.lower() for word in split_words(text))


def to_screaming_snake_case(text: str) -> str:
    """Convert text to SCREAMING_SNAKE_CASE ("in progress" -> "IN_PROGRESS")."""
    return "_".join(word.upper() for word in split_words(text))
