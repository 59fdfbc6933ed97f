"""
Configuration for a generation run.

One GeneratorOptions instance describes a single target language emission;
it is handed to every emitter through the GeneratorClient.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    """Target language of an emitter."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    KOTLIN = "kotlin"
    PYTHON = "python"
    CSHARP = "cs"


@dataclass
class GeneratorOptions:
    """Configuration options for one target language emission."""

    language: Language = Language.TYPESCRIPT

    # Whether emitters may reference custom types by name instead of inlining them
    def_support: bool = True

    # Whether enums with identical values share one generated enum
    unique_enums: bool = False

    # Format string for the description backfilled on custom types without one
    custom_type_description: str = "Custom type for {source}"

    @staticmethod
    def from_dict(d: dict) -> GeneratorOptions:
        """Create options from a dictionary, ignoring unknown keys."""
        options = GeneratorOptions()
        for k, v in d.items():
            if k == "language":
                options.language = Language(v)
            elif hasattr(options, k):
                setattr(options, k, v)
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {
            "language": self.language.value,
            "def_support": self.def_support,
            "unique_enums": self.unique_enums,
            "custom_type_description": self.custom_type_description,
        }
