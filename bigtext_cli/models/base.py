"""Base models for BigText CLI.

This module defines base classes and enums used throughout the BigText CLI models.
"""

from enum import StrEnum
from pydantic import BaseModel, ConfigDict


class CharacterSet(StrEnum):
    """Built-in character maps shipped with BigText.

    Each value names a JSON file under ``bigtext_cli/static`` except PRINTABLES,
    which is the union of all the others.
    """

    LETTERS = "letters"
    DIGITS = "digits"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    PRINTABLES = "printables"


class BaseBigTextModel(BaseModel):
    """Base model with common configuration for all BigText models.

    Models are frozen: glyphs and rendered blocks are defined once and never
    mutated. Whitespace is significant in glyph rows, so strings are never stripped.
    """

    model_config = ConfigDict(
        extra="forbid",  # Forbid extra attributes
        validate_default=True,  # Validate default values
        frozen=True,  # Instances are immutable and hashable
        use_enum_values=True,  # Use enum values for serialization
    )
