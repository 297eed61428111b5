"""Models package for BigText CLI.

This package provides data models for the BigText CLI.
"""

# Base models
from .base import BaseBigTextModel, CharacterSet

# Glyph models
from .glyph import Glyph, RenderedBlock

# Configuration models
from .config import DEFAULT_PADDING, RenderConfig

__all__ = [
    "BaseBigTextModel",
    "CharacterSet",
    "Glyph",
    "RenderedBlock",
    "DEFAULT_PADDING",
    "RenderConfig",
]
