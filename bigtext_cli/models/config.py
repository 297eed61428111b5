"""Configuration models for BigText CLI.

Settings come from command-line options, which fall back to ``BIGTEXT_*``
environment variables. There is no configuration file.
"""

from pathlib import Path
from pydantic import Field

from .base import BaseBigTextModel, CharacterSet


DEFAULT_PADDING = 1


class RenderConfig(BaseBigTextModel):
    """Resolved settings for a render invocation."""

    charset: CharacterSet = Field(default=CharacterSet.PRINTABLES, description="Built-in character map to use")
    character_map_path: Path | None = Field(
        default=None, description="JSON character map file that replaces the built-in map"
    )
    padding: int = Field(default=DEFAULT_PADDING, ge=0, description="Blank columns appended to every glyph")
    label: bool = Field(default=False, description='Print string="TEXT" before each rendered block')
