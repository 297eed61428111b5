"""Glyph table for BigText CLI.

This module owns the static mapping from character to Glyph. The built-in
character maps live as JSON files next to this package (``bigtext_cli/static``)
and are loaded on demand; custom maps use the same format::

    {"A": [" *** ", "*   *", "*****", "*   *", "*   *"]}

Lookups are total: any character that is not in the table maps to the blank glyph.
"""

import json
from collections import Counter
from collections.abc import Iterator, Mapping, Sequence
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from loguru import logger

from bigtext_cli.models.base import CharacterSet
from bigtext_cli.models.config import DEFAULT_PADDING, RenderConfig
from bigtext_cli.models.glyph import Glyph
from bigtext_cli.utils.validation import validate_character_map


GLYPH_HEIGHT = 5
GLYPH_WIDTH = 5

CharacterMap = dict[str, list[str]]

_static_dir = Path(__file__).parent.parent / "static"


def from_json(map_data: str) -> CharacterMap:
    """Create a character map from a JSON string.

    Raises:
        ValueError: If the JSON is malformed or does not describe a valid map.
    """
    data = json.loads(map_data)

    is_valid, error_msg = validate_character_map(data)
    if not is_valid:
        raise ValueError(f"Invalid character map: {error_msg}")

    return data


def load_character_map(path: str | Path) -> CharacterMap:
    """Load a character map from a JSON file."""
    path = Path(path)
    logger.debug(f"Loading character map from {path}")
    return from_json(path.read_text(encoding="utf-8"))


def _load_builtin(name: str) -> CharacterMap:
    return load_character_map(_static_dir / f"{name}.json")


def ascii_letters() -> CharacterMap:
    """Return a map of the letters A-Z.

    Lowercase letters share the glyph of their uppercase form.
    """
    letters = _load_builtin(CharacterSet.LETTERS)
    letters.update({char.lower(): rows for char, rows in letters.items()})
    return letters


def digits() -> CharacterMap:
    """Return a map of the digits 0-9."""
    return _load_builtin(CharacterSet.DIGITS)


def punctuation() -> CharacterMap:
    """Return a map of the symbols ``! @ # $ % ^ & * ( ) [ ] ; \\ , . ? "``."""
    return _load_builtin(CharacterSet.PUNCTUATION)


def whitespace() -> CharacterMap:
    """Return a map containing only the space character."""
    return _load_builtin(CharacterSet.WHITESPACE)


def printables() -> CharacterMap:
    """Return the union of the letter, digit, punctuation and whitespace maps."""
    character_map: CharacterMap = {}
    character_map.update(ascii_letters())
    character_map.update(digits())
    character_map.update(punctuation())
    character_map.update(whitespace())
    return character_map


def character_map_for(charset: CharacterSet | str) -> CharacterMap:
    """Return the built-in character map for a character set name."""
    builders = {
        CharacterSet.LETTERS: ascii_letters,
        CharacterSet.DIGITS: digits,
        CharacterSet.PUNCTUATION: punctuation,
        CharacterSet.WHITESPACE: whitespace,
        CharacterSet.PRINTABLES: printables,
    }
    return builders[CharacterSet(charset)]()


def _most_common_width(character_map: Mapping[str, Sequence[str]]) -> int:
    widths = Counter(len(rows[0]) for rows in character_map.values())
    return widths.most_common(1)[0][0] if widths else GLYPH_WIDTH


class GlyphTable:
    """Immutable mapping from character to Glyph with a blank fallback.

    Every glyph in the table has the same height. Widths may differ between
    characters, but each glyph is a rectangle. ``padding`` blank columns are added
    to the right of every glyph, including the blank glyph, so that adjacent
    glyphs do not touch when rendered.

    Attributes:
        height (int): Number of rows shared by every glyph.
        padding (int): Blank columns appended to each glyph.
        blank (Glyph): Glyph returned for characters not in the table.
    """

    def __init__(
        self,
        character_map: Mapping[str, Sequence[str]] | None = None,
        padding: int = DEFAULT_PADDING,
        blank_width: int | None = None,
    ) -> None:
        """Build the table from a character map.

        Args:
            character_map: Mapping of single characters to glyph rows. Defaults to
                the printables map.
            padding: Blank columns appended to every glyph.
            blank_width: Width of the blank glyph before padding. Defaults to the most
                common glyph width in the map, or GLYPH_WIDTH for an empty map.

        Raises:
            ValueError: If a key is not a single character, a glyph is not a
                rectangle, or glyph heights differ.
        """
        if padding < 0:
            raise ValueError("Padding must not be negative")

        if character_map is None:
            character_map = printables()

        glyphs: dict[str, Glyph] = {}
        for char, rows in character_map.items():
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Character map keys must be single characters, got {char!r}")
            if isinstance(rows, str):
                raise ValueError(f"Glyph for {char!r} must be a sequence of rows, not a string")
            glyphs[char] = Glyph(rows=tuple(rows)).padded(padding)

        heights = {glyph.height for glyph in glyphs.values()}
        if len(heights) > 1:
            raise ValueError(f"All glyphs must have the same height, got heights {sorted(heights)}")

        if blank_width is None:
            blank_width = _most_common_width(character_map)

        self.height = heights.pop() if heights else GLYPH_HEIGHT
        self.padding = padding
        self.blank = Glyph.blank(self.height, blank_width + padding)
        self._glyphs = MappingProxyType(glyphs)

        logger.debug(f"Glyph table built with {len(glyphs)} characters, height {self.height}")

    def lookup(self, character: str) -> Glyph:
        """Return the glyph for a character, or the blank glyph if it is unsupported."""
        return self._glyphs.get(character, self.blank)

    @property
    def character_map(self) -> Mapping[str, Glyph]:
        """Read-only view of the character to glyph mapping."""
        return self._glyphs

    @property
    def supported_characters(self) -> str:
        """All supported characters as one string, in sorted order."""
        return "".join(sorted(self._glyphs))

    def __contains__(self, character: object) -> bool:
        return character in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)


@lru_cache(maxsize=1)
def default_glyph_table() -> GlyphTable:
    """Return the process-wide glyph table built from the printables map."""
    return GlyphTable()


def glyph_table_from_config(config: RenderConfig) -> GlyphTable:
    """Build the glyph table described by a render configuration.

    Raises:
        OSError: If the character map file cannot be read.
        ValueError: If the character map is invalid.
    """
    if config.character_map_path is not None:
        character_map = load_character_map(config.character_map_path)
    elif config.charset == CharacterSet.PRINTABLES and config.padding == DEFAULT_PADDING:
        return default_glyph_table()
    else:
        character_map = character_map_for(config.charset)

    return GlyphTable(character_map, padding=config.padding)
