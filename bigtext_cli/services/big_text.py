"""Stateful printer for large-print text.

``BigText`` keeps a current text and a character map, and writes the rendered
block to any text stream::

    printer = BigText("HI")
    printer.print()
    printer.set_text("420").print()
    print(printer)
"""

import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from bigtext_cli.models.config import DEFAULT_PADDING
from bigtext_cli.models.glyph import Glyph, RenderedBlock
from bigtext_cli.services.glyph_table import GlyphTable, default_glyph_table
from bigtext_cli.services.renderer import Renderer


class BigText:
    """Prints a text in its ASCII-art form.

    When no character map is given the printables map is used. Characters that
    are not in the map print as blank space of the standard glyph width.

    Attributes:
        padding (int): Blank columns appended to every glyph.
    """

    def __init__(
        self,
        text: str = "",
        character_map: Mapping[str, Sequence[str]] | None = None,
        padding: int = DEFAULT_PADDING,
    ) -> None:
        self._text = text
        self.padding = padding
        self._renderer = Renderer(self._build_table(character_map))

    def _build_table(self, character_map: Mapping[str, Sequence[str]] | None) -> GlyphTable:
        if character_map is None and self.padding == DEFAULT_PADDING:
            return default_glyph_table()
        return GlyphTable(character_map, padding=self.padding)

    @property
    def text(self) -> str:
        """The text currently stored."""
        return self._text

    def set_text(self, text: str) -> "BigText":
        """Set the text to print. Returns the printer so calls can be chained."""
        self._text = text
        return self

    @property
    def character_map(self) -> Mapping[str, Glyph]:
        """Character to glyph mapping in use, glyphs already padded."""
        return self._renderer.glyph_table.character_map

    def set_character_map(self, character_map: Mapping[str, Sequence[str]]) -> None:
        """Replace the character map used for printing.

        Raises:
            ValueError: If the map is not a valid character map.
        """
        self._renderer = Renderer(self._build_table(character_map))

    @property
    def supported_characters(self) -> str:
        """All characters that can be printed."""
        return self._renderer.glyph_table.supported_characters

    def render(self) -> RenderedBlock:
        """Render the stored text."""
        return self._renderer.render(self._text)

    def print(self, stream: TextIO | None = None) -> None:
        """Write the rendered text to ``stream``, standard output by default.

        Every row, including the last, is terminated by a newline.
        """
        if stream is None:
            stream = sys.stdout
        stream.write(str(self))

    def __str__(self) -> str:
        return "".join(f"{row}\n" for row in self.render().rows)
