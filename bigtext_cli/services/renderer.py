"""Rendering of text into large-print blocks.

Each character of a text is looked up in a GlyphTable and the glyphs are merged
row by row: row ``i`` of the block is row ``i`` of every glyph, concatenated in
character order with no separator. Multiple texts are rendered independently and
stacked vertically in input order.
"""

from collections.abc import Iterable
from functools import lru_cache
from loguru import logger

from bigtext_cli.models.glyph import Glyph, RenderedBlock
from bigtext_cli.services.glyph_table import GlyphTable, default_glyph_table


class Renderer:
    """Composes glyphs from a GlyphTable into rendered blocks.

    Characters missing from the table are rendered as the table's blank glyph.
    There is no error path: every text can be rendered.
    """

    def __init__(self, glyph_table: GlyphTable | None = None) -> None:
        self.glyph_table = glyph_table if glyph_table is not None else default_glyph_table()

    def glyphs_for(self, text: str) -> list[Glyph]:
        """Look up the glyph of every character in ``text``, in order."""
        return [self.glyph_table.lookup(char) for char in text]

    def render(self, text: str) -> RenderedBlock:
        """Render one text as a block of ``glyph_table.height`` rows.

        An empty text renders as ``height`` empty rows.
        """
        glyphs = self.glyphs_for(text)

        substituted = sum(1 for char in text if char not in self.glyph_table)
        if substituted:
            logger.debug(f"Rendered {substituted} unsupported character(s) as blank in {text!r}")

        rows = tuple("".join(glyph.rows[i] for glyph in glyphs) for i in range(self.glyph_table.height))
        return RenderedBlock(text=text, rows=rows)

    def render_all(self, texts: Iterable[str]) -> list[RenderedBlock]:
        """Render each text independently, preserving input order."""
        return [self.render(text) for text in texts]

    def render_lines(self, texts: Iterable[str]) -> list[str]:
        """Render texts and stack their rows vertically, first text on top."""
        lines: list[str] = []
        for block in self.render_all(texts):
            lines.extend(block.rows)
        return lines

    def render_text(self, texts: Iterable[str]) -> str:
        """Render texts into a single newline-separated string."""
        return "\n".join(self.render_lines(texts))


@lru_cache(maxsize=1)
def default_renderer() -> Renderer:
    """Return a renderer backed by the default glyph table."""
    return Renderer(default_glyph_table())


def render(text: str) -> RenderedBlock:
    """Render one text with the default glyph table."""
    return default_renderer().render(text)


def render_all(texts: Iterable[str]) -> list[RenderedBlock]:
    """Render several texts with the default glyph table."""
    return default_renderer().render_all(texts)
