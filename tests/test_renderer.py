"""Unit tests for the renderer."""

import pytest
from bigtext_cli.models.glyph import RenderedBlock
from bigtext_cli.services.glyph_table import GlyphTable
from bigtext_cli.services.renderer import Renderer, default_renderer, render, render_all


class TestRenderer:
    """Test cases for Renderer."""

    def test_init_default_table(self, glyph_table):
        """Test the renderer falls back to the default table."""
        assert Renderer().glyph_table is glyph_table

    def test_render_single_character(self, renderer):
        """Test rendering one character gives its padded glyph."""
        block = renderer.render("A")
        assert isinstance(block, RenderedBlock)
        assert block.text == "A"
        assert block.rows == (" ***  ", "*   * ", "***** ", "*   * ", "*   * ")

    def test_render_mixed_text(self, renderer):
        """Test rendering a letter, a digit and a symbol."""
        block = renderer.render("A1?")
        assert block.lines() == [
            " ***      * ****  ",
            "*   *     *     * ",
            "*****     *   **  ",
            "*   *     *       ",
            "*   *     *   *   ",
        ]

    def test_render_hi(self, renderer, glyph_table):
        """Test each row is the concatenation of the H and I glyph rows."""
        block = renderer.render("HI")
        h, i = glyph_table.lookup("H"), glyph_table.lookup("I")
        assert block.height == glyph_table.height
        for index, row in enumerate(block.rows):
            assert row == h.rows[index] + i.rows[index]

    def test_render_digits(self, renderer, glyph_table):
        """Test digit glyphs are concatenated in order."""
        block = renderer.render("123")
        glyphs = [glyph_table.lookup(char) for char in "123"]
        assert block.height == glyph_table.height
        assert block.rows == tuple("".join(g.rows[index] for g in glyphs) for index in range(glyph_table.height))
        assert block.width == 18

    def test_render_mixed_case_and_symbol(self, renderer, glyph_table):
        """Test mixed case letters and the @ symbol."""
        block = renderer.render("By@")
        assert "@" in glyph_table
        assert block.width == 18
        assert block.rows[0] == glyph_table.lookup("B").rows[0] + glyph_table.lookup("Y").rows[0] + " ***  "

    def test_render_unsupported_characters_as_blank(self, renderer, glyph_table):
        """Test unsupported characters silently become blank columns."""
        block = renderer.render("A~A")
        a = glyph_table.lookup("A")
        for index, row in enumerate(block.rows):
            assert row == a.rows[index] + " " * 6 + a.rows[index]

    def test_render_only_unsupported(self, renderer):
        """Test text with no supported characters renders as spaces."""
        block = renderer.render("€€")
        assert block.rows == ("            ",) * 5

    def test_render_empty_text(self, renderer):
        """Test empty text renders as glyph-height empty rows."""
        block = renderer.render("")
        assert block.rows == ("",) * 5
        assert block.width == 0
        assert str(block) == "\n" * 4

    def test_row_length_is_sum_of_glyph_widths(self):
        """Test row length adds up the widths of glyphs of different sizes."""
        table = GlyphTable({".": [" ", "."], "W": ["W W", " W "]}, padding=0, blank_width=2)
        block = Renderer(table).render("W.?W")
        assert block.rows == ("W W   W W", " W .   W ")
        assert all(len(row) == 3 + 1 + 2 + 3 for row in block.rows)

    def test_render_is_idempotent(self, renderer):
        """Test rendering the same text twice gives identical output."""
        assert renderer.render("Hello, World!") == renderer.render("Hello, World!")

    def test_glyphs_for(self, renderer, glyph_table):
        """Test one glyph is looked up per character."""
        glyphs = renderer.glyphs_for("A~")
        assert glyphs == [glyph_table.lookup("A"), glyph_table.blank]
        assert renderer.glyphs_for("") == []

    def test_render_all(self, renderer):
        """Test texts are rendered independently in order."""
        blocks = renderer.render_all(["HI", "123"])
        assert blocks == [renderer.render("HI"), renderer.render("123")]
        assert renderer.render_all([]) == []

    def test_render_lines_stacks_vertically(self, renderer):
        """Test stacked rows equal each block's rows in input order."""
        lines = renderer.render_lines(["HI", "By@"])
        assert lines == renderer.render("HI").lines() + renderer.render("By@").lines()
        assert len(lines) == 10

    def test_render_lines_accepts_generators(self, renderer):
        """Test any iterable of texts can be rendered."""
        lines = renderer.render_lines(text for text in ["A", "B"])
        assert len(lines) == 10

    def test_render_text(self, renderer):
        """Test the combined output joins all rows with newlines."""
        output = renderer.render_text(["A", "1"])
        assert output == "\n".join(renderer.render("A").lines() + renderer.render("1").lines())

    def test_custom_table(self, custom_glyph_table):
        """Test rendering with a custom character map."""
        block = Renderer(custom_glyph_table).render("Hi")
        assert block.rows[0] == "H   H IIIII "
        assert block.rows[2] == "HHHHH   I   "

    def test_empty_table_renders_blank(self):
        """Test an empty table renders every character as the blank glyph."""
        table = GlyphTable({})
        renderer = Renderer(table)
        assert renderer.glyph_table is table
        assert renderer.render("A").rows == ("      ",) * 5
        assert renderer.render("").rows == ("",) * 5


class TestModuleFunctions:
    """Test cases for the module-level render helpers."""

    def test_render(self):
        """Test render uses the default renderer."""
        assert render("HI") == default_renderer().render("HI")

    def test_render_all(self):
        """Test render_all uses the default renderer."""
        assert render_all(["HI", "123"]) == [render("HI"), render("123")]

    @pytest.mark.parametrize("text", ["", "A", "hello world", "~~~"])
    def test_render_height(self, text):
        """Test every rendered block has the glyph height."""
        assert render(text).height == 5
