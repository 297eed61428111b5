"""Glyph models for BigText CLI.

A Glyph is the large-print form of a single character: a non-empty, rectangular
sequence of text rows. A RenderedBlock is the output for one input text, built by
concatenating row ``i`` of every glyph in the text.
"""

from pydantic import Field, field_validator

from .base import BaseBigTextModel


class Glyph(BaseBigTextModel):
    """Large-print representation of one character.

    Every row has the same length, so a glyph is always a rectangle of
    ``height`` rows by ``width`` columns.
    """

    rows: tuple[str, ...] = Field(min_length=1, description="Text rows from top to bottom")

    @field_validator("rows")
    @classmethod
    def validate_rows(cls, rows: tuple[str, ...]) -> tuple[str, ...]:
        """Ensure rows form a rectangle and contain no line breaks."""
        if any("\n" in row or "\r" in row for row in rows):
            raise ValueError("Glyph rows must not contain line breaks")

        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError(f"Glyph rows must all have the same width, got widths {sorted(widths)}")

        return rows

    @property
    def height(self) -> int:
        """Number of rows in the glyph."""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Number of columns in every row of the glyph."""
        return len(self.rows[0])

    def padded(self, padding: int) -> "Glyph":
        """Return a copy of the glyph with ``padding`` blank columns added on the right."""
        if padding < 0:
            raise ValueError("Padding must not be negative")
        if padding == 0:
            return self
        return Glyph(rows=tuple(row + " " * padding for row in self.rows))

    @classmethod
    def blank(cls, height: int, width: int) -> "Glyph":
        """Create a glyph of spaces with the given dimensions."""
        return cls(rows=tuple(" " * width for _ in range(height)))


class RenderedBlock(BaseBigTextModel):
    """Multi-row large-print output for one input text."""

    text: str = Field(description="Text the block was rendered from")
    rows: tuple[str, ...] = Field(description="Rendered rows from top to bottom")

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def lines(self) -> list[str]:
        """Return the rows as a list of strings."""
        return list(self.rows)

    def __str__(self) -> str:
        return "\n".join(self.rows)
