"""Validation utilities for BigText CLI."""

from typing import Any


def validate_character_map(data: Any) -> tuple[bool, str]:
    """Validate raw character map data, e.g. freshly parsed JSON.

    A character map is an object whose keys are single characters and whose values
    are non-empty lists of strings of equal length. All glyphs must share the same
    number of rows.

    Args:
        data: Parsed character map data.

    Returns:
        Tuple[bool, str]: Success status and error message if any.
    """
    if not isinstance(data, dict):
        return False, "Character map must be an object mapping characters to rows"

    heights: set[int] = set()
    for char, rows in data.items():
        if not isinstance(char, str) or len(char) != 1:
            return False, f"Character map keys must be single characters, got {char!r}"

        if not isinstance(rows, list) or not rows or not all(isinstance(row, str) for row in rows):
            return False, f"Glyph for {char!r} must be a non-empty list of strings"

        if len({len(row) for row in rows}) > 1:
            return False, f"Rows of glyph {char!r} must all have the same width"

        heights.add(len(rows))

    if len(heights) > 1:
        return False, f"All glyphs must have the same number of rows, got heights {sorted(heights)}"

    return True, ""
