"""Pytest configuration and common fixtures for BigText CLI tests."""

import json
import pytest
from bigtext_cli.services.glyph_table import GlyphTable, default_glyph_table
from bigtext_cli.services.renderer import Renderer


@pytest.fixture
def glyph_table():
    """Default glyph table built from the printables map."""
    return default_glyph_table()


@pytest.fixture
def renderer(glyph_table):
    """Renderer backed by the default glyph table."""
    return Renderer(glyph_table)


@pytest.fixture
def custom_character_map():
    """Small character map with an H and a lowercase i."""
    return {
        "H": ["H   H", "H   H", "HHHHH", "H   H", "H   H"],
        "i": ["IIIII", "  I  ", "  I  ", "  I  ", "IIIII"],
    }


@pytest.fixture
def custom_glyph_table(custom_character_map):
    """Glyph table built from the custom character map."""
    return GlyphTable(custom_character_map)


@pytest.fixture
def character_map_file(tmp_path, custom_character_map):
    """Custom character map written to a JSON file."""
    path = tmp_path / "font.json"
    path.write_text(json.dumps(custom_character_map), encoding="utf-8")
    return path


@pytest.fixture
def invalid_character_map_file(tmp_path):
    """Character map file whose glyphs have different heights."""
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"A": ["*", "*"], "B": ["*"]}), encoding="utf-8")
    return path


@pytest.fixture
def empty_character_map_file(tmp_path):
    """Character map file with no glyphs."""
    path = tmp_path / "empty.json"
    path.write_text("{}", encoding="utf-8")
    return path
