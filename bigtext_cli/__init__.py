"""BigText CLI - print text as large ASCII-art glyphs."""

__version__ = "0.1.0"
