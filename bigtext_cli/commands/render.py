"""Render command for BigText CLI.

This module provides the command that prints its arguments as large ASCII-art
text, one block per argument, stacked vertically in argument order, along with
the glyph table options shared with the other commands.
"""

import click
import sys
from collections.abc import Callable
from loguru import logger
from pathlib import Path
from typing import Any

from bigtext_cli.models.base import CharacterSet
from bigtext_cli.models.config import DEFAULT_PADDING, RenderConfig
from bigtext_cli.services.glyph_table import GlyphTable, glyph_table_from_config
from bigtext_cli.services.renderer import Renderer
from bigtext_cli.utils.rich_utils import print_error


def glyph_table_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the --charset, --map and --padding options to a command."""
    func = click.option(
        "--padding",
        type=click.IntRange(min=0),
        default=DEFAULT_PADDING,
        show_default=True,
        envvar="BIGTEXT_PADDING",
        help="Blank columns after each glyph",
    )(func)
    func = click.option(
        "--map",
        "character_map_path",
        type=click.Path(dir_okay=False, path_type=Path),
        envvar="BIGTEXT_MAP",
        help="JSON character map that replaces the built-in character set",
    )(func)
    func = click.option(
        "--charset",
        type=click.Choice([charset.value for charset in CharacterSet], case_sensitive=False),
        default=CharacterSet.PRINTABLES.value,
        show_default=True,
        envvar="BIGTEXT_CHARSET",
        help="Built-in character set to render with",
    )(func)
    return func


def load_glyph_table(config: RenderConfig) -> GlyphTable:
    """Build the glyph table for a command, exiting with status 1 if the map is invalid."""
    try:
        return glyph_table_from_config(config)
    except (OSError, ValueError) as e:
        print_error("Failed to load character map", str(e))
        sys.exit(1)


@click.command("render")
@click.argument("texts", nargs=-1, required=True)
@glyph_table_options
@click.option("--label", is_flag=True, help='Print string="TEXT" before each rendered block')
def render_command(
    texts: tuple[str, ...], charset: str, character_map_path: Path | None, padding: int, label: bool
) -> None:
    """Print TEXTS as large ASCII-art text.

    Each argument is rendered on its own block of rows. Characters without a
    glyph are printed as blank space.

    \b
    EXAMPLES:
    • bigtext render HI
    • bigtext render Hello World --label
    • bigtext render 123 --charset digits
    """
    config = RenderConfig(
        charset=CharacterSet(charset.lower()),
        character_map_path=character_map_path,
        padding=padding,
        label=label,
    )

    glyph_table = load_glyph_table(config)
    renderer = Renderer(glyph_table)
    logger.debug(f"Rendering {len(texts)} text(s) with {len(glyph_table)} supported characters")

    for block in renderer.render_all(texts):
        if config.label:
            click.echo(f'string="{block.text}"')
        for row in block.rows:
            click.echo(row)
