"""Character set commands for BigText CLI.

This module provides commands for inspecting the built-in character sets and
individual glyphs.
"""

import click
from pathlib import Path
from tabulate import tabulate

from bigtext_cli.commands.render import glyph_table_options, load_glyph_table
from bigtext_cli.models.base import CharacterSet
from bigtext_cli.models.config import RenderConfig
from bigtext_cli.services.glyph_table import GlyphTable, character_map_for
from bigtext_cli.utils.rich_utils import (
    console,
    print_commands,
    print_glyph_art,
    print_info,
    print_summary_box,
)


@click.command("chars")
def list_characters() -> None:
    """List the built-in character sets and the characters they support."""
    console.print("📋 [bold]Built-in Character Sets[/bold]")
    console.print()

    table_data = []
    for charset in CharacterSet:
        table = GlyphTable(character_map_for(charset))
        characters = table.supported_characters.replace(" ", "␠")
        table_data.append([charset.value, len(table), characters])

    headers = ["Character Set", "Count", "Characters"]
    click.echo(tabulate(table_data, headers=headers, tablefmt="simple"))
    console.print()
    print_commands([("bigtext glyph A", "Show a single glyph")])


@click.command("glyph")
@click.argument("character")
@glyph_table_options
def show_glyph(character: str, charset: str, character_map_path: Path | None, padding: int) -> None:
    """Show the glyph for a single CHARACTER.

    The same --charset, --map and --padding options as the render command select
    the glyph table to inspect.
    """
    if len(character) != 1:
        raise click.BadParameter("Expected exactly one character", param_hint="CHARACTER")

    config = RenderConfig(
        charset=CharacterSet(charset.lower()), character_map_path=character_map_path, padding=padding
    )
    glyph_table = load_glyph_table(config)
    glyph = glyph_table.lookup(character)

    print_glyph_art("\n".join(glyph.rows))

    supported = character in glyph_table
    print_summary_box(
        f"Glyph {character!r}",
        {
            "Supported": "yes" if supported else "no (blank glyph)",
            "Height": str(glyph.height),
            "Width": str(glyph.width),
        },
        style="green" if supported else "yellow",
    )

    if not supported:
        print_info("Unsupported characters are rendered as blank space")
