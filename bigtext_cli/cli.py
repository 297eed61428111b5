"""
BigText CLI - Main entry point.

Prints text as large ASCII-art glyphs: one glyph per character, concatenated
horizontally, with one block of rows per argument.
"""

import click
import sys
from loguru import logger
from types import TracebackType
from typing import Any
from bigtext_cli.commands.charset import list_characters, show_glyph
from bigtext_cli.commands.render import render_command
from bigtext_cli.utils.rich_utils import print_ascii_banner, console

# Configure logging
logger.remove()  # Remove default handler
logger.add(
    sys.stderr,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
    level="INFO",
)


def print_version(ctx: click.Context, _: Any, value: bool) -> None:
    """Print version information and exit."""
    if not value or ctx.resilient_parsing:
        return

    from bigtext_cli import __version__

    print_ascii_banner()
    console.print(f"[bright_green bold]Version {__version__}[/bright_green bold]")

    ctx.exit()


@click.group(context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120})
@click.option(
    "--version", is_flag=True, callback=print_version, expose_value=False, is_eager=True, help="Show version and exit"
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging", envvar="BIGTEXT_VERBOSE")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool = False, quiet: bool = False) -> None:
    """
    BigText CLI - Print text as large ASCII-art glyphs

    \b
    QUICK START:
    • Render text:           bigtext render HELLO
    • Several blocks:        bigtext render HELLO WORLD
    • List characters:       bigtext chars
    • Inspect one glyph:     bigtext glyph @

    Use 'bigtext <command> --help' for detailed help on any command.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Configure logging based on flags
    if verbose:
        logger.remove()
        logger.add(
            sys.stderr,
            format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level="DEBUG",
        )
        ctx.obj["verbose"] = True
    elif quiet:
        logger.remove()
        logger.add(sys.stderr, level="ERROR")
        ctx.obj["quiet"] = True


def register_commands() -> None:
    """Register all commands with the main CLI."""
    cli.add_command(render_command, name="render")
    cli.add_command(list_characters, name="chars")
    cli.add_command(show_glyph, name="glyph")


register_commands()


# Global error handler
def handle_exception(
    exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None
) -> None:
    """Global exception handler for better error messages."""
    if issubclass(exc_type, KeyboardInterrupt):
        click.echo("\n⚠️  Operation cancelled by user", err=True)
        sys.exit(1)
    elif issubclass(exc_type, click.ClickException):
        # Let Click handle its own exceptions
        raise exc_value
    else:
        # Log unexpected errors
        logger.error(f"Unexpected error: {exc_value}")
        # Show full traceback in verbose mode (check environment variable)
        import os

        if os.getenv("BIGTEXT_VERBOSE"):
            import traceback

            traceback.print_exception(exc_type, exc_value, exc_traceback)
        else:
            click.echo("❌ An unexpected error occurred. Use --verbose for details.", err=True)
        sys.exit(1)


def main() -> None:
    # Set up global exception handling
    sys.excepthook = handle_exception

    # Run CLI
    cli()
