"""Rich utilities for consistent CLI formatting and styling.

This module provides centralized Rich utilities for status messages. Rendered
glyph art is never passed through Rich markup, since glyph rows may contain
square brackets.
"""

from rich.console import Console
from rich.text import Text


# Global console instance for consistent output
console = Console()


def print_error(message: str, details: str | None = None) -> None:
    """Print an error message with consistent styling."""
    text = Text("❌ ", style="red") + Text(message, style="red bold")
    console.print(text)
    if details:
        console.print(Text(f"   {details}", style="dim red"))


def print_info(message: str, details: str | None = None) -> None:
    """Print an info message with consistent styling."""
    text = Text("💡 ", style="blue") + Text(message, style="blue bold")
    console.print(text)
    if details:
        console.print(f"   {details}", style="dim")


def print_section_header(title: str, emoji: str = "📋") -> None:
    """Print a section header with consistent styling."""
    text = Text(f"{emoji} ", style="bright_blue") + Text(title, style="bright_blue bold")
    console.print()
    console.print(text)


def print_glyph_art(art: str, style: str = "bright_blue") -> None:
    """Print glyph art verbatim, with no markup or highlighting."""
    console.print(Text(art, style=style), highlight=False)


def print_ascii_banner(subtitle: str | None = None) -> None:
    """Print the main BigText CLI ASCII art banner."""
    from bigtext_cli.static.banner import banner_ascii

    console.print()
    print_glyph_art(banner_ascii)
    if subtitle:
        console.print(f"[bright_blue bold]   {subtitle}[/bright_blue bold]")
    console.print()


def print_summary_box(title: str, items: dict[str, str], style: str = "green") -> None:
    """Print a summary with key information (clipboard-friendly)."""
    console.print()
    console.print(Text(f"📋 {title}", style=f"{style} bold"))
    console.print("─" * (len(title) + 3), style=style)

    for key, value in items.items():
        console.print(Text.assemble((f"{key}:", "bold"), " ", value))
    console.print()


def print_command(command: str, description: str | None = None) -> None:
    """Print a command that users can copy and run."""
    if description:
        console.print(f"[dim]{description}[/dim]")
    console.print(f"[bold green]$[/bold green] [cyan]{command}[/cyan]")


def print_commands(commands: list[tuple[str, str | None]], title: str | None = None) -> None:
    """Print multiple commands with descriptions."""
    if title:
        print_section_header(title)

    for command, description in commands:
        print_command(command, description)
    console.print()
