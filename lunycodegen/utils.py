"""Console output helpers for LunyCodeGen.

All user-facing output goes through the module-level Rich ``console`` so it
can be styled consistently and captured in tests.
"""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from lunycodegen import __version__

console = Console()

APP_TITLE = "LunyCodeGen - Luny API Code Generator"


# ---------------------------------------------------------------------------
# Banner / usage
# ---------------------------------------------------------------------------


def print_banner() -> None:
    """Print the application name and version followed by a blank line."""
    console.print(f"[bold]{APP_TITLE}[/bold]")
    console.print(f"Version {__version__}")
    console.print()


def print_usage(parser: argparse.ArgumentParser) -> None:
    """Print the parser's help text.

    Markup, highlighting and wrapping are disabled so literal ``[--input <path>]``
    brackets are printed unchanged.
    """
    console.print(parser.format_help(), markup=False, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_verbose(message: str, enabled: bool) -> None:
    """Print a dim detail line, only when *enabled* (``--verbose``)."""
    if enabled:
        console.print(f"[dim]{escape(message)}[/dim]")
