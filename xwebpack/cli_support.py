"""Shared utilities for the xwebpack CLI."""
from __future__ import annotations

import typer
from rich.console import Console

ISSUES_URL = "https://github.com/react-fast-cli/react-fast-cli/issues/new"


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_missing_directory(console: Console, program: str) -> None:
    """Explain how to pass the required project directory."""
    console.print("Please specify the project directory:")
    console.print(f"  [cyan]{program}[/cyan] [green]<project-directory>[/green]")
    console.print()
    console.print("For example:")
    console.print(f"  [cyan]{program}[/cyan] [green]my-react-app[/green]")
    console.print()
    console.print(f"Run [cyan]{program} --help[/cyan] to see all options.")


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting."""
    console.print(f"[red]{prefix}[/red] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting."""
    console.print(f"[cyan]{prefix}[/cyan] {message}")
