#!/usr/bin/env python3
"""xwebpack CLI - scaffold a React + Redux + antd project."""
import asyncio
from typing import List, Optional

import typer
from rich.console import Console

from xwebpack import __version__
from xwebpack.cli_support import (
    ISSUES_URL,
    handle_cli_error,
    print_error,
    print_info,
    print_missing_directory,
    print_success,
)
from xwebpack.core.config import get_config
from xwebpack.core.errors import (
    CloneFailure,
    EnvironmentMismatchError,
    InstallFailure,
    ScaffoldError,
)
from xwebpack.core.logger import get_logger, set_verbose, setup_file_logging
from xwebpack.models.request import ScaffoldRequest
from xwebpack.scaffold.core import ScaffoldPipeline
from xwebpack.services.envinfo import print_environment

PROGRAM = "xwebpack"

app = typer.Typer(
    name=PROGRAM,
    help="""Create a new React + Redux + antd project.

Clones the project template into <project-directory>, stamps its
package.json and installs dependencies with yarn (or npm).
""",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{PROGRAM} {__version__}")
        raise typer.Exit()


def _pick_directory(project_directory: Optional[str], extra: List[str]) -> Optional[str]:
    """First positional value that is not an unrecognised option."""
    candidates = ([project_directory] if project_directory else []) + list(extra)
    for candidate in candidates:
        if candidate.startswith("-"):
            logger.debug(f"Ignoring unknown option {candidate}")
            continue
        if candidate.strip():
            return candidate
    return None


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    epilog=(
        "Only <project-directory> is required.\n\n"
        f"If you have any problems, do not hesitate to file an issue: {ISSUES_URL}"
    ),
)
def create(
    ctx: typer.Context,
    project_directory: Optional[str] = typer.Argument(
        None, metavar="<project-directory>", show_default=False,
        help="Directory to create the project in",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Print additional logs"),
    info: bool = typer.Option(False, "--info", help="Print environment debug info"),
    use_npm: bool = typer.Option(False, "--use-npm", help="Install with npm even if yarn is available"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
):
    """Create a new project in <project-directory>."""
    if info:
        print_environment(console)
        raise typer.Exit(0)

    target = _pick_directory(project_directory, ctx.args)
    if target is None:
        print_missing_directory(err_console, PROGRAM)
        raise typer.Exit(1)

    config = get_config()
    set_verbose(verbose)
    if config.log_file:
        setup_file_logging(log_file=config.log_file, verbose=verbose)

    request = ScaffoldRequest(target_name=target, use_npm=use_npm, verbose=verbose)
    pipeline = ScaffoldPipeline(request, config=config, console=console, err_console=err_console)

    try:
        result = asyncio.run(pipeline.run())
    except EnvironmentMismatchError as exc:
        logger.debug(str(exc))
        raise typer.Exit(1)
    except CloneFailure as exc:
        print_error(err_console, "Failed to clone the template repository, please check your network.")
        err_console.print(f"  [dim]{exc.command_line}[/dim]")
        raise typer.Exit(1)
    except InstallFailure as exc:
        print_error(err_console, "Installing dependencies failed.")
        err_console.print(f"  [dim]{exc.command_line}[/dim]")
        raise typer.Exit(1)
    except ScaffoldError as exc:
        handle_cli_error(exc, err_console, verbose=verbose)

    console.print()
    print_success(console, f"Created {result.paths.app_name} at {result.paths.root}")
    print_info(console, f"cd {target} and start hacking")


def main():
    app()


if __name__ == "__main__":
    main()
