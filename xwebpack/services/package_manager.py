"""Package manager selection, sanity checks and dependency installation."""
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console

from xwebpack.core.errors import InstallFailure
from xwebpack.core.logger import get_logger
from xwebpack.models.process import (
    PackageManager,
    PackageManagerChoice,
    ProcessResult,
)
from xwebpack.services.process import ProcessRunner

logger = get_logger(__name__)

# `npm config list` prints e.g. "; cwd = /home/me/projects/my-app"
NPM_CWD_PREFIX = "; cwd = "

WINDOWS_AUTORUN_HINT = (
    "[red]On Windows, this can usually be fixed by running:[/red]\n\n"
    "  [cyan]reg[/cyan] delete \"HKCU\\Software\\Microsoft\\Command Processor\" /v AutoRun /f\n"
    "  [cyan]reg[/cyan] delete \"HKLM\\Software\\Microsoft\\Command Processor\" /v AutoRun /f\n\n"
    "[red]Try to run the above two lines in the terminal.[/red]\n"
    "[red]To learn more about this problem, read: "
    "https://blogs.msdn.microsoft.com/oldnewthing/20071121-00/?p=24433/[/red]"
)


def has_yarn(runner: Optional[ProcessRunner] = None) -> bool:
    """Return True if `yarnpkg --version` runs cleanly."""
    runner = runner or ProcessRunner()
    try:
        result = runner.run_sync('yarnpkg', ['--version'], quiet=True)
    except OSError as exc:
        logger.debug(f"yarnpkg not available: {exc}")
        return False
    return result.returncode == 0


def select_package_manager(
    use_npm: bool,
    runner: Optional[ProcessRunner] = None,
) -> PackageManager:
    """Pick yarn when it is installed, unless npm was explicitly requested."""
    if use_npm:
        return PackageManager.NPM
    if has_yarn(runner):
        return PackageManager.YARN
    return PackageManager.NPM


def parse_npm_cwd(output: Optional[str]) -> Optional[Path]:
    """Extract the working directory from `npm config list` output.

    Returns None when the output is missing or has no cwd line.
    """
    if not isinstance(output, str):
        return None

    for line in output.splitlines():
        if line.startswith(NPM_CWD_PREFIX):
            return Path(line[len(NPM_CWD_PREFIX):].rstrip('\r'))
    return None


def check_npm_can_read_cwd(
    root: Path,
    runner: Optional[ProcessRunner] = None,
    console: Optional[Console] = None,
) -> Tuple[bool, Optional[Path]]:
    """Verify that an npm process started in root really runs in root.

    Shell wrappers (e.g. a Windows AutoRun entry) can silently move npm to
    another directory, which would install dependencies in the wrong place.

    Returns:
        Tuple of (ok, reported_directory). ok is False only when npm reports
        a directory and it differs from root.
    """
    runner = runner or ProcessRunner()
    console = console or Console(stderr=True)

    try:
        result = runner.run_sync('npm', ['config', 'list'], cwd=root)
    except OSError as exc:
        logger.debug(f"Could not run npm config list: {exc}")
        return True, None

    output = (result.stdout or "") + (result.stderr or "")
    npm_cwd = parse_npm_cwd(output)
    if npm_cwd is None:
        logger.debug("npm config list did not report a cwd")
        return True, None

    if npm_cwd == Path(root) or npm_cwd.resolve() == Path(root).resolve():
        return True, npm_cwd

    console.print(
        "[red]Could not start an npm process in the right directory.\n\n"
        f"The current directory is: [bold]{root}[/bold]\n"
        f"However, a newly started npm process runs in: [bold]{npm_cwd}[/bold]\n\n"
        "This is probably caused by a misconfigured system terminal shell.[/red]"
    )
    if sys.platform == 'win32':
        console.print(WINDOWS_AUTORUN_HINT)
    return False, npm_cwd


def build_install_command(
    choice: PackageManagerChoice,
    root: Path,
    verbose: bool = False,
) -> Tuple[str, List[str]]:
    """Build the install command line for the chosen package manager.

    yarn:  yarnpkg install [--offline] --cwd <root>
    npm:   npm install --prefix <root> [--verbose]
    """
    args = ['install']
    if choice.use_yarn:
        if not choice.online:
            args.append('--offline')
        args.extend(['--cwd', str(root)])
    else:
        args.extend(['--prefix', str(root)])
        if verbose:
            args.append('--verbose')
    return choice.manager.binary, args


async def install_dependencies(
    choice: PackageManagerChoice,
    root: Path,
    verbose: bool = False,
    runner: Optional[ProcessRunner] = None,
    console: Optional[Console] = None,
) -> ProcessResult:
    """Install the template's dependencies into root.

    Raises:
        InstallFailure: If the package manager exits non-zero
    """
    runner = runner or ProcessRunner()
    console = console or Console()
    command, args = build_install_command(choice, root, verbose)

    if choice.use_yarn and not choice.online:
        console.print("[yellow]You appear to be offline.[/yellow]")
        console.print("[yellow]Falling back to the local yarn cache.[/yellow]")
        console.print()

    logger.info(f"Installing packages with {command}")
    result = await runner.run(command, args)
    if not result.ok:
        raise InstallFailure(result)
    return result
