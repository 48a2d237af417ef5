"""Environment diagnostics for --info and the node version advisory."""
import platform
import re
from typing import Dict, Optional, Tuple

from rich.console import Console
from rich.table import Table

from xwebpack.core.logger import get_logger
from xwebpack.services.process import ProcessRunner

logger = get_logger(__name__)

# Tools reported by --info, with the flag that prints their version
TOOLS = {
    "node": ["--version"],
    "npm": ["--version"],
    "yarnpkg": ["--version"],
    "git": ["--version"],
}

_VERSION_RE = re.compile(r'(\d+)\.(\d+)(?:\.(\d+))?')


def parse_version(text: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """Pull the first x.y[.z] version out of text, e.g. 'v18.17.1'."""
    if not text:
        return None
    match = _VERSION_RE.search(text)
    if not match:
        return None
    major, minor, patch = match.groups()
    return int(major), int(minor), int(patch or 0)


def tool_version(tool: str, runner: Optional[ProcessRunner] = None) -> Optional[str]:
    """Return the version line printed by tool, or None if unavailable."""
    runner = runner or ProcessRunner()
    try:
        result = runner.run_sync(tool, TOOLS.get(tool, ["--version"]))
    except OSError:
        return None
    if result.returncode != 0:
        return None
    lines = (result.stdout or "").strip().splitlines()
    return lines[0].strip() if lines else None


def collect_environment(runner: Optional[ProcessRunner] = None) -> Dict[str, str]:
    """Gather OS, Python and toolchain versions."""
    info = {
        "OS": f"{platform.system()} {platform.release()}",
        "Python": platform.python_version(),
    }
    for tool in TOOLS:
        info[tool] = tool_version(tool, runner) or "Not Found"
    return info


def print_environment(console: Console, runner: Optional[ProcessRunner] = None) -> None:
    """Print the environment report as a table."""
    table = Table(title="Environment Info")
    table.add_column("Component", style="bright_green", no_wrap=True)
    table.add_column("Version", style="white")

    for component, version in collect_environment(runner).items():
        table.add_row(component, version)

    console.print(table)


def node_version_ok(
    min_version: str,
    runner: Optional[ProcessRunner] = None,
) -> bool:
    """Return False only when node is installed and older than min_version."""
    required = parse_version(min_version)
    current = parse_version(tool_version("node", runner))
    if required is None or current is None:
        return True
    return current >= required
