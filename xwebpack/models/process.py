"""Package manager and child process models."""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class PackageManager(Enum):
    """Dependency installers xwebpack knows how to drive."""
    YARN = "yarnpkg"   # Preferred when available
    NPM = "npm"        # Fallback, or forced with --use-npm

    @property
    def binary(self) -> str:
        return self.value


@dataclass(frozen=True)
class PackageManagerChoice:
    """The installer picked for this run.

    ``online`` only matters for yarn, which gets ``--offline`` when the
    registry cannot be reached.
    """
    manager: PackageManager
    online: bool = True

    @property
    def use_yarn(self) -> bool:
        return self.manager is PackageManager.YARN


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of one external command."""
    exit_code: int
    command: str
    args: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def command_line(self) -> str:
        """Command and arguments as typed, for manual reproduction."""
        return " ".join((self.command,) + tuple(self.args))
