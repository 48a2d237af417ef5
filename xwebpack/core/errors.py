"""Failures that abort a scaffold run."""
from typing import Optional

from xwebpack.models.process import ProcessResult


class ScaffoldError(Exception):
    """Base class for errors that stop the scaffold pipeline."""


class EnvironmentMismatchError(ScaffoldError):
    """npm would run in a different directory than the one we are scaffolding."""

    def __init__(self, expected, reported):
        self.expected = expected
        self.reported = reported
        super().__init__(
            f"npm reports working directory {reported}, expected {expected}"
        )


class ProcessFailure(ScaffoldError):
    """An external command exited non-zero."""

    action = "run command"

    def __init__(self, result: ProcessResult, message: Optional[str] = None):
        self.result = result
        super().__init__(
            message or f"Failed to {self.action}: {result.command_line} "
                       f"(exit code {result.exit_code})"
        )

    @property
    def command_line(self) -> str:
        return self.result.command_line


class CloneFailure(ProcessFailure):
    """git clone of the template repository failed."""

    action = "clone template"


class InstallFailure(ProcessFailure):
    """The package manager could not install dependencies."""

    action = "install dependencies"


class ManifestError(ScaffoldError):
    """The cloned package.json is missing or malformed."""
