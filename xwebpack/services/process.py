"""Child process execution for git and package manager commands."""
import asyncio
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from xwebpack.core.logger import get_logger
from xwebpack.models.process import ProcessResult

logger = get_logger(__name__)

PathLike = Union[str, Path]

# Exit code reported when the executable could not be started at all
COMMAND_NOT_FOUND = 127


class ProcessRunner:
    """Runs external commands one at a time.

    ``run`` streams the child's output straight to the terminal and is
    awaited until the child exits. ``run_sync`` is for short diagnostic
    queries whose output we need to read.
    """

    async def run(
        self,
        command: str,
        args: Sequence[str],
        cwd: Optional[PathLike] = None,
    ) -> ProcessResult:
        """Spawn command with inherited stdio and wait for it to exit."""
        args = tuple(str(arg) for arg in args)
        logger.debug(f"Running: {command} {' '.join(args)}")

        try:
            process = await asyncio.create_subprocess_exec(
                command,
                *args,
                cwd=str(cwd) if cwd else None,
            )
        except OSError as exc:
            logger.error(f"Could not start {command}: {exc}")
            return ProcessResult(COMMAND_NOT_FOUND, command, args)

        exit_code = await process.wait()
        logger.debug(f"{command} exited with code {exit_code}")
        return ProcessResult(exit_code, command, args)

    def run_sync(
        self,
        command: str,
        args: Sequence[str],
        cwd: Optional[PathLike] = None,
        quiet: bool = False,
    ) -> subprocess.CompletedProcess:
        """Run a short command synchronously.

        Output is captured as text unless ``quiet`` is set, in which case it
        is discarded. Raises OSError when the executable cannot be started.
        """
        cmd = [command] + [str(arg) for arg in args]
        logger.debug(f"Running: {' '.join(cmd)}")

        if quiet:
            return subprocess.run(
                cmd,
                cwd=str(cwd) if cwd else None,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )

        return subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            check=False,
        )
