"""Template repository cloning."""
from pathlib import Path
from typing import Optional

from rich.console import Console

from xwebpack.core.config import get_config
from xwebpack.core.errors import CloneFailure
from xwebpack.core.logger import get_logger
from xwebpack.models.process import ProcessResult
from xwebpack.services.process import ProcessRunner

logger = get_logger(__name__)


class GitManager:
    """Manages the git side of scaffolding."""

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        console: Optional[Console] = None,
        template_repository: Optional[str] = None,
    ):
        self.runner = runner or ProcessRunner()
        self.console = console or Console()
        self.template_repository = template_repository or get_config().template_repository

    async def clone_template(self, root: Path) -> ProcessResult:
        """Clone the template repository into root.

        git's own progress goes straight to the terminal while a spinner runs.

        Args:
            root: Absolute directory to clone into

        Returns:
            ProcessResult of the successful clone

        Raises:
            CloneFailure: If git exits non-zero or cannot be started
        """
        args = ['clone', self.template_repository, str(root)]
        logger.debug(f"Cloning {self.template_repository} to {root}")

        with self.console.status("[cyan]Cloning template...[/cyan]", spinner="dots"):
            result = await self.runner.run('git', args)

        if not result.ok:
            self.console.print("[red]✗[/red] clone template failed")
            raise CloneFailure(result)

        self.console.print("[green]✓[/green] clone template succeeded")
        return result
