"""Scaffold pipeline: directory, clone, manifest, install."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console

from xwebpack.core.config import XwebpackConfig, get_config
from xwebpack.core.errors import EnvironmentMismatchError, ScaffoldError
from xwebpack.core.logger import get_logger
from xwebpack.models.process import (
    PackageManager,
    PackageManagerChoice,
    ProcessResult,
)
from xwebpack.models.request import ResolvedPaths, ScaffoldRequest
from xwebpack.scaffold.manifest import rewrite_manifest
from xwebpack.services.envinfo import node_version_ok
from xwebpack.services.git_manager import GitManager
from xwebpack.services.network import check_if_online
from xwebpack.services.package_manager import (
    check_npm_can_read_cwd,
    install_dependencies,
    select_package_manager,
)
from xwebpack.services.process import ProcessRunner

logger = get_logger(__name__)


class ScaffoldStage(Enum):
    """Pipeline states, in the order they are reached."""
    INIT = "init"
    DIRECTORY_CREATED = "directory_created"
    CLONE_COMPLETE = "clone_complete"
    MANIFEST_PATCHED = "manifest_patched"
    REACHABILITY_KNOWN = "reachability_known"
    MANAGER_SELECTED = "manager_selected"
    INSTALL_COMPLETE = "install_complete"
    FAILED = "failed"


@dataclass
class ScaffoldResult:
    """Everything a successful run produced."""
    paths: ResolvedPaths
    choice: PackageManagerChoice
    manifest: Dict[str, Any]
    install: ProcessResult
    stages: List[ScaffoldStage] = field(default_factory=list)


class ScaffoldPipeline:
    """Runs one scaffold request from empty directory to installed project.

    Each stage depends on the previous one; the first failure raises a
    ScaffoldError and nothing after it runs. Files already written are left
    in place.
    """

    def __init__(
        self,
        request: ScaffoldRequest,
        config: Optional[XwebpackConfig] = None,
        runner: Optional[ProcessRunner] = None,
        git: Optional[GitManager] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        cwd: Optional[Path] = None,
    ):
        self.request = request
        self.config = config or get_config()
        self.runner = runner or ProcessRunner()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.git = git or GitManager(
            runner=self.runner,
            console=self.console,
            template_repository=self.config.template_repository,
        )
        self.paths = ResolvedPaths.from_request(request, cwd)
        self.stage = ScaffoldStage.INIT
        self.stages: List[ScaffoldStage] = [ScaffoldStage.INIT]

    def _advance(self, stage: ScaffoldStage) -> None:
        logger.debug(f"{self.stage.value} -> {stage.value}")
        self.stage = stage
        self.stages.append(stage)

    async def run(self) -> ScaffoldResult:
        """Execute every stage in order.

        Raises:
            ScaffoldError: From whichever stage failed
        """
        try:
            return await self._run()
        except ScaffoldError:
            self._advance(ScaffoldStage.FAILED)
            raise

    async def _run(self) -> ScaffoldResult:
        root = self.paths.root

        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ScaffoldError(f"Could not create {root}: {exc}") from exc
        self._advance(ScaffoldStage.DIRECTORY_CREATED)

        self.console.print(
            f"Creating a new React + Redux + antd project in [green]{root}[/green]"
        )
        self.console.print()

        # Decided once; the cwd check and the reachability probe both depend on it
        manager = select_package_manager(self.request.use_npm, self.runner)
        logger.debug(f"Selected package manager: {manager.binary}")

        # yarn gets an explicit --cwd, npm relies on its own idea of the cwd
        if manager is PackageManager.NPM:
            ok, reported = check_npm_can_read_cwd(root, self.runner, self.err_console)
            if not ok:
                raise EnvironmentMismatchError(root, reported)

        if not node_version_ok(self.config.min_node_version, self.runner):
            self.console.print(
                f"[yellow]Your node version is older than {self.config.min_node_version}. "
                "Upgrade node for a better experience.[/yellow]"
            )

        await self.git.clone_template(root)
        self._advance(ScaffoldStage.CLONE_COMPLETE)

        manifest = rewrite_manifest(root, self.paths.app_name)
        self._advance(ScaffoldStage.MANIFEST_PATCHED)

        online = True
        if manager is PackageManager.YARN:
            online = await check_if_online(
                manager,
                self.runner,
                registry_host=self.config.yarn_registry_host,
            )
        self._advance(ScaffoldStage.REACHABILITY_KNOWN)

        choice = PackageManagerChoice(manager=manager, online=online)
        self._advance(ScaffoldStage.MANAGER_SELECTED)

        install = await install_dependencies(
            choice,
            root,
            verbose=self.request.verbose,
            runner=self.runner,
            console=self.console,
        )
        self._advance(ScaffoldStage.INSTALL_COMPLETE)

        return ScaffoldResult(
            paths=self.paths,
            choice=choice,
            manifest=manifest,
            install=install,
            stages=list(self.stages),
        )
