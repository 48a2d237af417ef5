"""Tests for template repository cloning."""
import asyncio
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from conftest import FakeRunner
from xwebpack.core.errors import CloneFailure
from xwebpack.services.git_manager import GitManager

TEMPLATE = "https://github.com/example/template.git"


class TestGitManager:
    """Test GitManager.clone_template."""

    def test_clone_success(self, tmp_path):
        runner = FakeRunner()
        console = MagicMock()
        manager = GitManager(runner=runner, console=console, template_repository=TEMPLATE)

        result = asyncio.run(manager.clone_template(tmp_path / "my-app"))

        assert result.ok
        assert runner.calls == [("git", "clone", TEMPLATE, str(tmp_path / "my-app"))]
        console.status.assert_called_once()
        assert "succeeded" in console.print.call_args[0][0]

    def test_clone_failure_raises(self):
        runner = FakeRunner(exit_codes={"git": 128})
        console = MagicMock()
        manager = GitManager(runner=runner, console=console, template_repository=TEMPLATE)

        with pytest.raises(CloneFailure) as excinfo:
            asyncio.run(manager.clone_template(Path("/abs/my-app")))

        assert excinfo.value.result.exit_code == 128
        assert excinfo.value.command_line == f"git clone {TEMPLATE} /abs/my-app"
        assert "failed" in console.print.call_args[0][0]

    def test_uses_configured_template(self, default_config):
        default_config.template_repository = "https://git.example.org/tpl.git"
        runner = FakeRunner(template_manifest=None)
        manager = GitManager(runner=runner, console=MagicMock())

        asyncio.run(manager.clone_template(Path("/abs/my-app")))

        assert runner.calls[0][2] == "https://git.example.org/tpl.git"
