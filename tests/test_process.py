"""Tests for the child process runner."""
import asyncio
import subprocess
from unittest.mock import AsyncMock, Mock, patch

import pytest

from xwebpack.models.process import ProcessResult
from xwebpack.services.process import COMMAND_NOT_FOUND, ProcessRunner


class TestProcessResult:
    """Test ProcessResult helpers."""

    def test_command_line(self):
        result = ProcessResult(1, "npm", ("install", "--prefix", "/abs/my-app"))
        assert result.command_line == "npm install --prefix /abs/my-app"
        assert result.ok is False

    def test_ok(self):
        assert ProcessResult(0, "git").ok is True


class TestRun:
    """Test async spawning with inherited stdio."""

    @patch("asyncio.create_subprocess_exec", new_callable=AsyncMock)
    def test_exit_code_reported(self, mock_exec):
        mock_exec.return_value = Mock(wait=AsyncMock(return_value=0))

        result = asyncio.run(ProcessRunner().run("git", ["clone", "url", "/abs/dir"]))

        assert result == ProcessResult(0, "git", ("clone", "url", "/abs/dir"))
        args, kwargs = mock_exec.call_args
        assert args == ("git", "clone", "url", "/abs/dir")
        # stdio is inherited, never piped
        assert "stdout" not in kwargs
        assert "stderr" not in kwargs

    @patch("asyncio.create_subprocess_exec", new_callable=AsyncMock)
    def test_nonzero_exit(self, mock_exec):
        mock_exec.return_value = Mock(wait=AsyncMock(return_value=128))

        result = asyncio.run(ProcessRunner().run("git", ["clone"]))

        assert result.exit_code == 128
        assert not result.ok

    @patch("asyncio.create_subprocess_exec", new_callable=AsyncMock)
    def test_missing_executable(self, mock_exec):
        mock_exec.side_effect = FileNotFoundError("git")

        result = asyncio.run(ProcessRunner().run("git", ["clone"]))

        assert result.exit_code == COMMAND_NOT_FOUND

    @patch("asyncio.create_subprocess_exec", new_callable=AsyncMock)
    def test_cwd_forwarded(self, mock_exec, tmp_path):
        mock_exec.return_value = Mock(wait=AsyncMock(return_value=0))

        asyncio.run(ProcessRunner().run("npm", ["install"], cwd=tmp_path))

        assert mock_exec.call_args[1]["cwd"] == str(tmp_path)


class TestRunSync:
    """Test synchronous diagnostic commands."""

    @patch("subprocess.run")
    def test_captures_output(self, mock_run):
        mock_run.return_value = Mock(returncode=0, stdout="; cwd = /x\n", stderr="")

        result = ProcessRunner().run_sync("npm", ["config", "list"], cwd="/x")

        assert result.stdout == "; cwd = /x\n"
        cmd = mock_run.call_args[0][0]
        assert cmd == ["npm", "config", "list"]
        assert mock_run.call_args[1]["capture_output"] is True
        assert mock_run.call_args[1]["cwd"] == "/x"

    @patch("subprocess.run")
    def test_quiet_discards_output(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        ProcessRunner().run_sync("yarnpkg", ["--version"], quiet=True)

        assert mock_run.call_args[1]["stdout"] is subprocess.DEVNULL
        assert mock_run.call_args[1]["stderr"] is subprocess.DEVNULL

    @patch("subprocess.run", side_effect=FileNotFoundError("yarnpkg"))
    def test_missing_executable_raises(self, mock_run):
        with pytest.raises(OSError):
            ProcessRunner().run_sync("yarnpkg", ["--version"], quiet=True)
