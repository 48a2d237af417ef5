"""Shared test fixtures for xwebpack tests."""
import json
import subprocess
from pathlib import Path

import pytest

from xwebpack.core.config import XwebpackConfig, set_config
from xwebpack.models.process import ProcessResult
from xwebpack.services.process import ProcessRunner

TEMPLATE_MANIFEST = {
    "name": "react-fast-template",
    "version": "2.3.0",
    "description": "React + Redux + antd starter",
    "scripts": {"start": "webpack-dev-server", "build": "webpack"},
    "dependencies": {"react": "^16.4.0", "antd": "^3.6.0"},
}


def completed(stdout: str = "", returncode: int = 0) -> subprocess.CompletedProcess:
    """Build a CompletedProcess like subprocess.run returns."""
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


class FakeRunner(ProcessRunner):
    """ProcessRunner that records calls instead of spawning anything.

    Async commands exit with the code configured in ``exit_codes`` (default 0).
    Sync commands are looked up by their full command line in ``sync``;
    anything not listed behaves as if the executable is not installed.
    A successful ``git clone`` writes ``template_manifest`` into the target.
    """

    def __init__(self, exit_codes=None, sync=None, template_manifest=TEMPLATE_MANIFEST):
        self.exit_codes = exit_codes or {}
        self.sync = sync or {}
        self.template_manifest = template_manifest
        self.calls = []
        self.sync_calls = []

    async def run(self, command, args, cwd=None):
        args = tuple(str(arg) for arg in args)
        self.calls.append((command,) + args)
        exit_code = self.exit_codes.get(command, 0)
        if command == 'git' and exit_code == 0 and self.template_manifest is not None:
            target = Path(args[-1])
            target.mkdir(parents=True, exist_ok=True)
            (target / "package.json").write_text(json.dumps(self.template_manifest))
        return ProcessResult(exit_code, command, args)

    def run_sync(self, command, args, cwd=None, quiet=False):
        key = " ".join([command] + [str(arg) for arg in args])
        self.sync_calls.append(key)
        outcome = self.sync.get(key)
        if outcome is None:
            raise FileNotFoundError(f"{command}: command not found")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def commands(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture(autouse=True)
def default_config():
    """Use built-in defaults regardless of XWEBPACK_* variables in the environment."""
    config = XwebpackConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def runner():
    """FakeRunner with yarn and node missing."""
    return FakeRunner()


@pytest.fixture
def yarn_runner():
    """FakeRunner where yarn is installed."""
    return FakeRunner(sync={"yarnpkg --version": completed("1.22.19\n")})
