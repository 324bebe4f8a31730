"""
Tests for the adapter protocol, the mock adapter, and the shell adapter.
"""

import sys
from pathlib import Path

import pytest

from pkgrun.adapters.base import ExecutionContext
from pkgrun.adapters.mock import MockAdapter
from pkgrun.adapters.shell.command import ShellCommandAdapter
from pkgrun.core.models.context import RunContext
from pkgrun.core.models.script import ExecutionStep


def _ctx(command: str = "true", stage: str = "test", root: str = ".", shell=None, env=None):
    return ExecutionContext(
        step=ExecutionStep(stage=stage, command=command),
        run=RunContext(project_root=root, script_shell=shell),
        env=env or {},
    )


# ── Protocol Tests ───────────────────────────────────────────────────


class TestExecutionContext:
    def test_working_dir_is_project_root(self):
        assert _ctx(root="/project").working_dir == "/project"

    def test_shell(self):
        assert _ctx(shell="/bin/bash").shell == "/bin/bash"
        assert _ctx().shell is None


# ── Mock Adapter Tests ───────────────────────────────────────────────


class TestMockAdapter:
    def test_default_success(self):
        mock = MockAdapter(adapter_name="test-mock")
        receipt = mock.execute(_ctx())
        assert receipt.ok
        assert receipt.adapter == "test-mock"
        assert mock.call_count == 1

    def test_set_failure(self):
        mock = MockAdapter()
        mock.set_failure("build", exit_code=3)
        receipt = mock.execute(_ctx(stage="build"))
        assert receipt.failed
        assert receipt.exit_code == 3

    def test_executed_pairs(self):
        mock = MockAdapter()
        mock.execute(_ctx("a", stage="one"))
        mock.execute(_ctx("b", stage="two"))
        assert mock.executed == [("one", "a"), ("two", "b")]

    def test_reset(self):
        mock = MockAdapter()
        mock.set_failure("test")
        mock.execute(_ctx())
        mock.reset()
        assert mock.call_count == 0
        assert mock.execute(_ctx()).ok

    def test_is_available(self):
        assert MockAdapter(available=True).is_available()
        assert not MockAdapter(available=False).is_available()


# ── Shell Adapter Tests ─────────────────────────────────────────────


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell commands")
class TestShellCommandAdapter:
    def test_name(self):
        assert ShellCommandAdapter().name == "shell"

    def test_success(self, tmp_path: Path):
        receipt = ShellCommandAdapter().execute(_ctx("true", root=str(tmp_path)))
        assert receipt.ok
        assert receipt.exit_code == 0

    def test_exit_code_reported(self, tmp_path: Path):
        receipt = ShellCommandAdapter().execute(_ctx("exit 7", root=str(tmp_path)))
        assert receipt.failed
        assert receipt.exit_code == 7
        assert "7" in receipt.error

    def test_runs_in_project_root(self, tmp_path: Path):
        ShellCommandAdapter().execute(_ctx("pwd > where.txt", root=str(tmp_path)))
        assert (tmp_path / "where.txt").read_text().strip() == str(tmp_path.resolve())

    def test_uses_given_env(self, tmp_path: Path):
        env = {"PATH": "/usr/bin:/bin", "GREETING": "hello"}
        ShellCommandAdapter().execute(_ctx('echo "$GREETING" > out.txt', root=str(tmp_path), env=env))
        assert (tmp_path / "out.txt").read_text().strip() == "hello"

    def test_validate_missing_cwd(self, tmp_path: Path):
        valid, msg = ShellCommandAdapter().validate(_ctx(root=str(tmp_path / "nope")))
        assert not valid
        assert "does not exist" in msg

    def test_validate_missing_shell(self, tmp_path: Path):
        valid, msg = ShellCommandAdapter().validate(
            _ctx(root=str(tmp_path), shell="definitely-not-a-shell-xyz"),
        )
        assert not valid
        assert "Script shell not found" in msg

    def test_validate_ok(self, tmp_path: Path):
        assert ShellCommandAdapter().validate(_ctx(root=str(tmp_path))) == (True, "")
