"""
Tests for plan execution — ordering, failure propagation, nested context.
"""

import pytest

from pkgrun.adapters.mock import MockAdapter
from pkgrun.core.engine.executor import execute_plan
from pkgrun.core.engine.resolver import resolve_action
from pkgrun.core.errors import ScriptFailed
from pkgrun.core.models.context import RunContext
from pkgrun.core.services.scripts import build_script_table

SCRIPTS = {"build": "compile", "prebuild": "clean", "postbuild": "notify"}


def _plan(action: str = "build", args: list[str] | None = None):
    return resolve_action(build_script_table([], SCRIPTS), action, args or [])


class TestExecutePlan:
    def test_steps_run_in_order(self, tmp_path, clean_environ):
        mock = MockAdapter()
        receipts = execute_plan(
            _plan(args=["--fast"]),
            RunContext(project_root=str(tmp_path)),
            mock,
            base_env=clean_environ,
        )
        assert mock.executed == [
            ("prebuild", "clean"),
            ("build", "compile --fast"),
            ("postbuild", "notify"),
        ]
        assert [r.stage for r in receipts] == ["prebuild", "build", "postbuild"]
        assert all(r.ok for r in receipts)

    def test_failure_halts_remaining_steps(self, tmp_path, clean_environ):
        mock = MockAdapter()
        mock.set_failure("build", exit_code=2)
        with pytest.raises(ScriptFailed) as exc:
            execute_plan(_plan(), RunContext(project_root=str(tmp_path)), mock, clean_environ)
        assert exc.value.stage == "build"
        assert exc.value.exit_code == 2
        assert mock.executed == [("prebuild", "clean"), ("build", "compile")]

    def test_failing_pre_hook_stops_main(self, tmp_path, clean_environ):
        mock = MockAdapter()
        mock.set_failure("prebuild")
        with pytest.raises(ScriptFailed):
            execute_plan(_plan(), RunContext(project_root=str(tmp_path)), mock, clean_environ)
        assert mock.call_count == 1

    def test_steps_get_nested_context(self, tmp_path, clean_environ):
        mock = MockAdapter()
        context = RunContext(project_root=str(tmp_path), wrap_output=True)
        execute_plan(_plan(), context, mock, clean_environ)
        for step_ctx in mock.call_log:
            assert step_ctx.run.wrap_output is False
            assert step_ctx.env["PKGRUN_WRAP_OUTPUT"] == "false"
        # the caller's context is untouched
        assert context.wrap_output is True

    def test_parent_environment_not_mutated(self, tmp_path, clean_environ):
        before = dict(clean_environ)
        execute_plan(_plan(), RunContext(project_root=str(tmp_path)), MockAdapter(), clean_environ)
        assert clean_environ == before

    def test_stage_is_lifecycle_event(self, tmp_path, clean_environ):
        mock = MockAdapter()
        execute_plan(_plan(), RunContext(project_root=str(tmp_path)), mock, clean_environ)
        events = [ctx.env["npm_lifecycle_event"] for ctx in mock.call_log]
        assert events == ["prebuild", "build", "postbuild"]

    def test_script_shell_passed_to_every_step(self, tmp_path, clean_environ):
        mock = MockAdapter()
        context = RunContext(project_root=str(tmp_path), script_shell="/bin/bash")
        execute_plan(_plan(), context, mock, clean_environ)
        assert [ctx.shell for ctx in mock.call_log] == ["/bin/bash"] * 3

    def test_dry_run_executes_nothing(self, tmp_path, clean_environ):
        mock = MockAdapter()
        context = RunContext(project_root=str(tmp_path), dry_run=True)
        receipts = execute_plan(_plan(), context, mock, clean_environ)
        assert mock.call_count == 0
        assert [r.status for r in receipts] == ["skipped"] * 3

    def test_unavailable_adapter_runs_nothing(self, tmp_path, clean_environ):
        mock = MockAdapter(available=False)
        with pytest.raises(ScriptFailed, match="not available") as exc:
            execute_plan(_plan(), RunContext(project_root=str(tmp_path)), mock, clean_environ)
        assert exc.value.stage == "prebuild"
        assert mock.call_count == 0

    def test_dry_run_ignores_availability(self, tmp_path, clean_environ):
        mock = MockAdapter(available=False)
        context = RunContext(project_root=str(tmp_path), dry_run=True)
        receipts = execute_plan(_plan(), context, mock, clean_environ)
        assert [r.stage for r in receipts] == ["prebuild", "build", "postbuild"]
