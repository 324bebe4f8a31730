"""
Tests for action resolution — lifecycle hooks, trailing args, executables.
"""

import shlex
from pathlib import Path

from pkgrun.core.engine.resolver import resolve_action, with_args
from pkgrun.core.services.scripts import build_script_table

SCRIPTS = {"build": "compile", "prebuild": "clean", "postbuild": "notify"}


class TestManifestActions:
    def test_full_lifecycle_with_args(self):
        table = build_script_table([], SCRIPTS)
        plan = resolve_action(table, "build", ["--fast"])
        assert plan.as_pairs() == [
            ("prebuild", "clean"),
            ("build", "compile --fast"),
            ("postbuild", "notify"),
        ]

    def test_missing_post_hook_is_omitted(self):
        scripts = {k: v for k, v in SCRIPTS.items() if k != "postbuild"}
        plan = resolve_action(build_script_table([], scripts), "build", ["--fast"])
        assert plan.as_pairs() == [("prebuild", "clean"), ("build", "compile --fast")]

    def test_no_hooks(self):
        plan = resolve_action(build_script_table([], {"test": "jest"}), "test")
        assert plan.as_pairs() == [("test", "jest")]

    def test_no_args_leaves_command_unchanged(self):
        plan = resolve_action(build_script_table([], SCRIPTS), "build")
        assert plan.steps[1].command == "compile"

    def test_hook_invoked_directly_has_no_hooks_of_its_own(self):
        plan = resolve_action(build_script_table([], SCRIPTS), "prebuild", ["x"])
        assert plan.as_pairs() == [("prebuild", "clean x")]

    def test_args_are_shell_quoted(self):
        plan = resolve_action(build_script_table([], {"echo": "echo"}), "echo", ["a b", "it's"])
        assert shlex.split(plan.steps[0].command) == ["echo", "a b", "it's"]

    def test_plan_metadata(self):
        plan = resolve_action(build_script_table([], SCRIPTS), "build", ["--fast"])
        assert plan.action == "build"
        assert plan.args == ["--fast"]
        assert plan.stages == ["prebuild", "build", "postbuild"]

    def test_hooks_only_from_manifest(self, tmp_path: Path):
        bin_dir = tmp_path / ".bin"
        bin_dir.mkdir()
        (bin_dir / "prebuild").write_text("")
        plan = resolve_action(build_script_table([bin_dir], {"build": "compile"}), "build")
        assert plan.stages == ["build"]


class TestExecutableActions:
    def test_executable_only(self, tmp_path: Path):
        bin_dir = tmp_path / ".bin"
        bin_dir.mkdir()
        (bin_dir / "lint").write_text("")
        plan = resolve_action(build_script_table([bin_dir]), "lint")
        quoted = shlex.quote(str(bin_dir.absolute() / "lint"))
        assert plan.as_pairs() == [("lint", quoted)]

    def test_executable_gets_args(self, tmp_path: Path):
        bin_dir = tmp_path / ".bin"
        bin_dir.mkdir()
        (bin_dir / "lint").write_text("")
        plan = resolve_action(build_script_table([bin_dir]), "lint", ["--fix"])
        assert plan.steps[0].command.endswith(" --fix")

    def test_manifest_overrides_executable(self, tmp_path: Path):
        bin_dir = tmp_path / ".bin"
        bin_dir.mkdir()
        (bin_dir / "lint").write_text("")
        table = build_script_table([bin_dir], {"lint": "eslint .", "prelint": "echo go"})
        plan = resolve_action(table, "lint")
        assert plan.as_pairs() == [("prelint", "echo go"), ("lint", "eslint .")]


class TestNotFound:
    def test_unknown_action(self):
        assert resolve_action(build_script_table([], SCRIPTS), "deploy") is None

    def test_env_is_not_resolved_here(self):
        assert resolve_action(build_script_table([], SCRIPTS), "env") is None


class TestWithArgs:
    def test_no_args(self):
        assert with_args("jest", []) == "jest"

    def test_empty_command(self):
        assert with_args("", ["--watch"]) == "--watch"
