"""
Run use case — dispatch an action against the project's scripts.

This is the top-level orchestrator: it finds the manifest, loads the
runner settings, collects executable folders, builds the script table,
resolves the action, and executes the resulting plan step by step.
With no action it falls back to listing and prompting.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pkgrun.adapters.base import Adapter
from pkgrun.core.config.loader import (
    MANIFEST_FILE,
    ConfigError,
    find_manifest,
    load_manifest,
    project_root,
)
from pkgrun.core.config.settings_loader import load_settings, resolve_script_shell
from pkgrun.core.engine.executor import execute_plan
from pkgrun.core.engine.resolver import resolve_action
from pkgrun.core.errors import CommandNotFound
from pkgrun.core.models.context import RunContext, wrap_output_from_env
from pkgrun.core.models.manifest import Manifest
from pkgrun.core.models.receipt import Receipt
from pkgrun.core.models.script import ExecutionPlan, ScriptTable
from pkgrun.core.services.env_builder import make_env
from pkgrun.core.services.scripts import (
    Reporter,
    build_script_table,
    collect_dependency_bins,
    load_pnp_metadata,
    local_bin_dirs,
    run_fallback,
    suggest,
)

logger = logging.getLogger(__name__)

ENV_ACTION = "env"


@dataclass
class ProjectScripts:
    """Everything loaded from disk for one invocation."""

    project_root: Path
    manifest_path: Path
    manifest: Manifest
    bin_dirs: list[Path] = field(default_factory=list)
    table: ScriptTable = field(default_factory=ScriptTable)
    script_shell: str | None = None


@dataclass
class RunResult:
    """Outcome of a dispatch.

    Exactly one of ``plan`` (something ran or would run) or ``env``
    (the built-in ``env`` action) is set when an action was dispatched;
    both are None when the no-args fallback ran nothing.
    """

    action: str | None = None
    plan: ExecutionPlan | None = None
    receipts: list[Receipt] = field(default_factory=list)
    env: dict[str, str] | None = None

    @property
    def ran(self) -> bool:
        return self.plan is not None


def load_project_scripts(
    start_dir: Path | None = None,
    script_shell: str | None = None,
    environ: dict[str, str] | None = None,
) -> ProjectScripts:
    """Locate the project and build its script table.

    Raises:
        ConfigError: If there is no readable manifest, or the settings
            or Plug'n'Play data are malformed.
    """
    manifest_path = find_manifest(start_dir)
    if manifest_path is None:
        raise ConfigError(f"No {MANIFEST_FILE} found in this directory or any parent.")
    manifest = load_manifest(manifest_path)
    root = project_root(manifest_path)

    settings = load_settings(root)
    bin_dirs = local_bin_dirs(root, settings.modules_folders)

    lockfile_folder = root / settings.lockfile_folder
    metadata = load_pnp_metadata(lockfile_folder)
    if metadata is not None:
        for bin_dir in collect_dependency_bins(metadata, base_dir=lockfile_folder):
            if bin_dir not in bin_dirs:
                bin_dirs.append(bin_dir)

    table = build_script_table(bin_dirs, manifest.scripts)
    logger.info(
        "Script table for %s: %d executables, %d scripts",
        root, len(table.bin_commands), len(table.manifest_scripts),
    )

    return ProjectScripts(
        project_root=root,
        manifest_path=manifest_path,
        manifest=manifest,
        bin_dirs=bin_dirs,
        table=table,
        script_shell=resolve_script_shell(settings, script_shell, environ),
    )


def build_context(
    project: ProjectScripts,
    dry_run: bool = False,
    environ: dict[str, str] | None = None,
) -> RunContext:
    """The RunContext for one dispatch of ``project``."""
    env = os.environ if environ is None else environ
    return RunContext(
        project_root=str(project.project_root),
        manifest_path=str(project.manifest_path),
        package_name=project.manifest.name,
        package_version=project.manifest.version,
        script_shell=project.script_shell,
        bin_dirs=[str(d) for d in project.bin_dirs],
        wrap_output=wrap_output_from_env(dict(env)),
        dry_run=dry_run,
    )


def dispatch(
    action: str,
    args: Sequence[str],
    table: ScriptTable,
    context: RunContext,
    adapter: Adapter,
    environ: dict[str, str] | None = None,
) -> RunResult:
    """Resolve and run one action.

    Raises:
        CommandNotFound: If the action is unknown (with a suggestion
            when a close name exists).
        ScriptFailed: If a step fails; later steps do not run.
    """
    plan = resolve_action(table, action, args)

    if plan is not None:
        receipts = execute_plan(plan, context, adapter, base_env=environ)
        return RunResult(action=action, plan=plan, receipts=receipts)

    if action == ENV_ACTION:
        return RunResult(action=action, env=make_env(ENV_ACTION, context, environ))

    raise CommandNotFound(action, suggest(table, action))


def run_script(
    action: str | None,
    args: Sequence[str] = (),
    *,
    start_dir: Path | None = None,
    script_shell: str | None = None,
    dry_run: bool = False,
    adapter: Adapter | None = None,
    reporter: Reporter | None = None,
    environ: dict[str, str] | None = None,
) -> RunResult:
    """Run ``action`` (or the no-args fallback) for the project at ``start_dir``.

    Args:
        action: Script or executable name; None triggers the fallback.
        args: Trailing arguments for the main step.
        start_dir: Where to start looking for package.json (default: cwd).
        script_shell: Shell override from the command line.
        dry_run: Resolve and report, but execute nothing.
        adapter: Step adapter (default: ShellCommandAdapter).
        reporter: Listing/prompt output for the fallback.
        environ: Parent environment (default: ``os.environ``).

    Returns:
        RunResult describing what ran.
    """
    project = load_project_scripts(start_dir, script_shell, environ)
    context = build_context(project, dry_run=dry_run, environ=environ)

    if adapter is None:
        from pkgrun.adapters.shell.command import ShellCommandAdapter

        adapter = ShellCommandAdapter()

    def run_command(name: str, rest: list[str]) -> RunResult:
        return dispatch(name, rest, project.table, context, adapter, environ)

    if action is None:
        if reporter is None:
            raise ValueError("a reporter is required when no action is given")
        return run_fallback(project.table, reporter, run_command) or RunResult()

    return run_command(action, list(args))
