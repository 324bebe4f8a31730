"""
Environment builder — the variables every step runs with.

Mirrors what package managers expose to lifecycle scripts: the stage
name, package identity, the invoking directory, and a PATH that puts
the project's executable folders first.
"""

from __future__ import annotations

import os
from pathlib import Path

from pkgrun.core.models.context import WRAP_OUTPUT_ENV, RunContext


def make_env(
    stage: str,
    context: RunContext,
    base_env: dict[str, str] | None = None,
) -> dict[str, str]:
    """Build the environment for running ``stage``.

    Args:
        stage: The lifecycle stage or action name.
        context: The dispatch context.
        base_env: Environment to start from (default: ``os.environ``).

    Returns:
        A fresh dict; ``base_env`` is never modified.
    """
    env = dict(os.environ if base_env is None else base_env)

    env["npm_lifecycle_event"] = stage
    env["INIT_CWD"] = env.get("INIT_CWD") or str(Path(context.project_root).resolve())
    if context.package_name:
        env["npm_package_name"] = context.package_name
    if context.package_version:
        env["npm_package_version"] = context.package_version
    if context.manifest_path:
        env["npm_package_json"] = context.manifest_path
    if context.script_shell:
        env["npm_config_script_shell"] = context.script_shell
    env[WRAP_OUTPUT_ENV] = "true" if context.wrap_output else "false"

    existing = [d for d in context.bin_dirs if Path(d).is_dir()]
    path_parts = existing + ([env["PATH"]] if env.get("PATH") else [])
    if path_parts:
        env["PATH"] = os.pathsep.join(path_parts)

    return env
