"""
List use case — what can be run in this project, without prompting.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pkgrun.core.config.loader import ConfigError
from pkgrun.core.models.script import ScriptTable
from pkgrun.core.use_cases.run import load_project_scripts


@dataclass
class ListResult:
    """Executables and manifest scripts of a project."""

    project_name: str = ""
    project_root: Path | None = None
    table: ScriptTable | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        result: dict = {
            "project_name": self.project_name,
            "project_root": str(self.project_root),
        }
        if self.table is not None:
            result.update(self.table.to_dict())
        return result


def list_scripts(start_dir: Path | None = None) -> ListResult:
    """Build the script table for the project at ``start_dir``."""
    try:
        project = load_project_scripts(start_dir)
    except ConfigError as e:
        return ListResult(error=str(e))

    return ListResult(
        project_name=project.manifest.name,
        project_root=project.project_root,
        table=project.table,
    )
