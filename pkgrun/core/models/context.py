"""
Run context — per-invocation state threaded through resolution and execution.

Nothing here is global: each dispatch builds its own RunContext and
hands a derived copy to the steps it runs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

WRAP_OUTPUT_ENV = "PKGRUN_WRAP_OUTPUT"


class RunContext(BaseModel):
    """Everything a dispatch needs besides the script table itself.

    ``wrap_output`` controls banner/report output. Steps always run
    with a nested context where it is False, and child processes see
    that as ``PKGRUN_WRAP_OUTPUT=false``.
    """

    project_root: str = "."
    manifest_path: str | None = None
    package_name: str = ""
    package_version: str = ""
    script_shell: str | None = None
    bin_dirs: list[str] = Field(default_factory=list)
    wrap_output: bool = True
    dry_run: bool = False

    def nested(self) -> RunContext:
        """Context for commands spawned by this dispatch."""
        return self.model_copy(update={"wrap_output": False})


def wrap_output_from_env(environ: dict[str, str]) -> bool:
    """Whether an enclosing dispatch left banners to us."""
    return environ.get(WRAP_OUTPUT_ENV, "").lower() != "false"
