"""
Runner settings — loaded from ``.pkgrunrc.yml`` in the project root.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RunnerSettings(BaseModel):
    """Runner options.

    ``script_shell`` selects the interpreter every step runs under;
    ``None`` means the platform default shell. ``modules_folders`` are
    the dependency folders whose ``.bin`` directories are scanned.
    ``lockfile_folder`` is where the Plug'n'Play data file lives,
    relative to the project root.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    script_shell: str | None = Field(default=None, alias="script-shell")
    modules_folders: list[str] = Field(
        default_factory=lambda: ["node_modules"], alias="modules-folders"
    )
    lockfile_folder: str = Field(default=".", alias="lockfile-folder")
