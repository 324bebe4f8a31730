"""
Script table builder — merges local executables with manifest scripts.

Executables come first; manifest scripts are written afterwards and
always overwrite a same-named executable.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Iterable, Mapping
from pathlib import Path

from pkgrun.core.models.script import ScriptEntry, ScriptTable

logger = logging.getLogger(__name__)

BIN_FOLDER = ".bin"


def local_bin_dirs(project_root: Path, modules_folders: Iterable[str]) -> list[Path]:
    """The ``<folder>/.bin`` directory of every configured modules folder."""
    dirs: list[Path] = []
    for folder in modules_folders:
        candidate = project_root / folder / BIN_FOLDER
        if candidate not in dirs:
            dirs.append(candidate)
    return dirs


def build_script_table(
    bin_dirs: Iterable[Path],
    manifest_scripts: Mapping[str, str | None] | None = None,
) -> ScriptTable:
    """Build the name → command table for one invocation.

    Args:
        bin_dirs: Candidate executable directories. Missing or unreadable
            ones are skipped. They are scanned in path order, so the caller's
            ordering never changes the result.
        manifest_scripts: The manifest's ``scripts`` section.

    Returns:
        ScriptTable with executables overwritten by manifest scripts.
    """
    table = ScriptTable()

    for bin_dir in sorted(set(bin_dirs), key=str):
        if not bin_dir.is_dir():
            logger.debug("Skipping missing bin folder %s", bin_dir)
            continue

        base = bin_dir.absolute()
        try:
            names = sorted(entry.name for entry in base.iterdir())
        except OSError as e:
            logger.debug("Skipping unreadable bin folder %s: %s", base, e)
            continue
        logger.debug("Found %d executables in %s", len(names), base)

        for name in names:
            table.entries[name] = ScriptEntry(
                name=name,
                command=shlex.quote(str(base / name)),
                origin="executable",
            )
            if name not in table.bin_commands:
                table.bin_commands.append(name)

    for name in sorted(manifest_scripts or {}):
        body = (manifest_scripts or {})[name] or ""
        table.entries[name] = ScriptEntry(name=name, command=body, origin="manifestScript")
        table.manifest_scripts[name] = body

    return table
