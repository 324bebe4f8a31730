"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest


@pytest.fixture
def make_project(tmp_path: Path):
    """Factory for a project directory with package.json and .bin entries.

    Usage::

        root = make_project(scripts={"build": "compile"}, bins=["lint"])
    """

    def _make(
        scripts: dict | None = None,
        bins: list[str] | tuple = (),
        name: str = "demo",
        version: str = "1.0.0",
        root: Path | None = None,
    ) -> Path:
        root = root or tmp_path
        root.mkdir(parents=True, exist_ok=True)
        manifest: dict = {"name": name, "version": version}
        if scripts is not None:
            manifest["scripts"] = scripts
        (root / "package.json").write_text(json.dumps(manifest), encoding="utf-8")

        if bins:
            bin_dir = root / "node_modules" / ".bin"
            bin_dir.mkdir(parents=True, exist_ok=True)
            for entry in bins:
                exe = bin_dir / entry
                exe.write_text("#!/bin/sh\n", encoding="utf-8")
                exe.chmod(0o755)
        return root

    return _make


@pytest.fixture
def clean_environ() -> dict[str, str]:
    """A minimal parent environment for step/env construction."""
    return {"PATH": "/usr/bin:/bin", "HOME": "/home/test"}
