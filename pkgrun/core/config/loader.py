"""
Configuration loader — locates the project and reads its manifest.

The project root is the nearest directory (walking up from the start
directory) that holds a ``package.json``. The manifest is read as
JSON and validated into a ``Manifest`` model.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from pkgrun.core.models.manifest import Manifest

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"


class ConfigError(Exception):
    """Raised when the manifest or runner settings are invalid or missing."""


def find_manifest(start_dir: Path | None = None) -> Path | None:
    """Search for package.json starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to package.json, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(50):  # safety limit
        candidate = current / MANIFEST_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_manifest(path: Path | None = None) -> Manifest:
    """Load and validate a project manifest.

    Args:
        path: Explicit path to package.json. If None, searches upward.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_manifest()

    if path is None:
        raise ConfigError(f"No {MANIFEST_FILE} found in this directory or any parent.")

    if not path.is_file():
        raise ConfigError(f"Manifest not found: {path}")

    logger.debug("Loading manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid manifest {path}: {e}") from e

    logger.info("Loaded manifest '%s' with %d scripts", manifest.name, len(manifest.scripts))
    return manifest


def project_root(manifest_path: Path) -> Path:
    """Get the project root directory from a manifest path."""
    return manifest_path.parent.resolve()
