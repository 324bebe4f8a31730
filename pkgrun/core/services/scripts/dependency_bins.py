"""
Dependency bin collector — executable folders of Plug'n'Play installs.

Without a ``node_modules`` tree, dependencies live wherever the PnP
data file says. Each direct dependency of the project contributes
``<packageLocation>/.bin``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from pkgrun.core.config.loader import ConfigError
from pkgrun.core.models.pnp import TOP_LEVEL, PnpMetadata

logger = logging.getLogger(__name__)

PNP_DATA_FILE = ".pnp.data.json"


def load_pnp_metadata(lockfile_folder: Path) -> PnpMetadata | None:
    """Read and validate the PnP data file, or None when there is none.

    Raises:
        ConfigError: If the file exists but does not match the schema.
    """
    path = lockfile_folder / PNP_DATA_FILE
    if not path.is_file():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        metadata = PnpMetadata.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid Plug'n'Play data in {path}: {e}") from e

    logger.debug("Loaded PnP metadata from %s", path)
    return metadata


def collect_dependency_bins(metadata: PnpMetadata, base_dir: Path | None = None) -> list[Path]:
    """Executable folders of the project's direct dependencies.

    Args:
        metadata: Parsed PnP registry.
        base_dir: Directory relative package locations are resolved
            against (the folder holding the data file).

    Returns:
        One ``.bin`` path per dependency with a known location, in
        dependency order. Unknown dependencies are skipped.
    """
    packages = metadata.packages()
    top_level = packages.get(TOP_LEVEL)
    if top_level is None:
        logger.debug("PnP metadata has no top-level entry")
        return []

    bins: list[Path] = []
    for key in top_level.dependency_keys():
        info = packages.get(key)
        if info is None or not info.package_location:
            logger.debug("No package location for %s@%s", *key)
            continue

        location = Path(info.package_location)
        if base_dir is not None and not location.is_absolute():
            location = base_dir / location

        bin_dir = location / ".bin"
        if bin_dir not in bins:
            bins.append(bin_dir)

    return bins
