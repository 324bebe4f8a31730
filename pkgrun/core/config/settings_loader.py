"""
Settings loader — reads ``.pkgrunrc.yml`` into RunnerSettings.

The rc file is optional. Values resolve in precedence order:
    CLI flag  >  PKGRUN_SCRIPT_SHELL env var  >  .pkgrunrc.yml  >  default
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from pkgrun.core.config.loader import ConfigError
from pkgrun.core.models.settings import RunnerSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE = ".pkgrunrc.yml"
SCRIPT_SHELL_ENV = "PKGRUN_SCRIPT_SHELL"


def load_settings(project_root: Path) -> RunnerSettings:
    """Load runner settings from the project root.

    Returns defaults when the rc file does not exist.

    Raises:
        ConfigError: If the rc file exists but is not a valid mapping.
    """
    path = project_root / SETTINGS_FILE
    if not path.is_file():
        logger.debug("No %s in %s, using defaults", SETTINGS_FILE, project_root)
        return RunnerSettings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return RunnerSettings()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = RunnerSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.debug("Loaded settings from %s", path)
    return settings


def resolve_script_shell(
    settings: RunnerSettings,
    cli_value: str | None = None,
    environ: dict[str, str] | None = None,
) -> str | None:
    """Pick the shell interpreter for every step, or None for the default."""
    if cli_value:
        return cli_value
    env = os.environ if environ is None else environ
    if env.get(SCRIPT_SHELL_ENV):
        return env[SCRIPT_SHELL_ENV]
    return settings.script_shell or None
