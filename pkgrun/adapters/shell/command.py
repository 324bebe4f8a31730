"""
Shell command adapter — run a step through a shell.

Output is not captured: child processes inherit the terminal so
scripts can stream, prompt, and colour their output as usual.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path

from pkgrun.adapters.base import Adapter, ExecutionContext
from pkgrun.core.models.receipt import Receipt

logger = logging.getLogger(__name__)


class ShellCommandAdapter(Adapter):
    """Run ``step.command`` with ``shell=True``.

    The context's script shell, when set, replaces the platform
    default (``/bin/sh`` on POSIX, ``%COMSPEC%`` on Windows).
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return shutil.which("sh") is not None or shutil.which("cmd") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not Path(context.working_dir).is_dir():
            return False, f"Working directory does not exist: {context.working_dir}"
        if context.shell and shutil.which(context.shell) is None:
            return False, f"Script shell not found: {context.shell}"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        step = context.step
        logger.debug(
            "Executing %s: %s (cwd=%s, shell=%s)",
            step.stage, step.command, context.working_dir, context.shell or "default",
        )
        start = time.monotonic()

        try:
            result = subprocess.run(
                step.command,
                shell=True,
                executable=context.shell,
                cwd=context.working_dir,
                env=context.env or None,
            )
        except OSError as e:
            return Receipt.not_started(self.name, step, f"Command execution error: {e}")

        elapsed_ms = int((time.monotonic() - start) * 1000)
        return Receipt.from_exit_code(self.name, step, result.returncode, elapsed_ms)
