"""
Runner errors — the failures surfaced to the CLI.

Configuration problems raise ``ConfigError`` from the loaders; every
other user-facing failure derives from ``RunnerError`` so the CLI can
report it uniformly.
"""

from __future__ import annotations

import json


class RunnerError(Exception):
    """Base class for user-facing runner failures."""


class CommandNotFound(RunnerError):
    """The action matches neither a manifest script nor an executable."""

    def __init__(self, action: str, suggestion: str | None = None):
        self.action = action
        self.suggestion = suggestion
        msg = f"Command {json.dumps(action)} not found."
        if suggestion:
            msg += f" Did you mean {json.dumps(suggestion)}?"
        super().__init__(msg)


class ScriptFailed(RunnerError):
    """A step of the execution plan exited unsuccessfully."""

    def __init__(self, stage: str, exit_code: int | None = None, detail: str = ""):
        self.stage = stage
        self.exit_code = exit_code
        msg = f"Command {json.dumps(stage)} failed"
        if exit_code is not None:
            msg += f" with exit code {exit_code}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg + ".")


class PromptCancelled(RunnerError):
    """The interactive command prompt was declined or aborted."""
