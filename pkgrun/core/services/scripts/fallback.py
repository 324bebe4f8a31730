"""
No-args fallback — what happens when no action was given.

Lists what could be run and, when the manifest declares scripts, asks
for a command line and hands it back to the dispatcher.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar

from pkgrun.core.errors import PromptCancelled
from pkgrun.core.models.script import ScriptTable

logger = logging.getLogger(__name__)

T = TypeVar("T")

COMMAND_NOT_SPECIFIED = "No command specified."
BIN_COMMANDS = "Commands available from binary scripts: "
NO_BIN_AVAILABLE = "There are no binary scripts available."
POSSIBLE_COMMANDS = "Project commands"
COMMAND_QUESTION = "Which command would you like to run?"
NO_SCRIPTS_AVAILABLE = "There are no scripts specified inside package.json."


class Reporter(Protocol):
    """Output and prompting used by the fallback."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def list(self, items: Sequence[tuple[str, str]]) -> None: ...

    def question(self, message: str) -> str:
        """Ask for a line of input. Raises PromptCancelled if declined."""
        ...


def run_fallback(
    table: ScriptTable,
    reporter: Reporter,
    run_command: Callable[[str, list[str]], T],
) -> T | None:
    """Report available commands and optionally run one picked interactively.

    Returns:
        Whatever ``run_command`` returned, or None when nothing ran.
    """
    reporter.error(COMMAND_NOT_SPECIFIED)

    if table.bin_commands:
        reporter.info(BIN_COMMANDS + ", ".join(table.bin_commands))
    else:
        reporter.error(NO_BIN_AVAILABLE)

    if not table.manifest_scripts:
        reporter.error(NO_SCRIPTS_AVAILABLE)
        return None

    reporter.info(POSSIBLE_COMMANDS)
    reporter.list(table.printable_scripts())

    try:
        answer = reporter.question(COMMAND_QUESTION)
    except PromptCancelled:
        logger.debug("Command prompt cancelled")
        reporter.error(COMMAND_NOT_SPECIFIED)
        return None

    tokens = answer.split()
    if not tokens:
        reporter.error(COMMAND_NOT_SPECIFIED)
        return None

    return run_command(tokens[0], tokens[1:])
