"""
Mock adapter — records steps instead of running them.

Lets tests observe the exact order and environment of a plan's steps
without spawning processes.
"""

from __future__ import annotations

from pkgrun.adapters.base import Adapter, ExecutionContext
from pkgrun.core.models.receipt import Receipt


class MockAdapter(Adapter):
    """Exits 0 for every step unless a stage was given another exit code."""

    def __init__(self, adapter_name: str = "mock", available: bool = True):
        self._name = adapter_name
        self._available = available
        self._exit_codes: dict[str, int] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """Every context executed so far, oldest first."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    @property
    def executed(self) -> list[tuple[str, str]]:
        """(stage, command) pairs in execution order."""
        return [ctx.step.as_pair() for ctx in self._call_log]

    def is_available(self) -> bool:
        return self._available

    def set_failure(self, stage: str, exit_code: int = 1) -> None:
        """Make the step for ``stage`` exit with ``exit_code``."""
        self._exit_codes[stage] = exit_code

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)
        exit_code = self._exit_codes.get(context.step.stage, 0)
        return Receipt.from_exit_code(self._name, context.step, exit_code)

    def reset(self) -> None:
        self._call_log.clear()
        self._exit_codes.clear()
