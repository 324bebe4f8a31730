"""
Adapter base — the contract between the executor and whatever runs a step.

The executor only talks to adapters through this protocol. Adapters
report failures in the Receipt instead of raising; the executor turns
a failed receipt into an error and stops the plan.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from pkgrun.core.models.context import RunContext
from pkgrun.core.models.receipt import Receipt
from pkgrun.core.models.script import ExecutionStep


class ExecutionContext(BaseModel):
    """Everything an adapter needs to run one step."""

    step: ExecutionStep
    run: RunContext
    env: dict[str, str] = Field(default_factory=dict)

    @property
    def working_dir(self) -> str:
        return self.run.project_root

    @property
    def shell(self) -> str | None:
        return self.run.script_shell


class Adapter(ABC):
    """Abstract base class for step adapters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g. 'shell')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the underlying tool can be used. Never raises."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the step can run.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Run the step to completion and return a receipt."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
