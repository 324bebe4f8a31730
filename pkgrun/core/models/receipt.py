"""
Receipt model — what happened when one plan step ran.

Adapters hand back a Receipt for every step, including failing ones;
turning a failed receipt into an error is the executor's job.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

from pkgrun.core.models.script import ExecutionStep

StepStatus = Literal["ok", "skipped", "failed"]


class Receipt(BaseModel):
    """Outcome of a single ExecutionStep."""

    adapter: str
    stage: str
    command: str = ""
    status: StepStatus = "ok"
    exit_code: int | None = None
    error: str | None = None
    duration_ms: int = 0
    finished_at: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def from_exit_code(
        cls,
        adapter: str,
        step: ExecutionStep,
        exit_code: int,
        duration_ms: int = 0,
    ) -> Receipt:
        """Receipt for a process that ran to completion."""
        return cls(
            adapter=adapter,
            stage=step.stage,
            command=step.command,
            status="ok" if exit_code == 0 else "failed",
            exit_code=exit_code,
            error=None if exit_code == 0 else f"Command exited with code {exit_code}",
            duration_ms=duration_ms,
        )

    @classmethod
    def not_started(cls, adapter: str, step: ExecutionStep, error: str) -> Receipt:
        """Receipt for a step whose process could not be spawned."""
        return cls(
            adapter=adapter,
            stage=step.stage,
            command=step.command,
            status="failed",
            error=error,
        )

    @classmethod
    def dry_run(cls, adapter: str, step: ExecutionStep) -> Receipt:
        return cls(adapter=adapter, stage=step.stage, command=step.command, status="skipped")
