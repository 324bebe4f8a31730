"""
Plan executor — runs a plan's steps one after another.

Each step finishes before the next starts, so a pre-hook's artifacts
are in place for the main step. The first failing step raises and
nothing after it runs.
"""

from __future__ import annotations

import logging

from pkgrun.adapters.base import Adapter, ExecutionContext
from pkgrun.core.errors import ScriptFailed
from pkgrun.core.models.context import RunContext
from pkgrun.core.models.receipt import Receipt
from pkgrun.core.models.script import ExecutionPlan
from pkgrun.core.services.env_builder import make_env

logger = logging.getLogger(__name__)


def execute_plan(
    plan: ExecutionPlan,
    context: RunContext,
    adapter: Adapter,
    base_env: dict[str, str] | None = None,
) -> list[Receipt]:
    """Execute every step of ``plan`` through ``adapter``.

    Args:
        plan: The resolved plan.
        context: The dispatch context. Steps receive its nested copy.
        adapter: Runs the individual steps.
        base_env: Environment the step environments start from
            (default: ``os.environ``).

    Returns:
        One receipt per step, in order.

    Raises:
        ScriptFailed: If the adapter is unavailable (before any step
            runs), or on the first step that fails validation or exits
            non-zero.
    """
    if not context.dry_run and plan.steps and not adapter.is_available():
        raise ScriptFailed(
            plan.steps[0].stage,
            detail=f"adapter '{adapter.name}' is not available",
        )

    nested = context.nested()
    receipts: list[Receipt] = []

    for step in plan.steps:
        step_context = ExecutionContext(
            step=step,
            run=nested,
            env=make_env(step.stage, nested, base_env),
        )

        if context.dry_run:
            logger.info("[dry-run] %s: %s", step.stage, step.command)
            receipts.append(Receipt.dry_run(adapter.name, step))
            continue

        is_valid, error_msg = adapter.validate(step_context)
        if not is_valid:
            raise ScriptFailed(step.stage, detail=error_msg)

        logger.info("Running %s: %s", step.stage, step.command)
        receipt = adapter.execute(step_context)
        receipts.append(receipt)

        if receipt.failed:
            logger.debug("Step %s failed: %s", step.stage, receipt.error)
            raise ScriptFailed(step.stage, receipt.exit_code)

    return receipts
