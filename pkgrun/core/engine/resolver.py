"""
Command resolver — turns an action name into an ordered plan.

Manifest scripts get their ``pre<action>`` / ``post<action>`` hooks;
executable-only names run alone. Trailing arguments are attached to
the main step only, never to hooks.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Sequence

from pkgrun.core.models.script import ExecutionPlan, ExecutionStep, ScriptTable

logger = logging.getLogger(__name__)


def with_args(command: str, args: Sequence[str]) -> str:
    """Append shell-quoted ``args`` to an already shell-ready command."""
    if not args:
        return command
    quoted = " ".join(shlex.quote(arg) for arg in args)
    return f"{command} {quoted}" if command else quoted


def resolve_action(
    table: ScriptTable,
    action: str,
    args: Sequence[str] = (),
) -> ExecutionPlan | None:
    """Resolve ``action`` against the table.

    Returns:
        The plan, or None when the action is neither a manifest script
        nor a known executable.
    """
    plan = ExecutionPlan(action=action, args=list(args))

    if table.is_manifest_script(action):
        pre_action = f"pre{action}"
        if table.is_manifest_script(pre_action):
            plan.steps.append(ExecutionStep(
                stage=pre_action, command=table.manifest_scripts[pre_action],
            ))

        # The table entry, not the raw manifest body, is what runs
        script = table.command_for(action)
        assert script is not None, "manifest script missing from table"
        plan.steps.append(ExecutionStep(stage=action, command=with_args(script, args)))

        post_action = f"post{action}"
        if table.is_manifest_script(post_action):
            plan.steps.append(ExecutionStep(
                stage=post_action, command=table.manifest_scripts[post_action],
            ))

    elif action in table:
        script = table.command_for(action)
        assert script is not None
        plan.steps.append(ExecutionStep(stage=action, command=with_args(script, args)))

    else:
        logger.debug("No script or executable named '%s'", action)
        return None

    logger.info("Resolved '%s' to %d step(s): %s", action, len(plan.steps), ", ".join(plan.stages))
    return plan
