"""
Script models — the script table and the execution plan.

The table is rebuilt on every invocation from the executable
directories and the manifest's ``scripts`` section. A plan is the
ordered list of shell invocations one action expands to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel

ScriptOrigin = Literal["executable", "manifestScript"]


class ScriptEntry(BaseModel):
    """One invocable name and the shell command it runs."""

    name: str
    command: str
    origin: ScriptOrigin


class ExecutionStep(BaseModel):
    """A single shell invocation of a plan.

    ``stage`` is the literal hook or action name (``prebuild``,
    ``build``, ``postbuild``) and becomes ``npm_lifecycle_event``.
    """

    stage: str
    command: str

    def as_pair(self) -> tuple[str, str]:
        return (self.stage, self.command)


@dataclass
class ScriptTable:
    """Name → command mapping plus the display sets.

    ``bin_commands`` keeps every name found in an executable directory,
    even when a manifest script later took over the table entry.
    """

    entries: dict[str, ScriptEntry] = field(default_factory=dict)
    bin_commands: list[str] = field(default_factory=list)
    manifest_scripts: dict[str, str] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def command_for(self, name: str) -> str | None:
        entry = self.entries.get(name)
        return entry.command if entry else None

    def names(self) -> list[str]:
        """Every known name: executables first, then manifest scripts."""
        seen = dict.fromkeys(self.bin_commands)
        seen.update(dict.fromkeys(self.manifest_scripts))
        return list(seen)

    def is_manifest_script(self, name: str) -> bool:
        return name in self.manifest_scripts

    def printable_scripts(self) -> list[tuple[str, str]]:
        """Manifest scripts paired with the command the table resolves them to."""
        return [(name, self.entries[name].command) for name in self.manifest_scripts]

    def to_dict(self) -> dict:
        return {
            "bin_commands": list(self.bin_commands),
            "scripts": [
                {"name": name, "command": command}
                for name, command in self.printable_scripts()
            ],
        }


@dataclass
class ExecutionPlan:
    """Ordered steps for one action: pre-hook, main, post-hook."""

    action: str
    steps: list[ExecutionStep] = field(default_factory=list)
    args: list[str] = field(default_factory=list)

    @property
    def stages(self) -> list[str]:
        return [step.stage for step in self.steps]

    def as_pairs(self) -> list[tuple[str, str]]:
        return [step.as_pair() for step in self.steps]
