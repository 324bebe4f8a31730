"""Adapters — how plan steps actually get run.

Public re-exports for convenient access.
"""

from pkgrun.adapters.base import Adapter, ExecutionContext
from pkgrun.adapters.mock import MockAdapter
from pkgrun.adapters.shell.command import ShellCommandAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "ShellCommandAdapter",
]
