"""
Domain models — Pydantic types and plain dataclasses for the runner.

    from pkgrun.core.models import Manifest, ScriptTable, ExecutionPlan, Receipt
"""

from pkgrun.core.models.manifest import Manifest
from pkgrun.core.models.pnp import PackageInformation, PnpMetadata, TOP_LEVEL
from pkgrun.core.models.receipt import Receipt
from pkgrun.core.models.script import (
    ExecutionPlan,
    ExecutionStep,
    ScriptEntry,
    ScriptOrigin,
    ScriptTable,
)
from pkgrun.core.models.settings import RunnerSettings

__all__ = [
    "ExecutionPlan",
    "ExecutionStep",
    "Manifest",
    "PackageInformation",
    "PnpMetadata",
    "Receipt",
    "RunnerSettings",
    "ScriptEntry",
    "ScriptOrigin",
    "ScriptTable",
    "TOP_LEVEL",
]
