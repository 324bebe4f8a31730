"""
Plug'n'Play metadata — fixed schema for ``.pnp.data.json``.

The file describes every installed package keyed by
``(name, reference)``; the project itself is the top-level entry at
``(None, None)``. It is parsed as data and validated, never executed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# A dependency reference is either a plain reference, an aliased
# ``[name, reference]`` pair, or null for an unmet peer dependency.
DependencyTarget = str | tuple[str, str] | None

PackageKey = tuple[str | None, str | None]

TOP_LEVEL: PackageKey = (None, None)


class PackageInformation(BaseModel):
    """One installed package: where it lives and what it depends on."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    package_location: str | None = Field(default=None, alias="packageLocation")
    package_dependencies: list[tuple[str, DependencyTarget]] = Field(
        default_factory=list, alias="packageDependencies"
    )

    def dependency_keys(self) -> list[PackageKey]:
        """Lookup keys of the direct dependencies, unmet peers dropped."""
        keys: list[PackageKey] = []
        for name, target in self.package_dependencies:
            if target is None:
                continue
            if isinstance(target, tuple):
                keys.append((target[0], target[1]))
            else:
                keys.append((name, target))
        return keys


class PnpMetadata(BaseModel):
    """The package registry of a Plug'n'Play install."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    package_registry_data: list[
        tuple[str | None, list[tuple[str | None, PackageInformation]]]
    ] = Field(default_factory=list, alias="packageRegistryData")

    def packages(self) -> dict[PackageKey, PackageInformation]:
        """Flatten the registry into a ``(name, reference)`` lookup."""
        lookup: dict[PackageKey, PackageInformation] = {}
        for name, references in self.package_registry_data:
            for reference, info in references:
                lookup[(name, reference)] = info
        return lookup
