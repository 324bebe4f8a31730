"""
Manifest model — the parts of package.json the runner reads.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Manifest(BaseModel):
    """A project manifest (``package.json``).

    Only the identity fields and the ``scripts`` section matter here;
    everything else in the file is ignored.
    """

    name: str = ""
    version: str = ""
    scripts: dict[str, str] = Field(default_factory=dict)

    @field_validator("scripts", mode="before")
    @classmethod
    def _null_bodies_are_empty(cls, value: object) -> object:
        # "scripts": null and "test": null both occur in the wild
        if value is None:
            return {}
        if isinstance(value, dict):
            return {k: ("" if v is None else v) for k, v in value.items()}
        return value
