"""
Click reporter — terminal listing and prompting for the no-args fallback.
"""

from __future__ import annotations

from collections.abc import Sequence

import click

from pkgrun.core.errors import PromptCancelled


class ClickReporter:
    """Writes fallback output with click and reads the answer from stdin."""

    def info(self, message: str) -> None:
        click.secho(f"ℹ️  {message}", fg="cyan")

    def error(self, message: str) -> None:
        click.secho(f"❌ {message}", fg="red")

    def list(self, items: Sequence[tuple[str, str]]) -> None:
        for name, command in items:
            click.secho(f"   - {name}", bold=True)
            click.echo(f"      {command}")

    def question(self, message: str) -> str:
        try:
            return click.prompt(f"❓ {message}", default="", show_default=False)
        except click.Abort as e:
            raise PromptCancelled(message) from e
