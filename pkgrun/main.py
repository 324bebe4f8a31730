"""
pkgrun — CLI entrypoint.

Usage:
    pkgrun run                  # list scripts and pick one
    pkgrun run build --fast     # prebuild, build --fast, postbuild
    pkgrun run env              # print the script environment
    pkgrun list --json
"""

from __future__ import annotations

import json
import os
import sys
import time
from pathlib import Path

import click

from pkgrun import __version__
from pkgrun.core.config.loader import ConfigError
from pkgrun.core.errors import RunnerError, ScriptFailed
from pkgrun.core.models.context import wrap_output_from_env
from pkgrun.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="pkgrun")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--cwd",
    "cwd",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory to look for package.json from (default: current).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    cwd: str | None,
) -> None:
    """pkgrun — run package scripts and local executables."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["start_dir"] = Path(cwd) if cwd else None

    setup_logging(
        level=resolve_level(debug, verbose, quiet, os.environ.get("PKGRUN_LOG_LEVEL")),
        log_file=os.environ.get("PKGRUN_LOG_FILE"),
        log_file_level=os.environ.get("PKGRUN_LOG_FILE_LEVEL"),
    )


@cli.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "--script-shell",
    default=None,
    help="Shell used to run every script (default: platform shell).",
)
@click.option("--dry-run", is_flag=True, help="Show the commands but don't execute them.")
@click.argument("action", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(
    ctx: click.Context,
    script_shell: str | None,
    dry_run: bool,
    action: str | None,
    args: tuple[str, ...],
) -> None:
    """Run a package script or a local executable.

    Scripts run with their pre/post hooks. Arguments after ACTION are
    passed to the script itself.

    Examples:

        pkgrun run test

        pkgrun run build --fast

        pkgrun run --script-shell bash lint
    """
    from pkgrun.core.use_cases.run import ENV_ACTION, run_script
    from pkgrun.ui.cli.reporter import ClickReporter

    # A dispatch that spawned us already printed the banner; env output is JSON only
    show_banner = (
        wrap_output_from_env(dict(os.environ))
        and not ctx.obj.get("quiet")
        and action != ENV_ACTION
    )
    if show_banner:
        click.secho(f"⚡ pkgrun run v{__version__}", bold=True)

    start = time.monotonic()
    try:
        result = run_script(
            action,
            list(args),
            start_dir=ctx.obj.get("start_dir"),
            script_shell=script_shell,
            dry_run=dry_run,
            reporter=ClickReporter(),
        )
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    except ScriptFailed as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(e.exit_code or 1)
    except RunnerError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if result.env is not None:
        click.echo(json.dumps(result.env, indent=2, sort_keys=True))
        return

    if not result.ran:
        return

    if dry_run:
        for stage, command in result.plan.as_pairs():
            click.secho(f"   {stage}", fg="cyan", nl=False)
            click.echo(f"  $ {command}")
        return

    if show_banner:
        elapsed = time.monotonic() - start
        click.secho(f"✨ Done in {elapsed:.2f}s.", fg="green")


@cli.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_command(ctx: click.Context, as_json: bool) -> None:
    """List executables and scripts without running anything."""
    from pkgrun.core.use_cases.list_scripts import list_scripts

    result = list_scripts(start_dir=ctx.obj.get("start_dir"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    table = result.table
    assert table is not None

    click.secho(f"\n📦 {result.project_name or result.project_root}", fg="cyan", bold=True)

    if table.bin_commands:
        click.secho(f"   Executables: {len(table.bin_commands)}", bold=True)
        click.echo(f"     {', '.join(table.bin_commands)}")
    else:
        click.secho("   No executables", fg="yellow")

    click.echo()
    scripts = table.printable_scripts()
    if scripts:
        click.secho(f"   Scripts: {len(scripts)}", bold=True)
        for name, command in scripts:
            click.echo(f"     • {name}  → {command}")
    else:
        click.secho("   No scripts", fg="yellow")

    click.echo()


if __name__ == "__main__":
    cli()
