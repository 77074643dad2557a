"""
workfetch CLI: the `workfetch` command.

Commands:
  workfetch [status]     Show today's work-time status (default)
  workfetch paths        Show where state and config are kept
  workfetch reset        Forget today's recorded start
"""

import json
import logging
import sys
from typing import NoReturn

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install workfetch[cli]")

from workfetch import __version__
from workfetch.cli.display import render
from workfetch.errors import ConfigError, WorkFetchError
from workfetch.workday import WorkDay

console = Console()
err_console = Console(stderr=True)


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(e: WorkFetchError) -> NoReturn:
    err_console.print(str(e), style="red", markup=False)
    sys.exit(2 if isinstance(e, ConfigError) else 1)


def _workday(ctx: click.Context) -> WorkDay:
    ctx.ensure_object(dict)
    if "workday" not in ctx.obj:
        ctx.obj["workday"] = WorkDay()
    return ctx.obj["workday"]


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__)
@click.pass_context
def main(ctx: click.Context, debug: bool):
    """workfetch: when does today's work end?"""
    _setup_logging(debug)
    if ctx.invoked_subcommand is None:
        ctx.invoke(status)


@main.command("status")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def status(ctx: click.Context, json_output: bool = False):
    """Show today's start, end of day and remaining time."""
    try:
        result = _workday(ctx).status()
    except WorkFetchError as e:
        _fail(e)
    if json_output:
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return
    render(console, result)


@main.command("paths")
@click.pass_context
def paths(ctx: click.Context):
    """Show where state and config are kept."""
    try:
        workday = _workday(ctx)
    except WorkFetchError as e:
        _fail(e)
    click.echo(f"State:  {workday.paths.state}")
    click.echo(f"Config: {workday.paths.config}")


@main.command("reset")
@click.pass_context
def reset(ctx: click.Context):
    """Forget the recorded start; the next run starts from boot time."""
    try:
        removed = _workday(ctx).reset()
    except WorkFetchError as e:
        _fail(e)
    if removed:
        console.print("[green]Session record cleared.[/green]")
    else:
        console.print("[dim]No session record to clear.[/dim]")


if __name__ == "__main__":
    main()
