from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from keyedit.cmd_base import Base
from keyedit.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["keyedit", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.option("--stat", is_flag=True, help="Print a summary instead of the edits.")
@click.option(
    "--color/--no-color",
    "color",
    default=None,
    help="Force coloured output on or off.",
)
@click.argument("old", type=click.Path(dir_okay=False, allow_dash=True))
@click.argument("new", type=click.Path(dir_okay=False, allow_dash=True))
def diff(stat: bool, color: bool | None, old: str, new: str) -> None:
    """Show the edits that turn the OLD key list into NEW."""
    args: list[str] = []
    if stat:
        args.append("--stat")
    if color is not None:
        args.append("--color" if color else "--no-color")

    run_cmd("diff", *args, old, new)


@cli.command()
@click.argument("old", type=click.Path(dir_okay=False, allow_dash=True))
@click.argument("new", type=click.Path(dir_okay=False, allow_dash=True))
def check(old: str, new: str) -> None:
    """Verify that replaying the edits on OLD reproduces NEW."""
    run_cmd("check", old, new)


@cli.command()
@click.argument("old", type=click.Path(dir_okay=False, allow_dash=True))
@click.argument("script", type=click.Path(dir_okay=False, allow_dash=True))
def apply(old: str, script: str) -> None:
    """Apply an edit SCRIPT to the OLD key list and print the result."""
    run_cmd("apply", old, script)


@cli.command()
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(dir_okay=False),
    help="Read only the given config file.",
)
@click.option("--global", "scope", flag_value="global", help="Read ~/.keyeditconfig.")
@click.option("--local", "scope", flag_value="local", help="Read ./.keyeditconfig.")
@click.option("--get-all", is_flag=True, help="Print every value, not just the last.")
@click.argument("name")
def config(file_path: str | None, scope: str | None, get_all: bool, name: str) -> None:
    """Print the configuration value NAME."""
    args: list[str] = []
    if file_path is not None:
        args.append(f"--file={file_path}")
    elif scope is not None:
        args.append(f"--{scope}")
    if get_all:
        args.append("--get-all")

    run_cmd("config", *args, name)


if __name__ == "__main__":
    cli()
