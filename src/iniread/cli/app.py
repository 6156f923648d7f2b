from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console

from iniread import __version__
from iniread.cli.commands.init import app as init_app
from iniread.cli.commands.query import dump_cmd, get_cmd, sections_cmd

app = typer.Typer(
    name="iniread",
    help="Query and inspect INI-style configuration files.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"iniread {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    ctx.obj = {"verbose": verbose}


app.command("get")(get_cmd)
app.command("dump")(dump_cmd)
app.command("sections")(sections_cmd)

# Register command groups
app.add_typer(init_app, name="init")
