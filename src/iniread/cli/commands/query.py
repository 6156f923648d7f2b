from __future__ import annotations

import enum
from pathlib import Path
from typing import Optional

import typer

from iniread.cli.ui import (
    DocumentRenderOptions,
    document_to_yaml,
    get_ui,
    render_document_table,
    render_error,
    render_sections,
)
from iniread.core.builder import parse_file
from iniread.core.config import LoadedConfig, load_settings
from iniread.core.errors import ExitCode, IniError, KeyNotFoundError, SectionNotFoundError
from iniread.core.models import Document
from iniread.core.search import read_value


class OutputFormat(str, enum.Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def _verbose(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("verbose", False))


def _load_settings(max_line_length: Optional[int]) -> LoadedConfig:
    cli_overrides = {"reader": {}}
    if max_line_length is not None:
        cli_overrides["reader"]["max_line_length"] = int(max_line_length)
    return load_settings(start_dir=Path.cwd(), cli_overrides=cli_overrides)


def _exit_for(err: IniError) -> typer.Exit:
    if isinstance(err, (SectionNotFoundError, KeyNotFoundError)):
        return typer.Exit(code=int(ExitCode.NOT_FOUND))
    return typer.Exit(code=int(ExitCode.ERROR))


def _parse_or_exit(ctx: typer.Context, file: Path, loaded: LoadedConfig) -> Document:
    try:
        return parse_file(file, loaded.reader)
    except IniError as e:
        render_error(get_ui().err_console, e, verbose=_verbose(ctx))
        raise _exit_for(e)


_MAX_LINE_HELP = "Bound on one raw physical-line read (overrides config)."


def get_cmd(
    ctx: typer.Context,
    file: Path = typer.Argument(..., dir_okay=False, help="INI file to read."),
    section: str = typer.Argument(..., help='Section name ("" for keys before any header).'),
    key: str = typer.Argument(..., help="Key to look up."),
    full: bool = typer.Option(
        False, "--full", help="Parse the whole file first instead of stopping at the first match."
    ),
    max_line_length: Optional[int] = typer.Option(
        None, "--max-line-length", min=2, help=_MAX_LINE_HELP
    ),
) -> None:
    """Print the value of KEY in SECTION."""
    ui = get_ui(verbose=_verbose(ctx))
    loaded = _load_settings(max_line_length)

    try:
        if full:
            value = parse_file(file, loaded.reader).get_value(section, key)
        else:
            value = read_value(file, section, key, loaded.reader)
    except IniError as e:
        render_error(ui.err_console, e, verbose=ui.verbose)
        raise _exit_for(e)

    typer.echo(value)


def dump_cmd(
    ctx: typer.Context,
    file: Path = typer.Argument(..., dir_okay=False, help="INI file to read."),
    fmt: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format."
    ),
    line_numbers: Optional[bool] = typer.Option(
        None,
        "--line-numbers/--no-line-numbers",
        help="Show the line each entry starts on (overrides config if set).",
    ),
    max_line_length: Optional[int] = typer.Option(
        None, "--max-line-length", min=2, help=_MAX_LINE_HELP
    ),
) -> None:
    """Show every section and key/value pair."""
    ui = get_ui(verbose=_verbose(ctx))
    loaded = _load_settings(max_line_length)
    doc = _parse_or_exit(ctx, file, loaded)

    if fmt == OutputFormat.JSON:
        typer.echo(doc.model_dump_json(indent=2))
    elif fmt == OutputFormat.YAML:
        typer.echo(document_to_yaml(doc), nl=False)
    else:
        show_lines = loaded.ui.show_line_numbers if line_numbers is None else line_numbers
        render_document_table(
            ui.console,
            doc,
            opts=DocumentRenderOptions(
                title=loaded.ui.table_title, show_line_numbers=show_lines
            ),
        )

    if ui.verbose:
        ui.err_console.print(f"[muted]reader: {loaded.reader.model_dump()}[/muted]")
        ui.err_console.print(f"[muted]global config: {loaded.global_path or '-'}[/muted]")
        ui.err_console.print(f"[muted]repo config:   {loaded.repo_path or '-'}[/muted]")


def sections_cmd(
    ctx: typer.Context,
    file: Path = typer.Argument(..., dir_okay=False, help="INI file to read."),
) -> None:
    """List section names in file order."""
    ui = get_ui(verbose=_verbose(ctx))
    doc = _parse_or_exit(ctx, file, _load_settings(None))
    render_sections(ui.console, doc)
