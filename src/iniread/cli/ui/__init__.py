from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme

from iniread.cli.ui.formatters import (
    DocumentRenderOptions,
    document_to_yaml,
    render_document_table,
    render_error,
    render_sections,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "error": "bold red",
        "muted": "dim",
        "section": "bold cyan",
        "key": "magenta",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    return UI(
        console=Console(theme=THEME),
        err_console=Console(theme=THEME, stderr=True),
        verbose=verbose,
    )


__all__ = [
    "DocumentRenderOptions",
    "UI",
    "document_to_yaml",
    "get_ui",
    "render_document_table",
    "render_error",
    "render_sections",
]
