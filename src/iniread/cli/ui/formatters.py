from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from iniread.core.errors import IniError
from iniread.core.models import Document

IMPLICIT_SECTION_LABEL = "(implicit)"


def section_label(name: str) -> str:
    return name if name else IMPLICIT_SECTION_LABEL


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


# ----------------------------
# Document tables
# ----------------------------

@dataclass(frozen=True)
class DocumentRenderOptions:
    title: Optional[str] = None
    show_line_numbers: bool = False
    max_value_len: int = 120


def render_document_table(
    console: Console,
    doc: Document,
    *,
    opts: Optional[DocumentRenderOptions] = None,
) -> None:
    opts = opts or DocumentRenderOptions()

    if not doc.sections:
        console.print("[muted]No sections.[/muted]")
        return

    total = sum(len(s.items) for s in doc.sections)
    title = opts.title or f"{doc.n_sections} section(s), {total} key(s)"
    table = Table(title=title, show_lines=False)

    table.add_column("Section", style="section", no_wrap=True)
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value")
    if opts.show_line_numbers:
        table.add_column("Line", justify="right", no_wrap=True)

    for s in doc.sections:
        if not s.items:
            row = [Text(section_label(s.name)), Text("-", style="muted"), ""]
            if opts.show_line_numbers:
                row.append("")
            table.add_row(*row)
            continue
        for kv in s.items:
            row = [Text(section_label(s.name)), Text(kv.key), Text(_short(kv.value, opts.max_value_len))]
            if opts.show_line_numbers:
                row.append(str(kv.line or ""))
            table.add_row(*row)

    console.print(table)


def render_sections(console: Console, doc: Document) -> None:
    for s in doc.sections:
        console.print(escape(section_label(s.name)), highlight=False)


# ----------------------------
# Serialized views
# ----------------------------

def document_to_yaml(doc: Document) -> str:
    """
    Sections become a list (names may repeat), keys keep file order.
    """
    out: List[Dict[str, Any]] = []
    for s in doc.sections:
        out.append({"section": s.name, "items": [{kv.key: kv.value} for kv in s.items]})
    return yaml.safe_dump(out, sort_keys=False, allow_unicode=True)


# ----------------------------
# Errors
# ----------------------------

def render_error(console: Console, err: IniError, *, verbose: bool = False) -> None:
    console.print(f"[error]{escape(str(err))}[/error]")
    if verbose:
        console.print(f"[muted]code {int(err.code)} ({err.code.name})[/muted]")
