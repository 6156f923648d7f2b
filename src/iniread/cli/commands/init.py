from __future__ import annotations

from pathlib import Path
import typer

from iniread.cli.utils.files import ensure_dir, write_file
from iniread.core.models import DEFAULT_MAX_LINE_LENGTH

app = typer.Typer(help="Initialize iniread config in the current project.")


DEFAULT_CONFIG_TOML = f"""\
[reader]
# longest raw line read in one go; longer lines are split
max_line_length = {DEFAULT_MAX_LINE_LENGTH}
encoding = "utf-8"

[ui]
show_line_numbers = false
# table_title = "settings"
"""


DEFAULT_README = """\
# iniread configuration

`config.toml` sets how `iniread` reads INI files in this project.
The closest `.iniread/config.toml` (or `.iniread.toml`) above the working
directory wins over `~/.config/iniread/config.toml`.

## Usage

```bash
iniread get settings.ini server port
iniread dump settings.ini
```
"""


@app.command("repo")
def init_repo(
    path: Path = typer.Argument(Path("."), help="Project path to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files."),
) -> None:
    root = path.resolve()
    cfg_dir = root / ".iniread"
    ensure_dir(cfg_dir)

    for name, content in (("config.toml", DEFAULT_CONFIG_TOML), ("README.md", DEFAULT_README)):
        if not write_file(cfg_dir / name, content, force=force):
            typer.echo(f"Kept existing {name} (use --force to overwrite)")

    typer.echo(f"Initialized {cfg_dir}")
