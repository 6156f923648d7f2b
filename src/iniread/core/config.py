from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from iniread.core.models import ReaderConfig, UIConfig

try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

logger = logging.getLogger(__name__)

REPO_CONFIG_NAMES = (".iniread/config.toml", ".iniread.toml")
GLOBAL_CONFIG_PATHS = ("~/.config/iniread/config.toml", "~/.iniread/config.toml")

# only these tables are read; anything else in the file is ignored
TABLES = ("reader", "ui")


def _first_existing(candidates: Iterable[Path]) -> Optional[Path]:
    return next((p for p in candidates if p.is_file()), None)


def find_repo_config(start_dir: Path) -> Optional[Path]:
    """Closest settings file in start_dir or one of its parents."""
    here = start_dir.resolve()
    for d in (here, *here.parents):
        found = _first_existing(d / name for name in REPO_CONFIG_NAMES)
        if found is not None:
            return found.resolve()
    return None


def find_global_config() -> Optional[Path]:
    found = _first_existing(Path(p).expanduser() for p in GLOBAL_CONFIG_PATHS)
    return found.resolve() if found is not None else None


def _load_tables(path: Path) -> Dict[str, Dict[str, Any]]:
    with path.open("rb") as f:
        data = tomllib.load(f)
    logger.debug("loaded settings from %s", path)
    return {name: data[name] for name in TABLES if isinstance(data.get(name), dict)}


def _layer(into: Dict[str, Dict[str, Any]], tables: Mapping[str, Any]) -> None:
    for name in TABLES:
        values = tables.get(name)
        if isinstance(values, Mapping):
            into[name].update(values)


@dataclass(frozen=True)
class LoadedConfig:
    reader: ReaderConfig
    ui: UIConfig
    global_path: Optional[Path]
    repo_path: Optional[Path]


def load_settings(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Build the effective settings for a run started in `start_dir`.

    Model defaults are overlaid by the global file, then by the closest repo
    file, then by `cli_overrides` (same {"reader": {...}, "ui": {...}} shape
    as the files). Each key set by a later layer replaces the earlier one.
    """
    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    merged: Dict[str, Dict[str, Any]] = {name: {} for name in TABLES}
    for path in (global_path, repo_path):
        if path is not None:
            _layer(merged, _load_tables(path))
    _layer(merged, cli_overrides or {})

    return LoadedConfig(
        reader=ReaderConfig.model_validate(merged["reader"]),
        ui=UIConfig.model_validate(merged["ui"]),
        global_path=global_path,
        repo_path=repo_path,
    )
