from __future__ import annotations

from typing import Optional, TextIO, Type

from iniread.core.builder import PathLike, open_config_file
from iniread.core.errors import (
    IniError,
    KeyNotFoundError,
    OutOfMemoryError,
    SectionNotFoundError,
)
from iniread.core.models import ReaderConfig
from iniread.parsers.lines import match_key, parse_section
from iniread.parsers.reader import LineReader


def search_stream(
    stream: TextIO,
    section: str,
    key: str,
    config: Optional[ReaderConfig] = None,
) -> str:
    """
    Find one value without building a Document.

    Stops at the first section named `section`: if the key is not there
    before the next header, later sections of the same name are not
    searched (the same answer Document.get_value gives).
    """
    pending: Type[IniError] = SectionNotFoundError
    in_section = False
    seen_header = False

    try:
        for line in LineReader(stream, config):
            name = parse_section(line.text)
            if name is not None:
                if in_section:
                    break
                seen_header = True
                if name == section:
                    in_section = True
                    pending = KeyNotFoundError
                continue

            # content before any header is the implicit "" section
            if not seen_header and section == "" and not in_section:
                in_section = True
                pending = KeyNotFoundError

            if in_section:
                value = match_key(line.text, key)
                if value is not None:
                    return value
    except MemoryError as e:
        raise OutOfMemoryError(f"searching for {section}.{key}") from e

    if pending is KeyNotFoundError:
        raise KeyNotFoundError(f"{section}.{key}")
    raise SectionNotFoundError(section)


def read_value(
    path: PathLike,
    section: str,
    key: str,
    config: Optional[ReaderConfig] = None,
) -> str:
    """
    Open `path` and return the value of `key` in `section`.

    Raises FileOpenError (after logging a diagnostic) if the file cannot be
    opened, SectionNotFoundError / KeyNotFoundError if the lookup misses.
    """
    config = config or ReaderConfig()
    with open_config_file(path, config) as f:
        return search_stream(f, section, key, config)
