"""Read INI-style configuration files: "[section]" headers and key/value lines."""
from __future__ import annotations

from iniread.core.builder import (
    find_section,
    free_document,
    get_value,
    parse_file,
    parse_stream,
    parse_string,
    section_get,
)
from iniread.core.errors import (
    ErrorCode,
    FileOpenError,
    IniError,
    IniIOError,
    KeyNotFoundError,
    NotBooleanError,
    NotFloatError,
    NotIntegerError,
    OutOfMemoryError,
    SectionNotFoundError,
    describe,
)
from iniread.core.models import Document, KeyValue, ReaderConfig, Section
from iniread.core.search import read_value, search_stream
from iniread.core.values import to_bool, to_float, to_int

__version__ = "0.1.0"

__all__ = [
    "Document",
    "ErrorCode",
    "FileOpenError",
    "IniError",
    "IniIOError",
    "KeyNotFoundError",
    "KeyValue",
    "NotBooleanError",
    "NotFloatError",
    "NotIntegerError",
    "OutOfMemoryError",
    "ReaderConfig",
    "Section",
    "SectionNotFoundError",
    "describe",
    "find_section",
    "free_document",
    "get_value",
    "parse_file",
    "parse_stream",
    "parse_string",
    "read_value",
    "search_stream",
    "section_get",
    "to_bool",
    "to_float",
    "to_int",
]
