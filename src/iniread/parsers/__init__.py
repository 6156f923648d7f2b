from __future__ import annotations

from iniread.parsers.lines import match_key, parse_section, split_key_value
from iniread.parsers.reader import LineReader
from iniread.parsers.types import LogicalLine

__all__ = [
    "LineReader",
    "LogicalLine",
    "match_key",
    "parse_section",
    "split_key_value",
]
