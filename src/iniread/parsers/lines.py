from __future__ import annotations

from typing import Optional, Tuple

WHITESPACE = " \t"
SEPARATORS = "=:"

_KEY_STOP = WHITESPACE + SEPARATORS


def _skip_white(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] in WHITESPACE:
        pos += 1
    return pos


def parse_section(line: str) -> Optional[str]:
    """
    Return the section name if the line is a "[name]" header, else None.

    The name is everything between "[" and the first "]", trimmed.
    A name that trims to nothing ("[ ]") or holds another "[" ("[[a]")
    is not treated as a header.
    """
    if len(line) <= 2 or line[0] != "[" or line[-1] != "]":
        return None

    name = line[1:].split("]", 1)[0].strip(WHITESPACE)
    if not name or "[" in name:
        return None
    return name


def split_key_value(line: str) -> Optional[Tuple[str, str]]:
    """
    Split "key = value" / "key:value" into (key, value).

    The key is the first run of characters up to whitespace or a separator.
    Returns None when there is no key, no separator, or no value.
    """
    k_len = 0
    while k_len < len(line) and line[k_len] not in _KEY_STOP:
        k_len += 1
    if k_len < 1:
        return None

    pos = _skip_white(line, k_len)
    if pos >= len(line) or line[pos] not in SEPARATORS:
        return None

    value = line[_skip_white(line, pos + 1):]
    if not value:
        return None
    return line[:k_len], value


def match_key(line: str, key: str) -> Optional[str]:
    """
    Return the value if the line assigns to `key`, else None.

    Cheaper than split_key_value when looking for one known key: only the
    prefix and the separator are checked.
    """
    if not key or any(c in _KEY_STOP for c in key):
        return None
    if not line.startswith(key):
        return None

    pos = _skip_white(line, len(key))
    if pos >= len(line) or line[pos] not in SEPARATORS:
        return None

    value = line[_skip_white(line, pos + 1):]
    return value or None
