from __future__ import annotations

import logging
from typing import Iterator, List, Optional, TextIO, Tuple

from iniread.core.errors import IniIOError, OutOfMemoryError
from iniread.core.models import ReaderConfig
from iniread.parsers.types import LogicalLine

logger = logging.getLogger(__name__)

COMMENT_CHARS = "#;"


_TERMINATORS = ("\r\n", "\n", "\r")


def _strip_terminator(physical: str) -> Tuple[str, bool]:
    for t in _TERMINATORS:
        if physical.endswith(t):
            return physical[: -len(t)], True
    return physical, False


def _is_blank_or_comment(stripped: str) -> bool:
    body, _ = _strip_terminator(stripped)
    return body == "" or body[0] in COMMENT_CHARS


def _split_tail(physical: str, truncated: bool = False) -> Tuple[str, bool]:
    """
    Resolve the trailing backslashes of one physical line.

    Returns (content, continued). Pairs of trailing backslashes collapse to
    one literal backslash; an odd one left over marks a continuation and is
    dropped. The line terminator is never part of the content.

    A truncated read (cut off by max_line_length) does not end the physical
    line, so its backslashes are kept as they are.
    """
    body, _ = _strip_terminator(physical)
    if truncated:
        return body, False
    n = len(body) - len(body.rstrip("\\"))
    if n % 2 == 0:
        return body[: len(body) - n // 2], False
    return body[: len(body) - n // 2 - 1], True


class LineReader:
    """
    Turns a text stream into logical lines.

    Blank lines and comments are skipped, leading whitespace is removed, and
    physical lines ending in an odd number of backslashes are joined with the
    line that follows. Trailing whitespace is stripped from the result.
    LF, CRLF and bare CR all end a physical line.

    The stream is not closed here.
    """

    def __init__(self, stream: TextIO, config: Optional[ReaderConfig] = None) -> None:
        self._stream = stream
        self._config = config or ReaderConfig()
        self._lineno = 0
        self._at_line_start = True

    @property
    def lineno(self) -> int:
        """Physical line number of the last read."""
        return self._lineno

    def _read_physical(self) -> Tuple[str, bool]:
        """Return (raw, truncated) for the next bounded read."""
        limit = self._config.max_line_length
        try:
            raw = self._stream.readline(limit)
        except (OSError, UnicodeDecodeError) as e:
            raise IniIOError(str(e)) from e

        ended = raw.endswith(_TERMINATORS)
        if raw:
            if self._at_line_start:
                self._lineno += 1
            # an overlong line arrives in several reads; they share a number
            self._at_line_start = ended
        return raw, not ended and len(raw) >= limit

    def _assemble(self) -> Optional[LogicalLine]:
        while True:
            raw, truncated = self._read_physical()
            if not raw:
                return None
            first = raw.lstrip(" \t")
            if not _is_blank_or_comment(first):
                break
            logger.debug("skipping blank/comment line %d", self._lineno)

        start = self._lineno
        parts: List[str] = []
        content, continued = _split_tail(first, truncated)
        parts.append(content)
        while continued:
            raw, truncated = self._read_physical()
            if not raw:
                break
            content, continued = _split_tail(raw, truncated)
            parts.append(content)
        return LogicalLine(text="".join(parts).rstrip(" \t\r\n"), lineno=start)

    def read_logical_line(self) -> Optional[LogicalLine]:
        try:
            return self._assemble()
        except MemoryError as e:
            raise OutOfMemoryError(f"reading after line {self._lineno}") from e

    def __iter__(self) -> Iterator[LogicalLine]:
        while True:
            line = self.read_logical_line()
            if line is None:
                return
            yield line
