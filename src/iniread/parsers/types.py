from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LogicalLine:
    """ One entry after continuation joining; lineno is where it started."""
    text: str
    lineno: int
