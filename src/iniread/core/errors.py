from __future__ import annotations

from enum import IntEnum
from typing import Dict


class ErrorCode(IntEnum):
    OK = 0
    SECTION_NOT_FOUND = 1
    KEY_NOT_FOUND = 2
    FILE_OPEN = 3
    IO_ERROR = 4
    OUT_OF_MEMORY = 5
    NOT_BOOLEAN = 6
    NOT_INTEGER = 7
    NOT_FLOAT = 8
    # reserved, nothing raises it yet
    INTERPOLATION = 9


class ExitCode(IntEnum):
    """Process exit codes used by the CLI."""
    OK = 0
    NOT_FOUND = 1
    ERROR = 2


_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.OK: "Everything OK",
    ErrorCode.SECTION_NOT_FOUND: "Section not found",
    ErrorCode.KEY_NOT_FOUND: "Key not found in section",
    ErrorCode.FILE_OPEN: "Unable to open file",
    ErrorCode.IO_ERROR: "I/O error occured",
    ErrorCode.OUT_OF_MEMORY: "Error allocating memory",
    ErrorCode.NOT_BOOLEAN: "Variable not interpretable as boolean",
    ErrorCode.NOT_INTEGER: "Variable not an integer",
    ErrorCode.NOT_FLOAT: "Variable not an float",
    ErrorCode.INTERPOLATION: "Interpolation parse error",
}

_INVALID_CODE_MESSAGE = "BUG: invalid error code"


def describe(code: int) -> str:
    try:
        return _MESSAGES[ErrorCode(code)]
    except ValueError:
        return _INVALID_CODE_MESSAGE


# ================================
# Exceptions
# ================================


class IniError(Exception):
    """
    Base class for everything the library raises.

    `code` identifies the failure; str(exc) is the fixed message for the code,
    followed by the detail if one was given.
    """

    code: ErrorCode = ErrorCode.OK

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        msg = describe(self.code)
        super().__init__(f"{msg}: {detail}" if detail else msg)


class SectionNotFoundError(IniError, LookupError):
    code = ErrorCode.SECTION_NOT_FOUND


class KeyNotFoundError(IniError, LookupError):
    code = ErrorCode.KEY_NOT_FOUND


class FileOpenError(IniError):
    code = ErrorCode.FILE_OPEN


class IniIOError(IniError):
    code = ErrorCode.IO_ERROR


class OutOfMemoryError(IniError):
    code = ErrorCode.OUT_OF_MEMORY


class NotBooleanError(IniError, ValueError):
    code = ErrorCode.NOT_BOOLEAN


class NotIntegerError(IniError, ValueError):
    code = ErrorCode.NOT_INTEGER


class NotFloatError(IniError, ValueError):
    code = ErrorCode.NOT_FLOAT
