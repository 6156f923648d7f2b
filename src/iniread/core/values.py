from __future__ import annotations

from iniread.core.errors import NotBooleanError, NotFloatError, NotIntegerError

_TRUE = frozenset({"1", "yes", "true", "on"})
_FALSE = frozenset({"0", "no", "false", "off"})


def to_bool(value: str) -> bool:
    v = (value or "").strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise NotBooleanError(value)


def to_int(value: str) -> int:
    """
    Decimal ("42", "-7", "007") or a prefixed literal ("0x1f", "0o17", "0b101").
    """
    v = (value or "").strip()
    if "_" in v:
        raise NotIntegerError(value)
    try:
        return int(v, 10)
    except ValueError:
        pass
    try:
        return int(v, 0)
    except ValueError as e:
        raise NotIntegerError(value) from e


def to_float(value: str) -> float:
    v = (value or "").strip()
    if "_" in v:
        raise NotFloatError(value)
    try:
        return float(v)
    except ValueError as e:
        raise NotFloatError(value) from e
