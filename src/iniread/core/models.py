from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from iniread.core.errors import KeyNotFoundError, SectionNotFoundError
from iniread.core.values import to_bool, to_float, to_int

T = TypeVar("T")

_MISSING = object()


# ================================
# Document model
# ================================


class KeyValue(BaseModel):
    key: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)
    line: Optional[int] = Field(default=None, description="Physical line the entry started on")


class Section(BaseModel):
    """
    A named group of entries. The implicit section (content before the first
    header) has the empty name.
    """

    name: str = ""
    items: List[KeyValue] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _name_must_be_bare(cls, v: str) -> str:
        if "[" in v or "]" in v:
            raise ValueError("section name must not contain brackets")
        if v != v.strip(" \t"):
            raise ValueError("section name must not have surrounding whitespace")
        return v

    def get(self, key: str) -> Optional[str]:
        for kv in self.items:
            if kv.key == key:
                return kv.value
        return None

    def keys(self) -> List[str]:
        return [kv.key for kv in self.items]


class Document(BaseModel):
    sections: List[Section] = Field(default_factory=list)

    @property
    def n_sections(self) -> int:
        return len(self.sections)

    def section_names(self) -> List[str]:
        return [s.name for s in self.sections]

    def find_section(self, name: str) -> Optional[Section]:
        for s in self.sections:
            if s.name == name:
                return s
        return None

    def get_value(self, section: str, key: str) -> str:
        """
        Look up `key` in the first section named `section`.

        Later sections with the same name are never consulted.
        """
        s = self.find_section(section)
        if s is None:
            raise SectionNotFoundError(section)
        value = s.get(key)
        if value is None:
            raise KeyNotFoundError(f"{section}.{key}")
        return value

    def _get_as(self, convert: Callable[[str], T], section: str, key: str, default):
        try:
            raw = self.get_value(section, key)
        except (SectionNotFoundError, KeyNotFoundError):
            if default is _MISSING:
                raise
            return default
        return convert(raw)

    def get_bool(self, section: str, key: str, default=_MISSING) -> bool:
        return self._get_as(to_bool, section, key, default)

    def get_int(self, section: str, key: str, default=_MISSING) -> int:
        return self._get_as(to_int, section, key, default)

    def get_float(self, section: str, key: str, default=_MISSING) -> float:
        return self._get_as(to_float, section, key, default)

    def free(self) -> None:
        for s in self.sections:
            s.items.clear()
        self.sections.clear()


# ================================
# Reader config (defaults only)
# ================================

DEFAULT_MAX_LINE_LENGTH = 1024


class ReaderConfig(BaseModel):
    """
    Defaults live here.
    Repo/global/CLI overrides are merged by core/config.py (do NOT load config in defaults).
    """

    max_line_length: int = Field(
        default=DEFAULT_MAX_LINE_LENGTH,
        ge=2,
        description="Upper bound on one raw physical-line read, before continuation joining.",
    )
    encoding: str = "utf-8"


# ================================
# UI config (defaults only)
# ================================


class UIConfig(BaseModel):
    show_line_numbers: bool = False
    table_title: Optional[str] = None
