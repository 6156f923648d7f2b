from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from iniread.core.errors import FileOpenError, OutOfMemoryError
from iniread.core.models import Document, KeyValue, ReaderConfig, Section
from iniread.parsers.lines import parse_section, split_key_value
from iniread.parsers.reader import LineReader

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def open_config_file(path: PathLike, config: ReaderConfig) -> TextIO:
    """
    Open `path` for reading, or log and raise FileOpenError.
    """
    try:
        return open(path, "rt", encoding=config.encoding)
    except (OSError, LookupError) as e:
        logger.error("cannot read config file: %s", path)
        raise FileOpenError(str(path)) from e


def parse_stream(stream: TextIO, config: Optional[ReaderConfig] = None) -> Document:
    """
    Build a Document from an open text stream. The caller keeps the stream.

    Every header opens a new Section, even if the name was seen before.
    Lines before the first header go into the implicit "" section.
    Lines that are neither headers nor key/value pairs are dropped.
    """
    doc = Document()
    current: Optional[Section] = None

    try:
        for line in LineReader(stream, config):
            name = parse_section(line.text)
            if name is not None:
                logger.debug("line %d: section [%s]", line.lineno, name)
                current = Section(name=name)
                doc.sections.append(current)
                continue

            if current is None:
                current = Section(name="")
                doc.sections.append(current)

            kv = split_key_value(line.text)
            if kv is None:
                logger.debug("line %d: not a key/value pair, ignored", line.lineno)
                continue
            key, value = kv
            current.items.append(KeyValue(key=key, value=value, line=line.lineno))
    except MemoryError as e:
        doc.free()
        raise OutOfMemoryError("building document") from e
    except OutOfMemoryError:
        doc.free()
        raise

    return doc


def parse_file(path: PathLike, config: Optional[ReaderConfig] = None) -> Document:
    config = config or ReaderConfig()
    with open_config_file(path, config) as f:
        return parse_stream(f, config)


def parse_string(text: str, config: Optional[ReaderConfig] = None) -> Document:
    # universal newlines, same as a file opened in text mode
    return parse_stream(io.StringIO(text, newline=None), config)


# Module-level spellings of the Document lookups.


def get_value(doc: Document, section: str, key: str) -> str:
    return doc.get_value(section, key)


def find_section(doc: Document, name: str) -> Optional[Section]:
    return doc.find_section(name)


def section_get(section: Section, key: str) -> Optional[str]:
    return section.get(key)


def free_document(doc: Document) -> None:
    doc.free()
