"""File-system tables: paths matching a glob, their lines, and parsed columns."""

from __future__ import annotations

import ipaddress
import os
import re
import stat
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Iterator

from .helpers import glob
from .textutil import split, starts_with, tolower, trim

DEFAULT_SEPARATOR = ""
DEFAULT_IGNORE = r"^[ \t]*([#;]|$)"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_COUNT = re.compile(r"\+?[0-9]+")
_TRUE = {"1", "true", "t", "yes", "y"}
_FALSE = {"0", "false", "f", "no", "n"}


class ContentError(ValueError):
    """A table's parameters are invalid, so no content can be produced."""


class ColumnType(Enum):
    """Types that a column extracted from a file can be parsed as."""

    ADDRESS = "address"
    BLOB = "blob"
    BOOL = "bool"
    COUNT = "count"
    DOUBLE = "double"
    INTEGER = "int"
    NULL = "null"
    TEXT = "text"

    @classmethod
    def from_name(cls, name: str) -> "ColumnType":
        """Look up a type by name; raises ``ValueError`` for unknown names."""
        try:
            return _TYPE_NAMES[name]
        except KeyError:
            raise ValueError(f"unknown type: {name}") from None

    def convert(self, text: str) -> Any:
        """Parse ``text`` as a value of this type, or return None if it does not parse."""
        if self in (ColumnType.TEXT, ColumnType.BLOB):
            return text
        if self is ColumnType.INTEGER:
            return int(text) if _INTEGER.fullmatch(text) else None
        if self is ColumnType.COUNT:
            return int(text) if _COUNT.fullmatch(text) else None
        if self is ColumnType.DOUBLE:
            try:
                return float(text)
            except ValueError:
                return None
        if self is ColumnType.BOOL:
            lowered = tolower(text)
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            return None
        if self is ColumnType.ADDRESS:
            try:
                return str(ipaddress.ip_address(text))
            except ValueError:
                return None
        return None


_TYPE_NAMES = {
    "address": ColumnType.ADDRESS,
    "addr": ColumnType.ADDRESS,
    "blob": ColumnType.BLOB,
    "bool": ColumnType.BOOL,
    "count": ColumnType.COUNT,
    "double": ColumnType.DOUBLE,
    "real": ColumnType.DOUBLE,
    "int": ColumnType.INTEGER,
    "integer": ColumnType.INTEGER,
    "null": ColumnType.NULL,
    "text": ColumnType.TEXT,
}


def parse_columns_spec(spec: str) -> list[tuple[int, ColumnType]]:
    """Parse a ``$<N>:<type>,...`` specification into (column, type) pairs.

    Raises ``ValueError`` if the specification is malformed.
    """
    columns: list[tuple[int, ColumnType]] = []

    for c in split(trim(spec), ","):
        m = split(trim(c), ":")
        if len(m) != 2:
            raise ValueError(f"invalid column specification: {c}")

        number = m[0]
        if len(number) < 2 or not starts_with(number, "$"):
            raise ValueError(f"invalid column number: {number}")
        if not all(ch in "0123456789" for ch in number[1:]):
            raise ValueError(f"invalid column number: {number}")

        columns.append((int(number[1:]), ColumnType.from_name(tolower(trim(m[1])))))

    if not columns:
        raise ValueError("no columns specified")

    return columns


def expand_paths(pattern: str) -> tuple[str, list[Path]]:
    """Return the pattern together with all existing paths matching it."""
    return pattern, glob(pattern)


def _file_type(mode: int) -> str:
    if stat.S_ISBLK(mode):
        return "block"
    if stat.S_ISCHR(mode):
        return "char"
    if stat.S_ISDIR(mode):
        return "dir"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISREG(mode):
        return "file"
    if stat.S_ISSOCK(mode):
        return "socket"
    return "other"


def files_list(pattern: str) -> list[dict[str, Any]]:
    """Return one row per path matching ``pattern``, with its file status."""
    pattern, paths = expand_paths(pattern)
    rows = []

    for p in paths:
        row: dict[str, Any] = {
            "_pattern": pattern,
            "path": str(p),
            "type": None,
            "uid": None,
            "gid": None,
            "mode": None,
            "mtime": None,
            "size": None,
        }
        try:
            st = os.stat(p)
        except OSError:
            pass
        else:
            row.update(
                type=_file_type(st.st_mode),
                uid=st.st_uid,
                gid=st.st_gid,
                mode=format(stat.S_IMODE(st.st_mode) | (st.st_mode & 0o7000), "o"),
                mtime=datetime.fromtimestamp(int(st.st_mtime), timezone.utc),
                size=st.st_size,
            )
        rows.append(row)

    return rows


def _read_lines(path: Path) -> Iterator[str]:
    with open(path, "rb") as f:
        for raw in f:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
            yield raw.decode("utf-8", errors="surrogateescape")


def _open_lines(path: Path) -> Iterator[str] | None:
    """Return a line iterator for ``path``, or None if it cannot be read as a file."""
    try:
        f = open(path, "rb")
    except IsADirectoryError:
        return iter(())
    except OSError:
        return None
    f.close()
    return _read_lines(path)


def files_lines(pattern: str) -> list[dict[str, Any]]:
    """Return one row per line of every file matching ``pattern``, white space trimmed."""
    pattern, paths = expand_paths(pattern)
    rows = []

    for p in paths:
        lines = _open_lines(p)
        if lines is None:
            if p.exists():
                rows.append(
                    {"_pattern": pattern, "path": str(p), "number": None, "content": "<failed to open file>"}
                )
            continue

        for number, content in enumerate(lines, start=1):
            rows.append({"_pattern": pattern, "path": str(p), "number": number, "content": trim(content)})

    return rows


def files_columns(
    pattern: str,
    columns: str,
    separator: str = DEFAULT_SEPARATOR,
    ignore: str = DEFAULT_IGNORE,
) -> list[dict[str, Any]]:
    """Return selected, typed columns from each line of the files matching ``pattern``.

    Each row's ``columns`` entry is a list of ``(value, ColumnType)`` pairs; the
    value is None where a column is absent or does not parse. Raises
    ``ContentError`` for an invalid column specification or ignore pattern.
    """
    try:
        spec = parse_columns_spec(columns)
    except ValueError as exc:
        raise ContentError(f"invalid column specification for 'files_columns': {columns}") from exc

    ignore_regex = None
    if ignore:
        try:
            ignore_regex = re.compile(ignore)
        except re.error as exc:
            raise ContentError(f"invalid ignore regex for 'files_columns': {ignore}") from exc

    pattern, paths = expand_paths(pattern)
    rows = []

    for p in paths:
        lines = _open_lines(p)
        if lines is None:
            continue

        number = 0
        for line in lines:
            if ignore_regex is not None and ignore_regex.search(line):
                continue

            fields = split(line, separator) if separator else split(line)

            record: list[tuple[Any, ColumnType]] = []
            for nr, type_ in spec:
                if nr == 0:
                    record.append((type_.convert(line), type_))
                elif 1 <= nr <= len(fields):
                    record.append((type_.convert(fields[nr - 1]), type_))
                else:
                    record.append((None, ColumnType.NULL))

            number += 1
            rows.append(
                {
                    "_pattern": pattern,
                    "_columns": columns,
                    "_separator": separator,
                    "_ignore": ignore,
                    "path": str(p),
                    "number": number,
                    "columns": record,
                }
            )

    return rows