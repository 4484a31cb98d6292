"""Pretty-printing of a table of text values."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from . import color

_SEPARATOR = "  "


class AsciiTable:
    """Collects rows of strings and renders them as aligned, centred columns."""

    def __init__(self) -> None:
        self._rows: list[tuple[bool, list[str]]] = []
        self._column_widths: list[int] = []

    def add_header(self, row: Iterable[str]) -> None:
        """Add a header row to the table."""
        self._add(row, is_header=True)

    def add_row(self, row: Iterable[str]) -> None:
        """Add a data row to the table."""
        self._add(row, is_header=False)

    def _add(self, row: Iterable[str], is_header: bool) -> None:
        cells = [str(cell) for cell in row]
        if len(self._column_widths) < len(cells):
            self._column_widths.extend([0] * (len(cells) - len(self._column_widths)))

        self._column_widths = [
            max(width, len(cells[i]) if i < len(cells) else 0)
            for i, width in enumerate(self._column_widths)
        ]
        self._rows.append((is_header, cells))

    def clear(self, reset_column_widths: bool = True) -> None:
        """Drop all rows added so far.

        With ``reset_column_widths`` false, the column widths seen so far are
        kept, so later rows render as if the earlier ones were still present.
        """
        self._rows.clear()
        if reset_column_widths:
            self._column_widths.clear()

    def _render_row(self, out: TextIO, row: list[str], is_header: bool, is_border: bool) -> None:
        cells = []
        for i, width in enumerate(self._column_widths):
            value = row[i] if i < len(row) else ""
            fill_left = " " * ((width - len(value)) // 2)
            fill_right = " " * (width - len(fill_left) - len(value))

            if is_header:
                value = color.yellow(value)
            elif is_border:
                value = color.normal(value)

            cells.append(fill_left + value + fill_right)

        out.write(_SEPARATOR.join(cells) + _SEPARATOR + "\n")

    def render(self, out: TextIO | None = None, include_header: bool = True) -> None:
        """Write the rows added so far to ``out`` (standard output by default)."""
        if out is None:
            out = sys.stdout

        border = ["-" * width for width in self._column_widths]

        for is_header, row in self._rows:
            if is_header and not include_header:
                continue

            self._render_row(out, row, is_header, False)

            if is_header:
                self._render_row(out, border, False, True)