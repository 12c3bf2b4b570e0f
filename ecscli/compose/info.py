"""Tabular rendering of information rows."""

from __future__ import annotations

from collections.abc import Iterable

from .types import InfoPart

_MIN_WIDTH = 4
_PADDING = 2


class _Tabulator:
    """Aligns tab-separated cells into space-padded columns.

    Lines consisting of a single cell end a block; columns are aligned only
    within a block, and only across consecutive lines that have the column.
    """

    def __init__(self, min_width: int, padding: int) -> None:
        self.min_width = min_width
        self.padding = padding
        self.out: list[str] = []

    def render(self, text: str) -> str:
        lines: list[list[str]] = [[]]
        cell: list[str] = []
        for char in text:
            if char in "\t\v":
                lines[-1].append("".join(cell))
                cell = []
            elif char in "\n\f":
                lines[-1].append("".join(cell))
                cell = []
                cell_count = len(lines[-1])
                lines.append([])
                if char == "\f" or cell_count == 1:
                    self._format(lines, 0, len(lines), ())
                    lines = [[]]
            else:
                cell.append(char)
        if cell:
            lines[-1].append("".join(cell))
        self._format(lines, 0, len(lines), ())
        return "".join(self.out)

    def _format(self, lines, start: int, stop: int, widths: tuple[int, ...]) -> None:
        column = len(widths)
        current = start
        while current < stop:
            if column >= len(lines[current]) - 1:
                current += 1
                continue
            self._write(lines, start, current, widths)
            start = current
            width = self.min_width
            while current < stop and column < len(lines[current]) - 1:
                width = max(width, len(lines[current][column]) + self.padding)
                current += 1
            self._format(lines, start, current, widths + (width,))
            start = current
        self._write(lines, start, stop, widths)

    def _write(self, lines, start: int, stop: int, widths: tuple[int, ...]) -> None:
        for index, line in enumerate(lines[start:stop], start):
            for column, text in enumerate(line):
                self.out.append(text)
                if column < len(widths):
                    self.out.append(" " * (widths[column] - len(text)))
            if index + 1 < len(lines):
                self.out.append("\n")


def format_info_set(infos: Iterable[Iterable[InfoPart]]) -> str:
    """Render rows as aligned columns, headed by the keys of the first row."""
    rows: list[str] = []
    for index, info in enumerate(infos):
        parts = list(info)
        if index == 0:
            rows.append("\t".join(part.key for part in parts))
        rows.append("\t".join(part.value for part in parts))
    text = "".join(f"{row}\n" for row in rows)
    return _Tabulator(_MIN_WIDTH, _PADDING).render(text)