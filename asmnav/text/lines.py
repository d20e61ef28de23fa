"""Line bookkeeping for documents (offset <-> line conversion)."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass

from asmnav.text.text import TextRange

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class LineInfo:
    """One physical line; `end` excludes the line break, `end_with_break` includes it."""

    number: int
    start: int
    end: int
    end_with_break: int

    @property
    def range(self) -> TextRange:
        return TextRange.from_offsets(self.start, self.end)


class LineIndex:
    """Immutable line table built once per document text.

    Lines are 1-based. `\\n`, `\\r\\n` and a lone `\\r` all end a line.
    """

    __slots__ = ("_lines", "_starts", "_length")

    def __init__(self, text: str) -> None:
        lines: list[LineInfo] = []
        offset = 0
        for line_break in _LINE_BREAK.finditer(text):
            lines.append(
                LineInfo(
                    number=len(lines) + 1,
                    start=offset,
                    end=line_break.start(),
                    end_with_break=line_break.end(),
                )
            )
            offset = line_break.end()

        # The text after the last break (possibly empty) is always a line.
        lines.append(LineInfo(number=len(lines) + 1, start=offset, end=len(text), end_with_break=len(text)))

        self._lines: tuple[LineInfo, ...] = tuple(lines)
        self._starts: tuple[int, ...] = tuple(line.start for line in lines)
        self._length = len(text)

    @property
    def lines(self) -> tuple[LineInfo, ...]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, number: int) -> LineInfo:
        if number < 1 or number > len(self._lines):
            raise ValueError(f"Line {number} out of range 1..{len(self._lines)}")
        return self._lines[number - 1]

    def line_at(self, offset: int) -> LineInfo:
        """Line containing `offset`; an offset on a line break belongs to that line."""
        if offset < 0 or offset > self._length:
            raise ValueError(f"Offset {offset} out of range 0..{self._length}")
        return self._lines[bisect_right(self._starts, offset) - 1]

    def line_number(self, offset: int) -> int:
        return self.line_at(offset).number
