from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Character offset or length inside one document."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Negative text offset: {self.value}")

    def __add__(self, other: TextSize) -> TextSize:
        return TextSize(self.value + other.value)

    def __sub__(self, other: TextSize) -> TextSize:
        return TextSize(self.value - other.value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open character range [start, end) of a document.

    Ranges sort by start, then end, which is the document order used for
    sibling nodes and folding regions.
    """

    _start: int
    _end: int

    def __post_init__(self) -> None:
        if self._start < 0:
            raise ValueError(f"Negative range start: {self._start}")
        if self._start > self._end:
            raise ValueError(f"Range start {self._start} is after end {self._end}")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> TextRange:
        return TextRange(start.value, end.value)

    @staticmethod
    def from_offsets(start: int, end: int) -> TextRange:
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        return TextSize(self._end - self._start)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def contains(self, offset: TextSize) -> bool:
        return self._start <= offset.value < self._end

    def contains_inclusive(self, offset: TextSize) -> bool:
        """Like `contains`, but a cursor placed right after the range also hits it."""
        return self._start <= offset.value <= self._end

    def contains_range(self, other: TextRange) -> bool:
        return self._start <= other._start and other._end <= self._end

    def cover(self, other: TextRange) -> TextRange:
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def ordering(self, other: TextRange) -> Literal[-1, 0, 1]:
        """-1 if this range ends before `other` starts, 1 if it starts after, 0 on overlap."""
        if self._end <= other._start:
            return -1
        if other._end <= self._start:
            return 1
        return 0

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    return source[range._start : range._end]
