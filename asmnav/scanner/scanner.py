"""Partition scanner: labels code, single line comment and string ranges."""

from __future__ import annotations

from asmnav.scanner.partitions import Partition, PartitionKind
from asmnav.syntax import SyntaxTable
from asmnav.text import TextRange


class PartitionScanner:
    """Single left-to-right pass over a document, no backtracking.

    Partitions are contiguous and cover the whole text. Line breaks are always
    DEFAULT, so comments and strings never span lines.
    """

    def __init__(self, source: str, syntax: SyntaxTable) -> None:
        self._source = source
        self._syntax = syntax
        self._position = 0
        self._string_delimiters = frozenset(syntax.string_delimiters)

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def scan(self) -> list[Partition]:
        partitions: list[Partition] = []
        while not self.is_eof:
            start = self._position
            kind = self._scan_partition()
            if partitions and kind == PartitionKind.DEFAULT and partitions[-1].kind == PartitionKind.DEFAULT:
                previous = partitions.pop()
                start = previous.start
            partitions.append(Partition(kind, TextRange.from_offsets(start, self._position)))
        return partitions

    def _scan_partition(self) -> PartitionKind:
        ch = self._current_char()
        if ch == "\r" or ch == "\n":
            self._consume_newline()
            return PartitionKind.DEFAULT

        if self._comment_delimiter_at_position() is not None:
            return self._scan_comment()

        if ch in self._string_delimiters:
            return self._scan_string(ch)

        self._scan_code()
        return PartitionKind.DEFAULT

    def _scan_comment(self) -> PartitionKind:
        # Consume until end of line, do not consume the line break itself.
        while not self.is_eof and not self._at_line_break():
            self._advance(1)
        return PartitionKind.SINGLE_LINE_COMMENT

    def _scan_string(self, delimiter: str) -> PartitionKind:
        self._advance(1)
        while not self.is_eof and not self._at_line_break():
            ch = self._current_char()
            self._advance(1)
            if ch == delimiter:
                break
        return PartitionKind.STRING

    def _scan_code(self) -> None:
        while not self.is_eof and not self._at_line_break():
            if self._current_char() in self._string_delimiters:
                break
            if self._comment_delimiter_at_position() is not None:
                break
            self._advance(1)

    def _comment_delimiter_at_position(self) -> str | None:
        for delimiter in self._syntax.single_line_comment_delimiters:
            if self._source.startswith(delimiter, self._position):
                return delimiter
        return None

    def _consume_newline(self) -> None:
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
            return
        self._advance(1)

    def _at_line_break(self) -> bool:
        ch = self._current_char()
        return ch == "\n" or ch == "\r"

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def scan_partitions(text: str, syntax: SyntaxTable) -> tuple[Partition, ...]:
    """Partition `text` into DEFAULT / SINGLE_LINE_COMMENT / STRING ranges."""
    return tuple(PartitionScanner(text, syntax).scan())


def dump_partitions(partitions: tuple[Partition, ...] | list[Partition], source: str) -> None:
    """Print partition list with kind, range and text for debugging."""
    for i, partition in enumerate(partitions):
        text = source[partition.start : partition.end]
        print(f"{i:03d} {partition.kind.name:<20} range={partition.range.as_tuple()} text={text!r}")
