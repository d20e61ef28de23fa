"""Word splitting over scanned partitions."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from asmnav.scanner import Partition, PartitionKind

# Operators and punctuation split words; `:` only when it starts `:=`.
_WORD = re.compile(r"<<<|:=|=|\]?(?:[^\s=,()\[\]{}+\-*/<>#&|^~:]|:(?!=))+")


@dataclass(frozen=True, slots=True)
class Word:
    """One word of code, or one quoted string, with document offsets."""

    text: str
    start: int
    end: int
    quoted: bool = False

    def unquoted(self) -> tuple[str, int, int]:
        """Content of a quoted word and its offsets, without the delimiters."""
        if not self.quoted:
            return self.text, self.start, self.end
        delimiter = self.text[0]
        if len(self.text) >= 2 and self.text.endswith(delimiter):
            return self.text[1:-1], self.start + 1, self.end - 1
        # Unterminated strings run to the end of the line.
        return self.text[1:], self.start + 1, self.end


def iter_words(source: str, partitions: Sequence[Partition], *, base_offset: int = 0) -> Iterator[Word]:
    """Words of DEFAULT partitions and whole STRING partitions, in document order.

    Comments produce nothing. `base_offset` is added to every offset, so a
    single line can be split with partitions relative to the line.
    """
    for partition in partitions:
        match partition.kind:
            case PartitionKind.DEFAULT:
                for found in _WORD.finditer(source, partition.start, partition.end):
                    yield Word(found.group(), base_offset + found.start(), base_offset + found.end())
            case PartitionKind.STRING:
                yield Word(
                    source[partition.start : partition.end],
                    base_offset + partition.start,
                    base_offset + partition.end,
                    quoted=True,
                )
            case PartitionKind.SINGLE_LINE_COMMENT:
                continue
