"""Partition types."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from asmnav.text import TextRange


class PartitionKind(IntEnum):
    DEFAULT = 1
    SINGLE_LINE_COMMENT = 2
    STRING = 3


@dataclass(frozen=True, slots=True)
class Partition:
    """A labeled sub-range of source text."""

    kind: PartitionKind
    range: TextRange

    @property
    def start(self) -> int:
        return self.range.start.value

    @property
    def end(self) -> int:
        return self.range.end.value

    @property
    def is_code(self) -> bool:
        return self.kind == PartitionKind.DEFAULT


def partition_at(partitions: Sequence[Partition], offset: int) -> Partition | None:
    """Partition covering `offset`, or None when the offset is past the last partition."""
    if not partitions:
        return None
    index = bisect_right([partition.start for partition in partitions], offset) - 1
    if index < 0:
        return None
    partition = partitions[index]
    if partition.start <= offset < partition.end:
        return partition
    return None
