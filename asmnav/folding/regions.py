"""Fold regions derived from the symbol tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from asmnav.model import SourceFile
from asmnav.text import TextRange


@dataclass(frozen=True, slots=True, order=True)
class FoldRegion:
    """Line aligned foldable range: start of the first line up to past the last line break."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid fold region [{self.start}, {self.end})")

    @property
    def range(self) -> TextRange:
        return TextRange.from_offsets(self.start, self.end)


@dataclass(frozen=True, slots=True)
class FoldingDiff:
    to_add: frozenset[FoldRegion]
    to_remove: frozenset[FoldRegion]
    unchanged: frozenset[FoldRegion]

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


def folding_regions(source_file: SourceFile) -> frozenset[FoldRegion]:
    """One region per tree object spanning more than one line."""
    line_index = source_file.line_index
    regions: set[FoldRegion] = set()
    for node in source_file.walk():
        start_line = node.start_line
        end_line = node.end_line
        if start_line == end_line:
            continue
        regions.add(
            FoldRegion(
                start=line_index.line(start_line).start,
                end=line_index.line(end_line).end_with_break,
            )
        )
    return frozenset(regions)


def diff_folding_regions(previous: Iterable[FoldRegion], new: Iterable[FoldRegion]) -> FoldingDiff:
    """Regions to add, to remove, and to keep when going from `previous` to `new`."""
    previous_set = frozenset(previous)
    new_set = frozenset(new)
    return FoldingDiff(
        to_add=new_set - previous_set,
        to_remove=previous_set - new_set,
        unchanged=previous_set & new_set,
    )
