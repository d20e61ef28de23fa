"""Symbol tree nodes."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum
from typing import TYPE_CHECKING

from asmnav.text import TextRange

if TYPE_CHECKING:
    from asmnav.model.source_file import SourceFile


class TreeObjectKind(IntEnum):
    SECTION = 1
    MACRO = 2
    LABEL = 3
    SYMBOL = 4
    SOURCE_INCLUDE = 5
    BINARY_INCLUDE = 6

    @property
    def text(self) -> str:
        """Human readable name used in outline entries and hyperlink descriptions."""
        match self:
            case TreeObjectKind.SECTION:
                return "section"
            case TreeObjectKind.MACRO:
                return "macro"
            case TreeObjectKind.LABEL:
                return "label"
            case TreeObjectKind.SYMBOL:
                return "symbol"
            case TreeObjectKind.SOURCE_INCLUDE:
                return "source include"
            case TreeObjectKind.BINARY_INCLUDE:
                return "binary include"
            case _:
                raise ValueError(f"Unsupported TreeObjectKind: {self!r}")

    @property
    def is_scope(self) -> bool:
        return self in (TreeObjectKind.SECTION, TreeObjectKind.MACRO)

    @property
    def is_include(self) -> bool:
        return self in (TreeObjectKind.SOURCE_INCLUDE, TreeObjectKind.BINARY_INCLUDE)


class TreeObject:
    """One declaration in the symbol tree.

    Instances are created fully formed by `build_source_file` and never change
    afterwards.
    """

    __slots__ = (
        "kind",
        "name",
        "compound_name",
        "parent",
        "source_file",
        "index_in_parent",
        "_start",
        "_end",
        "_children",
    )

    def __init__(
        self,
        *,
        kind: TreeObjectKind,
        name: str | None,
        compound_name: str,
        start: int,
        end: int,
        parent: TreeObject | None,
        source_file: SourceFile,
        index_in_parent: int,
    ) -> None:
        self.kind = kind
        self.name = name
        self.compound_name = compound_name
        self.parent = parent
        self.source_file = source_file
        self.index_in_parent = index_in_parent
        self._start = start
        self._end = end
        self._children: tuple[TreeObject, ...] = ()

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def range(self) -> TextRange:
        return TextRange.from_offsets(self._start, self._end)

    @property
    def children(self) -> tuple[TreeObject, ...]:
        return self._children

    @property
    def has_children(self) -> bool:
        return bool(self._children)

    @property
    def is_definition(self) -> bool:
        """True when the node declares an identifier and is therefore indexed."""
        return self.name is not None and not self.kind.is_include

    @property
    def start_line(self) -> int:
        return self.source_file.line_of_offset(self._start)

    @property
    def end_line(self) -> int:
        # `end` is exclusive, the last covered character decides the line.
        return self.source_file.line_of_offset(max(self._start, self._end - 1))

    @property
    def text(self) -> str:
        return self.source_file.text[self._start : self._end]

    def ancestors(self) -> Iterator[TreeObject]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator[TreeObject]:
        """Pre-order traversal of this node and its descendants."""
        stack: list[TreeObject] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def __repr__(self) -> str:
        return f"TreeObject({self.kind.name}, {self.compound_name!r}, {self._start}, {self._end})"
