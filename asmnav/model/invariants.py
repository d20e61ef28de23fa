"""Structural checks for symbol trees."""

from __future__ import annotations

from collections.abc import Sequence

from asmnav.model.source_file import SourceFile
from asmnav.model.tree import TreeObject


class TreeInvariantError(RuntimeError):
    """A symbol tree violates containment, ordering or ownership."""


def check_tree_invariants(source_file: SourceFile) -> None:
    """Raise TreeInvariantError unless the tree of `source_file` is well formed.

    Checked: children lie inside their parent, siblings are sorted and
    disjoint, every node has exactly one owner and belongs to `source_file`.
    """
    _check_siblings(source_file.sections, parent=None)
    seen: set[int] = set()
    stack: list[TreeObject] = list(source_file.sections)
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise TreeInvariantError(f"{node!r} is reachable more than once")
        seen.add(id(node))
        if node.source_file is not source_file:
            raise TreeInvariantError(f"{node!r} belongs to a different source file")
        if node.start > node.end:
            raise TreeInvariantError(f"{node!r} has start > end")
        _check_siblings(node.children, parent=node)
        for child in node.children:
            if not node.range.contains_range(child.range):
                raise TreeInvariantError(f"{child!r} is not contained in parent {node!r}")
        stack.extend(node.children)


def _check_siblings(siblings: Sequence[TreeObject], *, parent: TreeObject | None) -> None:
    for index, node in enumerate(siblings):
        if node.parent is not parent:
            raise TreeInvariantError(f"{node!r} is not owned by {parent!r}")
        if node.index_in_parent != index:
            raise TreeInvariantError(f"{node!r} has index {node.index_in_parent}, expected {index}")
        if index == 0:
            continue
        previous = siblings[index - 1]
        if previous.start > node.start:
            raise TreeInvariantError(f"Siblings {previous!r} and {node!r} are not sorted")
        if previous.range.ordering(node.range) != -1:
            raise TreeInvariantError(f"Siblings {previous!r} and {node!r} overlap")
