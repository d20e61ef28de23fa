"""Source file model: one immutable parse snapshot of a document."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from asmnav.diagnostics import Diagnostic
from asmnav.model.references import IncludeReference
from asmnav.model.tree import TreeObject, TreeObjectKind
from asmnav.syntax import SyntaxTable
from asmnav.text import LineIndex


class SourceFile:
    """Parsed document: symbol tree, identifier index, include references.

    Built in one go by `build_source_file`. A re-parse produces a new instance
    instead of touching this one, so a reference held by a reader stays a
    consistent snapshot.
    """

    __slots__ = (
        "source_path",
        "text",
        "syntax",
        "line_index",
        "_sections",
        "_definitions",
        "_compound_definitions",
        "_identifiers",
        "_file_references",
        "_diagnostics",
    )

    def __init__(self, *, text: str, syntax: SyntaxTable, source_path: str | None = None) -> None:
        self.source_path = source_path
        self.text = text
        self.syntax = syntax
        self.line_index = LineIndex(text)
        self._sections: tuple[TreeObject, ...] = ()
        self._definitions: Mapping[str, tuple[TreeObject, ...]] = MappingProxyType({})
        self._compound_definitions: Mapping[str, tuple[TreeObject, ...]] = MappingProxyType({})
        self._identifiers: tuple[TreeObject, ...] = ()
        self._file_references: tuple[IncludeReference, ...] = ()
        self._diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def sections(self) -> tuple[TreeObject, ...]:
        """Top-level tree objects in document order."""
        return self._sections

    @property
    def identifiers(self) -> tuple[TreeObject, ...]:
        """All declaring tree objects in document order."""
        return self._identifiers

    @property
    def file_references(self) -> tuple[IncludeReference, ...]:
        return self._file_references

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self._diagnostics

    @property
    def source_directory(self) -> str | None:
        if self.source_path is None:
            return None
        return str(Path(self.source_path).parent)

    @property
    def file_name(self) -> str:
        if self.source_path is None:
            return ""
        return Path(self.source_path).name

    def definitions_of(self, name: str) -> tuple[TreeObject, ...]:
        """Declarations of `name` in document order, empty when unknown."""
        return self._definitions.get(self.syntax.normalize_identifier(name), ())

    def definitions_of_compound(self, compound_name: str) -> tuple[TreeObject, ...]:
        return self._compound_definitions.get(self.syntax.normalize_identifier(compound_name), ())

    def line_of_offset(self, offset: int) -> int:
        """1-based line number of `offset`."""
        return self.line_index.line_number(offset)

    def walk(self) -> Iterator[TreeObject]:
        for section in self._sections:
            yield from section.walk()

    def find_innermost(self, offset: int) -> TreeObject | None:
        """Deepest tree object whose range contains `offset`."""
        found: TreeObject | None = None
        candidates = self._sections
        while True:
            match = next((node for node in candidates if node.start <= offset < node.end), None)
            if match is None:
                return found
            found = match
            candidates = match.children

    def __repr__(self) -> str:
        return f"SourceFile({self.source_path!r}, sections={len(self._sections)})"


@dataclass(slots=True)
class PendingTreeObject:
    """Mutable node used while a parse is in progress."""

    kind: TreeObjectKind
    name: str | None
    start: int
    end: int
    children: list[PendingTreeObject] = field(default_factory=list)


def build_source_file(
    *,
    text: str,
    syntax: SyntaxTable,
    source_path: str | None,
    roots: Sequence[PendingTreeObject],
    file_references: Sequence[IncludeReference] = (),
    diagnostics: Sequence[Diagnostic] = (),
) -> SourceFile:
    """Freeze a pending tree into a complete SourceFile snapshot."""
    source_file = SourceFile(text=text, syntax=syntax, source_path=source_path)
    sections = tuple(
        _build_node(
            pending=pending,
            parent=None,
            index_in_parent=index,
            source_file=source_file,
        )
        for index, pending in enumerate(roots)
    )

    definitions: dict[str, list[TreeObject]] = {}
    compound_definitions: dict[str, list[TreeObject]] = {}
    identifiers: list[TreeObject] = []
    for section in sections:
        for node in section.walk():
            if node.name is None or not node.is_definition:
                continue
            identifiers.append(node)
            definitions.setdefault(syntax.normalize_identifier(node.name), []).append(node)
            compound_definitions.setdefault(syntax.normalize_identifier(node.compound_name), []).append(node)

    source_file._sections = sections
    source_file._identifiers = tuple(identifiers)
    source_file._definitions = MappingProxyType({key: tuple(nodes) for key, nodes in definitions.items()})
    source_file._compound_definitions = MappingProxyType(
        {key: tuple(nodes) for key, nodes in compound_definitions.items()}
    )
    source_file._file_references = tuple(file_references)
    source_file._diagnostics = tuple(diagnostics)
    return source_file


def definitions_of(source_file: SourceFile, name: str) -> tuple[TreeObject, ...]:
    return source_file.definitions_of(name)


def _build_node(
    *,
    pending: PendingTreeObject,
    parent: TreeObject | None,
    index_in_parent: int,
    source_file: SourceFile,
) -> TreeObject:
    node = TreeObject(
        kind=pending.kind,
        name=pending.name,
        compound_name=_compound_name(pending, parent, source_file.syntax),
        start=pending.start,
        end=pending.end,
        parent=parent,
        source_file=source_file,
        index_in_parent=index_in_parent,
    )
    node._children = tuple(
        _build_node(
            pending=child,
            parent=node,
            index_in_parent=child_index,
            source_file=source_file,
        )
        for child_index, child in enumerate(pending.children)
    )
    return node


def _compound_name(pending: PendingTreeObject, parent: TreeObject | None, syntax: SyntaxTable) -> str:
    if pending.kind.is_include:
        return pending.name or ""
    prefix = parent.compound_name if parent is not None else ""
    if pending.name is None:
        return prefix
    if not prefix:
        return pending.name
    return f"{prefix}{syntax.compound_name_separator}{pending.name}"
