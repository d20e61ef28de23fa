"""File reference values produced by include directives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from asmnav.syntax import DirectiveKind
from asmnav.text import TextRange


class FileReferenceKind(IntEnum):
    NONE = 0
    SOURCE = 1
    BINARY = 2

    @staticmethod
    def from_directive_kind(kind: DirectiveKind) -> "FileReferenceKind":
        match kind:
            case DirectiveKind.SOURCE_INCLUDE:
                return FileReferenceKind.SOURCE
            case DirectiveKind.BINARY_INCLUDE:
                return FileReferenceKind.BINARY
            case _:
                raise ValueError(f"Not an include directive kind: {kind!r}")

    def to_directive_kind(self) -> DirectiveKind:
        match self:
            case FileReferenceKind.SOURCE:
                return DirectiveKind.SOURCE_INCLUDE
            case FileReferenceKind.BINARY:
                return DirectiveKind.BINARY_INCLUDE
            case _:
                raise ValueError(f"Unknown include type {self!r}")


@dataclass(frozen=True, slots=True)
class FileReference:
    """Include construct detected on one line.

    `directive_end_offset` is relative to the line start; the quoted path is
    searched from there.
    """

    kind: FileReferenceKind
    directive_end_offset: int

    @property
    def is_none(self) -> bool:
        return self.kind == FileReferenceKind.NONE


NO_FILE_REFERENCE: Final[FileReference] = FileReference(FileReferenceKind.NONE, 0)


@dataclass(frozen=True, slots=True)
class IncludeReference:
    """Include directive recorded on a parsed model (document offsets)."""

    kind: FileReferenceKind
    raw_path: str
    line: int
    directive_range: TextRange
    path_range: TextRange
