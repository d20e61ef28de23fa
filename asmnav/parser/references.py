"""Include directive detection on a single line."""

from __future__ import annotations

from asmnav.model.references import (
    NO_FILE_REFERENCE,
    FileReference,
    FileReferenceKind,
    IncludeReference,
)
from asmnav.parser.words import iter_words
from asmnav.scanner import scan_partitions
from asmnav.syntax import SyntaxTable


def detect_file_reference(line: str, syntax: SyntaxTable) -> FileReference:
    """First include directive on `line` outside strings and comments.

    `directive_end_offset` is the offset in `line` right after the directive
    word. Returns NO_FILE_REFERENCE when the line has no include directive.
    """
    for word in iter_words(line, scan_partitions(line, syntax)):
        if word.quoted:
            continue
        kind = syntax.directive_kind(word.text)
        if kind is not None and kind.is_include:
            return FileReference(FileReferenceKind.from_directive_kind(kind), word.end)
    return NO_FILE_REFERENCE


__all__ = [
    "NO_FILE_REFERENCE",
    "FileReference",
    "FileReferenceKind",
    "IncludeReference",
    "detect_file_reference",
]
