"""Include path resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass

from asmnav.model import FileReference, FileReferenceKind
from asmnav.syntax import SyntaxTable


@dataclass(frozen=True, slots=True)
class QuotedPath:
    """Path text between quotes and its offsets in the line, quotes excluded."""

    text: str
    start: int
    end: int


def resolve_include_path(
    kind: FileReferenceKind,
    raw_path: str,
    current_directory: str | None,
    syntax: SyntaxTable,
) -> str | None:
    """Absolute, normalized path of an include, or None when it cannot be resolved.

    A path without an extension gets the dialect's default extension for
    `kind`. Relative paths are resolved against `current_directory`. The file
    is not required to exist.
    """
    if kind == FileReferenceKind.NONE:
        raise ValueError("Cannot resolve a path for file reference kind NONE")
    if not raw_path:
        return None

    path = raw_path
    _, extension = os.path.splitext(os.path.basename(path))
    if not extension:
        path += syntax.default_extension_for(kind.to_directive_kind())

    if not os.path.isabs(path):
        if not current_directory:
            return None
        path = os.path.join(current_directory, path)
    return os.path.normpath(path)


def find_quoted_path(
    line: str,
    reference: FileReference,
    syntax: SyntaxTable,
    offset_in_line: int | None = None,
) -> QuotedPath | None:
    """Quoted path following the include directive of `reference` on `line`.

    String delimiters are tried in table order. With `offset_in_line`, only a
    path whose quotes strictly enclose that offset is returned.
    """
    if reference.is_none:
        return None
    for quote in syntax.string_delimiters:
        start_quote = line.find(quote, reference.directive_end_offset)
        if start_quote == -1:
            continue
        end_quote = line.find(quote, start_quote + 1)
        if end_quote == -1:
            continue
        if offset_in_line is not None and not start_quote < offset_in_line < end_quote:
            continue
        return QuotedPath(line[start_quote + 1 : end_quote], start_quote + 1, end_quote)
    return None
