"""Hyperlink detection: include paths first, identifiers second."""

from __future__ import annotations

import logging

from asmnav.hyperlinks.model import HyperlinkKind, HyperlinkTarget, Viewer
from asmnav.model import FileReferenceKind, SourceFile, TreeObject
from asmnav.parser import detect_file_reference
from asmnav.resolve import IncludeResolver, find_quoted_path, resolve_include_path
from asmnav.scanner import PartitionKind, partition_at, scan_partitions
from asmnav.syntax import SyntaxTable
from asmnav.text import LineInfo, TextRange

logger = logging.getLogger(__name__)

_BINARY_VIEWERS: tuple[tuple[Viewer, str], ...] = (
    (Viewer.HEX_EDITOR, "Open with hex editor"),
    (Viewer.GRAPHICS_EDITOR, "Open with graphics editor"),
    (Viewer.DEFAULT_EDITOR, "Open with default editor"),
    (Viewer.SYSTEM_EDITOR, "Open with system editor"),
)


def detect_hyperlinks(
    source_file: SourceFile,
    offset: int,
    allow_multiple: bool,
    *,
    resolver: IncludeResolver | None = None,
    editor_name: str | None = None,
) -> tuple[HyperlinkTarget, ...]:
    """Navigation targets for the cursor at `offset`.

    An include path under the cursor wins over identifier lookup. Without
    `allow_multiple` at most one identifier target is returned and a binary
    include only offers the hex editor.
    """
    text = source_file.text
    if offset < 0 or offset >= len(text):
        return ()
    line = source_file.line_index.line_at(offset)
    offset_in_line = offset - line.start
    line_text = text[line.start : line.end]
    if offset_in_line >= len(line_text):
        return ()

    targets = _detect_include(source_file, line, line_text, offset_in_line, allow_multiple, editor_name)
    if targets:
        return targets
    return _detect_identifier(source_file, line, line_text, offset_in_line, allow_multiple, resolver)


def identifier_at(line: str, offset_in_line: int, syntax: SyntaxTable) -> tuple[int, int] | None:
    """Bounds of the identifier under the cursor within `line`.

    Separators split compound names: the part under the cursor is selected,
    and a cursor on the separator itself selects the whole compound name.
    """
    if not 0 <= offset_in_line < len(line):
        return None
    if not syntax.is_identifier_character(line[offset_in_line]):
        return None

    start = offset_in_line
    while (
        start > 0
        and syntax.is_identifier_character(line[start - 1])
        and not syntax.is_identifier_separator_character(line[start - 1])
    ):
        start -= 1

    end = offset_in_line
    while end < len(line) and syntax.is_identifier_character(line[end]):
        if end > offset_in_line and syntax.is_identifier_separator_character(line[end]):
            break
        end += 1
    return start, end


def _detect_include(
    source_file: SourceFile,
    line: LineInfo,
    line_text: str,
    offset_in_line: int,
    allow_multiple: bool,
    editor_name: str | None,
) -> tuple[HyperlinkTarget, ...]:
    syntax = source_file.syntax
    reference = detect_file_reference(line_text, syntax)
    if reference.is_none:
        return ()
    quoted = find_quoted_path(line_text, reference, syntax, offset_in_line)
    if quoted is None:
        return ()
    path = resolve_include_path(reference.kind, quoted.text, source_file.source_directory, syntax)
    if path is None:
        logger.debug("Cannot resolve include %r of %s", quoted.text, source_file.source_path)
        return ()

    region = TextRange.from_offsets(line.start + quoted.start, line.start + quoted.end)
    match reference.kind:
        case FileReferenceKind.SOURCE:
            name = editor_name or syntax.language.name
            return (
                HyperlinkTarget(
                    path=path,
                    line=None,
                    description=f"Open with {name} editor",
                    kind=HyperlinkKind.SOURCE_INCLUDE,
                    viewer=Viewer.LANGUAGE_EDITOR,
                    region=region,
                ),
            )
        case FileReferenceKind.BINARY:
            viewers = _BINARY_VIEWERS if allow_multiple else _BINARY_VIEWERS[:1]
            return tuple(
                HyperlinkTarget(
                    path=path,
                    line=None,
                    description=description,
                    kind=HyperlinkKind.BINARY_INCLUDE,
                    viewer=viewer,
                    region=region,
                )
                for viewer, description in viewers
            )
        case _:
            raise ValueError(f"Unknown include type {reference.kind!r}")


def _detect_identifier(
    source_file: SourceFile,
    line: LineInfo,
    line_text: str,
    offset_in_line: int,
    allow_multiple: bool,
    resolver: IncludeResolver | None,
) -> tuple[HyperlinkTarget, ...]:
    partition = partition_at(scan_partitions(line_text, source_file.syntax), offset_in_line)
    if partition is None or partition.kind != PartitionKind.DEFAULT:
        return ()
    bounds = identifier_at(line_text, offset_in_line, source_file.syntax)
    if bounds is None:
        return ()
    start, end = bounds
    identifier = line_text[start:end]

    matches = _find_definitions(source_file, identifier, resolver)
    if not matches:
        return ()

    region = TextRange.from_offsets(line.start + start, line.start + end)
    targets: list[HyperlinkTarget] = []
    for element in matches if allow_multiple else matches[:1]:
        element_line = element.start_line
        in_this_file = _is_same_file(source_file, element.source_file)
        if len(matches) == 1 and in_this_file and element_line == line.number:
            continue
        where = "in this file" if in_this_file else f"in include {element.source_file.file_name}"
        targets.append(
            HyperlinkTarget(
                path=element.source_file.source_path or "",
                line=element_line,
                description=f"Open {element.kind.text} {element.compound_name} in line {element_line} {where}",
                kind=HyperlinkKind.IDENTIFIER,
                viewer=Viewer.LANGUAGE_EDITOR,
                region=region,
            )
        )
    return tuple(targets)


def _find_definitions(
    source_file: SourceFile,
    identifier: str,
    resolver: IncludeResolver | None,
) -> tuple[TreeObject, ...]:
    matches = source_file.definitions_of(identifier)
    if resolver is not None:
        matches += resolver.definitions_in_includes(source_file, identifier)
    if matches:
        return matches

    # `SCOPE.NAME` style references resolve through compound names.
    matches = source_file.definitions_of_compound(identifier)
    if resolver is not None:
        for included in resolver.walk_includes(source_file):
            matches += included.definitions_of_compound(identifier)
    return matches


def _is_same_file(source_file: SourceFile, other: SourceFile) -> bool:
    if other is source_file:
        return True
    return source_file.source_path is not None and source_file.source_path == other.source_path
