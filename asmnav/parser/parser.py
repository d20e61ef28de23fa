"""Line oriented source parser producing the symbol tree of one document."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from asmnav.diagnostics import (
    PARSER_INCLUDE_WITHOUT_PATH,
    PARSER_UNCLOSED_SCOPE,
    PARSER_UNMATCHED_MACRO_CLOSE,
    PARSER_UNMATCHED_SCOPE_CLOSE,
    Diagnostic,
    DiagnosticSpec,
    diagnostic_from_spec,
)
from asmnav.model import (
    FileReferenceKind,
    IncludeReference,
    PendingTreeObject,
    SourceFile,
    TreeObjectKind,
    build_source_file,
)
from asmnav.parser.options import ParserOptions
from asmnav.parser.words import Word, iter_words
from asmnav.scanner import scan_partitions
from asmnav.syntax import DirectiveKind, SyntaxTable
from asmnav.text import LineIndex, LineInfo, TextRange

logger = logging.getLogger(__name__)

# A directive is recognized as the first word of a line or right after a name.
_MAX_DIRECTIVE_POSITION = 1


class SourceParser:
    """Builds a SourceFile from text with a stack of open scopes.

    One instance can parse many documents; all per-parse state is reset at the
    start of `parse`.
    """

    def __init__(self, syntax: SyntaxTable, options: ParserOptions | None = None) -> None:
        self._syntax = syntax
        self._options = options or ParserOptions()
        self._text = ""
        self._roots: list[PendingTreeObject] = []
        self._stack: list[PendingTreeObject] = []
        self._file_references: list[IncludeReference] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def syntax(self) -> SyntaxTable:
        return self._syntax

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self, text: str, source_path: str | None = None) -> SourceFile:
        self._text = text
        self._roots = []
        self._stack = []
        self._file_references = []
        self._diagnostics = []

        line_index = LineIndex(text)
        partitions = scan_partitions(text, self._syntax)
        words_by_line: dict[int, list[Word]] = {}
        for word in iter_words(text, partitions):
            words_by_line.setdefault(line_index.line_number(word.start), []).append(word)

        for number in sorted(words_by_line):
            self._parse_line(line_index.line(number), words_by_line[number])

        if self._options.report_unclosed_scopes:
            for scope in self._stack:
                first_line = line_index.line_at(scope.start)
                self._report(PARSER_UNCLOSED_SCOPE, scope.start, first_line.end)
        # Scopes still open run to the end of the text.
        for scope in self._stack:
            scope.end = len(text)

        source_file = build_source_file(
            text=text,
            syntax=self._syntax,
            source_path=source_path,
            roots=self._roots,
            file_references=self._file_references,
            diagnostics=self._diagnostics,
        )
        logger.debug(
            "Parsed %s: %d lines, %d identifiers, %d includes, %d diagnostics",
            source_path or "<memory>",
            line_index.line_count,
            len(source_file.identifiers),
            len(source_file.file_references),
            len(source_file.diagnostics),
        )
        return source_file

    def _parse_line(self, line: LineInfo, words: Sequence[Word]) -> None:
        position, kind = self._find_directive(words)
        leading = words[0] if position == 1 else None

        if kind is None:
            self._parse_plain_line(line, words)
            return

        directive = words[position]
        following = words[position + 1 :]
        match kind:
            case DirectiveKind.SCOPE_OPEN | DirectiveKind.MACRO_OPEN:
                self._open_scope(kind, line, leading, directive, following)
            case DirectiveKind.SCOPE_CLOSE:
                self._add_leading_label(leading)
                self._close_scope(line, directive)
            case DirectiveKind.MACRO_CLOSE:
                self._add_leading_label(leading)
                self._close_macro(line, directive)
            case DirectiveKind.LABEL:
                self._add_symbol(leading, following)
            case DirectiveKind.SOURCE_INCLUDE | DirectiveKind.BINARY_INCLUDE:
                self._add_leading_label(leading)
                self._add_include(kind, line, directive, following)

    def _find_directive(self, words: Sequence[Word]) -> tuple[int, DirectiveKind | None]:
        for position, word in enumerate(words[: _MAX_DIRECTIVE_POSITION + 1]):
            if word.quoted:
                return -1, None
            kind = self._syntax.directive_kind(word.text)
            if kind is not None:
                return position, kind
        return -1, None

    def _parse_plain_line(self, line: LineInfo, words: Sequence[Word]) -> None:
        first = words[0]
        if first.quoted:
            return
        if self._has_label_suffix(first.text):
            self._add_leading_label(first)
            return
        if (
            self._syntax.labels_at_column_zero
            and first.start == line.start
            and not self._syntax.is_instruction(first.text)
        ):
            self._add_leading_label(first)

    def _open_scope(
        self,
        kind: DirectiveKind,
        line: LineInfo,
        leading: Word | None,
        directive: Word,
        following: Sequence[Word],
    ) -> None:
        name_word = next(iter(following), None)
        name = self._name_of(name_word) if name_word is not None else None
        start = directive.start
        if name is not None:
            self._add_leading_label(leading)
        elif leading is not None:
            name = self._name_of(leading)
            if name is not None:
                start = leading.start

        scope = PendingTreeObject(
            kind=TreeObjectKind.SECTION if kind == DirectiveKind.SCOPE_OPEN else TreeObjectKind.MACRO,
            name=name,
            start=start,
            end=line.end,
        )
        self._current_children().append(scope)
        self._stack.append(scope)

    def _close_scope(self, line: LineInfo, directive: Word) -> None:
        if not self._stack:
            if self._options.report_unmatched_scope_close:
                self._report(PARSER_UNMATCHED_SCOPE_CLOSE, directive.start, directive.end)
            return
        self._stack.pop().end = line.end

    def _close_macro(self, line: LineInfo, directive: Word) -> None:
        depth = next(
            (index for index in range(len(self._stack) - 1, -1, -1) if self._stack[index].kind == TreeObjectKind.MACRO),
            None,
        )
        if depth is None:
            if self._options.report_unmatched_scope_close:
                self._report(PARSER_UNMATCHED_MACRO_CLOSE, directive.start, directive.end)
            return
        while len(self._stack) > depth:
            self._stack.pop().end = line.end

    def _add_symbol(self, leading: Word | None, following: Sequence[Word]) -> None:
        candidate = leading if leading is not None else next(iter(following), None)
        if candidate is None:
            return
        name = self._name_of(candidate)
        if name is None:
            return
        self._current_children().append(
            PendingTreeObject(
                kind=TreeObjectKind.SYMBOL,
                name=name,
                start=candidate.start,
                end=candidate.start + len(name),
            )
        )

    def _add_include(
        self,
        kind: DirectiveKind,
        line: LineInfo,
        directive: Word,
        following: Sequence[Word],
    ) -> None:
        path_word = next((word for word in following if word.quoted), None)
        if path_word is None:
            self._report(PARSER_INCLUDE_WITHOUT_PATH, directive.start, line.end)
            return

        raw_path, path_start, path_end = path_word.unquoted()
        reference_kind = FileReferenceKind.from_directive_kind(kind)
        self._file_references.append(
            IncludeReference(
                kind=reference_kind,
                raw_path=raw_path,
                line=line.number,
                directive_range=TextRange.from_offsets(directive.start, directive.end),
                path_range=TextRange.from_offsets(path_start, path_end),
            )
        )
        self._current_children().append(
            PendingTreeObject(
                kind=(
                    TreeObjectKind.SOURCE_INCLUDE
                    if reference_kind == FileReferenceKind.SOURCE
                    else TreeObjectKind.BINARY_INCLUDE
                ),
                name=raw_path,
                start=directive.start,
                end=line.end,
            )
        )

    def _add_leading_label(self, word: Word | None) -> None:
        if word is None:
            return
        name = self._name_of(word)
        if name is None:
            return
        self._current_children().append(
            PendingTreeObject(
                kind=TreeObjectKind.LABEL,
                name=name,
                start=word.start,
                end=word.start + len(name),
            )
        )

    def _name_of(self, word: Word) -> str | None:
        """Declared name of `word`, None for strings, keywords and non identifiers."""
        if word.quoted:
            return None
        name = word.text
        if self._has_label_suffix(name):
            name = name[: -len(self._syntax.label_suffix)]
        if self._syntax.directive_kind(name) is not None or not self._syntax.is_identifier(name):
            return None
        return name

    def _has_label_suffix(self, text: str) -> bool:
        suffix = self._syntax.label_suffix
        return bool(suffix) and len(text) > len(suffix) and text.endswith(suffix)

    def _current_children(self) -> list[PendingTreeObject]:
        if self._stack:
            return self._stack[-1].children
        return self._roots

    def _report(self, spec: DiagnosticSpec, start: int, end: int) -> None:
        self._diagnostics.append(diagnostic_from_spec(spec, start=start, end=end))
