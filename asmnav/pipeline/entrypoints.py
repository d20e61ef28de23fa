"""Entrypoints that combine directive reading with parsing."""

from __future__ import annotations

import logging

from asmnav.directives import (
    InvalidAnnotationError,
    TargetDirectiveError,
    read_annotation_values,
    select_hardware,
    select_target,
)
from asmnav.model import SourceFile
from asmnav.parser import ParseMode, ParserOptions, parse_source
from asmnav.pipeline.result import DocumentParseResult
from asmnav.syntax import Language, SyntaxTable, get_syntax

logger = logging.getLogger(__name__)


def parse(
    text: str,
    syntax: SyntaxTable,
    source_path: str | None = None,
    *,
    options: ParserOptions | None = None,
    mode: ParseMode | None = None,
) -> SourceFile | TargetDirectiveError:
    """Validate the annotations of `text`, then parse it with `syntax`."""
    try:
        values = read_annotation_values(text, syntax, source_path)
        select_hardware(values)
        select_target(values, syntax.language)
    except InvalidAnnotationError as exc:
        logger.warning("%s", exc)
        return TargetDirectiveError.from_exception(exc)
    return parse_source(text, syntax, source_path, _resolve_options(options, mode))


def parse_document(
    text: str,
    language: Language,
    source_path: str | None = None,
    *,
    options: ParserOptions | None = None,
    mode: ParseMode | None = None,
    fallback: SyntaxTable | None = None,
) -> DocumentParseResult:
    """Select the syntax table from the annotations of `text` and parse.

    A broken annotation stops dialect-aware parsing. The error is returned,
    together with a best-effort model when a `fallback` syntax is given.
    """
    resolved_options = _resolve_options(options, mode)
    default_syntax = get_syntax(language)
    try:
        values = read_annotation_values(text, default_syntax, source_path)
        hardware = select_hardware(values)
        target = select_target(values, language)
    except InvalidAnnotationError as exc:
        logger.warning("%s", exc)
        error = TargetDirectiveError.from_exception(exc)
        if fallback is None:
            return DocumentParseResult(source_file=None, error=error, hardware=None, syntax=None)
        return DocumentParseResult(
            source_file=parse_source(text, fallback, source_path, resolved_options),
            error=error,
            hardware=None,
            syntax=fallback,
        )

    syntax = get_syntax(language, target)
    return DocumentParseResult(
        source_file=parse_source(text, syntax, source_path, resolved_options),
        error=None,
        hardware=hardware,
        syntax=syntax,
    )


def _resolve_options(options: ParserOptions | None, mode: ParseMode | None) -> ParserOptions:
    if options is not None and mode is not None and options.mode != mode:
        raise ValueError("Provided options.mode does not match mode")
    if options is not None:
        return options
    if mode is not None:
        return ParserOptions.for_mode(mode)
    return ParserOptions()
