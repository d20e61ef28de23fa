"""Latest parse snapshot of one open document."""

from __future__ import annotations

import logging
import time

from asmnav.directives import TargetDirectiveError
from asmnav.folding import FoldingAnnotationModel, folding_regions
from asmnav.hyperlinks import HyperlinkTarget, detect_hyperlinks
from asmnav.model import SourceFile
from asmnav.parser import ParserOptions
from asmnav.pipeline.entrypoints import parse_document
from asmnav.pipeline.result import DocumentParseResult
from asmnav.resolve import IncludeResolver
from asmnav.syntax import Language, SyntaxTable

logger = logging.getLogger(__name__)


class DocumentSession:
    """Owns the current SourceFile of a document and its folding annotations.

    `update` parses into a new model and swaps the reference; a reader holding
    the previous snapshot keeps a consistent view. Single writer, no locking.
    """

    def __init__(
        self,
        language: Language,
        source_path: str | None = None,
        *,
        options: ParserOptions | None = None,
        resolver: IncludeResolver | None = None,
        fallback: SyntaxTable | None = None,
        editor_name: str | None = None,
    ) -> None:
        self._language = language
        self._source_path = source_path
        self._options = options or ParserOptions()
        self._resolver = resolver if resolver is not None else IncludeResolver(options=self._options)
        self._fallback = fallback
        self._editor_name = editor_name
        self._source_file: SourceFile | None = None
        self._error: TargetDirectiveError | None = None
        self._folding = FoldingAnnotationModel()

    @property
    def source_file(self) -> SourceFile | None:
        return self._source_file

    @property
    def error(self) -> TargetDirectiveError | None:
        """Directive error of the latest update, if any."""
        return self._error

    @property
    def folding(self) -> FoldingAnnotationModel:
        return self._folding

    @property
    def resolver(self) -> IncludeResolver:
        return self._resolver

    def update(self, text: str) -> DocumentParseResult:
        started = time.perf_counter()
        result = parse_document(
            text,
            self._language,
            self._source_path,
            options=self._options,
            fallback=self._fallback,
        )
        self._error = result.error
        if result.source_file is not None:
            self._source_file = result.source_file
            self._folding.update(folding_regions(result.source_file))
        logger.debug(
            "Updated %s in %.2f ms",
            self._source_path or "<memory>",
            (time.perf_counter() - started) * 1000,
        )
        return result

    def hyperlinks(self, offset: int, allow_multiple: bool) -> tuple[HyperlinkTarget, ...]:
        source_file = self._source_file
        if source_file is None:
            return ()
        return detect_hyperlinks(
            source_file,
            offset,
            allow_multiple,
            resolver=self._resolver,
            editor_name=self._editor_name,
        )

    def invalidate_includes(self) -> None:
        """Drop cached include models, e.g. after an included file changed on disk."""
        self._resolver.clear()
