"""Lazy include walker used by navigation."""

from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from asmnav.model import FileReferenceKind, SourceFile, TreeObject
from asmnav.parser import ParserOptions, SourceParser
from asmnav.resolve.paths import resolve_include_path
from asmnav.syntax import SyntaxTable

logger = logging.getLogger(__name__)

DEFAULT_MAX_INCLUDE_DEPTH = 32


class FileSystemAccessor(Protocol):
    def is_file(self, path: str) -> bool: ...

    def read_text(self, path: str) -> str: ...


class LocalFileSystem:
    """FileSystemAccessor backed by the local disk."""

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        data = Path(path).read_bytes()
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            # Sources for 8-bit platforms are frequently stored in a single byte charset.
            text = data.decode("latin-1")
        return text.removeprefix("\ufeff")


class IncludeResolver:
    """Parses included source files on demand and caches the results.

    Included files are parsed with `syntax`, or with the syntax of the
    including document when none is given.
    """

    def __init__(
        self,
        accessor: FileSystemAccessor | None = None,
        syntax: SyntaxTable | None = None,
        options: ParserOptions | None = None,
        *,
        max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH,
    ) -> None:
        if max_include_depth < 0:
            raise ValueError(f"max_include_depth must be >= 0, got {max_include_depth}")
        self._accessor = accessor if accessor is not None else LocalFileSystem()
        self._syntax = syntax
        self._options = options or ParserOptions()
        self._max_include_depth = max_include_depth
        self._cache: dict[str, SourceFile | None] = {}

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def max_include_depth(self) -> int:
        return self._max_include_depth

    def include_paths(self, source_file: SourceFile) -> tuple[str, ...]:
        """Resolved paths of the source includes of one document, in order."""
        directory = source_file.source_directory
        paths: list[str] = []
        for reference in source_file.file_references:
            if reference.kind != FileReferenceKind.SOURCE:
                continue
            path = resolve_include_path(reference.kind, reference.raw_path, directory, source_file.syntax)
            if path is not None:
                paths.append(path)
        return tuple(paths)

    def load(self, path: str, syntax: SyntaxTable) -> SourceFile | None:
        """Parsed model of `path`, None when the file is missing or unreadable."""
        if path in self._cache:
            return self._cache[path]

        source_file: SourceFile | None = None
        if not self._accessor.is_file(path):
            logger.debug("Included file %s does not exist", path)
        else:
            try:
                text = self._accessor.read_text(path)
            except OSError as exc:
                logger.debug("Cannot read included file %s: %s", path, exc)
            else:
                source_file = SourceParser(self._syntax or syntax, self._options).parse(text, path)
        self._cache[path] = source_file
        return source_file

    def walk_includes(self, source_file: SourceFile) -> Iterator[SourceFile]:
        """Included documents breadth first, each at most once.

        Uses an explicit queue, so include cycles and deep chains terminate.
        Includes deeper than `max_include_depth` are not followed.
        """
        visited: set[str] = set()
        if source_file.source_path is not None:
            visited.add(os.path.normpath(source_file.source_path))
        queue: deque[tuple[SourceFile, int]] = deque([(source_file, 0)])
        while queue:
            current, depth = queue.popleft()
            if depth >= self._max_include_depth:
                continue
            for path in self.include_paths(current):
                if path in visited:
                    continue
                visited.add(path)
                included = self.load(path, current.syntax)
                if included is None:
                    continue
                yield included
                queue.append((included, depth + 1))

    def definitions_in_includes(self, source_file: SourceFile, name: str) -> tuple[TreeObject, ...]:
        """Declarations of `name` in included documents, in walk order."""
        found: list[TreeObject] = []
        for included in self.walk_includes(source_file):
            found.extend(included.definitions_of(name))
        return tuple(found)

    def clear(self) -> None:
        self._cache.clear()
