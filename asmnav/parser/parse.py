"""Parser entrypoints."""

from __future__ import annotations

from asmnav.model import SourceFile
from asmnav.parser.options import ParserOptions
from asmnav.parser.parser import SourceParser
from asmnav.syntax import SyntaxTable


def parse_source(
    text: str,
    syntax: SyntaxTable,
    source_path: str | None = None,
    options: ParserOptions | None = None,
) -> SourceFile:
    """Parse one document into a complete, immutable SourceFile."""
    return SourceParser(syntax, options).parse(text, source_path)
