"""Source parser and include directive detection."""

from asmnav.parser.options import ParseMode, ParserOptions
from asmnav.parser.parse import parse_source
from asmnav.parser.parser import SourceParser
from asmnav.parser.references import (
    NO_FILE_REFERENCE,
    FileReference,
    FileReferenceKind,
    IncludeReference,
    detect_file_reference,
)
from asmnav.parser.words import Word, iter_words

__all__ = [
    "NO_FILE_REFERENCE",
    "FileReference",
    "FileReferenceKind",
    "IncludeReference",
    "ParseMode",
    "ParserOptions",
    "SourceParser",
    "Word",
    "detect_file_reference",
    "iter_words",
    "parse_source",
]
