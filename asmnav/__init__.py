"""Source navigation backend for 6502-family assembler dialects."""

from asmnav.directives import Hardware, TargetDirectiveError
from asmnav.folding import FoldRegion, FoldingDiff
from asmnav.hyperlinks import HyperlinkKind, HyperlinkTarget, Viewer
from asmnav.model import SourceFile, TreeObject, TreeObjectKind
from asmnav.parser import FileReference, FileReferenceKind, ParseMode, ParserOptions
from asmnav.pipeline import (
    DocumentParseResult,
    DocumentSession,
    definitions_of,
    detect_file_reference,
    detect_hyperlinks,
    diff_folding_regions,
    folding_regions,
    parse,
    parse_document,
    resolve_include_path,
)
from asmnav.syntax import Language, SyntaxTable, Target, get_syntax

__all__ = [
    "DocumentParseResult",
    "DocumentSession",
    "FileReference",
    "FileReferenceKind",
    "FoldRegion",
    "FoldingDiff",
    "Hardware",
    "HyperlinkKind",
    "HyperlinkTarget",
    "Language",
    "ParseMode",
    "ParserOptions",
    "SourceFile",
    "SyntaxTable",
    "Target",
    "TargetDirectiveError",
    "TreeObject",
    "TreeObjectKind",
    "Viewer",
    "definitions_of",
    "detect_file_reference",
    "detect_hyperlinks",
    "diff_folding_regions",
    "folding_regions",
    "get_syntax",
    "parse",
    "parse_document",
    "resolve_include_path",
]
