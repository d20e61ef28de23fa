"""Public entrypoints and document sessions."""

from asmnav.folding import diff_folding_regions, folding_regions
from asmnav.hyperlinks import detect_hyperlinks
from asmnav.model import definitions_of
from asmnav.parser import detect_file_reference
from asmnav.pipeline.entrypoints import parse, parse_document
from asmnav.pipeline.result import DocumentParseResult
from asmnav.pipeline.session import DocumentSession
from asmnav.resolve import resolve_include_path

__all__ = [
    "DocumentParseResult",
    "DocumentSession",
    "definitions_of",
    "detect_file_reference",
    "detect_hyperlinks",
    "diff_folding_regions",
    "folding_regions",
    "parse",
    "parse_document",
    "resolve_include_path",
]
