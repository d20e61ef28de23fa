"""Diagnostics."""

from asmnav.diagnostics.codes import (
    DIRECTIVE_CONFLICTING_VALUE,
    DIRECTIVE_EMPTY_VALUE,
    DIRECTIVE_INVALID_VALUE,
    PARSER_INCLUDE_WITHOUT_PATH,
    PARSER_UNCLOSED_SCOPE,
    PARSER_UNMATCHED_MACRO_CLOSE,
    PARSER_UNMATCHED_SCOPE_CLOSE,
    DiagnosticSpec,
)
from asmnav.diagnostics.diagnostic import Diagnostic, Severity
from asmnav.diagnostics.report import diagnostic_from_spec, has_errors

__all__ = [
    "DIRECTIVE_CONFLICTING_VALUE",
    "DIRECTIVE_EMPTY_VALUE",
    "DIRECTIVE_INVALID_VALUE",
    "PARSER_INCLUDE_WITHOUT_PATH",
    "PARSER_UNCLOSED_SCOPE",
    "PARSER_UNMATCHED_MACRO_CLOSE",
    "PARSER_UNMATCHED_SCOPE_CLOSE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "diagnostic_from_spec",
    "has_errors",
]
