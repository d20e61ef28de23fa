"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from asmnav.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_UNMATCHED_SCOPE_CLOSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNMATCHED_SCOPE_CLOSE",
    message="Scope close directive without a matching open directive.",
    hint="Remove the directive or add the missing opening directive above it.",
    severity="warning",
    category="parser",
)

PARSER_UNMATCHED_MACRO_CLOSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNMATCHED_MACRO_CLOSE",
    message="Macro close directive without an open macro.",
    hint="Remove the directive or add the missing macro definition above it.",
    severity="warning",
    category="parser",
)

PARSER_UNCLOSED_SCOPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_SCOPE",
    message="Scope is still open at end of file.",
    hint="Close the scope explicitly if the dialect does not close it implicitly.",
    severity="warning",
    category="parser",
)

PARSER_INCLUDE_WITHOUT_PATH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INCLUDE_WITHOUT_PATH",
    message="Include directive without a quoted file path.",
    hint='Quote the included file path, e.g. `icl "file.asm"`.',
    severity="warning",
    category="parser",
)

DIRECTIVE_INVALID_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DIRECTIVE_INVALID_VALUE",
    message="Invalid value for file directive.",
    severity="error",
    category="directive",
)

DIRECTIVE_EMPTY_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DIRECTIVE_EMPTY_VALUE",
    message="File directive without a value.",
    hint="Write the directive as `@com.wudsn.ide.lng.<key>=<value>`.",
    severity="error",
    category="directive",
)

DIRECTIVE_CONFLICTING_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DIRECTIVE_CONFLICTING_VALUE",
    message="File directive is declared more than once with different values.",
    hint="Keep a single declaration per directive key.",
    severity="error",
    category="directive",
)
