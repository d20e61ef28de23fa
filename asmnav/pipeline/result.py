"""Pipeline result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from asmnav.diagnostics import has_errors
from asmnav.directives import Hardware, TargetDirectiveError
from asmnav.model import SourceFile
from asmnav.syntax import SyntaxTable


@dataclass(frozen=True, slots=True)
class DocumentParseResult:
    """Outcome of parsing one document with directive-driven dialect selection.

    On a directive error `error` is set; `source_file` is then the best-effort
    model parsed with the fallback syntax, or None without a fallback.
    """

    source_file: SourceFile | None
    error: TargetDirectiveError | None
    hardware: Hardware | None
    syntax: SyntaxTable | None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_errors(self) -> bool:
        if self.error is not None:
            return True
        return self.source_file is not None and has_errors(self.source_file.diagnostics)
