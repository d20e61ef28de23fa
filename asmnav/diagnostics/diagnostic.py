"""Parser and directive findings attached to a source range."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from asmnav.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def located(self, source_path: str | None, line: int) -> str:
        """`path:line: message`, the form used in logs and script output."""
        return f"{source_path or '<memory>'}:{line}: {self.message}"
