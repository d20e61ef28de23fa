"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from asmnav.diagnostics.codes import DiagnosticSpec
from asmnav.diagnostics.diagnostic import Diagnostic
from asmnav.text import TextRange


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.is_error for d in diagnostics)


def diagnostic_from_spec(
    spec: DiagnosticSpec,
    *,
    start: int,
    end: int,
    message: str | None = None,
    hint: str | None = None,
) -> Diagnostic:
    """Build a Diagnostic for `spec`, optionally overriding message/hint."""
    return Diagnostic(
        code=spec.code,
        message=message if message is not None else spec.message,
        range=TextRange.from_offsets(start, end),
        severity=spec.severity,
        hint=hint if hint is not None else spec.hint,
        category=spec.category,
    )
