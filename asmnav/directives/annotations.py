"""Per-file annotation comments selecting hardware and instruction set.

Annotations are comments of the form

    ; @com.wudsn.ide.lng.hardware=ATARI8BIT
    ; @com.wudsn.ide.lng.target=MOS6502_ILLEGAL

and are only recognized inside comment partitions.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from asmnav.diagnostics import (
    DIRECTIVE_CONFLICTING_VALUE,
    DIRECTIVE_EMPTY_VALUE,
    DIRECTIVE_INVALID_VALUE,
    Diagnostic,
    DiagnosticSpec,
    diagnostic_from_spec,
)
from asmnav.directives.hardware import Hardware
from asmnav.scanner import PartitionKind, scan_partitions
from asmnav.syntax import Language, SyntaxTable, Target, supported_targets
from asmnav.text import LineIndex

ANNOTATION_PREFIX: Final[str] = "@com.wudsn.ide.lng."

HARDWARE: Final[str] = "hardware"
TARGET: Final[str] = "target"
MAIN_SOURCE_FILE: Final[str] = "mainsourcefile"
OUTPUT_FILE: Final[str] = "outputfile"

ANNOTATION_KEYS: Final[frozenset[str]] = frozenset({HARDWARE, TARGET, MAIN_SOURCE_FILE, OUTPUT_FILE})

_ANNOTATION = re.compile(re.escape(ANNOTATION_PREFIX) + r"(?P<key>[A-Za-z]+)(?:\s*=\s*(?P<value>.*?))?\s*$")


@dataclass(frozen=True, slots=True)
class AnnotationValue:
    key: str
    value: str
    line: int
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class AnnotationValues:
    """Annotation values of one document, keyed by lower case key."""

    source_path: str | None
    values: Mapping[str, AnnotationValue] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, key: str) -> AnnotationValue | None:
        return self.values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.values


class InvalidAnnotationError(Exception):
    """An annotation comment has an empty, unknown or conflicting value."""

    def __init__(self, source_path: str | None, line: int, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.located(source_path, line))
        self.source_path = source_path
        self.line = line
        self.diagnostic = diagnostic


@dataclass(frozen=True, slots=True)
class TargetDirectiveError:
    """Structured form of an InvalidAnnotationError returned by the pipeline."""

    source_path: str | None
    line: int
    message: str
    diagnostic: Diagnostic

    @staticmethod
    def from_exception(exc: InvalidAnnotationError) -> "TargetDirectiveError":
        return TargetDirectiveError(
            source_path=exc.source_path,
            line=exc.line,
            message=exc.diagnostic.message,
            diagnostic=exc.diagnostic,
        )


def read_annotation_values(text: str, syntax: SyntaxTable, source_path: str | None = None) -> AnnotationValues:
    """Collect annotation values from the comments of `text`.

    Unknown keys are ignored. Raises InvalidAnnotationError for an empty value
    or for a key repeated with a different value.
    """
    line_index: LineIndex | None = None
    values: dict[str, AnnotationValue] = {}
    for partition in scan_partitions(text, syntax):
        if partition.kind != PartitionKind.SINGLE_LINE_COMMENT:
            continue
        position = text.find(ANNOTATION_PREFIX, partition.start, partition.end)
        if position == -1:
            continue
        found = _ANNOTATION.match(text, position, partition.end)
        if found is None:
            continue
        key = found.group("key").lower()
        if key not in ANNOTATION_KEYS:
            continue

        if line_index is None:
            line_index = LineIndex(text)
        line = line_index.line_number(position)
        value = found.group("value") or ""
        if not value:
            raise _error(
                DIRECTIVE_EMPTY_VALUE,
                source_path,
                line,
                position,
                found.end(),
                f"Annotation `{ANNOTATION_PREFIX}{key}` has no value.",
            )

        annotation = AnnotationValue(key, value, line, found.start("value"), found.end("value"))
        previous = values.get(key)
        if previous is None:
            values[key] = annotation
        elif previous.value != value:
            raise _error(
                DIRECTIVE_CONFLICTING_VALUE,
                source_path,
                line,
                annotation.start,
                annotation.end,
                f"Annotation `{key}` is `{value}` here but `{previous.value}` in line {previous.line}.",
            )
    return AnnotationValues(source_path, MappingProxyType(values))


def select_target(values: AnnotationValues, language: Language) -> Target | None:
    """Instruction set requested by the `target` annotation, None when absent."""
    annotation = values.get(TARGET)
    if annotation is None:
        return None
    allowed = supported_targets(language)
    target = next((target for target in allowed if target.value == annotation.value.upper()), None)
    if target is None:
        expected = ", ".join(sorted(target.value for target in allowed))
        raise _error(
            DIRECTIVE_INVALID_VALUE,
            values.source_path,
            annotation.line,
            annotation.start,
            annotation.end,
            f"Target `{annotation.value}` is not supported by {language.name}.",
            hint=f"Expected one of: {expected}.",
        )
    return target


def select_hardware(values: AnnotationValues) -> Hardware | None:
    """Hardware requested by the `hardware` annotation, None when absent."""
    annotation = values.get(HARDWARE)
    if annotation is None:
        return None
    try:
        return Hardware(annotation.value.upper())
    except ValueError:
        expected = ", ".join(hardware.value for hardware in Hardware)
        raise _error(
            DIRECTIVE_INVALID_VALUE,
            values.source_path,
            annotation.line,
            annotation.start,
            annotation.end,
            f"Hardware `{annotation.value}` is unknown.",
            hint=f"Expected one of: {expected}.",
        ) from None


def _error(
    spec: DiagnosticSpec,
    source_path: str | None,
    line: int,
    start: int,
    end: int,
    message: str,
    *,
    hint: str | None = None,
) -> InvalidAnnotationError:
    diagnostic = diagnostic_from_spec(spec, start=start, end=end, message=message, hint=hint)
    return InvalidAnnotationError(source_path, line, diagnostic)
