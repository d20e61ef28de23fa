"""Per-file hardware and target annotations."""

from asmnav.directives.annotations import (
    ANNOTATION_KEYS,
    ANNOTATION_PREFIX,
    HARDWARE,
    MAIN_SOURCE_FILE,
    OUTPUT_FILE,
    TARGET,
    AnnotationValue,
    AnnotationValues,
    InvalidAnnotationError,
    TargetDirectiveError,
    read_annotation_values,
    select_hardware,
    select_target,
)
from asmnav.directives.hardware import Hardware, default_executable_extension

__all__ = [
    "ANNOTATION_KEYS",
    "ANNOTATION_PREFIX",
    "HARDWARE",
    "MAIN_SOURCE_FILE",
    "OUTPUT_FILE",
    "TARGET",
    "AnnotationValue",
    "AnnotationValues",
    "Hardware",
    "InvalidAnnotationError",
    "TargetDirectiveError",
    "default_executable_extension",
    "read_annotation_values",
    "select_hardware",
    "select_target",
]
