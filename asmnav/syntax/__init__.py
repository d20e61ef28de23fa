"""Data-driven dialect syntax tables."""

from asmnav.syntax.dialects import (
    ATASM_DIALECT,
    CA65_DIALECT,
    DASM_DIALECT,
    DIALECTS,
    MADS_DIALECT,
    MERLIN32_DIALECT,
    TEST_DIALECT,
    DialectDefinition,
    get_syntax,
    supported_targets,
)
from asmnav.syntax.instructions import INSTRUCTION_SETS, instructions_for
from asmnav.syntax.table import DirectiveKind, Language, SyntaxTable, Target

__all__ = [
    "ATASM_DIALECT",
    "CA65_DIALECT",
    "DASM_DIALECT",
    "DIALECTS",
    "INSTRUCTION_SETS",
    "MADS_DIALECT",
    "MERLIN32_DIALECT",
    "TEST_DIALECT",
    "DialectDefinition",
    "DirectiveKind",
    "Language",
    "SyntaxTable",
    "Target",
    "get_syntax",
    "instructions_for",
    "supported_targets",
]
