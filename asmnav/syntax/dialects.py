"""Built-in dialect definitions and the syntax table registry."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from types import MappingProxyType
from typing import Final, Mapping

from asmnav.syntax.instructions import instructions_for
from asmnav.syntax.table import DirectiveKind, Language, SyntaxTable, Target

_S = DirectiveKind


@dataclass(frozen=True, slots=True)
class DialectDefinition:
    """Target independent part of a dialect; combined with a target into a SyntaxTable."""

    language: Language
    single_line_comment_delimiters: tuple[str, ...]
    string_delimiters: tuple[str, ...]
    directives: Mapping[str, DirectiveKind]
    default_source_include_extension: str
    default_binary_include_extension: str = ""
    identifier_start_characters: frozenset[str] = frozenset("_")
    identifier_part_characters: frozenset[str] = frozenset("_")
    identifier_separator_characters: frozenset[str] = frozenset()
    identifiers_case_sensitive: bool = False
    keywords_case_sensitive: bool = False
    label_suffix: str = ":"
    labels_at_column_zero: bool = True
    compound_name_separator: str = "."
    default_target: Target = Target.MOS6502
    targets: frozenset[Target] = frozenset(Target)

    def build(self, target: Target) -> SyntaxTable:
        if target not in self.targets:
            raise KeyError(f"Target {target.value} is not supported by {self.language.value}")
        return SyntaxTable(
            language=self.language,
            target=target,
            single_line_comment_delimiters=self.single_line_comment_delimiters,
            string_delimiters=self.string_delimiters,
            directives=self.directives,
            default_source_include_extension=self.default_source_include_extension,
            default_binary_include_extension=self.default_binary_include_extension,
            identifier_start_characters=self.identifier_start_characters,
            identifier_part_characters=self.identifier_part_characters,
            identifier_separator_characters=self.identifier_separator_characters,
            identifiers_case_sensitive=self.identifiers_case_sensitive,
            keywords_case_sensitive=self.keywords_case_sensitive,
            label_suffix=self.label_suffix,
            labels_at_column_zero=self.labels_at_column_zero,
            compound_name_separator=self.compound_name_separator,
            instructions=instructions_for(target),
        )


MADS_DIALECT = DialectDefinition(
    language=Language.MADS,
    single_line_comment_delimiters=(";", "//"),
    string_delimiters=('"', "'"),
    directives={
        ".proc": _S.SCOPE_OPEN,
        ".local": _S.SCOPE_OPEN,
        ".struct": _S.SCOPE_OPEN,
        ".enum": _S.SCOPE_OPEN,
        ".endp": _S.SCOPE_CLOSE,
        ".endl": _S.SCOPE_CLOSE,
        ".ends": _S.SCOPE_CLOSE,
        ".ende": _S.SCOPE_CLOSE,
        ".macro": _S.MACRO_OPEN,
        ".endm": _S.MACRO_CLOSE,
        ".mend": _S.MACRO_CLOSE,
        "=": _S.LABEL,
        "equ": _S.LABEL,
        ".def": _S.LABEL,
        "icl": _S.SOURCE_INCLUDE,
        "ins": _S.BINARY_INCLUDE,
    },
    default_source_include_extension=".asm",
    identifier_start_characters=frozenset("_?@"),
    identifier_part_characters=frozenset("_?@"),
    identifier_separator_characters=frozenset("."),
    targets=frozenset({Target.MOS6502, Target.MOS6502_ILLEGAL, Target.MOS65C02, Target.WDC65816}),
)

ATASM_DIALECT = DialectDefinition(
    language=Language.ATASM,
    single_line_comment_delimiters=(";",),
    string_delimiters=('"',),
    directives={
        ".macro": _S.MACRO_OPEN,
        ".endm": _S.MACRO_CLOSE,
        "=": _S.LABEL,
        ".include": _S.SOURCE_INCLUDE,
        ".incbin": _S.BINARY_INCLUDE,
    },
    default_source_include_extension=".m65",
    identifier_start_characters=frozenset("_?@"),
    identifier_part_characters=frozenset("_?@"),
    targets=frozenset({Target.MOS6502, Target.MOS6502_ILLEGAL}),
)

DASM_DIALECT = DialectDefinition(
    language=Language.DASM,
    single_line_comment_delimiters=(";",),
    string_delimiters=('"',),
    directives={
        "mac": _S.MACRO_OPEN,
        "macro": _S.MACRO_OPEN,
        "endm": _S.MACRO_CLOSE,
        "equ": _S.LABEL,
        "=": _S.LABEL,
        "set": _S.LABEL,
        "include": _S.SOURCE_INCLUDE,
        "incbin": _S.BINARY_INCLUDE,
    },
    default_source_include_extension=".asm",
    identifier_start_characters=frozenset("_."),
    identifier_part_characters=frozenset("_."),
    targets=frozenset({Target.MOS6502, Target.MOS6502_ILLEGAL}),
)

CA65_DIALECT = DialectDefinition(
    language=Language.CA65,
    single_line_comment_delimiters=(";",),
    string_delimiters=('"', "'"),
    directives={
        ".proc": _S.SCOPE_OPEN,
        ".scope": _S.SCOPE_OPEN,
        ".struct": _S.SCOPE_OPEN,
        ".union": _S.SCOPE_OPEN,
        ".enum": _S.SCOPE_OPEN,
        ".endproc": _S.SCOPE_CLOSE,
        ".endscope": _S.SCOPE_CLOSE,
        ".endstruct": _S.SCOPE_CLOSE,
        ".endunion": _S.SCOPE_CLOSE,
        ".endenum": _S.SCOPE_CLOSE,
        ".macro": _S.MACRO_OPEN,
        ".mac": _S.MACRO_OPEN,
        ".endmacro": _S.MACRO_CLOSE,
        ".endmac": _S.MACRO_CLOSE,
        "=": _S.LABEL,
        ":=": _S.LABEL,
        ".set": _S.LABEL,
        ".include": _S.SOURCE_INCLUDE,
        ".incbin": _S.BINARY_INCLUDE,
    },
    default_source_include_extension=".inc",
    identifier_start_characters=frozenset("_@"),
    identifier_part_characters=frozenset("_@"),
    identifiers_case_sensitive=True,
    labels_at_column_zero=False,
    compound_name_separator="::",
    targets=frozenset({Target.MOS6502, Target.MOS6502_ILLEGAL, Target.MOS65C02, Target.WDC65816}),
)

MERLIN32_DIALECT = DialectDefinition(
    language=Language.MERLIN32,
    single_line_comment_delimiters=(";",),
    string_delimiters=('"', "'"),
    directives={
        "mac": _S.MACRO_OPEN,
        "<<<": _S.MACRO_CLOSE,
        "eom": _S.MACRO_CLOSE,
        "equ": _S.LABEL,
        "=": _S.LABEL,
        "put": _S.SOURCE_INCLUDE,
        "use": _S.SOURCE_INCLUDE,
        "putbin": _S.BINARY_INCLUDE,
    },
    default_source_include_extension=".s",
    identifier_start_characters=frozenset("_:]"),
    identifier_part_characters=frozenset("_"),
    label_suffix="",
    default_target=Target.WDC65816,
    targets=frozenset({Target.MOS6502, Target.MOS65C02, Target.WDC65816}),
)

TEST_DIALECT = DialectDefinition(
    language=Language.TEST,
    single_line_comment_delimiters=(";", "//"),
    string_delimiters=('"', "'"),
    directives={
        "section": _S.SCOPE_OPEN,
        "endsection": _S.SCOPE_CLOSE,
        "macro": _S.MACRO_OPEN,
        "endm": _S.MACRO_CLOSE,
        "equ": _S.LABEL,
        "=": _S.LABEL,
        "include": _S.SOURCE_INCLUDE,
        "binclude": _S.BINARY_INCLUDE,
    },
    default_source_include_extension=".inc",
    default_binary_include_extension=".bin",
    identifier_separator_characters=frozenset("."),
    identifiers_case_sensitive=True,
)

DIALECTS: Final[Mapping[Language, DialectDefinition]] = MappingProxyType(
    {
        dialect.language: dialect
        for dialect in (
            MADS_DIALECT,
            ATASM_DIALECT,
            DASM_DIALECT,
            CA65_DIALECT,
            MERLIN32_DIALECT,
            TEST_DIALECT,
        )
    }
)


@cache
def get_syntax(language: Language, target: Target | None = None) -> SyntaxTable:
    """Shared syntax table for a (language, target) pair; `None` selects the dialect default."""
    dialect = DIALECTS[language]
    return dialect.build(target if target is not None else dialect.default_target)


def supported_targets(language: Language) -> frozenset[Target]:
    return DIALECTS[language].targets
