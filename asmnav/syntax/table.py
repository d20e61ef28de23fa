"""Dialect syntax tables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from types import MappingProxyType


class Language(StrEnum):
    """Assembler dialects with a built-in syntax table."""

    MADS = "mads"
    ATASM = "atasm"
    DASM = "dasm"
    CA65 = "ca65"
    MERLIN32 = "merlin32"
    TEST = "test"


class Target(StrEnum):
    """Instruction sets a syntax table can be built for."""

    MOS6502 = "MOS6502"
    MOS6502_ILLEGAL = "MOS6502_ILLEGAL"
    MOS65C02 = "MOS65C02"
    WDC65816 = "WDC65816"


class DirectiveKind(IntEnum):
    SCOPE_OPEN = 1
    SCOPE_CLOSE = 2
    LABEL = 3
    MACRO_OPEN = 4
    MACRO_CLOSE = 5
    SOURCE_INCLUDE = 6
    BINARY_INCLUDE = 7

    @property
    def is_include(self) -> bool:
        return self in (DirectiveKind.SOURCE_INCLUDE, DirectiveKind.BINARY_INCLUDE)

    @property
    def is_scope_open(self) -> bool:
        return self in (DirectiveKind.SCOPE_OPEN, DirectiveKind.MACRO_OPEN)


@dataclass(frozen=True, slots=True, eq=False)
class SyntaxTable:
    """Immutable rule set for one (language, target) pair.

    Letters and ASCII digits are always identifier characters; the extra
    character sets add dialect specific ones. Separator characters are
    identifier characters too, they only split compound names.
    """

    language: Language
    target: Target
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
    instructions: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.single_line_comment_delimiters:
            raise ValueError("A syntax table needs at least one single line comment delimiter")
        normalized = {self._normalize_keyword(keyword): kind for keyword, kind in self.directives.items()}
        object.__setattr__(self, "directives", MappingProxyType(normalized))
        object.__setattr__(
            self,
            "instructions",
            frozenset(self._normalize_keyword(mnemonic) for mnemonic in self.instructions),
        )

    @property
    def canonical_comment_delimiter(self) -> str:
        return self.single_line_comment_delimiters[0]

    @property
    def default_extension(self) -> str:
        return self.default_source_include_extension

    def default_extension_for(self, kind: DirectiveKind) -> str:
        match kind:
            case DirectiveKind.SOURCE_INCLUDE:
                return self.default_source_include_extension
            case DirectiveKind.BINARY_INCLUDE:
                return self.default_binary_include_extension
            case _:
                raise ValueError(f"No default extension for directive kind {kind!r}")

    def is_identifier_start_character(self, ch: str) -> bool:
        return (ch.isascii() and ch.isalpha()) or ch in self.identifier_start_characters

    def is_identifier_character(self, ch: str) -> bool:
        return (
            (ch.isascii() and ch.isalnum())
            or ch in self.identifier_part_characters
            or ch in self.identifier_separator_characters
        )

    def is_identifier_separator_character(self, ch: str) -> bool:
        return ch in self.identifier_separator_characters

    def is_identifier(self, word: str) -> bool:
        if not word or not self.is_identifier_start_character(word[0]):
            return False
        return all(self.is_identifier_character(ch) for ch in word[1:])

    def directive_kind(self, word: str) -> DirectiveKind | None:
        return self.directives.get(self._normalize_keyword(word))

    def is_instruction(self, word: str) -> bool:
        return self._normalize_keyword(word) in self.instructions

    def normalize_identifier(self, name: str) -> str:
        """Key under which `name` is stored in identifier indexes."""
        return name if self.identifiers_case_sensitive else name.upper()

    def _normalize_keyword(self, word: str) -> str:
        return word if self.keywords_case_sensitive else word.lower()

    def __repr__(self) -> str:
        return f"SyntaxTable({self.language.value}, {self.target.value})"
