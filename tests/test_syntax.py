import pytest

from asmnav.syntax import (
    DIALECTS,
    DirectiveKind,
    Language,
    Target,
    get_syntax,
    instructions_for,
    supported_targets,
)


def test_every_language_has_a_dialect() -> None:
    assert set(DIALECTS) == set(Language)
    for language in Language:
        syntax = get_syntax(language)
        assert syntax.language == language
        assert syntax.target in supported_targets(language)
        assert syntax.single_line_comment_delimiters


def test_get_syntax_is_cached_per_pair() -> None:
    assert get_syntax(Language.MADS) is get_syntax(Language.MADS)
    assert get_syntax(Language.MADS, Target.MOS6502) is get_syntax(Language.MADS)
    assert get_syntax(Language.MADS, Target.WDC65816) is not get_syntax(Language.MADS)


def test_unsupported_target_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_syntax(Language.MERLIN32, Target.MOS6502_ILLEGAL)


def test_directive_lookup_ignores_keyword_case() -> None:
    mads = get_syntax(Language.MADS)

    assert mads.directive_kind(".proc") == DirectiveKind.SCOPE_OPEN
    assert mads.directive_kind(".PROC") == DirectiveKind.SCOPE_OPEN
    assert mads.directive_kind("ICL") == DirectiveKind.SOURCE_INCLUDE
    assert mads.directive_kind("lda") is None


def test_canonical_comment_delimiter_is_first() -> None:
    assert get_syntax(Language.MADS).canonical_comment_delimiter == ";"
    assert get_syntax(Language.TEST).single_line_comment_delimiters == (";", "//")


def test_default_extensions() -> None:
    test = get_syntax(Language.TEST)

    assert test.default_extension == ".inc"
    assert test.default_extension_for(DirectiveKind.SOURCE_INCLUDE) == ".inc"
    assert test.default_extension_for(DirectiveKind.BINARY_INCLUDE) == ".bin"
    with pytest.raises(ValueError):
        test.default_extension_for(DirectiveKind.LABEL)


def test_identifier_characters() -> None:
    test = get_syntax(Language.TEST)

    assert test.is_identifier_character("a")
    assert test.is_identifier_character("9")
    assert test.is_identifier_character("_")
    assert test.is_identifier_character(".")
    assert test.is_identifier_separator_character(".")
    assert not test.is_identifier_character(":")
    assert not test.is_identifier_character(" ")
    assert test.is_identifier("LOOP.END")
    assert not test.is_identifier("9lives")


def test_identifier_normalization_follows_case_sensitivity() -> None:
    assert get_syntax(Language.MADS).normalize_identifier("Loop") == "LOOP"
    assert get_syntax(Language.TEST).normalize_identifier("Loop") == "Loop"


def test_instruction_sets_extend_each_other() -> None:
    base = instructions_for(Target.MOS6502)

    assert "LDA" in base
    assert base < instructions_for(Target.MOS6502_ILLEGAL)
    assert base < instructions_for(Target.MOS65C02)
    assert "LAX" in instructions_for(Target.MOS6502_ILLEGAL)
    assert get_syntax(Language.MADS, Target.MOS6502_ILLEGAL).is_instruction("lax")
    assert not get_syntax(Language.MADS).is_instruction("lax")
