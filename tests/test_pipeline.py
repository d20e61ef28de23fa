import logging

import pytest

from asmnav import (
    DocumentSession,
    Hardware,
    SourceFile,
    Target,
    TargetDirectiveError,
    parse,
    parse_document,
)
from asmnav.folding import FoldRegion
from asmnav.parser import ParseMode, ParserOptions
from asmnav.syntax import Language, get_syntax

TEST_SYNTAX = get_syntax(Language.TEST)


def test_parse_returns_model() -> None:
    parsed = parse("section Main\nendsection\n", TEST_SYNTAX, "/p/main.asm")

    assert isinstance(parsed, SourceFile)
    assert [node.name for node in parsed.sections] == ["Main"]


def test_parse_returns_directive_error(caplog: pytest.LogCaptureFixture) -> None:
    text = "section Main\n; @com.wudsn.ide.lng.hardware=SPECTRUM\n"

    with caplog.at_level(logging.WARNING, logger="asmnav.pipeline.entrypoints"):
        parsed = parse(text, TEST_SYNTAX, "/p/main.asm")

    assert isinstance(parsed, TargetDirectiveError)
    assert (parsed.source_path, parsed.line) == ("/p/main.asm", 2)
    assert "SPECTRUM" in parsed.message
    assert any("SPECTRUM" in record.getMessage() for record in caplog.records)


def test_parse_document_selects_target_syntax() -> None:
    text = "; @com.wudsn.ide.lng.hardware=ATARI8BIT\n; @com.wudsn.ide.lng.target=MOS6502_ILLEGAL\nstart lax #0\n"

    result = parse_document(text, Language.MADS, "/p/game.asm")

    assert result.ok
    assert result.hardware == Hardware.ATARI8BIT
    assert result.syntax is get_syntax(Language.MADS, Target.MOS6502_ILLEGAL)
    assert result.source_file is not None
    assert [node.name for node in result.source_file.walk()] == ["start"]


def test_parse_document_without_annotations_uses_default_target() -> None:
    result = parse_document("  nop\n", Language.MERLIN32)

    assert result.syntax is get_syntax(Language.MERLIN32)
    assert result.syntax.target == Target.WDC65816
    assert result.hardware is None


def test_parse_document_error_without_fallback() -> None:
    result = parse_document("; @com.wudsn.ide.lng.target=\n", Language.MADS, "/p/game.asm")

    assert not result.ok
    assert result.error is not None
    assert result.error.diagnostic.code == "DIRECTIVE_EMPTY_VALUE"
    assert result.source_file is None
    assert result.syntax is None


def test_parse_document_error_with_fallback_is_best_effort() -> None:
    fallback = get_syntax(Language.MADS)
    text = "; @com.wudsn.ide.lng.target=Z80\nmain .proc\n .endp\n"

    result = parse_document(text, Language.MADS, "/p/game.asm", fallback=fallback)

    assert result.error is not None
    assert result.error.line == 1
    assert result.syntax is fallback
    assert result.source_file is not None
    assert [node.name for node in result.source_file.sections] == ["main"]


def test_parse_document_mode_selects_options() -> None:
    result = parse_document("section Open\n", Language.TEST, mode=ParseMode.STRICT)

    assert result.source_file is not None
    assert [d.code for d in result.source_file.diagnostics] == ["PARSER_UNCLOSED_SCOPE"]


def test_conflicting_options_and_mode_raise() -> None:
    with pytest.raises(ValueError):
        parse_document(
            "",
            Language.TEST,
            options=ParserOptions.for_mode(ParseMode.PERMISSIVE),
            mode=ParseMode.STRICT,
        )


def test_session_swaps_snapshots() -> None:
    session = DocumentSession(Language.TEST, "/p/main.asm")
    session.update("section A\n  nop\nendsection\n")
    first = session.source_file

    session.update("section B\n  nop\nendsection\n")
    second = session.source_file

    assert first is not None and second is not None
    assert first is not second
    assert [node.name for node in first.sections] == ["A"]
    assert [node.name for node in second.sections] == ["B"]


def test_session_refreshes_folding_annotations() -> None:
    session = DocumentSession(Language.TEST, "/p/main.asm")
    text = "section A\n  nop\nendsection\n"

    session.update(text)
    region = FoldRegion(0, len(text))
    session.folding.set_collapsed(region, True)
    session.update(text)

    assert session.folding.regions == frozenset({region})
    assert session.folding.annotations[region].collapsed
    assert session.folding.revision == 1

    session.update("  nop\n")
    assert session.folding.regions == frozenset()
    assert session.folding.revision == 2


def test_session_keeps_last_model_on_directive_error() -> None:
    session = DocumentSession(Language.TEST, "/p/main.asm")
    session.update("section A\nendsection\n")
    previous = session.source_file

    result = session.update("; @com.wudsn.ide.lng.hardware=\nsection B\n")

    assert result.error is not None
    assert session.error is result.error
    assert session.source_file is previous


def test_session_hyperlinks() -> None:
    session = DocumentSession(Language.TEST, "/p/main.asm")
    text = "COUNT equ 1\n    lda COUNT\n"

    assert session.hyperlinks(0, allow_multiple=True) == ()
    session.update(text)
    (target,) = session.hyperlinks(text.rindex("COUNT"), allow_multiple=True)

    assert target.line == 1
    assert target.path == "/p/main.asm"


def test_parser_warnings_are_not_errors() -> None:
    clean = parse_document("section Open\n", Language.TEST, mode=ParseMode.STRICT)
    broken = parse_document("; @com.wudsn.ide.lng.hardware=\n", Language.TEST)

    assert clean.ok and not clean.has_errors
    assert broken.has_errors
