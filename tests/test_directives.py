import pytest

from asmnav.directives import (
    Hardware,
    InvalidAnnotationError,
    TargetDirectiveError,
    default_executable_extension,
    read_annotation_values,
    select_hardware,
    select_target,
)
from asmnav.syntax import Language, Target, get_syntax

MADS_SYNTAX = get_syntax(Language.MADS)


def test_reads_annotation_values_from_comments() -> None:
    text = (
        "; @com.wudsn.ide.lng.hardware=ATARI8BIT\n"
        "  nop ; @com.wudsn.ide.lng.target = MOS6502_ILLEGAL \n"
        "// @com.wudsn.ide.lng.outputfile=game.xex\n"
    )

    values = read_annotation_values(text, MADS_SYNTAX, "game.asm")

    assert values.source_path == "game.asm"
    hardware = values.get("hardware")
    target = values.get("target")
    output_file = values.get("outputfile")
    assert hardware is not None and (hardware.value, hardware.line) == ("ATARI8BIT", 1)
    assert target is not None and (target.value, target.line) == ("MOS6502_ILLEGAL", 2)
    assert output_file is not None and output_file.value == "game.xex"
    assert "mainsourcefile" not in values
    assert text[target.start : target.end] == "MOS6502_ILLEGAL"


def test_annotations_outside_comments_are_ignored() -> None:
    text = '  .byte "@com.wudsn.ide.lng.hardware=C64"\n'

    values = read_annotation_values(text, MADS_SYNTAX)

    assert values.get("hardware") is None


def test_unknown_keys_are_ignored() -> None:
    values = read_annotation_values("; @com.wudsn.ide.lng.colour=red\n", MADS_SYNTAX)

    assert dict(values.values) == {}


def test_selects_hardware_and_target() -> None:
    text = "; @com.wudsn.ide.lng.hardware=c64\n; @com.wudsn.ide.lng.target=MOS65C02\n"
    values = read_annotation_values(text, MADS_SYNTAX)

    assert select_hardware(values) == Hardware.C64
    assert select_target(values, Language.MADS) == Target.MOS65C02


def test_absent_annotations_select_nothing() -> None:
    values = read_annotation_values("  nop\n", MADS_SYNTAX)

    assert select_hardware(values) is None
    assert select_target(values, Language.MADS) is None


def test_empty_value_raises_with_line() -> None:
    text = "  nop\n; @com.wudsn.ide.lng.hardware=\n"

    with pytest.raises(InvalidAnnotationError) as excinfo:
        read_annotation_values(text, MADS_SYNTAX, "game.asm")

    assert excinfo.value.source_path == "game.asm"
    assert excinfo.value.line == 2
    assert excinfo.value.diagnostic.code == "DIRECTIVE_EMPTY_VALUE"
    assert "game.asm:2" in str(excinfo.value)


def test_conflicting_values_raise() -> None:
    text = "; @com.wudsn.ide.lng.hardware=C64\n; @com.wudsn.ide.lng.hardware=C64\n; @com.wudsn.ide.lng.hardware=NES\n"

    with pytest.raises(InvalidAnnotationError) as excinfo:
        read_annotation_values(text, MADS_SYNTAX)

    assert excinfo.value.line == 3
    assert excinfo.value.diagnostic.code == "DIRECTIVE_CONFLICTING_VALUE"


def test_unknown_hardware_raises() -> None:
    values = read_annotation_values("; @com.wudsn.ide.lng.hardware=AMIGA\n", MADS_SYNTAX)

    with pytest.raises(InvalidAnnotationError) as excinfo:
        select_hardware(values)

    assert excinfo.value.diagnostic.code == "DIRECTIVE_INVALID_VALUE"
    assert excinfo.value.diagnostic.severity == "error"


def test_target_must_be_supported_by_language() -> None:
    values = read_annotation_values("; @com.wudsn.ide.lng.target=MOS6502_ILLEGAL\n", get_syntax(Language.MERLIN32))

    with pytest.raises(InvalidAnnotationError) as excinfo:
        select_target(values, Language.MERLIN32)

    assert excinfo.value.line == 1
    assert excinfo.value.diagnostic.hint is not None


def test_target_directive_error_from_exception() -> None:
    values = read_annotation_values("\n; @com.wudsn.ide.lng.target=Z80\n", MADS_SYNTAX, "a.asm")

    with pytest.raises(InvalidAnnotationError) as excinfo:
        select_target(values, Language.MADS)
    error = TargetDirectiveError.from_exception(excinfo.value)

    assert (error.source_path, error.line) == ("a.asm", 2)
    assert error.message == error.diagnostic.message


def test_default_executable_extensions() -> None:
    assert default_executable_extension(Hardware.ATARI8BIT) == ".xex"
    assert default_executable_extension(Hardware.C64) == ".prg"
    assert default_executable_extension(Hardware.APPLE2) == ".b"
    assert default_executable_extension(Hardware.ATARI2600) == ".bin"
    assert default_executable_extension(Hardware.GENERIC) == ""
