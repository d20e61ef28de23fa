import os

from asmnav.hyperlinks import HyperlinkKind, Viewer, detect_hyperlinks, identifier_at
from asmnav.parser import parse_source
from asmnav.resolve import IncludeResolver
from asmnav.syntax import Language, get_syntax
from tests._shared_cases import COMPOUND_REFERENCE_LINE, COMPOUND_SOURCE

TEST_SYNTAX = get_syntax(Language.TEST)


class MemoryFileSystem:
    def __init__(self, files: dict[str, str]) -> None:
        self.files = files

    def is_file(self, path: str) -> bool:
        return path in self.files

    def read_text(self, path: str) -> str:
        return self.files[path]


def test_source_include_has_priority() -> None:
    text = 'include "table.inc"\n'
    parsed = parse_source(text, TEST_SYNTAX, "/proj/src/main.asm")

    targets = detect_hyperlinks(parsed, 12, allow_multiple=True)

    assert len(targets) == 1
    (target,) = targets
    assert target.kind == HyperlinkKind.SOURCE_INCLUDE
    assert target.viewer == Viewer.LANGUAGE_EDITOR
    assert target.path == os.path.normpath("/proj/src/table.inc")
    assert target.line is None
    assert target.region.as_tuple() == (9, 18)
    assert target.description == "Open with TEST editor"


def test_source_include_uses_editor_name() -> None:
    parsed = parse_source('include "table"\n', TEST_SYNTAX, "/proj/main.asm")

    (target,) = detect_hyperlinks(parsed, 10, allow_multiple=False, editor_name="MADS")

    assert target.description == "Open with MADS editor"
    assert target.path == os.path.normpath("/proj/table.inc")


def test_binary_include_offers_more_viewers_when_allowed() -> None:
    parsed = parse_source('binclude "font"\n', TEST_SYNTAX, "/proj/main.asm")

    single = detect_hyperlinks(parsed, 11, allow_multiple=False)
    multiple = detect_hyperlinks(parsed, 11, allow_multiple=True)

    assert [target.viewer for target in single] == [Viewer.HEX_EDITOR]
    assert [target.viewer for target in multiple] == [
        Viewer.HEX_EDITOR,
        Viewer.GRAPHICS_EDITOR,
        Viewer.DEFAULT_EDITOR,
        Viewer.SYSTEM_EDITOR,
    ]
    assert all(target.kind == HyperlinkKind.BINARY_INCLUDE for target in multiple)
    assert all(target.path == os.path.normpath("/proj/font.bin") for target in multiple)


def test_cursor_outside_quotes_falls_back_to_identifiers() -> None:
    parsed = parse_source('include "table.inc"\n', TEST_SYNTAX, "/proj/main.asm")

    assert detect_hyperlinks(parsed, 2, allow_multiple=True) == ()
    assert detect_hyperlinks(parsed, 8, allow_multiple=True) == ()


def test_include_without_directory_has_no_target() -> None:
    parsed = parse_source('include "table.inc"\n', TEST_SYNTAX)

    assert detect_hyperlinks(parsed, 12, allow_multiple=True) == ()


def test_identifier_boundary_on_compound_reference() -> None:
    line = COMPOUND_REFERENCE_LINE
    loop_offset = line.index("LOOP") + 1
    end_offset = line.index("END") + 1

    assert identifier_at(line, loop_offset, TEST_SYNTAX) == (line.index("LOOP"), line.index("."))
    assert identifier_at(line, end_offset, TEST_SYNTAX) == (line.index("END"), len(line))
    assert identifier_at(line, line.index("."), TEST_SYNTAX) == (line.index("LOOP"), len(line))
    assert identifier_at(line, 0, TEST_SYNTAX) is None


def test_identifier_hyperlinks_on_compound_reference() -> None:
    parsed = parse_source(COMPOUND_SOURCE, TEST_SYNTAX, "/proj/main.asm")
    line_start = COMPOUND_SOURCE.index(COMPOUND_REFERENCE_LINE)

    (on_loop,) = detect_hyperlinks(parsed, line_start + COMPOUND_REFERENCE_LINE.index("LOOP"), True)
    (on_end,) = detect_hyperlinks(parsed, line_start + COMPOUND_REFERENCE_LINE.index("END"), True)
    (on_dot,) = detect_hyperlinks(parsed, line_start + COMPOUND_REFERENCE_LINE.index("."), True)

    assert (on_loop.line, on_loop.description) == (1, "Open section LOOP in line 1 in this file")
    assert (on_end.line, on_end.description) == (2, "Open label LOOP.END in line 2 in this file")
    assert on_dot.line == 2
    assert on_dot.region.len().value == len("LOOP.END")
    assert on_end.kind == HyperlinkKind.IDENTIFIER
    assert on_end.path == "/proj/main.asm"


def test_sole_match_on_own_line_is_suppressed() -> None:
    text = "COUNT:\n    lda COUNT\n"
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")

    assert detect_hyperlinks(parsed, 0, allow_multiple=True) == ()
    (target,) = detect_hyperlinks(parsed, text.index("COUNT", 3), allow_multiple=True)
    assert target.line == 1
    assert target.region.as_tuple() == (11, 16)


def test_multiple_matches_are_capped_unless_allowed() -> None:
    text = "X equ 1\nX equ 2\n    lda X\n"
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")
    offset = text.rindex("X")

    assert [target.line for target in detect_hyperlinks(parsed, offset, allow_multiple=False)] == [1]
    assert [target.line for target in detect_hyperlinks(parsed, offset, allow_multiple=True)] == [1, 2]


def test_multiple_matches_keep_declaration_on_cursor_line() -> None:
    text = "X equ 1\nX equ 2\n"
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")

    assert [target.line for target in detect_hyperlinks(parsed, 0, allow_multiple=True)] == [1, 2]


def test_identifier_in_included_file() -> None:
    files = {"/proj/defs.inc": "; constants\nCOUNT equ 3\n"}
    text = 'include "defs"\n    lda COUNT\n'
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")
    resolver = IncludeResolver(MemoryFileSystem(files))

    without_resolver = detect_hyperlinks(parsed, text.index("COUNT"), allow_multiple=True)
    (target,) = detect_hyperlinks(parsed, text.index("COUNT"), allow_multiple=True, resolver=resolver)

    assert without_resolver == ()
    assert target.path == "/proj/defs.inc"
    assert target.line == 2
    assert target.description == "Open symbol COUNT in line 2 in include defs.inc"


def test_local_matches_come_before_include_matches() -> None:
    files = {"/proj/defs.inc": "X equ 3\n"}
    text = 'include "defs"\nX equ 1\n    lda X\n'
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")
    resolver = IncludeResolver(MemoryFileSystem(files))

    targets = detect_hyperlinks(parsed, text.rindex("X"), allow_multiple=True, resolver=resolver)

    assert [(target.path, target.line) for target in targets] == [("/proj/main.asm", 2), ("/proj/defs.inc", 1)]


def test_offsets_outside_text_or_on_line_break_yield_nothing() -> None:
    text = "COUNT:\n    lda COUNT\n"
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")

    assert detect_hyperlinks(parsed, -1, allow_multiple=True) == ()
    assert detect_hyperlinks(parsed, len(text), allow_multiple=True) == ()
    assert detect_hyperlinks(parsed, text.index("\n"), allow_multiple=True) == ()


def test_non_identifier_character_yields_nothing() -> None:
    text = "COUNT:\n    lda #COUNT\n"
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")

    assert detect_hyperlinks(parsed, text.index("#"), allow_multiple=True) == ()
    assert detect_hyperlinks(parsed, text.index("#") - 1, allow_multiple=True) == ()


def test_identifiers_in_comments_are_not_linked() -> None:
    text = "COUNT: nop\n    lda COUNT ; see COUNT\n"
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")

    assert detect_hyperlinks(parsed, text.rindex("COUNT"), allow_multiple=True) == ()
    (target,) = detect_hyperlinks(parsed, text.index("COUNT", 11), allow_multiple=True)
    assert target.line == 1


def test_identifiers_in_strings_are_not_linked() -> None:
    text = "COUNT: nop\n    lda 'COUNT'\n    lda \"COUNT\"\n"
    parsed = parse_source(text, TEST_SYNTAX, "/proj/main.asm")

    assert detect_hyperlinks(parsed, text.index("'COUNT'") + 1, allow_multiple=True) == ()
    assert detect_hyperlinks(parsed, text.index('"COUNT"') + 1, allow_multiple=True) == ()
