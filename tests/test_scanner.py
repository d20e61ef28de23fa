from asmnav.scanner import Partition, PartitionKind, partition_at, scan_partitions
from asmnav.syntax import Language, get_syntax

TEST_SYNTAX = get_syntax(Language.TEST)


def _labeled(text: str) -> list[tuple[str, str]]:
    return [(partition.kind.name, text[partition.start : partition.end]) for partition in scan_partitions(text, TEST_SYNTAX)]


def _assert_contiguous(text: str, partitions: tuple[Partition, ...]) -> None:
    position = 0
    for partition in partitions:
        assert partition.start == position
        assert partition.end > partition.start
        position = partition.end
    assert position == len(text)


def test_labels_code_string_and_comment() -> None:
    assert _labeled('lda #"a" ; comment\n') == [
        ("DEFAULT", "lda #"),
        ("STRING", '"a"'),
        ("DEFAULT", " "),
        ("SINGLE_LINE_COMMENT", "; comment"),
        ("DEFAULT", "\n"),
    ]


def test_comment_delimiter_inside_string_is_ignored() -> None:
    assert _labeled('"a;b" ; c') == [
        ("STRING", '"a;b"'),
        ("DEFAULT", " "),
        ("SINGLE_LINE_COMMENT", "; c"),
    ]


def test_second_comment_delimiter() -> None:
    assert _labeled("nop // done\nrts") == [
        ("DEFAULT", "nop "),
        ("SINGLE_LINE_COMMENT", "// done"),
        ("DEFAULT", "\nrts"),
    ]


def test_unterminated_string_ends_at_line_break() -> None:
    assert _labeled('x "abc\ny') == [
        ("DEFAULT", "x "),
        ("STRING", '"abc'),
        ("DEFAULT", "\ny"),
    ]


def test_other_quote_inside_string() -> None:
    assert _labeled("'it\"s' nop") == [
        ("STRING", "'it\"s'"),
        ("DEFAULT", " nop"),
    ]


def test_partitions_cover_text_contiguously() -> None:
    text = 'section A ; open\r\n  include "x.inc" // inc\r\n\r\n"open\nendsection'
    partitions = scan_partitions(text, TEST_SYNTAX)

    _assert_contiguous(text, partitions)
    for partition in partitions:
        if partition.kind != PartitionKind.DEFAULT:
            assert "\n" not in text[partition.start : partition.end]
            assert "\r" not in text[partition.start : partition.end]


def test_empty_text_has_no_partitions() -> None:
    assert scan_partitions("", TEST_SYNTAX) == ()


def test_partition_at() -> None:
    text = 'nop "s" ; c'
    partitions = scan_partitions(text, TEST_SYNTAX)

    string_partition = partition_at(partitions, 5)
    assert string_partition is not None
    assert string_partition.kind == PartitionKind.STRING
    comment_partition = partition_at(partitions, len(text) - 1)
    assert comment_partition is not None
    assert comment_partition.kind == PartitionKind.SINGLE_LINE_COMMENT
    assert partition_at(partitions, len(text)) is None
    assert partition_at((), 0) is None


def test_dialect_comment_delimiters_differ() -> None:
    atasm = get_syntax(Language.ATASM)
    partitions = scan_partitions("nop // not a comment in atasm", atasm)

    assert [partition.kind for partition in partitions] == [PartitionKind.DEFAULT]
