"""Tests for the pure text-edit transformations."""

from __future__ import annotations

import pytest

from wsedit.edit.text import (
    apply_edit,
    apply_text_edits,
    codepoint_index_from_utf16_units,
    describe_edit,
    sort_for_application,
    split_lines,
)
from wsedit.errors import OverlappingEdits

from conftest import make_edit


def test_edits_apply_against_original_coordinates() -> None:
    edits = [make_edit((0, 1), (0, 2), "X"), make_edit((2, 0), (2, 1), "Y")]
    assert apply_text_edits("abc\ndef\nghi", edits) == "aXc\ndef\nYhi"
    # input order does not matter
    assert apply_text_edits("abc\ndef\nghi", list(reversed(edits))) == "aXc\ndef\nYhi"


def test_multi_line_splice_keeps_prefix_and_suffix() -> None:
    edit = make_edit((0, 3), (2, 0), "X\nY")
    assert apply_text_edits("one\ntwo\nthree", [edit]) == "oneX\nYthree"


def test_multi_line_replacement_can_grow_the_document() -> None:
    edit = make_edit((0, 1), (1, 1), "1\n2\n3\n")
    assert apply_text_edits("ab\ncd\nef", [edit]) == "a1\n2\n3\nd\nef"


def test_same_line_edit_may_introduce_line_breaks() -> None:
    edits = [make_edit((0, 1), (0, 1), "\n"), make_edit((1, 0), (1, 0), "> ")]
    assert apply_text_edits("ab\ncd", edits) == "a\nb\n> cd"


def test_empty_edit_list_returns_content_unchanged() -> None:
    content = "untouched\ncontent"
    assert apply_text_edits(content, []) is content


def test_sort_orders_bottom_right_first() -> None:
    first = make_edit((0, 0), (0, 1), "a")
    second = make_edit((0, 4), (0, 5), "b")
    third = make_edit((3, 2), (3, 2), "c")
    ordered = sort_for_application([first, third, second])
    assert ordered == [third, second, first]


def test_insertions_at_same_position_keep_input_order() -> None:
    edits = [make_edit((0, 1), (0, 1), "1"), make_edit((0, 1), (0, 1), "2")]
    assert apply_text_edits("ab", edits) == "a12b"


def test_insertion_before_replacement_at_same_start() -> None:
    replace = make_edit((0, 0), (0, 5), "bye")
    insert = make_edit((0, 0), (0, 0), ">")
    assert apply_text_edits("hello world", [replace, insert]) == ">bye world"
    assert apply_text_edits("hello world", [insert, replace]) == ">bye world"


def test_touching_edits_are_not_overlapping() -> None:
    edits = [make_edit((0, 0), (0, 2), "X"), make_edit((0, 2), (0, 4), "Y")]
    assert apply_text_edits("abcdef", edits) == "XYef"


def test_overlapping_edits_are_rejected() -> None:
    edits = [make_edit((0, 0), (0, 3), "X"), make_edit((0, 2), (0, 4), "Y")]
    with pytest.raises(OverlappingEdits, match="file:///tmp/a.py"):
        apply_text_edits("abcdef", edits, uri="file:///tmp/a.py")


def test_overlap_across_lines_is_rejected() -> None:
    edits = [make_edit((0, 1), (2, 1), ""), make_edit((1, 0), (1, 1), "Z")]
    with pytest.raises(OverlappingEdits):
        apply_text_edits("abc\ndef\nghi", edits)


def test_apply_edit_returns_new_list() -> None:
    lines = ["abc\n", "def"]
    result = apply_edit(lines, make_edit((0, 0), (1, 0), ""))
    assert result == ["def"]
    assert lines == ["abc\n", "def"]


def test_character_offsets_are_utf16_units() -> None:
    line = "\U0001F600x"
    assert codepoint_index_from_utf16_units(line, 2) == 1
    assert codepoint_index_from_utf16_units(line, 3) == 2
    assert apply_text_edits(line, [make_edit((0, 2), (0, 3), "y")]) == "\U0001F600y"


def test_positions_past_the_end_clamp() -> None:
    assert apply_text_edits("abc", [make_edit((0, 10), (0, 10), "!")]) == "abc!"
    assert apply_text_edits("abc", [make_edit((5, 0), (5, 0), "!")]) == "abc!"


def test_crlf_content_keeps_its_line_breaks() -> None:
    assert apply_text_edits("a\r\nb\r\nc", [make_edit((1, 0), (1, 1), "B")]) == "a\r\nB\r\nc"
    assert apply_text_edits("a\r\nb\r\nc", [make_edit((0, 1), (2, 0), "X\r\nY")]) == "aX\r\nYc"


def test_split_lines_keeps_each_terminator() -> None:
    assert split_lines("a\nb\r\nc\rd") == ["a\n", "b\r\n", "c\r", "d"]
    assert split_lines("end\n") == ["end\n", ""]
    assert split_lines("") == [""]


def test_mixed_line_endings_address_the_right_line() -> None:
    assert apply_text_edits("a\nb\r\nc", [make_edit((1, 0), (1, 1), "B")]) == "a\nB\r\nc"
    assert apply_text_edits("a\r\nb\nc\r\nd", [make_edit((2, 0), (2, 1), "C")]) == "a\r\nb\nC\r\nd"


def test_lone_carriage_return_is_a_line_break() -> None:
    assert apply_text_edits("a\rb\rc", [make_edit((2, 0), (2, 1), "C")]) == "a\rb\rC"


def test_multi_line_splice_over_mixed_endings() -> None:
    edits = [make_edit((0, 1), (1, 1), "X"), make_edit((3, 0), (3, 1), "D")]
    assert apply_text_edits("ab\ncd\r\nef\rgh", edits) == "aXd\r\nef\rDh"


def _inverse(original: str, edit):
    """Build the edit that undoes a single edit applied to original."""
    lines = original.split("\n")
    start, end = edit.range.start, edit.range.end
    if start.line == end.line:
        removed = lines[start.line][start.character : end.character]
    else:
        removed = "\n".join(
            [lines[start.line][start.character :], *lines[start.line + 1 : end.line], lines[end.line][: end.character]]
        )
    inserted = edit.new_text.split("\n")
    end_line = start.line + len(inserted) - 1
    end_char = len(inserted[-1]) + (start.character if len(inserted) == 1 else 0)
    return make_edit((start.line, start.character), (end_line, end_char), removed)


@pytest.mark.parametrize(
    "edit",
    [
        make_edit((0, 2), (1, 2), "ZZ\nQ"),
        make_edit((1, 0), (1, 4), "BETA"),
        make_edit((0, 5), (2, 0), ""),
        make_edit((2, 5), (2, 5), "\ndelta\n"),
    ],
)
def test_inverse_edit_restores_original(edit) -> None:
    original = "alpha\nbeta\ngamma"
    changed = apply_text_edits(original, [edit])
    assert apply_text_edits(changed, [_inverse(original, edit)]) == original


def test_inverse_batch_restores_original() -> None:
    original = "abc\ndef\nghi"
    changed = apply_text_edits(original, [make_edit((0, 1), (0, 2), "XYZ"), make_edit((2, 0), (2, 3), "")])
    assert changed == "aXYZc\ndef\n"
    inverses = [make_edit((0, 1), (0, 4), "b"), make_edit((2, 0), (2, 0), "ghi")]
    assert apply_text_edits(changed, inverses).encode() == original.encode()


def test_describe_edit_uses_one_based_lines() -> None:
    assert describe_edit(make_edit((0, 3), (2, 0), "X")) == '1:3-3:0: "X"'
