"""Pure text transformations for LSP text edits.

Edits are applied from the bottom of a document towards the top. Applying an
edit can only move text located after its start, so every pending edit, which
starts at or before the current one, keeps valid coordinates.
"""

from __future__ import annotations

import re
from typing import Sequence

from ..errors import OverlappingEdits
from ..lsp.messages import Position, TextEdit


def codepoint_index_from_utf16_units(text: str, utf16_units: int) -> int:
    """Convert an LSP character offset (UTF-16 code units) into a str index."""
    if not text:
        return 0
    remaining = max(0, int(utf16_units))
    idx = 0
    while idx < len(text):
        units = 1 if ord(text[idx]) <= 0xFFFF else 2
        if remaining < units:
            break
        remaining -= units
        idx += 1
    return idx


_LINE_BREAK_RE = re.compile(r"(\r\n|\r|\n)")


def split_lines(content: str) -> list[str]:
    """Split content into lines that keep their own terminator.

    Only the last line has no terminator; it is empty when content ends with a
    line break.
    """
    parts = _LINE_BREAK_RE.split(content)
    return [text + sep for text, sep in zip(parts[0::2], parts[1::2])] + [parts[-1]]


def _body(line: str) -> str:
    return line.rstrip("\r\n")


def describe_edit(edit: TextEdit) -> str:
    """Render an edit as ``line:char-line:char: "text"`` with 1-based lines."""
    start = edit.range.start
    end = edit.range.end
    return f'{start.line + 1}:{start.character}-{end.line + 1}:{end.character}: "{edit.new_text}"'


def sort_for_application(edits: Sequence[TextEdit]) -> list[TextEdit]:
    """Order edits bottom-most, right-most first.

    Ties on the start position put the longer edit first, and among identical
    ranges the later input first, so insertions sharing a position end up in
    input order.
    """
    indexed = sorted(
        enumerate(edits),
        key=lambda item: (item[1].range.start.as_tuple(), item[1].range.end.as_tuple(), item[0]),
        reverse=True,
    )
    return [edit for _, edit in indexed]


def check_overlaps(sorted_edits: Sequence[TextEdit], uri: str) -> None:
    """Raise OverlappingEdits when two edits, in application order, intersect."""
    for later, earlier in zip(sorted_edits, sorted_edits[1:]):
        if earlier.range.end.as_tuple() > later.range.start.as_tuple():
            raise OverlappingEdits(uri, describe_edit(earlier), describe_edit(later))


def _resolve(lines: Sequence[str], position: Position) -> tuple[int, int]:
    # positions past the document end clamp to the end of the last line
    if position.line >= len(lines):
        last = len(lines) - 1
        return last, len(_body(lines[last]))
    body = _body(lines[position.line])
    return position.line, codepoint_index_from_utf16_units(body, position.character)


def apply_edit(lines: Sequence[str], edit: TextEdit) -> list[str]:
    """Return a new line list, as produced by split_lines, with edit applied."""
    start_line, start_idx = _resolve(lines, edit.range.start)
    end_line, end_idx = _resolve(lines, edit.range.end)
    end = lines[end_line]
    body = _body(end)
    combined = _body(lines[start_line])[:start_idx] + edit.new_text + body[end_idx:] + end[len(body) :]
    replacement = split_lines(combined)
    if end != body:
        # the end line's terminator is kept; the empty remainder after it is not a line
        replacement.pop()
    # the replacement may add or remove line breaks, so splice rather than assign
    return [*lines[:start_line], *replacement, *lines[end_line + 1 :]]


def fold_edits(content: str, ordered: Sequence[TextEdit]) -> str:
    """Apply edits already in application order to content."""
    lines = split_lines(content)
    for edit in ordered:
        lines = apply_edit(lines, edit)
    return "".join(lines)


def apply_text_edits(content: str, edits: Sequence[TextEdit], *, uri: str = "<memory>") -> str:
    """Apply every edit to content and return the new content."""
    if not edits:
        return content
    ordered = sort_for_application(edits)
    check_overlaps(ordered, uri)
    return fold_edits(content, ordered)


__all__ = [
    "apply_edit",
    "apply_text_edits",
    "check_overlaps",
    "codepoint_index_from_utf16_units",
    "describe_edit",
    "fold_edits",
    "sort_for_application",
    "split_lines",
]
