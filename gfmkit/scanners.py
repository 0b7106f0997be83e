"""Line scanners for table delimiter rows, table cells and task-list items.

Every scanner looks at ``data`` starting at ``offset`` and returns the length
of the match found there, or 0 when nothing matches (including when
``offset`` is at or past the end of the data).  ``data`` may be ``str`` or a
bytes-like object; for bytes, lengths are counted in bytes and table cells
and task-list markers only accept well-formed UTF-8.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

Data = Union[str, bytes, bytearray]

_SPACE = "[ \\t\\x0b\\x0c]"
_NEWLINE = "\\r?\\n"

_UTF8_MULTIBYTE = (
    rb"(?:[\xc2-\xdf][\x80-\xbf]"
    rb"|\xe0[\xa0-\xbf][\x80-\xbf]"
    rb"|[\xe1-\xec\xee\xef][\x80-\xbf]{2}"
    rb"|\xed[\x80-\x9f][\x80-\xbf]"
    rb"|\xf0[\x90-\xbf][\x80-\xbf]{2}"
    rb"|[\xf1-\xf3][\x80-\xbf]{3}"
    rb"|\xf4[\x80-\x8f][\x80-\xbf]{2})"
)

_TABLE_MARKER = f"{_SPACE}*:?-+:?{_SPACE}*"
_TABLE_START = (
    f"\\|?{_TABLE_MARKER}(?:\\|{_TABLE_MARKER})*\\|?{_SPACE}*{_NEWLINE}"
)
_TABLE_CELL_END = f"\\|{_SPACE}*"
_TABLE_ROW_END = f"{_SPACE}*{_NEWLINE}"

_TABLE_CELL_TEXT = r"(?:\\\||[^|\r\n])+"
_TABLE_CELL_BINARY = (
    rb"(?:\\\||[\x00-\x09\x0b\x0c\x0e-\x7b\x7d-\x7f]|" + _UTF8_MULTIBYTE + rb")+"
)

_TASK_TAIL = f"{_SPACE}+\\[[ xX]\\]{_SPACE}+"
_TASKLIST_TEXT = f"{_SPACE}*(?:[*+\\-]|[0-9]+[^\\n]){_TASK_TAIL}"
_TASKLIST_BINARY = (
    f"{_SPACE}*(?:[*+\\-]|[0-9]+(?:[\\x00-\\x09\\x0b-\\x7f]|".encode("ascii")
    + _UTF8_MULTIBYTE
    + f")){_TASK_TAIL}".encode("ascii")
)


@dataclass(frozen=True)
class _Scanner:
    text: re.Pattern
    binary: re.Pattern

    def __call__(self, data: Data, offset: int) -> int:
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        if isinstance(data, str):
            pattern = self.text
        elif isinstance(data, (bytes, bytearray)):
            pattern = self.binary
        else:
            raise TypeError(
                f"expected str or bytes, got {type(data).__name__}"
            )
        if offset >= len(data):
            return 0
        found = pattern.match(data, offset)
        return found.end() - offset if found else 0


def _same_for_both(pattern: str) -> _Scanner:
    return _Scanner(re.compile(pattern), re.compile(pattern.encode("ascii")))


_table_start = _same_for_both(_TABLE_START)
_table_cell = _Scanner(re.compile(_TABLE_CELL_TEXT), re.compile(_TABLE_CELL_BINARY))
_table_cell_end = _same_for_both(_TABLE_CELL_END)
_table_row_end = _same_for_both(_TABLE_ROW_END)
_tasklist = _Scanner(re.compile(_TASKLIST_TEXT), re.compile(_TASKLIST_BINARY))


def scan_table_start(data: Data, offset: int = 0) -> int:
    """Match a whole table delimiter row such as ``| :-- | --: |`` plus its newline."""
    return _table_start(data, offset)


def scan_table_cell(data: Data, offset: int = 0) -> int:
    """Match the content of a non-empty table cell; ``\\|`` does not end it."""
    return _table_cell(data, offset)


def scan_table_cell_end(data: Data, offset: int = 0) -> int:
    """Match a cell-separating pipe and the spaces that follow it."""
    return _table_cell_end(data, offset)


def scan_table_row_end(data: Data, offset: int = 0) -> int:
    """Match optional trailing spaces and the line ending of a row."""
    return _table_row_end(data, offset)


def scan_tasklist(data: Data, offset: int = 0) -> int:
    """Match a list marker followed by a ``[ ]``, ``[x]`` or ``[X]`` checkbox."""
    return _tasklist(data, offset)