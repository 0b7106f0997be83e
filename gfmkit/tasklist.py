"""Task-list items: list items that start with a ``[ ]`` or ``[x]`` checkbox.

``parse_task_item`` recognises the checkbox on a list item's line.  The
remaining functions produce the markup that renderers emit for such an item.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from gfmkit.scanners import scan_tasklist

TYPE_STRING = "tasklist"

_CHECKED_MARKERS_TEXT = ("[x]", "[X]")
_CHECKED_MARKERS_BINARY = (b"[x]", b"[X]")

_CHECK_MARKS = {True: "x", False: " "}
_XML_BOOLEANS = {True: "true", False: "false"}


@dataclass
class TaskItem:
    """A list item that carries a checkbox.

    ``length`` is the length of the list marker, checkbox and following
    spaces at the start of the line; ``checked`` tells whether the task is
    completed and may be changed afterwards.
    """

    checked: bool
    length: int

    @property
    def type_string(self) -> str:
        """The node type name used for task-list items."""
        return TYPE_STRING


def parse_task_item(line: Union[str, bytes, bytearray]) -> Optional[TaskItem]:
    """Recognise a task-list item line such as ``- [x] done``.

    Returns None when the line does not start with a list marker followed
    by a checkbox.  Any ``[x]`` or ``[X]`` on the line marks the task as
    checked.
    """
    matched = scan_tasklist(line, 0)
    if not matched:
        return None
    markers = (
        _CHECKED_MARKERS_TEXT if isinstance(line, str) else _CHECKED_MARKERS_BINARY
    )
    checked = any(marker in line for marker in markers)
    return TaskItem(checked=checked, length=matched)


def html_open_tag(checked: bool, sourcepos: Optional[str] = None) -> str:
    """Return the opening ``<li>`` tag and disabled checkbox of a task item.

    ``sourcepos``, when given, is written as a ``data-sourcepos`` attribute.
    """
    attribute = f' data-sourcepos="{sourcepos}"' if sourcepos is not None else ""
    if checked:
        box = '<input type="checkbox" checked="" disabled="" /> '
    else:
        box = '<input type="checkbox" disabled="" /> '
    return f"<li{attribute}>{box}"


def html_close_tag() -> str:
    """Return the closing tag of a task item."""
    return "</li>\n"


def commonmark_marker(checked: bool) -> str:
    """Return the list marker and checkbox written back to Markdown."""
    mark = _CHECK_MARKS[bool(checked)]
    return f"- [{mark}] "


def xml_attribute(checked: bool) -> str:
    """Return the ``completed`` attribute for the XML rendering."""
    value = _XML_BOOLEANS[bool(checked)]
    return f' completed="{value}"'