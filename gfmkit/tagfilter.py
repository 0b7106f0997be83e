"""Filtering of raw HTML tags that GitHub Flavored Markdown refuses to pass through.

A tag is filtered when it opens or closes one of :data:`FILTERED_TAGS`,
compared without regard to ASCII case.  Renderers that honour the filter
escape the leading ``<`` of such tags instead of emitting them verbatim.
"""

from __future__ import annotations

FILTERED_TAGS: tuple[str, ...] = (
    "title",
    "textarea",
    "style",
    "xmp",
    "iframe",
    "noembed",
    "noframes",
    "script",
    "plaintext",
)

_SPACE = frozenset(" \t\n\f\r")


def _ascii_lower(char: str) -> str:
    return char.lower() if char.isascii() else char


def is_tag(tag: str, tagname: str) -> bool:
    """Return True if ``tag`` starts an opening or closing ``tagname`` tag.

    The name must be followed by whitespace, ``>`` or ``/>``; a tag that
    ends right after the name does not count.
    """
    size = len(tag)
    if size < 3 or tag[0] != "<":
        return False

    i = 2 if tag[1] == "/" else 1
    for expected in tagname:
        if i >= size:
            break
        if _ascii_lower(tag[i]) != expected:
            return False
        i += 1

    if i >= size:
        return False

    char = tag[i]
    if char in _SPACE or char == ">":
        return True
    return char == "/" and size >= i + 2 and tag[i + 1] == ">"


def allows_tag(tag: str) -> bool:
    """Return False if ``tag`` is one of the filtered tags, True otherwise."""
    return not any(is_tag(tag, name) for name in FILTERED_TAGS)