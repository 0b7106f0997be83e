"""Recognition of bare URLs, ``www.`` links and e-mail addresses in text.

``match_www`` and ``match_url`` are used while scanning inline text, at a
``w`` and at a ``:`` respectively.  ``split_email_links`` runs over the
finished text of a paragraph and cuts e-mail addresses (and explicit
``mailto:`` / ``xmpp:`` addresses) out into link segments.
"""

from __future__ import annotations

import string
import unicodedata
from dataclasses import dataclass
from typing import Optional, Union

_CMARK_SPACE = frozenset(" \t\n\f\r")
_UNICODE_SPACE = frozenset(
    chr(code)
    for code in (9, 10, 12, 13, 32, 160, 5760, *range(8192, 8203), 8239, 8287, 12288)
)
_ASCII_PUNCTUATION = frozenset(string.punctuation)
_TRAILING_PUNCTUATION = frozenset("?!.,:*_~'\"")
_SAFE_SCHEMES = ("http://", "https://", "ftp://")
_WWW_PRECEDERS = frozenset("*_~(")


@dataclass(frozen=True)
class AutolinkMatch:
    """A link found inside inline text.

    ``start`` and ``end`` delimit the linked text in the scanned string;
    for scheme URLs ``start`` lies before the scan offset, because the
    scheme letters were already read as plain text.
    """

    url: str
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class TextSegment:
    """Plain text between links."""

    text: str


@dataclass(frozen=True)
class LinkSegment:
    """A recognised e-mail link."""

    url: str
    text: str


Segment = Union[TextSegment, LinkSegment]


def _is_space(char: str) -> bool:
    return char in _CMARK_SPACE


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _is_punctuation(char: str) -> bool:
    if char.isascii():
        return char in _ASCII_PUNCTUATION
    return unicodedata.category(char).startswith("P")


def _is_valid_hostchar(char: str) -> bool:
    return char not in _UNICODE_SPACE and not _is_punctuation(char)


def autolink_delim(data: str, link_end: int) -> int:
    """Trim trailing punctuation, unbalanced ``)`` and entities from a link.

    Returns the new length of the link that starts at ``data[0]`` and
    currently ends at ``link_end``.  Anything from a ``<`` on is dropped.
    """
    if not 0 <= link_end <= len(data):
        raise ValueError(f"link_end {link_end} is outside 0..{len(data)}")

    opening = closing = 0
    for i, char in enumerate(data[:link_end]):
        if char == "<":
            link_end = i
            break
        if char == "(":
            opening += 1
        elif char == ")":
            closing += 1

    while link_end > 0:
        char = data[link_end - 1]
        if char == ")":
            if closing <= opening:
                return link_end
            closing -= 1
            link_end -= 1
        elif char in _TRAILING_PUNCTUATION:
            link_end -= 1
        elif char == ";":
            new_end = link_end - 2
            while new_end > 0 and _is_alpha(data[new_end]):
                new_end -= 1
            if new_end < link_end - 2 and data[new_end] == "&":
                link_end = new_end
            else:
                link_end -= 1
        else:
            return link_end

    return link_end


def check_domain(data: str, allow_short: bool) -> int:
    """Return the length of the domain at the start of ``data``, or 0.

    The first and last characters are not examined.  Domains with an
    underscore in one of their last two labels are rejected unless they
    have more than ten labels.  Without ``allow_short`` at least one dot
    is required.
    """
    size = len(data)
    dots = 0
    underscores_before_last_dot = 0
    underscores_after_last_dot = 0

    i = 1
    while i < size - 1:
        if data[i] == "\\" and i < size - 2:
            i += 1
        char = data[i]
        if char == "_":
            underscores_after_last_dot += 1
        elif char == ".":
            underscores_before_last_dot = underscores_after_last_dot
            underscores_after_last_dot = 0
            dots += 1
        elif char == "-":
            pass
        elif not _is_valid_hostchar(char):
            break
        elif not char.isascii():
            # The domain scan is byte oriented; it stops inside a multibyte character.
            i += 1
            break
        i += 1

    if (underscores_before_last_dot or underscores_after_last_dot) and dots <= 10:
        return 0

    if allow_short:
        return i
    return i if dots else 0


def is_safe_url(data: str) -> bool:
    """Return True if ``data`` starts with http://, https:// or ftp:// and a host."""
    for scheme in _SAFE_SCHEMES:
        n = len(scheme)
        prefix = data[:n]
        if (
            len(data) > n
            and prefix.isascii()
            and prefix.lower() == scheme
            and _is_valid_hostchar(data[n])
        ):
            return True
    return False


def _check_offset(data: str, offset: int) -> None:
    if not 0 <= offset <= len(data):
        raise ValueError(f"offset {offset} is outside 0..{len(data)}")


def _extend_to_space(data: str, link_end: int) -> int:
    while link_end < len(data) and not _is_space(data[link_end]) and data[link_end] != "<":
        link_end += 1
    return link_end


def match_www(data: str, offset: int) -> Optional[AutolinkMatch]:
    """Match a ``www.`` link starting at ``data[offset]``."""
    _check_offset(data, offset)
    if offset > 0:
        before = data[offset - 1]
        if before not in _WWW_PRECEDERS and not _is_space(before):
            return None

    rest = data[offset:]
    if len(rest) < 4 or not rest.startswith("www."):
        return None

    link_end = check_domain(rest, False)
    if link_end == 0:
        return None

    link_end = autolink_delim(rest, _extend_to_space(rest, link_end))
    if link_end == 0:
        return None

    text = rest[:link_end]
    return AutolinkMatch(url="http://" + text, text=text, start=offset, end=offset + link_end)


def match_url(data: str, offset: int) -> Optional[AutolinkMatch]:
    """Match a scheme URL whose ``:`` is at ``data[offset]``.

    The scheme letters before the colon are included in the match.
    """
    _check_offset(data, offset)
    rest = data[offset:]
    if len(rest) < 4 or rest[0] != ":" or rest[1] != "/" or rest[2] != "/":
        return None

    rewind = 0
    while rewind < offset and _is_alpha(data[offset - rewind - 1]):
        rewind += 1

    if not is_safe_url(data[offset - rewind:]):
        return None

    link_end = len("://")
    domain_len = check_domain(rest[link_end:], True)
    if domain_len == 0:
        return None

    link_end = autolink_delim(rest, _extend_to_space(rest, link_end + domain_len))
    if link_end == 0:
        return None

    start = offset - rewind
    end = offset + link_end
    url = data[start:end]
    return AutolinkMatch(url=url, text=url, start=start, end=end)


def _protocol_before(text: str, protocol: str, colon_end: int, floor: int) -> bool:
    """Check that ``protocol`` ends at ``colon_end`` and stands on its own."""
    length = len(protocol)
    available = colon_end - floor
    if length > available:
        return False
    if text[colon_end - length:colon_end] != protocol:
        return False
    if length == available:
        return True
    return not _is_alnum(text[colon_end - length - 1])


def _match_email(
    text: str, floor: int, at: int
) -> tuple[int, Optional[tuple[int, int, str]]]:
    """Try to build an e-mail link around the ``@`` at ``at``.

    Returns the position to resume scanning from and, on success, the
    start, end and URL of the link.
    """
    auto_mailto = True
    is_xmpp = False
    dots = 0

    while True:
        rewind = 0
        while at - rewind > floor:
            char = text[at - rewind - 1]
            if _is_alnum(char) or char in ".+-_":
                rewind += 1
                continue
            if char == ":":
                if _protocol_before(text, "mailto:", at - rewind, floor):
                    auto_mailto = False
                    rewind += 1
                    continue
                if _protocol_before(text, "xmpp:", at - rewind, floor):
                    auto_mailto = False
                    is_xmpp = True
                    rewind += 1
                    continue
            break

        if rewind == 0:
            return at + 1, None

        link_end = 1
        while at + link_end < len(text):
            char = text[at + link_end]
            if _is_alnum(char):
                pass
            elif char == "@":
                break
            elif (
                char == "."
                and at + link_end + 1 < len(text)
                and _is_alnum(text[at + link_end + 1])
            ):
                dots += 1
            elif char == "/" and is_xmpp:
                pass
            elif char not in "-_":
                break
            link_end += 1

        if at + link_end < len(text) and text[at + link_end] == "@":
            floor, at = at + 1, at + link_end
            continue

        last = text[at + link_end - 1]
        if link_end < 2 or dots == 0 or (not _is_alpha(last) and last != "."):
            return at + link_end, None

        link_end = autolink_delim(text[at:at + link_end], link_end)
        if link_end == 0:
            return at + 1, None

        begin = at - rewind
        end = at + link_end
        url = text[begin:end]
        if auto_mailto:
            url = "mailto:" + url
        return end, (begin, end, url)


def split_email_links(text: str) -> list[Segment]:
    """Split ``text`` into plain-text and e-mail link segments.

    Empty text pieces are left out; joining the ``text`` of all segments
    gives back the input.
    """
    segments: list[Segment] = []
    start = pos = 0
    while pos < len(text):
        at = text.find("@", pos)
        if at < 0:
            break
        pos, link = _match_email(text, pos, at)
        if link is None:
            continue
        begin, end, url = link
        if begin > start:
            segments.append(TextSegment(text[start:begin]))
        segments.append(LinkSegment(url=url, text=text[begin:end]))
        start = end

    if start < len(text):
        segments.append(TextSegment(text[start:]))
    return segments