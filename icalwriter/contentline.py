#!/usr/bin/env python
"""
Low-level content line handling: text escaping and line folding.

RFC 5545 section 3.1 limits every physical line to 75 octets, not
counting the line break.  Longer logical lines are folded by
inserting a CRLF followed by a single whitespace character.  The
whitespace starts the continuation line and thus counts toward its
75 octets.  Folding happens on the encoded bytes but must never land
inside a multi-byte UTF-8 sequence, so the work below is done per
character while counting octets.

Text values (RFC 5545 section 3.3.11) need backslash, semicolon, comma
and newlines escaped.  Other value types are never escaped, see
``icalwriter.values``.
"""
import re
from typing import List
from typing import Union

from icalwriter.lib.python_utilities import to_unicode

LINE_MAX_LEN = 75
ENCODING = "utf-8"
CRLF = b"\r\n"
## CRLF + the continuation marker
LINE_SPLIT = b"\r\n "

_ESCAPES = {
    "\\": "\\\\",
    ";": "\\;",
    ",": "\\,",
    "\r\n": "\\n",
    "\r": "\\n",
    "\n": "\\n",
}
## \r\n must come first in the alternation, otherwise it becomes two newlines
_ESCAPE_RE = re.compile(r"\r\n|[\\;,\r\n]")
_UNFOLD_RE = re.compile(rb"\r\n[ \t]")


def escape_text(text: Union[str, bytes]) -> str:
    """
    Escapes a TEXT value.

    Every newline convention (LF, CR or CRLF) ends up as the two
    characters ``\\n``.  The function is not idempotent, text must be
    escaped exactly once.
    """
    text = to_unicode(text)
    if not text:
        return ""
    return _ESCAPE_RE.sub(lambda match: _ESCAPES[match.group()], text)


def _segments(line: str, limit: int) -> List[bytes]:
    if line.isascii() and limit > 1:
        data = line.encode(ENCODING)
        segments = [data[:limit]]
        for start in range(limit, len(data), limit - 1):
            segments.append(data[start : start + limit - 1])
        return segments

    segments = []
    current: List[str] = []
    size = 0
    room = limit
    for char in line:
        width = len(char.encode(ENCODING))
        ## An empty segment always takes the next character, even an
        ## oversized one, so we cannot loop forever.
        if current and size + width > room:
            segments.append("".join(current).encode(ENCODING))
            current = []
            size = 0
            room = limit - 1
        current.append(char)
        size += width
    segments.append("".join(current).encode(ENCODING))
    return segments


def fold_line(line: str, limit: int = LINE_MAX_LEN) -> bytes:
    """
    Folds one logical content line and returns the CRLF terminated
    bytes ready for the wire.

    A line of at most ``limit`` octets comes back unchanged with CRLF
    appended.
    """
    data = line.encode(ENCODING)
    if len(data) <= limit:
        return data + CRLF
    return LINE_SPLIT.join(_segments(line, limit)) + CRLF


def unfold_lines(data: Union[str, bytes]) -> str:
    """
    Reverts the folding done by :func:`fold_line`.  This is the inverse
    of the folding only; it does not attempt to interpret the content.
    """
    if isinstance(data, str):
        data = data.encode(ENCODING)
    return _UNFOLD_RE.sub(b"", data).decode(ENCODING)
