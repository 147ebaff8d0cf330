"""IRCv3 message tag codec.

The ``@key=value;key2`` block is scanned byte by byte with three states.
``transition`` is the pure per-byte step; ``parse_tags`` owns the delimiters
(``;``, space, CR, LF) and commits pairs into the resulting mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto

from .. import constants
from .models import Tags

_AT = ord("@")
_SEMICOLON = ord(";")
_EQUALS = ord("=")
_BACKSLASH = ord("\\")

_UNESCAPE: dict[int, int] = {
    ord(":"): _SEMICOLON,
    ord("s"): constants.SPACE,
    _BACKSLASH: _BACKSLASH,
    ord("r"): constants.CR,
    ord("n"): constants.LF,
}

_ESCAPE: dict[str, str] = {
    ";": "\\:",
    " ": "\\s",
    "\\": "\\\\",
    "\r": "\\r",
    "\n": "\\n",
}


class TagState(Enum):
    KEY = auto()
    VALUE = auto()
    ESCAPE = auto()


def transition(state: TagState, byte: int) -> tuple[TagState, int | None]:
    """Advance the tag scanner by one non-delimiter byte.

    Returns the next state and the byte to append, or None when the input
    byte is consumed as syntax. The byte belongs to the key when the next
    state is ``KEY`` and to the value otherwise. Unknown escapes pass the
    escaped byte through with the backslash dropped.
    """
    if byte == _EQUALS:
        return TagState.VALUE, None
    if state is TagState.KEY:
        return TagState.KEY, byte
    if state is TagState.VALUE:
        if byte == _BACKSLASH:
            return TagState.ESCAPE, None
        return TagState.VALUE, byte
    return TagState.VALUE, _UNESCAPE.get(byte, byte)


def _decode(raw: bytearray) -> str:
    return raw.decode(constants.ENCODING, constants.ENCODING_ERRORS)


def parse_tags(data: bytes, pos: int = 0) -> tuple[Tags, int]:
    """Parse a leading tag block of ``data[pos:]``.

    Returns the tags and the number of bytes consumed. Input that does not
    start with ``@`` yields ``({}, 0)``. A terminating space is consumed,
    a terminating CR or LF is left for the caller. Later duplicates of a key
    overwrite earlier ones; pairs with an empty key are dropped.
    """
    tags: Tags = {}
    end = len(data)
    if pos >= end or data[pos] != _AT:
        return tags, 0

    i = pos + 1
    key = bytearray()
    value = bytearray()
    state = TagState.KEY

    while i < end:
        b = data[i]
        i += 1
        if b in (constants.SPACE, constants.CR, constants.LF):
            if key:
                tags[_decode(key)] = _decode(value)
            if b != constants.SPACE:
                i -= 1
            return tags, i - pos
        if b == _SEMICOLON:
            if key:
                tags[_decode(key)] = _decode(value)
            key.clear()
            value.clear()
            state = TagState.KEY
            continue
        state, out = transition(state, b)
        if out is None:
            continue
        if state is TagState.KEY:
            key.append(out)
        else:
            value.append(out)

    if key:
        tags[_decode(key)] = _decode(value)
    return tags, i - pos


def escape_tag_value(value: str) -> str:
    return "".join(_ESCAPE.get(c, c) for c in value)


def unescape_tag_value(value: str) -> str:
    """Inverse of ``escape_tag_value``, with the same leniency as the parser.

    An unknown escape yields the escaped character; a lone trailing
    backslash is dropped.
    """
    out: list[str] = []
    escaping = False
    for c in value:
        if escaping:
            out.append(chr(_UNESCAPE.get(ord(c), ord(c))))
            escaping = False
        elif c == "\\":
            escaping = True
        else:
            out.append(c)
    return "".join(out)


def encode_tags(tags: Mapping[str, str]) -> str:
    """Render tags as ``key[=value];...`` without the leading ``@``.

    Pairs with an empty value render as the bare key. Pair order follows the
    mapping's iteration order and carries no meaning.
    """
    return ";".join(
        f"{key}={escape_tag_value(value)}" if value else key
        for key, value in tags.items()
    )
