"""Message prefix (``:name!user@host``) parsing and rendering."""

from __future__ import annotations

from .. import constants
from .models import Prefix

_COLON = ord(":")
_BANG = ord("!")
_AT = ord("@")


def _read_field(data: bytes, i: int, stops: bytes) -> tuple[str, int, bool]:
    """Read bytes from ``i`` up to one of ``stops`` or a line delimiter.

    Returns the decoded field, the index where reading stopped and whether
    the prefix is finished (space consumed, CR/LF or end of input reached).
    A stop byte is left in place for the caller to inspect.
    """
    start = i
    end = len(data)
    while i < end:
        b = data[i]
        if b == constants.SPACE:
            return _decode(data[start:i]), i + 1, True
        if b in (constants.CR, constants.LF):
            return _decode(data[start:i]), i, True
        if b in stops:
            return _decode(data[start:i]), i, False
        i += 1
    return _decode(data[start:i]), i, True


def _decode(raw: bytes) -> str:
    return raw.decode(constants.ENCODING, constants.ENCODING_ERRORS)


def parse_prefix(data: bytes, pos: int = 0) -> tuple[Prefix, int]:
    """Parse a leading ``:name!user@host`` of ``data[pos:]``.

    Returns the prefix and the bytes consumed; ``(Prefix(), 0)`` when there
    is no leading colon. ``user`` is only read after ``!`` and ``host`` only
    after ``@``; any of the three may be empty.
    """
    if pos >= len(data) or data[pos] != _COLON:
        return Prefix(), 0

    name, i, done = _read_field(data, pos + 1, b"!@")
    user = host = ""
    if not done and data[i] == _BANG:
        user, i, done = _read_field(data, i + 1, b"@")
    if not done and data[i] == _AT:
        host, i, done = _read_field(data, i + 1, b"")
    return Prefix(name, user, host), i - pos


def render_prefix(prefix: Prefix) -> str:
    """Render ``name[!user][@host]``; empty string for an empty prefix."""
    if not prefix:
        return ""
    out = prefix.name
    if prefix.user:
        out += "!" + prefix.user
    if prefix.host:
        out += "@" + prefix.host
    return out
