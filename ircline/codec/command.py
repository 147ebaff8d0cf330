"""Command token parsing."""

from __future__ import annotations

from .. import constants


def parse_command(data: bytes, pos: int = 0) -> tuple[str, int]:
    """Read the command token of ``data[pos:]``, upper-casing ASCII letters.

    Stops at a space (consumed), CR or LF (not consumed) or end of input.
    Non-letter bytes are kept as they are; numerics such as ``001`` pass
    through unchanged.
    """
    end = len(data)
    i = pos
    while i < end:
        b = data[i]
        if b == constants.SPACE:
            return _upper(data[pos:i]), i + 1 - pos
        if b in (constants.CR, constants.LF):
            break
        i += 1
    return _upper(data[pos:i]), i - pos


def _upper(raw: bytes) -> str:
    # bytes.upper() only touches a-z, unlike str.upper()
    return raw.upper().decode(constants.ENCODING, constants.ENCODING_ERRORS)
