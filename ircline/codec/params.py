"""Parameter list parsing, including the trailing ``:`` parameter."""

from __future__ import annotations

from .. import constants

_COLON = ord(":")


def _decode(raw: bytes | bytearray) -> str:
    return bytes(raw).decode(constants.ENCODING, constants.ENCODING_ERRORS)


def parse_params(data: bytes, pos: int = 0) -> tuple[list[str], int]:
    """Split ``data[pos:]`` into parameters.

    Runs of spaces separate parameters and never produce empty ones. A colon
    opening a fresh parameter starts the trailing parameter, which runs
    verbatim up to CR, LF or end of input and may be empty. A colon inside
    a middle parameter is dropped. CR and LF are never consumed.
    """
    params: list[str] = []
    param = bytearray()
    end = len(data)
    i = pos

    while i < end:
        b = data[i]
        if b in (constants.CR, constants.LF):
            break
        i += 1
        if b == constants.SPACE:
            if param:
                params.append(_decode(param))
                param.clear()
        elif b == _COLON:
            if not param:
                trailing_start = i
                while i < end and data[i] not in (constants.CR, constants.LF):
                    i += 1
                params.append(_decode(data[trailing_start:i]))
                return params, i - pos
        else:
            param.append(b)

    if param:
        params.append(_decode(param))
    return params, i - pos
