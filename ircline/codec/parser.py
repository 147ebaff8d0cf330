"""Parsing of whole IRC lines.

Keeps logic side-effect free so it can be unit tested easily: the input is
never mutated and every sub-parser returns ``(value, consumed)`` from an
explicit position.
"""

from __future__ import annotations

import logging

from .. import constants
from ..logs import logger, truncate_raw
from .command import parse_command
from .models import Message
from .params import parse_params
from .prefix import parse_prefix
from .tags import parse_tags

BytesLike = bytes | bytearray | memoryview


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, bytearray | memoryview):
        return bytes(data)
    raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")


def _parse_at(data: bytes, pos: int) -> tuple[Message, int]:
    i = pos
    tags, n = parse_tags(data, i)
    i += n
    prefix, n = parse_prefix(data, i)
    i += n
    command, n = parse_command(data, i)
    i += n
    params, n = parse_params(data, i)
    i += n
    if data[i : i + 2] == constants.CRLF:
        i += 2
    return Message(command, params, tags=tags, prefix=prefix), i - pos


def parse(data: BytesLike) -> tuple[Message, int]:
    """Parse one IRC line from the start of ``data``.

    Returns the message and how many bytes of ``data`` it read. A CRLF
    terminator is consumed when present; a missing one is tolerated. Never
    fails on malformed input: missing pieces come back empty.
    """
    raw = _as_bytes(data)
    message, consumed = _parse_at(raw, 0)
    if logger.is_enabled_for(logging.DEBUG):
        logger.log_event(
            "codec",
            "parse",
            level=logging.DEBUG,
            command=message.command,
            consumed=consumed,
            params=len(message.params),
            raw=truncate_raw(raw[:consumed]),
        )
    return message, consumed


def parse_text(text: str) -> Message:
    """Parse a line given as text, discarding the consumed count."""
    message, _ = parse(text.encode(constants.ENCODING, constants.ENCODING_ERRORS))
    return message


def parse_lines(data: BytesLike) -> list[Message]:
    """Parse every line of a complete buffer.

    Bare CR or LF bytes between lines (and a lone LF terminator) are skipped
    so that they do not produce empty messages. Nothing is carried over
    between calls: a partial last line is parsed as it is.
    """
    raw = _as_bytes(data)
    messages: list[Message] = []
    end = len(raw)
    i = 0
    while i < end:
        if raw[i] in (constants.CR, constants.LF):
            i += 1
            continue
        message, consumed = _parse_at(raw, i)
        messages.append(message)
        i += consumed
    if logger.is_enabled_for(logging.DEBUG):
        logger.log_event(
            "codec",
            "parse_lines",
            level=logging.DEBUG,
            count=len(messages),
            consumed=end,
        )
    return messages
