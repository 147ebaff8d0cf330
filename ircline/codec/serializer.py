"""Rendering of messages back to wire form.

``render`` produces a line without terminator, ``render_line`` appends CRLF.
Transports should write ``render_line`` output; ``render``/``render_text``
suit logging and comparisons.
"""

from __future__ import annotations

import logging

from .. import constants
from ..errors import MessageFormatError
from ..logs import logger
from .models import Message
from .prefix import render_prefix
from .tags import encode_tags

_LINE_BREAKERS = ("\r", "\n", "\0")


def _needs_colon(param: str) -> bool:
    return not param or " " in param or ":" in param


def _check(ok: bool, field: str, value: str, reason: str) -> None:
    if ok:
        return
    logger.log_event(
        "codec",
        "render_rejected",
        level=logging.WARNING,
        field=field,
        reason=reason,
        value=value,
    )
    raise MessageFormatError(f"{field} {reason}: {value!r}", field=field, value=value)


def _check_no_breakers(field: str, value: str) -> None:
    _check(
        not any(c in value for c in _LINE_BREAKERS),
        field,
        value,
        "contains a line break or NUL",
    )


def validate_renderable(message: Message) -> None:
    """Raise MessageFormatError unless ``message`` survives a wire round trip.

    Tag values may hold anything the escapes cover, but not "=", which the
    tag scanner swallows. Everything else must be free of CR, LF and NUL and
    of the delimiters that would end its field early.
    """
    for key, value in message.tags.items():
        _check(bool(key), "tags", key, "has an empty key")
        _check(
            not any(c in key for c in "=; "),
            "tags",
            key,
            "key contains '=', ';' or a space",
        )
        _check_no_breakers("tags", key)
        _check("=" not in value, f"tags[{key}]", value, "value contains '='")

    prefix = message.prefix
    for name, value, stops in (
        ("prefix.name", prefix.name, " !@"),
        ("prefix.user", prefix.user, " @"),
        ("prefix.host", prefix.host, " "),
    ):
        _check(
            not any(c in value for c in stops),
            name,
            value,
            "contains a delimiter",
        )
        _check_no_breakers(name, value)

    _check(bool(message.command), "command", message.command, "is empty")
    _check(" " not in message.command, "command", message.command, "contains a space")
    _check(
        not message.command.startswith(":") or bool(prefix),
        "command",
        message.command,
        "starts with ':' but there is no prefix",
    )
    _check(
        not message.command.startswith("@") or bool(prefix or message.tags),
        "command",
        message.command,
        "starts with '@' but there are no tags or prefix",
    )
    _check_no_breakers("command", message.command)

    last = len(message.params) - 1
    for index, param in enumerate(message.params):
        field = f"params[{index}]"
        _check_no_breakers(field, param)
        if index == last:
            continue
        _check(bool(param), field, param, "is an empty middle parameter")
        _check(" " not in param, field, param, "middle parameter contains a space")
        # the parser drops a colon inside a middle parameter
        _check(":" not in param, field, param, "middle parameter contains ':'")


def render_text(message: Message, *, strict: bool | None = None) -> str:
    """Render ``message`` as text without a line terminator.

    With ``strict`` (default from ``IRCLINE_STRICT_RENDER``) the message is
    checked by ``validate_renderable`` first.
    """
    if constants.STRICT_RENDER if strict is None else strict:
        validate_renderable(message)

    parts: list[str] = []
    if message.tags:
        parts.append("@" + encode_tags(message.tags) + " ")
    if message.prefix:
        parts.append(":" + render_prefix(message.prefix) + " ")
    parts.append(message.command)

    last = len(message.params) - 1
    for index, param in enumerate(message.params):
        parts.append(" ")
        if index == last and _needs_colon(param):
            parts.append(":")
        parts.append(param)
    return "".join(parts)


def render(message: Message, *, strict: bool | None = None) -> bytes:
    """Render ``message`` as wire bytes without a line terminator."""
    return render_text(message, strict=strict).encode(
        constants.ENCODING, constants.ENCODING_ERRORS
    )


def render_line(message: Message, *, strict: bool | None = None) -> bytes:
    """Render ``message`` as wire bytes terminated by CRLF."""
    return render(message, strict=strict) + constants.CRLF
