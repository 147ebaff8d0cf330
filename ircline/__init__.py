"""Codec for single IRC protocol lines (IRCv3 tags, prefix, command, params)."""

from .codec import (  # noqa: F401
    Message,
    Prefix,
    encode_tags,
    escape_tag_value,
    parse,
    parse_lines,
    parse_tags,
    parse_text,
    render,
    render_line,
    render_text,
    unescape_tag_value,
    validate_renderable,
)
from .errors import InternalError, MessageFormatError  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Message",
    "Prefix",
    "parse",
    "parse_text",
    "parse_lines",
    "render",
    "render_line",
    "render_text",
    "encode_tags",
    "parse_tags",
    "escape_tag_value",
    "unescape_tag_value",
    "validate_renderable",
    "InternalError",
    "MessageFormatError",
]
