"""IRC line codec.

Contains the tag codec, prefix/command/params parsers, the line assembler
and the serializer.
"""

from .models import Message, Prefix, Tags  # noqa: F401
from .parser import parse, parse_lines, parse_text  # noqa: F401
from .prefix import parse_prefix, render_prefix  # noqa: F401
from .serializer import render, render_line, render_text, validate_renderable  # noqa: F401
from .tags import (  # noqa: F401
    TagState,
    encode_tags,
    escape_tag_value,
    parse_tags,
    transition,
    unescape_tag_value,
)

__all__ = [
    "Message",
    "Prefix",
    "Tags",
    "TagState",
    "parse",
    "parse_lines",
    "parse_text",
    "parse_prefix",
    "parse_tags",
    "render",
    "render_line",
    "render_prefix",
    "render_text",
    "encode_tags",
    "escape_tag_value",
    "unescape_tag_value",
    "transition",
    "validate_renderable",
]
