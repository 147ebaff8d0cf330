"""Centralized internal error hierarchy.

Parsing never raises: every byte sequence degrades to a (possibly empty)
message. Errors only exist on the rendering side, where a caller can ask for
a message to be checked before it is put on the wire.

Classes:
  InternalError        – Base for all internal errors.
  MessageFormatError   – A message cannot be rendered as one wire line.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class MessageFormatError(InternalError):
    """Exception raised when a message would not survive a wire round trip.

    Raised by strict rendering when a field holds a line terminator, when a
    middle parameter is empty, holds a space or starts with a colon, or when
    a tag key or prefix field contains one of its own delimiters.

    Args:
        message: Descriptive error message.
        field: Name of the offending field (``"command"``, ``"params[1]"``...).
        value: The offending value.
    """

    def __init__(self, message: str, *, field: str, value: str) -> None:
        super().__init__(message, data={"field": field, "value": value})

    @property
    def field(self) -> str:
        return str(self.data["field"])

    @property
    def value(self) -> str:
        return str(self.data["value"])


__all__ = ["InternalError", "MessageFormatError"]
