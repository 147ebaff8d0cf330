"""Error hierarchy for the codec."""

from .internal import InternalError, MessageFormatError  # noqa: F401

__all__ = ["InternalError", "MessageFormatError"]
