"""Logger implementation for the codec.

The codec is a library, so the ``ircline`` logger stays silent (a
``NullHandler``) unless a console handler is requested through
``IRCLINE_LOG_CONSOLE``. Handlers and levels set by the application are
left alone; only ``IRCLINE_DEBUG`` forces the level to DEBUG.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .. import constants


def _supports_color(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except Exception:  # pragma: no cover
        return False


class SimpleFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }
    RESET = "\x1b[0m"

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.enable_color = _supports_color(stream or sys.stderr)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 (simple override)
        msg = record.getMessage()
        # Longest built-in level name: 'CRITICAL' (8 chars).
        raw_level = record.levelname.ljust(8)
        if self.enable_color:
            color = self.LEVEL_COLORS.get(record.levelno, "")
            return f"{color}{raw_level}{self.RESET} {msg}"
        return f"{raw_level} {msg}"


class CodecLogger:
    def __init__(self, name: str = "ircline", *, console: bool | None = None) -> None:
        self._event_name_width = 32
        self.logger = logging.getLogger(name)
        # Handlers and level an application configured beforehand are kept.
        if constants.DEBUG:
            self.logger.setLevel(logging.DEBUG)

        configured = any(
            not isinstance(h, logging.NullHandler) for h in self.logger.handlers
        )
        if configured:
            return
        if constants.LOG_CONSOLE if console is None else console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(SimpleFormatter(sys.stderr))
            self.logger.addHandler(console_handler)
        elif not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES as _event_templates

            template = _event_templates.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str | None,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        kw: dict[str, object] = dict(kwargs)
        command = self._extract_command(kw)
        prefix = self._build_prefix(command)
        msg = (
            self._build_debug_message(event_name, prefix, human_text, kw)
            if self.logger.isEnabledFor(logging.DEBUG)
            else self._build_concise_message(event_name, prefix, human_text)
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _extract_command(kwargs: dict[str, object]) -> str | None:
        command_o = kwargs.pop("command", None)
        return command_o if isinstance(command_o, str) and command_o else None

    @staticmethod
    def _build_prefix(command: str | None) -> str:
        # Pad to a fixed width so message text lines up across commands
        padded = (command or "-").ljust(12)[:12]
        return f"[{padded}]"

    def _build_debug_message(
        self,
        event_name: str,
        prefix: str,
        human_text: str | None,
        kwargs: dict[str, object],
    ) -> str:
        context = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix}"
        if human_text:
            base = f"{base} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base

    @staticmethod
    def _build_concise_message(
        event_name: str, prefix: str, human_text: str | None
    ) -> str:
        return f"{prefix} {human_text or event_name}"


def truncate_raw(raw: bytes | str) -> str:
    """Printable, length-limited form of a raw line for log context."""
    text = raw.decode("utf-8", "backslashreplace") if isinstance(raw, bytes) else raw
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    limit = constants.LOG_RAW_LIMIT
    if limit > 0 and len(text) > limit:
        return text[:limit] + "…"
    return text


logger = CodecLogger()
