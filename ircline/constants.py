"""
Configuration constants for the ircline codec

This module contains all configurable constants used throughout the package.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean flag from an environment variable.

    Accepts ``true/1/yes/on`` and ``false/0/no/off`` (case-insensitive).
    Anything else prints a warning and falls back to the default.
    """
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off"):
        return False
    print(f"Warning: Invalid boolean value for {name}='{value}', using default {default}")
    return default


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


# Text encoding used when turning wire bytes into message fields and back
ENCODING = _get_env_str("IRCLINE_ENCODING", "utf-8")
ENCODING_ERRORS = _get_env_str(
    "IRCLINE_ENCODING_ERRORS", "surrogateescape"
)  # surrogateescape keeps arbitrary bytes lossless across decode/encode

# Rendering
STRICT_RENDER = _get_env_bool(
    "IRCLINE_STRICT_RENDER", False
)  # Default for render(strict=...): reject messages that cannot round trip

# Logging
LOG_RAW_LIMIT = _get_env_int(
    "IRCLINE_LOG_RAW_LIMIT", 120
)  # Max characters of a raw line echoed in debug log events
DEBUG = _get_env_bool("IRCLINE_DEBUG", False)  # Library logger level DEBUG
LOG_CONSOLE = _get_env_bool(
    "IRCLINE_LOG_CONSOLE", False
)  # Attach a console handler to the library logger

# Wire bytes
CR = 0x0D
LF = 0x0A
SPACE = 0x20
CRLF = b"\r\n"
