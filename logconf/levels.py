"""Log level table and conversions between names and numeric levels.

Smaller values are more verbose. ``DBG0`` through ``DBG9`` sit between
``DEBUG`` and ``INFO``; a larger debug number means a more verbose level.

Any non-negative integer up to ``FATAL`` is accepted as a custom level, so
parsing returns a plain :class:`int` and named levels are :class:`LogLevel`
members, which compare equal to their numeric value.
"""

from __future__ import annotations

import enum
import typing as typ

Final = typ.Final


class LogLevel(enum.IntEnum):
    """Named log levels."""

    UNINITIALIZED = 0
    NONE = 1
    DEBUG = 1000
    DBG9 = 1990
    DBG8 = 1991
    DBG7 = 1992
    DBG6 = 1993
    DBG5 = 1994
    DBG4 = 1995
    DBG3 = 1996
    DBG2 = 1997
    DBG1 = 1998
    DBG0 = 1999
    INFO = 2000
    WARN = 3000
    WARNING = 3000
    ERR = 4000
    ERROR = 4000
    CRITICAL = 5000
    DFATAL = 0x7FFFFFFE
    FATAL = 0x7FFFFFFF


MIN_LEVEL: Final[int] = LogLevel.UNINITIALIZED
MAX_LEVEL: Final[int] = LogLevel.FATAL
MAX_DBG_LEVEL: Final[int] = 100

_LEVEL_ALIASES: Final[dict[str, int]] = {
    "max": LogLevel.FATAL,
    "max_level": LogLevel.FATAL,
}

# Enum aliases (WARNING, ERROR) resolve to the first member with that value,
# so ``.name`` already yields the canonical spelling.
_CANONICAL_NAMES: Final[dict[int, str]] = {
    member.value: member.name for member in LogLevel
}


def parse_log_level(text: str) -> int:
    """Return the numeric level for ``text``.

    Accepts a level name (case-insensitive, optionally written as
    ``LogLevel::NAME`` or ``LogLevel(NAME)``), ``DBG<n>`` for ``n`` up to 100,
    or a non-negative decimal integer no larger than ``FATAL``.

    Raises
    ------
    ValueError
        If ``text`` is not a recognised level.

    Examples
    --------
    >>> parse_log_level(" warning ")
    <LogLevel.WARN: 3000>
    >>> parse_log_level("19")
    19

    """
    lowered = text.strip().lower()
    if lowered.startswith("loglevel::"):
        lowered = lowered[len("loglevel::") :]
    elif lowered.startswith("loglevel(") and lowered.endswith(")"):
        lowered = lowered[len("loglevel(") : -1]

    member = LogLevel.__members__.get(lowered.upper())
    if member is not None:
        return member
    if lowered in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[lowered]
    if lowered.startswith("dbg"):
        return _parse_dbg_level(text, lowered[3:])
    if lowered.isdigit() and lowered.isascii():
        value = int(lowered)
        if value <= MAX_LEVEL:
            return value
    msg = f"invalid log level name {text!r}"
    raise ValueError(msg)


def _parse_dbg_level(text: str, suffix: str) -> int:
    if not (suffix.isdigit() and suffix.isascii()) or int(suffix) > MAX_DBG_LEVEL:
        msg = f"invalid dbg log level {text!r}"
        raise ValueError(msg)
    value = LogLevel.DBG0 - int(suffix)
    return LogLevel(value) if value in _CANONICAL_NAMES else value


def is_valid_level(value: int) -> bool:
    """Return ``True`` when ``value`` lies within the accepted numeric range."""
    return MIN_LEVEL <= value <= MAX_LEVEL


def log_level_name(level: int) -> str | None:
    """Return the canonical name of ``level`` or ``None`` for custom levels."""
    return _CANONICAL_NAMES.get(int(level))


def log_level_to_string(level: int) -> str:
    """Render ``level`` for humans: its canonical name or ``LogLevel(<n>)``."""
    name = log_level_name(level)
    if name is None:
        return f"LogLevel({int(level)})"
    return name


__all__ = [
    "MAX_LEVEL",
    "MIN_LEVEL",
    "LogLevel",
    "is_valid_level",
    "log_level_name",
    "log_level_to_string",
    "parse_log_level",
]
