"""Severity levels and name lookup."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .errors import InvalidLevelError


class Level(IntEnum):
    """Severity of a log message, least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


DEFAULT_THRESHOLD = Level.INFO

UNKNOWN_LEVEL_NAME = "UNKNOWN"

_LEVEL_NAMES: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL")


def level_name(level: Any) -> str:
    """Return the display name of ``level``, or ``"UNKNOWN"``. Never raises."""
    if isinstance(level, bool) or not isinstance(level, int):
        return UNKNOWN_LEVEL_NAME
    if 0 <= level < len(_LEVEL_NAMES):
        return _LEVEL_NAMES[level]
    return UNKNOWN_LEVEL_NAME


def coerce_level(value: Any) -> Level:
    """Return ``value`` as a Level, rejecting anything outside the enumeration."""
    if isinstance(value, Level):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidLevelError(f"level must be an int in 0..{len(Level) - 1}, got {value!r}")
    try:
        return Level(value)
    except ValueError as e:
        raise InvalidLevelError(f"level out of range: {value!r}") from e


def parse_level(text: str | int) -> Level:
    """Parse a level from its name (case-insensitive) or numeric value."""
    if isinstance(text, int):
        return coerce_level(text)
    candidate = text.strip()
    if candidate.lstrip("-").isdigit():
        return coerce_level(int(candidate))
    try:
        return Level[candidate.upper()]
    except KeyError as e:
        raise InvalidLevelError(f"unknown level name: {text!r}") from e
