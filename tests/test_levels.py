from __future__ import annotations

import pytest

from minilog.errors import InvalidLevelError
from minilog.levels import DEFAULT_THRESHOLD, Level, coerce_level, level_name, parse_level


def test_levels_are_ordered_least_to_most_severe() -> None:
    assert Level.TRACE < Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR < Level.FATAL
    assert [int(level) for level in Level] == [0, 1, 2, 3, 4, 5]


def test_default_threshold_is_info() -> None:
    assert DEFAULT_THRESHOLD is Level.INFO


@pytest.mark.parametrize(
    ("level", "name"),
    [
        (Level.TRACE, "TRACE"),
        (Level.DEBUG, "DEBUG"),
        (Level.INFO, "INFO"),
        (Level.WARN, "WARN"),
        (Level.ERROR, "ERROR"),
        (Level.FATAL, "FATAL"),
    ],
)
def test_level_name_for_every_level(level: Level, name: str) -> None:
    assert level_name(level) == name
    assert level_name(int(level)) == name


@pytest.mark.parametrize("value", [-1, 6, 100, -(2**31), "INFO", None, 2.0, True, object()])
def test_level_name_unknown_never_raises(value: object) -> None:
    assert level_name(value) == "UNKNOWN"


def test_coerce_level_accepts_ints_in_range() -> None:
    assert coerce_level(3) is Level.WARN
    assert coerce_level(Level.FATAL) is Level.FATAL


@pytest.mark.parametrize("value", [-1, 6, "WARN", None, False])
def test_coerce_level_rejects_everything_else(value: object) -> None:
    with pytest.raises(InvalidLevelError):
        coerce_level(value)


def test_invalid_level_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        coerce_level(42)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("warn", Level.WARN),
        (" Error ", Level.ERROR),
        ("TRACE", Level.TRACE),
        ("4", Level.ERROR),
        (0, Level.TRACE),
    ],
)
def test_parse_level(text: str | int, expected: Level) -> None:
    assert parse_level(text) is expected


@pytest.mark.parametrize("text", ["WARNING", "", "7", "-1", "critical"])
def test_parse_level_rejects_unknown(text: str) -> None:
    with pytest.raises(InvalidLevelError):
        parse_level(text)
