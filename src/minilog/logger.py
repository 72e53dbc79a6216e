"""Threshold filter and sink dispatch.

A ``Logger`` owns two pieces of state, the installed sink and the severity
threshold, plus a delivery mode fixed at construction. The module also holds
one process-wide instance behind the module-level functions.

Thread-safety is left to the embedding program: the sink and threshold are
plain attributes and concurrent setters race with readers.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import LogConfig, LogMode
from .errors import FormatArgumentsError
from .levels import DEFAULT_THRESHOLD, Level, coerce_level, level_name
from .sinks.base import Sink

_logger = logging.getLogger(__name__)


class Logger:
    """Leveled logger dispatching to a single pluggable sink.

    ``log`` forwards every call to the installed sink without consulting the
    threshold; the sink is expected to call ``will_log`` itself. Callers use
    ``will_log`` to skip building messages that would be discarded.
    """

    def __init__(
        self,
        *,
        mode: LogMode = LogMode.SIMPLE,
        sink: Sink | None = None,
        threshold: Level = DEFAULT_THRESHOLD,
    ) -> None:
        self._mode = LogMode(mode)
        self._sink: Sink | None = None
        self._threshold: Level = DEFAULT_THRESHOLD
        if self._mode is LogMode.DISABLED:
            return
        self._sink = sink
        self._threshold = coerce_level(threshold)

    def __repr__(self) -> str:
        return (
            f"Logger(mode={self._mode.value!r}, sink={self._sink!r}, "
            f"threshold={level_name(self._threshold)})"
        )

    @property
    def mode(self) -> LogMode:
        return self._mode

    @property
    def enabled(self) -> bool:
        return self._mode is not LogMode.DISABLED

    def set_sink(self, sink: Sink | None) -> None:
        """Install ``sink``, or disable output with ``None``."""
        if not self.enabled:
            return
        self._sink = sink

    def get_sink(self) -> Sink | None:
        return self._sink

    def set_threshold(self, level: Level | int) -> None:
        """Set the minimum level sinks should emit.

        Raises InvalidLevelError for values outside the enumeration; the
        current threshold is kept in that case.
        """
        if not self.enabled:
            return
        self._threshold = coerce_level(level)

    def get_threshold(self) -> Level:
        return self._threshold

    def will_log(self, level: Level | int) -> bool:
        """True iff a sink is installed and ``level`` meets the threshold."""
        if self._sink is None:
            return False
        return level >= self._threshold

    def log(self, level: Level | int, message: str, *args: Any) -> None:
        """Forward a message to the installed sink; a no-op without one.

        In simple mode ``message`` is the rendered text and ``args`` must be
        empty; this is checked even when no sink is installed. In formatted
        mode ``message`` is a printf-style template passed to the sink together
        with ``args``, unrendered. The sink's return value is discarded.
        """
        if not self.enabled:
            return
        if args and self._mode is LogMode.SIMPLE:
            raise FormatArgumentsError(
                "format arguments are not accepted in simple mode; render the message first"
            )
        sink = self._sink
        if sink is None:
            return
        if self._mode is LogMode.SIMPLE:
            sink(coerce_level(level), message)
        else:
            sink(coerce_level(level), message, args)

    def trace(self, message: str, *args: Any) -> None:
        self.log(Level.TRACE, message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self.log(Level.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.log(Level.INFO, message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self.log(Level.WARN, message, *args)

    def error(self, message: str, *args: Any) -> None:
        self.log(Level.ERROR, message, *args)

    def fatal(self, message: str, *args: Any) -> None:
        self.log(Level.FATAL, message, *args)


def _create_process_logger() -> Logger:
    config = LogConfig.from_env()
    _logger.debug("process-wide logger mode: %s", config.mode.value)
    return Logger(mode=config.mode)


_process_logger = _create_process_logger()


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _process_logger


def set_sink(sink: Sink | None) -> None:
    _process_logger.set_sink(sink)


def get_sink() -> Sink | None:
    return _process_logger.get_sink()


def set_threshold(level: Level | int) -> None:
    _process_logger.set_threshold(level)


def get_threshold() -> Level:
    return _process_logger.get_threshold()


def will_log(level: Level | int) -> bool:
    return _process_logger.will_log(level)


def log(level: Level | int, message: str, *args: Any) -> None:
    _process_logger.log(level, message, *args)


def trace(message: str, *args: Any) -> None:
    _process_logger.log(Level.TRACE, message, *args)


def debug(message: str, *args: Any) -> None:
    _process_logger.log(Level.DEBUG, message, *args)


def info(message: str, *args: Any) -> None:
    _process_logger.log(Level.INFO, message, *args)


def warn(message: str, *args: Any) -> None:
    _process_logger.log(Level.WARN, message, *args)


def error(message: str, *args: Any) -> None:
    _process_logger.log(Level.ERROR, message, *args)


def fatal(message: str, *args: Any) -> None:
    _process_logger.log(Level.FATAL, message, *args)
