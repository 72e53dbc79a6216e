"""Bridge from minilog sinks into the standard library ``logging`` module."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..levels import Level
from .base import resolve_logger

if TYPE_CHECKING:
    from ..logger import Logger

TRACE_LEVEL_NUM = 5

STDLIB_LEVELS: dict[Level, int] = {
    Level.TRACE: TRACE_LEVEL_NUM,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.FATAL: logging.CRITICAL,
}


class StdlibLoggingSink:
    """Sink handing each message to a ``logging.Logger``.

    Formatted messages keep their template and arguments separate so the
    standard library renders them lazily, only when a handler emits the
    record. Returns the number of records forwarded (0 or 1).
    """

    def __init__(
        self,
        target: logging.Logger | None = None,
        logger: Logger | None = None,
        *,
        respect_threshold: bool = True,
    ) -> None:
        logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")
        self.target = target if target is not None else logging.getLogger("minilog")
        self._owner = logger
        self.respect_threshold = respect_threshold

    def __call__(self, level: Level, message: str, args: tuple[Any, ...] | None = None) -> int:
        if self.respect_threshold and not resolve_logger(self._owner).will_log(level):
            return 0
        stdlib_level = STDLIB_LEVELS.get(level, logging.NOTSET)
        if args is None:
            # escape so a simple-mode message is never %-rendered
            self.target.log(stdlib_level, "%s", message)
        else:
            self.target.log(stdlib_level, message, *args)
        return 1
