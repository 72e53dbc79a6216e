"""Terminal sink using rich for colored level names."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text

from ..levels import Level, level_name
from .base import WRITE_FAILED, render, resolve_logger

if TYPE_CHECKING:
    from ..logger import Logger

_logger = logging.getLogger(__name__)

LEVEL_STYLES: dict[Level, str] = {
    Level.TRACE: "dim",
    Level.DEBUG: "cyan",
    Level.INFO: "green",
    Level.WARN: "yellow",
    Level.ERROR: "bold red",
    Level.FATAL: "bold white on red",
}


class RichConsoleSink:
    """Sink printing ``LEVEL: message`` through a rich Console."""

    def __init__(self, logger: Logger | None = None, console: Console | None = None) -> None:
        self._owner = logger
        self.console = console if console is not None else Console(highlight=False)

    def __call__(self, level: Level, message: str, args: tuple[Any, ...] | None = None) -> int:
        if not resolve_logger(self._owner).will_log(level):
            return 0
        if args is not None:
            try:
                message = render(message, args)
            except (TypeError, ValueError, KeyError) as exc:
                _logger.debug("could not render %r: %s", message, exc)
                return WRITE_FAILED
        line = Text.assemble(
            (level_name(level), LEVEL_STYLES.get(level, "")),
            ": ",
            message,
        )
        try:
            self.console.print(line, soft_wrap=True)
        except (OSError, ValueError) as exc:
            _logger.debug("console sink write failed: %s", exc)
            return WRITE_FAILED
        return len(line.plain) + 1
