"""Reference sink writing ``LEVEL: message`` lines to standard output."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

from ..levels import Level, level_name
from .base import WRITE_FAILED, render, resolve_logger

if TYPE_CHECKING:
    from ..logger import Logger

_logger = logging.getLogger(__name__)


def _write(stream: TextIO, text: str) -> int:
    """Write ``text`` and return the character count, or WRITE_FAILED."""
    try:
        written = stream.write(text)
    except (OSError, ValueError) as exc:
        _logger.debug("stdout sink write failed: %s", exc)
        return WRITE_FAILED
    if written is None:
        return len(text)
    return written


class StdoutSink:
    """Sink printing the level name, ``": "``, the message and a newline.

    Serves both sink variants: called with ``(level, message)`` it writes the
    message as given; called with ``(level, template, args)`` it renders the
    template printf-style at the point of output.
    """

    def __init__(self, logger: Logger | None = None, stream: TextIO | None = None) -> None:
        self._owner = logger
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def __call__(self, level: Level, message: str, args: tuple[Any, ...] | None = None) -> int:
        if not resolve_logger(self._owner).will_log(level):
            return 0
        if args is None:
            return self._write_simple(level, message)
        return self._write_formatted(level, message, args)

    def _write_simple(self, level: Level, message: str) -> int:
        stream = self.stream
        total = 0
        for part in (level_name(level), ": ", message, "\n"):
            n = _write(stream, part)
            if n < 0:
                return n
            total += n
        return total

    def _write_formatted(self, level: Level, template: str, args: tuple[Any, ...]) -> int:
        try:
            text = render(template, args)
        except (TypeError, ValueError, KeyError) as exc:
            _logger.debug("could not render %r with %d args: %s", template, len(args), exc)
            return WRITE_FAILED
        stream = self.stream
        n1 = _write(stream, f"{level_name(level):>5}: ")
        if n1 < 0:
            return n1
        n2 = _write(stream, text)
        if n2 < 0:
            return n2
        n3 = _write(stream, "\n")
        if n3 < 0:
            return n3
        return n1 + n2 + n3


default_sink = StdoutSink()
