"""Sink protocols.

A sink receives every message the logger dispatches and decides whether to
produce output. Sinks that want to honor the threshold must re-check
``Logger.will_log`` themselves; the logger does not gate before calling them.

Both variants return the number of units written, or a negative value
(``WRITE_FAILED``) when the underlying write fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Union, runtime_checkable

from ..levels import Level

if TYPE_CHECKING:
    from ..logger import Logger

WRITE_FAILED = -1


@runtime_checkable
class SimpleSink(Protocol):
    """Sink receiving a fully rendered message."""

    def __call__(self, level: Level, message: str) -> int:
        ...


@runtime_checkable
class FormattedSink(Protocol):
    """Sink receiving a printf-style template and its arguments, unrendered."""

    def __call__(self, level: Level, template: str, args: tuple[Any, ...]) -> int:
        ...


Sink = Union[SimpleSink, FormattedSink]


def render(template: str, args: tuple[Any, ...]) -> str:
    """Render ``template`` against ``args`` printf-style."""
    return template % args


def resolve_logger(logger: Logger | None) -> Logger:
    """Return ``logger``, or the process-wide logger when it is None."""
    if logger is not None:
        return logger
    from ..logger import get_logger

    return get_logger()
