"""Sink implementations."""

from .base import WRITE_FAILED, FormattedSink, SimpleSink, Sink, render, resolve_logger
from .console import RichConsoleSink
from .jsonl import JsonlSink, SinkRecord
from .stdlib import StdlibLoggingSink
from .stdout import StdoutSink, default_sink

__all__ = [
    "WRITE_FAILED",
    "Sink",
    "SimpleSink",
    "FormattedSink",
    "render",
    "resolve_logger",
    "StdoutSink",
    "default_sink",
    "RichConsoleSink",
    "StdlibLoggingSink",
    "JsonlSink",
    "SinkRecord",
]
