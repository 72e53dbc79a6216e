"""minilog public API."""

from .config import LogConfig, LogMode
from .errors import ConfigError, FormatArgumentsError, InvalidLevelError, MiniLogError
from .levels import DEFAULT_THRESHOLD, Level, level_name, parse_level
from .logger import (
    Logger,
    debug,
    error,
    fatal,
    get_logger,
    get_sink,
    get_threshold,
    info,
    log,
    set_sink,
    set_threshold,
    trace,
    warn,
    will_log,
)
from .sinks import (
    WRITE_FAILED,
    FormattedSink,
    JsonlSink,
    RichConsoleSink,
    SimpleSink,
    Sink,
    StdlibLoggingSink,
    StdoutSink,
    default_sink,
)

__all__ = (
    # Levels
    "Level",
    "DEFAULT_THRESHOLD",
    "level_name",
    "parse_level",
    # Logger
    "Logger",
    "get_logger",
    "set_sink",
    "get_sink",
    "set_threshold",
    "get_threshold",
    "will_log",
    "log",
    "trace",
    "debug",
    "info",
    "warn",
    "error",
    "fatal",
    # Sinks
    "Sink",
    "SimpleSink",
    "FormattedSink",
    "WRITE_FAILED",
    "StdoutSink",
    "default_sink",
    "RichConsoleSink",
    "StdlibLoggingSink",
    "JsonlSink",
    # Config
    "LogConfig",
    "LogMode",
    # Errors
    "MiniLogError",
    "InvalidLevelError",
    "FormatArgumentsError",
    "ConfigError",
)
