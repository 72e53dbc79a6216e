"""Exception types for minilog."""


class MiniLogError(Exception):
    """Base exception for all minilog errors."""


class InvalidLevelError(MiniLogError, ValueError):
    """Raised when a value is not one of the six severity levels."""


class FormatArgumentsError(MiniLogError, TypeError):
    """Raised when format arguments are passed to a logger in simple mode."""


class ConfigError(MiniLogError, ValueError):
    """Raised when the logger configuration cannot be parsed."""
