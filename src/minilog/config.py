"""Deployment-time configuration for the process-wide logger."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigError

MODE_ENV_VAR = "MINILOG_MODE"


class LogMode(str, Enum):
    """How a logger delivers messages to its sink."""

    DISABLED = "disabled"
    SIMPLE = "simple"
    FORMATTED = "formatted"


class LogConfig(BaseModel):
    """Settings chosen once, before the process-wide logger is created."""

    model_config = {"frozen": True}

    mode: LogMode = LogMode.SIMPLE

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LogConfig":
        """Build a config from ``MINILOG_MODE``; unset or blank means the default."""
        env = os.environ if environ is None else environ
        raw = env.get(MODE_ENV_VAR)
        if raw is None or not raw.strip():
            return cls()
        try:
            return cls(mode=raw)
        except ValidationError as e:
            raise ConfigError(f"invalid {MODE_ENV_VAR}: {raw!r}") from e
