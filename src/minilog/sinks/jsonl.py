"""Append-only JSONL audit sink."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, field_validator

from ..levels import Level, level_name
from .base import WRITE_FAILED, resolve_logger

if TYPE_CHECKING:
    from ..logger import Logger

_logger = logging.getLogger(__name__)

_JSON_PRIMITIVES = (str, int, float, bool, type(None))


def safe_repr(obj: Any, max_length: int = 200) -> str:
    """Return repr(obj) cut to max_length characters, or a marker if repr raises."""
    try:
        text = repr(obj)
    except Exception:
        return f"<unrepresentable {type(obj).__name__}>"
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class SinkRecord(BaseModel):
    """One dispatched call, stored with its template and arguments unrendered."""

    model_config = {"frozen": True}

    level: str
    message: str
    args: list[Any] | None = None

    @field_validator("args", mode="before")
    @classmethod
    def _args_json_safe(cls, value: Any) -> list[Any] | None:
        if value is None:
            return None
        return [v if isinstance(v, _JSON_PRIMITIVES) else safe_repr(v) for v in value]

    def to_json_line(self) -> str:
        """Render the record as a single JSON line."""
        return json.dumps(self.model_dump(mode="json", exclude_none=True), ensure_ascii=False)


class JsonlSink:
    """Audit sink appending every call to a JSONL file.

    By default the threshold is ignored so the file holds every message the
    logger dispatched. Pass ``respect_threshold=True`` to filter like the
    other sinks.
    """

    def __init__(
        self,
        path: str | Path = "minilog.jsonl",
        logger: Logger | None = None,
        *,
        respect_threshold: bool = False,
    ) -> None:
        self.path = Path(path)
        self._owner = logger
        self.respect_threshold = respect_threshold

    def __call__(self, level: Level, message: str, args: tuple[Any, ...] | None = None) -> int:
        if self.respect_threshold and not resolve_logger(self._owner).will_log(level):
            return 0
        record = SinkRecord(level=level_name(level), message=message, args=args)
        line = record.to_json_line() + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                return f.write(line)
        except OSError as exc:
            _logger.debug("jsonl sink write to %s failed: %s", self.path, exc)
            return WRITE_FAILED
