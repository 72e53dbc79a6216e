from __future__ import annotations

import json
from pathlib import Path

from minilog.config import LogMode
from minilog.levels import Level
from minilog.logger import Logger
from minilog.sinks.base import WRITE_FAILED
from minilog.sinks.jsonl import JsonlSink, SinkRecord


def _read(path: Path) -> list[dict[str, object]]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_jsonl_sink_records_every_call_regardless_of_threshold(tmp_path: Path) -> None:
    path = tmp_path / "audit.jsonl"
    logger = Logger(threshold=Level.FATAL)
    logger.set_sink(JsonlSink(path, logger))

    logger.debug("opened door")
    logger.fatal("closed door")

    assert _read(path) == [
        {"level": "DEBUG", "message": "opened door"},
        {"level": "FATAL", "message": "closed door"},
    ]


def test_jsonl_sink_keeps_template_and_args_unrendered(tmp_path: Path) -> None:
    path = tmp_path / "audit.jsonl"
    logger = Logger(mode=LogMode.FORMATTED)
    logger.set_sink(JsonlSink(path, logger))

    logger.info("moved %s to %s", "a.txt", Path("b"))
    logger.warn("no args")

    first, second = _read(path)
    assert first["message"] == "moved %s to %s"
    assert first["args"] == ["a.txt", repr(Path("b"))]
    assert second["args"] == []


def test_jsonl_sink_respect_threshold(tmp_path: Path) -> None:
    path = tmp_path / "audit.jsonl"
    logger = Logger(threshold=Level.WARN)
    sink = JsonlSink(path, logger, respect_threshold=True)
    logger.set_sink(sink)

    assert sink(Level.INFO, "skipped") == 0
    logger.error("kept")

    assert _read(path) == [{"level": "ERROR", "message": "kept"}]


def test_jsonl_sink_returns_characters_written(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "audit.jsonl"
    sink = JsonlSink(path, Logger())

    n = sink(Level.INFO, "hello")

    assert n == len(path.read_text(encoding="utf-8"))


def test_jsonl_sink_write_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    sink = JsonlSink(blocker / "audit.jsonl", Logger())

    assert sink(Level.ERROR, "unreachable") == WRITE_FAILED


def test_sink_record_truncates_long_reprs() -> None:
    class Loud:
        def __repr__(self) -> str:
            return "x" * 500

    record = SinkRecord(level="INFO", message="%s", args=(Loud(),))
    assert record.args is not None
    assert len(record.args[0]) == 203
    assert record.args[0].endswith("...")


def test_sink_record_unknown_level_name(tmp_path: Path) -> None:
    record = SinkRecord(level="UNKNOWN", message="m")
    assert json.loads(record.to_json_line()) == {"level": "UNKNOWN", "message": "m"}


def test_sink_record_stores_marker_when_repr_raises() -> None:
    class Broken:
        def __repr__(self) -> str:
            raise RuntimeError("no repr")

    record = SinkRecord(level="INFO", message="%s", args=(Broken(),))
    assert record.args == ["<unrepresentable Broken>"]
