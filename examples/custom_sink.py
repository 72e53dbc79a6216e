"""Demo: custom in-memory audit sink that ignores the threshold."""

from __future__ import annotations

from typing import Any

from minilog import Level, Logger, LogMode, RichConsoleSink


class MemorySink:
    """Keeps every dispatched call, including those below the threshold."""

    def __init__(self) -> None:
        self.entries: list[tuple[Level, str, tuple[Any, ...]]] = []

    def __call__(self, level: Level, template: str, args: tuple[Any, ...]) -> int:
        self.entries.append((level, template, args))
        return 1


def main() -> None:
    logger = Logger(mode=LogMode.FORMATTED, threshold=Level.WARN)

    audit = MemorySink()
    logger.set_sink(audit)
    logger.info("charged %s to %s", "$50", "u1")
    logger.error("charge of %s to %s declined", "$200", "u2")

    print("--- Audit Summary ---")
    for i, (level, template, args) in enumerate(audit.entries, 1):
        print(f"{i}. {level.name} | {template % args}")

    print("\n--- Console, threshold WARN ---")
    logger.set_sink(RichConsoleSink(logger))
    logger.info("charged %s to %s", "$50", "u1")
    logger.error("charge of %s to %s declined", "$200", "u2")


if __name__ == "__main__":
    main()
