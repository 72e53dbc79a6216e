"""Quickstart demo for minilog."""

from __future__ import annotations

import minilog
from minilog import Level


def main() -> None:
    print("1. No sink installed, nothing is printed:")
    minilog.info("lost in the void")

    print("\n2. Default sink, threshold INFO:")
    minilog.set_sink(minilog.default_sink)
    minilog.info("Hello, world!")
    minilog.debug("too chatty, filtered by the sink")

    print("\n3. Threshold lowered to TRACE:")
    minilog.set_threshold(Level.TRACE)
    minilog.debug("now visible")

    print("\n4. Guarding an expensive message:")
    if minilog.will_log(Level.TRACE):
        minilog.trace("state dump: " + ", ".join(str(n) for n in range(5)))


if __name__ == "__main__":
    main()
