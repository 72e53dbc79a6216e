"""
Simple latency microbenchmark for minilog.

Measures:
- baseline direct call
- log() with no sink installed
- log() filtered by a threshold-honoring sink
- log() through StdoutSink writing to an in-memory stream
- formatted log() through StdoutSink
"""

from __future__ import annotations

import time
from io import StringIO
from typing import Callable
from statistics import mean, median, quantiles

from minilog import Level, Logger, LogMode, StdoutSink

ROUNDS = 1000  # increase for more stable p95


def bench(label: str, call: Callable[[], object]) -> None:
    times = []
    for _ in range(ROUNDS):
        t0 = time.perf_counter()
        call()
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1_000_000)  # microseconds
    p50 = median(times)
    p95 = quantiles(times, n=100)[94]
    print(f"{label:28s} avg {mean(times):8.2f} us | p50 {p50:8.2f} us | p95 {p95:8.2f} us")


def main() -> None:
    stream = StringIO()
    no_sink = Logger()
    simple = Logger()
    simple.set_sink(StdoutSink(simple, stream=stream))
    formatted = Logger(mode=LogMode.FORMATTED)
    formatted.set_sink(StdoutSink(formatted, stream=stream))

    bench("baseline direct", lambda: (lambda x: x)(1))
    bench("log, no sink", lambda: no_sink.log(Level.INFO, "hello"))
    bench("log, filtered", lambda: simple.log(Level.DEBUG, "hello"))
    bench("log, simple stdout", lambda: simple.log(Level.INFO, "hello"))
    bench("log, formatted stdout", lambda: formatted.log(Level.INFO, "hello %s %d", "x", 1))


if __name__ == "__main__":
    main()
