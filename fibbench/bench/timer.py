"""Wall-clock timing harness for benchmarked operations."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

NS_PER_MS = 1_000_000


@dataclass(frozen=True)
class TimingSample:
    """Start and end timestamps of one measured call, in nanoseconds."""

    start_ns: int
    end_ns: int

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds, keeping sub-millisecond precision."""
        return self.elapsed_ns / NS_PER_MS


def format_elapsed(sample: TimingSample) -> str:
    return f"Elapsed time: {sample.elapsed_ms} milliseconds"


def benchmark(
    method: Callable[[], None],
    *,
    clock: Callable[[], int] = time.perf_counter_ns,
    emit: Callable[[str], None] = print,
    on_sample: Callable[[TimingSample], None] | None = None,
) -> None:
    """Time a call to ``method`` and report how long it took.

    The timestamps are taken immediately around the call, so anything the
    operation prints is included in the measurement. If ``method`` raises,
    the exception propagates and nothing is reported.

    Example:
        benchmark(lambda: print(fib_iterative(90)))
        # 2880067194370816120
        # Elapsed time: 0.0123 milliseconds

    Args:
        method: Operation to measure. Takes no arguments; its return value is ignored.
        clock: Monotonic nanosecond clock. Never use a wall clock here, since
            it can move backwards.
        emit: Sink for the timing report line.
        on_sample: Optional callback that receives the measured sample.
    """
    start = clock()
    method()
    end = clock()

    sample = TimingSample(start_ns=start, end_ns=end)
    emit(format_elapsed(sample))
    if on_sample is not None:
        on_sample(sample)
