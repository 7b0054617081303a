"""Millisecond stopwatch and wall-clock time."""

import time

_NS_PER_MS = 1_000_000


class StopWatch:
    """Measures elapsed milliseconds on the monotonic clock."""

    def __init__(self) -> None:
        self._start_ms = 0

    def time(self) -> int:
        """Return the wall-clock time in milliseconds since the epoch."""
        return time.time_ns() // _NS_PER_MS

    def start(self) -> int:
        """Start timing and return the monotonic start time in milliseconds."""
        self._start_ms = time.monotonic_ns() // _NS_PER_MS
        return self._start_ms

    def elapsed(self) -> int:
        """Return the milliseconds since the last call to start()."""
        return time.monotonic_ns() // _NS_PER_MS - self._start_ms