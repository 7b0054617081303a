"""A tick-driven timeout counter."""

_UINT32 = 0xFFFFFFFF


class Timer:
    """Counts ticks against a timeout expressed in seconds and milliseconds."""

    def __init__(self, ticks_per_sec: int, secs: int = 0, msecs: int = 0) -> None:
        if ticks_per_sec <= 0:
            raise ValueError("ticks_per_sec must be positive")
        self._ticks_per_sec = ticks_per_sec
        self._timeout = 0
        self._timer = 0
        if secs > 0 or msecs > 0:
            self._timeout = self._ticks_for(secs, msecs)

    def _ticks_for(self, secs: int, msecs: int) -> int:
        total = (secs * 1000 + msecs) * self._ticks_per_sec
        return (total // 1000 + 1) & _UINT32

    def set_timeout(self, secs: int, msecs: int = 0) -> None:
        """Set a new timeout; a zero timeout also stops the timer."""
        if secs > 0 or msecs > 0:
            self._timeout = self._ticks_for(secs, msecs)
        else:
            self._timeout = 0
            self._timer = 0

    def get_timeout(self) -> int:
        """Return the timeout in whole seconds."""
        if self._timeout == 0:
            return 0
        return (self._timeout - 1) // self._ticks_per_sec

    def get_timer(self) -> int:
        """Return the elapsed time in whole seconds."""
        if self._timer == 0:
            return 0
        return (self._timer - 1) // self._ticks_per_sec

    def get_remaining(self) -> int:
        """Return the whole seconds left before expiry."""
        if self._timeout == 0 or self._timer == 0:
            return 0
        if self._timer >= self._timeout:
            return 0
        return (self._timeout - self._timer) // self._ticks_per_sec

    def is_running(self) -> bool:
        return self._timer > 0

    def start(self, secs: int | None = None, msecs: int = 0) -> None:
        """Start the timer, optionally setting a new timeout first."""
        if secs is not None:
            self.set_timeout(secs, msecs)
        if self._timeout > 0:
            self._timer = 1

    def stop(self) -> None:
        self._timer = 0

    def has_expired(self) -> bool:
        if self._timeout == 0 or self._timer == 0:
            return False
        return self._timer >= self._timeout

    def clock(self, ticks: int = 1) -> None:
        """Advance a running timer by the given number of ticks."""
        if self._timer > 0 and self._timeout > 0:
            self._timer = (self._timer + ticks) & _UINT32