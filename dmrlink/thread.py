"""A background worker thread and a millisecond sleep."""

import threading
import time
from abc import ABC, abstractmethod
from typing import Optional


class Worker(ABC):
    """Runs entry() on a background thread."""

    def __init__(self) -> None:
        self._thread: Optional[threading.Thread] = None

    def run(self) -> None:
        """Start entry() on a new daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("worker is already running")
        self._thread = threading.Thread(target=self.entry, daemon=True)
        self._thread.start()

    @abstractmethod
    def entry(self) -> None:
        """The work done on the background thread."""

    def wait(self) -> None:
        """Block until the background thread has finished."""
        if self._thread is None:
            raise RuntimeError("worker has not been started")
        self._thread.join()


def sleep(ms: int) -> None:
    """Suspend the calling thread for the given number of milliseconds."""
    time.sleep(ms / 1000)