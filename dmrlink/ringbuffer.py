"""A fixed-size circular buffer."""

import logging
from typing import Generic, Iterable, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BufferOverflowError(Exception):
    """Raised when data does not fit; the buffer has been cleared."""


class BufferUnderflowError(Exception):
    """Raised when more items are requested than the buffer holds."""


class RingBuffer(Generic[T]):
    """Circular buffer of a fixed number of slots.

    One slot is always kept free, so at most ``length - 1`` items are held.
    """

    def __init__(self, length: int, name: str, fill: T = 0) -> None:
        if length <= 0:
            raise ValueError("length must be positive")
        self._length = length
        self.name = name
        self._fill = fill
        self._buffer: List[T] = [fill] * length
        self._in = 0
        self._out = 0

    def add_data(self, items: Iterable[T]) -> None:
        """Append items, raising BufferOverflowError if there is no room."""
        items = list(items)
        free = self.free_space()
        if len(items) >= free:
            logger.error("%s buffer overflow, clearing the buffer. (%d >= %d)", self.name, len(items), free)
            self.clear()
            raise BufferOverflowError(f"{self.name} buffer overflow ({len(items)} >= {free})")
        for item in items:
            self._buffer[self._in] = item
            self._in = (self._in + 1) % self._length

    def get_data(self, count: int) -> List[T]:
        """Remove and return the oldest count items."""
        result = self.peek(count)
        self._out = (self._out + count) % self._length
        return result

    def peek(self, count: int) -> List[T]:
        """Return the oldest count items without removing them."""
        size = self.data_size()
        if size < count:
            logger.error("Underflow in %s ring buffer, %d < %d", self.name, size, count)
            raise BufferUnderflowError(f"{self.name} ring buffer underflow ({size} < {count})")
        return [self._buffer[(self._out + i) % self._length] for i in range(count)]

    def clear(self) -> None:
        self._in = 0
        self._out = 0
        self._buffer = [self._fill] * self._length

    def free_space(self) -> int:
        if self._out > self._in:
            return self._out - self._in
        if self._in > self._out:
            return self._length - (self._in - self._out)
        return self._length

    def data_size(self) -> int:
        return self._length - self.free_space()

    def has_space(self, length: int) -> bool:
        return self.free_space() > length

    def has_data(self) -> bool:
        return self._out != self._in

    def is_empty(self) -> bool:
        return self._out == self._in

    def __len__(self) -> int:
        return self.data_size()