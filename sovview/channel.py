"""Fixed-size single-producer single-consumer channel between threads."""

from __future__ import annotations

_EMPTY = object()


class Channel:
    """Ring of boxes; the writer fills boxes, the reader empties them in order."""

    def __init__(self, size):
        if size < 1:
            raise ValueError("channel size must be positive")
        self._boxes = [_EMPTY] * size
        self._read = 0
        self._write = 0

    @property
    def size(self):
        return len(self._boxes)

    def send(self, item):
        """Put item in the next box; return False when the channel is full."""
        if item is None:
            raise ValueError("cannot send None through a channel")
        if self._boxes[self._write] is not _EMPTY:
            return False
        self._boxes[self._write] = item
        self._write = (self._write + 1) % len(self._boxes)
        return True

    def recv(self):
        """Take the next item, or return None when the channel is empty."""
        item = self._boxes[self._read]
        if item is _EMPTY:
            return None
        self._boxes[self._read] = _EMPTY
        self._read = (self._read + 1) % len(self._boxes)
        return item