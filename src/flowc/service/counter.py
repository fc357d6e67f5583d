"""Compilation id sequence, owned by the application that creates it."""

import threading


class CompilationCounter:
    """Thread-safe monotonically increasing id source. First id is 1."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def current(self) -> int:
        """Number of ids handed out so far."""
        with self._lock:
            return self._value
