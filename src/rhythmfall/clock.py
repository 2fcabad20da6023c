"""Fixed-interval tick source driven by real frame time."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

MAX_CATCH_UP_TICKS = 5


@runtime_checkable
class TickSource(Protocol):
    """Anything the game loop can start and stop."""

    @property
    def running(self) -> bool: ...
    def start(self) -> None: ...
    def stop(self) -> None: ...


class FixedTimer:
    """Calls *callback* once per *interval_ms* of elapsed time while running."""

    def __init__(self, interval_ms: int, callback: Callable[[], None]) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.interval_ms = interval_ms
        self._callback = callback
        self._running = False
        self._accumulated = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if not self._running:
            self._running = True
            self._accumulated = 0.0

    def stop(self) -> None:
        self._running = False
        self._accumulated = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Feed elapsed time and fire any ticks that are due. Returns the tick count."""
        if not self._running:
            return 0
        cap = self.interval_ms * MAX_CATCH_UP_TICKS
        self._accumulated = min(self._accumulated + elapsed_ms, cap)

        fired = 0
        while self._running and self._accumulated >= self.interval_ms:
            self._accumulated -= self.interval_ms
            self._callback()
            fired += 1
        return fired
