"""Trailing-edge debounce for bursty events such as terminal resizes."""

from __future__ import annotations

import threading
from typing import Callable


class Debouncer:
    """Call `func` once `wait` seconds have passed without another call.

    Only the arguments of the latest call are used.
    """

    def __init__(self, wait: float, func: Callable) -> None:
        self.wait = wait
        self.func = func
        self._timer: threading.Timer | None = None
        self._pending: tuple[tuple, dict] | None = None
        # Re-entrant: a signal handler may call in while the main thread holds it
        self._lock = threading.RLock()

    def __call__(self, *args, **kwargs) -> None:
        timer = threading.Timer(self.wait, self._fire)
        timer.daemon = True
        with self._lock:
            previous, self._timer = self._timer, timer
            self._pending = (args, kwargs)
        if previous is not None:
            previous.cancel()
        timer.start()

    def _fire(self) -> None:
        with self._lock:
            pending, self._pending, self._timer = self._pending, None, None
        if pending is not None:
            args, kwargs = pending
            self.func(*args, **kwargs)

    def flush(self) -> None:
        """Run a pending call immediately."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
        self._fire()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending, self._timer = None, None
