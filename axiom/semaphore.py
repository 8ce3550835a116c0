"""A counting semaphore."""

from __future__ import annotations

import threading
from typing import Optional


class Semaphore:
    """A counting semaphore whose count starts at ``initial_count``."""

    def __init__(self, initial_count: int = 0) -> None:
        if initial_count < 0:
            raise ValueError("initial count must be non-negative")
        self._count = initial_count
        self._cond = threading.Condition()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Take one unit, blocking until one is available.

        Returns False if ``timeout`` seconds pass first, True otherwise.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._count > 0, timeout):
                return False
            self._count -= 1
            return True

    def signal(self, count: int = 1) -> None:
        """Release ``count`` units, waking as many waiters."""
        if count < 0:
            raise ValueError("count must be non-negative")
        with self._cond:
            self._count += count
            self._cond.notify(count)