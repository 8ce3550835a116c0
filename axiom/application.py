"""The application base class and the loop that runs and restarts it."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Optional

from .window import Platform


class DeltaTimer:
    """Measures the time between successive calls to :meth:`update`."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last = clock()

    def update(self) -> float:
        """Return the seconds passed since the previous update or creation."""
        now = self._clock()
        delta = now - self._last
        self._last = now
        return delta


class Application(ABC):
    """An application driven by a frame loop until it shuts down or restarts."""

    def __init__(self) -> None:
        self._is_running = True
        self.quit_requested = False

    @property
    def is_running(self) -> bool:
        """Whether the frame loop keeps going."""
        return self._is_running

    def run(self, platform: Optional[Platform] = None) -> None:
        """Start the platform and run frames until the loop is stopped."""
        if platform is None:
            platform = Platform()
        platform.init()
        try:
            self.on_init()
            timer = DeltaTimer()
            while self._is_running:
                self.on_update(timer.update())
                platform.update()
            self.on_shutdown()
        finally:
            platform.shutdown()

    def shutdown(self) -> None:
        """Stop the loop and do not start the application again."""
        self.quit_requested = True
        self._is_running = False

    def restart(self) -> None:
        """Stop the loop so that a fresh application is started."""
        self._is_running = False

    @abstractmethod
    def on_init(self) -> None:
        """Set the application up before the first frame."""

    def on_update(self, delta: float) -> None:
        """Advance one frame of ``delta`` seconds."""

    def on_shutdown(self) -> None:
        """Clean up after the last frame."""


def run_application(
    factory: Callable[[Sequence[str]], Application],
    platform: Optional[Platform] = None,
    argv: Optional[Sequence[str]] = None,
) -> int:
    """Create and run applications from ``factory`` until one shuts down.

    An application that restarts is replaced by a new one. Returns 0.
    """
    if argv is None:
        argv = sys.argv
    if platform is None:
        platform = Platform()
    while True:
        app = factory(argv)
        app.run(platform)
        if app.quit_requested:
            return 0