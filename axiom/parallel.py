"""Running a function over the items of a sequence on several threads."""

from __future__ import annotations

import enum
import threading
from collections.abc import Callable, Sequence
from typing import Any, List, Optional

MAX_THREADS = 16
MAX_JOBS_PER_THREAD = 16


class ParallelState(enum.IntFlag):
    """State flags of a parallel worker."""

    NONE = 0
    DONE = 1
    REQUESTED = 2


class Executable:
    """A unit of work run by a worker."""

    def execute(self) -> None:
        """Do the work; the base unit does nothing."""


class ParallelExecutable(Executable):
    """Applies ``func`` to ``length`` items of ``data`` from ``start``."""

    def __init__(
        self,
        data: Sequence[Any],
        start: int,
        length: int,
        func: Callable[[Any], Any],
    ) -> None:
        if start < 0 or length < 0:
            raise ValueError("start and length must be non-negative")
        self.data = data
        self.start = start
        self.length = length
        self.func = func

    def execute(self) -> None:
        for item in self.data[self.start:self.start + self.length]:
            self.func(item)


def _check_thread_count(num_threads: int) -> None:
    if not 0 <= num_threads <= MAX_THREADS:
        raise ValueError(f"thread count must be between 0 and {MAX_THREADS}")


class _Worker:
    """A long-lived thread that runs one requested task at a time."""

    def __init__(self, index: int) -> None:
        self.state = ParallelState.NONE
        self.task: Optional[Executable] = None
        self.error: Optional[BaseException] = None
        self._cond = threading.Condition()
        self._thread = threading.Thread(
            target=self._run, name=f"axThread{index}", daemon=True
        )
        self._thread.start()

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(
                    lambda: self.state & (ParallelState.REQUESTED | ParallelState.DONE)
                )
                if not self.state & ParallelState.REQUESTED:
                    return
                task = self.task
            error: Optional[BaseException] = None
            try:
                if task is not None:
                    task.execute()
            except BaseException as exc:  # reported to the caller that waits
                error = exc
            with self._cond:
                self.error = error
                self.task = None
                self.state &= ~ParallelState.REQUESTED
                self._cond.notify_all()

    def submit(self, task: Executable) -> None:
        with self._cond:
            self._cond.wait_for(lambda: not self.state & ParallelState.REQUESTED)
            if self.state & ParallelState.DONE:
                raise RuntimeError("worker has been stopped")
            self.task = task
            self.error = None
            self.state |= ParallelState.REQUESTED
            self._cond.notify_all()

    def wait_idle(self) -> Optional[BaseException]:
        with self._cond:
            self._cond.wait_for(lambda: not self.state & ParallelState.REQUESTED)
            return self.error

    def stop(self) -> None:
        with self._cond:
            self.state |= ParallelState.DONE
            self._cond.notify_all()
        self._thread.join()


class ParallelFor:
    """Keeps ``num_threads`` workers alive so repeated runs spawn no threads.

    Each run splits the data into equal runs of ``len(data) // (threads + 1)``
    items when the calling thread joins in, or ``len(data) // threads`` when it
    does not. Leftover items are done by the calling thread when it waits; a
    run that does not wait leaves them undone.
    """

    def __init__(self, num_threads: int) -> None:
        _check_thread_count(num_threads)
        self._workers = [_Worker(index) for index in range(num_threads)]
        self._closed = False

    @staticmethod
    def execute_once(
        num_threads: int,
        data: Sequence[Any],
        func: Callable[[Any], Any],
        wait_until_finish: bool = True,
    ) -> List[threading.Thread]:
        """Spawn ``num_threads`` threads for a single run over ``data``.

        Returns the threads started; when not waiting the caller may join them.
        """
        _check_thread_count(num_threads)
        if num_threads == 0 and not wait_until_finish:
            raise ValueError("a run that does not wait needs at least one thread")
        per_thread = len(data) // (num_threads + int(wait_until_finish))
        errors: List[BaseException] = []

        def job(task: ParallelExecutable) -> None:
            try:
                task.execute()
            except BaseException as exc:
                errors.append(exc)

        threads = [
            threading.Thread(
                target=job,
                args=(ParallelExecutable(data, index * per_thread, per_thread, func),),
                daemon=True,
            )
            for index in range(num_threads)
        ]
        for thread in threads:
            thread.start()
        if wait_until_finish:
            try:
                for item in data[num_threads * per_thread:]:
                    func(item)
            finally:
                for thread in threads:
                    thread.join()
            if errors:
                raise errors[0]
        return threads

    def execute(
        self,
        data: Sequence[Any],
        func: Callable[[Any], Any],
        wait_until_finish: bool = True,
    ) -> None:
        """Apply ``func`` to the items of ``data`` on the workers."""
        if self._closed:
            raise RuntimeError("ParallelFor has been closed")
        count = len(self._workers)
        if count == 0 and not wait_until_finish:
            raise ValueError("a run that does not wait needs at least one thread")
        per_thread = len(data) // (count + int(wait_until_finish))
        for index, worker in enumerate(self._workers):
            worker.submit(ParallelExecutable(data, index * per_thread, per_thread, func))
        if not wait_until_finish:
            return
        try:
            for item in data[count * per_thread:]:
                func(item)
        finally:
            errors = [worker.wait_idle() for worker in self._workers]
        for error in errors:
            if error is not None:
                raise error

    @property
    def num_threads(self) -> int:
        """The number of worker threads."""
        return len(self._workers)

    def close(self) -> None:
        """Stop the workers once their current task is finished."""
        if self._closed:
            return
        self._closed = True
        for worker in self._workers:
            worker.stop()

    def __enter__(self) -> "ParallelFor":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()