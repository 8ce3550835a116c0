"""A pool of worker threads, each fed from its own bounded job queue."""

from __future__ import annotations

import collections
import os
import threading
import time
from collections.abc import Callable
from typing import Any, Deque, List, Optional

MAX_THREADS = 16
MAX_JOBS_PER_THREAD = 16

Job = Callable[[], Any]


class RingBuffer:
    """A bounded first-in first-out queue of jobs."""

    def __init__(self, capacity: int = MAX_JOBS_PER_THREAD) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._jobs: Deque[Job] = collections.deque()
        self._cond = threading.Condition()
        self.done = False

    def push(self, job: Job) -> bool:
        """Queue ``job``; return False if the queue is full."""
        with self._cond:
            if len(self._jobs) >= self._capacity:
                return False
            self._jobs.append(job)
            self._cond.notify()
            return True

    def pop(self) -> Optional[Job]:
        """Take the oldest job, or None if there is none."""
        with self._cond:
            return self._jobs.popleft() if self._jobs else None

    def __len__(self) -> int:
        with self._cond:
            return len(self._jobs)

    def _next_job(self) -> Optional[Job]:
        with self._cond:
            self._cond.wait_for(lambda: self._jobs or self.done)
            return self._jobs.popleft() if self._jobs else None

    def _finish(self) -> None:
        with self._cond:
            self.done = True
            self._cond.notify_all()


class ThreadPool:
    """Runs jobs on between 1 and 16 threads, handed out round-robin.

    Without a count, one thread per CPU is started. Errors raised by jobs are
    collected in :attr:`errors`.
    """

    def __init__(self, thread_count: Optional[int] = None) -> None:
        if thread_count is None:
            thread_count = os.cpu_count() or 1
        self._num_threads = min(max(thread_count, 1), MAX_THREADS)
        self._queues = [RingBuffer(MAX_JOBS_PER_THREAD) for _ in range(self._num_threads)]
        self._next_worker = 0
        self._lock = threading.Lock()
        self._destroyed = False
        self.errors: List[Exception] = []
        self._threads = [
            threading.Thread(target=self._work, args=(queue,), name=f"axThread{index}", daemon=True)
            for index, queue in enumerate(self._queues)
        ]
        for thread in self._threads:
            thread.start()

    def _work(self, queue: RingBuffer) -> None:
        while (job := queue._next_job()) is not None:
            try:
                job()
            except Exception as exc:
                with self._lock:
                    self.errors.append(exc)

    def push_job(self, job: Job) -> None:
        """Queue ``job``, moving on to the next worker while queues are full."""
        if self._destroyed:
            raise RuntimeError("thread pool has been destroyed")
        while True:
            with self._lock:
                queue = self._queues[self._next_worker % self._num_threads]
                self._next_worker += 1
            if queue.push(job):
                return
            time.sleep(0)

    def destroy(self) -> None:
        """Stop the workers after the jobs already queued have run."""
        if self._destroyed:
            return
        self._destroyed = True
        for queue in self._queues:
            queue._finish()
        for thread in self._threads:
            thread.join()

    @property
    def num_threads(self) -> int:
        """The number of worker threads."""
        return self._num_threads

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *args: Any) -> None:
        self.destroy()