import threading

import pytest

from axiom.parallel import (
    Executable,
    ParallelExecutable,
    ParallelFor,
    ParallelState,
)


class Collector:
    def __init__(self):
        self.items = []
        self._lock = threading.Lock()

    def __call__(self, item):
        with self._lock:
            self.items.append(item)


def test_state_flags_match_source_values():
    assert ParallelState(1) == ParallelState.DONE
    assert ParallelState(2) == ParallelState.REQUESTED


def test_base_executable_does_nothing():
    assert Executable().execute() is None


def test_parallel_executable_covers_its_range():
    data = list(range(10))
    seen = Collector()
    ParallelExecutable(data, 3, 4, seen).execute()
    assert seen.items == data[3:7]


def test_parallel_executable_rejects_negative_range():
    with pytest.raises(ValueError):
        ParallelExecutable([1, 2], -1, 1, print)


def test_execute_visits_every_item_once():
    data = list(range(101))
    seen = Collector()
    with ParallelFor(3) as pf:
        pf.execute(data, seen)
    assert sorted(seen.items) == data


def test_execute_can_run_repeatedly():
    data = list(range(20))
    seen = Collector()
    with ParallelFor(2) as pf:
        pf.execute(data, seen)
        pf.execute(data, seen)
    assert sorted(seen.items) == sorted(data + data)


def test_execute_without_waiting_leaves_remainder():
    data = list(range(7))
    seen = Collector()
    pf = ParallelFor(2)
    pf.execute(data, seen, wait_until_finish=False)
    pf.close()
    per_thread = len(data) // 2
    assert sorted(seen.items) == data[: 2 * per_thread]


def test_execute_propagates_worker_error():
    def boom(item):
        if item == 0:
            raise KeyError(item)

    with ParallelFor(2) as pf:
        with pytest.raises(KeyError):
            pf.execute(list(range(9)), boom)


def test_execute_after_close_raises():
    pf = ParallelFor(1)
    pf.close()
    with pytest.raises(RuntimeError):
        pf.execute([1, 2, 3], print)


def test_num_threads_reported():
    with ParallelFor(4) as pf:
        assert pf.num_threads == 4


@pytest.mark.parametrize("count", [-1, 17])
def test_thread_count_out_of_range(count):
    with pytest.raises(ValueError):
        ParallelFor(count)


def test_zero_threads_without_wait_rejected():
    with ParallelFor(0) as pf:
        with pytest.raises(ValueError):
            pf.execute([1, 2], print, wait_until_finish=False)


def test_zero_threads_with_wait_runs_on_caller():
    seen = Collector()
    with ParallelFor(0) as pf:
        pf.execute([5, 6, 7], seen)
    assert seen.items == [5, 6, 7]


def test_execute_once_visits_every_item():
    data = list(range(50))
    seen = Collector()
    threads = ParallelFor.execute_once(4, data, seen)
    assert len(threads) == 4
    assert sorted(seen.items) == data


def test_execute_once_without_waiting():
    data = list(range(10))
    seen = Collector()
    threads = ParallelFor.execute_once(3, data, seen, wait_until_finish=False)
    for thread in threads:
        thread.join()
    per_thread = len(data) // 3
    assert sorted(seen.items) == data[: 3 * per_thread]


def test_execute_once_propagates_error():
    def boom(item):
        raise ValueError(item)

    with pytest.raises(ValueError):
        ParallelFor.execute_once(2, list(range(6)), boom)