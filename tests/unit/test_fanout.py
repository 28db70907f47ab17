"""Tests for run_parallel — ordered results, fail-fast aggregation."""

from __future__ import annotations

import threading
import time

import pytest

from jnlpforge.core.fanout import run_parallel


class Boom(RuntimeError):
    pass


class TestRunParallel:
    def test_empty_input(self):
        assert run_parallel(lambda x: x, [], max_workers=4) == []

    def test_results_in_item_order(self):
        def slow_square(n: int) -> int:
            time.sleep(0.01 * (5 - n))
            return n * n

        assert run_parallel(slow_square, [1, 2, 3, 4], max_workers=4) == [1, 4, 9, 16]

    def test_runs_concurrently(self):
        barrier = threading.Barrier(3, timeout=5)

        def wait_for_all(n: int) -> int:
            barrier.wait()
            return n

        assert run_parallel(wait_for_all, [1, 2, 3], max_workers=3) == [1, 2, 3]

    def test_failure_is_raised(self):
        def maybe_fail(n: int) -> int:
            if n == 2:
                raise Boom("two")
            return n

        with pytest.raises(Boom, match="two"):
            run_parallel(maybe_fail, [1, 2, 3], max_workers=2)

    def test_pending_tasks_are_cancelled_after_failure(self):
        started: list[int] = []
        lock = threading.Lock()

        def fail_first(n: int) -> int:
            with lock:
                started.append(n)
            if n == 0:
                raise Boom("first")
            time.sleep(0.01)
            return n

        with pytest.raises(Boom):
            run_parallel(fail_first, list(range(50)), max_workers=1)
        assert len(started) < 50

    def test_running_tasks_finish(self):
        running = threading.Event()
        finished = threading.Event()

        def work(n: int) -> int:
            if n == 0:
                assert running.wait(timeout=5)
                raise Boom("failure while another task runs")
            running.set()
            time.sleep(0.05)
            finished.set()
            return n

        with pytest.raises(Boom):
            run_parallel(work, [0, 1], max_workers=2)
        assert finished.is_set()

    def test_earliest_submitted_failure_wins(self):
        def fail_all(n: int) -> int:
            time.sleep(0.01 * (3 - n))
            raise Boom(str(n))

        with pytest.raises(Boom, match="^0$"):
            run_parallel(fail_all, [0, 1, 2], max_workers=3)
