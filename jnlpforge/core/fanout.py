"""Bounded fan-out over independent per-jar operations.

Each item gets its own task on a thread pool. The first failure wins:
tasks that have not started yet are cancelled, tasks already running are
allowed to finish, and the earliest failed task (in submission order) has
its exception re-raised on the calling thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def run_parallel(
    fn: Callable[[T], R],
    items: Sequence[T],
    *,
    max_workers: int,
    name: str = "task",
) -> list[R]:
    """Apply *fn* to every item concurrently and return results in item order.

    Raises the first failure once every running task has completed.
    """
    if not items:
        return []

    workers = max(1, min(max_workers, len(items)))
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix=name)
    try:
        futures: list[Future[R]] = [executor.submit(fn, item) for item in items]
        done, not_done = wait(futures, return_when=FIRST_EXCEPTION)
        if not_done:
            cancelled = sum(1 for f in not_done if f.cancel())
            if cancelled:
                logger.debug("%s: cancelled %d pending task(s)", name, cancelled)
    finally:
        executor.shutdown(wait=True)

    for future in futures:
        if future.cancelled():
            continue
        exc = future.exception()
        if exc is not None:
            raise exc
    return [future.result() for future in futures]
