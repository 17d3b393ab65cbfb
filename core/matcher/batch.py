#!/usr/bin/env python3
"""
Batch Evaluation - Bounded-parallel fan-out/fan-in over a candidate population.

Each item's result is wrapped as success-or-error so one bad record never
aborts the batch. A deadline bounds the whole run; when it passes, pending
work is cancelled and BatchDeadlineExceeded is raised so callers can discard
partial progress.
"""

from typing import Callable, Generic, List, Optional, Sequence, TypeVar
from dataclasses import dataclass
from concurrent.futures import ThreadPoolExecutor, wait
import logging
import time

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class BatchDeadlineExceeded(Exception):
    """Raised when batch evaluation runs past its deadline."""

    def __init__(self, completed: int, total: int):
        self.completed = completed
        self.total = total
        super().__init__(f"Deadline exceeded after {completed}/{total} items")


@dataclass
class BatchOutcome(Generic[T, R]):
    item: T
    value: Optional[R] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def evaluate_in_batches(
    items: Sequence[T],
    processor: Callable[[T], R],
    batch_size: int = 10,
    parallelism: int = 5,
    deadline: Optional[float] = None,
    clock: Callable[[], float] = time.monotonic
) -> List[BatchOutcome]:
    """
    Run processor over items, batch by batch, at most `parallelism` at a time.

    Args:
        items: Items to evaluate
        processor: Function applied to each item
        batch_size: Items submitted per batch
        parallelism: Maximum concurrent workers
        deadline: Absolute clock() value after which evaluation is abandoned
        clock: Monotonic clock, injectable for tests

    Returns:
        One BatchOutcome per item, in input order

    Raises:
        BatchDeadlineExceeded: if the deadline passes before all items finish
    """
    batch_size = max(1, batch_size)
    outcomes: List[BatchOutcome] = []
    if not items:
        return outcomes

    pool = ThreadPoolExecutor(max_workers=max(1, parallelism), thread_name_prefix='match-eval')
    try:
        for start in range(0, len(items), batch_size):
            batch = items[start:start + batch_size]

            if deadline is not None and clock() >= deadline:
                raise BatchDeadlineExceeded(len(outcomes), len(items))

            submitted = [(item, pool.submit(processor, item)) for item in batch]

            timeout = None if deadline is None else max(0.0, deadline - clock())
            _, not_done = wait([future for _, future in submitted], timeout=timeout)
            if not_done:
                for future in not_done:
                    future.cancel()
                raise BatchDeadlineExceeded(len(outcomes), len(items))

            for item, future in submitted:
                try:
                    outcomes.append(BatchOutcome(item=item, value=future.result()))
                except Exception as e:
                    outcomes.append(BatchOutcome(item=item, error=e))

            logger.debug(f"Evaluated batch {start // batch_size + 1}: {len(outcomes)}/{len(items)} items")
    finally:
        pool.shutdown(wait=False, cancel_futures=True)

    return outcomes
