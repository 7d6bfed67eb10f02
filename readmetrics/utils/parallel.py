"""Parallel processing utilities for readability batches."""

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class ParallelProcessor:
    """
    Manages parallel processing with ProcessPoolExecutor.

    Follows project pattern:
    - ProcessPoolExecutor with initializer function
    - max_tasks_per_child=50 for memory management
    - Sequential in-process fallback for a single worker or a single item

    Results always come back in input order.

    Usage:
        processor = ParallelProcessor(
            max_workers=4,
            initializer=init_readability_worker,
            initargs=(225, 125, 1)
        )

        results = processor.process_batch(items, analyze_batch_item)
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        initializer: Optional[Callable] = None,
        initargs: tuple = (),
        max_tasks_per_child: int = 50
    ):
        """
        Initialize parallel processor.

        Args:
            max_workers: Number of parallel workers (default: auto-determine)
            initializer: Optional initialization function for workers
            initargs: Arguments passed to the initializer
            max_tasks_per_child: Restart workers after N tasks (default: 50)
        """
        self.max_workers = max_workers
        self.initializer = initializer
        self.initargs = initargs
        self.max_tasks_per_child = max_tasks_per_child

    def resolve_workers(self, num_items: int) -> int:
        """Number of workers to use for a batch of ``num_items``."""
        if self.max_workers is None:
            return max(1, min(os.cpu_count() or 4, num_items))
        return self.max_workers

    def should_use_parallel(self, num_items: int) -> bool:
        """
        Determine if parallel processing is beneficial.

        Args:
            num_items: Number of items to process

        Returns:
            True if more than one worker and more than one item
        """
        return self.resolve_workers(num_items) > 1 and num_items > 1

    def process_batch(
        self,
        items: Sequence[T],
        worker_func: Callable[[T], R]
    ) -> List[R]:
        """
        Apply ``worker_func`` to every item, preserving input order.

        Args:
            items: Items to process
            worker_func: Picklable module-level function applied to each item

        Returns:
            List of results, one per item, in input order
        """
        if not self.should_use_parallel(len(items)):
            # Sequential runs in-process; the initializer still has to run once
            if self.initializer is not None:
                self.initializer(*self.initargs)
            return [worker_func(item) for item in items]

        max_workers = self.resolve_workers(len(items))
        logger.info(f"Processing {len(items)} items with {max_workers} workers")

        with ProcessPoolExecutor(
            max_workers=max_workers,
            initializer=self.initializer,
            initargs=self.initargs,
            max_tasks_per_child=self.max_tasks_per_child
        ) as executor:
            futures = [executor.submit(worker_func, item) for item in items]
            return [future.result() for future in futures]
