"""Shared utilities for batch processing."""

from readmetrics.utils.parallel import ParallelProcessor
from readmetrics.utils.worker_pool import (
    init_readability_worker,
    get_worker_analyzer,
    analyze_batch_item,
)

__all__ = [
    'ParallelProcessor',
    'init_readability_worker',
    'get_worker_analyzer',
    'analyze_batch_item',
]
