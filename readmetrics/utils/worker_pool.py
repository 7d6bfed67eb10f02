"""Worker initialization for parallel readability batches.

Each worker process builds one ReadabilityAnalyzer when it starts and reuses
it for every task it runs until it is recycled.

Usage (as ProcessPoolExecutor initializer):
    from readmetrics.utils.worker_pool import init_readability_worker, analyze_batch_item

    with ProcessPoolExecutor(initializer=init_readability_worker, initargs=(225, 125, 1)) as ex:
        future = ex.submit(analyze_batch_item, item)
"""

import logging

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Module-level globals (set by init_readability_worker in each subprocess)
# ---------------------------------------------------------------------------

_worker_analyzer = None


# ---------------------------------------------------------------------------
# Initializer: called once per worker process by ProcessPoolExecutor
# ---------------------------------------------------------------------------

def init_readability_worker(
    reading_words_per_minute: int,
    speaking_words_per_minute: int,
    precision: int,
) -> None:
    """
    Initialize the worker-process analyzer.

    Called via ``ProcessPoolExecutor(initializer=init_readability_worker)``
    with the parent analyzer's settings so every worker scores identically.

    Args:
        reading_words_per_minute: Silent reading speed for timing.
        speaking_words_per_minute: Speaking speed for timing.
        precision: Decimal places for readability formulas.
    """
    global _worker_analyzer

    from readmetrics.features.readability.analyzer import ReadabilityAnalyzer

    _worker_analyzer = ReadabilityAnalyzer(
        reading_words_per_minute=reading_words_per_minute,
        speaking_words_per_minute=speaking_words_per_minute,
        precision=precision,
    )
    logger.debug("Initialized readability worker")


# ---------------------------------------------------------------------------
# Getters: raise informative error if called before initialization
# ---------------------------------------------------------------------------

def get_worker_analyzer():
    """Return the worker-process ReadabilityAnalyzer.

    Raises:
        RuntimeError: If called before ``init_readability_worker()``.
    """
    if _worker_analyzer is None:
        raise RuntimeError(
            "Worker analyzer is not initialized. "
            "Ensure init_readability_worker() is set as the "
            "ProcessPoolExecutor initializer."
        )
    return _worker_analyzer


def analyze_batch_item(item):
    """Analyze one BatchItem with the worker-process analyzer."""
    return get_worker_analyzer().analyze_item(item)
