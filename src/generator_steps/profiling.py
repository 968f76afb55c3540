"""Memory profiling of the different value producers."""

import gc
import logging
import os
import time
import tracemalloc
from itertools import islice
from typing import Any, Callable, Dict, List, Optional

import pandas as pd
import psutil

from .producers import FibonacciIterator, fibonacci, make_fibonacci_counter
from .protocols import LoggerProtocol


class MemoryProfiler:
    """
    Profiles memory usage for operations.

    Single Responsibility: Track and report memory statistics.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize memory profiler.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)

    def profile(self, operation_name: str, operation_func: Callable[[], Any]) -> Dict[str, Any]:
        """
        Profile memory usage of an operation.

        Args:
            operation_name: Name of the operation
            operation_func: Function to execute

        Returns:
            Dictionary with memory statistics and the function's result
        """
        gc.collect()

        tracemalloc.start()
        start_time = time.perf_counter()
        try:
            result = operation_func()
            elapsed_time = time.perf_counter() - start_time
            current_mem, peak_mem = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        process = psutil.Process(os.getpid())
        mem_info = process.memory_info()

        if self._logger:
            self._logger.debug(
                f"{operation_name}: {elapsed_time:.4f}s, peak {peak_mem / 1024:.1f} KiB"
            )

        return {
            "operation": operation_name,
            "elapsed_time": elapsed_time,
            "current_memory": current_mem,
            "peak_memory": peak_mem,
            "rss": mem_info.rss,
            "vms": mem_info.vms,
            "memory_percent": process.memory_percent(),
            "result": result,
        }


def _last(values) -> Optional[int]:
    last = None
    for last in values:
        pass
    return last


class ProducerComparator:
    """
    Compares the eager list approach against the lazy producers.

    Every approach computes the first ``count`` Fibonacci numbers and
    reports the last one, so results can be checked against each other.
    """

    def __init__(self, profiler: Optional[MemoryProfiler] = None, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or logging.getLogger(__name__)
        self.profiler = profiler or MemoryProfiler(self._logger)

    def compare(self, count: int) -> pd.DataFrame:
        """
        Profile every approach.

        Args:
            count: How many Fibonacci numbers each approach produces

        Returns:
            DataFrame with one row per approach
        """
        if count <= 0:
            raise ValueError("count must be positive")

        def eager_list() -> Optional[int]:
            numbers = [1, 1][:count]
            while len(numbers) < count:
                numbers.append(numbers[-1] + numbers[-2])
            return numbers[-1]

        def closure() -> Optional[int]:
            counter = make_fibonacci_counter()
            return _last(counter() for _ in range(count))

        approaches = {
            "list": eager_list,
            "closure": closure,
            "iterator": lambda: _last(islice(FibonacciIterator(), count)),
            "generator": lambda: _last(islice(fibonacci(), count)),
        }

        rows: List[Dict[str, Any]] = []
        for name, func in approaches.items():
            stats = self.profiler.profile(name, func)
            rows.append(stats)
            if self._logger:
                self._logger.info(
                    f"{name:>10}: peak {stats['peak_memory']:,} bytes in {stats['elapsed_time']:.4f}s"
                )

        return pd.DataFrame(rows).rename(columns={"result": "last_value"})
