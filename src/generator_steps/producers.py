"""Fibonacci value producers, from a plain closure up to generator delegation."""

import itertools
import logging
from typing import Callable, Generator, Iterable, Iterator, List, Optional, Tuple

from .driver import StepDriver
from .models import DriverState, StepResult
from .protocols import StepSource

logger = logging.getLogger(__name__)


def make_fibonacci_counter() -> Callable[[], int]:
    """
    Build a counter that returns the next Fibonacci number on every call.

    The state lives in the closure, nothing else can reach it.
    """
    prev = 0
    value = 0

    def counter() -> int:
        nonlocal prev, value
        if value == 0:
            value += 1
            return value
        prev, value = value, value + prev
        return value

    return counter


class FibonacciIterator:
    """
    Hand-built Fibonacci iterator.

    Implements the iterator protocol by hand (what a generator gives for
    free) and never stops on its own, so callers must break out.
    """

    def __init__(self):
        self._prev = 0
        self._value = 0

    def __iter__(self) -> "FibonacciIterator":
        return self

    def __next__(self) -> int:
        if self._value == 0:
            self._value += 1
            return self._value
        self._prev, self._value = self._value, self._value + self._prev
        return self._value

    def step(self) -> StepResult:
        """Produce the next number as a pending step result."""
        return StepResult.pending(next(self))


def fibonacci(on_cleanup: Optional[Callable[[], None]] = None) -> Iterator[int]:
    """
    Infinite Fibonacci generator.

    Args:
        on_cleanup: Called once when the generator is closed or collected

    Yields:
        1, 1, 2, 3, 5, 8, ...
    """
    prev, value = 0, 1
    try:
        while True:
            yield value
            prev, value = value, prev + value
    finally:
        logger.debug("Cleaning up fibonacci generator")
        if on_cleanup is not None:
            on_cleanup()


def _take_through(source: Generator, limit: int) -> Generator[int, None, int]:
    # Yields values up to and including the first one above limit.
    count = 0
    try:
        for value in source:
            yield value
            count += 1
            if value > limit:
                break
    finally:
        source.close()
    return count


def fibonacci_up_to(
    limit: int, on_cleanup: Optional[Callable[[], None]] = None
) -> Generator[int, None, int]:
    """
    Fibonacci numbers until the first one greater than ``limit``.

    Delegates to fibonacci() and closes it once the limit is passed, so its
    cleanup runs without the caller having to break.

    Returns:
        Number of values produced (the generator's return value)
    """
    return (yield from _take_through(fibonacci(on_cleanup), limit))


def with_prelude(prelude: Iterable, source: Generator) -> Generator:
    """Yield everything from ``prelude``, then delegate to ``source``."""
    try:
        yield from prelude
        return (yield from source)
    finally:
        source.close()


class DriverStepSource:
    """
    Adapts a StepDriver to the StepSource protocol.

    The first step starts the computation, later steps resume it with None.
    """

    def __init__(self, driver: StepDriver):
        self.driver = driver

    def step(self) -> StepResult:
        if self.driver.state is DriverState.NOT_STARTED:
            return self.driver.start()
        return self.driver.resume(None)


def consume(
    source: StepSource, max_steps: Optional[int] = None
) -> Tuple[List, Optional[StepResult]]:
    """
    Pull step results from ``source`` until it completes.

    Args:
        source: Anything with a step() method
        max_steps: Stop after this many steps (None means no limit)

    Returns:
        Tuple of the pending values seen and the Complete result, which is
        None when the step limit was reached first
    """
    values: List = []
    steps = range(max_steps) if max_steps is not None else itertools.count()
    for _ in steps:
        result = source.step()
        if result.is_complete:
            return values, result
        values.append(result.value)
    return values, None
