"""Tests for producers module."""

from itertools import islice

import pytest

from generator_steps.driver import StepDriver
from generator_steps.models import StepResult
from generator_steps.producers import (
    DriverStepSource,
    FibonacciIterator,
    consume,
    fibonacci,
    fibonacci_up_to,
    make_fibonacci_counter,
    with_prelude,
)

FIRST_TEN = [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]


def test_closure_counter():
    """Test that the closure counter returns the sequence across calls."""
    counter = make_fibonacci_counter()
    assert [counter() for _ in range(10)] == FIRST_TEN


def test_closure_counters_are_independent():
    """Test that each counter keeps its own state."""
    first = make_fibonacci_counter()
    second = make_fibonacci_counter()
    first()
    first()
    first()
    assert second() == 1


def test_fibonacci_iterator_protocol():
    """Test that the hand-built iterator is its own iterator."""
    iterator = FibonacciIterator()
    assert iter(iterator) is iterator
    assert list(islice(iterator, 10)) == FIRST_TEN


def test_fibonacci_iterator_in_for_loop():
    """Test breaking out of the infinite hand-built iterator."""
    values = []
    for value in FibonacciIterator():
        if value > 80:
            break
        values.append(value)
    assert values == FIRST_TEN


def test_fibonacci_generator():
    """Test the native generator sequence."""
    assert list(islice(fibonacci(), 10)) == FIRST_TEN


def test_fibonacci_close_runs_cleanup_once():
    """Test that closing the generator mid-loop runs cleanup once."""
    cleanups = []
    generator = fibonacci(on_cleanup=lambda: cleanups.append("cleanup"))
    values = []
    for value in generator:
        values.append(value)
        if value > 50:
            generator.close()

    assert values == FIRST_TEN
    assert cleanups == ["cleanup"]
    generator.close()
    assert cleanups == ["cleanup"]


def test_fibonacci_up_to_returns_count():
    """Test delegation stops after the limit and returns the count."""
    cleanups = []
    generator = fibonacci_up_to(50, on_cleanup=lambda: cleanups.append("cleanup"))

    values = []
    with pytest.raises(StopIteration) as exc_info:
        while True:
            values.append(next(generator))

    assert values == FIRST_TEN
    assert exc_info.value.value == 10
    assert cleanups == ["cleanup"]


def test_with_prelude_delegates_and_returns():
    """Test that with_prelude yields the prelude then the source's values."""
    generator = with_prelude([0], fibonacci_up_to(5))
    driver = StepDriver(generator)

    values, completion = consume(DriverStepSource(driver))

    assert values == [0, 1, 1, 2, 3, 5, 8]
    assert completion == StepResult.complete(6)


def test_consume_stops_at_max_steps():
    """Test that consume() respects the step limit on infinite sources."""
    values, completion = consume(FibonacciIterator(), max_steps=5)
    assert values == [1, 1, 2, 3, 5]
    assert completion is None


def test_consume_driver_source():
    """Test consuming a driven generator until it completes."""

    def countdown():
        yield 2
        yield 1
        return "liftoff"

    values, completion = consume(DriverStepSource(StepDriver(countdown())))

    assert values == [2, 1]
    assert completion == StepResult.complete("liftoff")


def test_with_prelude_closes_source_when_closed_early():
    """Test that closing during the prelude still runs the source's cleanup."""
    cleanups = []
    generator = with_prelude([0, 0], fibonacci(on_cleanup=lambda: cleanups.append("cleanup")))

    assert next(generator) == 0
    generator.close()

    assert cleanups == ["cleanup"]
