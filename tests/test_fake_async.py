"""Tests for fake_async module."""

from concurrent.futures import CancelledError, Future

import pytest

from generator_steps.config import FetchConfig
from generator_steps.exceptions import FetchError
from generator_steps.fake_async import (
    FETCH_ERROR_MESSAGE,
    FakeServer,
    fetch_subject,
    run_until_complete,
)
from generator_steps.models import ServerData


@pytest.fixture
def server():
    with FakeServer(FetchConfig(latency_seconds=0)) as fake_server:
        yield fake_server


def test_fetch_returns_future_with_server_data(server):
    """Test that a good fetch resolves to ServerData."""
    future = server.fetch()
    assert isinstance(future, Future)

    data = future.result(timeout=5)
    assert isinstance(data, ServerData)
    assert data.subject == "generators"
    assert data.author
    assert data.request_id


def test_fetch_failure_rejects_with_fetch_error(server):
    """Test that a bad fetch fails with the server error message."""
    future = server.fetch(good=False)
    error = future.exception(timeout=5)
    assert isinstance(error, FetchError)
    assert str(error) == FETCH_ERROR_MESSAGE


def test_fetch_subject_success(server):
    """Test that the computation receives the fetched data."""
    data = run_until_complete(fetch_subject(server))
    assert data.subject == "generators"


def test_fetch_subject_recovers_from_failure(server):
    """Test that the computation catches the injected FetchError."""
    assert run_until_complete(fetch_subject(server, good=False)) is None


def test_unhandled_failure_reaches_caller(server):
    """Test that a failure the computation ignores surfaces unchanged."""

    def careless():
        data = yield server.fetch(good=False)
        return data

    with pytest.raises(FetchError, match=FETCH_ERROR_MESSAGE):
        run_until_complete(careless())


def test_several_awaits_in_sequence(server):
    """Test awaiting more than one future in one computation."""

    def twice():
        first = yield server.fetch()
        second = yield server.fetch()
        return [first.subject, second.subject]

    assert run_until_complete(twice()) == ["generators", "generators"]


def test_plain_values_are_fed_back():
    """Test that non-future values are sent straight back."""

    def doubler():
        value = yield 3
        return value * 2

    assert run_until_complete(doubler()) == 6


def test_custom_subject():
    """Test that the configured subject is served."""
    with FakeServer(FetchConfig(latency_seconds=0, subject="iterators")) as server:
        assert run_until_complete(fetch_subject(server)).subject == "iterators"


def test_computation_cleaned_up_when_wait_fails():
    """Test that the computation is terminated if waiting on a future fails."""
    cleanups = []
    cancelled = Future()
    cancelled.cancel()

    def waiting():
        try:
            yield cancelled
        finally:
            cleanups.append("cleanup")

    with pytest.raises(CancelledError):
        run_until_complete(waiting())

    assert cleanups == ["cleanup"]
