"""Generator-based emulation of async/await on top of StepDriver."""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Generator, Optional

from faker import Faker

from .config import FetchConfig
from .driver import StepDriver
from .exceptions import FetchError, PropagatedFailure
from .models import ServerData
from .protocols import LoggerProtocol

FETCH_ERROR_MESSAGE = "Could not fetch data from the server"


class FakeServer:
    """
    Stand-in for a remote server, mimicking ``fetch``.

    Every request is answered on a worker thread after the configured
    latency, either with a ServerData payload or with a FetchError.
    """

    def __init__(self, config: Optional[FetchConfig] = None, logger: Optional[LoggerProtocol] = None):
        """
        Initialize fake server.

        Args:
            config: Fake server configuration (defaults to FetchConfig())
            logger: Logger instance (defaults to module logger)
        """
        self.config = config or FetchConfig()
        self._logger = logger or logging.getLogger(__name__)
        self.faker = Faker()
        Faker.seed(self.config.faker_seed)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="fake-server")

    def fetch(self, good: bool = True) -> Future:
        """
        Start a request.

        Args:
            good: Whether the request succeeds

        Returns:
            Future resolving to ServerData or failing with FetchError
        """
        if self._logger:
            self._logger.debug(f"Fetching from fake server (good={good})")
        return self._executor.submit(self._respond, good)

    def _respond(self, good: bool) -> ServerData:
        time.sleep(self.config.latency_seconds)
        if not good:
            raise FetchError(FETCH_ERROR_MESSAGE)
        return ServerData(
            subject=self.config.subject,
            author=self.faker.name(),
            request_id=self.faker.uuid4(),
        )

    def close(self) -> None:
        """Stop the worker thread."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "FakeServer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def run_until_complete(computation: Generator, logger: Optional[LoggerProtocol] = None) -> Any:
    """
    Run a generator that yields futures as if it were an async function.

    Each yielded Future is waited on; its result is sent back into the
    generator, or its exception is raised inside it. Any other yielded value
    is sent straight back.

    Args:
        computation: Generator to run
        logger: Logger instance (defaults to module logger)

    Returns:
        The generator's return value

    Raises:
        Exception: Whatever the generator did not handle itself
    """
    logger = logger or logging.getLogger(__name__)
    driver = StepDriver(computation, logger=logger)
    try:
        result = driver.start()

        while result.is_pending:
            awaited = result.value
            if not isinstance(awaited, Future):
                result = driver.resume(awaited)
                continue

            error = awaited.exception()
            try:
                if error is None:
                    result = driver.resume(awaited.result())
                else:
                    logger.debug(f"{driver.name}: awaited future failed with {error!r}")
                    result = driver.fail(error)
            except PropagatedFailure as failure:
                raise failure.error from None
    finally:
        driver.terminate()

    return result.value


def fetch_subject(server: FakeServer, good: bool = True) -> Generator[Any, Any, Optional[ServerData]]:
    """
    Fetch from the server the way an async function would await it.

    Recovers from FetchError by logging it and returning None.
    """
    logger = logging.getLogger(__name__)
    try:
        data = yield server.fetch(good)
    except FetchError as e:
        logger.error(f"Fetch failed: {e}")
        return None

    logger.info(f"Fetched subject: {data.subject}")
    return data
