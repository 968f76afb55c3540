"""Step driver that advances a suspended computation one step at a time."""

import logging
from collections.abc import Generator
from typing import Any, Callable, Optional

from .exceptions import InvalidState, PropagatedFailure
from .models import DriverState, StepResult
from .protocols import LoggerProtocol

StepObserver = Callable[[str, DriverState, Optional[StepResult]], None]


class StepDriver:
    """
    Drives a suspended computation from the outside.

    The computation is any object speaking the generator protocol
    (``send``, ``throw``, ``close``): a native generator or a hand-built
    ``collections.abc.Generator`` continuation object. Each yield is a
    suspension point, the return value is the completion value.

    Lifecycle: NOT_STARTED -> SUSPENDED <-> SUSPENDED -> FINISHED.
    Calls made in the wrong state raise InvalidState. Calls must be
    serialized by the caller; a call made while the computation is running
    (for example from inside the computation itself) also raises
    InvalidState.
    """

    def __init__(
        self,
        computation: Generator,
        name: Optional[str] = None,
        observer: Optional[StepObserver] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize driver.

        Args:
            computation: Generator (or generator-like object) to drive
            name: Name used in log messages
            observer: Callback invoked after every operation with the
                operation name, the new state and the step result (None
                when the operation produced no result)
            logger: Logger instance (defaults to module logger)
        """
        self._computation = computation
        self.name = name or getattr(computation, "__name__", type(computation).__name__)
        self._observer = observer
        self._logger = logger or logging.getLogger(__name__)
        self._state = DriverState.NOT_STARTED
        self._running = False
        self._result: Optional[StepResult] = None

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def result(self) -> Optional[StepResult]:
        """Last step result produced, if any."""
        return self._result

    @property
    def completion(self) -> Optional[StepResult]:
        """The Complete result, or None if the computation never completed."""
        if self._result is not None and self._result.is_complete:
            return self._result
        return None

    @property
    def is_finished(self) -> bool:
        return self._state is DriverState.FINISHED

    def start(self) -> StepResult:
        """
        Run the computation up to its first suspension point.

        Returns:
            Pending with the first yielded value, or Complete if the
            computation returned without suspending

        Raises:
            InvalidState: If the driver was already started
        """
        self._require("start", DriverState.NOT_STARTED)
        return self._advance("start", lambda: self._computation.send(None))

    def resume(self, value: Any = None) -> StepResult:
        """
        Deliver ``value`` as the result of the last suspension point.

        Raises:
            InvalidState: If the computation is not suspended
        """
        self._require("resume", DriverState.SUSPENDED)
        return self._advance("resume", lambda: self._computation.send(value))

    def fail(self, error: BaseException) -> StepResult:
        """
        Raise ``error`` inside the computation at the last suspension point.

        The computation may catch it and keep going, in which case the next
        step result is returned as usual.

        Raises:
            InvalidState: If the computation is not suspended
            PropagatedFailure: If ``error`` escaped the computation; its
                ``error`` attribute is the object passed in
        """
        self._require("fail", DriverState.SUSPENDED)
        if isinstance(error, type) and issubclass(error, BaseException):
            error = error()
        if not isinstance(error, BaseException):
            raise TypeError(f"fail() expects an exception, got {type(error).__name__}")
        try:
            return self._advance(
                "fail", lambda: self._computation.throw(error), injected=error
            )
        except BaseException as exc:
            # Native generators turn an escaping StopIteration into RuntimeError.
            if exc is error or (isinstance(exc, RuntimeError) and exc.__cause__ is error):
                raise PropagatedFailure(error) from error
            raise

    def terminate(self) -> None:
        """
        Finish the computation early, running its cleanup exactly once.

        Calling it on a finished driver does nothing.
        """
        if self._state is DriverState.FINISHED:
            return
        if self._running:
            raise InvalidState("terminate", self._state, "computation is running")
        try:
            self._computation.close()
        finally:
            self._state = DriverState.FINISHED
            self._notify("terminate", None)

    def _require(self, operation: str, expected: DriverState) -> None:
        if self._running:
            raise InvalidState(operation, self._state, "computation is running")
        if self._state is not expected:
            raise InvalidState(operation, self._state)

    def _advance(
        self,
        operation: str,
        step: Callable[[], Any],
        injected: Optional[BaseException] = None,
    ) -> StepResult:
        self._running = True
        try:
            value = step()
        except StopIteration as stop:
            self._state = DriverState.FINISHED
            if stop is injected:
                self._notify(operation, None)
                raise
            result = StepResult.complete(stop.value)
        except BaseException:
            self._state = DriverState.FINISHED
            self._notify(operation, None)
            raise
        else:
            self._state = DriverState.SUSPENDED
            result = StepResult.pending(value)
        finally:
            self._running = False

        self._result = result
        self._notify(operation, result)
        return result

    def _notify(self, operation: str, result: Optional[StepResult]) -> None:
        if self._logger:
            self._logger.debug(f"{self.name}: {operation}() -> {result!r} [{self._state.value}]")
        if self._observer is not None:
            self._observer(operation, self._state, result)

    def __repr__(self) -> str:
        return f"StepDriver(name={self.name!r}, state={self._state.value})"
