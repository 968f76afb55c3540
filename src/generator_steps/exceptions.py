"""Exceptions raised by step drivers and the fake server."""

from typing import Optional

from .models import DriverState


class StepDriverError(Exception):
    """Base class for step driver errors."""


class InvalidState(StepDriverError):
    """An operation was invoked in a state that forbids it."""

    def __init__(self, operation: str, state: DriverState, detail: Optional[str] = None):
        self.operation = operation
        self.state = state
        message = f"Cannot {operation}() while driver is {state.value}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class PropagatedFailure(StepDriverError):
    """A failure injected with fail() that the computation did not recover."""

    def __init__(self, error: BaseException):
        self.error = error
        super().__init__(f"Computation did not recover from {error!r}")


class FetchError(Exception):
    """The fake server rejected a request."""
