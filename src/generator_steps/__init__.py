"""Generator Steps - lazy value producers and a suspendable step driver."""

__version__ = "0.1.0"

from .driver import StepDriver
from .exceptions import FetchError, InvalidState, PropagatedFailure, StepDriverError
from .fake_async import FakeServer, fetch_subject, run_until_complete
from .models import DriverState, ServerData, StepKind, StepResult
from .producers import (
    DriverStepSource,
    FibonacciIterator,
    consume,
    fibonacci,
    fibonacci_up_to,
    make_fibonacci_counter,
    with_prelude,
)
from .protocols import LoggerProtocol, StepSource
from .trace import StepRecord, StepTrace

__all__ = [
    # Models
    "StepResult",
    "StepKind",
    "DriverState",
    "ServerData",
    # Errors
    "StepDriverError",
    "InvalidState",
    "PropagatedFailure",
    "FetchError",
    # Protocols
    "StepSource",
    "LoggerProtocol",
    # Driver
    "StepDriver",
    "StepTrace",
    "StepRecord",
    # Producers
    "make_fibonacci_counter",
    "FibonacciIterator",
    "fibonacci",
    "fibonacci_up_to",
    "with_prelude",
    "DriverStepSource",
    "consume",
    # Async emulation
    "FakeServer",
    "fetch_subject",
    "run_until_complete",
]
