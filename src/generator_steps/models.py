"""Data models for step results and driver state."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class StepKind(str, Enum):
    """Step result variant enumeration."""

    PENDING = "pending"
    COMPLETE = "complete"


class DriverState(str, Enum):
    """Lifecycle state of a suspended computation."""

    NOT_STARTED = "not_started"
    SUSPENDED = "suspended"
    FINISHED = "finished"


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of advancing a computation by one step.

    ``Pending`` carries the value the computation yielded while staying
    suspended, ``Complete`` carries its final return value.
    """

    kind: StepKind
    value: Any = None

    @classmethod
    def pending(cls, value: Any = None) -> "StepResult":
        """Create a pending result."""
        return cls(StepKind.PENDING, value)

    @classmethod
    def complete(cls, value: Any = None) -> "StepResult":
        """Create a complete result."""
        return cls(StepKind.COMPLETE, value)

    @property
    def is_pending(self) -> bool:
        return self.kind is StepKind.PENDING

    @property
    def is_complete(self) -> bool:
        return self.kind is StepKind.COMPLETE

    def __repr__(self) -> str:
        return f"{self.kind.value.capitalize()}({self.value!r})"


@dataclass
class ServerData:
    """Payload returned by the fake server."""

    subject: str
    author: str
    request_id: str
