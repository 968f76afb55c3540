"""Protocol definitions for dependency inversion."""

from typing import Protocol

from .models import StepResult


class StepSource(Protocol):
    """Anything that can produce its next step result on demand."""

    def step(self) -> StepResult:
        """Produce the next step result."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
