"""In-memory trace of step driver operations."""

from dataclasses import asdict, dataclass
from typing import Any, List, Optional

import pandas as pd

from .models import DriverState, StepResult

TRACE_COLUMNS = ["sequence", "operation", "state", "kind", "value"]


@dataclass
class StepRecord:
    """One driver operation and what it produced."""

    sequence: int
    operation: str
    state: str
    kind: Optional[str]
    value: Any


class StepTrace:
    """
    Records every operation of the drivers it observes.

    Pass an instance as ``observer`` to StepDriver.
    """

    def __init__(self):
        self.records: List[StepRecord] = []

    def __call__(self, operation: str, state: DriverState, result: Optional[StepResult]) -> None:
        self.records.append(
            StepRecord(
                sequence=len(self.records) + 1,
                operation=operation,
                state=state.value,
                kind=result.kind.value if result is not None else None,
                value=result.value if result is not None else None,
            )
        )

    def __len__(self) -> int:
        return len(self.records)

    def clear(self) -> None:
        self.records.clear()

    def to_dataframe(self) -> pd.DataFrame:
        """Return the trace as a DataFrame, one row per operation."""
        return pd.DataFrame([asdict(r) for r in self.records], columns=TRACE_COLUMNS)
