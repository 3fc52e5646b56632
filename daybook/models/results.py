# File: daybook/models/results.py
"""
Result types returned by store and controller operations.
"""

from dataclasses import dataclass
from typing import Optional

from .enums import OperationStatus
from .event import Event


@dataclass
class OperationResult:
    """Outcome of an operation plus a message suitable for the user."""
    status: OperationStatus
    message: str
    event: Optional[Event] = None

    def is_success(self) -> bool:
        """Check if the operation was applied (fully or partially)."""
        return self.status in (OperationStatus.SUCCESS, OperationStatus.PARTIAL)

    def __str__(self) -> str:
        return self.message
