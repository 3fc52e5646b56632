# File: daybook/models/enums.py

from enum import Enum


class Priority(Enum):
    """Event priority levels offered by the event forms."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Sort rank, most important first."""
        return _PRIORITY_RANKS[self]

    @classmethod
    def parse(cls, value) -> "Priority":
        """
        Convert a loose value ("high", "Priority.LOW", Priority.MEDIUM) to a member.

        Raises:
            ValueError: if the value names no known priority
        """
        if isinstance(value, cls):
            return value
        clean = str(value).split('.')[-1].strip().lower()
        for member in cls:
            if member.value.lower() == clean:
                return member
        raise ValueError(f"Unknown priority: {value!r}")


_PRIORITY_RANKS = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}


class OperationStatus(Enum):
    """Outcome of a store or controller operation."""
    SUCCESS = "success"
    PARTIAL = "partial"      # applied, but the end-time change was rejected
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
