# File: daybook/models/event.py

import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple

from .enums import Priority
from .common import format_timestamp, truncate_to_minute


class EventValidationError(ValueError):
    """Raised when an Event would be built or changed into an invalid state."""


@dataclass(eq=False)
class Event:
    """
    A time-bounded calendar event.

    Equality and hashing use ``id`` only; two events with identical fields
    but different ids are different events.
    """
    title: str
    start_time: datetime
    end_time: datetime
    location: str = ""
    description: str = ""
    priority: Priority = Priority.MEDIUM
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        """Normalize priority and validate the time window."""
        try:
            self.priority = Priority.parse(self.priority)
        except ValueError as e:
            raise EventValidationError(str(e)) from e

        self.set_start_and_end(self.start_time, self.end_time)

    def set_start_and_end(self, start_time: datetime, end_time: datetime) -> None:
        """
        Set both ends of the time window.

        Raises:
            EventValidationError: if either value is not a datetime or the
                end is before the start. The current window is kept.
        """
        if not isinstance(start_time, datetime) or not isinstance(end_time, datetime):
            raise EventValidationError("Start and end time must be datetimes")

        start_time = truncate_to_minute(start_time)
        end_time = truncate_to_minute(end_time)
        if end_time < start_time:
            raise EventValidationError("End time cannot be before start time")

        self.start_time = start_time
        self.end_time = end_time

    @property
    def key(self) -> str:
        """Store key: the canonical start timestamp."""
        return format_timestamp(self.start_time)

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return int((self.end_time - self.start_time).total_seconds() / 60)

    def overlaps_with(self, other: 'Event') -> bool:
        """
        Check if this event overlaps with another.

        Both windows are closed intervals, so an event starting at the exact
        minute another ends is a conflict.
        """
        return not (self.end_time < other.start_time or self.start_time > other.end_time)

    def replace(self, **changes: Any) -> 'Event':
        """Return a validated copy with the same id and the given field edits."""
        changes.pop('id', None)
        return dataclasses.replace(self, **changes)

    def to_row(self) -> Tuple[str, str, str, str, str, str]:
        """Table row as shown in the event list."""
        return (
            self.title,
            format_timestamp(self.start_time),
            format_timestamp(self.end_time),
            self.location,
            self.description,
            self.priority.value,
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'start_time': format_timestamp(self.start_time),
            'end_time': format_timestamp(self.end_time),
            'location': self.location,
            'description': self.description,
            'priority': self.priority.value,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Event Title: {self.title}\n"
            f"Start Time: {format_timestamp(self.start_time)}\n"
            f"End Time: {format_timestamp(self.end_time)}\n"
            f"Location: {self.location}\n"
            f"ID: {self.id}\n"
            f"Description: {self.description}\n"
            f"Priority: {self.priority.value}\n"
        )
