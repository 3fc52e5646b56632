# File: daybook/core/event_store.py
"""
In-memory event store.

Holds the active events and the history of archived ones. Insertion is
conflict-checked against every active event; the store never raises for an
expected negative outcome (conflict, unknown key, bad filter input), it
reports it through the return value and the log.
"""

import threading
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Union

from daybook.models.common import parse_date, timestamp_key
from daybook.models.enums import OperationStatus, Priority
from daybook.models.event import Event, EventValidationError
from daybook.models.results import OperationResult
from daybook.utils.logger import LoggerMixin

Timestamp = Union[str, datetime]

_TEXT_ATTRIBUTES: Dict[str, Callable[[Event], str]] = {
    'title': lambda e: e.title,
    'location': lambda e: e.location,
    'priority': lambda e: e.priority.value,
    'description': lambda e: e.description,
}

_SORT_KEYS: Dict[str, Callable[[Event], tuple]] = {
    'date': lambda e: (e.start_time,),
    'title': lambda e: (e.title, e.start_time),
    'priority': lambda e: (e.priority.rank, e.start_time),
}


def _by_start(events) -> List[Event]:
    return sorted(events, key=lambda e: e.start_time)


class EventStore(LoggerMixin):
    """
    Keyed collection of active and archived events.

    Both collections are keyed by event id. Start-time lookups scan the
    active events and compare each one's current ``key``, so an event whose
    window was changed in place is still found under its new start time.
    The no-overlap rule guarantees at most one match.
    """

    def __init__(self):
        self._active: Dict[str, Event] = {}
        self._history: Dict[str, Event] = {}
        self._lock = threading.RLock()

    # ==================== Mutations ====================

    def add(self, event: Event) -> bool:
        """
        Insert an event unless it overlaps an active one.
        
        Args:
            event: Event to insert
        
        Returns:
            True if inserted, False on conflict (store unchanged)
        """
        with self._lock:
            if event.id in self._active:
                self.logger.info(f"Event '{event.title}' is already in the calendar")
                return False

            conflict = self._find_conflict(event)
            if conflict is not None:
                self.logger.info(
                    f"Conflict: '{event.title}' ({event.key}) overlaps '{conflict.title}' ({conflict.key})"
                )
                return False

            self._insert(event)
            self.logger.debug(f"Added '{event.title}' at {event.key}")
            return True

    def remove(self, key: Timestamp) -> bool:
        """
        Remove the active event starting at ``key``.

        History entries cannot be removed this way.
        
        Returns:
            True if an event was removed, False if none starts at that time
        """
        with self._lock:
            event = self._lookup(key)
            if event is None:
                self.logger.info(f"No event found for {key}")
                return False

            self._discard(event)
            self.logger.info(f"Event '{event.title}' removed")
            return True

    def update(
        self,
        key: Timestamp,
        title: Optional[str] = None,
        location: Optional[str] = None,
        description: Optional[str] = None,
        priority: Optional[Union[str, Priority]] = None,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        force: bool = False,
    ) -> OperationResult:
        """
        Replace the active event starting at ``key`` with an edited copy.
        
        Fields left as None keep their current value. If the edited end would
        precede the edited start, the end-time change is dropped and the old
        end kept; the other edits still apply (status PARTIAL).
        
        The new window is checked against every other active event. A
        conflict leaves the store unchanged unless ``force`` is set.
        
        Returns:
            OperationResult describing the outcome
        """
        with self._lock:
            current = self._lookup(key)
            if current is None:
                return OperationResult(OperationStatus.NOT_FOUND, "No event found for the given date and time.")

            new_start = start_time if start_time is not None else current.start_time
            new_end = end_time if end_time is not None else current.end_time
            status = OperationStatus.SUCCESS
            message = "Event updated successfully."

            if end_time is not None and end_time < new_start:
                new_end = current.end_time
                status = OperationStatus.PARTIAL
                message = "End time must be after start time. Kept the current end time."

            changes = {'start_time': new_start, 'end_time': new_end}
            for name, value in (('title', title), ('location', location),
                                ('description', description), ('priority', priority)):
                if value is not None:
                    changes[name] = value

            try:
                updated = current.replace(**changes)
            except EventValidationError as e:
                return OperationResult(OperationStatus.INVALID, str(e), current)

            conflict = self._find_conflict(updated, ignore=current)
            # Forcing cannot place two active events on the same start key
            occupant = self._lookup(updated.key)
            if occupant is not None and occupant.id != current.id:
                conflict = occupant
                force = False
            if conflict is not None and not force:
                self.logger.info(f"Update of '{current.title}' conflicts with '{conflict.title}'")
                return OperationResult(
                    OperationStatus.CONFLICT,
                    f"The new time overlaps '{conflict.title}' at {conflict.key}.",
                    current,
                )
            if conflict is not None:
                self.logger.warning(f"Forcing update of '{current.title}' over '{conflict.title}'")

            self._discard(current)
            self._insert(updated)
            self.logger.info(f"Event '{updated.title}' updated ({current.key} -> {updated.key})")
            return OperationResult(status, message, updated)

    def archive_past_events(self, now: Optional[datetime] = None) -> List[Event]:
        """
        Move every active event that ended strictly before ``now`` into history.
        
        Args:
            now: Reference time (default: current local time)
        
        Returns:
            Events moved by this call (empty when nothing had expired)
        """
        if now is None:
            now = datetime.now()

        with self._lock:
            expired = [e for e in self._active.values() if e.end_time < now]
            for event in expired:
                self._discard(event)
                self._history[event.id] = event

        if expired:
            self.logger.info(f"Archived {len(expired)} past event(s)")
        return _by_start(expired)

    # ==================== Queries ====================

    def find_by_start_time(self, timestamp: Timestamp) -> Optional[Event]:
        """Return the active event starting at ``timestamp``, or None."""
        with self._lock:
            return self._lookup(timestamp)

    def view(self, attribute: str, filter_value: str) -> List[Event]:
        """
        Filter active events by one attribute.
        
        Text attributes match by case-insensitive substring. ``date`` takes
        MM/DD/YYYY and matches events starting on that day.
        
        Returns:
            Matching events sorted by start time; empty for an unknown
            attribute or a malformed date
        """
        attribute = (attribute or '').strip().lower()
        needle = (filter_value or '').lower()

        with self._lock:
            events = list(self._active.values())

        if attribute == 'date':
            day = parse_date(filter_value)
            if day is None:
                self.logger.warning(f"Invalid date format '{filter_value}'. Please use MM/DD/YYYY.")
                return []
            matches = [e for e in events if e.start_time.date() == day]
        elif attribute in _TEXT_ATTRIBUTES:
            getter = _TEXT_ATTRIBUTES[attribute]
            matches = [e for e in events if needle in getter(e).lower()]
        else:
            self.logger.error(f"Invalid filter attribute: {attribute!r}")
            return []

        return _by_start(matches)

    def sort(self, attribute: str) -> List[Event]:
        """
        All active events ordered by ``date``, ``title`` or ``priority``.

        Ties fall back to start time. An unknown attribute yields start order.
        """
        attribute = (attribute or '').strip().lower()
        with self._lock:
            events = list(self._active.values())

        sort_key = _SORT_KEYS.get(attribute)
        if sort_key is None:
            self.logger.warning(f"Unknown sort attribute {attribute!r}, sorting by date")
            sort_key = _SORT_KEYS['date']
        return sorted(events, key=sort_key)

    def all_events(self) -> List[Event]:
        """Active events ordered by start time."""
        with self._lock:
            return _by_start(self._active.values())

    def history(self) -> List[Event]:
        """Archived events ordered by start time."""
        with self._lock:
            return _by_start(self._history.values())

    def summarize(self, start_date: date, end_date: date) -> str:
        """
        Text listing of active and archived events inside a date range.
        
        An event is included when it starts on or after ``start_date`` and
        ends on or before ``end_date``. Each event block is followed by a
        blank line.
        
        Returns:
            The listing, or "" when nothing falls in range
        """
        if isinstance(start_date, datetime):
            start_date = start_date.date()
        if isinstance(end_date, datetime):
            end_date = end_date.date()
        if end_date < start_date:
            return ""

        with self._lock:
            events = list(self._active.values()) + list(self._history.values())

        in_range = [
            e for e in events
            if e.start_time.date() >= start_date and e.end_time.date() <= end_date
        ]
        return "".join(f"{event}\n" for event in _by_start(in_range))

    def __len__(self) -> int:
        with self._lock:
            return len(self._active)

    def __contains__(self, item) -> bool:
        with self._lock:
            if isinstance(item, Event):
                return item.id in self._active
            return self._lookup(item) is not None

    # ==================== Internals ====================

    def _lookup(self, key: Timestamp) -> Optional[Event]:
        normalized = timestamp_key(key)
        if normalized is None:
            return None
        for event in self._active.values():
            if event.key == normalized:
                return event
        return None

    def _find_conflict(self, candidate: Event, ignore: Optional[Event] = None) -> Optional[Event]:
        for existing in self._active.values():
            if ignore is not None and existing.id == ignore.id:
                continue
            if existing.overlaps_with(candidate):
                return existing
        return None

    def _insert(self, event: Event) -> None:
        self._active[event.id] = event

    def _discard(self, event: Event) -> None:
        self._active.pop(event.id, None)
