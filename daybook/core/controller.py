# File: daybook/core/controller.py
"""
Presentation adapter for Daybook.

Turns raw form text (titles, MM/DD/YYYY dates, HH:MM times) into EventStore
calls and turns the results back into table rows and user-facing messages.
It keeps no state of its own besides the store it wraps.
"""

from typing import List, Optional, Tuple

from daybook.core.config_manager import Config
from daybook.core.event_store import EventStore
from daybook.models.common import combine, format_timestamp, parse_date, parse_timestamp
from daybook.models.enums import OperationStatus, Priority
from daybook.models.event import Event, EventValidationError
from daybook.models.results import OperationResult
from daybook.utils.logger import LoggerMixin

Row = Tuple[str, str, str, str, str, str]

ROW_HEADERS = ("Title", "Start Time", "End Time", "Location", "Description", "Priority")


class EventController(LoggerMixin):
    """Adapter between the event forms/tables and the EventStore."""
    
    def __init__(self, store: Optional[EventStore] = None, auto_archive: Optional[bool] = None):
        """
        Args:
            store: Store to drive (a fresh one by default)
            auto_archive: Archive past events before rendering tables
                (default: Config.AUTO_ARCHIVE)
        """
        self.store = store if store is not None else EventStore()
        self.auto_archive = Config.AUTO_ARCHIVE if auto_archive is None else auto_archive
    
    # ==================== Forms ====================
    
    def add_event(
        self,
        title: str,
        location: str,
        description: str,
        date_text: str,
        start_text: str,
        end_text: str,
        priority: Optional[str] = None,
    ) -> OperationResult:
        """Handle the add-event form."""
        start = combine(date_text, start_text)
        end = combine(date_text, end_text)
        if start is None or end is None:
            return OperationResult(
                OperationStatus.INVALID,
                "Invalid date or time. Use MM/DD/YYYY and HH:MM."
            )
        
        try:
            event = Event(
                title=title.strip(),
                start_time=start,
                end_time=end,
                location=location.strip(),
                description=description.strip(),
                priority=priority or Config.default_priority(),
            )
        except EventValidationError as e:
            return OperationResult(OperationStatus.INVALID, str(e))
        
        if not self.store.add(event):
            return OperationResult(
                OperationStatus.CONFLICT,
                f"The selected date and time ({format_timestamp(start)}) is already used "
                f"by another event. Please choose a different time."
            )
        
        return OperationResult(OperationStatus.SUCCESS, "Event added successfully!", event)
    
    def remove_event(self, start_text: str) -> OperationResult:
        """Remove the event whose table row shows ``start_text``."""
        start = parse_timestamp(start_text)
        if start is None:
            return OperationResult(OperationStatus.INVALID, f"Error parsing event date: {start_text!r}")
        
        event = self.store.find_by_start_time(start)
        if not self.store.remove(start):
            return OperationResult(OperationStatus.NOT_FOUND, "No event found for the given date and time.")
        return OperationResult(OperationStatus.SUCCESS, "Event removed successfully.", event)
    
    def update_event(
        self,
        start_text: str,
        title: str = "",
        location: str = "",
        description: str = "",
        priority: str = "",
        new_start_text: str = "",
        new_end_text: str = "",
        force: bool = False,
    ) -> OperationResult:
        """
        Handle the update form.
        
        Blank fields keep the current value. A malformed new start or end
        time is ignored (the current one is kept) and noted in the message.
        """
        start = parse_timestamp(start_text)
        if start is None:
            return OperationResult(OperationStatus.INVALID, f"Error parsing event date: {start_text!r}")
        
        notes = []
        new_start = None
        if new_start_text.strip():
            new_start = parse_timestamp(new_start_text)
            if new_start is None:
                notes.append("Invalid start time format. Kept the current start time.")
        
        new_end = None
        if new_end_text.strip():
            new_end = parse_timestamp(new_end_text)
            if new_end is None:
                notes.append("Invalid end time format. Kept the current end time.")
        
        new_priority = None
        if priority.strip():
            try:
                new_priority = Priority.parse(priority)
            except ValueError:
                notes.append(f"Unknown priority {priority.strip()!r}. Kept the current priority.")
        
        result = self.store.update(
            start,
            title=title.strip() or None,
            location=location.strip() or None,
            description=description.strip() or None,
            priority=new_priority,
            start_time=new_start,
            end_time=new_end,
            force=force,
        )
        
        if notes and result.is_success():
            result.message = " ".join([result.message] + notes)
        return result
    
    # ==================== Tables ====================
    
    def refresh(self) -> List[Event]:
        """Archive events that have already ended."""
        return self.store.archive_past_events()
    
    def event_rows(self) -> List[Row]:
        """Rows for the main event table, ordered by start time."""
        if self.auto_archive:
            self.refresh()
        return [event.to_row() for event in self.store.all_events()]
    
    def history_rows(self) -> List[Row]:
        """Rows for the history table."""
        if self.auto_archive:
            self.refresh()
        return [event.to_row() for event in self.store.history()]
    
    def history_text(self) -> str:
        """History rendered as text blocks."""
        if self.auto_archive:
            self.refresh()
        return "".join(f"{event}\n" for event in self.store.history())
    
    def search(self, attribute: str, value: str) -> List[Row]:
        """Rows of active events matching the filter."""
        return [event.to_row() for event in self.store.view(attribute, value)]
    
    def sorted_rows(self, attribute: str) -> List[Row]:
        """Rows of active events sorted by ``attribute``."""
        return [event.to_row() for event in self.store.sort(attribute)]
    
    def summary(self, start_date_text: str, end_date_text: str) -> OperationResult:
        """Summary of events between two MM/DD/YYYY dates."""
        start_date = parse_date(start_date_text)
        end_date = parse_date(end_date_text)
        if start_date is None or end_date is None:
            return OperationResult(OperationStatus.INVALID, "Invalid date format. Please use MM/DD/YYYY.")
        
        text = self.store.summarize(start_date, end_date)
        if not text:
            return OperationResult(OperationStatus.NOT_FOUND, "No events in range.")
        return OperationResult(OperationStatus.SUCCESS, text)
