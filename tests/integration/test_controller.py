# File: tests/integration/test_controller.py
"""
Integration tests for the EventController.
Drives the store end to end the way the event forms and tables do.
"""

import pytest
from datetime import datetime, timedelta

from daybook.core.controller import EventController
from daybook.core.event_store import EventStore
from daybook.models.enums import OperationStatus, Priority
from daybook.models.event import Event


@pytest.fixture
def filled_controller(controller):
    """Controller with two events on 01/06/2025 and one on 01/07/2025."""
    controller.add_event("Standup", "Room 4", "Daily sync", "01/06/2025", "09:00", "09:15", "High")
    controller.add_event("Lunch", "Cafe", "Catch up", "01/06/2025", "12:00", "13:00", "Low")
    controller.add_event("Review", "Room 2", "Roadmap", "01/07/2025", "14:00", "15:30", "Medium")
    return controller


class TestAddForm:
    """Tests for the add-event form."""
    
    def test_add_success(self, controller):
        """Test a valid submission."""
        result = controller.add_event("Standup", " Room 4 ", "Daily sync", "01/06/2025", "09:00", "09:15", "High")
        
        assert result.status == OperationStatus.SUCCESS
        assert result.message == "Event added successfully!"
        assert result.event.location == "Room 4"
        assert controller.event_rows() == [
            ("Standup", "01/06/2025 09:00", "01/06/2025 09:15", "Room 4", "Daily sync", "High")
        ]
    
    def test_add_conflict_message(self, filled_controller):
        """Test the occupied-slot message."""
        result = filled_controller.add_event("Sync", "", "", "01/06/2025", "09:10", "09:30", "Low")
        
        assert result.status == OperationStatus.CONFLICT
        assert "(01/06/2025 09:10) is already used by another event" in result.message
        assert len(filled_controller.store) == 3
    
    def test_add_end_before_start(self, controller):
        """Test that validation faults become INVALID results."""
        result = controller.add_event("Backwards", "", "", "01/06/2025", "10:00", "09:00", "High")
        
        assert result.status == OperationStatus.INVALID
        assert result.message == "End time cannot be before start time"
        assert len(controller.store) == 0
    
    def test_add_bad_date(self, controller):
        """Test unparseable form input."""
        result = controller.add_event("X", "", "", "2025-01-06", "09:00", "10:00", "High")
        
        assert result.status == OperationStatus.INVALID
        assert "MM/DD/YYYY" in result.message
    
    def test_add_unknown_priority(self, controller):
        """Test priority outside the closed set."""
        result = controller.add_event("X", "", "", "01/06/2025", "09:00", "10:00", "Urgent")
        
        assert result.status == OperationStatus.INVALID
    
    def test_add_default_priority(self, controller):
        """Test blank priority falls back to the configured default."""
        result = controller.add_event("X", "", "", "01/06/2025", "09:00", "10:00")
        
        assert result.event.priority == Priority.MEDIUM


class TestRemoveAndUpdate:
    """Tests for row actions."""
    
    def test_remove_row(self, filled_controller):
        """Test removing by the row's start text."""
        result = filled_controller.remove_event("01/06/2025 12:00")
        
        assert result.status == OperationStatus.SUCCESS
        assert result.event.title == "Lunch"
        assert [row[0] for row in filled_controller.event_rows()] == ["Standup", "Review"]
    
    def test_remove_missing(self, filled_controller):
        """Test removing a slot with no event."""
        assert filled_controller.remove_event("01/06/2025 18:00").status == OperationStatus.NOT_FOUND
        assert filled_controller.remove_event("noon").status == OperationStatus.INVALID
    
    def test_update_blank_fields_keep_values(self, filled_controller):
        """Test that blank form fields are left alone."""
        result = filled_controller.update_event("01/06/2025 09:00", title="Daily Standup")
        
        assert result.status == OperationStatus.SUCCESS
        event = filled_controller.store.find_by_start_time("01/06/2025 09:00")
        assert event.title == "Daily Standup"
        assert event.location == "Room 4"
        assert event.priority == Priority.HIGH
    
    def test_update_times(self, filled_controller):
        """Test moving an event through the form."""
        result = filled_controller.update_event(
            "01/06/2025 09:00",
            new_start_text="01/06/2025 10:00",
            new_end_text="01/06/2025 10:30 AM",
        )
        
        assert result.status == OperationStatus.SUCCESS
        assert result.event.to_row()[1:3] == ("01/06/2025 10:00", "01/06/2025 10:30")
    
    def test_update_malformed_time_is_ignored(self, filled_controller):
        """Test that a bad time keeps the current one and says so."""
        result = filled_controller.update_event(
            "01/06/2025 09:00",
            location="Room 5",
            new_end_text="soon",
        )
        
        assert result.status == OperationStatus.SUCCESS
        assert "Invalid end time format" in result.message
        event = filled_controller.store.find_by_start_time("01/06/2025 09:00")
        assert event.location == "Room 5"
        assert event.end_time == datetime(2025, 1, 6, 9, 15)
    
    def test_update_conflict(self, filled_controller):
        """Test moving onto another event."""
        result = filled_controller.update_event(
            "01/06/2025 09:00",
            new_start_text="01/06/2025 12:15",
            new_end_text="01/06/2025 12:30",
        )
        
        assert result.status == OperationStatus.CONFLICT


class TestTables:
    """Tests for table rendering, search, sort and summary."""
    
    def test_search_by_date(self, filled_controller):
        """Test the date filter through the controller."""
        rows = filled_controller.search("date", "01/06/2025")
        
        assert [row[0] for row in rows] == ["Standup", "Lunch"]
    
    def test_search_bad_attribute(self, filled_controller):
        """Test that an unknown filter returns nothing."""
        assert filled_controller.search("colour", "red") == []
    
    def test_sorted_rows(self, filled_controller):
        """Test sort through the controller."""
        assert [row[0] for row in filled_controller.sorted_rows("title")] == ["Lunch", "Review", "Standup"]
        assert [row[5] for row in filled_controller.sorted_rows("priority")] == ["High", "Medium", "Low"]
    
    def test_auto_archive_on_render(self):
        """Test that rendering the tables moves ended events to history."""
        controller = EventController(EventStore(), auto_archive=True)
        start = datetime.now().replace(second=0, microsecond=0) + timedelta(days=1)
        upcoming = Event("Upcoming", start, start + timedelta(hours=1))
        controller.store.add(upcoming)
        controller.add_event("Old", "", "", "01/01/2024", "10:00", "11:00", "Low")
        
        assert [row[0] for row in controller.event_rows()] == ["Upcoming"]
        assert [row[0] for row in controller.history_rows()] == ["Old"]
        assert "Event Title: Old" in controller.history_text()
    
    def test_manual_refresh(self, filled_controller):
        """Test archiving without auto-archive."""
        assert [row[0] for row in filled_controller.event_rows()] == ["Standup", "Lunch", "Review"]
        
        moved = filled_controller.refresh()
        
        assert len(moved) == 3
        assert filled_controller.event_rows() == []
    
    def test_summary(self, filled_controller):
        """Test the summary form."""
        result = filled_controller.summary("01/06/2025", "01/06/2025")
        
        assert result.status == OperationStatus.SUCCESS
        assert result.message.count("Event Title:") == 2
    
    def test_summary_empty_and_invalid(self, filled_controller):
        """Test empty range and bad input."""
        assert filled_controller.summary("01/07/2025", "01/06/2025").status == OperationStatus.NOT_FOUND
        assert filled_controller.summary("Jan 6", "01/06/2025").status == OperationStatus.INVALID
