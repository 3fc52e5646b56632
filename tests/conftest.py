# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events and stores for all tests.
"""

import pytest
from datetime import datetime, timedelta
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from daybook.core.event_store import EventStore
from daybook.core.controller import EventController
from daybook.models.event import Event
from daybook.models.enums import Priority


# ==================== Event Fixtures ====================

@pytest.fixture
def standup():
    """A short morning meeting on 01/06/2025."""
    return Event(
        title="Standup",
        start_time=datetime(2025, 1, 6, 9, 0),
        end_time=datetime(2025, 1, 6, 9, 15),
        location="Room 4",
        description="Daily sync",
        priority=Priority.HIGH,
    )


@pytest.fixture
def lunch():
    """Lunch on 01/06/2025."""
    return Event(
        title="Lunch with Sam",
        start_time=datetime(2025, 1, 6, 12, 0),
        end_time=datetime(2025, 1, 6, 13, 0),
        location="Cafe",
        description="Catch up",
        priority=Priority.LOW,
    )


@pytest.fixture
def review():
    """Design review on 01/07/2025."""
    return Event(
        title="Design Review",
        start_time=datetime(2025, 1, 7, 14, 0),
        end_time=datetime(2025, 1, 7, 15, 30),
        location="Room 2",
        description="Quarterly roadmap",
        priority=Priority.MEDIUM,
    )


@pytest.fixture
def future_event():
    """An event that has not ended yet."""
    start = datetime.now().replace(second=0, microsecond=0) + timedelta(days=2)
    return Event(
        title="Dentist",
        start_time=start,
        end_time=start + timedelta(hours=1),
        location="Clinic",
        priority="High",
    )


# ==================== Store Fixtures ====================

@pytest.fixture
def store():
    """An empty event store."""
    return EventStore()


@pytest.fixture
def populated_store(store, standup, lunch, review):
    """A store holding standup, lunch and review."""
    for event in (standup, lunch, review):
        assert store.add(event) is True
    return store


@pytest.fixture
def controller(store):
    """A controller that does not archive on its own."""
    return EventController(store, auto_archive=False)
