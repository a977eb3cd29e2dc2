from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from app.domain.schemas.event import Category, Priority, WireEvent

MOCK_EVENTS: tuple[WireEvent, ...] = (
    WireEvent(
        id="1",
        text="Sample Event 1",
        start_date="2018-09-01 09:00",
        end_date="2018-09-02 17:00",
        location="Conference Room A",
        priority=Priority.HIGH,
        category=Category.MEETING,
        tags="work,planning",
        attendees="Alice, Bob",
    ),
    WireEvent(
        id="2",
        text="Sample Event 2",
        start_date="2018-09-05 10:00",
        end_date="2018-09-06 12:00",
        color="#DD8616",
        location="Main Office",
        priority=Priority.MEDIUM,
        category=Category.TASK,
        tags="work,review",
        attendees="Carol",
    ),
    WireEvent(
        id="3",
        text="Dentist",
        start_date="2018-09-10 15:30",
        end_date="2018-09-10 16:30",
        color="#00AA00",
        location="Downtown Clinic",
        priority=Priority.LOW,
        category=Category.APPOINTMENT,
        tags="personal,health",
        attendees="",
    ),
)


def mock_events() -> list[dict[str, Any]]:
    return [event.model_dump(exclude_none=True) for event in MOCK_EVENTS]


def build_seed_events(now: datetime) -> list[dict[str, Any]]:
    """Seed documents for the events collection, anchored on the day of ``now``."""
    day = now.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    return [
        {
            "text": "Project kickoff",
            "start_date": day + timedelta(hours=9),
            "end_date": day + timedelta(hours=10, minutes=30),
            "location": "Conference Room A",
            "priority": Priority.HIGH.value,
            "category": Category.MEETING.value,
            "tags": "work,planning",
            "attendees": "Alice, Bob, Carol",
            "color": "#0066FF",
        },
        {
            "text": "Write quarterly report",
            "start_date": day + timedelta(days=1, hours=13),
            "end_date": day + timedelta(days=3, hours=17),
            "location": "Main Office",
            "priority": Priority.URGENT.value,
            "category": Category.TASK.value,
            "tags": "work,reports",
            "attendees": "Alice",
            "color": "#DD8616",
        },
        {
            "text": "Meeting with client",
            "start_date": day + timedelta(days=4, hours=11),
            "end_date": day + timedelta(days=4, hours=12),
            "location": "Client HQ",
            "priority": Priority.MEDIUM.value,
            "category": Category.APPOINTMENT.value,
            "tags": "work,clients",
            "attendees": "Bob, Dana",
            "color": "#00AA00",
        },
        {
            "text": "Weekly review",
            "start_date": day + timedelta(days=7, hours=16),
            "end_date": day + timedelta(days=7, hours=17),
            "location": "Online",
            "priority": Priority.LOW.value,
            "category": Category.REMINDER.value,
            "tags": "work,review",
            "attendees": "Team",
        },
    ]
