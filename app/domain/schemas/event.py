from enum import Enum

from pydantic import BaseModel, ConfigDict


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Category(str, Enum):
    MEETING = "meeting"
    TASK = "task"
    EVENT = "event"
    REMINDER = "reminder"
    APPOINTMENT = "appointment"


class WireEvent(BaseModel):
    """Event as the scheduler widget sees it: string id, ``YYYY-MM-DD HH:mm`` dates."""

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    id: str
    text: str
    start_date: str
    end_date: str
    location: str | None = None
    priority: Priority | None = None
    category: Category | None = None
    tags: str | None = None
    attendees: str | None = None
    color: str | None = None


class SyncAck(BaseModel):
    action: str
    sid: str | None = None
    tid: str | None = None
