from __future__ import annotations

from typing import Any

from app.services.events.errors import StoreUnavailable
from app.services.events.operations import StoreOperation
from app.services.events.samples import mock_events

MOCK_NOTICE = "MongoDB not connected - using mock data"


class MockEventStore:
    """Stand-in used when no MongoDB connection could be established."""

    available = False

    async def list_all(self) -> list[dict[str, Any]]:
        return mock_events()

    async def reset(self) -> str:
        return MOCK_NOTICE

    async def apply(
        self,
        operation: StoreOperation,
        record: dict[str, Any],
        event_id: str | None = None,
    ) -> str:
        raise StoreUnavailable()
