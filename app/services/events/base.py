from __future__ import annotations

from typing import Any, Protocol

from app.services.events.operations import StoreOperation


class EventStore(Protocol):
    available: bool

    async def list_all(self) -> list[dict[str, Any]]:
        ...

    async def reset(self) -> str:
        ...

    async def apply(
        self,
        operation: StoreOperation,
        record: dict[str, Any],
        event_id: str | None = None,
    ) -> str:
        ...
