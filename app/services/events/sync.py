from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from app.domain.schemas.event import SyncAck
from app.services.events.base import EventStore
from app.services.events.errors import StoreUnavailable, StoreWriteError
from app.services.events.operations import (
    STATUS_FIELD,
    StoreOperation,
    UnsupportedOperation,
    parse_editor_status,
)

logger = logging.getLogger(__name__)

NOT_CONNECTED = "Database not connected"
NOT_SUPPORTED = "Not supported operation"
SEED_FAILED = "Error initializing data"


@dataclass(frozen=True)
class SyncReply:
    status_code: int
    body: Any
    media_type: str = "application/json"
    headers: dict[str, str] | None = None


def _text(body: str, status_code: int = 200) -> SyncReply:
    return SyncReply(status_code=status_code, body=body, media_type="text/plain")


class EventSyncEndpoint:
    """Translates scheduler requests into event store calls."""

    def __init__(self, store: EventStore) -> None:
        self.store = store

    async def list_events(self) -> SyncReply:
        events = await self.store.list_all()
        source = "mongo" if self.store.available else "mock"
        return SyncReply(status_code=200, body=events, headers={"X-Data-Source": source})

    async def seed(self) -> SyncReply:
        try:
            message = await self.store.reset()
        except Exception as exc:  # noqa: BLE001
            logger.error("Error initializing data: %s", exc, exc_info=True)
            return _text(SEED_FAILED, status_code=500)
        return _text(message)

    async def mutate(self, payload: dict[str, Any]) -> SyncReply:
        record = dict(payload)
        tag = record.pop(STATUS_FIELD, None)
        sid = record.pop("id", None)
        sid = str(sid) if sid is not None else None

        if not self.store.available:
            return _text(NOT_CONNECTED, status_code=500)

        operation = parse_editor_status(tag)
        if isinstance(operation, UnsupportedOperation):
            logger.info("Ignoring unsupported editor status %r for id=%s", operation.tag, sid)
            return _text(NOT_SUPPORTED)

        event_id = None if operation is StoreOperation.INSERT else sid
        try:
            tid = await self.store.apply(operation, record, event_id=event_id)
        except StoreUnavailable:
            return _text(NOT_CONNECTED, status_code=500)
        except StoreWriteError as exc:
            logger.error("Database operation error: %s", exc, exc_info=True)
            return self._ack("error", sid, sid)
        return self._ack(tag, sid, tid)

    @staticmethod
    def _ack(action: str, sid: str | None, tid: str | None) -> SyncReply:
        return SyncReply(status_code=200, body=SyncAck(action=action, sid=sid, tid=tid).model_dump())
