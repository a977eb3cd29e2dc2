from __future__ import annotations

from datetime import datetime
import logging
from typing import Any

from bson import ObjectId
from bson.errors import BSONError, InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.core.dates import dates_from_wire, dates_to_wire
from app.services.events.errors import OperationNotSupported, StoreWriteError
from app.services.events.operations import StoreOperation
from app.services.events.samples import build_seed_events, mock_events

logger = logging.getLogger(__name__)

SEED_CONFIRMATION = "Test events were added to the database"


def _object_id(event_id: str | None) -> ObjectId:
    if not event_id:
        raise InvalidId("missing event id")
    return ObjectId(event_id)


def document_to_wire(document: dict[str, Any]) -> dict[str, Any]:
    record = {key: value for key, value in document.items() if key != "_id"}
    record["id"] = str(document["_id"])
    return dates_to_wire(record)


class MongoEventStore:
    available = True

    def __init__(self, collection: AsyncIOMotorCollection, now_fn=datetime.now) -> None:
        self.collection = collection
        self._now_fn = now_fn

    async def list_all(self) -> list[dict[str, Any]]:
        try:
            documents = await self.collection.find({}).to_list(length=None)
        except PyMongoError as exc:
            logger.warning("Loading events failed, serving mock data: %s", exc)
            return mock_events()
        return [document_to_wire(document) for document in documents]

    async def reset(self) -> str:
        await self.collection.delete_many({})
        seed = build_seed_events(self._now_fn())
        await self.collection.insert_many(seed)
        logger.info("Seeded %s events", len(seed))
        return SEED_CONFIRMATION

    async def apply(
        self,
        operation: StoreOperation,
        record: dict[str, Any],
        event_id: str | None = None,
    ) -> str:
        if not isinstance(operation, StoreOperation):
            raise OperationNotSupported(operation)

        try:
            if operation is StoreOperation.INSERT:
                result = await self.collection.insert_one(dates_from_wire(record))
                return str(result.inserted_id)
            if operation is StoreOperation.UPDATE:
                await self.collection.update_one(
                    {"_id": _object_id(event_id)},
                    {"$set": dates_from_wire(record)},
                )
                return event_id
            await self.collection.delete_one({"_id": _object_id(event_id)})
            return event_id
        except (BSONError, OverflowError, TypeError, ValueError, PyMongoError) as exc:
            raise StoreWriteError(operation.value, event_id, exc) from exc
