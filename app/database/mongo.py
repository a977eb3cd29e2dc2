from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.config import Settings

logger = logging.getLogger(__name__)


async def connect_to_mongo(
    settings: Settings,
) -> tuple[AsyncIOMotorClient, AsyncIOMotorCollection] | tuple[None, None]:
    """Open the process-wide client; (None, None) when the server is unreachable."""
    client = None
    try:
        client = AsyncIOMotorClient(
            settings.MONGO_URI,
            serverSelectionTimeoutMS=settings.MONGO_CONNECT_TIMEOUT_MS,
        )
        await client.admin.command("ping")
    except PyMongoError as exc:
        logger.error("MongoDB connection error: %s", exc)
        logger.info("Continuing without MongoDB connection...")
        if client is not None:
            client.close()
        return None, None

    logger.info("Connected to MongoDB")
    collection = client[settings.MONGO_DB_NAME][settings.MONGO_EVENTS_COLLECTION]
    return client, collection


def close_mongo(client: AsyncIOMotorClient | None) -> None:
    if client is None:
        return
    client.close()
    logger.info("MongoDB connection closed.")
