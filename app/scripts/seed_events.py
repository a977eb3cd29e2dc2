from __future__ import annotations

import asyncio

from app.config import settings
from app.core.env import load_env
from app.database.mongo import close_mongo, connect_to_mongo
from app.logging import configure_logging
from app.services.events.mock_store import MockEventStore
from app.services.events.mongo_store import MongoEventStore


async def run_seed_events(config=settings) -> str:
    client, collection = await connect_to_mongo(config)
    store = MongoEventStore(collection) if collection is not None else MockEventStore()
    try:
        return await store.reset()
    finally:
        close_mongo(client)


def main() -> None:
    load_env()
    configure_logging()
    print(asyncio.run(run_seed_events()))


if __name__ == "__main__":
    main()
