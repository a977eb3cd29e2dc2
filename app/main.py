from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
import uvicorn

from app.api.events import router as events_router
from app.config import Settings, settings
from app.core.env import load_env
from app.core.ports import PortInUseError, ensure_port_available
from app.database.mongo import close_mongo, connect_to_mongo
from app.logging import configure_logging
from app.services.events.base import EventStore
from app.services.events.mock_store import MockEventStore
from app.services.events.mongo_store import MongoEventStore

logger = logging.getLogger(__name__)


def create_app(event_store: EventStore | None = None, config: Settings = settings) -> FastAPI:
    """Build the application.

    When ``event_store`` is given it is used as-is and no Mongo connection is made;
    otherwise the lifespan connects at startup and falls back to mock data.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if event_store is None:
            client, collection = await connect_to_mongo(config)
            app.state.event_store = (
                MongoEventStore(collection) if collection is not None else MockEventStore()
            )
        try:
            yield
        finally:
            logger.info("HTTP server closed.")
            close_mongo(client)

    app = FastAPI(lifespan=lifespan)
    app.state.event_store = event_store if event_store is not None else MockEventStore()
    app.include_router(events_router)

    static_dir = Path(config.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    return app


app = create_app()


def main() -> None:
    load_env()
    configure_logging()
    config = Settings()
    try:
        ensure_port_available(config.PORT, config.HOST)
    except PortInUseError as exc:
        logger.error("%s", exc)
        logger.info("Try running: python -m app.scripts.free_port")
        raise SystemExit(1) from exc

    logger.info("Server running on port %s", config.PORT)
    logger.info("Visit http://localhost:%s to view the calendar", config.PORT)
    logger.info("Visit http://localhost:%s/init to initialize test data", config.PORT)
    uvicorn.run(create_app(config=config), host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
