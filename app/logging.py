import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DRIVER_LOGGERS = ("pymongo", "motor")
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str | None = None) -> int:
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | None = None) -> None:
    """Send app, driver and server logs through one root handler."""
    chosen = resolve_level(level)
    logging.basicConfig(level=chosen, format=LOG_FORMAT)
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(max(chosen, logging.WARNING))
    # uvicorn installs its own handlers; route its records to the root format instead
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
