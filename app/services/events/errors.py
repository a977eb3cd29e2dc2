class EventStoreError(Exception):
    """Base class for failures raised by an event store."""


class StoreUnavailable(EventStoreError):
    def __init__(self, message: str = "Database not connected") -> None:
        super().__init__(message)


class OperationNotSupported(EventStoreError):
    def __init__(self, operation: object) -> None:
        super().__init__(f"Not supported operation: {operation!r}")
        self.operation = operation


class StoreWriteError(EventStoreError):
    def __init__(self, operation: str, event_id: str | None, cause: Exception) -> None:
        super().__init__(f"{operation} failed for id={event_id}: {cause}")
        self.operation = operation
        self.event_id = event_id
        self.cause = cause
