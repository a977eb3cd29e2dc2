from types import SimpleNamespace

from bson import ObjectId
import pytest


class _FakeCursor:
    def __init__(self, documents: list[dict], error: Exception | None = None) -> None:
        self._documents = documents
        self._error = error

    async def to_list(self, length=None) -> list[dict]:
        if self._error is not None:
            raise self._error
        return [dict(document) for document in self._documents]


class FakeEventsCollection:
    """In-memory stand-in for the motor collection methods the store uses."""

    def __init__(self, read_error: Exception | None = None, write_error: Exception | None = None) -> None:
        self.documents: dict[ObjectId, dict] = {}
        self.writes = 0
        self.read_error = read_error
        self.write_error = write_error

    def _write(self) -> None:
        self.writes += 1
        if self.write_error is not None:
            raise self.write_error

    def find(self, query: dict) -> _FakeCursor:
        return _FakeCursor(list(self.documents.values()), self.read_error)

    async def insert_one(self, document: dict):
        self._write()
        oid = ObjectId()
        document["_id"] = oid
        self.documents[oid] = dict(document)
        return SimpleNamespace(inserted_id=oid)

    async def insert_many(self, documents: list[dict]):
        self._write()
        ids = []
        for document in documents:
            oid = ObjectId()
            document["_id"] = oid
            self.documents[oid] = dict(document)
            ids.append(oid)
        return SimpleNamespace(inserted_ids=ids)

    async def update_one(self, query: dict, update: dict):
        self._write()
        document = self.documents.get(query["_id"])
        if document is not None:
            document.update(update["$set"])
        return SimpleNamespace(matched_count=int(document is not None))

    async def delete_one(self, query: dict):
        self._write()
        removed = self.documents.pop(query["_id"], None)
        return SimpleNamespace(deleted_count=int(removed is not None))

    async def delete_many(self, query: dict):
        self._write()
        count = len(self.documents)
        self.documents.clear()
        return SimpleNamespace(deleted_count=count)


@pytest.fixture
def fake_collection() -> FakeEventsCollection:
    return FakeEventsCollection()


@pytest.fixture
def collection_factory():
    return FakeEventsCollection
