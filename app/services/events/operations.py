from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

STATUS_FIELD = "!nativeeditor_status"


class StoreOperation(str, Enum):
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class UnsupportedOperation:
    tag: object


EditorOperation = StoreOperation | UnsupportedOperation

_TAGS: dict[str, StoreOperation] = {
    "inserted": StoreOperation.INSERT,
    "updated": StoreOperation.UPDATE,
    "deleted": StoreOperation.DELETE,
}


def parse_editor_status(tag: object) -> EditorOperation:
    if isinstance(tag, str) and tag in _TAGS:
        return _TAGS[tag]
    return UnsupportedOperation(tag)
