from app.services.events.operations import StoreOperation, UnsupportedOperation, parse_editor_status


def test_known_tags_map_to_store_operations() -> None:
    assert parse_editor_status("inserted") is StoreOperation.INSERT
    assert parse_editor_status("updated") is StoreOperation.UPDATE
    assert parse_editor_status("deleted") is StoreOperation.DELETE


def test_unknown_tags_keep_original_text() -> None:
    assert parse_editor_status("weird_value") == UnsupportedOperation("weird_value")
    assert parse_editor_status("Inserted") == UnsupportedOperation("Inserted")
    assert parse_editor_status(None) == UnsupportedOperation(None)


def test_non_string_tags_are_unsupported() -> None:
    assert parse_editor_status(["updated"]) == UnsupportedOperation(["updated"])
    assert parse_editor_status({"op": "deleted"}) == UnsupportedOperation({"op": "deleted"})
    assert parse_editor_status(1) == UnsupportedOperation(1)
