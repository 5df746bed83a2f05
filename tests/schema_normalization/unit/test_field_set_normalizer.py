"""Field-set normalizer tests."""

from __future__ import annotations

from collection_migrator.field_editing.field_entries import EntryStatus, FieldEntry
from collection_migrator.schema_normalization import IndexDecl, normalize_field_set


def test_removed_entries_are_excluded_from_schema_and_indexes() -> None:
    fields = [
        FieldEntry(name="title", status=EntryStatus.KEPT, type="string", required=True),
        FieldEntry(name="slug", status=EntryStatus.REMOVED, type="string", unique=True),
        FieldEntry(name="body", status=EntryStatus.NEW, type="string"),
    ]

    normalized = normalize_field_set(fields)

    assert normalized.schema == {
        "title": {"type": "string", "required": True},
        "body": {"type": "string"},
    }
    assert normalized.indexes == ()


def test_session_bookkeeping_is_never_copied_into_options() -> None:
    normalized = normalize_field_set(
        [FieldEntry(name="owner", status=EntryStatus.KEPT, type="id", relation="users")]
    )

    options = normalized.schema["owner"]
    assert options == {"type": "id", "relation": "users"}
    assert "status" not in options
    assert "existing" not in options
    assert "removed" not in options


def test_duplicate_names_keep_the_last_surviving_entry() -> None:
    fields = [
        FieldEntry(name="field1", type="string"),
        FieldEntry(name="other", type="number"),
        FieldEntry(name="field1", type="boolean", required=False),
    ]

    normalized = normalize_field_set(fields)

    assert list(normalized.schema) == ["field1", "other"]
    assert normalized.schema["field1"] == {"type": "boolean", "required": False}


def test_removed_duplicate_does_not_overwrite_surviving_entry() -> None:
    fields = [
        FieldEntry(name="email", status=EntryStatus.KEPT, type="string"),
        FieldEntry(name="email", status=EntryStatus.REMOVED, type="number"),
    ]

    assert normalize_field_set(fields).schema == {"email": {"type": "string"}}


def test_unique_entries_produce_index_declarations_in_entry_order() -> None:
    fields = [
        FieldEntry(name="email", type="string", unique=True),
        FieldEntry(name="nickname", type="string", unique=False),
        FieldEntry(name="legacy", status=EntryStatus.REMOVED, type="string", unique=True),
        FieldEntry(name="handle", type="string", unique=True),
    ]

    normalized = normalize_field_set(fields)

    assert normalized.indexes == (IndexDecl.unique_on("email"), IndexDecl.unique_on("handle"))
    assert [index.to_wire() for index in normalized.indexes] == [
        {"fields": ["email"], "options": {"unique": True}},
        {"fields": ["handle"], "options": {"unique": True}},
    ]
    assert normalized.schema["nickname"] == {"type": "string", "unique": False}


def test_malformed_entries_pass_through_unchanged() -> None:
    normalized = normalize_field_set([FieldEntry(name="", type=None, unique=True)])

    assert normalized.schema == {"": {"unique": True}}
    assert normalized.indexes == (IndexDecl.unique_on(""),)


def test_empty_input_yields_empty_outputs() -> None:
    normalized = normalize_field_set([])

    assert normalized.schema == {}
    assert normalized.indexes == ()
