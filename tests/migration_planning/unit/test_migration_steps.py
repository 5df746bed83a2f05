"""Migration step wire-shape tests."""

from __future__ import annotations

from collection_migrator.migration_planning import (
    MigrationStepType,
    RemoveField,
    RenameCollection,
    RenameField,
    describe_step,
)


def test_rename_collection_wire_shape_names_the_old_collection() -> None:
    step = RenameCollection(from_name="posts", to="articles")

    assert step.to_wire() == {"type": "rename-collection", "collection": "posts", "to": "articles"}


def test_rename_field_wire_shape() -> None:
    step = RenameField(collection="articles", from_name="body", to="content")

    assert step.to_wire() == {
        "type": "rename-field",
        "collection": "articles",
        "from": "body",
        "to": "content",
    }


def test_remove_field_wire_shape() -> None:
    step = RemoveField(collection="articles", name="legacy")

    assert step.to_wire() == {"type": "remove-field", "collection": "articles", "name": "legacy"}


def test_step_type_tags_match_wire_values() -> None:
    assert RenameCollection.step_type is MigrationStepType.RENAME_COLLECTION
    assert RenameField.step_type.value == "rename-field"
    assert RemoveField.step_type.value == "remove-field"


def test_describe_step_renders_operator_friendly_text() -> None:
    assert describe_step(RenameCollection(from_name="a", to="b")) == "rename collection 'a' to 'b'"
    assert describe_step(RenameField(collection="b", from_name="x", to="y")) == (
        "rename field 'x' of 'b' to 'y'"
    )
    assert describe_step(RemoveField(collection="b", name="z")) == "remove field 'z' from 'b'"
