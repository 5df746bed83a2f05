"""Collection edit-session state and edit actions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from collection_migrator.collection_descriptors.descriptor_models import CollectionDescriptor

from .field_entries import EntryStatus, FieldEntry
from .schema_reconstruction import (
    DEFAULT_FIELD_TYPE,
    append_schema_fields,
    next_default_field_name,
    type_specific_options,
)


class EditSessionError(Exception):
    """Raised for invalid edit-session files or edit actions."""


@dataclass
class EditSession:
    """Field entries and collection flags owned by one edit of one collection.

    ``previous`` holds the persisted descriptor the session was opened from and
    is ``None`` when the session creates a new collection.
    """

    name: str
    entries: list[FieldEntry] = field(default_factory=list)
    exposed: bool = True
    template: bool = False
    previous: CollectionDescriptor | None = None

    @classmethod
    def for_new_collection(cls, name: str = "", *, blank_field: bool = True) -> EditSession:
        """Open a session for a new collection, optionally with one default entry."""
        session = cls(name=name)
        if blank_field:
            session.add_field()
        return session

    @classmethod
    def from_descriptor(cls, descriptor: CollectionDescriptor) -> EditSession:
        """Open a session pre-populated with one kept entry per persisted field."""
        entries: list[FieldEntry] = []
        append_schema_fields(entries, descriptor.schema)
        return cls(
            name=descriptor.name,
            entries=entries,
            exposed=descriptor.exposed,
            template=descriptor.template,
            previous=descriptor,
        )

    @property
    def is_update(self) -> bool:
        return self.previous is not None

    def rename_collection(self, new_name: str) -> None:
        self.name = new_name

    def add_field(
        self, name: str | None = None, field_type: str = DEFAULT_FIELD_TYPE
    ) -> FieldEntry:
        if name is None:
            name = next_default_field_name(entry.name for entry in self.entries)
        entry = FieldEntry(name=name, status=EntryStatus.NEW, type=field_type)
        self.entries.append(entry)
        return entry

    def remove_field(self, index: int) -> None:
        """Mark a persisted entry as removed; drop an entry added in this session."""
        entry = self._entry_at(index)
        if entry.existing:
            self.entries[index] = replace(entry, status=EntryStatus.REMOVED)
            return
        del self.entries[index]

    def restore_field(self, index: int) -> None:
        entry = self._entry_at(index)
        if entry.removed:
            self.entries[index] = replace(entry, status=EntryStatus.KEPT)

    def rename_field(self, index: int, new_name: str) -> None:
        entry = self._entry_at(index)
        self.entries[index] = replace(entry, name=new_name)

    def retype_field(self, index: int, field_type: str) -> None:
        """Change a field type, dropping options that belong to the old type."""
        entry = self._entry_at(index)
        self.entries[index] = replace(
            entry, type=field_type, **type_specific_options(field_type, entry.options())
        )

    def set_field_options(
        self,
        index: int,
        *,
        required: bool | None = None,
        unique: bool | None = None,
        relation: str | None = None,
    ) -> None:
        entry = self._entry_at(index)
        changes: dict[str, Any] = {
            key: value
            for key, value in (("required", required), ("unique", unique), ("relation", relation))
            if value is not None
        }
        if "relation" in changes and entry.type != "id":
            raise EditSessionError(
                f"Field '{entry.name}' has type '{entry.type}'; only 'id' fields take a relation."
            )
        self.entries[index] = replace(entry, **changes)

    def _entry_at(self, index: int) -> FieldEntry:
        if not 0 <= index < len(self.entries):
            raise EditSessionError(
                f"No field entry at index {index}; the session has {len(self.entries)} entries."
            )
        return self.entries[index]
