"""Field editing entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

FIELD_OPTION_KEYS = ("type", "required", "unique", "relation", "items", "schema")


class EntryStatus(str, Enum):
    """Edit-session state of one field entry."""

    KEPT = "kept"
    REMOVED = "removed"
    NEW = "new"


@dataclass(frozen=True)
class FieldEntry:  # pylint: disable=too-many-instance-attributes
    """One schema-field row of an edit session."""

    name: str
    status: EntryStatus = EntryStatus.NEW
    type: str | None = None
    required: bool | None = None
    unique: bool | None = None
    relation: str | None = None
    items: Any = None
    schema: Any = None

    @property
    def existing(self) -> bool:
        """Return True when the entry originated from the persisted schema."""
        return self.status is not EntryStatus.NEW

    @property
    def removed(self) -> bool:
        """Return True when the entry is marked for deletion."""
        return self.status is EntryStatus.REMOVED

    def options(self) -> dict[str, Any]:
        """Return the field-definition attributes that are set, without session bookkeeping."""
        values = {key: getattr(self, key) for key in FIELD_OPTION_KEYS}
        return {key: value for key, value in values.items() if value is not None}
