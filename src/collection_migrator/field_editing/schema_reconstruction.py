"""Rebuilding edit-session entries from a persisted schema."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .field_entries import EntryStatus, FieldEntry

DEFAULT_FIELD_TYPE = "string"

# Options only meaningful for one field type, keyed by option name.
_TYPE_SPECIFIC_OPTIONS = {"relation": "id", "items": "array", "schema": "object"}


def type_specific_options(field_type: str | None, options: Mapping[str, Any]) -> dict[str, Any]:
    """Keep each type-specific option only when ``field_type`` owns it."""
    return {
        key: options.get(key) if field_type == owner else None
        for key, owner in _TYPE_SPECIFIC_OPTIONS.items()
    }


def entry_from_persisted_field(name: str, options: Mapping[str, Any]) -> FieldEntry:
    field_type = options.get("type")
    return FieldEntry(
        name=name,
        status=EntryStatus.KEPT,
        type=field_type,
        required=options.get("required"),
        unique=options.get("unique"),
        **type_specific_options(field_type, options),
    )


def append_schema_fields(
    entries: list[FieldEntry], schema: Mapping[str, Mapping[str, Any]]
) -> None:
    """Append one kept entry per persisted field, in schema order."""
    for field_name, options in schema.items():
        entries.append(entry_from_persisted_field(field_name, options))


def next_default_field_name(names: Iterable[str]) -> str:
    """Return the first of ``field1``, ``field2``, ... not already taken."""
    taken = set(names)
    number = 1
    while f"field{number}" in taken:
        number += 1
    return f"field{number}"
