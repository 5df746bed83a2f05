"""Field-set normalization service."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from collection_migrator.field_editing.field_entries import FieldEntry

from .normalized_models import IndexDecl, NormalizedFieldSet


def normalize_field_set(fields: Iterable[FieldEntry]) -> NormalizedFieldSet:
    """Convert ordered edit-session entries into a schema mapping and unique indexes.

    Removed entries are skipped. When two surviving entries share a name the later
    one overwrites the earlier one in the schema mapping, while both still
    contribute an index declaration if marked unique. Names are not validated.
    """
    schema: dict[str, dict[str, Any]] = {}
    indexes: list[IndexDecl] = []
    for entry in fields:
        if entry.removed:
            continue
        schema[entry.name] = entry.options()
        if entry.unique:
            indexes.append(IndexDecl.unique_on(entry.name))
    return NormalizedFieldSet(schema=schema, indexes=tuple(indexes))
