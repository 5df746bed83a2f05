"""Schema normalization entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class IndexDecl:
    """Index declaration submitted alongside a collection schema."""

    fields: tuple[str, ...]
    options: Mapping[str, Any]

    @classmethod
    def unique_on(cls, field_name: str) -> IndexDecl:
        return cls(fields=(field_name,), options={"unique": True})

    def to_wire(self) -> dict[str, Any]:
        return {"fields": list(self.fields), "options": dict(self.options)}


@dataclass(frozen=True)
class NormalizedFieldSet:
    """Schema mapping and index declarations derived from edited field entries."""

    schema: Mapping[str, Mapping[str, Any]]
    indexes: tuple[IndexDecl, ...]
