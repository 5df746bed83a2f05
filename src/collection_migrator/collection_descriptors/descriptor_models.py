"""Collection descriptor entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CollectionDescriptor:
    """Persisted collection definition as reported by the collection API."""

    name: str
    schema: Mapping[str, Mapping[str, Any]]
    exposed: bool = False
    template: bool = False

    def schema_entries(self) -> tuple[tuple[str, Mapping[str, Any]], ...]:
        """Return persisted fields as ordered ``(name, options)`` pairs."""
        return tuple(self.schema.items())

    def to_document(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "exposed": self.exposed,
            "template": self.template,
            "schema": {field: dict(options) for field, options in self.schema.items()},
        }
