"""Submission entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from collection_migrator.collection_descriptors.descriptor_models import CollectionDescriptor
from collection_migrator.migration_planning.migration_steps import MigrationStep
from collection_migrator.schema_normalization.normalized_models import IndexDecl


@dataclass(frozen=True)
class CollectionSubmission:
    """Create-or-update payload for one collection."""

    name: str
    exposed: bool
    template: bool
    schema: Mapping[str, Mapping[str, Any]]
    indexes: tuple[IndexDecl, ...]
    migration_steps: tuple[MigrationStep, ...]

    def to_payload(self) -> dict[str, Any]:
        """Render the JSON body expected by the collection API."""
        return {
            "name": self.name,
            "exposed": self.exposed,
            "template": self.template,
            "schema": {field: dict(options) for field, options in self.schema.items()},
            "indexes": [index.to_wire() for index in self.indexes],
            "migrationSteps": [step.to_wire() for step in self.migration_steps],
        }


@dataclass(frozen=True)
class SubmitRequest:
    """Input contract for submitting one edit session."""

    config_path: str
    session_path: str
    keep_session: bool = False


@dataclass(frozen=True)
class SubmitOutcome:
    """Output contract for one accepted submission."""

    collection: CollectionDescriptor
    created: bool
    migration_steps: tuple[MigrationStep, ...]
    known_collections: tuple[str, ...]
    session_path: Path
    session_discarded: bool


@dataclass(frozen=True)
class PullRequest:
    """Input contract for fetching one persisted collection descriptor."""

    config_path: str
    collection_name: str
    output_path: str
