"""Migration step entities and their wire representation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class MigrationStepType(str, Enum):
    """Wire tag of a migration step."""

    RENAME_COLLECTION = "rename-collection"
    RENAME_FIELD = "rename-field"
    REMOVE_FIELD = "remove-field"


@dataclass(frozen=True)
class RenameCollection:
    """Rename the collection itself; always applied before field-level steps."""

    step_type: ClassVar[MigrationStepType] = MigrationStepType.RENAME_COLLECTION

    from_name: str
    to: str

    def to_wire(self) -> dict[str, str]:
        return {"type": self.step_type.value, "collection": self.from_name, "to": self.to}


@dataclass(frozen=True)
class RenameField:
    """Rename one field of a collection."""

    step_type: ClassVar[MigrationStepType] = MigrationStepType.RENAME_FIELD

    collection: str
    from_name: str
    to: str

    def to_wire(self) -> dict[str, str]:
        return {
            "type": self.step_type.value,
            "collection": self.collection,
            "from": self.from_name,
            "to": self.to,
        }


@dataclass(frozen=True)
class RemoveField:
    """Remove one field from a collection."""

    step_type: ClassVar[MigrationStepType] = MigrationStepType.REMOVE_FIELD

    collection: str
    name: str

    def to_wire(self) -> dict[str, str]:
        return {"type": self.step_type.value, "collection": self.collection, "name": self.name}


MigrationStep = RenameCollection | RenameField | RemoveField


def describe_step(step: MigrationStep) -> str:
    """Return a one-line, operator-facing description of a step."""
    if isinstance(step, RenameCollection):
        return f"rename collection {step.from_name!r} to {step.to!r}"
    if isinstance(step, RenameField):
        return f"rename field {step.from_name!r} of {step.collection!r} to {step.to!r}"
    return f"remove field {step.name!r} from {step.collection!r}"
