"""Migration planning exports."""

from .field_correlation import Correlation, FieldCorrelator, PersistedField, PositionalCorrelator
from .migration_steps import (
    MigrationStep,
    MigrationStepType,
    RemoveField,
    RenameCollection,
    RenameField,
    describe_step,
)
from .step_deriver import derive_migration_steps

__all__ = [
    "Correlation",
    "FieldCorrelator",
    "PersistedField",
    "PositionalCorrelator",
    "MigrationStep",
    "MigrationStepType",
    "RemoveField",
    "RenameCollection",
    "RenameField",
    "describe_step",
    "derive_migration_steps",
]
