"""Migration step derivation service."""

from __future__ import annotations

from collections.abc import Sequence

from collection_migrator.field_editing.field_entries import FieldEntry

from .field_correlation import FieldCorrelator, PersistedField, PositionalCorrelator
from .migration_steps import MigrationStep, RemoveField, RenameCollection, RenameField


def derive_migration_steps(
    previous_name: str | None,
    current_name: str,
    previous_schema: Sequence[PersistedField] | None,
    current_fields: Sequence[FieldEntry],
    *,
    correlator: FieldCorrelator | None = None,
) -> tuple[MigrationStep, ...]:
    """Derive ordered migration steps for an edit of an existing collection.

    Returns an empty tuple for a brand-new collection, i.e. when either the
    previous name or the previous schema is missing.

    A collection rename, if any, comes first so that field-level steps can be
    applied against the final collection name. Field-level steps follow in
    ascending correlation index: a removed entry yields ``RemoveField`` and is
    never also checked for a rename; otherwise a changed name yields
    ``RenameField``. Added fields and type changes yield nothing.
    """
    if previous_name is None or previous_schema is None:
        return ()

    resolved_correlator = correlator or PositionalCorrelator()
    steps: list[MigrationStep] = []
    if current_name != previous_name:
        steps.append(RenameCollection(from_name=previous_name, to=current_name))

    correlations = sorted(
        resolved_correlator.correlate(previous_schema, current_fields),
        key=lambda correlation: correlation.index,
    )
    for correlation in correlations:
        entry = correlation.entry
        if entry.removed:
            steps.append(RemoveField(collection=current_name, name=correlation.previous_name))
            continue
        if entry.name != correlation.previous_name:
            steps.append(
                RenameField(
                    collection=current_name,
                    from_name=correlation.previous_name,
                    to=entry.name,
                )
            )
    return tuple(steps)
