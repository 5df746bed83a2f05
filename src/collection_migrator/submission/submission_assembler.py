"""Submission assembly service."""

from __future__ import annotations

from collection_migrator.field_editing.edit_session import EditSession
from collection_migrator.migration_planning.step_deriver import derive_migration_steps
from collection_migrator.schema_normalization.field_set_normalizer import normalize_field_set

from .submission_models import CollectionSubmission


def assemble_submission(session: EditSession) -> CollectionSubmission:
    """Combine normalized fields, derived migration steps and session flags.

    Recomputing from an unchanged session always yields an equal submission.
    """
    normalized = normalize_field_set(session.entries)
    previous = session.previous
    steps = derive_migration_steps(
        previous.name if previous else None,
        session.name,
        previous.schema_entries() if previous else None,
        session.entries,
    )
    return CollectionSubmission(
        name=session.name,
        exposed=session.exposed,
        template=session.template,
        schema=normalized.schema,
        indexes=normalized.indexes,
        migration_steps=steps,
    )
