"""Submission and pull use-case services."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import closing
from pathlib import Path

from collection_migrator.collection_api.collection_gateway import (
    CollectionApiError,
    CollectionGateway,
    HttpCollectionGateway,
)
from collection_migrator.collection_descriptors.descriptor_models import CollectionDescriptor
from collection_migrator.collection_descriptors.descriptor_reader import (
    write_collection_descriptor,
)
from collection_migrator.configuration import ConfigurationError, load_configuration
from collection_migrator.configuration.runtime_settings import ApiSettings
from collection_migrator.field_editing.edit_session import EditSession, EditSessionError
from collection_migrator.field_editing.session_store import load_edit_session
from collection_migrator.migration_planning.migration_steps import describe_step

from .submission_assembler import assemble_submission
from .submission_models import CollectionSubmission, PullRequest, SubmitOutcome, SubmitRequest

logger = logging.getLogger(__name__)

GatewayFactory = Callable[[ApiSettings], CollectionGateway]


class SubmissionError(Exception):
    """Raised when a submission or pull use case cannot be completed."""


def submit_edit_session(
    request: SubmitRequest,
    *,
    gateway_factory: GatewayFactory | None = None,
) -> SubmitOutcome:
    """Assemble the session, create or update the collection, then reload the listing.

    The session file is only discarded after the API accepted the submission,
    so a failed attempt can be retried unchanged.
    """
    resolved_gateway_factory = gateway_factory or HttpCollectionGateway
    try:
        configuration = load_configuration(request.config_path)
        session = load_edit_session(request.session_path)
    except (ConfigurationError, EditSessionError) as exc:
        raise SubmissionError(str(exc)) from exc

    submission = assemble_submission(session)
    logger.info(
        "Submitting collection %r with %d migration step(s)",
        submission.name,
        len(submission.migration_steps),
    )
    for step in submission.migration_steps:
        logger.info("  %s", describe_step(step))

    with closing(resolved_gateway_factory(configuration.api)) as gateway:
        try:
            stored = submit_collection(gateway, session, submission)
        except CollectionApiError as exc:
            logger.warning("Submission of collection %r failed: %s", submission.name, exc)
            raise SubmissionError(str(exc)) from exc
        known_collections = _reload_collection_names(gateway)

    session_path = Path(request.session_path).resolve()
    discarded = False
    if not request.keep_session:
        session_path.unlink(missing_ok=True)
        discarded = True

    return SubmitOutcome(
        collection=stored,
        created=not session.is_update,
        migration_steps=submission.migration_steps,
        known_collections=known_collections,
        session_path=session_path,
        session_discarded=discarded,
    )


def submit_collection(
    gateway: CollectionGateway, session: EditSession, submission: CollectionSubmission
) -> CollectionDescriptor:
    """Create a new collection or update the one the session was opened from."""
    payload = submission.to_payload()
    if session.previous is None:
        return gateway.create_collection(payload)
    return gateway.edit_collection(session.previous.name, payload)


def _reload_collection_names(gateway: CollectionGateway) -> tuple[str, ...]:
    # The submission is already stored here; a failed listing must not keep the session.
    try:
        return tuple(collection.name for collection in gateway.list_collections())
    except CollectionApiError as exc:
        logger.warning("Reloading the collection list failed: %s", exc)
        return ()


def pull_collection(
    request: PullRequest,
    *,
    gateway_factory: GatewayFactory | None = None,
) -> Path:
    """Fetch one persisted collection descriptor and write it to a file."""
    resolved_gateway_factory = gateway_factory or HttpCollectionGateway
    try:
        configuration = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise SubmissionError(str(exc)) from exc

    try:
        with closing(resolved_gateway_factory(configuration.api)) as gateway:
            descriptor = gateway.get_collection(request.collection_name)
    except CollectionApiError as exc:
        raise SubmissionError(str(exc)) from exc

    logger.info("Fetched collection %r with %d field(s)", descriptor.name, len(descriptor.schema))
    try:
        return write_collection_descriptor(descriptor, request.output_path)
    except OSError as exc:
        raise SubmissionError(str(exc)) from exc
