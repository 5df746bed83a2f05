"""Submission domain exports."""

from .submission_assembler import assemble_submission
from .submission_models import CollectionSubmission, PullRequest, SubmitOutcome, SubmitRequest
from .submit_use_case import (
    SubmissionError,
    pull_collection,
    submit_collection,
    submit_edit_session,
)

__all__ = [
    "CollectionSubmission",
    "PullRequest",
    "SubmitOutcome",
    "SubmitRequest",
    "SubmissionError",
    "assemble_submission",
    "pull_collection",
    "submit_collection",
    "submit_edit_session",
]
