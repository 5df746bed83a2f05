"""Field editing exports."""

from .edit_session import EditSession, EditSessionError
from .field_entries import FIELD_OPTION_KEYS, EntryStatus, FieldEntry
from .schema_reconstruction import (
    DEFAULT_FIELD_TYPE,
    append_schema_fields,
    next_default_field_name,
)
from .session_store import load_edit_session, save_edit_session

__all__ = [
    "DEFAULT_FIELD_TYPE",
    "EditSession",
    "EditSessionError",
    "EntryStatus",
    "FIELD_OPTION_KEYS",
    "FieldEntry",
    "append_schema_fields",
    "load_edit_session",
    "next_default_field_name",
    "save_edit_session",
]
