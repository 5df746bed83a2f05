"""Edit-session file persistence."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from collection_migrator.collection_descriptors.descriptor_reader import (
    DescriptorError,
    parse_collection_descriptor,
)

from .edit_session import EditSession, EditSessionError
from .field_entries import FIELD_OPTION_KEYS, EntryStatus, FieldEntry


def load_edit_session(path: Path | str) -> EditSession:
    """Read and validate an edit-session YAML file."""
    session_path = Path(path)
    if not session_path.exists():
        raise EditSessionError(f"Edit session file not found: {session_path}")
    try:
        document = yaml.safe_load(session_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise EditSessionError(f"Failed to parse edit session file: {exc}") from exc
    return parse_edit_session(document)


def save_edit_session(session: EditSession, path: Path | str) -> Path:
    destination = Path(path)
    destination.write_text(
        yaml.safe_dump(dump_edit_session(session), sort_keys=False), encoding="utf-8"
    )
    return destination.resolve()


def dump_edit_session(session: EditSession) -> dict[str, Any]:
    document: dict[str, Any] = {
        "name": session.name,
        "exposed": session.exposed,
        "template": session.template,
    }
    if session.previous is not None:
        document["previous"] = session.previous.to_document()
    document["fields"] = [
        {"name": entry.name, "status": entry.status.value, **entry.options()}
        for entry in session.entries
    ]
    return document


def parse_edit_session(document: Any) -> EditSession:
    if not isinstance(document, Mapping):
        raise EditSessionError("Edit session root must be a mapping.")

    name = document.get("name")
    if name is None:
        name = ""
    if not isinstance(name, str):
        raise EditSessionError("Edit session name must be a string.")

    previous = None
    if document.get("previous") is not None:
        try:
            previous = parse_collection_descriptor(document["previous"])
        except DescriptorError as exc:
            raise EditSessionError(f"Invalid previous collection: {exc}") from exc

    entries = _parse_entries(document.get("fields"), allow_existing=previous is not None)
    return EditSession(
        name=name,
        entries=entries,
        exposed=_require_flag(document.get("exposed", True), "exposed"),
        template=_require_flag(document.get("template", False), "template"),
        previous=previous,
    )


def _parse_entries(value: Any, *, allow_existing: bool) -> list[FieldEntry]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise EditSessionError("Edit session fields must be a list.")

    entries: list[FieldEntry] = []
    for index, raw_entry in enumerate(value):
        if not isinstance(raw_entry, Mapping):
            raise EditSessionError(f"Field entry {index} must be a mapping.")
        entry_name = raw_entry.get("name")
        if entry_name is None:
            entry_name = ""
        if not isinstance(entry_name, str):
            raise EditSessionError(f"Field entry {index} name must be a string.")
        status = _parse_status(raw_entry.get("status", EntryStatus.NEW.value), index)
        if status is not EntryStatus.NEW and not allow_existing:
            raise EditSessionError(
                f"Field entry {index} is '{status.value}' but the session has no previous "
                "collection; only 'new' entries are allowed."
            )
        unknown = set(raw_entry) - {"name", "status", *FIELD_OPTION_KEYS}
        if unknown:
            raise EditSessionError(
                f"Field entry {index} has unknown keys: {', '.join(sorted(map(str, unknown)))}"
            )
        options = {key: raw_entry.get(key) for key in FIELD_OPTION_KEYS}
        entries.append(FieldEntry(name=entry_name, status=status, **options))
    return entries


def _parse_status(value: Any, index: int) -> EntryStatus:
    try:
        return EntryStatus(value)
    except ValueError as exc:
        allowed = ", ".join(status.value for status in EntryStatus)
        raise EditSessionError(
            f"Field entry {index} status must be one of: {allowed}."
        ) from exc


def _require_flag(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise EditSessionError(f"Edit session {field_name} must be a boolean.")
    return value
