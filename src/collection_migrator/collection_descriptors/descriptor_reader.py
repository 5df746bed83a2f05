"""Collection descriptor parsing and file handling."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .descriptor_models import CollectionDescriptor


class DescriptorError(Exception):
    """Raised when a collection descriptor is malformed."""


def parse_collection_descriptor(document: Any) -> CollectionDescriptor:
    """Validate a decoded descriptor document and build a ``CollectionDescriptor``."""
    if not isinstance(document, Mapping):
        raise DescriptorError("Collection descriptor must be a mapping.")

    name = document.get("name")
    if not isinstance(name, str) or not name.strip():
        raise DescriptorError("Collection descriptor requires a non-empty name.")

    raw_schema = document.get("schema")
    if raw_schema is None:
        raw_schema = {}
    if not isinstance(raw_schema, Mapping):
        raise DescriptorError(f"Schema of collection '{name}' must be a mapping.")

    schema: dict[str, dict[str, Any]] = {}
    for field_name, options in raw_schema.items():
        if not isinstance(field_name, str):
            raise DescriptorError(f"Field names of collection '{name}' must be strings.")
        if not isinstance(options, Mapping):
            raise DescriptorError(f"Options of field '{name}.{field_name}' must be a mapping.")
        if not isinstance(options.get("type"), str):
            raise DescriptorError(f"Field '{name}.{field_name}' requires a string type.")
        schema[field_name] = dict(options)

    return CollectionDescriptor(
        name=name,
        schema=schema,
        exposed=_optional_flag(document.get("exposed"), f"{name}.exposed"),
        template=_optional_flag(document.get("template"), f"{name}.template"),
    )


def load_collection_descriptor(path: Path | str) -> CollectionDescriptor:
    """Read a JSON or YAML descriptor file."""
    descriptor_path = Path(path)
    if not descriptor_path.exists():
        raise DescriptorError(f"Collection descriptor not found: {descriptor_path}")
    try:
        document = yaml.safe_load(descriptor_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise DescriptorError(f"Failed to parse collection descriptor: {exc}") from exc
    return parse_collection_descriptor(document)


def write_collection_descriptor(descriptor: CollectionDescriptor, path: Path | str) -> Path:
    """Write a descriptor as JSON when the suffix is ``.json``, YAML otherwise."""
    destination = Path(path)
    document = descriptor.to_document()
    if destination.suffix.lower() == ".json":
        text = json.dumps(document, indent=2) + "\n"
    else:
        text = yaml.safe_dump(document, sort_keys=False)
    destination.write_text(text, encoding="utf-8")
    return destination.resolve()


def _optional_flag(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DescriptorError(f"{field_name} must be a boolean.")
    return value
