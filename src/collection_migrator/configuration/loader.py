"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import ApiSettings, Configuration

DEFAULT_COLLECTIONS_PATH = "/_dev/collections"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(path=path, api=_parse_api_section(parsed.get("api")))


def _parse_api_section(value: Any) -> ApiSettings:
    section = _require_mapping(value, "api")
    base_url = _require_non_empty_string(section.get("base_url"), "api.base_url")
    if not base_url.startswith(("http://", "https://")):
        raise ConfigurationError("api.base_url must start with http:// or https://.")
    collections_path = _require_non_empty_string(
        section.get("collections_path", DEFAULT_COLLECTIONS_PATH), "api.collections_path"
    )
    if not collections_path.startswith("/"):
        collections_path = f"/{collections_path}"
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "api.timeout_seconds"
    )
    auth_token = _optional_string(section.get("auth_token"), "api.auth_token")
    return ApiSettings(
        base_url=base_url.rstrip("/"),
        collections_path=collections_path.rstrip("/"),
        timeout_seconds=timeout_seconds,
        auth_token=auth_token,
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
