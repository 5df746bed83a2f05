"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ApiSettings:
    """Collection API connectivity configuration."""

    base_url: str
    collections_path: str
    timeout_seconds: int
    auth_token: str | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    api: ApiSettings
