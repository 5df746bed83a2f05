"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import DEFAULT_COLLECTIONS_PATH, ConfigurationError, load_configuration
from .runtime_settings import ApiSettings, Configuration

__all__ = [
    "ApiSettings",
    "Configuration",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_COLLECTIONS_PATH",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
