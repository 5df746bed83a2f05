"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for collection-migrator.
# Replace every <REQUIRED> placeholder before running pull or submit.
# Replace <OPTIONAL> placeholders only when your setup needs them.

api:
  # Base URL of the collection API, e.g. https://app.example.com/api
  base_url: "<REQUIRED>"
  # Path of the collections resource below base_url (default: /_dev/collections).
  # collections_path: "<OPTIONAL>"
  # Sent as "Authorization: Bearer <token>" when set.
  # auth_token: "<OPTIONAL>"
  # timeout_seconds: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
