"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Schema store configuration template for avsc-schema-store.
# Replace every <REQUIRED> placeholder before running resolve or load-all.
# Replace <OPTIONAL> placeholders only when your setup needs them.

schemas:
  # Directory holding one .avsc file per named type, namespaces as folders.
  # Relative paths resolve against this configuration file.
  path: "<REQUIRED>"

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL (default WARNING).
  level: "<OPTIONAL>"
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
