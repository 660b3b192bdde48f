"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import LoggingSettings, SchemaStoreSettings, StoreConfiguration

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
OPTIONAL_PLACEHOLDER = "<OPTIONAL>"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> StoreConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return StoreConfiguration(
        path=path,
        schemas=_parse_schemas_section(parsed.get("schemas"), path.parent),
        logging=_parse_logging_section(parsed.get("logging")),
    )


def _parse_schemas_section(value: Any, base_path: Path) -> SchemaStoreSettings:
    section = _require_mapping(value, "schemas")
    raw_path = _require_non_empty_string(section.get("path"), "schemas.path")
    schema_path = _resolve_path(base_path, raw_path)
    if not schema_path.is_dir():
        raise ConfigurationError(f"schemas.path is not a directory: {schema_path}")
    return SchemaStoreSettings(path=schema_path)


def _parse_logging_section(value: Any) -> LoggingSettings:
    if value is None:
        return LoggingSettings(level=DEFAULT_LOG_LEVEL)
    section = _require_mapping(value, "logging")
    raw_level = section.get("level")
    if raw_level is None or _is_optional_placeholder(raw_level):
        raw_level = DEFAULT_LOG_LEVEL
    return LoggingSettings(level=normalize_log_level(raw_level, "logging.level"))


def normalize_log_level(value: Any, field_name: str) -> str:
    """Validate a log level name and return it upper-cased."""
    level = _require_non_empty_string(value, field_name).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"{field_name} must be one of {', '.join(LOG_LEVELS)}.")
    return level


def _is_optional_placeholder(value: Any) -> bool:
    return isinstance(value, str) and value.strip().startswith(OPTIONAL_PLACEHOLDER)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


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
