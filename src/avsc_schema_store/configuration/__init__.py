"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
    ConfigurationError,
    load_configuration,
    normalize_log_level,
)
from .runtime_settings import LoggingSettings, SchemaStoreSettings, StoreConfiguration

__all__ = [
    "StoreConfiguration",
    "SchemaStoreSettings",
    "LoggingSettings",
    "ConfigurationError",
    "load_configuration",
    "normalize_log_level",
    "LOG_LEVELS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
