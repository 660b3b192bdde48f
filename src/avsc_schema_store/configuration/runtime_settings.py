"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaStoreSettings:
    """Location of the schema tree."""

    path: Path


@dataclass(frozen=True)
class LoggingSettings:
    """Diagnostics verbosity."""

    level: str


@dataclass(frozen=True)
class StoreConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    schemas: SchemaStoreSettings
    logging: LoggingSettings
