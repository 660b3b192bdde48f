"""Schema store errors."""

from __future__ import annotations

from pathlib import Path


class SchemaStoreError(Exception):
    """Base class for schema resolution failures."""


class SchemaNotFoundError(SchemaStoreError):
    """Raised when no schema file exists at the path implied by a name."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"could not find Avro schema at `{path}'")
        self.path = path


class DefinitionMismatchError(SchemaStoreError):
    """Raised when a schema file defines a different type than its path implies."""

    def __init__(self, expected: str, actual: str, path: Path) -> None:
        super().__init__(f"expected schema `{path}' to define type `{expected}', found `{actual}'")
        self.expected = expected
        self.actual = actual
        self.path = path


class SchemaParseError(SchemaStoreError):
    """Raised when a schema definition cannot be parsed or its references resolved."""
