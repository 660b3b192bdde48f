"""Schema resolution exports."""

from .schema_store import SchemaStore
from .store_errors import (
    DefinitionMismatchError,
    SchemaNotFoundError,
    SchemaParseError,
    SchemaStoreError,
)

__all__ = [
    "DefinitionMismatchError",
    "SchemaNotFoundError",
    "SchemaParseError",
    "SchemaStore",
    "SchemaStoreError",
]
