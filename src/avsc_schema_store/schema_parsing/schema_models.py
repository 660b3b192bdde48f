"""Parsed schema entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PRIMITIVE_TYPES = frozenset(
    {"null", "boolean", "int", "long", "float", "double", "bytes", "string"}
)
NAMED_TYPES = frozenset({"record", "error", "enum", "fixed"})
REFERENCE_TYPE = "reference"


@dataclass(frozen=True)
class SchemaField:
    """One record field."""

    name: str
    schema: Schema
    has_default: bool = False
    default: Any = None


@dataclass(frozen=True)
class Schema:  # pylint: disable=too-many-instance-attributes
    """In-memory representation of a parsed Avro schema node.

    Named types nested inside another schema are held as ``reference`` nodes
    carrying the referenced qualified name; the definition itself lives in the
    schema store under that name. The raw JSON ``definition`` does not take
    part in equality.
    """

    schema_type: str
    fullname: str | None = None
    fields: tuple[SchemaField, ...] | None = None
    symbols: tuple[str, ...] | None = None
    size: int | None = None
    items: Schema | None = None
    values: Schema | None = None
    branches: tuple[Schema, ...] | None = None
    definition: Any = field(default=None, compare=False, repr=False)

    @property
    def is_named(self) -> bool:
        """Return True when this node defines a named type."""
        return self.schema_type in NAMED_TYPES

    @property
    def has_fields(self) -> bool:
        """Return True when the schema carries a non-empty field list."""
        return bool(self.fields)
