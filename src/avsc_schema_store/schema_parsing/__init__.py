"""Schema parsing exports."""

from .avsc_parser import parse_schema_definition, parse_schema_text
from .parse_outcomes import ParsedSchema, ParseFailure, ParseOutcome, UnresolvedReference
from .schema_models import NAMED_TYPES, PRIMITIVE_TYPES, REFERENCE_TYPE, Schema, SchemaField

__all__ = [
    "NAMED_TYPES",
    "PRIMITIVE_TYPES",
    "REFERENCE_TYPE",
    "ParseFailure",
    "ParseOutcome",
    "ParsedSchema",
    "Schema",
    "SchemaField",
    "UnresolvedReference",
    "parse_schema_definition",
    "parse_schema_text",
]
