"""Avro schema (.avsc) parsing service."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from avsc_schema_store.name_mapping.qualified_names import make_fullname, split_fullname

from .parse_outcomes import ParsedSchema, ParseFailure, ParseOutcome, UnresolvedReference
from .schema_models import NAMED_TYPES, PRIMITIVE_TYPES, REFERENCE_TYPE, Schema, SchemaField

_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class _InvalidSchema(Exception):
    """Raised inside the parser for definitions that can never parse."""


class _UnknownTypeReference(Exception):
    """Raised inside the parser when a referenced named type is not known."""

    def __init__(self, fullname: str) -> None:
        super().__init__(fullname)
        self.fullname = fullname


def parse_schema_text(text: str, named_schemas: MutableMapping[str, Schema]) -> ParseOutcome:
    """Parse raw .avsc text against the already known named schemas.

    Named types defined by the text are added to ``named_schemas`` only when
    the whole definition parses. Existing entries are never removed or
    replaced.
    """
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        return ParseFailure(f"Invalid avsc schema JSON: {exc}")
    except RecursionError:
        return ParseFailure("Invalid avsc schema JSON: nesting is too deep")
    return parse_schema_definition(root, named_schemas)


def parse_schema_definition(
    definition: Any,
    named_schemas: MutableMapping[str, Schema],
    namespace: str | None = None,
) -> ParseOutcome:
    """Parse an already decoded Avro definition. See `parse_schema_text`."""
    parser = _DefinitionParser(named_schemas)
    try:
        schema = parser.parse(definition, namespace)
        parser.commit()
    except _UnknownTypeReference as exc:
        return UnresolvedReference(name=exc.fullname)
    except _InvalidSchema as exc:
        return ParseFailure(str(exc))
    except RecursionError:
        return ParseFailure("Avro schema nesting is too deep.")
    return ParsedSchema(schema=schema)


class _DefinitionParser:
    """Walks one definition, staging the named types it declares."""

    def __init__(self, named_schemas: MutableMapping[str, Schema]) -> None:
        self._known = named_schemas
        self._declared: set[str] = set()
        self._staged: dict[str, Schema] = {}

    def parse(self, node: Any, namespace: str | None) -> Schema:
        if isinstance(node, str):
            return self._parse_type_name(node, namespace)
        if isinstance(node, list):
            return self._parse_union(node, namespace)
        if isinstance(node, Mapping):
            return self._parse_mapping(node, namespace)
        raise _InvalidSchema(f"Unsupported Avro schema segment: {node!r}")

    def commit(self) -> None:
        additions: dict[str, Schema] = {}
        for fullname, schema in self._staged.items():
            existing = self._known.get(fullname)
            if existing is None:
                additions[fullname] = schema
            elif existing != schema:
                raise _InvalidSchema(f"The name {fullname} is already in use.")
        self._known.update(additions)

    def _parse_type_name(self, type_name: str, namespace: str | None) -> Schema:
        if type_name in PRIMITIVE_TYPES:
            return Schema(schema_type=type_name, definition=type_name)
        return Schema(
            schema_type=REFERENCE_TYPE,
            fullname=self._lookup(type_name, namespace),
            definition=type_name,
        )

    def _lookup(self, type_name: str, namespace: str | None) -> str:
        qualified = make_fullname(type_name, namespace)
        if qualified in self._declared or qualified in self._known:
            return qualified
        raise _UnknownTypeReference(qualified)

    def _parse_union(self, node: list[Any], namespace: str | None) -> Schema:
        branches = tuple(self.parse(branch, namespace) for branch in node)
        if any(branch.schema_type == "union" for branch in branches):
            raise _InvalidSchema("Avro unions may not immediately contain other unions.")
        return Schema(schema_type="union", branches=branches, definition=node)

    def _parse_mapping(self, node: Mapping[str, Any], namespace: str | None) -> Schema:
        node_type = node.get("type")
        if isinstance(node_type, list | Mapping):
            return self.parse(node_type, namespace)
        if not isinstance(node_type, str):
            raise _InvalidSchema("Avro schema nodes must define a 'type'.")
        if node_type in PRIMITIVE_TYPES:
            return Schema(schema_type=node_type, definition=node)
        if node_type in NAMED_TYPES:
            return self._parse_named(node_type, node, namespace)
        if node_type == "array":
            items = self.parse(_require(node, "items", "array"), namespace)
            return Schema(schema_type="array", items=items, definition=node)
        if node_type == "map":
            values = self.parse(_require(node, "values", "map"), namespace)
            return Schema(schema_type="map", values=values, definition=node)
        return self._parse_type_name(node_type, namespace)

    def _parse_named(
        self, node_type: str, node: Mapping[str, Any], namespace: str | None
    ) -> Schema:
        fullname = _declared_fullname(node_type, node, namespace)
        if fullname in self._declared:
            raise _InvalidSchema(f"The name {fullname} is already in use.")
        # Declared before the body so records may refer to themselves.
        self._declared.add(fullname)
        enclosing_namespace, _ = split_fullname(fullname)

        if node_type in {"record", "error"}:
            schema = Schema(
                schema_type=node_type,
                fullname=fullname,
                fields=self._parse_fields(fullname, node, enclosing_namespace),
                definition=node,
            )
        elif node_type == "enum":
            schema = Schema(
                schema_type="enum",
                fullname=fullname,
                symbols=_parse_symbols(fullname, node),
                definition=node,
            )
        else:
            size = node.get("size")
            if isinstance(size, bool) or not isinstance(size, int) or size < 0:
                raise _InvalidSchema(f"Avro fixed {fullname} requires a non-negative integer size.")
            schema = Schema(schema_type="fixed", fullname=fullname, size=size, definition=node)

        self._staged[fullname] = schema
        return schema

    def _parse_fields(
        self, fullname: str, node: Mapping[str, Any], namespace: str | None
    ) -> tuple[SchemaField, ...]:
        raw_fields = node.get("fields")
        if not isinstance(raw_fields, Sequence) or isinstance(raw_fields, str):
            raise _InvalidSchema(f"Avro record {fullname} requires fields.")
        fields: list[SchemaField] = []
        seen_names: set[str] = set()
        for raw_field in raw_fields:
            if not isinstance(raw_field, Mapping) or not isinstance(raw_field.get("name"), str):
                raise _InvalidSchema("Avro field definitions must include a name.")
            name = raw_field["name"]
            if name in seen_names:
                raise _InvalidSchema(f"Duplicate field {name} in record {fullname}.")
            seen_names.add(name)
            if "type" not in raw_field:
                raise _InvalidSchema(f"Field {fullname}.{name} must define a type.")
            fields.append(
                SchemaField(
                    name=name,
                    schema=self.parse(raw_field["type"], namespace),
                    has_default="default" in raw_field,
                    default=raw_field.get("default"),
                )
            )
        return tuple(fields)


def _declared_fullname(node_type: str, node: Mapping[str, Any], namespace: str | None) -> str:
    name = node.get("name")
    if not isinstance(name, str) or not name:
        raise _InvalidSchema(f"Avro {node_type} requires a name.")
    explicit_namespace = node.get("namespace")
    if explicit_namespace is not None and not isinstance(explicit_namespace, str):
        raise _InvalidSchema(f"Namespace of {name} must be a string.")
    fullname = make_fullname(
        name, explicit_namespace if explicit_namespace is not None else namespace
    )
    for segment in fullname.split("."):
        if not _NAME_PATTERN.fullmatch(segment):
            raise _InvalidSchema(f"Invalid Avro name: {fullname}")
    return fullname


def _parse_symbols(fullname: str, node: Mapping[str, Any]) -> tuple[str, ...]:
    symbols = node.get("symbols")
    if not isinstance(symbols, Sequence) or isinstance(symbols, str):
        raise _InvalidSchema(f"Avro enum {fullname} requires a symbols array.")
    normalized: list[str] = []
    for symbol in symbols:
        if not isinstance(symbol, str) or not _NAME_PATTERN.fullmatch(symbol):
            raise _InvalidSchema(f"Invalid symbol {symbol!r} in enum {fullname}.")
        if symbol in normalized:
            raise _InvalidSchema(f"Duplicate symbol {symbol} in enum {fullname}.")
        normalized.append(symbol)
    return tuple(normalized)


def _require(node: Mapping[str, Any], key: str, node_type: str) -> Any:
    if key not in node:
        raise _InvalidSchema(f"Avro {node_type} requires '{key}'.")
    return node[key]
