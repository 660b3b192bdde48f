"""Schema store: resolves named schemas from a directory tree and caches them."""

from __future__ import annotations

import errno
import logging
from collections.abc import MutableMapping
from pathlib import Path
from typing import Protocol

from avsc_schema_store.configuration.loader import ConfigurationError
from avsc_schema_store.name_mapping.qualified_names import make_fullname, schema_path_for
from avsc_schema_store.schema_loading.bulk_loader import load_schemas
from avsc_schema_store.schema_parsing import (
    ParseFailure,
    ParseOutcome,
    Schema,
    UnresolvedReference,
    parse_schema_text,
)

from .store_errors import DefinitionMismatchError, SchemaNotFoundError, SchemaParseError

_NOT_FOUND_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG})


class SchemaParser(Protocol):
    """Parses definition text, adding the named types it defines to the cache."""

    def __call__(self, text: str, named_schemas: MutableMapping[str, Schema]) -> ParseOutcome: ...


class SchemaStore:
    """Resolves schemas by qualified name, loading missing dependencies on demand.

    Each named schema lives in its own ``.avsc`` file below ``path``, with the
    namespace mirrored as directories. Instances are not thread-safe; callers
    sharing one store across threads must serialize access.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        logger: logging.Logger | None = None,
        parser: SchemaParser | None = None,
    ) -> None:
        if not path:
            raise ConfigurationError("Please specify a schema path")
        if logger is None:
            raise ConfigurationError("Please give me a logger")
        self._path = Path(path)
        self._logger = logger
        self._parse: SchemaParser = parser or parse_schema_text
        self._schemas: dict[str, Schema] = {}

    @property
    def path(self) -> Path:
        """Root directory of the schema tree."""
        return self._path

    def __contains__(self, fullname: object) -> bool:
        return fullname in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def known_names(self) -> tuple[str, ...]:
        """Return a sorted snapshot of the cached qualified names."""
        return tuple(sorted(self._schemas))

    def find(self, name: str, namespace: str | None = None) -> Schema:
        """Resolve and return a schema.

        Args:
          name: Simple or fully qualified name of the schema.
          namespace: Namespace used when ``name`` is not already qualified.

        Returns:
          The parsed schema, cached for subsequent lookups.

        Raises:
          SchemaNotFoundError: If no file exists at the path implied by the name.
          DefinitionMismatchError: If the file defines a differently named type.
          SchemaParseError: If the file, or one of its dependencies, cannot be
            parsed, including reference cycles across files.
        """
        return self._find(make_fullname(name, namespace), ())

    resolve = find

    def load_schemas(self) -> tuple[str, ...]:
        """Load and cache every schema file below the store path."""
        return load_schemas(self)

    def _find(self, fullname: str, resolving: tuple[str, ...]) -> Schema:
        cached = self._schemas.get(fullname)
        if cached is not None:
            if cached.has_fields:
                self._logger.info("schema-ok | %s", fullname)
            else:
                self._logger.warning("fields-nil-err | %s", fullname)
            return cached

        if fullname in resolving:
            chain = " -> ".join((*resolving, fullname))
            raise SchemaParseError(f"circular schema reference: {chain}")

        schema_path = schema_path_for(self._path, fullname)
        text = self._read_definition(schema_path)
        resolved_dependencies: set[str] = set()
        while True:
            outcome = self._parse(text, self._schemas)
            if isinstance(outcome, UnresolvedReference):
                if outcome.name in resolved_dependencies:
                    raise SchemaParseError(
                        f"type `{outcome.name}' referenced by `{schema_path}' is still unknown"
                        " after loading it"
                    )
                resolved_dependencies.add(outcome.name)
                self._logger.debug("resolve-dependency | %s | %s", fullname, outcome.name)
                self._find(outcome.name, (*resolving, fullname))
                # Drop any partial registration before parsing the original again.
                self._schemas.pop(fullname, None)
                continue
            if isinstance(outcome, ParseFailure):
                raise SchemaParseError(f"failed to parse `{schema_path}': {outcome.detail}")
            return self._accept(fullname, schema_path, text, outcome.schema)

    def _accept(self, fullname: str, schema_path: Path, text: str, schema: Schema) -> Schema:
        definition = text.strip()
        if schema.has_fields:
            self._logger.info("parse-schema | %s | %s", fullname, definition)
        else:
            self._logger.error("fields-nil-err | %s | %s", fullname, definition)

        if schema.fullname is not None and schema.fullname != fullname:
            raise DefinitionMismatchError(fullname, schema.fullname, schema_path)

        # Unnamed definitions (primitives, arrays, unions) are not registered by
        # the parser; cache them under the name their path implies.
        return self._schemas.setdefault(fullname, schema)

    def _read_definition(self, schema_path: Path) -> str:
        try:
            return schema_path.read_text(encoding="utf-8")
        except OSError as exc:
            if exc.errno in _NOT_FOUND_ERRNOS:
                raise SchemaNotFoundError(schema_path) from exc
            raise
