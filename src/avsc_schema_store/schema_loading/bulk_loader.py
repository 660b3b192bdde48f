"""Bulk loading of every schema file in a schema tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from avsc_schema_store.name_mapping.qualified_names import SCHEMA_FILE_EXTENSION, fullname_for_path

if TYPE_CHECKING:
    from avsc_schema_store.schema_resolution.schema_store import SchemaStore

_LOGGER = logging.getLogger("avsc_schema_store.schema_loading")
_LOGGER.addHandler(logging.NullHandler())


def discover_schema_files(root: Path | str) -> tuple[Path, ...]:
    """Return every schema file below ``root``, sorted."""
    return tuple(
        sorted(
            path
            for path in Path(root).rglob(f"*{SCHEMA_FILE_EXTENSION}")
            if path.is_file()
        )
    )


def load_schemas(store: SchemaStore) -> tuple[str, ...]:
    """Resolve every schema file below the store path into the store cache.

    Files already pulled in as dependencies of an earlier file are cache hits.

    Returns:
      Qualified names of the visited files, in visiting order.
    """
    names: list[str] = []
    for schema_file in discover_schema_files(store.path):
        fullname = fullname_for_path(store.path, schema_file)
        store.find(fullname)
        names.append(fullname)
    _LOGGER.info("loaded %d schema files from %s", len(names), store.path)
    return tuple(names)
