"""Schema store diagnostics tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from avsc_schema_store.schema_resolution import SchemaStore

_LOGGER_NAME = "tests.schema_store.diagnostics"


def _store_with_schemas(root: Path) -> SchemaStore:
    (root / "a.avsc").write_text(
        json.dumps({"type": "record", "name": "a", "fields": [{"name": "id", "type": "int"}]}),
        encoding="utf-8",
    )
    (root / "e.avsc").write_text(
        json.dumps({"type": "enum", "name": "e", "symbols": ["ON", "OFF"]}),
        encoding="utf-8",
    )
    return SchemaStore(path=root, logger=logging.getLogger(_LOGGER_NAME))


def _messages(caplog: pytest.LogCaptureFixture) -> list[tuple[int, str]]:
    return [
        (record.levelno, record.getMessage())
        for record in caplog.records
        if record.name == _LOGGER_NAME
    ]


def test_cold_load_logs_name_and_definition(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    store = _store_with_schemas(tmp_path)
    caplog.set_level(logging.INFO, logger=_LOGGER_NAME)

    store.find("a")
    store.find("e")

    messages = _messages(caplog)
    assert messages[0][0] == logging.INFO
    assert messages[0][1].startswith("parse-schema | a | {")
    assert messages[1][0] == logging.ERROR
    assert messages[1][1].startswith("fields-nil-err | e | {")
    assert '"symbols"' in messages[1][1]


def test_cache_hits_log_without_definition(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    store = _store_with_schemas(tmp_path)
    store.find("a")
    store.find("e")
    caplog.set_level(logging.INFO, logger=_LOGGER_NAME)
    caplog.clear()

    store.find("a")
    store.find("e")

    assert _messages(caplog) == [
        (logging.INFO, "schema-ok | a"),
        (logging.WARNING, "fields-nil-err | e"),
    ]


def test_diagnostics_do_not_change_results(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    store = _store_with_schemas(tmp_path)
    caplog.set_level(logging.CRITICAL, logger=_LOGGER_NAME)

    enum_schema = store.find("e")

    assert enum_schema.symbols == ("ON", "OFF")
    assert _messages(caplog) == []
