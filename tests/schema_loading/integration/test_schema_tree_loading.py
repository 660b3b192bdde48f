"""Bulk loading integration tests over a realistic schema tree."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest
from avsc_schema_store.schema_loading import discover_schema_files
from avsc_schema_store.schema_resolution import SchemaStore

_LOGGER = logging.getLogger("tests.schema_tree")

_TREE: dict[str, Any] = {
    "com/shop/Order.avsc": {
        "type": "record",
        "name": "Order",
        "namespace": "com.shop",
        "fields": [
            {"name": "id", "type": "string"},
            {"name": "customer", "type": "com.shop.people.Customer"},
            {"name": "lines", "type": {"type": "array", "items": "OrderLine"}},
            {"name": "status", "type": "Status"},
        ],
    },
    "com/shop/OrderLine.avsc": {
        "type": "record",
        "name": "OrderLine",
        "namespace": "com.shop",
        "fields": [
            {"name": "sku", "type": "string"},
            {"name": "amount", "type": "com.shop.Money"},
        ],
    },
    "com/shop/Money.avsc": {
        "type": "fixed",
        "name": "Money",
        "namespace": "com.shop",
        "size": 8,
    },
    "com/shop/Status.avsc": {
        "type": "enum",
        "name": "Status",
        "namespace": "com.shop",
        "symbols": ["OPEN", "SHIPPED"],
    },
    "com/shop/people/Customer.avsc": {
        "type": "record",
        "name": "Customer",
        "namespace": "com.shop.people",
        "fields": [
            {"name": "name", "type": "string"},
            {
                "name": "address",
                "type": {
                    "type": "record",
                    "name": "Address",
                    "fields": [{"name": "city", "type": "string"}],
                },
            },
        ],
    },
    "Tag.avsc": ["null", "string"],
}


@pytest.fixture
def schema_tree(tmp_path: Path) -> Path:
    for relative_path, definition in _TREE.items():
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(definition, indent=2), encoding="utf-8")
    return tmp_path


def _load_in_order(root: Path, names: list[str]) -> SchemaStore:
    store = SchemaStore(path=root, logger=_LOGGER)
    for name in names:
        store.find(name)
    return store


def test_bulk_load_populates_every_named_type(schema_tree: Path) -> None:
    store = SchemaStore(path=schema_tree, logger=_LOGGER)

    store.load_schemas()

    assert store.known_names() == (
        "Tag",
        "com.shop.Money",
        "com.shop.Order",
        "com.shop.OrderLine",
        "com.shop.Status",
        "com.shop.people.Address",
        "com.shop.people.Customer",
    )


def test_bulk_load_is_idempotent(schema_tree: Path) -> None:
    store = SchemaStore(path=schema_tree, logger=_LOGGER)

    store.load_schemas()
    first = {name: store.find(name) for name in store.known_names()}
    store.load_schemas()
    second = {name: store.find(name) for name in store.known_names()}

    assert first == second


def test_enumeration_order_does_not_change_cache_contents(schema_tree: Path) -> None:
    names = [
        path.relative_to(schema_tree).with_suffix("").as_posix().replace("/", ".")
        for path in discover_schema_files(schema_tree)
    ]

    forward = _load_in_order(schema_tree, names)
    backward = _load_in_order(schema_tree, list(reversed(names)))

    assert forward.known_names() == backward.known_names()
    for name in forward.known_names():
        assert forward.find(name) == backward.find(name)


def test_unqualified_reference_binds_to_enclosing_namespace_in_any_order(tmp_path: Path) -> None:
    for relative_path, definition in {
        "Foo.avsc": {"type": "record", "name": "Foo", "fields": [{"name": "a", "type": "int"}]},
        "ns/Foo.avsc": {
            "type": "record",
            "name": "Foo",
            "namespace": "ns",
            "fields": [{"name": "b", "type": "string"}],
        },
        "ns/Bar.avsc": {
            "type": "record",
            "name": "Bar",
            "namespace": "ns",
            "fields": [{"name": "foo", "type": "Foo"}],
        },
    }.items():
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(definition), encoding="utf-8")

    null_namespace_first = _load_in_order(tmp_path, ["Foo", "ns.Bar", "ns.Foo"])
    namespaced_first = _load_in_order(tmp_path, ["ns.Foo", "ns.Bar", "Foo"])
    bulk = SchemaStore(path=tmp_path, logger=_LOGGER)
    bulk.load_schemas()

    for store in (null_namespace_first, namespaced_first, bulk):
        bar = store.find("ns.Bar")
        assert (bar.fields or ())[0].schema.fullname == "ns.Foo"
    assert null_namespace_first.find("ns.Bar") == namespaced_first.find("ns.Bar")
    assert null_namespace_first.known_names() == namespaced_first.known_names()
