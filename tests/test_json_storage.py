"""
JsonDocumentStore behaviour against files in a temporary directory.
"""
from __future__ import annotations

import json
import threading

import pytest

from marketplace.repositories import (
    JsonDocumentStore,
    StorageReadError,
    StorageWriteError,
    default_document,
)
from marketplace.services.product_service import ProductService


@pytest.fixture()
def store(tmp_path):
    s = JsonDocumentStore(tmp_path / "db.json")
    s.initialize()
    return s


def test_missing_file_reads_as_empty_document(tmp_path):
    s = JsonDocumentStore(tmp_path / "absent.json")
    assert s.read() == default_document()


def test_initialize_writes_default_document(tmp_path):
    path = tmp_path / "data" / "db.json"
    JsonDocumentStore(path).initialize()

    assert json.loads(path.read_text(encoding="utf-8")) == {"products": [], "orders": [], "users": []}


def test_initialize_keeps_existing_data(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps({"products": [{"id": "1"}], "orders": [], "users": []}), encoding="utf-8")

    s = JsonDocumentStore(path)
    s.initialize()

    assert s.read()["products"] == [{"id": "1"}]


def test_missing_collections_are_filled(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps({"products": [{"id": "1"}]}), encoding="utf-8")

    doc = JsonDocumentStore(path).read()

    assert doc == {"products": [{"id": "1"}], "orders": [], "users": []}


@pytest.mark.parametrize("content", ["{oops", "[1, 2]", ""])
def test_unreadable_file_raises(tmp_path, content):
    path = tmp_path / "db.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(StorageReadError):
        JsonDocumentStore(path).read()


def test_write_replaces_whole_document(store):
    doc = {"products": [{"id": "a", "name": "Café"}], "orders": [], "users": [{"name": "legacy"}]}

    assert store.write(doc) is True

    raw = store.path.read_text(encoding="utf-8")
    assert "Café" in raw
    assert '\n  "products"' in raw
    assert store.read() == doc
    assert not store.path.with_name("db.json.tmp").exists()


def test_write_failure_returns_false(tmp_path):
    s = JsonDocumentStore(tmp_path / "missing-dir" / "db.json")
    assert s.write(default_document()) is False


def test_write_unserialisable_returns_false(store):
    assert store.write({"products": [{"id": object()}], "orders": [], "users": []}) is False
    assert store.read() == default_document()


def test_transaction_persists_changes(store):
    with store.transaction() as db:
        db["orders"].append({"id": "ORD-1"})

    assert store.read()["orders"] == [{"id": "ORD-1"}]


def test_transaction_discards_changes_on_error(store):
    with pytest.raises(RuntimeError):
        with store.transaction() as db:
            db["orders"].append({"id": "ORD-1"})
            raise RuntimeError("boom")

    assert store.read()["orders"] == []


def test_transaction_raises_when_write_fails(store, monkeypatch):
    monkeypatch.setattr(store, "write", lambda document: False)

    with pytest.raises(StorageWriteError):
        with store.transaction() as db:
            db["orders"].append({"id": "ORD-1"})


def test_transaction_preserves_users(store):
    store.write({"products": [], "orders": [], "users": [{"email": "a@example.com"}]})

    with store.transaction() as db:
        db["products"].append({"id": "p"})

    assert store.read()["users"] == [{"email": "a@example.com"}]


def test_concurrent_creates_are_not_lost(store):
    service = ProductService(store)

    def worker(n):
        for i in range(5):
            service.create_product({"name": f"w{n}-{i}", "sellerId": "S1"})

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store.read()["products"]) == 40
