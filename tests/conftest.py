from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the marketplace package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from marketplace.app import create_app  # noqa: E402
from marketplace.core.config import Settings  # noqa: E402


@pytest.fixture()
def make_settings(tmp_path):
    """Settings pointing every storage path at the test's tmp dir."""

    def _make(**overrides) -> Settings:
        values = {
            "data_file": str(tmp_path / "db.json"),
            "database_url": f"sqlite:///{tmp_path / 'marketplace.db'}",
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture()
def app(make_settings):
    return create_app(make_settings())


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def sql_client(make_settings):
    with TestClient(create_app(make_settings(storage_backend="sql"))) as test_client:
        yield test_client
