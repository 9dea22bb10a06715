"""Shared fixtures: a real SQLite store in a temporary directory."""

from __future__ import annotations

import pytest

from ims.infrastructure.bootstrap import open_store, product_repository


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "inventory.db"


@pytest.fixture
def store(db_path):
    store = open_store(db_path)
    yield store
    store.close()


@pytest.fixture
def repo(store):
    return product_repository(store)
