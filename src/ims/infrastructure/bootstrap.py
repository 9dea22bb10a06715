"""Composition root: opens the store and wires the repository.

This is the only place in the codebase that knows about all layers. The
store is created here and passed explicitly to whatever needs it.
"""

from __future__ import annotations

from pathlib import Path

from ims.domain.exceptions import StoreUnavailableError
from ims.infrastructure.persistence.schema import ensure_schema
from ims.infrastructure.persistence.sqlite_product_repository import (
    SqliteProductRepository,
)
from ims.infrastructure.persistence.store import StoreConnection

DEFAULT_DB_PATH = Path("inventory.db")


def open_store(db_path: Path | str = DEFAULT_DB_PATH) -> StoreConnection:
    """Open the database and make sure the products table exists.

    Raises StoreUnavailableError; the connection is closed again if the
    schema cannot be created.
    """
    store = StoreConnection(db_path).open()
    try:
        ensure_schema(store)
    except StoreUnavailableError:
        store.close()
        raise
    return store


def product_repository(store: StoreConnection) -> SqliteProductRepository:
    return SqliteProductRepository(store)
