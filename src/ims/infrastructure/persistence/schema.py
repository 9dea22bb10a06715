"""Creates the products table when it is missing."""

from __future__ import annotations

import logging

from ims.domain.exceptions import StoreError, StoreUnavailableError
from ims.infrastructure.persistence.store import StoreConnection

logger = logging.getLogger(__name__)

CREATE_PRODUCTS_TABLE = (
    "CREATE TABLE IF NOT EXISTS products ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "name TEXT NOT NULL,"
    "quantity INTEGER NOT NULL,"
    "price REAL NOT NULL);"
)


def ensure_schema(store: StoreConnection) -> None:
    """Create the products table if absent. Safe to call on every startup.

    Raises StoreUnavailableError if the statement is rejected; the
    application cannot run without the table.
    """
    try:
        with store.statement(CREATE_PRODUCTS_TABLE):
            pass
    except StoreError as exc:
        raise StoreUnavailableError(
            f"Can't initialize table 'products' in '{store.db_path}': {exc}"
        ) from exc
    logger.info("Table 'products' checked/created")
