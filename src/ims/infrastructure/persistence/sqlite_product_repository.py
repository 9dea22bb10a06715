"""SQLite implementation of ProductRepository.

Every user-supplied value is passed as a bound parameter.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from typing import Any

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.product import InventorySummary, Product
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.persistence.store import StoreConnection

_COLUMNS = "id, name, quantity, price"


def like_pattern(term: str) -> str:
    """Build a ``%term%`` LIKE pattern that matches ``term`` literally."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqliteProductRepository(ProductRepository):

    def __init__(self, store: StoreConnection) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> Product:
        with self._store.statement(
            "INSERT INTO products (name, quantity, price) VALUES (?, ?, ?);",
            (product.name, product.quantity, product.price),
        ) as cursor:
            new_id = cursor.lastrowid
        return Product(
            id=new_id,
            name=product.name,
            quantity=product.quantity,
            price=product.price,
        )

    def get_by_id(self, product_id: int) -> Product | None:
        with self._store.statement(
            f"SELECT {_COLUMNS} FROM products WHERE id = ?;", (product_id,)
        ) as cursor:
            row = cursor.fetchone()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> Generator[Product, None, None]:
        return self._select(f"SELECT {_COLUMNS} FROM products;")

    def update(self, product: Product) -> None:
        with self._store.statement(
            "UPDATE products SET name = ?, quantity = ?, price = ? WHERE id = ?;",
            (product.name, product.quantity, product.price, product.id),
        ) as cursor:
            if cursor.rowcount == 0:
                raise EntityNotFoundError(f"No product found with ID {product.id}")

    def delete(self, product_id: int) -> None:
        with self._store.statement(
            "DELETE FROM products WHERE id = ?;", (product_id,)
        ) as cursor:
            if cursor.rowcount == 0:
                raise EntityNotFoundError(f"No product found with ID {product_id}")

    def search_by_name(self, term: str) -> Generator[Product, None, None]:
        return self._select(
            f"SELECT {_COLUMNS} FROM products "
            "WHERE LOWER(name) LIKE LOWER(?) ESCAPE '\\';",
            (like_pattern(term),),
        )

    def filter_by_quantity(self, threshold: int) -> Generator[Product, None, None]:
        return self._select(
            f"SELECT {_COLUMNS} FROM products WHERE quantity < ? ORDER BY quantity, id;",
            (threshold,),
        )

    def aggregate(self) -> InventorySummary:
        with self._store.statement(
            "SELECT COUNT(*), COALESCE(SUM(quantity * price), 0.0) FROM products;"
        ) as cursor:
            count, total = cursor.fetchone()
        return InventorySummary(count=count, total_value=float(total or 0.0))

    # --- Row helpers ----------------------------------------------------------

    def _select(
        self, sql: str, params: Sequence[Any] = ()
    ) -> Generator[Product, None, None]:
        # Nothing executes until the caller starts iterating; each call
        # returns a fresh scan. The cursor stays open until the generator
        # is exhausted or closed.
        with self._store.statement(sql, params) as cursor:
            for row in cursor:
                yield self._to_domain(row)

    @staticmethod
    def _to_domain(row: tuple) -> Product:
        # Stored rows are shown as they are, even ones written by other tools.
        product_id, name, quantity, price = row
        return Product(id=product_id, name=name, quantity=quantity, price=price)
