"""Abstract repository for Product records.

Defined in the domain layer so the domain never depends on
infrastructure. The SQLite implementation lives in the infrastructure
layer; tests use an in-memory fake.

Implementations raise ``StoreError`` subclasses when the store rejects a
statement and ``EntityNotFoundError`` when an update or delete matches no
row.

Query methods return generators that hold an open statement until they
are exhausted or closed; callers that may stop early wrap them in
``contextlib.closing``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Generator

from ims.domain.model.product import InventorySummary, Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned id."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its id, or None if not found."""

    @abstractmethod
    def list_all(self) -> Generator[Product, None, None]:
        """Yield every product in the store's natural scan order."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace name, quantity and price of the row matching ``product.id``."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove the row matching ``product_id``."""

    @abstractmethod
    def search_by_name(self, term: str) -> Generator[Product, None, None]:
        """Yield products whose name contains ``term``, ignoring case."""

    @abstractmethod
    def filter_by_quantity(self, threshold: int) -> Generator[Product, None, None]:
        """Yield products with quantity below ``threshold``, lowest first."""

    @abstractmethod
    def aggregate(self) -> InventorySummary:
        """Return the product count and total inventory value."""
