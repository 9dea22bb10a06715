"""Plain output containers handed from the handlers to the CLI."""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.product import InventorySummary, Product


@dataclass(frozen=True)
class ProductDTO:
    """A single product row as displayed to the user."""

    id: int
    name: str
    quantity: int
    price: float

    @classmethod
    def from_domain(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            quantity=product.quantity,
            price=product.price,
        )


@dataclass(frozen=True)
class InventorySummaryDTO:
    total_products: int
    total_value: float

    @classmethod
    def from_domain(cls, summary: InventorySummary) -> InventorySummaryDTO:
        return cls(total_products=summary.count, total_value=summary.total_value)
