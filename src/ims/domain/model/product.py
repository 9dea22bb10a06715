"""Product record, the only entity in the inventory.

A product is created without an id; the store assigns one on insert and it
never changes afterwards. ``Product.create`` is the validated way in for
values entered by a user; rows read back from the store are rebuilt with
the plain constructor and shown as they are.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ims.domain.exceptions import ValidationError


@dataclass
class Product:
    """A single inventory entry.

    Invariants enforced by ``create``:
    - ``name`` is not blank (it is stored exactly as given)
    - ``quantity`` is an integer >= 0
    - ``price`` is a finite number >= 0.0
    """

    name: str
    quantity: int
    price: float
    id: int | None = None

    @classmethod
    def create(
        cls, name: str, quantity: int, price: float, id: int | None = None
    ) -> Product:
        cls._validate(name, quantity, price)
        return cls(name=name, quantity=quantity, price=float(price), id=id)

    @property
    def inventory_value(self) -> float:
        return self.quantity * self.price

    @staticmethod
    def _validate(name: str, quantity: int, price: float) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name cannot be empty")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise ValidationError(f"Quantity cannot be negative, got {quantity}")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValidationError(
                f"Price must be a number, got {type(price).__name__}"
            )
        if not math.isfinite(price):
            raise ValidationError(f"Price must be a finite number, got {price}")
        if price < 0:
            raise ValidationError(f"Price cannot be negative, got {price}")


@dataclass(frozen=True)
class InventorySummary:
    """Record count and total stock value (sum of quantity * price)."""

    count: int
    total_value: float
