"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from ims.application.dto import ProductDTO
from ims.application.outcome import Outcome, store_failure
from ims.domain.exceptions import StoreError, ValidationError
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, quantity: int, price: float) -> Outcome[ProductDTO]:
        """Persist a new product; the store assigns its id.

        Names are not required to be unique.
        """
        try:
            product = Product.create(name=name, quantity=quantity, price=price)
        except ValidationError as exc:
            return Outcome.invalid(str(exc))

        try:
            saved = self._product_repo.add(product)
        except StoreError as exc:
            return store_failure(logger, f"Adding product '{product.name}'", exc)

        logger.info("Added product #%s '%s'", saved.id, saved.name)
        return Outcome.success(
            ProductDTO.from_domain(saved),
            f"Product '{saved.name}' added successfully.",
        )
