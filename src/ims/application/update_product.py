"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from ims.application.dto import ProductDTO
from ims.application.outcome import Outcome, store_failure
from ims.domain.exceptions import EntityNotFoundError, StoreError, ValidationError
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, product_id: int, name: str, quantity: int, price: float
    ) -> Outcome[ProductDTO]:
        """Replace name, quantity and price of an existing product.

        A statement that runs cleanly but matches no row is reported as
        NOT_FOUND, never as success.
        """
        try:
            product = Product.create(
                id=product_id, name=name, quantity=quantity, price=price
            )
        except ValidationError as exc:
            return Outcome.invalid(str(exc))

        try:
            self._product_repo.update(product)
        except EntityNotFoundError:
            return Outcome.not_found(
                f"No product found with ID {product_id}. Update failed."
            )
        except StoreError as exc:
            return store_failure(logger, f"Updating product #{product_id}", exc)

        logger.info("Updated product #%s", product_id)
        return Outcome.success(
            ProductDTO.from_domain(product), "Product updated successfully."
        )
