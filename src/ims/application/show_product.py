"""Application service: Show Product use case (query)."""

from __future__ import annotations

import logging

from ims.application.dto import ProductDTO
from ims.application.outcome import Outcome, store_failure
from ims.domain.exceptions import StoreError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Outcome[ProductDTO]:
        try:
            product = self._product_repo.get_by_id(product_id)
        except StoreError as exc:
            return store_failure(logger, f"Retrieving product #{product_id}", exc)

        if product is None:
            return Outcome.not_found(f"No product found with ID {product_id}.")
        return Outcome.success(ProductDTO.from_domain(product))
