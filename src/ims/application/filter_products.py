"""Application service: Filter Products by Quantity use case (query)."""

from __future__ import annotations

import logging
from contextlib import closing

from ims.application.dto import ProductDTO
from ims.application.outcome import Outcome, store_failure
from ims.domain.exceptions import StoreError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class FilterProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, threshold: int) -> Outcome[list[ProductDTO]]:
        """Products with quantity strictly below ``threshold``, lowest first."""
        try:
            with closing(self._product_repo.filter_by_quantity(threshold)) as products:
                rows = [ProductDTO.from_domain(p) for p in products]
        except StoreError as exc:
            return store_failure(logger, f"Filtering by quantity < {threshold}", exc)

        if not rows:
            return Outcome.empty(
                rows, f"No products found with quantity less than {threshold}."
            )
        return Outcome.success(rows)
