"""Application service: View All Products use case (query)."""

from __future__ import annotations

import logging
from contextlib import closing

from ims.application.dto import ProductDTO
from ims.application.outcome import Outcome, store_failure
from ims.domain.exceptions import StoreError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> Outcome[list[ProductDTO]]:
        try:
            with closing(self._product_repo.list_all()) as products:
                rows = [ProductDTO.from_domain(p) for p in products]
        except StoreError as exc:
            return store_failure(logger, "Retrieving products", exc)

        if not rows:
            return Outcome.empty(rows, "No products found.")
        return Outcome.success(rows)
