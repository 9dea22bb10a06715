"""Application service: Search Products by Name use case (query)."""

from __future__ import annotations

import logging
from contextlib import closing

from ims.application.dto import ProductDTO
from ims.application.outcome import Outcome, store_failure
from ims.domain.exceptions import StoreError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, term: str) -> Outcome[list[ProductDTO]]:
        """Case-insensitive substring match on product names.

        The result set is stepped to completion here so that an error
        raised mid-iteration is reported as ERROR and not as EMPTY.
        """
        try:
            with closing(self._product_repo.search_by_name(term)) as products:
                rows = [ProductDTO.from_domain(p) for p in products]
        except StoreError as exc:
            return store_failure(logger, f"Searching for '{term}'", exc)

        if not rows:
            return Outcome.empty(rows, f'No products found matching "{term}".')
        return Outcome.success(rows)
