"""Application service: Delete Product use case.

Deletion is physical; there is no undo.
"""

from __future__ import annotations

import logging

from ims.application.outcome import Outcome, store_failure
from ims.domain.exceptions import EntityNotFoundError, StoreError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Outcome[int]:
        try:
            self._product_repo.delete(product_id)
        except EntityNotFoundError:
            return Outcome.not_found(
                f"No product found with ID {product_id}. Deletion failed."
            )
        except StoreError as exc:
            return store_failure(logger, f"Deleting product #{product_id}", exc)

        logger.info("Deleted product #%s", product_id)
        return Outcome.success(product_id, "Product deleted successfully.")
