"""Application service: Generate Report use case (query)."""

from __future__ import annotations

import logging

from ims.application.dto import InventorySummaryDTO
from ims.application.outcome import Outcome, store_failure
from ims.domain.exceptions import StoreError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InventoryReportHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> Outcome[InventorySummaryDTO]:
        """Count and total value of all products.

        An empty inventory is a successful (0, 0.0) report.
        """
        try:
            summary = self._product_repo.aggregate()
        except StoreError as exc:
            return store_failure(logger, "Generating report", exc)

        return Outcome.success(InventorySummaryDTO.from_domain(summary))
