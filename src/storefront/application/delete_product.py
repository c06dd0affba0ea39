"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from storefront.application.ownership import require_owned_product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)

PRODUCT_REMOVED = "Product removed"


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo

    def handle(self, owner_id: str, product_id: str) -> str:
        product = require_owned_product(
            self._product_repo, self._store_repo, owner_id, product_id
        )

        self._product_repo.delete(product_id)
        logger.info("Product %s removed from store %s", product_id, product.store)
        return PRODUCT_REMOVED
