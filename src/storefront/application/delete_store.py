"""Application service: Delete Store use case.

Deleting a store also deletes its products, so no product is left
pointing at a store that no longer exists.
"""

from __future__ import annotations

import logging

from storefront.application.ownership import require_owned_store
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)

STORE_REMOVED = "Store removed"


class DeleteStoreHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._store_repo = store_repo
        self._product_repo = product_repo

    def handle(self, owner_id: str, store_id: str) -> str:
        store = require_owned_store(self._store_repo, owner_id, store_id)

        # Not atomic: a failure here leaves the store in place with fewer
        # products, which a retry of the delete completes.
        removed = self._product_repo.delete_by_store(store.id)  # type: ignore[arg-type]
        self._store_repo.delete(store.id)  # type: ignore[arg-type]

        logger.info("Store %s removed along with %d product(s)", store.id, removed)
        return STORE_REMOVED
