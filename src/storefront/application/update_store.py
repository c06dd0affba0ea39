"""Application service: Update Store use case."""

from __future__ import annotations

import logging

from storefront.application.dto import StoreDTO
from storefront.application.mappers import to_store_dto
from storefront.application.ownership import require_owned_store
from storefront.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class UpdateStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(
        self,
        owner_id: str,
        store_id: str,
        name: str | None = None,
        address: str | None = None,
        phone: str | None = None,
    ) -> StoreDTO:
        """Apply non-empty overrides to a store of the caller.

        Concurrent updates are last-write-wins.
        """
        store = require_owned_store(self._store_repo, owner_id, store_id)
        store.apply_changes(name=name, address=address, phone=phone)
        store = self._store_repo.save(store)
        logger.info("Store %s updated", store.id)
        return to_store_dto(store)
