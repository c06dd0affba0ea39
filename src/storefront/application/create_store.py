"""Application service: Create Store use case."""

from __future__ import annotations

import logging

from storefront.application.dto import StoreDTO
from storefront.application.mappers import to_store_dto
from storefront.domain.model.store import Store
from storefront.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class CreateStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(
        self, owner_id: str, name: str, address: str = "", phone: str = ""
    ) -> StoreDTO:
        """Create a store owned by the calling identity."""
        store = Store.create(owner=owner_id, name=name, address=address, phone=phone)
        store = self._store_repo.add(store)
        logger.info("Store %s created for owner %s", store.id, owner_id)
        return to_store_dto(store)
