"""Application service: Show Store use case (query)."""

from __future__ import annotations

from storefront.application.dto import StoreDTO
from storefront.application.mappers import to_store_dto
from storefront.application.ownership import require_owned_store
from storefront.domain.repository.store_repository import StoreRepository


class ShowStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, owner_id: str, store_id: str) -> StoreDTO:
        return to_store_dto(require_owned_store(self._store_repo, owner_id, store_id))
