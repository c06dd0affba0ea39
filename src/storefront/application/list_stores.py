"""Application service: List Stores use case (query)."""

from __future__ import annotations

from storefront.application.dto import StoreDTO
from storefront.application.mappers import to_store_dto
from storefront.domain.repository.store_repository import StoreRepository


class ListStoresHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, owner_id: str) -> list[StoreDTO]:
        """Stores of *owner_id* in insertion order.

        Sorting for display is left to the client.
        """
        return [to_store_dto(s) for s in self._store_repo.list_by_owner(owner_id)]
