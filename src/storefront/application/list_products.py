"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.mappers import to_product_dto
from storefront.application.ownership import require_owned_store
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo

    def handle(self, owner_id: str, store_id: str) -> list[ProductDTO]:
        require_owned_store(self._store_repo, owner_id, store_id)
        return [to_product_dto(p) for p in self._product_repo.list_by_store(store_id)]
