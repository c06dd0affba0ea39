"""Application service: Create Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from storefront.application.dto import DiscountSpec, ModifierSpec, ProductDTO
from storefront.application.mappers import (
    build_discounts,
    build_modifiers,
    to_product_dto,
)
from storefront.application.ownership import require_owned_store
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo

    def handle(
        self,
        owner_id: str,
        name: str,
        price: Decimal | float | int | str,
        category: str,
        store: str,
        stock: int,
        description: str | None = None,
        image: str | None = None,
        modifiers: list[ModifierSpec] | None = None,
        discounts: list[DiscountSpec] | None = None,
    ) -> ProductDTO:
        """Add a product to one of the caller's stores.

        Nested modifiers and discounts are validated here, before
        anything is written.
        """
        product = Product.create(
            name=name,
            price=price,
            category=category,
            store=store,
            stock=stock,
            description=description,
            image=image,
            modifiers=build_modifiers(modifiers),
            discounts=build_discounts(discounts),
        )
        require_owned_store(self._store_repo, owner_id, store)

        product = self._product_repo.add(product)
        logger.info("Product %s created in store %s", product.id, store)
        return to_product_dto(product)
