"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from storefront.application.dto import DiscountSpec, ModifierSpec, ProductDTO
from storefront.application.mappers import (
    build_discounts,
    build_modifiers,
    to_product_dto,
)
from storefront.application.ownership import require_owned_product
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

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
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: Decimal | float | int | str | None = None,
        category: str | None = None,
        stock: int | None = None,
        image: str | None = None,
        store: str | None = None,
        modifiers: list[ModifierSpec] | None = None,
        discounts: list[DiscountSpec] | None = None,
    ) -> ProductDTO:
        """Apply a patch to a product of one of the caller's stores.

        A supplied ``modifiers`` or ``discounts`` list becomes the new
        list as-is. ``store`` may be echoed back by the client but can
        never move the product to another store.
        """
        product = require_owned_product(
            self._product_repo, self._store_repo, owner_id, product_id
        )

        if store and store != product.store:
            raise ValidationError("A product cannot be moved to another store")

        product.apply_changes(
            name=name,
            description=description,
            price=price,
            category=category,
            stock=stock,
            image=image,
            modifiers=build_modifiers(modifiers),
            discounts=build_discounts(discounts),
        )
        product = self._product_repo.save(product)
        logger.info("Product %s updated", product.id)
        return to_product_dto(product)
