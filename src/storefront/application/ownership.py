"""Ownership checks shared by the use cases."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.store import Store
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository

STORE_NOT_FOUND = "Store not found"
PRODUCT_NOT_FOUND = "Product not found"


def require_owned_store(
    store_repo: StoreRepository, owner_id: str, store_id: str
) -> Store:
    """Load a store of *owner_id*.

    A missing store and a store of another owner raise the same error,
    so callers learn nothing about stores they do not own.
    """
    store = store_repo.get_for_owner(owner_id, store_id)
    if store is None:
        raise EntityNotFoundError(STORE_NOT_FOUND)
    return store


def require_owned_product(
    product_repo: ProductRepository,
    store_repo: StoreRepository,
    owner_id: str,
    product_id: str,
) -> Product:
    """Load a product whose store belongs to *owner_id*."""
    product = product_repo.get_by_id(product_id)
    if product is None or store_repo.get_for_owner(owner_id, product.store) is None:
        raise EntityNotFoundError(PRODUCT_NOT_FOUND)
    return product
