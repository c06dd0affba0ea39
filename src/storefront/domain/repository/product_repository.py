"""Abstract repository for the Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a new product, assigning its id and timestamps."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_by_store(self, store_id: str) -> list[Product]:
        """Return every product of a store, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product by id."""

    @abstractmethod
    def delete_by_store(self, store_id: str) -> int:
        """Remove every product of a store. Returns how many were removed."""
