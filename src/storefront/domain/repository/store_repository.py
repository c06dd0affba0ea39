"""Abstract repository for the Store aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The MongoDB implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.store import Store


class StoreRepository(ABC):

    @abstractmethod
    def add(self, store: Store) -> Store:
        """Insert a new store, assigning its id and timestamps."""

    @abstractmethod
    def get_for_owner(self, owner_id: str, store_id: str) -> Store | None:
        """Return the store only if it exists AND belongs to *owner_id*."""

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Store]:
        """Return every store of *owner_id*, in insertion order."""

    @abstractmethod
    def save(self, store: Store) -> Store:
        """Persist changes to an existing store."""

    @abstractmethod
    def delete(self, store_id: str) -> None:
        """Remove a store by id."""
