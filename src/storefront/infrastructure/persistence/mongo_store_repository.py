"""MongoDB-backed implementation of StoreRepository."""

from __future__ import annotations

from pymongo import ASCENDING
from pymongo.collection import Collection

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.store import Store
from storefront.domain.repository.store_repository import StoreRepository
from storefront.infrastructure.persistence.database import (
    to_object_id,
    translate_errors,
    utcnow,
)

COLLECTION = "store"


class MongoStoreRepository(StoreRepository):

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    # --- StoreRepository interface --------------------------------------------

    def add(self, store: Store) -> Store:
        store.created_at = store.updated_at = utcnow()
        doc = self._to_document(store)
        with translate_errors("store insert"):
            result = self._collection.insert_one(doc)
        store.id = str(result.inserted_id)
        return store

    def get_for_owner(self, owner_id: str, store_id: str) -> Store | None:
        oid = to_object_id(store_id)
        if oid is None:
            return None
        with translate_errors("store lookup"):
            doc = self._collection.find_one({"_id": oid, "owner": owner_id})
        return self._to_domain(doc) if doc else None

    def list_by_owner(self, owner_id: str) -> list[Store]:
        with translate_errors("store list"):
            docs = list(
                self._collection.find({"owner": owner_id}).sort("_id", ASCENDING)
            )
        return [self._to_domain(d) for d in docs]

    def save(self, store: Store) -> Store:
        store.updated_at = utcnow()
        doc = self._to_document(store)
        # owner and created_at never change after insert
        changes = {k: doc[k] for k in ("name", "address", "phone", "updated_at")}
        with translate_errors("store update"):
            result = self._collection.update_one(
                {"_id": to_object_id(store.id)}, {"$set": changes}
            )
        if result.matched_count == 0:
            raise EntityNotFoundError("Store not found")
        return store

    def delete(self, store_id: str) -> None:
        with translate_errors("store delete"):
            self._collection.delete_one({"_id": to_object_id(store_id)})

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_document(store: Store) -> dict:
        return {
            "name": store.name,
            "address": store.address,
            "phone": store.phone,
            "owner": store.owner,
            "created_at": store.created_at,
            "updated_at": store.updated_at,
        }

    @staticmethod
    def _to_domain(doc: dict) -> Store:
        return Store(
            id=str(doc["_id"]),
            name=doc["name"],
            address=doc.get("address", ""),
            phone=doc.get("phone", ""),
            owner=doc["owner"],
            created_at=doc.get("created_at"),
            updated_at=doc.get("updated_at"),
        )
