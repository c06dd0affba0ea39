"""MongoDB-backed implementation of ProductRepository.

Prices are stored as Decimal128 so they round-trip exactly; discount
dates are stored as ISO 'YYYY-MM-DD' strings.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from bson.decimal128 import Decimal128
from pymongo import ASCENDING
from pymongo.collection import Collection

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Discount, Modifier, ModifierOption, Product
from storefront.domain.model.value_objects import DiscountType, Money, Stock
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.database import (
    to_object_id,
    translate_errors,
    utcnow,
)

COLLECTION = "product"


class MongoProductRepository(ProductRepository):

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> Product:
        product.created_at = product.updated_at = utcnow()
        with translate_errors("product insert"):
            result = self._collection.insert_one(self._to_document(product))
        product.id = str(result.inserted_id)
        return product

    def get_by_id(self, product_id: str) -> Product | None:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        with translate_errors("product lookup"):
            doc = self._collection.find_one({"_id": oid})
        return self._to_domain(doc) if doc else None

    def list_by_store(self, store_id: str) -> list[Product]:
        with translate_errors("product list"):
            docs = list(
                self._collection.find({"store": store_id}).sort("_id", ASCENDING)
            )
        return [self._to_domain(d) for d in docs]

    def save(self, product: Product) -> Product:
        product.updated_at = utcnow()
        doc = self._to_document(product)
        del doc["store"], doc["created_at"]
        with translate_errors("product update"):
            result = self._collection.update_one(
                {"_id": to_object_id(product.id)}, {"$set": doc}
            )
        if result.matched_count == 0:
            raise EntityNotFoundError("Product not found")
        return product

    def delete(self, product_id: str) -> None:
        with translate_errors("product delete"):
            self._collection.delete_one({"_id": to_object_id(product_id)})

    def delete_by_store(self, store_id: str) -> int:
        with translate_errors("product delete"):
            result = self._collection.delete_many({"store": store_id})
        return result.deleted_count

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_document(product: Product) -> dict:
        return {
            "name": product.name,
            "description": product.description,
            "price": Decimal128(product.price.amount),
            "category": product.category,
            "store": product.store,
            "stock": product.stock.value,
            "image": product.image,
            "modifiers": [
                {
                    "name": m.name,
                    "options": [
                        {"name": o.name, "price": Decimal128(o.price.amount)}
                        for o in m.options
                    ],
                }
                for m in product.modifiers
            ],
            "discounts": [
                {
                    "name": d.name,
                    "type": d.type.value,
                    "value": Decimal128(d.value),
                    "start_date": d.start_date.isoformat(),
                    "end_date": d.end_date.isoformat(),
                }
                for d in product.discounts
            ],
            "created_at": product.created_at,
            "updated_at": product.updated_at,
        }

    @staticmethod
    def _to_domain(doc: dict) -> Product:
        # reconstitute without re-validating
        return Product(
            id=str(doc["_id"]),
            name=doc["name"],
            description=doc.get("description") or "",
            price=Money(_decimal(doc["price"])),
            category=doc["category"],
            store=doc["store"],
            stock=Stock(int(doc.get("stock", 0))),
            image=doc.get("image"),
            modifiers=[
                Modifier(
                    name=m["name"],
                    options=tuple(
                        ModifierOption(o["name"], Money(_decimal(o["price"])))
                        for o in m.get("options", [])
                    ),
                )
                for m in doc.get("modifiers", [])
            ],
            discounts=[
                Discount(
                    name=d.get("name", ""),
                    type=DiscountType(d["type"]),
                    value=_decimal(d["value"]),
                    start_date=date.fromisoformat(d["start_date"]),
                    end_date=date.fromisoformat(d["end_date"]),
                )
                for d in doc.get("discounts", [])
            ],
            created_at=doc.get("created_at"),
            updated_at=doc.get("updated_at"),
        )


def _decimal(raw: Decimal128 | Decimal | float | int | str) -> Decimal:
    if isinstance(raw, Decimal128):
        return raw.to_decimal()
    return Decimal(str(raw))
