"""Document mapping of the MongoDB repositories.

Runs without a server: only the pure conversion helpers are exercised.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

from bson import ObjectId
from bson.decimal128 import Decimal128

from storefront.domain.model.product import Discount, Modifier, ModifierOption, Product
from storefront.domain.model.store import Store
from storefront.infrastructure.persistence.database import to_object_id, utcnow
from storefront.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from storefront.infrastructure.persistence.mongo_store_repository import (
    MongoStoreRepository,
)

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestObjectIds:

    def test_valid_id(self):
        oid = ObjectId()
        assert to_object_id(str(oid)) == oid

    def test_malformed_id_is_none(self):
        assert to_object_id("not-an-id") is None
        assert to_object_id(None) is None

    def test_utcnow_is_millisecond_precision(self):
        assert utcnow().microsecond % 1000 == 0


class TestStoreMapping:

    def test_round_trip(self):
        store = Store.create(owner="u1", name="Cafe", address="12 Main St", phone="555")
        store.created_at = store.updated_at = NOW
        doc = MongoStoreRepository._to_document(store)
        doc["_id"] = ObjectId()

        restored = MongoStoreRepository._to_domain(doc)

        assert restored.id == str(doc["_id"])
        assert (restored.name, restored.owner, restored.created_at) == ("Cafe", "u1", NOW)


class TestProductMapping:

    def _product(self) -> Product:
        product = Product.create(
            name="Latte",
            price="4.5",
            category="C1",
            store="s1",
            stock=20,
            modifiers=[Modifier.create("Size", [ModifierOption.create("Large", "1.5")])],
            discounts=[Discount.create("Jan", "percentage", 10, "2024-01-01", "2024-01-31")],
        )
        product.created_at = product.updated_at = NOW
        return product

    def test_prices_stored_as_decimal128(self):
        doc = MongoProductRepository._to_document(self._product())
        assert doc["price"] == Decimal128("4.5")
        assert doc["modifiers"][0]["options"][0]["price"] == Decimal128("1.5")
        assert doc["discounts"][0]["start_date"] == "2024-01-01"

    def test_round_trip(self):
        doc = MongoProductRepository._to_document(self._product())
        doc["_id"] = ObjectId()

        restored = MongoProductRepository._to_domain(doc)

        assert restored.price.amount == Decimal("4.5")
        assert restored.stock.value == 20
        assert restored.modifiers[0].options[0].price.amount == Decimal("1.5")
        discount = restored.discounts[0]
        assert discount.value == Decimal("10")
        assert discount.end_date == date(2024, 1, 31)
        assert restored.store == "s1"
