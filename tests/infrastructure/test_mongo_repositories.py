"""MongoDB repositories driven against an in-memory collection.

Checks the queries the repositories send: owner scoping on lookups and
the fields an update is allowed to touch.
"""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.store import Store
from storefront.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from storefront.infrastructure.persistence.mongo_store_repository import (
    MongoStoreRepository,
)
from tests.fakes import FakeCollection


@pytest.fixture
def stores():
    collection = FakeCollection()
    return MongoStoreRepository(collection), collection


@pytest.fixture
def products():
    collection = FakeCollection()
    return MongoProductRepository(collection), collection


def _latte(store_id="s1", **overrides) -> Product:
    fields = dict(name="Latte", price="4.5", category="C1", store=store_id, stock=20)
    fields.update(overrides)
    return Product.create(**fields)


class TestMongoStoreRepository:

    def test_lookup_filters_on_owner(self, stores):
        repo, collection = stores
        store = repo.add(Store.create(owner="u1", name="Cafe"))

        assert repo.get_for_owner("u1", store.id).name == "Cafe"
        assert repo.get_for_owner("u2", store.id) is None
        assert collection.filters[-1]["owner"] == "u2"

    def test_malformed_id_never_queries(self, stores):
        repo, collection = stores
        assert repo.get_for_owner("u1", "not-an-id") is None
        assert collection.filters == []

    def test_list_is_owner_scoped_in_insertion_order(self, stores):
        repo, _ = stores
        first = repo.add(Store.create(owner="u1", name="First"))
        repo.add(Store.create(owner="u2", name="Other"))
        second = repo.add(Store.create(owner="u1", name="Second"))

        assert [s.id for s in repo.list_by_owner("u1")] == [first.id, second.id]

    def test_save_only_sets_editable_fields(self, stores):
        repo, collection = stores
        store = repo.add(Store.create(owner="u1", name="Cafe"))
        created_at = store.created_at

        store.apply_changes(name="Cafe Luna", address=None, phone="555")
        store.owner = "u2"
        repo.save(store)

        assert set(collection.updates[-1]["$set"]) == {"name", "address", "phone", "updated_at"}
        reloaded = repo.get_for_owner("u1", store.id)
        assert reloaded.name == "Cafe Luna"
        assert reloaded.created_at == created_at

    def test_save_missing_store_raises(self, stores):
        repo, _ = stores
        store = repo.add(Store.create(owner="u1", name="Cafe"))
        repo.delete(store.id)
        with pytest.raises(EntityNotFoundError):
            repo.save(store)


class TestMongoProductRepository:

    def test_add_then_get_keeps_exact_price(self, products):
        repo, _ = products
        product = repo.add(_latte())

        loaded = repo.get_by_id(product.id)

        assert loaded.price.amount == Decimal("4.5")
        assert loaded.stock.value == 20

    def test_save_never_moves_or_redates_product(self, products):
        repo, collection = products
        product = repo.add(_latte())
        created_at = product.created_at

        product.store = "s2"
        product.apply_changes(price=0)
        repo.save(product)

        update = collection.updates[-1]["$set"]
        assert "store" not in update and "created_at" not in update
        reloaded = repo.get_by_id(product.id)
        assert reloaded.store == "s1"
        assert reloaded.created_at == created_at
        assert reloaded.price.amount == Decimal("0")

    def test_list_and_delete_by_store(self, products):
        repo, _ = products
        first = repo.add(_latte())
        second = repo.add(_latte(name="Mocha"))
        repo.add(_latte(store_id="s2"))

        assert [p.id for p in repo.list_by_store("s1")] == [first.id, second.id]
        assert repo.delete_by_store("s1") == 2
        assert repo.list_by_store("s1") == []
        assert len(repo.list_by_store("s2")) == 1
