"""HTTP API tests.

The real app is exercised through FastAPI's TestClient with the
repository dependencies overridden by in-memory fakes.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.domain.exceptions import PersistenceError
from storefront.infrastructure.api.app import app
from storefront.infrastructure.api.dependencies import (
    get_product_repository,
    get_store_repository,
)
from tests.fakes import FakeProductRepository, FakeStoreRepository

U1 = {"X-User-Id": "u1"}
U2 = {"X-User-Id": "u2"}


@pytest.fixture
def repos():
    store_repo, product_repo = FakeStoreRepository(), FakeProductRepository()
    app.dependency_overrides[get_store_repository] = lambda: store_repo
    app.dependency_overrides[get_product_repository] = lambda: product_repo
    yield store_repo, product_repo
    app.dependency_overrides.clear()


@pytest.fixture
def client(repos):
    return TestClient(app)


@pytest.fixture
def store(client):
    response = client.post(
        "/api/stores",
        json={"name": "Cafe Luna", "address": "12 Main St", "phone": "555-0100"},
        headers=U1,
    )
    assert response.status_code == 201
    return response.json()


def _latte(store_id, **overrides):
    body = {"name": "Latte", "price": 4.5, "stock": 20, "category": "C1", "store": store_id}
    body.update(overrides)
    return body


class TestIdentity:

    def test_missing_identity_rejected(self, client):
        response = client.get("/api/stores")
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized"}

    def test_health_needs_no_identity(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}


class TestStoreRoutes:

    def test_create_returns_wire_format(self, store):
        assert store["_id"]
        assert store["owner"] == "u1"
        assert store["name"] == "Cafe Luna"
        assert "createdAt" in store and "updatedAt" in store

    def test_create_without_name_is_400(self, client):
        response = client.post("/api/stores", json={"address": "x"}, headers=U1)
        assert response.status_code == 400
        assert "name" in response.json()["message"]

    def test_create_with_empty_name_is_400(self, client):
        response = client.post("/api/stores", json={"name": ""}, headers=U1)
        assert response.status_code == 400
        assert response.json() == {"message": "Store name is required"}

    def test_list_is_owner_scoped(self, client, store):
        client.post("/api/stores", json={"name": "Bob's"}, headers=U2)
        response = client.get("/api/stores", headers=U1)
        assert response.status_code == 200
        assert [s["_id"] for s in response.json()] == [store["_id"]]

    def test_get_round_trip(self, client, store):
        response = client.get(f"/api/stores/{store['_id']}", headers=U1)
        assert response.status_code == 200
        assert response.json() == store

    def test_other_owner_gets_404(self, client, store):
        for method in ("get", "put", "delete"):
            kwargs = {"json": {"name": "x"}} if method == "put" else {}
            response = getattr(client, method)(
                f"/api/stores/{store['_id']}", headers=U2, **kwargs
            )
            assert response.status_code == 404
            assert response.json() == {"message": "Store not found"}

    def test_update_with_empty_name_keeps_it(self, client, store):
        response = client.put(
            f"/api/stores/{store['_id']}", json={"name": "", "phone": "555-0199"}, headers=U1
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Cafe Luna"
        assert response.json()["phone"] == "555-0199"

    def test_delete_then_404(self, client, store):
        url = f"/api/stores/{store['_id']}"
        first = client.delete(url, headers=U1)
        assert first.status_code == 200
        assert first.json() == {"message": "Store removed"}
        assert client.delete(url, headers=U1).status_code == 404


class TestProductRoutes:

    def test_create_keeps_exact_price(self, client, store):
        response = client.post("/api/products", json=_latte(store["_id"]), headers=U1)
        assert response.status_code == 201
        body = response.json()
        assert body["price"] == 4.5
        assert body["stock"] == 20
        assert body["store"] == store["_id"]
        assert body["modifiers"] == [] and body["discounts"] == []

    def test_string_prices_reach_the_domain_unrounded(self, client, repos, store):
        _, product_repo = repos
        body = _latte(
            store["_id"],
            price="19.999999999999999999",
            modifiers=[{"name": "Size", "options": [{"name": "Large", "price": "0.100000000000000001"}]}],
        )
        response = client.post("/api/products", json=body, headers=U1)
        assert response.status_code == 201

        saved = product_repo.get_by_id(response.json()["_id"])
        assert saved.price.amount == Decimal("19.999999999999999999")
        assert saved.modifiers[0].options[0].price.amount == Decimal("0.100000000000000001")

    def test_negative_stock_is_400(self, client, store):
        response = client.post(
            "/api/products", json=_latte(store["_id"], stock=-1), headers=U1
        )
        assert response.status_code == 400
        assert "stock" in response.json()["message"]

    def test_bad_discount_type_is_400(self, client, store):
        body = _latte(store["_id"], discounts=[{
            "name": "x", "type": "bogo", "value": 1,
            "startDate": "2024-01-01", "endDate": "2024-01-02",
        }])
        assert client.post("/api/products", json=body, headers=U1).status_code == 400

    def test_modifier_without_options_is_400(self, client, store):
        body = _latte(store["_id"], modifiers=[{"name": "Size", "options": []}])
        response = client.post("/api/products", json=body, headers=U1)
        assert response.status_code == 400
        assert "at least one option" in response.json()["message"]

    def test_create_in_foreign_store_is_404(self, client, store):
        response = client.post("/api/products", json=_latte(store["_id"]), headers=U2)
        assert response.status_code == 404

    def test_discount_round_trip(self, client, store):
        product = client.post("/api/products", json=_latte(store["_id"]), headers=U1).json()
        discount = {
            "name": "January", "type": "percentage", "value": 10,
            "startDate": "2024-01-01", "endDate": "2024-01-31",
        }
        response = client.put(
            f"/api/products/{product['_id']}", json={"discounts": [discount]}, headers=U1
        )
        assert response.status_code == 200

        [listed] = client.get(f"/api/products/{store['_id']}", headers=U1).json()
        assert listed["discounts"] == [discount]

    def test_modifiers_replaced(self, client, store):
        modifiers = [
            {"name": "Size", "options": [{"name": "Large", "price": 1.5}]},
            {"name": "Milk", "options": [{"name": "Oat", "price": 0.5}]},
        ]
        product = client.post(
            "/api/products", json=_latte(store["_id"], modifiers=modifiers), headers=U1
        ).json()
        response = client.put(
            f"/api/products/{product['_id']}", json={"modifiers": modifiers[1:]}, headers=U1
        )
        assert response.json()["modifiers"] == modifiers[1:]

    def test_delete(self, client, store):
        product = client.post("/api/products", json=_latte(store["_id"]), headers=U1).json()
        response = client.delete(f"/api/products/{product['_id']}", headers=U1)
        assert response.status_code == 200
        assert client.get(f"/api/products/{store['_id']}", headers=U1).json() == []

    def test_store_delete_cascades(self, client, store, repos):
        _, product_repo = repos
        client.post("/api/products", json=_latte(store["_id"]), headers=U1)
        client.delete(f"/api/stores/{store['_id']}", headers=U1)
        assert product_repo.list_by_store(store["_id"]) == []


class TestPersistenceFailure:

    def test_store_failure_is_500(self, client, repos, monkeypatch):
        store_repo, _ = repos

        def boom(owner_id):
            raise PersistenceError("Database error during store list")

        monkeypatch.setattr(store_repo, "list_by_owner", boom)
        response = client.get("/api/stores", headers=U1)
        assert response.status_code == 500
        assert response.json() == {"message": "Database error during store list"}
