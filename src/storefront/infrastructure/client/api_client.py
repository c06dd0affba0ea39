"""HTTP client for the Storefront Admin API.

Used by the admin CLI. It keeps the request/response contract of the
browser admin panel:

- the store list and single-store reads are never cached, and the list
  is sorted newest first before it is returned;
- product lists are cached per store and every product mutation drops
  the whole cache, so the next read after a mutation sees it.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import httpx
from pydantic import TypeAdapter

from storefront.infrastructure.api.dependencies import IDENTITY_HEADER
from storefront.infrastructure.client.draft import ProductDraft

logger = logging.getLogger(__name__)

STORE_FIELDS = ("name", "address", "phone")
_TIMESTAMP = TypeAdapter(datetime)


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> str:
        if self.status_code == 404:
            return "not_found"
        if self.status_code == 401:
            return "unauthorized"
        if self.status_code >= 500:
            return "server"
        return "validation"


class ApiUnavailable(Exception):
    """The API could not be reached."""


def _handle_response(response: httpx.Response) -> Any:
    if response.is_success:
        return response.json()

    try:
        message = response.json().get("message", response.reason_phrase)
    except (ValueError, AttributeError):
        message = response.text or response.reason_phrase
    raise ApiError(response.status_code, message)


def _created_at(entity: dict) -> datetime:
    raw = entity.get("createdAt")
    if not raw:
        return datetime.min.replace(tzinfo=timezone.utc)
    parsed = _TIMESTAMP.validate_python(raw)
    # naive timestamps are UTC
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


class StorefrontClient:

    def __init__(
        self,
        base_url: str,
        user_id: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={IDENTITY_HEADER: user_id},
            transport=transport,
        )
        self._product_cache: dict[str, list[dict]] = {}

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> StorefrontClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Stores ---------------------------------------------------------------

    def create_store(self, name: str, address: str = "", phone: str = "") -> dict:
        return self._request(
            "POST", "stores", json={"name": name, "address": address, "phone": phone}
        )

    def list_stores(self) -> list[dict]:
        stores = self._request("GET", "stores")
        return sorted(stores, key=_created_at, reverse=True)

    def get_store(self, store_id: str) -> dict:
        return self._request("GET", f"stores/{store_id}")

    def update_store(self, store: dict, **changes: str | None) -> dict:
        """Send *changes* merged over the last known state of *store*."""
        body = {f: store.get(f, "") for f in STORE_FIELDS}
        body.update({k: v for k, v in changes.items() if v is not None})
        return self._request("PUT", f"stores/{store['_id']}", json=body)

    def delete_store(self, store_id: str) -> str:
        result = self._request("DELETE", f"stores/{store_id}")
        # the store's products went with it
        self._product_cache.clear()
        return result["message"]

    # --- Products -------------------------------------------------------------

    def list_products(self, store_id: str) -> list[dict]:
        if store_id not in self._product_cache:
            self._product_cache[store_id] = self._request("GET", f"products/{store_id}")
        return list(self._product_cache[store_id])

    def create_product(self, payload: dict) -> dict:
        product = self._request("POST", "products", json=payload)
        self._product_cache.clear()
        return product

    def update_product(self, product_id: str, patch: dict) -> dict:
        product = self._request("PUT", f"products/{product_id}", json=patch)
        self._product_cache.clear()
        return product

    def delete_product(self, product_id: str) -> str:
        result = self._request("DELETE", f"products/{product_id}")
        self._product_cache.clear()
        return result["message"]

    def submit_draft(self, draft: ProductDraft) -> dict:
        """Create or update the product a draft describes."""
        payload = draft.to_payload()
        if draft.is_editing:
            return self.update_product(draft.product_id, payload)
        return self.create_product(payload)

    # --- Internal helpers -----------------------------------------------------

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error("Storefront API unavailable: %s", e)
            raise ApiUnavailable(str(e)) from e
        return _handle_response(response)
