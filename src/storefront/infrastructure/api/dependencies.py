"""FastAPI dependencies: caller identity and repositories.

Authentication happens upstream of this service. The auth middleware
forwards the verified identity in the ``X-User-Id`` header; this module
only reads it.
"""

from typing import Optional

from fastapi import Header, HTTPException

from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository
from storefront.infrastructure import bootstrap

IDENTITY_HEADER = "X-User-Id"


def get_current_owner(
    x_user_id: Optional[str] = Header(None, alias=IDENTITY_HEADER),
) -> str:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not authorized")
    return x_user_id


def get_store_repository() -> StoreRepository:
    return bootstrap.store_repository()


def get_product_repository() -> ProductRepository:
    return bootstrap.product_repository()
