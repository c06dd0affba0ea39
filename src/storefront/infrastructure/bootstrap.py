"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pymongo.database import Database

from storefront.infrastructure.config import settings
from storefront.infrastructure.persistence import (
    mongo_product_repository,
    mongo_store_repository,
)
from storefront.infrastructure.persistence.database import get_database


def database() -> Database:
    return get_database(
        settings.DATABASE_URL,
        settings.DATABASE_NAME,
        settings.DATABASE_TIMEOUT_MS,
    )


def store_repository() -> mongo_store_repository.MongoStoreRepository:
    return mongo_store_repository.MongoStoreRepository(
        database()[mongo_store_repository.COLLECTION]
    )


def product_repository() -> mongo_product_repository.MongoProductRepository:
    return mongo_product_repository.MongoProductRepository(
        database()[mongo_product_repository.COLLECTION]
    )
