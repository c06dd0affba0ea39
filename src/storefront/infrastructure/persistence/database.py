"""MongoDB connection and helpers shared by the repositories."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from functools import lru_cache

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from storefront.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_client(url: str, timeout_ms: int) -> MongoClient:
    """One pooled client per URL for the life of the process."""
    return MongoClient(url, tz_aware=True, serverSelectionTimeoutMS=timeout_ms)


def get_database(url: str, name: str, timeout_ms: int = 5000) -> Database:
    return get_client(url, timeout_ms)[name]


def to_object_id(raw: str) -> ObjectId | None:
    """Parse an id from a URL or body. Malformed ids read as "no such id"."""
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError):
        return None


def utcnow() -> datetime:
    # Mongo stores milliseconds; truncate so a re-read compares equal
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Re-raise driver failures as PersistenceError."""
    try:
        yield
    except PyMongoError as exc:
        logger.error("MongoDB %s failed: %s", operation, exc)
        raise PersistenceError(f"Database error during {operation}") from exc
