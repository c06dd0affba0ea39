"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


# --- Input --------------------------------------------------------------------


@dataclass(frozen=True)
class ModifierOptionSpec:
    name: str
    price: Decimal | float | int | str


@dataclass(frozen=True)
class ModifierSpec:
    name: str
    options: list[ModifierOptionSpec] = field(default_factory=list)


@dataclass(frozen=True)
class DiscountSpec:
    name: str
    type: str
    value: Decimal | float | int | str
    start_date: date | str
    end_date: date | str


# --- Output -------------------------------------------------------------------


@dataclass(frozen=True)
class StoreDTO:
    id: str
    name: str
    address: str
    phone: str
    owner: str
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class ModifierOptionDTO:
    name: str
    price: Decimal


@dataclass(frozen=True)
class ModifierDTO:
    name: str
    options: list[ModifierOptionDTO]


@dataclass(frozen=True)
class DiscountDTO:
    name: str
    type: str  # "percentage" | "fixed"
    value: Decimal
    start_date: date
    end_date: date


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: Decimal
    category: str
    store: str
    stock: int
    image: str | None
    modifiers: list[ModifierDTO]
    discounts: list[DiscountDTO]
    effective_price: Decimal  # after discounts active today
    created_at: datetime | None
    updated_at: datetime | None
