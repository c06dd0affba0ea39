"""Conversions between input specs, domain objects and output DTOs."""

from __future__ import annotations

from datetime import date

from storefront.application.dto import (
    DiscountDTO,
    DiscountSpec,
    ModifierDTO,
    ModifierOptionDTO,
    ModifierSpec,
    ProductDTO,
    StoreDTO,
)
from storefront.domain.model.product import Discount, Modifier, ModifierOption, Product
from storefront.domain.model.store import Store


def build_modifiers(specs: list[ModifierSpec] | None) -> list[Modifier] | None:
    """Validate modifier specs into domain objects. ``None`` stays ``None``
    so callers can tell "not supplied" from "supplied empty"."""
    if specs is None:
        return None
    return [
        Modifier.create(
            spec.name,
            [ModifierOption.create(o.name, o.price) for o in spec.options],
        )
        for spec in specs
    ]


def build_discounts(specs: list[DiscountSpec] | None) -> list[Discount] | None:
    if specs is None:
        return None
    return [
        Discount.create(
            name=spec.name,
            type=spec.type,
            value=spec.value,
            start_date=spec.start_date,
            end_date=spec.end_date,
        )
        for spec in specs
    ]


def to_store_dto(store: Store) -> StoreDTO:
    return StoreDTO(
        id=store.id,  # type: ignore[arg-type]
        name=store.name,
        address=store.address,
        phone=store.phone,
        owner=store.owner,
        created_at=store.created_at,
        updated_at=store.updated_at,
    )


def to_product_dto(product: Product, today: date | None = None) -> ProductDTO:
    today = today or date.today()
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=product.price.amount,
        category=product.category,
        store=product.store,
        stock=product.stock.value,
        image=product.image,
        modifiers=[
            ModifierDTO(
                name=m.name,
                options=[ModifierOptionDTO(o.name, o.price.amount) for o in m.options],
            )
            for m in product.modifiers
        ],
        discounts=[
            DiscountDTO(
                name=d.name,
                type=d.type.value,
                value=d.value,
                start_date=d.start_date,
                end_date=d.end_date,
            )
            for d in product.discounts
        ],
        effective_price=product.effective_price(today).amount,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )
