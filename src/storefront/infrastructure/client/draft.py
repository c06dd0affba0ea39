"""Editable product draft held by the admin client.

A draft is created fresh when the user starts adding a product, seeded
from the server copy when editing one, and thrown away on submit or
cancel. Nothing here is shared between drafts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from storefront.domain.exceptions import ValidationError

DISCOUNT_TYPES = ("percentage", "fixed")


@dataclass
class OptionDraft:
    name: str = ""
    price: Any = 0


@dataclass
class ModifierDraft:
    name: str = ""
    options: list[OptionDraft] = field(default_factory=lambda: [OptionDraft()])


@dataclass
class DiscountDraft:
    name: str = ""
    type: str = "percentage"
    value: Any = 0
    start_date: str = ""
    end_date: str = ""


@dataclass
class ProductDraft:
    store: str
    product_id: str | None = None
    name: str = ""
    description: str = ""
    price: Any = ""
    category: str = ""
    stock: Any = ""
    image: str = ""
    modifiers: list[ModifierDraft] = field(default_factory=list)
    discounts: list[DiscountDraft] = field(default_factory=list)

    # --- Construction ---------------------------------------------------------

    @classmethod
    def new(cls, store: str) -> ProductDraft:
        return cls(store=store)

    @classmethod
    def from_product(cls, product: dict) -> ProductDraft:
        """Seed a draft from a product as returned by the API."""
        return cls(
            store=product["store"],
            product_id=product["_id"],
            name=product.get("name", ""),
            description=product.get("description") or "",
            price=product.get("price", ""),
            category=product.get("category", ""),
            stock=product.get("stock", ""),
            image=product.get("image") or "",
            modifiers=[
                ModifierDraft(
                    name=m["name"],
                    options=[OptionDraft(o["name"], o["price"]) for o in m["options"]],
                )
                for m in product.get("modifiers") or []
            ],
            discounts=[
                DiscountDraft(
                    name=d.get("name", ""),
                    type=d["type"],
                    value=d["value"],
                    start_date=d["startDate"],
                    end_date=d["endDate"],
                )
                for d in product.get("discounts") or []
            ],
        )

    @property
    def is_editing(self) -> bool:
        return self.product_id is not None

    # --- Modifiers ------------------------------------------------------------

    def add_modifier(self, name: str = "") -> int:
        """Append a modifier with one blank option. Returns its index."""
        self.modifiers.append(ModifierDraft(name=name))
        return len(self.modifiers) - 1

    def set_modifier_name(self, index: int, name: str) -> None:
        self.modifiers[index].name = name

    def add_modifier_option(self, index: int, name: str = "", price: Any = 0) -> int:
        options = self.modifiers[index].options
        options.append(OptionDraft(name, price))
        return len(options) - 1

    def set_option(
        self,
        modifier_index: int,
        option_index: int,
        name: str | None = None,
        price: Any = None,
    ) -> None:
        option = self.modifiers[modifier_index].options[option_index]
        if name is not None:
            option.name = name
        if price is not None:
            option.price = price

    def remove_modifier(self, index: int) -> None:
        del self.modifiers[index]

    # --- Discounts ------------------------------------------------------------

    def add_discount(self, **fields: Any) -> int:
        self.discounts.append(DiscountDraft(**fields))
        return len(self.discounts) - 1

    def set_discount(self, index: int, **fields: Any) -> None:
        discount = self.discounts[index]
        for key, value in fields.items():
            if not hasattr(discount, key):
                raise AttributeError(f"Discount has no field '{key}'")
            setattr(discount, key, value)

    def remove_discount(self, index: int) -> None:
        del self.discounts[index]

    # --- Validation / submission ---------------------------------------------

    def validate(self) -> list[str]:
        """Required-field checks run before anything is sent.

        The server validates again; this only gives early feedback.
        """
        errors: list[str] = []
        if not self.name.strip():
            errors.append("Name is required")
        if not self.category:
            errors.append("Category is required")
        if _non_negative(self.price) is None:
            errors.append("Price is required")
        if _non_negative(self.stock) is None or not _is_whole(self.stock):
            errors.append("Stock is required")

        for i, modifier in enumerate(self.modifiers, start=1):
            if not modifier.name.strip():
                errors.append(f"Modifier {i}: name is required")
            if not modifier.options:
                errors.append(f"Modifier {i}: at least one option is required")
            for j, option in enumerate(modifier.options, start=1):
                if not option.name.strip():
                    errors.append(f"Modifier {i} option {j}: name is required")
                if _non_negative(option.price) is None:
                    errors.append(f"Modifier {i} option {j}: price must be a number >= 0")

        for i, discount in enumerate(self.discounts, start=1):
            if discount.type not in DISCOUNT_TYPES:
                errors.append(f"Discount {i}: type must be percentage or fixed")
            if _number(discount.value) is None:
                errors.append(f"Discount {i}: value must be a number")
            if not _is_date(discount.start_date):
                errors.append(f"Discount {i}: start date is required")
            if not _is_date(discount.end_date):
                errors.append(f"Discount {i}: end date is required")
        return errors

    def to_payload(self) -> dict:
        errors = self.validate()
        if errors:
            raise ValidationError("; ".join(errors))

        payload: dict[str, Any] = {
            "name": self.name.strip(),
            "description": self.description,
            "price": float(_number(self.price)),
            "category": self.category,
            "store": self.store,
            "stock": int(_number(self.stock)),
            "modifiers": [
                {
                    "name": m.name.strip(),
                    "options": [
                        {"name": o.name.strip(), "price": float(_number(o.price))}
                        for o in m.options
                    ],
                }
                for m in self.modifiers
            ],
            "discounts": [
                {
                    "name": d.name,
                    "type": d.type,
                    "value": float(_number(d.value)),
                    "startDate": str(d.start_date),
                    "endDate": str(d.end_date),
                }
                for d in self.discounts
            ],
        }
        if self.image:
            payload["image"] = self.image
        return payload


def _number(raw: Any) -> Decimal | None:
    if raw is None or raw == "" or isinstance(raw, bool):
        return None
    try:
        value = Decimal(str(raw))
    except (InvalidOperation, ValueError):
        return None
    return value if value.is_finite() else None


def _non_negative(raw: Any) -> Decimal | None:
    value = _number(raw)
    return value if value is not None and value >= 0 else None


def _is_whole(raw: Any) -> bool:
    value = _number(raw)
    return value is not None and value == value.to_integral_value()


def _is_date(raw: Any) -> bool:
    if isinstance(raw, date):
        return True
    try:
        date.fromisoformat(str(raw))
    except ValueError:
        return False
    return True
