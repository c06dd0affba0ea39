"""Product aggregate.

A Product belongs to one Store for its whole life and references one
Category. It owns two variable-length nested collections: modifier
groups (each with priced options) and time-boxed discounts. Both
collections are replaced wholesale on update, never merged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    DiscountType,
    Money,
    Stock,
    parse_date,
)

MAX_PERCENTAGE = Decimal("100")


@dataclass(frozen=True)
class ModifierOption:
    """One selectable choice inside a modifier group, e.g. 'Large'."""

    name: str
    price: Money

    @staticmethod
    def create(name: str, price: str | float | int | Decimal) -> ModifierOption:
        if not name or not name.strip():
            raise ValidationError("Modifier option name is required")
        if price is None or price == "":
            raise ValidationError(f"Price is required for option '{name.strip()}'")
        return ModifierOption(name=name.strip(), price=Money.of(price))


@dataclass(frozen=True)
class Modifier:
    """A named group of options attached to a product, e.g. 'Size'."""

    name: str
    options: tuple[ModifierOption, ...]

    @staticmethod
    def create(name: str, options: list[ModifierOption]) -> Modifier:
        if not name or not name.strip():
            raise ValidationError("Modifier name is required")
        if not options:
            raise ValidationError(
                f"Modifier '{name.strip()}' must have at least one option"
            )
        return Modifier(name=name.strip(), options=tuple(options))


@dataclass(frozen=True)
class Discount:
    """A percentage or fixed-amount price reduction valid between two dates
    (both inclusive)."""

    name: str
    type: DiscountType
    value: Decimal
    start_date: date
    end_date: date

    @staticmethod
    def create(
        name: str,
        type: str | DiscountType,
        value: str | float | int | Decimal,
        start_date: str | date,
        end_date: str | date,
    ) -> Discount:
        discount_type = DiscountType.of(type)
        amount = _to_decimal(value, "Discount value")
        if amount < 0:
            raise ValidationError("Discount value cannot be negative")
        if discount_type is DiscountType.PERCENTAGE and amount > MAX_PERCENTAGE:
            raise ValidationError("Percentage discount cannot exceed 100")

        start = parse_date(start_date, "start date")
        end = parse_date(end_date, "end date")
        if end < start:
            raise ValidationError(
                f"Discount end date {end.isoformat()} is before start date "
                f"{start.isoformat()}"
            )
        return Discount(
            name=(name or "").strip(),
            type=discount_type,
            value=amount,
            start_date=start,
            end_date=end,
        )

    def is_active(self, on: date) -> bool:
        return self.start_date <= on <= self.end_date

    def apply_to(self, price: Money) -> Money:
        if self.type is DiscountType.PERCENTAGE:
            return price.minus_floored(price.percent(self.value))
        return price.minus_floored(Money(self.value))


@dataclass
class Product:
    """A sellable item of one store.

    Use ``Product.create()`` for new products. ``store`` is set there and
    never changes afterwards.
    """

    id: str | None
    name: str
    price: Money
    category: str
    store: str
    stock: Stock
    description: str = ""
    image: str | None = None
    modifiers: list[Modifier] = field(default_factory=list)
    discounts: list[Discount] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: str | float | int | Decimal,
        category: str,
        store: str,
        stock: int,
        description: str | None = None,
        image: str | None = None,
        modifiers: list[Modifier] | None = None,
        discounts: list[Discount] | None = None,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not category:
            raise ValidationError("Product category is required")
        if not store:
            raise ValidationError("Product store is required")
        if price is None or price == "":
            raise ValidationError("Product price is required")
        if stock is None:
            raise ValidationError("Product stock is required")

        return Product(
            id=None,
            name=name.strip(),
            price=Money.of(price),
            category=category,
            store=store,
            stock=Stock(stock),
            description=description or "",
            image=_validate_image(image) if image else None,
            modifiers=list(modifiers or []),
            discounts=list(discounts or []),
        )

    # --- Mutation -------------------------------------------------------------

    def apply_changes(
        self,
        name: str | None = None,
        description: str | None = None,
        price: str | float | int | Decimal | None = None,
        category: str | None = None,
        stock: int | None = None,
        image: str | None = None,
        modifiers: list[Modifier] | None = None,
        discounts: list[Discount] | None = None,
    ) -> None:
        """Apply provided overrides.

        Empty strings keep the current text value. Numbers are applied
        whenever given, so price or stock can be set to 0. A supplied
        modifiers or discounts list replaces the current one entirely.
        """
        if name and name.strip():
            self.name = name.strip()
        if description:
            self.description = description
        if category:
            self.category = category
        if image:
            self.image = _validate_image(image)
        if price is not None and price != "":
            self.price = Money.of(price)
        if stock is not None:
            self.stock = Stock(stock)
        if modifiers is not None:
            self.modifiers = list(modifiers)
        if discounts is not None:
            self.discounts = list(discounts)

    # --- Computed -------------------------------------------------------------

    def active_discounts(self, on: date) -> list[Discount]:
        return [d for d in self.discounts if d.is_active(on)]

    def effective_price(self, on: date) -> Money:
        """Price after every discount active on *on*, applied in order."""
        result = self.price
        for discount in self.active_discounts(on):
            result = discount.apply_to(result)
        return result


# --- Internal helpers ---------------------------------------------------------


def _to_decimal(raw: str | float | int | Decimal, label: str) -> Decimal:
    if raw is None or raw == "" or isinstance(raw, bool):
        raise ValidationError(f"{label} must be a number")
    try:
        value = Decimal(str(raw))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"{label} must be a number, got {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"{label} must be a number, got {raw!r}")
    return value


def _validate_image(image: str) -> str:
    if not image.startswith(("http://", "https://")):
        raise ValidationError(f"Image must be an http(s) URL, got {image!r}")
    return image
