"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum

from storefront.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so a price entered as 4.5 is stored and returned as
    exactly 4.5, with no floating-point drift.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def minus_floored(self, other: Money) -> Money:
        """Subtract *other*, never going below zero."""
        return Money(max(self.amount - other.amount, Decimal("0")))

    def percent(self, rate: Decimal) -> Money:
        """Return *rate* percent of this amount."""
        return Money(self.amount * rate / Decimal("100"))

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Stock:
    """A non-negative integer count of units on hand."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Stock cannot be negative")

    def __str__(self) -> str:
        return str(self.value)


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"

    @staticmethod
    def of(raw: str | DiscountType) -> DiscountType:
        if isinstance(raw, DiscountType):
            return raw
        try:
            return DiscountType(raw)
        except ValueError as exc:
            raise ValidationError(
                f"Discount type must be 'percentage' or 'fixed', got {raw!r}"
            ) from exc


def parse_date(raw: str | date, field_name: str) -> date:
    """Coerce an ISO 'YYYY-MM-DD' string (or a date) into a date."""
    if isinstance(raw, date):
        return raw
    if not raw:
        raise ValidationError(f"{field_name} is required")
    try:
        return date.fromisoformat(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid {field_name}: {raw!r}") from exc
