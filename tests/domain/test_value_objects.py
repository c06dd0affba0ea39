"""Unit tests for domain value objects."""

from datetime import date
from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    DiscountType,
    Money,
    Stock,
    parse_date,
)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_float_keeps_exact_value(self):
        assert Money.of(4.5).amount == Decimal("4.5")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_zero_allowed(self):
        assert Money.of(0).amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(True)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of("NaN")

    def test_minus_floored_stops_at_zero(self):
        assert Money.of("3").minus_floored(Money.of("5")) == Money.of("0")

    def test_percent(self):
        assert Money.of("20").percent(Decimal("10")) == Money.of("2")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


# ── Stock ────────────────────────────────────────────────────────────────────


class TestStock:

    def test_valid_stock(self):
        assert Stock(20).value == 20

    def test_zero_allowed(self):
        assert Stock(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Stock(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Stock(2.5)


# ── DiscountType / dates ─────────────────────────────────────────────────────


class TestDiscountType:

    def test_known_values(self):
        assert DiscountType.of("percentage") is DiscountType.PERCENTAGE
        assert DiscountType.of("fixed") is DiscountType.FIXED

    def test_unknown_rejected(self):
        with pytest.raises(ValidationError, match="'percentage' or 'fixed'"):
            DiscountType.of("bogo")


class TestParseDate:

    def test_iso_string(self):
        assert parse_date("2024-01-31", "end date") == date(2024, 1, 31)

    def test_date_passthrough(self):
        d = date(2024, 1, 1)
        assert parse_date(d, "start date") is d

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="start date is required"):
            parse_date("", "start date")

    def test_malformed_rejected(self):
        with pytest.raises(ValidationError, match="Invalid end date"):
            parse_date("31/01/2024", "end date")
