"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money, Percentage, round2, to_decimal


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_repr(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="must be a number"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_subtraction(self):
        assert Money.of("100") - Money.of("80") == Money.of("20")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") - Money(Decimal("5"), "EUR")

    def test_equal_regardless_of_trailing_zeros(self):
        assert Money.of("80") == Money.of("80.00")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


# ── Percentage ───────────────────────────────────────────────────────────────


class TestPercentage:

    def test_bounds_inclusive(self):
        assert Percentage.of(0).value == Decimal("0")
        assert Percentage.of(100).value == Decimal("100")

    def test_above_hundred_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage.of("100.5")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage.of(-1)

    def test_str(self):
        assert str(Percentage.of("20")) == "20%"
        assert str(Percentage.of("12.50")) == "12.5%"


# ── Helpers ──────────────────────────────────────────────────────────────────


class TestRounding:

    def test_round_half_away_from_zero(self):
        assert round2(Decimal("5.025")) == Decimal("5.03")
        assert round2(Decimal("2.675")) == Decimal("2.68")

    def test_round_down_below_half(self):
        assert round2(Decimal("16.9915")) == Decimal("16.99")

    def test_to_decimal_rejects_bool(self):
        with pytest.raises(ValidationError):
            to_decimal(True, "price")

    def test_to_decimal_rejects_infinity(self):
        with pytest.raises(ValidationError, match="finite"):
            to_decimal("Infinity", "price")
