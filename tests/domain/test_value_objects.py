"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import (
    MAX_QUANTITY,
    Money,
    Quantity,
    require_id,
    round2,
)


# ── round2 ───────────────────────────────────────────────────────────────────


class TestRound2:

    def test_rounds_half_away_from_zero(self):
        assert round2(Decimal("0.125")) == Decimal("0.13")
        assert round2(Decimal("2.675")) == Decimal("2.68")

    def test_not_bankers_rounding(self):
        # Banker's rounding would give 0.12 here.
        assert round2(Decimal("0.125")) != Decimal("0.12")
        assert round2(Decimal("0.005")) == Decimal("0.01")

    def test_always_two_places(self):
        assert str(round2(Decimal("39.8"))) == "39.80"
        assert str(round2(Decimal("0"))) == "0.00"


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_short_repr(self):
        assert Money.of(19.9).amount == Decimal("19.9")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_zero_is_allowed(self):
        assert Money.of("0").amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", float("inf")])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="finite"):
            Money.of(raw)

    @pytest.mark.parametrize("raw", ["", "abc", "1,50", True])
    def test_garbage_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(raw)

    @pytest.mark.parametrize("raw", ["1e30", "1e26"])
    def test_amount_too_large_to_round_rejected(self, raw):
        with pytest.raises(ValidationError, match="out of range"):
            Money.of(raw)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_rounded(self):
        assert Money.of("0.125").rounded() == Money.of("0.13")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "15.00"
        assert str(Money.of("9.5")) == "9.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    @pytest.mark.parametrize("raw", [1.5, "2", True])
    def test_non_integer_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(raw)

    def test_upper_bound(self):
        assert Quantity(MAX_QUANTITY).value == MAX_QUANTITY
        with pytest.raises(ValidationError, match="cannot exceed"):
            Quantity(MAX_QUANTITY + 1)

    def test_beyond_sqlite_integer_rejected(self):
        with pytest.raises(ValidationError):
            Quantity(10**20)

    def test_str(self):
        assert str(Quantity(7)) == "7"


# ── Identifiers ──────────────────────────────────────────────────────────────


class TestRequireId:

    def test_positive_int_passes(self):
        assert require_id(3) == 3

    @pytest.mark.parametrize("raw", [0, -1, True, "1", None])
    def test_invalid_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid id"):
            require_id(raw)
