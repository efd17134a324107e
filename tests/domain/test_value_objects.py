"""Unit tests for Money and Quantity."""

from decimal import Decimal

import pytest

from ordertrack.domain.exceptions import ValidationError
from ordertrack.domain.model.value_objects import Money, Quantity, plain, to_decimal


class TestMoney:

    def test_of_coerces_floats_exactly(self):
        assert Money.of(1.1).amount == Decimal("1.1")

    def test_subtraction_may_go_negative(self):
        result = Money.of(500) - Money.of(650)
        assert result.amount == Decimal("-150")
        assert result.is_negative

    def test_rejects_non_decimal(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(100)  # type: ignore[arg-type]

    def test_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid number"):
            Money.of("abc")

    def test_currency_mismatch(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of(1) + Money(Decimal("1"), "USD")

    def test_str(self):
        assert str(Money.of("530.00")) == "INR 530"


class TestQuantity:

    def test_fractional_allowed(self):
        assert Quantity.of("1.25").value == Decimal("1.25")
        assert str(Quantity.of("1.50")) == "1.5"

    @pytest.mark.parametrize("value", [0, "-1", "0.0"])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity.of(value)

    def test_constructor_accepts_stored_values(self):
        assert Quantity(Decimal("0")).value == 0


class TestHelpers:

    def test_plain_drops_exponent(self):
        assert plain(Decimal("1E+2")) == "100"
        assert plain(Decimal("0.00")) == "0"

    @pytest.mark.parametrize("value", [True, "NaN", "inf", ""])
    def test_to_decimal_rejects(self, value):
        with pytest.raises(ValidationError):
            to_decimal(value)
