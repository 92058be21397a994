"""
Unit tests for the Money value object.

Verifies:
- Exact Decimal amounts (no rounding, no float drift)
- Currency coercion from codes
- Rejection of non-numeric and non-finite amounts
"""

from decimal import Decimal

import pytest

from money_kernel.domain.values import Currency, Money
from money_kernel.exceptions import InvalidAmountError, InvalidCurrencyError


class TestMoneyConstruction:
    """Tests for Money.of and the dataclass constructor."""

    def test_from_string(self):
        money = Money.of("29.95", "EUR")
        assert money.amount == Decimal("29.95")
        assert money.currency == Currency("EUR")

    def test_from_float_uses_shortest_repr(self):
        assert Money.of(29.95, "EUR").amount == Decimal("29.95")

    def test_from_int(self):
        assert Money.of(100, "JPY").amount == Decimal("100")

    def test_no_rounding_to_currency_precision(self):
        """Amounts keep every digit they were given."""
        money = Money.of("29.9512345", "EUR")
        assert money.amount == Decimal("29.9512345")
        assert money.amount.as_tuple().exponent == -7

    def test_large_precision_preserved(self):
        money = Money.of("123456789012345678901234567890.123456789", "USD")
        assert money.amount == Decimal("123456789012345678901234567890.123456789")

    def test_currency_object_accepted(self):
        assert Money(Decimal("1"), Currency("USD")).currency.code == "USD"

    def test_invalid_amount_raises(self):
        with pytest.raises(InvalidAmountError):
            Money.of("not a number", "EUR")

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_amount_raises(self, amount):
        with pytest.raises(InvalidAmountError):
            Money.of(amount, "EUR")

    def test_bool_amount_raises(self):
        with pytest.raises(InvalidAmountError):
            Money.of(True, "EUR")

    def test_invalid_currency_raises(self):
        with pytest.raises(InvalidCurrencyError):
            Money.of("1.00", "XXY")

    def test_wrong_currency_type_raises(self):
        with pytest.raises(TypeError):
            Money(Decimal("1"), 978)


class TestMoneyValueSemantics:
    """Equality, immutability and representation."""

    def test_equality_is_numeric(self):
        assert Money.of("29.95", "EUR") == Money.of("29.950", "EUR")

    def test_different_currency_not_equal(self):
        assert Money.of("29.95", "EUR") != Money.of("29.95", "USD")

    def test_hashable(self):
        assert len({Money.of("1", "EUR"), Money.of("1.0", "EUR")}) == 1

    def test_immutable(self):
        money = Money.of("1", "EUR")
        with pytest.raises(AttributeError):
            money.amount = Decimal("2")

    def test_str_and_repr(self):
        money = Money.of("29.95", "EUR")
        assert str(money) == "29.95 EUR"
        assert repr(money) == "Money(Decimal('29.95'), Currency('EUR'))"
