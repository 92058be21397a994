"""
Pytest fixtures for the money JSON test suite.

Provides:
- Ready-made Money values used across the serialization tests
- MoneyModule instances with and without formatting
"""

from decimal import Decimal

import pytest

from money_json import DefaultMonetaryAmountFormatFactory, FieldNames, MoneyModule
from money_kernel.domain.values import Currency, Money


@pytest.fixture
def eur_2995() -> Money:
    return Money.of("29.95", "EUR")


@pytest.fixture
def usd_2995() -> Money:
    return Money.of(Decimal("29.95"), Currency("USD"))


@pytest.fixture
def module() -> MoneyModule:
    """Module with no format factory and default field names."""
    return MoneyModule()


@pytest.fixture
def formatting_module() -> MoneyModule:
    """Module with the Babel-backed format factory."""
    return MoneyModule().with_format_factory(DefaultMonetaryAmountFormatFactory())


@pytest.fixture
def custom_names() -> FieldNames:
    return FieldNames.defaults().with_amount("value").with_currency("unit").with_formatted("pretty")
