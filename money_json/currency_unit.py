"""Currency unit converters: Currency <-> ISO 4217 code string."""

from __future__ import annotations

from typing import Any

from money_kernel.domain.values import Currency
from money_kernel.exceptions import InvalidCurrencyCodeError, InvalidCurrencyError, UnexpectedTokenError


class CurrencyUnitSerializer:
    """Writes a Currency as its plain code, e.g. ``"EUR"``."""

    def serialize(self, value: Currency) -> str:
        return value.code


class CurrencyUnitDeserializer:
    """
    Reads a JSON string and resolves it to a Currency.

    The code must be written exactly as ISO 4217 spells it: ``"eur"`` and
    ``" EUR "`` are rejected even though ``Currency.of`` accepts them.
    """

    def deserialize(self, value: Any) -> Currency:
        """
        Raises:
            UnexpectedTokenError: If value is not a JSON string.
            InvalidCurrencyCodeError: If the code is not a known ISO 4217 code.
        """
        if not isinstance(value, str):
            raise UnexpectedTokenError("currency code string", value)
        if value != value.strip().upper():
            raise InvalidCurrencyCodeError(value)
        try:
            return Currency.of(value)
        except InvalidCurrencyError as e:
            raise InvalidCurrencyCodeError(value) from e
