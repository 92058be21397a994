"""
Monetary amount converters: Money <-> ``{amount, currency, formatted?}``.

Responsibility:
    MonetaryAmountSerializer turns a Money into an insertion-ordered mapping
    for the host JSON encoder; MonetaryAmountDeserializer rebuilds a Money
    from a decoded JSON object.

Guarantees:
    - Output field order is always amount, currency, then formatted.
    - The amount is never rounded; its representation is delegated to the
      configured AmountWriter.
    - ``formatted`` is written only when a format factory is configured and
      both the factory and its formatter produce a result. It is ignored on
      read, as is any other unknown field.

Failure modes (read side only):
    - UnexpectedTokenError when the input is not a JSON object
    - MissingFieldError when amount or currency never occurs
    - MalformedNumberError when the amount is not numeric
    - InvalidCurrencyCodeError when the currency code is unknown
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from money_json.amount_writer import AmountWriter, DecimalAmountWriter
from money_json.currency_unit import CurrencyUnitDeserializer, CurrencyUnitSerializer
from money_json.field_names import FieldNames
from money_json.format import LocaleLike, MonetaryAmountFormatFactory, parse_locale
from money_kernel.domain.values import Money
from money_kernel.exceptions import MissingFieldError, UnexpectedTokenError


class MonetaryAmountSerializer:
    """Writes Money as a JSON object with configurable field names."""

    def __init__(
        self,
        format_factory: MonetaryAmountFormatFactory | None = None,
        field_names: FieldNames | None = None,
        amount_writer: AmountWriter | None = None,
        currency_serializer: CurrencyUnitSerializer | None = None,
    ):
        self._format_factory = format_factory
        self._names = field_names or FieldNames.defaults()
        self._amount_writer = amount_writer or DecimalAmountWriter()
        self._currency_serializer = currency_serializer or CurrencyUnitSerializer()

    @property
    def field_names(self) -> FieldNames:
        return self._names

    def serialize(self, value: Money, locale: LocaleLike = None) -> dict[str, Any]:
        names = self._names
        result: dict[str, Any] = {
            names.amount: self._amount_writer.write(value.amount),
            names.currency: self._currency_serializer.serialize(value.currency),
        }

        formatted = self._format(value, locale)
        if formatted is not None:
            result[names.formatted] = formatted

        return result

    def _format(self, value: Money, locale: LocaleLike) -> str | None:
        if self._format_factory is None:
            return None
        formatter = self._format_factory.formatter_for(parse_locale(locale))
        if formatter is None:
            return None
        return formatter.format(value)


class MonetaryAmountDeserializer:
    """Reads Money from a decoded JSON object, fields in any order."""

    def __init__(
        self,
        field_names: FieldNames | None = None,
        amount_writer: AmountWriter | None = None,
        currency_deserializer: CurrencyUnitDeserializer | None = None,
    ):
        self._names = field_names or FieldNames.defaults()
        self._amount_writer = amount_writer or DecimalAmountWriter()
        self._currency_deserializer = currency_deserializer or CurrencyUnitDeserializer()

    @property
    def field_names(self) -> FieldNames:
        return self._names

    def deserialize(self, obj: Any) -> Money:
        if not isinstance(obj, Mapping):
            raise UnexpectedTokenError("JSON object", obj)

        names = self._names
        amount = None
        currency = None

        for key, value in obj.items():
            if key == names.amount:
                amount = self._amount_writer.read(key, value)
            elif key == names.currency:
                currency = self._currency_deserializer.deserialize(value)
            # formatted and unknown fields carry nothing back into the value

        missing = []
        if amount is None:
            missing.append(names.amount)
        if currency is None:
            missing.append(names.currency)
        if missing:
            raise MissingFieldError(missing)

        return Money.of(amount, currency)
