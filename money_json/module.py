"""
MoneyModule -- bundles the money converters for use with simplejson.

Responsibility:
    Holds the immutable module configuration (format factory, field names,
    amount writer), builds the bound currency and amount converters from it,
    and exposes them to the host JSON library:

        module = MoneyModule().with_format_factory(DefaultMonetaryAmountFormatFactory())
        module.dumps({"price": Money.of("29.95", "EUR")}, locale="de_DE")
        module.loads_amount('{"amount": 29.95, "currency": "EUR"}')

Encoding goes through simplejson's ``default`` hook, so Money and Currency
values are handled anywhere inside a document. Decoding is explicit: the
caller knows which value it expects and calls the matching ``read_*`` or
``loads_*`` method.

Thread-safety:
    A module and its converters hold no mutable state. The ``with_*``
    methods return new modules and leave the receiver untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import simplejson

from money_json.amount_writer import AmountWriter, DecimalAmountWriter, QuotedDecimalAmountWriter
from money_json.currency_unit import CurrencyUnitDeserializer, CurrencyUnitSerializer
from money_json.field_names import FieldNames
from money_json.format import LocaleLike, MonetaryAmountFormatFactory, parse_locale
from money_json.monetary_amount import MonetaryAmountDeserializer, MonetaryAmountSerializer
from money_kernel.domain.values import Currency, Money
from money_kernel.exceptions import MalformedJsonError
from money_kernel.logging_config import get_logger

logger = get_logger("json.module")

_COMPACT_SEPARATORS = (",", ":")


class MoneyModule:
    """Configured set of Money and Currency converters."""

    def __init__(
        self,
        format_factory: MonetaryAmountFormatFactory | None = None,
        field_names: FieldNames | None = None,
        amount_writer: AmountWriter | None = None,
    ):
        self._format_factory = format_factory
        self._field_names = field_names or FieldNames.defaults()
        self._amount_writer = amount_writer or DecimalAmountWriter()

        self._currency_serializer = CurrencyUnitSerializer()
        self._currency_deserializer = CurrencyUnitDeserializer()
        self._amount_serializer = MonetaryAmountSerializer(
            format_factory=self._format_factory,
            field_names=self._field_names,
            amount_writer=self._amount_writer,
            currency_serializer=self._currency_serializer,
        )
        self._amount_deserializer = MonetaryAmountDeserializer(
            field_names=self._field_names,
            amount_writer=self._amount_writer,
            currency_deserializer=self._currency_deserializer,
        )

        logger.debug(
            "money module configured",
            extra={
                "format_factory": type(format_factory).__name__ if format_factory else None,
                "amount_field": self._field_names.amount,
                "currency_field": self._field_names.currency,
                "formatted_field": self._field_names.formatted,
                "amount_writer": type(self._amount_writer).__name__,
            },
        )

    # -- configuration ------------------------------------------------------

    @property
    def format_factory(self) -> MonetaryAmountFormatFactory | None:
        return self._format_factory

    @property
    def field_names(self) -> FieldNames:
        return self._field_names

    @property
    def amount_writer(self) -> AmountWriter:
        return self._amount_writer

    def with_format_factory(self, factory: MonetaryAmountFormatFactory | None) -> MoneyModule:
        """Return a new module using $factory; None disables formatting."""
        return MoneyModule(factory, self._field_names, self._amount_writer)

    def with_field_names(self, names: FieldNames) -> MoneyModule:
        return MoneyModule(self._format_factory, names, self._amount_writer)

    def with_decimal_numbers(self) -> MoneyModule:
        """Write amounts as JSON numbers (the default)."""
        return MoneyModule(self._format_factory, self._field_names, DecimalAmountWriter())

    def with_quoted_decimal_numbers(self) -> MoneyModule:
        """Write amounts as JSON strings such as ``"29.95"``."""
        return MoneyModule(self._format_factory, self._field_names, QuotedDecimalAmountWriter())

    # -- bound converters ---------------------------------------------------

    @property
    def currency_serializer(self) -> CurrencyUnitSerializer:
        return self._currency_serializer

    @property
    def currency_deserializer(self) -> CurrencyUnitDeserializer:
        return self._currency_deserializer

    @property
    def amount_serializer(self) -> MonetaryAmountSerializer:
        return self._amount_serializer

    @property
    def amount_deserializer(self) -> MonetaryAmountDeserializer:
        return self._amount_deserializer

    # -- host integration ---------------------------------------------------

    def default(self, locale: LocaleLike = None) -> Callable[[Any], Any]:
        """
        Build a ``default=`` hook for simplejson bound to $locale.

        The hook raises TypeError for unsupported objects, as the host expects.
        """
        resolved = parse_locale(locale)

        def encode(obj: Any) -> Any:
            if isinstance(obj, Money):
                return self._amount_serializer.serialize(obj, resolved)
            if isinstance(obj, Currency):
                return self._currency_serializer.serialize(obj)
            raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

        return encode

    def dumps(self, obj: Any, locale: LocaleLike = None, **kwargs: Any) -> str:
        """Serialize $obj to compact JSON text, Decimal amounts kept exact."""
        kwargs.setdefault("separators", _COMPACT_SEPARATORS)
        return simplejson.dumps(obj, default=self.default(locale), use_decimal=True, **kwargs)

    def read_amount(self, obj: Any) -> Money:
        return self._amount_deserializer.deserialize(obj)

    def read_currency(self, value: Any) -> Currency:
        return self._currency_deserializer.deserialize(value)

    def loads_amount(self, text: str | bytes) -> Money:
        """Decode JSON text holding a single monetary amount object."""
        return self.read_amount(self._loads(text))

    def loads_currency(self, text: str | bytes) -> Currency:
        """Decode JSON text holding a single currency code string."""
        return self.read_currency(self._loads(text))

    @staticmethod
    def _loads(text: str | bytes) -> Any:
        try:
            return simplejson.loads(text, use_decimal=True)
        except simplejson.JSONDecodeError as e:
            raise MalformedJsonError(str(e)) from e

    def __repr__(self) -> str:
        factory = type(self._format_factory).__name__ if self._format_factory else None
        return (
            f"MoneyModule(format_factory={factory}, field_names={self._field_names!r}, "
            f"amount_writer={type(self._amount_writer).__name__})"
        )
