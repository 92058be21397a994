"""
Money JSON - encode and decode Money and Currency with simplejson.

    {"amount": 29.95, "currency": "EUR", "formatted": "29,95 EUR"}

Field names are configurable through FieldNames; the formatted field is
produced only when a format factory is configured and can format for the
active locale.
"""

from money_json.amount_writer import AmountWriter, DecimalAmountWriter, QuotedDecimalAmountWriter
from money_json.currency_unit import CurrencyUnitDeserializer, CurrencyUnitSerializer
from money_json.field_names import FieldNames
from money_json.format import (
    BabelMonetaryAmountFormatter,
    DefaultMonetaryAmountFormatFactory,
    MonetaryAmountFormatFactory,
    MonetaryAmountFormatter,
    NoopMonetaryAmountFormatFactory,
    parse_locale,
)
from money_json.module import MoneyModule
from money_json.monetary_amount import MonetaryAmountDeserializer, MonetaryAmountSerializer

__all__ = [
    "AmountWriter",
    "BabelMonetaryAmountFormatter",
    "CurrencyUnitDeserializer",
    "CurrencyUnitSerializer",
    "DecimalAmountWriter",
    "DefaultMonetaryAmountFormatFactory",
    "FieldNames",
    "MonetaryAmountDeserializer",
    "MonetaryAmountFormatFactory",
    "MonetaryAmountFormatter",
    "MonetaryAmountSerializer",
    "MoneyModule",
    "NoopMonetaryAmountFormatFactory",
    "QuotedDecimalAmountWriter",
    "parse_locale",
]
