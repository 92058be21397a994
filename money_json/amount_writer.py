"""
Amount writers -- how the Decimal amount is represented in JSON.

DecimalAmountWriter         -- JSON number, full precision (default)
QuotedDecimalAmountWriter   -- JSON string in plain notation, e.g. "29.95"

Both read back into an exact Decimal. Floats produced by a host parser that
was not configured for Decimal are converted through their shortest repr.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from money_kernel.exceptions import MalformedNumberError

# JSON number grammar, so Python-only forms such as "1_000" or "Infinity" fail
_PLAIN_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


@runtime_checkable
class AmountWriter(Protocol):
    """Converts between a Decimal amount and its JSON value."""

    def write(self, amount: Decimal) -> Any:
        ...

    def read(self, field: str, value: Any) -> Decimal:
        ...


def _number_to_decimal(field: str, value: Any) -> Decimal:
    # bool is an int subclass but a distinct JSON token
    if isinstance(value, bool):
        raise MalformedNumberError(field, value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    else:
        raise MalformedNumberError(field, value)
    if not result.is_finite():
        raise MalformedNumberError(field, value)
    return result


class DecimalAmountWriter:
    """Writes the amount as a JSON number; simplejson renders Decimal exactly."""

    def write(self, amount: Decimal) -> Decimal:
        return amount

    def read(self, field: str, value: Any) -> Decimal:
        return _number_to_decimal(field, value)


class QuotedDecimalAmountWriter:
    """Writes the amount as a string in plain (non-exponent) notation."""

    def write(self, amount: Decimal) -> str:
        return format(amount, "f")

    def read(self, field: str, value: Any) -> Decimal:
        if not isinstance(value, str):
            return _number_to_decimal(field, value)
        if _PLAIN_NUMBER.fullmatch(value) is None:
            raise MalformedNumberError(field, value)
        return Decimal(value)
