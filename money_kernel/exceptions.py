"""
Typed Exception Hierarchy for the money kernel.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from MoneyKernelError:

    MoneyKernelError (base)
    |
    +-- CurrencyError
    |   +-- InvalidCurrencyError
    |
    +-- AmountError
    |   +-- InvalidAmountError
    |
    +-- DataBindingError
    |   +-- MalformedJsonError
    |   +-- UnexpectedTokenError
    |   +-- MissingFieldError
    |   +-- MalformedNumberError
    |   +-- InvalidCurrencyCodeError
    |
    +-- ConfigurationError
        +-- InvalidFieldNamesError
        +-- InvalidLocaleError
        +-- InvalidSettingsError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Currency        | INVALID_CURRENCY            | Not a valid ISO 4217 code
----------------|-----------------------------|-----------------------------------------
Amount          | INVALID_AMOUNT              | Amount not convertible / not finite
----------------|-----------------------------|-----------------------------------------
Data binding    | MALFORMED_JSON              | Input text is not JSON
                | UNEXPECTED_TOKEN            | Wrong JSON type for a value
                | MISSING_REQUIRED_FIELD      | amount or currency absent on read
                | MALFORMED_NUMBER            | amount is not numeric
                | INVALID_CURRENCY_CODE       | currency field is not ISO 4217
----------------|-----------------------------|-----------------------------------------
Configuration   | INVALID_FIELD_NAMES         | Empty or colliding JSON field names
                | INVALID_LOCALE              | Locale identifier cannot be parsed
                | INVALID_SETTINGS            | Settings file has bad keys/values

===============================================================================
HANDLING PATTERNS
===============================================================================

Data binding errors are raised while reading JSON and are meant to be caught
as a group by the caller that owns the input:

    try:
        price = module.loads_amount(body)
    except DataBindingError as e:
        return {"error": e.code, "detail": str(e)}

Configuration errors surface at module construction time, never during a
conversion.
"""

from __future__ import annotations

from typing import Any


class MoneyKernelError(Exception):
    """
    Base exception for all money kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "MONEY_KERNEL_ERROR"


# Value object exceptions


class CurrencyError(MoneyKernelError):
    """Base exception for currency-related errors."""

    code: str = "CURRENCY_ERROR"


class InvalidCurrencyError(CurrencyError):
    """Invalid ISO 4217 currency code provided."""

    code: str = "INVALID_CURRENCY"

    def __init__(self, currency: Any):
        self.currency = currency
        super().__init__(f"Invalid ISO 4217 currency code: '{currency}'")


class AmountError(MoneyKernelError):
    """Base exception for amount-related errors."""

    code: str = "AMOUNT_ERROR"


class InvalidAmountError(AmountError):
    """Amount cannot be represented as a finite Decimal."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, amount: Any):
        self.amount = amount
        super().__init__(f"Invalid amount: {amount!r}")


# Data binding exceptions


class DataBindingError(MoneyKernelError):
    """Base exception for JSON input that cannot be bound to a value."""

    code: str = "DATA_BINDING_ERROR"


class MalformedJsonError(DataBindingError):
    """Input text is not valid JSON."""

    code: str = "MALFORMED_JSON"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed JSON: {reason}")


class UnexpectedTokenError(DataBindingError):
    """A JSON value has the wrong type for the target."""

    code: str = "UNEXPECTED_TOKEN"

    def __init__(self, expected: str, actual: Any):
        self.expected = expected
        self.actual_type = type(actual).__name__
        super().__init__(f"Expected {expected}, got {self.actual_type}: {actual!r}")


class MissingFieldError(DataBindingError):
    """One or more required fields were never encountered."""

    code: str = "MISSING_REQUIRED_FIELD"

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        names = ", ".join(f"'{f}'" for f in self.fields)
        super().__init__(f"Missing required field(s): {names}")


class MalformedNumberError(DataBindingError):
    """The amount field does not hold a number."""

    code: str = "MALFORMED_NUMBER"

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Field '{field}' is not a valid number: {value!r}")


class InvalidCurrencyCodeError(DataBindingError):
    """The currency field holds an unrecognized ISO 4217 code."""

    code: str = "INVALID_CURRENCY_CODE"

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Unknown currency code in JSON input: '{currency}'")


# Configuration exceptions


class ConfigurationError(MoneyKernelError):
    """Base exception for invalid module configuration."""

    code: str = "CONFIGURATION_ERROR"


class InvalidFieldNamesError(ConfigurationError):
    """JSON field names are empty or map two fields to the same key."""

    code: str = "INVALID_FIELD_NAMES"

    def __init__(self, amount: Any, currency: Any, formatted: Any, reason: str):
        self.amount = amount
        self.currency = currency
        self.formatted = formatted
        self.reason = reason
        super().__init__(
            f"Invalid field names (amount={amount!r}, currency={currency!r}, "
            f"formatted={formatted!r}): {reason}"
        )


class InvalidLocaleError(ConfigurationError):
    """Locale identifier cannot be parsed."""

    code: str = "INVALID_LOCALE"

    def __init__(self, locale: Any):
        self.locale = locale
        super().__init__(f"Invalid locale identifier: {locale!r}")


class InvalidSettingsError(ConfigurationError):
    """A settings document contains an unknown key or value."""

    code: str = "INVALID_SETTINGS"

    def __init__(self, key: str, value: Any, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid setting '{key}' = {value!r}: {reason}")
