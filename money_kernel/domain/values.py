"""
Values -- Immutable, self-validating money value objects.

Responsibility:
    Provides the value types read and produced by the JSON converters:
    Currency and Money. Neither is ever mutated after construction.

Invariants enforced:
    - Currency codes are validated against ISO 4217 at construction time.
    - Money amounts are always finite Decimals (never float).
    - Money never rounds: the amount keeps the exact scale it was given.

Failure modes:
    - InvalidCurrencyError on construction with an unknown currency code
    - InvalidAmountError on construction with a non-numeric or non-finite amount
    - TypeError when currency is neither a Currency nor a str
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from money_kernel.domain.currency import CurrencyRegistry
from money_kernel.exceptions import InvalidAmountError, InvalidCurrencyError


@dataclass(frozen=True, slots=True)
class Currency:
    """
    ISO 4217 currency code value object.

    Contract:
        Wraps a three-letter ISO 4217 code. Validated and normalized (uppercased)
        on construction. Invalid codes are rejected immediately.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - code is always uppercase and stripped of whitespace
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not CurrencyRegistry.is_valid(self.code):
            raise InvalidCurrencyError(self.code)
        # Override frozen to set normalized value
        object.__setattr__(self, "code", self.code.upper().strip())

    @classmethod
    def of(cls, code: str) -> Currency:
        """Look up a currency by its ISO 4217 code."""
        return cls(code)

    @property
    def decimal_places(self) -> int:
        """Number of minor-unit digits for this currency (CLDR)."""
        return CurrencyRegistry.get_decimal_places(self.code)

    @property
    def name(self) -> str:
        """Get the currency name."""
        info = CurrencyRegistry.get_info(self.code)
        return info.name if info else self.code

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency({self.code!r})"


@dataclass(frozen=True, slots=True)
class Money:
    """
    Monetary amount value object.

    Contract:
        Pairs a Decimal amount with its Currency -- they are NEVER separated.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - amount is always a finite Decimal (never float)
        - currency is always a valid Currency (ISO 4217)
        - Equality compares the numeric amount and the currency

    Non-goals:
        - Does NOT round to the currency's minor units
        - Does NOT perform arithmetic or currency conversion
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool):
            raise InvalidAmountError(self.amount)
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except (InvalidOperation, ValueError) as e:
                raise InvalidAmountError(self.amount) from e
        if not self.amount.is_finite():
            raise InvalidAmountError(self.amount)

        if isinstance(self.currency, str):
            object.__setattr__(self, "currency", Currency(self.currency))
        elif not isinstance(self.currency, Currency):
            raise TypeError(f"currency must be Currency or str, got {type(self.currency)}")

    @classmethod
    def of(cls, amount: Decimal | str | int | float, currency: str | Currency) -> Money:
        """
        Factory method for creating Money.

        Floats are converted through their shortest repr, so ``Money.of(29.95, "EUR")``
        holds exactly ``Decimal("29.95")``.

        Raises:
            InvalidAmountError: If amount cannot be converted to a finite Decimal.
            InvalidCurrencyError: If currency is not a valid ISO 4217 code.
        """
        return cls(amount=amount, currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.code}"

    def __repr__(self) -> str:
        return f"Money({self.amount!r}, {self.currency!r})"
