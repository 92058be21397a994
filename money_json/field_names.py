"""FieldNames -- JSON property names used for a monetary amount object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from money_kernel.exceptions import InvalidFieldNamesError


@dataclass(frozen=True)
class FieldNames:
    """
    Names of the amount, currency and formatted properties.

    Contract:
        All three names are non-empty strings and pairwise distinct. The
        ``with_*`` methods return a copy with exactly one name replaced;
        the receiver is never modified.

    To swap two names, construct the value directly instead of chaining
    ``with_*`` calls, since every intermediate value is validated.
    """

    amount: str = "amount"
    currency: str = "currency"
    formatted: str = "formatted"

    def __post_init__(self) -> None:
        names = (self.amount, self.currency, self.formatted)
        for name in names:
            if not isinstance(name, str) or not name:
                raise InvalidFieldNamesError(*names, reason="names must be non-empty strings")
        if len(set(names)) != len(names):
            raise InvalidFieldNamesError(*names, reason="names must be distinct")

    @classmethod
    def defaults(cls) -> FieldNames:
        """Canonical names: amount, currency, formatted."""
        return cls()

    def with_amount(self, name: str) -> FieldNames:
        return replace(self, amount=name)

    def with_currency(self, name: str) -> FieldNames:
        return replace(self, currency=name)

    def with_formatted(self, name: str) -> FieldNames:
        return replace(self, formatted=name)
