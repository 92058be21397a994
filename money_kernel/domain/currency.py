"""Currency -- ISO 4217 lookup backed by the CLDR data shipped with Babel."""

from dataclasses import dataclass
from functools import lru_cache

from babel.numbers import get_currency_name, get_currency_precision, list_currencies

from money_kernel.exceptions import InvalidCurrencyError

# Locale used for currency display names
_NAME_LOCALE = "en"


@dataclass(frozen=True)
class CurrencyInfo:
    """Information about a single ISO 4217 currency."""

    code: str
    decimal_places: int
    name: str


@lru_cache(maxsize=1)
def _known_codes() -> frozenset[str]:
    return frozenset(list_currencies())


class CurrencyRegistry:
    """Registry of ISO 4217 currencies with their CLDR decimal places."""

    @classmethod
    def is_valid(cls, code: str) -> bool:
        """Check if a currency code is valid ISO 4217."""
        if not code or not isinstance(code, str):
            return False
        return code.upper().strip() in _known_codes()

    @classmethod
    def validate(cls, code: str) -> str:
        """Validate and normalize a currency code."""
        if not cls.is_valid(code):
            raise InvalidCurrencyError(code)
        return code.upper().strip()

    @classmethod
    def get_info(cls, code: str) -> CurrencyInfo | None:
        """Get currency information by code."""
        if not cls.is_valid(code):
            return None
        normalized = code.upper().strip()
        return CurrencyInfo(
            code=normalized,
            decimal_places=get_currency_precision(normalized),
            name=get_currency_name(normalized, locale=_NAME_LOCALE),
        )

    @classmethod
    def get_decimal_places(cls, code: str) -> int:
        """Get decimal places for a currency."""
        return get_currency_precision(cls.validate(code))

    @classmethod
    def all_codes(cls) -> frozenset[str]:
        """Get all valid currency codes."""
        return _known_codes()
