"""
Format -- Optional, locale-aware human-readable rendering of Money.

Responsibility:
    Defines the two-level capability used by the amount serializer to
    produce the optional ``formatted`` field:

        MonetaryAmountFormatFactory.formatter_for(locale) -> formatter | None
        MonetaryAmountFormatter.format(money)             -> str | None

    ``None`` at either level means "no formatting available" and is never
    an error; the serializer simply omits the field.

Implementations:
    NoopMonetaryAmountFormatFactory     -- never formats
    DefaultMonetaryAmountFormatFactory  -- Babel/CLDR currency patterns with
                                           the currency rendered as its ISO code
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency

from money_kernel.domain.values import Money
from money_kernel.exceptions import InvalidLocaleError
from money_kernel.logging_config import get_logger

logger = get_logger("json.format")

LocaleLike = Locale | str | None

# CLDR separates number and currency with no-break spaces
_SPACE_TRANSLATION = str.maketrans({"\u00a0": " ", "\u202f": " "})


def parse_locale(locale: LocaleLike) -> Locale | None:
    """
    Resolve a Babel Locale from a Locale, an identifier or None.

    Both ``de_DE`` and ``de-DE`` spellings are accepted.

    Raises:
        InvalidLocaleError: If the identifier is malformed or unknown to CLDR.
    """
    if locale is None or isinstance(locale, Locale):
        return locale
    if not isinstance(locale, str) or not locale.strip():
        raise InvalidLocaleError(locale)
    try:
        return Locale.parse(locale.strip().replace("-", "_"))
    except (ValueError, UnknownLocaleError) as e:
        raise InvalidLocaleError(locale) from e


@runtime_checkable
class MonetaryAmountFormatter(Protocol):
    """Renders a Money value as text, or returns None if it cannot."""

    def format(self, value: Money) -> str | None:
        ...


@runtime_checkable
class MonetaryAmountFormatFactory(Protocol):
    """Produces a formatter bound to a locale, or None if none is available."""

    def formatter_for(self, locale: Locale | None) -> MonetaryAmountFormatter | None:
        ...


class NoopMonetaryAmountFormatFactory:
    """Format factory that never produces a formatter."""

    def formatter_for(self, locale: Locale | None) -> MonetaryAmountFormatter | None:
        return None


class BabelMonetaryAmountFormatter:
    """Formats Money with a fixed CLDR number pattern and locale."""

    def __init__(self, locale: Locale, pattern: str):
        self._locale = locale
        self._pattern = pattern

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def pattern(self) -> str:
        return self._pattern

    def format(self, value: Money) -> str | None:
        text = format_currency(
            value.amount,
            value.currency.code,
            format=self._pattern,
            locale=self._locale,
        )
        return text.translate(_SPACE_TRANSLATION)


class DefaultMonetaryAmountFormatFactory:
    """
    Format factory backed by the locale's standard CLDR currency pattern.

    The currency sign in the pattern is replaced by the ISO code placeholder,
    so ``29.95 EUR`` renders as ``29,95 EUR`` in ``de_DE`` and ``29.95 USD``
    as ``USD29.95`` in ``en_US``. Amounts are shown with the currency's CLDR
    number of digits.
    """

    def formatter_for(self, locale: Locale | None) -> MonetaryAmountFormatter | None:
        if locale is None:
            return None

        standard = locale.currency_formats.get("standard")
        if standard is None:
            logger.debug(
                "no currency pattern for locale",
                extra={"locale": str(locale)},
            )
            return None

        pattern = standard.pattern.replace("¤", "¤¤")
        return BabelMonetaryAmountFormatter(locale, pattern)
