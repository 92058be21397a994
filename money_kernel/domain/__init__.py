"""
Pure domain layer.

Immutable money value objects with NO dependencies on JSON, I/O or logging.
"""

from money_kernel.domain.currency import CurrencyInfo, CurrencyRegistry
from money_kernel.domain.values import Currency, Money

__all__ = [
    "Currency",
    "CurrencyInfo",
    "CurrencyRegistry",
    "Money",
]
