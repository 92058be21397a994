"""
Money module settings schema.

Defines the human-authored settings artifact for a MoneyModule. YAML files
are parsed into these types by the loader and turned into a configured
module by ``build_module``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique

from money_json.field_names import FieldNames


@unique
class FormattingMode(str, Enum):
    """Which format factory the module uses."""

    NONE = "none"
    DEFAULT = "default"


@unique
class AmountFormat(str, Enum):
    """JSON representation of the amount."""

    DECIMAL = "decimal"
    QUOTED = "quoted"


@dataclass(frozen=True)
class MoneyModuleSettings:
    """Parsed money module settings."""

    field_names: FieldNames = field(default_factory=FieldNames.defaults)
    formatting: FormattingMode = FormattingMode.NONE
    amount_format: AmountFormat = AmountFormat.DECIMAL
    # applied through configure_logging when the module is built
    log_level: str | None = None
