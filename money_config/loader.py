"""
Settings Loader (``money_config.loader``).

Responsibility
--------------
Loads a YAML settings file and parses it into a frozen
``MoneyModuleSettings``, then builds the configured ``MoneyModule``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown key or value  -> ``InvalidSettingsError``.
* Empty or colliding field names  -> ``InvalidFieldNamesError``.

``log_level`` is applied once per process, by the first ``build_module``
call that names one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from money_config.schema import AmountFormat, FormattingMode, MoneyModuleSettings
from money_json.field_names import FieldNames
from money_json.format import DefaultMonetaryAmountFormatFactory
from money_json.module import MoneyModule
from money_kernel.exceptions import InvalidSettingsError
from money_kernel.logging_config import configure_logging, get_logger

logger = get_logger("config.loader")

_TOP_LEVEL_KEYS = frozenset({"field_names", "formatting", "amount_format", "log_level"})
_FIELD_NAME_KEYS = frozenset({"amount", "currency", "formatted"})


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        InvalidSettingsError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidSettingsError("<document>", data, "expected a mapping")
    return data


def parse_field_names(data: Any) -> FieldNames:
    """Parse FieldNames from a mapping; omitted names keep their defaults."""
    if data is None:
        return FieldNames.defaults()
    if not isinstance(data, dict):
        raise InvalidSettingsError("field_names", data, "expected a mapping")
    unknown = set(data) - _FIELD_NAME_KEYS
    if unknown:
        raise InvalidSettingsError("field_names", sorted(unknown), "unknown field name keys")
    return FieldNames(**data)


def _parse_enum(key: str, value: Any, enum_type: type, default: Any) -> Any:
    if value is None:
        return default
    try:
        return enum_type(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_type)
        raise InvalidSettingsError(key, value, f"expected one of: {allowed}") from e


def parse_log_level(value: Any) -> str | None:
    """Normalise a level name such as ``debug``; None leaves logging alone."""
    if value is None:
        return None
    if not isinstance(value, str) or not isinstance(logging.getLevelName(value.upper()), int):
        raise InvalidSettingsError("log_level", value, "expected a logging level name")
    return value.upper()


def parse_settings(data: dict[str, Any]) -> MoneyModuleSettings:
    """Parse ``MoneyModuleSettings`` from a dict."""
    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise InvalidSettingsError(", ".join(sorted(unknown)), None, "unknown setting")

    return MoneyModuleSettings(
        field_names=parse_field_names(data.get("field_names")),
        formatting=_parse_enum(
            "formatting", data.get("formatting"), FormattingMode, FormattingMode.NONE
        ),
        amount_format=_parse_enum(
            "amount_format", data.get("amount_format"), AmountFormat, AmountFormat.DECIMAL
        ),
        log_level=parse_log_level(data.get("log_level")),
    )


def load_settings(path: Path | str) -> MoneyModuleSettings:
    """Load and parse a settings file."""
    settings = parse_settings(load_yaml_file(Path(path)))
    logger.info(
        "money settings loaded",
        extra={
            "path": str(path),
            "formatting": settings.formatting.value,
            "amount_format": settings.amount_format.value,
        },
    )
    return settings


def build_module(settings: MoneyModuleSettings) -> MoneyModule:
    """Build a MoneyModule configured as $settings describes."""
    if settings.log_level is not None:
        configure_logging(level=settings.log_level)
    module = MoneyModule().with_field_names(settings.field_names)
    if settings.formatting is FormattingMode.DEFAULT:
        module = module.with_format_factory(DefaultMonetaryAmountFormatFactory())
    if settings.amount_format is AmountFormat.QUOTED:
        module = module.with_quoted_decimal_numbers()
    return module
