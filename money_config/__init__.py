"""
money_config -- YAML settings for the money JSON module.

Configuration is read once, at module-construction time; a built
``MoneyModule`` never consults the settings again.
"""

from money_config.loader import build_module, load_settings, load_yaml_file, parse_settings
from money_config.schema import AmountFormat, FormattingMode, MoneyModuleSettings

__all__ = [
    "AmountFormat",
    "FormattingMode",
    "MoneyModuleSettings",
    "build_module",
    "load_settings",
    "load_yaml_file",
    "parse_settings",
]
