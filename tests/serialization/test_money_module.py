"""Tests for MoneyModule configuration and simplejson integration."""

import pytest
import simplejson

from money_json import (
    DecimalAmountWriter,
    DefaultMonetaryAmountFormatFactory,
    FieldNames,
    MonetaryAmountDeserializer,
    MonetaryAmountSerializer,
    MoneyModule,
    QuotedDecimalAmountWriter,
)
from money_kernel.domain.values import Currency, Money
from money_kernel.exceptions import InvalidLocaleError


class TestModuleConfiguration:
    """with_* methods return new modules; the receiver is unchanged."""

    def test_defaults(self):
        module = MoneyModule()
        assert module.format_factory is None
        assert module.field_names == FieldNames.defaults()
        assert isinstance(module.amount_writer, DecimalAmountWriter)

    def test_with_format_factory_returns_new_module(self):
        module = MoneyModule()
        configured = module.with_format_factory(DefaultMonetaryAmountFormatFactory())
        assert configured is not module
        assert module.format_factory is None
        assert isinstance(configured.format_factory, DefaultMonetaryAmountFormatFactory)

    def test_with_format_factory_none_disables_formatting(self, formatting_module, eur_2995):
        module = formatting_module.with_format_factory(None)
        assert module.dumps(eur_2995, locale="de_DE") == '{"amount":29.95,"currency":"EUR"}'

    def test_with_field_names_returns_new_module(self, custom_names):
        module = MoneyModule()
        configured = module.with_field_names(custom_names)
        assert module.field_names == FieldNames.defaults()
        assert configured.field_names == custom_names

    def test_configuration_carried_across_with_calls(self, custom_names):
        factory = DefaultMonetaryAmountFormatFactory()
        module = (
            MoneyModule()
            .with_format_factory(factory)
            .with_field_names(custom_names)
            .with_quoted_decimal_numbers()
        )
        assert module.format_factory is factory
        assert module.field_names == custom_names
        assert isinstance(module.amount_writer, QuotedDecimalAmountWriter)

    def test_last_field_names_win(self, custom_names, eur_2995):
        other = FieldNames("x", "y", "z")
        chained = MoneyModule().with_field_names(other).with_field_names(custom_names)
        direct = MoneyModule().with_field_names(custom_names)
        assert chained.field_names == direct.field_names
        assert chained.dumps(eur_2995) == direct.dumps(eur_2995)

    def test_bound_converters_use_configuration(self, custom_names):
        module = MoneyModule().with_field_names(custom_names)
        assert isinstance(module.amount_serializer, MonetaryAmountSerializer)
        assert isinstance(module.amount_deserializer, MonetaryAmountDeserializer)
        assert module.amount_serializer.field_names == custom_names
        assert module.amount_deserializer.field_names == custom_names

    def test_repr(self):
        text = repr(MoneyModule(DefaultMonetaryAmountFormatFactory()))
        assert "DefaultMonetaryAmountFormatFactory" in text
        assert "DecimalAmountWriter" in text


class TestHostIntegration:
    """Encoding Money anywhere inside a simplejson document."""

    def test_nested_document(self, module, eur_2995):
        document = {"price": eur_2995, "currency": Currency("EUR"), "qty": 2}
        assert module.dumps(document) == (
            '{"price":{"amount":29.95,"currency":"EUR"},"currency":"EUR","qty":2}'
        )

    def test_default_hook_with_plain_simplejson(self, formatting_module, eur_2995):
        text = simplejson.dumps(
            [eur_2995],
            default=formatting_module.default("de_DE"),
            use_decimal=True,
        )
        assert simplejson.loads(text) == [
            {"amount": 29.95, "currency": "EUR", "formatted": "29,95 EUR"}
        ]

    def test_unsupported_object_raises_type_error(self, module):
        with pytest.raises(TypeError):
            module.dumps({"x": object()})

    def test_dumps_kwargs_passed_to_host(self, module, eur_2995):
        text = module.dumps(eur_2995, indent=2)
        assert "\n" in text
        assert module.loads_amount(text) == eur_2995

    def test_invalid_locale_rejected_before_encoding(self, formatting_module, eur_2995):
        with pytest.raises(InvalidLocaleError):
            formatting_module.dumps(eur_2995, locale="zz_ZZ")

    def test_read_amount_from_parsed_document(self, module, eur_2995):
        document = simplejson.loads(
            '{"order":{"total":{"amount":29.95,"currency":"EUR"}}}', use_decimal=True
        )
        assert module.read_amount(document["order"]["total"]) == eur_2995

    def test_bytes_input(self, module, eur_2995):
        assert module.loads_amount(b'{"amount":29.95,"currency":"EUR"}') == eur_2995


class TestRoundTrip:
    """Decoding the encoding yields an equal Money."""

    @pytest.mark.parametrize(
        "money",
        [
            Money.of("29.95", "EUR"),
            Money.of("0", "USD"),
            Money.of("-0.001", "KWD"),
            Money.of("1E+6", "JPY"),
            Money.of("123456789.123456789", "CHF"),
        ],
    )
    def test_round_trip_with_formatting(self, formatting_module, money):
        text = formatting_module.dumps(money, locale="de_DE")
        assert formatting_module.loads_amount(text) == money

    def test_round_trip_custom_names_quoted(self, custom_names, eur_2995):
        module = MoneyModule().with_field_names(custom_names).with_quoted_decimal_numbers()
        assert module.loads_amount(module.dumps(eur_2995)) == eur_2995
