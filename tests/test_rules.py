"""Tests for the rule types stored inside CalculationRules."""

import pytest

from calcengine.errors import ParseError, ValidationError
from calcengine.interfaces import SubConfigurationProtocol
from calcengine.rules import (
    MarketDataConfig,
    MarketDataKind,
    MarketDataRules,
    PricingRules,
    ReportingRules,
)

ALL_RULE_TYPES = [PricingRules, MarketDataRules, ReportingRules, MarketDataConfig]


class TestEmptyDefaults:
    """Every rule type provides an EMPTY default rendered as 'EMPTY'."""

    @pytest.mark.parametrize('rule_type', ALL_RULE_TYPES)
    def test_empty_renders_as_empty(self, rule_type):
        assert str(rule_type.EMPTY) == 'EMPTY'
        assert rule_type.EMPTY.is_empty

    @pytest.mark.parametrize('rule_type', ALL_RULE_TYPES)
    def test_parse_empty_returns_singleton(self, rule_type):
        assert rule_type.parse('EMPTY') is rule_type.EMPTY
        assert rule_type.parse('  EMPTY ') is rule_type.EMPTY

    @pytest.mark.parametrize('rule_type', ALL_RULE_TYPES)
    def test_satisfies_sub_configuration_protocol(self, rule_type):
        assert isinstance(rule_type.EMPTY, SubConfigurationProtocol)

    def test_empty_values_of_different_types_are_not_equal(self):
        assert PricingRules.EMPTY != MarketDataRules.EMPTY
        assert PricingRules.EMPTY.entries == MarketDataRules.EMPTY.entries


class TestPricingRules:
    """Tests for PricingRules."""

    def test_of_is_order_independent(self):
        first = PricingRules.of({'Swap': 'discounting', 'Fra': 'forward'})
        second = PricingRules.of([('Fra', 'forward'), ('Swap', 'discounting')])

        assert first == second
        assert hash(first) == hash(second)
        assert str(first) == 'Fra=forward,Swap=discounting'

    def test_function_group_lookup(self):
        rules = PricingRules.of({'Swap': 'discounting'})

        assert rules.function_group('Swap') == 'discounting'
        assert rules.function_group('Fra') is None

    def test_of_empty_mapping_returns_empty(self):
        assert PricingRules.of({}) is PricingRules.EMPTY

    def test_parse_round_trip(self):
        rules = PricingRules.of({'Swap': 'discounting', 'Fra': 'forward'})
        assert PricingRules.parse(str(rules)) == rules

    def test_parse_ignores_whitespace(self):
        rules = PricingRules.parse(' Swap = discounting , Fra=forward ')
        assert rules.as_dict() == {'Fra': 'forward', 'Swap': 'discounting'}

    @pytest.mark.parametrize(
        'text, reason',
        [
            ('Swap', "missing '='"),
            ('Swap=', 'empty key or value'),
            ('=discounting', 'empty key or value'),
            ('Swap=a,Swap=b', 'duplicate key'),
            ('Swap=a,,Fra=b', "missing '='"),
            ('Swap=a=b', 'must not contain'),
            ('   ', 'blank'),
        ],
    )
    def test_parse_rejects_malformed_text(self, text, reason):
        with pytest.raises(ParseError, match=reason) as excinfo:
            PricingRules.parse(text)
        assert excinfo.value.text == text

    def test_parse_rejects_non_string(self):
        with pytest.raises(ParseError, match='expected a string'):
            PricingRules.parse(42)

    @pytest.mark.parametrize('entry', ['ab', ('Swap',), ('Swap', 'discounting', 'extra'), 7])
    def test_malformed_entries_rejected(self, entry):
        with pytest.raises(ValidationError, match=r'entries must be \(key, value\) pairs'):
            PricingRules.of([entry])

    def test_invalid_tokens_rejected(self):
        with pytest.raises(ValidationError, match='target must not be null'):
            PricingRules.of({None: 'discounting'})
        with pytest.raises(ValidationError, match='function group must be a string'):
            PricingRules.of({'Swap': 3})
        with pytest.raises(ValidationError, match='must not contain'):
            PricingRules.of({'Swap,Fra': 'discounting'})

    def test_composed_with_prefers_self(self):
        primary = PricingRules.of({'Swap': 'discounting'})
        fallback = PricingRules.of({'Swap': 'black', 'Fra': 'forward'})

        composed = primary.composed_with(fallback)

        assert composed.as_dict() == {'Fra': 'forward', 'Swap': 'discounting'}

    def test_composed_with_other_type_rejected(self):
        with pytest.raises(ValidationError, match='Cannot compose PricingRules with MarketDataRules'):
            PricingRules.EMPTY.composed_with(MarketDataRules.EMPTY)

    def test_is_immutable(self):
        rules = PricingRules.of({'Swap': 'discounting'})
        with pytest.raises(AttributeError):
            rules.entries = ()


class TestMarketDataRules:
    """Tests for MarketDataRules."""

    def test_mappings_lookup(self):
        rules = MarketDataRules.of({'Swap': 'USD-Discounting'})

        assert rules.mappings('Swap') == 'USD-Discounting'
        assert rules.mappings('Fra') is None
        assert len(rules) == 1

    def test_parse(self):
        rules = MarketDataRules.parse('Swap=USD-Discounting')
        assert rules == MarketDataRules.of({'Swap': 'USD-Discounting'})


class TestReportingRules:
    """Tests for ReportingRules."""

    def test_fixed_currency(self):
        rules = ReportingRules.fixed_currency('USD')

        assert rules.reporting_currency() == 'USD'
        assert rules.reporting_currency('Swap') == 'USD'
        assert str(rules) == 'USD'
        assert not rules.is_empty

    def test_empty_has_no_currency(self):
        assert ReportingRules.EMPTY.reporting_currency('Swap') is None

    @pytest.mark.parametrize('currency', ['usd', 'US', 'USDX', ''])
    def test_invalid_currency_rejected(self, currency):
        with pytest.raises(ValidationError, match='three letter upper-case code'):
            ReportingRules.fixed_currency(currency)

    @pytest.mark.parametrize('currency', ['USD\n', '\nUSD', 'USD '])
    def test_currency_with_surrounding_whitespace_rejected(self, currency):
        with pytest.raises(ValidationError, match='three letter upper-case code'):
            ReportingRules.fixed_currency(currency)

    def test_null_currency_rejected(self):
        with pytest.raises(ValidationError, match='currency must not be null'):
            ReportingRules.fixed_currency(None)

    def test_parse(self):
        assert ReportingRules.parse(' GBP ') == ReportingRules.fixed_currency('GBP')

    def test_parse_malformed(self):
        with pytest.raises(ParseError, match='three letter upper-case code'):
            ReportingRules.parse('pounds')

    def test_composed_with(self):
        usd = ReportingRules.fixed_currency('USD')
        eur = ReportingRules.fixed_currency('EUR')

        assert usd.composed_with(eur) == usd
        assert ReportingRules.EMPTY.composed_with(eur) == eur


class TestMarketDataConfig:
    """Tests for MarketDataConfig."""

    def test_kinds_accept_enum_or_text(self):
        config = MarketDataConfig.of({'USD-Discounting': MarketDataKind.CURVE_GROUP, 'EUR-Vols': 'surface'})

        assert config.get('USD-Discounting') is MarketDataKind.CURVE_GROUP
        assert config.get('EUR-Vols') is MarketDataKind.SURFACE
        assert config.get('missing') is None
        assert str(config) == 'EUR-Vols=surface,USD-Discounting=curve_group'

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError, match='kind must be one of'):
            MarketDataConfig.of({'USD-Discounting': 'curve'})

    def test_parse_unknown_kind_is_parse_error(self):
        with pytest.raises(ParseError, match='kind must be one of'):
            MarketDataConfig.parse('USD-Discounting=curve')

    def test_names_by_kind(self):
        config = MarketDataConfig.of(
            {'USD-Discounting': 'curve_group', 'EUR-Discounting': 'curve_group', 'EUR-Vols': 'surface'}
        )

        assert config.names(MarketDataKind.CURVE_GROUP) == ['EUR-Discounting', 'USD-Discounting']
        assert config.names('fx_matrix') == []

    def test_with_entry_returns_new_value(self):
        original = MarketDataConfig.EMPTY

        updated = original.with_entry('USD-Discounting', MarketDataKind.CURVE_GROUP)

        assert original.is_empty
        assert updated.get('USD-Discounting') is MarketDataKind.CURVE_GROUP

    def test_parse_round_trip(self):
        config = MarketDataConfig.of({'USD-Discounting': 'curve_group', 'FX': 'fx_matrix'})
        assert MarketDataConfig.parse(str(config)) == config

    def test_names_unknown_kind_rejected(self):
        with pytest.raises(ValidationError, match='kind must be one of'):
            MarketDataConfig.EMPTY.names('bogus')
