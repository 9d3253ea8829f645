"""Builder for CalculationRules with a fluent API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..errors import ValidationError
from ..rules import MarketDataConfig, MarketDataRules, PricingRules, ReportingRules
from .calculation_rules import CalculationRules
from .meta import MetaProperty

logger = logging.getLogger(__name__)


class CalculationRulesBuilder:
    """Fluent, mutable builder for CalculationRules.

    A new builder starts from each rule type's ``EMPTY`` value; a builder
    created from existing rules starts from their values instead. Slots can
    be replaced but never cleared, so ``build()`` always has four values.
    ``build()`` does not consume the builder and may be called repeatedly.

    The builder is not thread-safe.

    Example:
        rules = (CalculationRules.builder()
            .with_pricing(PricingRules.of({'Swap': 'discounting'}))
            .with_reporting(ReportingRules.fixed_currency('USD'))
            .build())
    """

    def __init__(self, rules: CalculationRules | None = None):
        if rules is None:
            self._values: dict[str, Any] = {
                'pricing': PricingRules.EMPTY,
                'market_data_selection': MarketDataRules.EMPTY,
                'reporting': ReportingRules.EMPTY,
                'market_data_build': MarketDataConfig.EMPTY,
            }
        else:
            self._values = rules.to_dict()

    # Typed setters
    def with_pricing(self, pricing: PricingRules) -> CalculationRulesBuilder:
        """Set the pricing rules."""
        return self.set('pricing', pricing)

    def with_market_data_selection(self, market_data_selection: MarketDataRules) -> CalculationRulesBuilder:
        """Set the rules selecting market data for each calculation."""
        return self.set('market_data_selection', market_data_selection)

    def with_reporting(self, reporting: ReportingRules) -> CalculationRulesBuilder:
        """Set the reporting rules."""
        return self.set('reporting', reporting)

    def with_market_data_build(self, market_data_build: MarketDataConfig) -> CalculationRulesBuilder:
        """Set the configuration for building non-observable market data."""
        return self.set('market_data_build', market_data_build)

    # Name-based access
    def get(self, name: str | MetaProperty) -> Any:
        """Return the current value of a property.

        Raises:
            UnknownPropertyError: If ``name`` is not a property name or
                one of this bean's MetaProperty entries
        """
        return self._values[CalculationRules.meta().meta_property(name).name]

    def set(self, name: str | MetaProperty, value: Any) -> CalculationRulesBuilder:
        """Replace the value of a property.

        Raises:
            UnknownPropertyError: If ``name`` is not a property name or
                one of this bean's MetaProperty entries
            ValidationError: If ``value`` is None or of the wrong type; the
                current value is kept
        """
        prop = CalculationRules.meta().meta_property(name)
        if value is None:
            raise ValidationError.not_null(prop.name)
        if not prop.accepts(value):
            raise ValidationError(
                f'{prop.name} must be a {prop.property_type.__name__}',
                field=prop.name,
                details=f'got {type(value).__name__}',
            )
        self._values[prop.name] = value
        return self

    def set_string(self, name: str | MetaProperty, text: str) -> CalculationRulesBuilder:
        """Parse ``text`` into the property's type and set it.

        Raises:
            UnknownPropertyError: If ``name`` is not a property name or
                one of this bean's MetaProperty entries
            ParseError: If ``text`` is malformed for the property's type
        """
        prop = CalculationRules.meta().meta_property(name)
        return self.set(prop.name, prop.parse(text))

    def set_all(self, values: Mapping[str, Any]) -> CalculationRulesBuilder:
        """Set several properties in the mapping's iteration order.

        Not transactional: the first failing entry raises and the entries
        before it stay applied.
        """
        for name, value in values.items():
            self.set(name, value)
        logger.debug('Applied %d calculation rules properties', len(values), extra={'properties': list(values)})
        return self

    def build(self) -> CalculationRules:
        """Build calculation rules from the current values."""
        return CalculationRules(**self._values)

    def __repr__(self) -> str:
        body = ', '.join(
            f'{prop.name}={prop.render(self._values[prop.name])}' for prop in CalculationRules.meta().meta_properties()
        )
        return f'CalculationRules.Builder{{{body}}}'

    __str__ = __repr__
