"""Calculation rules: the complete set of rules driving the calculation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..errors import ValidationError
from ..rules import MarketDataConfig, MarketDataRules, PricingRules, ReportingRules
from .meta import MetaBean, MetaProperty

if TYPE_CHECKING:
    from .builder import CalculationRulesBuilder


@dataclass(frozen=True, repr=False)
class CalculationRules:
    """The rules that define how the calculation engine performs calculations.

    Composition pattern: combines four independently built rule sets.

    - pricing: how each calculation is performed, e.g. model and function group
    - market_data_selection: which market data each calculation uses, e.g. the
      curve group that supplies curves
    - reporting: how results are reported, including the reporting currency
    - market_data_build: configuration for building non-observable market data
      such as curves or surfaces

    Instances are immutable and every field is always present. To change a
    value, go through ``to_builder()`` and build a new instance.
    """

    pricing: PricingRules
    market_data_selection: MarketDataRules
    reporting: ReportingRules
    market_data_build: MarketDataConfig

    def __post_init__(self) -> None:
        for prop in _META.meta_properties():
            value = getattr(self, prop.name)
            if value is None:
                raise ValidationError.not_null(prop.name)
            if not prop.accepts(value):
                raise ValidationError(
                    f'{prop.name} must be a {prop.property_type.__name__}',
                    field=prop.name,
                    details=f'got {type(value).__name__}',
                )

    @classmethod
    def of(
        cls,
        pricing: PricingRules,
        market_data_selection: MarketDataRules,
        reporting: ReportingRules,
        market_data_build: MarketDataConfig,
    ) -> CalculationRules:
        """Create calculation rules, validating that no value is missing."""
        return cls(pricing, market_data_selection, reporting, market_data_build)

    @classmethod
    def builder(cls) -> CalculationRulesBuilder:
        """Return a builder populated with each rule type's empty default."""
        from .builder import CalculationRulesBuilder

        return CalculationRulesBuilder()

    @classmethod
    def meta(cls) -> MetaBean:
        return _META

    @classmethod
    def property_names(cls) -> tuple[str, ...]:
        return _META.property_names()

    def get(self, name: str) -> Any:
        """Return a property value by name.

        Raises:
            UnknownPropertyError: If ``name`` is not a property
        """
        return _META.get(self, name)

    def to_builder(self) -> CalculationRulesBuilder:
        """Return a builder seeded with this instance's values."""
        from .builder import CalculationRulesBuilder

        return CalculationRulesBuilder(self)

    def to_dict(self) -> dict[str, Any]:
        """Property values keyed by name, in declaration order."""
        return _META.to_dict(self)

    def __repr__(self) -> str:
        return _META.render(self)

    __str__ = __repr__


_META = MetaBean(
    CalculationRules,
    [
        MetaProperty('pricing', PricingRules, 'The rules defining how calculations should be performed.'),
        MetaProperty(
            'market_data_selection',
            MarketDataRules,
            'The rules defining what market data should be used in each calculation.',
        ),
        MetaProperty('reporting', ReportingRules, 'The rules defining how calculation results should be reported.'),
        MetaProperty(
            'market_data_build',
            MarketDataConfig,
            'The configuration needed to build non-observable market data, e.g. curves or surfaces.',
        ),
    ],
    CalculationRules.builder,
)
