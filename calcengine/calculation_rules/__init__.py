"""Calculation rules aggregate.

Bundles pricing, market data selection, reporting and market data build
rules into one immutable, validated value, with a builder and name-based
property access.
"""

from .builder import CalculationRulesBuilder
from .calculation_rules import CalculationRules
from .meta import MetaBean, MetaProperty
from .validator import CalculationRulesValidator

__all__ = [
    'CalculationRules',
    'CalculationRulesBuilder',
    'CalculationRulesValidator',
    'MetaBean',
    'MetaProperty',
]
