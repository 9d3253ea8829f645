"""Calculation rules validator."""

from __future__ import annotations

from ..logging import configure_logger
from ..rules import MarketDataKind
from .calculation_rules import CalculationRules


class CalculationRulesValidator:
    """Checks built calculation rules for legal but suspicious combinations.

    Findings are collected and logged, never raised.
    """

    def __init__(self):
        self.logger = configure_logger(__name__, structured=True)
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def validate(self, rules: CalculationRules) -> bool:
        """Validate calculation rules.

        Returns:
            True if valid (may have warnings), False if errors found
        """
        self.warnings.clear()
        self.errors.clear()

        if rules.pricing.is_empty:
            self.warnings.append('No pricing rules configured; no calculation can be priced')

        if rules.market_data_selection.is_empty:
            self.warnings.append('No market data rules configured')

        if rules.reporting.is_empty:
            self.warnings.append('No reporting currency configured; results use their natural currency')

        self._validate_pricing_coverage(rules)
        self._validate_market_data_references(rules)

        for warning in self.warnings:
            self.logger.warning(f'Calculation rules warning: {warning}')
        for error in self.errors:
            self.logger.error(f'Calculation rules error: {error}')

        return len(self.errors) == 0

    def _validate_pricing_coverage(self, rules: CalculationRules) -> None:
        """Every priced target should also know where its market data comes from."""
        if rules.market_data_selection.is_empty:
            return
        for target, _ in rules.pricing.entries:
            if rules.market_data_selection.mappings(target) is None:
                self.warnings.append(f'Pricing target {target!r} has no market data rule')

    def _validate_market_data_references(self, rules: CalculationRules) -> None:
        """Market data rules must name curve groups the build configuration knows about."""
        config = rules.market_data_build
        if config.is_empty:
            return
        curve_groups = set(config.names(MarketDataKind.CURVE_GROUP))
        for target, mappings in rules.market_data_selection.entries:
            if mappings not in curve_groups:
                self.errors.append(
                    f'Market data rule for {target!r} references {mappings!r}, '
                    'which is not a configured curve group'
                )
