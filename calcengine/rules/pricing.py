"""Pricing rules: which function group prices each target type."""

from __future__ import annotations

from .keyed import KeyedRules


class PricingRules(KeyedRules):
    """Maps a target type name (``Swap``, ``Fra``) to a pricing function group.

    Text form: ``Fra=discounting,Swap=discounting``.
    """

    KEY_NAME = 'target'
    VALUE_NAME = 'function group'

    def function_group(self, target: str) -> str | None:
        """Return the function group configured for ``target``, if any."""
        return self.lookup(target)


PricingRules.EMPTY = PricingRules()
